# portfolio\core\__init__.py
"""
Core Domain Layer.

Entities, Ports and Use Cases of the portfolio. Nothing in here imports
FastAPI, httpx or any other infrastructure library; the content API is
reached only through the Ports.
"""
