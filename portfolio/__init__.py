# portfolio\__init__.py
"""
Portfolio Site - server-rendered personal portfolio.

Public pages (home, project listing, project case studies) are composed from
an external content API; the admin area is a static sign-in flow in front of
a read-only dashboard. Laid out as Ports & Adapters.
"""

__version__ = "1.0.0"
