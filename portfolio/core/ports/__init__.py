# portfolio\core\ports\__init__.py
"""
Core Ports (Interfaces).

Protocols the Infrastructure Adapters implement, so the use cases can read
content without knowing it arrives over HTTP.
"""

from .content_source import IContentSource

__all__ = [
    "IContentSource",
]
