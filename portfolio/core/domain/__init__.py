# portfolio\core\domain\__init__.py
"""
Domain Entities and Value Objects.

Read-only records mirrored from the content API (Project, Profile, ...)
and the page models the use cases hand to the templates.
"""
