# portfolio/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ProjectNotFoundError(DomainError):
    """Raised when no published project matches the requested slug."""
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Project '{slug}' was not found or is not published.")

class PostNotFoundError(DomainError):
    """Raised when no published insight matches the requested slug."""
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Insight '{slug}' was not found or is not published.")
