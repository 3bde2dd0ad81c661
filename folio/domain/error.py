"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class ImmutablePostError(NotFoundError):
    """Raised when a mutation targets a post that only exists on disk."""

    def __init__(self, slug: str):
        super().__init__(
            "post",
            slug,
            f"Post cannot be modified: {slug} (file-backed posts must be changed on disk)",
        )


class ConflictError(DomainError):
    """Raised when a write collides with a unique key."""

    def __init__(self, resource: str, field: str, value: str):
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"A {resource} with this {field} already exists: {value}")


class AuthenticationRequiredError(DomainError):
    """Raised when anonymous callers ask for content only admins may see."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
