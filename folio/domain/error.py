"""Domain layer errors.

Every service operation either returns a result or raises exactly one of
these. Mapping them to transport responses is the caller's job.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when required input is missing or malformed."""

    pass


class InvalidFieldError(InvalidArgumentError):
    """Raised when a model field fails validation."""

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(f"Invalid field '{field}': {reason}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyExistsError(DomainError):
    """Raised when creating a resource whose id is already stored."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class AccessDeniedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )
