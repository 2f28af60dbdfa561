"""Domain errors for the catalog.

Every error carries a stable ``code`` and the HTTP status the API layer
answers with. None of them are retried internally.
"""


class CatalogError(Exception):
    """Base class for all catalog domain errors."""

    code = "catalog_error"
    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFailedError(CatalogError):
    """Raised when input is malformed or a required field is missing."""

    code = "validation_failed"
    status_code = 422

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None) -> None:
        self.errors = errors or {}
        super().__init__(message)


class UnauthorizedError(CatalogError):
    """Raised when the caller's role is insufficient for the operation."""

    code = "unauthorized"
    status_code = 403


class AccessDeniedError(UnauthorizedError):
    """Raised when a single collection is not readable by the caller."""

    code = "access_denied"


class NotFoundError(CatalogError):
    """Raised when a referenced record does not exist."""

    code = "not_found"
    status_code = 404


class ClientNotFoundError(NotFoundError):
    """Raised when a client cannot be found."""

    def __init__(self, client_id: str) -> None:
        self.client_id = client_id
        super().__init__(f"Client '{client_id}' not found")


class CollectionNotFoundError(NotFoundError):
    """Raised when a product collection cannot be found."""

    def __init__(self, collection_id: str) -> None:
        self.collection_id = collection_id
        super().__init__(f"Collection '{collection_id}' not found")


class ConflictError(CatalogError):
    """Raised on unique-code collisions or deletes blocked by dependents."""

    code = "conflict"
    status_code = 409


class ExclusivityViolationError(CatalogError):
    """Raised when an exclusive collection has no owning client."""

    code = "exclusivity_violation"
    status_code = 422

    def __init__(self, collection_type: str) -> None:
        self.collection_type = collection_type
        super().__init__(f"{collection_type} collections must be associated with a client")


class EmptyRelationshipSetError(CatalogError):
    """Raised when a client's regions or departments would become empty."""

    code = "empty_relationship_set"
    status_code = 422
    field = ""

    def __init__(self) -> None:
        super().__init__(f"At least one {self.field} must be specified")


class EmptyRegionSetError(EmptyRelationshipSetError):
    field = "region"


class EmptyDepartmentSetError(EmptyRelationshipSetError):
    field = "department"
