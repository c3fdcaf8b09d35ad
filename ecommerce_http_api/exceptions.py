# ecommerce_http_api/exceptions.py


class DomainError(Exception):
    """Base class for all domain-level exceptions."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ResourceNotFoundError(DomainError):
    """Raised when a referenced user, product or order does not exist."""

    def __init__(self, resource_name: str, field_name: str, field_value: object):
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(
            f"{resource_name} not found with {field_name}: '{field_value}'"
        )


class InactiveResourceError(DomainError):
    """Raised when a mutation is attempted on a soft-deleted resource."""

    def __init__(self, resource_name: str, resource_id: object):
        self.resource_name = resource_name
        self.resource_id = resource_id
        super().__init__(
            f"Cannot perform operation on inactive {resource_name} "
            f"with id: '{resource_id}'"
        )
