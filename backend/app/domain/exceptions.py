"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class AddressLookupError(Exception):
    """Raised when a postal code could not be resolved to an address.

    Covers transport failures, unexpected status codes and malformed
    responses from the lookup service.
    """

    def __init__(self, postal_code: str, message: str):
        self.postal_code = postal_code
        self.message = message
        super().__init__(f"Address lookup for '{postal_code}' failed: {message}")


class AddressNotFoundError(AddressLookupError):
    """The lookup service answered, but knows no address for the postal code."""

    def __init__(self, postal_code: str):
        super().__init__(postal_code, "postal code not found")
