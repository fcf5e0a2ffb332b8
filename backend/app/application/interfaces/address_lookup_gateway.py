"""Abstract interface (port) for resolving a postal code to an address."""

from abc import ABC, abstractmethod

from app.domain.entities import Address


class AddressLookupGateway(ABC):
    """Port for postal-code lookups — implemented in the infrastructure layer."""

    @abstractmethod
    async def lookup(self, postal_code: str) -> Address:
        """Resolve an 8-digit postal code.

        The caller guarantees the postal code has 8 characters; it is not
        re-validated here.

        Raises:
            AddressNotFoundError: The service knows no address for the code.
            AddressLookupError: Any other failure (network, status, payload).
        """
        ...
