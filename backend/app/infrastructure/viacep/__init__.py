"""ViaCEP infrastructure package."""

from .viacep_client import ViaCepAddressGateway

__all__ = ["ViaCepAddressGateway"]
