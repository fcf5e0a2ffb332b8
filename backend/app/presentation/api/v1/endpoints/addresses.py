"""Address lookup endpoint — resolves a postal code through the lookup gateway."""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.application.interfaces import AddressLookupGateway
from app.application.schemas.client_record import AddressResponse
from app.domain.exceptions import AddressLookupError, AddressNotFoundError
from app.infrastructure.dependencies import get_address_gateway

router = APIRouter(prefix="/addresses", tags=["Addresses"])


@router.get("/{postal_code}", response_model=AddressResponse)
async def lookup_address(
    postal_code: str = Path(..., pattern=r"^\d{8}$", examples=["01001000"]),
    gateway: AddressLookupGateway = Depends(get_address_gateway),
) -> AddressResponse:
    """Resolve an 8-digit postal code into an address."""
    try:
        address = await gateway.lookup(postal_code)
    except AddressNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AddressLookupError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    return AddressResponse.model_validate(address, from_attributes=True)
