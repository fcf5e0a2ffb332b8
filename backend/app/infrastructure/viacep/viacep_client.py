"""ViaCEP API client — implements the AddressLookupGateway interface.

Resolves a Brazilian postal code (CEP) with a single
``GET {base_url}/{cep}/{format}`` request. The service answers unknown codes
with ``200 {"erro": true}`` instead of an HTTP error, which is reported as
AddressNotFoundError.
"""

import logging

import httpx

from app.application.interfaces.address_lookup_gateway import AddressLookupGateway
from app.domain.entities import Address
from app.domain.exceptions import AddressLookupError, AddressNotFoundError

logger = logging.getLogger(__name__)

# ViaCEP document key → Address field
_FIELD_MAP: dict[str, str] = {
    "cep": "postal_code",
    "uf": "state",
    "localidade": "city",
    "bairro": "district",
    "logradouro": "street",
}


class ViaCepAddressGateway(AddressLookupGateway):
    """Infrastructure adapter — connects to the ViaCEP web service.

    No caching and no retries: every call issues one request, and the
    timeout is whatever the httpx client is configured with.
    """

    def __init__(
        self,
        base_url: str = "https://viacep.com.br/ws",
        response_format: str = "json",
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._response_format = response_format
        self._http_client = http_client

    def _build_url(self, postal_code: str) -> str:
        return f"{self._base_url}/{postal_code}/{self._response_format}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient()

    async def lookup(self, postal_code: str) -> Address:
        url = self._build_url(postal_code)
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.get(url)
            except httpx.HTTPError as e:
                raise AddressLookupError(postal_code, f"{type(e).__name__}: {e}") from e

            if response.status_code != 200:
                raise AddressLookupError(
                    postal_code, f"unexpected status {response.status_code}"
                )

            try:
                data = response.json()
            except ValueError as e:
                raise AddressLookupError(postal_code, "response is not valid JSON") from e

            return self._parse_address(postal_code, data)

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_address(postal_code: str, data: object) -> Address:
        """Map the ViaCEP document onto the Address value object."""
        if not isinstance(data, dict):
            raise AddressLookupError(postal_code, "response is not a JSON object")

        if str(data.get("erro", "")).lower() == "true":
            raise AddressNotFoundError(postal_code)

        missing = [key for key in _FIELD_MAP if key not in data]
        if missing:
            raise AddressLookupError(
                postal_code, f"response is missing {', '.join(missing)}"
            )

        values = {field: str(data[key] or "") for key, field in _FIELD_MAP.items()}
        # ViaCEP formats the code as 00000-000; the record keeps 8 digits.
        values["postal_code"] = values["postal_code"].replace("-", "")

        logger.debug("ViaCEP resolved %s to %s/%s", postal_code, values["city"], values["state"])
        return Address(**values)
