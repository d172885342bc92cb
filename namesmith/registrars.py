"""Registrar adapters: one HTTP GET per domain, answered as a LookupResult."""

import json
import logging
import xml.etree.ElementTree as ET
from typing import Protocol, Self

import httpx
from dynaconf.base import LazySettings

from namesmith.config import settings
from namesmith.exceptions import RateLimitedError, RegistrarError, RegistrarUnavailableError
from namesmith.results import LookupResult

logger = logging.getLogger(__name__)

GODADDY_PRICE_SCALE = 1_000_000
NAMECHEAP_XML_NS = "{http://api.namecheap.com/xml.response}"


class RegistrarAdapter(Protocol):
    """Anything that can answer availability for a single domain."""

    async def lookup(self, domain: str) -> LookupResult: ...


def _raise_for_status(response: httpx.Response, registrar: str) -> None:
    """Map registrar HTTP status codes onto the error taxonomy."""
    status = response.status_code
    if status == 429:
        raise RateLimitedError(f"{registrar} rate limited the request (HTTP 429)")
    if status in (401, 403):
        raise RegistrarUnavailableError(f"{registrar} rejected the credentials (HTTP {status})")
    if not response.is_success:
        raise RegistrarError(f"{registrar} API error: HTTP {status}")


class _HttpRegistrar:
    """Owns an httpx.AsyncClient unless one is handed in."""

    name = "registrar"

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class GoDaddyRegistrar(_HttpRegistrar):
    """JSON availability endpoint authenticated with an sso-key header.

    Expected body: ``{"available": bool, "price": int}`` with the price in
    micro-units (``price_scale`` per currency unit).
    """

    name = "GoDaddy"

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        url: str,
        price_scale: int = GODADDY_PRICE_SCALE,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(client)
        self.url = url
        self.price_scale = price_scale
        self._headers = {
            "Authorization": f"sso-key {api_key}:{api_secret}",
            "Accept": "application/json",
        }

    async def lookup(self, domain: str) -> LookupResult:
        response = await self._client.get(
            self.url, params={"domain": domain}, headers=self._headers
        )
        _raise_for_status(response, self.name)
        return self._parse(response)

    def _parse(self, response: httpx.Response) -> LookupResult:
        try:
            data = response.json()
        except json.JSONDecodeError as e:
            raise RegistrarUnavailableError(f"{self.name} returned malformed JSON") from e

        if not isinstance(data, dict) or not isinstance(data.get("available"), bool):
            raise RegistrarUnavailableError(f"{self.name} response is missing 'available'")

        price = data.get("price")
        if price is not None and not isinstance(price, (int, float)):
            raise RegistrarUnavailableError(f"{self.name} returned a non-numeric price")

        return LookupResult(
            available=data["available"],
            price=price / self.price_scale if price is not None else None,
        )


class NamecheapRegistrar(_HttpRegistrar):
    """XML ``namecheap.domains.check`` command, one domain per request.

    Premium prices come back in dollars already.
    """

    name = "Namecheap"

    def __init__(
        self,
        api_user: str,
        api_key: str,
        username: str,
        client_ip: str,
        url: str,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(client)
        self.url = url
        self._params = {
            "ApiUser": api_user,
            "ApiKey": api_key,
            "UserName": username,
            "ClientIp": client_ip,
            "Command": "namecheap.domains.check",
        }

    async def lookup(self, domain: str) -> LookupResult:
        response = await self._client.get(
            self.url, params={**self._params, "DomainList": domain}
        )
        _raise_for_status(response, self.name)
        return self._parse(response.text, domain)

    def _parse(self, xml_text: str, domain: str) -> LookupResult:
        try:
            root = ET.fromstring(xml_text)
        except ET.ParseError as e:
            raise RegistrarUnavailableError(f"{self.name} returned malformed XML") from e

        error = _find(root, "Error")
        if error is not None:
            raise RegistrarUnavailableError(
                f"{self.name} API error: {(error.text or '').strip() or 'unknown'}"
            )

        for node in _iter(root, "DomainCheckResult"):
            if node.get("Domain", "").lower() != domain.lower():
                continue
            price = node.get("PremiumRegistrationPrice")
            try:
                parsed_price = float(price) if price else None
            except ValueError as e:
                raise RegistrarUnavailableError(
                    f"{self.name} returned a non-numeric price: {price!r}"
                ) from e
            return LookupResult(
                available=node.get("Available", "").lower() == "true",
                price=parsed_price or None,
            )

        raise RegistrarUnavailableError(f"{self.name} response has no result for {domain}")


def _find(root: ET.Element, tag: str) -> ET.Element | None:
    """Find a descendant with or without the Namecheap namespace."""
    found = root.find(f".//{NAMECHEAP_XML_NS}{tag}")
    return found if found is not None else root.find(f".//{tag}")


def _iter(root: ET.Element, tag: str) -> list[ET.Element]:
    return root.findall(f".//{NAMECHEAP_XML_NS}{tag}") or root.findall(f".//{tag}")


def create_registrar(
    conf: LazySettings = settings,
    client: httpx.AsyncClient | None = None,
) -> GoDaddyRegistrar | NamecheapRegistrar | None:
    """Build the configured registrar adapter.

    Returns None when the mock registrar is selected or any credential of the
    selected registrar is missing; callers fall back to synthetic results.
    """
    match conf.registrar:
        case "godaddy":
            gd = conf.godaddy
            if not (gd.api_key and gd.api_secret):
                logger.info("GoDaddy credentials not configured")
                return None
            return GoDaddyRegistrar(
                api_key=gd.api_key,
                api_secret=gd.api_secret,
                url=gd.url,
                price_scale=int(gd.price_scale),
                client=client,
            )
        case "namecheap":
            nc = conf.namecheap
            if not (nc.api_user and nc.api_key and nc.username and nc.client_ip):
                logger.info("Namecheap credentials not configured")
                return None
            return NamecheapRegistrar(
                api_user=nc.api_user,
                api_key=nc.api_key,
                username=nc.username,
                client_ip=nc.client_ip,
                url=nc.url,
                client=client,
            )
        case _:
            return None
