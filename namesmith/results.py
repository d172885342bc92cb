"""Check result types shared by the dispatcher, the adapters and the fallback."""

from dataclasses import dataclass

from namesmith.types import DomainCheckPayload, ResultSource

PREMIUM_THRESHOLD = 50.0


@dataclass
class LookupResult:
    """One registrar answer, price already in standard currency units."""

    available: bool
    price: float | None = None


@dataclass
class DomainCheckResult:
    domain: str
    available: bool
    premium: bool = False
    price: float | None = None
    error_message: str | None = None
    source: ResultSource = "registrar"

    def to_dict(self) -> DomainCheckPayload:
        """Return the wire shape, omitting absent optional keys."""
        payload: DomainCheckPayload = {
            "domain": self.domain,
            "available": self.available,
            "premium": self.premium,
        }
        if self.price is not None:
            payload["price"] = self.price
        if self.error_message is not None:
            payload["errorMessage"] = self.error_message
        return payload


def from_lookup(
    domain: str,
    lookup: LookupResult,
    premium_threshold: float = PREMIUM_THRESHOLD,
) -> DomainCheckResult:
    """Derive premium status from the price; only premium domains keep a price."""
    premium = lookup.available and lookup.price is not None and lookup.price > premium_threshold
    return DomainCheckResult(
        domain=domain,
        available=lookup.available,
        premium=premium,
        price=lookup.price if premium else None,
    )


def failed(domain: str, message: str) -> DomainCheckResult:
    """A lookup that failed for good; availability is unknown, not 'taken'."""
    return DomainCheckResult(domain=domain, available=False, error_message=message)
