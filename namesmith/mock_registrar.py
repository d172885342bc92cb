"""Deterministic, network-free stand-in for the registrar.

Used when no registrar is configured or when the registrar integration
breaks mid-batch. Same input gives the same output in every process: the
only entropy is the sum of the domain's character codes.
"""

import re
from collections.abc import Iterable

from namesmith.results import DomainCheckResult

TAKEN_PREFIX = re.compile(r"^(get|my|the|go)[a-z]+$")
FOUR_LETTERS = re.compile(r"^[a-z]{4}$")

AVAILABILITY_CUTOFF = 30
MIN_PREMIUM_PRICE = 500
PREMIUM_PRICE_SPAN = 9500


def domain_hash(domain: str) -> int:
    return sum(ord(c) for c in domain)


def split_domain(domain: str) -> tuple[str, str]:
    """Split into (label, tld) at the last dot; tld keeps its leading dot."""
    label, dot, tld = domain.rpartition(".")
    if not dot:
        return domain, ""
    return label, f".{tld}"


def is_likely_taken(label: str, tld: str) -> bool:
    return (
        len(label) <= 4
        or (tld == ".com" and len(label) <= 8)
        or TAKEN_PREFIX.match(label) is not None
    )


def is_likely_premium(label: str) -> bool:
    return len(label) <= 3 or FOUR_LETTERS.match(label) is not None


def synthesize_result(domain: str) -> DomainCheckResult:
    """Produce a plausible availability verdict for one domain."""
    label, tld = split_domain(domain)
    hashed = domain_hash(domain)

    available = not is_likely_taken(label, tld) and hashed % 100 > AVAILABILITY_CUTOFF
    premium = available and is_likely_premium(label)

    return DomainCheckResult(
        domain=domain,
        available=available,
        premium=premium,
        price=float(MIN_PREMIUM_PRICE + hashed % PREMIUM_PRICE_SPAN) if premium else None,
        source="mock",
    )


def synthesize_results(domains: Iterable[str]) -> list[DomainCheckResult]:
    return [synthesize_result(d) for d in domains]
