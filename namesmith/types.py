"""Shared typed aliases for check results."""

from typing import Literal, NotRequired, TypedDict

ResultSource = Literal["registrar", "mock"]


class DomainCheckPayload(TypedDict):
    domain: str
    available: bool
    premium: bool
    price: NotRequired[float]
    errorMessage: NotRequired[str]
