"""Tests for result shaping and the wire payload."""

from namesmith.results import DomainCheckResult, LookupResult, failed, from_lookup


def test_to_dict_omits_absent_optionals():
    assert DomainCheckResult("petly.io", available=True).to_dict() == {
        "domain": "petly.io",
        "available": True,
        "premium": False,
    }


def test_to_dict_includes_price_and_error():
    premium = DomainCheckResult("petly.io", available=True, premium=True, price=120.0)
    assert premium.to_dict()["price"] == 120.0
    assert failed("petly.dev", "Timed out after 5s").to_dict() == {
        "domain": "petly.dev",
        "available": False,
        "premium": False,
        "errorMessage": "Timed out after 5s",
    }


def test_from_lookup_threshold():
    assert from_lookup("a.io", LookupResult(True, 50.01)).premium is True
    assert from_lookup("a.io", LookupResult(True, 50.0)).premium is False
    assert from_lookup("a.io", LookupResult(True, 80.0), premium_threshold=100).premium is False


def test_from_lookup_drops_price_unless_premium():
    assert from_lookup("a.io", LookupResult(True, 9.99)).price is None
    assert from_lookup("a.io", LookupResult(False, 900.0)).price is None
    assert from_lookup("a.io", LookupResult(True)).price is None
