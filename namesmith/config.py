"""Configuration for namesmith.

Values live in ``namesmith/configs/*.toml`` and can be overridden from the
environment with the ``NAMESMITH_`` prefix, e.g.::

    NAMESMITH_GODADDY__API_KEY=... NAMESMITH_GODADDY__API_SECRET=... namesmith check foo.io

``NAMESMITH_ENV`` switches between the ``default`` and ``testing`` sections.
"""

from dataclasses import dataclass
from pathlib import Path

from dynaconf import Dynaconf, Validator
from dynaconf.base import LazySettings

CONFIG_DIR = Path(__file__).parent / "configs"

_validators = [
    Validator("registrar", is_in=["godaddy", "namecheap", "mock"], must_exist=True),
    Validator(
        "dispatch.max_concurrent_requests",
        "dispatch.max_retries",
        "dispatch.batch_cap",
        is_type_of=int,
        gte=0,
        must_exist=True,
    ),
    Validator("dispatch.max_concurrent_requests", gte=1),
    Validator("dispatch.request_timeout_sec", "dispatch.backoff_base_sec", gte=0, must_exist=True),
    Validator("pricing.premium_threshold", gte=0, must_exist=True),
    Validator("godaddy.price_scale", is_type_of=int, gte=1),
    Validator("generator.max_results", is_type_of=int, gte=0),
    Validator("generator.tlds", "generator.prefixes", "generator.suffixes", is_type_of=list),
    Validator("logging.format", is_in=["pretty", "plain"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
]

settings = Dynaconf(
    root_path=str(CONFIG_DIR),
    envvar_prefix="NAMESMITH",
    settings_files=["default.toml", "testing.toml"],
    environments=True,
    env_switcher="NAMESMITH_ENV",
    merge_enabled=True,
    validators=_validators,
)


@dataclass(frozen=True)
class DispatchPolicy:
    """Limits shared by every registrar adapter."""

    max_concurrent_requests: int = 5
    request_timeout: float = 5.0
    max_retries: int = 2
    backoff_base: float = 0.3
    premium_threshold: float = 50.0
    batch_cap: int = 8

    @classmethod
    def from_settings(cls, conf: LazySettings = settings) -> "DispatchPolicy":
        return cls(
            max_concurrent_requests=int(conf.dispatch.max_concurrent_requests),
            request_timeout=float(conf.dispatch.request_timeout_sec),
            max_retries=int(conf.dispatch.max_retries),
            backoff_base=float(conf.dispatch.backoff_base_sec),
            premium_threshold=float(conf.pricing.premium_threshold),
            batch_cap=int(conf.dispatch.batch_cap),
        )

    def backoff_delay(self, attempt: int) -> float:
        """Seconds to wait after failed attempt number ``attempt`` (0-based)."""
        return self.backoff_base * 2**attempt
