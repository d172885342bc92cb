"""Registrar error taxonomy used by the adapters and the dispatcher."""


class RegistrarError(Exception):
    """A single lookup failed. Retried with backoff by the dispatcher."""


class RateLimitedError(RegistrarError):
    """The registrar answered HTTP 429."""


class RegistrarUnavailableError(RegistrarError):
    """The registrar integration itself is broken for this batch.

    Raised for rejected credentials or a response body that doesn't match the
    expected shape. Trips the dispatcher's breaker instead of being retried.
    """
