"""Bounded-concurrency availability checks against a registrar.

A fixed number of worker coroutines pull the next unstarted index from a
shared cursor and write into a pre-sized result buffer, so results come back
in input order whatever order the lookups finish in. Any failure that means
the registrar integration itself is broken trips a breaker: workers stop
claiming domains, lookups waiting to retry give up, and every unresolved
slot is filled by the synthetic fallback.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence

import httpx

from namesmith.config import DispatchPolicy
from namesmith.exceptions import RateLimitedError, RegistrarError, RegistrarUnavailableError
from namesmith.mock_registrar import synthesize_result, synthesize_results
from namesmith.registrars import RegistrarAdapter, create_registrar
from namesmith.results import DomainCheckResult, failed, from_lookup

logger = logging.getLogger(__name__)


class _BreakerTripped(Exception):
    """Internal signal that the rest of the batch must use the fallback."""


async def _lookup_with_retry(
    domain: str,
    registrar: RegistrarAdapter,
    policy: DispatchPolicy,
    stopped: Callable[[], bool] = lambda: False,
) -> DomainCheckResult | None:
    """Look up one domain, retrying rate limits and transport errors.

    Timeouts are final for the domain. Retries are counted per domain: at
    most ``policy.max_retries`` extra attempts after the first.

    Returns None without another attempt once ``stopped()`` is true, which
    leaves the domain unresolved for the fallback.
    """
    attempt = 0
    while True:
        if attempt and stopped():
            logger.debug("Dropping retry of %s, registrar already abandoned", domain)
            return None
        try:
            lookup = await asyncio.wait_for(registrar.lookup(domain), policy.request_timeout)
            return from_lookup(domain, lookup, policy.premium_threshold)
        except (TimeoutError, httpx.TimeoutException):
            logger.warning("Lookup for %s timed out after %.1fs", domain, policy.request_timeout)
            return failed(domain, f"Timed out after {policy.request_timeout:g}s")
        except RegistrarUnavailableError as e:
            raise _BreakerTripped(str(e)) from e
        except RateLimitedError as e:
            reason = str(e) or "Rate limited"
        except RegistrarError as e:
            reason = str(e) or type(e).__name__
        except httpx.TransportError as e:
            reason = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
        except Exception as e:
            raise _BreakerTripped(f"{type(e).__name__}: {e}") from e

        if attempt >= policy.max_retries:
            logger.warning("Giving up on %s after %d attempts: %s", domain, attempt + 1, reason)
            return failed(domain, f"{reason} (gave up after {attempt + 1} attempts)")

        delay = policy.backoff_delay(attempt)
        logger.debug("Retrying %s in %.2fs (%s)", domain, delay, reason)
        await asyncio.sleep(delay)
        attempt += 1


async def _dispatch(
    domains: Sequence[str],
    registrar: RegistrarAdapter,
    policy: DispatchPolicy,
    on_result: Callable[[DomainCheckResult], None] | None,
) -> list[DomainCheckResult]:
    results: list[DomainCheckResult | None] = [None] * len(domains)
    cursor = 0
    tripped = False

    async def _worker() -> None:
        nonlocal cursor, tripped
        while not tripped and cursor < len(domains):
            # No await between the check and the increment, so the loop
            # never hands the same index to two workers.
            index = cursor
            cursor += 1
            try:
                result = await _lookup_with_retry(
                    domains[index], registrar, policy, stopped=lambda: tripped
                )
            except _BreakerTripped as e:
                if not tripped:
                    logger.warning(
                        "Registrar failed for the whole batch, using synthetic results: %s", e
                    )
                tripped = True
                return
            if result is None:
                return
            results[index] = result
            if on_result is not None:
                on_result(result)

    worker_count = min(policy.max_concurrent_requests, len(domains))
    await asyncio.gather(*(_worker() for _ in range(worker_count)))

    for index, result in enumerate(results):
        if result is None:
            result = synthesize_result(domains[index])
            results[index] = result
            if on_result is not None:
                on_result(result)

    return [r for r in results if r is not None]


def _fallback(
    domains: Sequence[str],
    on_result: Callable[[DomainCheckResult], None] | None,
) -> list[DomainCheckResult]:
    results = synthesize_results(domains)
    if on_result is not None:
        for result in results:
            on_result(result)
    return results


async def check_availability(
    domains: Sequence[str],
    *,
    registrar: RegistrarAdapter | None = None,
    policy: DispatchPolicy | None = None,
    on_result: Callable[[DomainCheckResult], None] | None = None,
) -> list[DomainCheckResult]:
    """Check a batch of domains, one result per input domain, in input order.

    Never raises: per-domain failures become ``error_message`` on that
    result, and a broken registrar integration degrades to synthetic results
    for whatever is still unresolved.

    Args:
        domains: Full domain names (e.g. ["petly.io", "petly.dev"]). Callers
            should cap the batch size; see ``DispatchPolicy.batch_cap``.
        registrar: Adapter to query. Defaults to the configured registrar,
            or the synthetic fallback when none is configured.
        policy: Concurrency, timeout and retry limits. Defaults to the
            ``dispatch`` settings.
        on_result: Optional callback invoked as each result is settled.

    Returns:
        A list of DomainCheckResult objects with ``result[i].domain == domains[i]``.
    """
    domains = list(domains)
    if not domains:
        return []
    if policy is None:
        try:
            policy = DispatchPolicy.from_settings()
        except Exception:
            logger.exception("Invalid dispatch settings, using built-in limits")
            policy = DispatchPolicy()

    owned = None
    if registrar is None:
        try:
            owned = registrar = create_registrar()
        except Exception:
            logger.exception("Could not build the registrar adapter")
            registrar = None

    if registrar is None:
        logger.info("No registrar configured, using synthetic results for %d domains", len(domains))
        return _fallback(domains, on_result)

    try:
        return await _dispatch(domains, registrar, policy, on_result)
    except Exception:
        logger.exception("Availability dispatch failed, using synthetic results")
        return _fallback(domains, None)
    finally:
        if owned is not None:
            try:
                await owned.aclose()
            except httpx.HTTPError:
                logger.warning("Failed to close the registrar client", exc_info=True)
