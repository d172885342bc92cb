"""Project idea to checked domain suggestions, the flow the chat agent runs."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from namesmith.config import DispatchPolicy
from namesmith.dispatcher import check_availability
from namesmith.generator import DEFAULT_LIBRARY, WordLibrary, extract_keywords, generate_candidates
from namesmith.registrars import RegistrarAdapter
from namesmith.results import DomainCheckResult

logger = logging.getLogger(__name__)


@dataclass
class Suggestion:
    keywords: list[str]
    candidates: list[str]
    results: list[DomainCheckResult] = field(default_factory=list)

    @property
    def available(self) -> list[DomainCheckResult]:
        return [r for r in self.results if r.available]

    @property
    def available_count(self) -> int:
        return len(self.available)

    def summary(self) -> str:
        if not self.results:
            return "I couldn't find any keywords to build domain names from."
        return (
            f"I found {self.available_count} available domains "
            f"out of {len(self.results)} checked!"
        )


async def suggest_domains(
    project_idea: str | None = None,
    *,
    keywords: Sequence[str] | None = None,
    tlds: Sequence[str] | None = None,
    vibe: str | None = None,
    policy: DispatchPolicy | None = None,
    registrar: RegistrarAdapter | None = None,
    library: WordLibrary = DEFAULT_LIBRARY,
    on_result: Callable[[DomainCheckResult], None] | None = None,
) -> Suggestion:
    """Generate candidates for an idea and check the first ``batch_cap`` of them.

    Explicit ``keywords`` win over keywords extracted from ``project_idea``.
    """
    policy = policy or DispatchPolicy.from_settings()
    if keywords is None:
        keywords = extract_keywords(project_idea or "")
    keywords = list(keywords)

    candidates = generate_candidates(keywords, vibe=vibe, tlds=tlds, library=library)
    batch = candidates[: policy.batch_cap]
    logger.info(
        "Checking %d of %d candidates for keywords %s", len(batch), len(candidates), keywords
    )

    results = await check_availability(
        batch, registrar=registrar, policy=policy, on_result=on_result
    )
    return Suggestion(keywords=keywords, candidates=candidates, results=results)
