"""Candidate generator - turn keywords into domain name candidates."""

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from dynaconf.base import LazySettings

from namesmith.config import settings

logger = logging.getLogger(__name__)

DEFAULT_TLDS = (".com", ".io", ".co", ".dev", ".app", ".ai")
DEFAULT_PREFIXES = (
    "get", "my", "use", "try", "go", "hey", "hello", "the", "just", "now", "be", "do",
)
DEFAULT_SUFFIXES = ("app", "io", "hq", "hub", "lab", "base", "ly", "ify", "er", "ster")
DEFAULT_MAX_RESULTS = 20

STOP_WORDS = frozenset({"the", "and", "for", "app", "with", "that", "this", "have", "from"})

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_LABEL = re.compile(r"^[a-z0-9-]{1,63}$")


@dataclass(frozen=True)
class WordLibrary:
    """Prefixes, suffixes and TLDs the generator combines keywords with."""

    prefixes: tuple[str, ...] = DEFAULT_PREFIXES
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    tlds: tuple[str, ...] = DEFAULT_TLDS

    @classmethod
    def from_settings(cls, conf: LazySettings = settings) -> "WordLibrary":
        return cls(
            prefixes=tuple(conf.generator.prefixes),
            suffixes=tuple(conf.generator.suffixes),
            tlds=tuple(conf.generator.tlds),
        )


DEFAULT_LIBRARY = WordLibrary()


def normalize_keyword(keyword: str) -> str:
    """Lowercase and strip everything outside [a-z0-9]."""
    return _NON_ALNUM.sub("", keyword.lower())


def _clean_keywords(keywords: Iterable[str]) -> list[str]:
    cleaned = [normalize_keyword(k) for k in keywords]
    return [k for k in cleaned if k]


def generate_candidates(
    keywords: Sequence[str],
    *,
    vibe: str | None = None,
    tlds: Sequence[str] | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
    library: WordLibrary = DEFAULT_LIBRARY,
) -> list[str]:
    """Generate de-duplicated domain candidates from keywords.

    For each keyword, in order: the bare keyword, every prefix + keyword and
    every keyword + suffix, each with every TLD. Then every ordered pair of
    distinct keywords is compounded with every TLD. TLDs are used verbatim.

    Args:
        keywords: Raw keywords; normalized to [a-z0-9] and empties dropped.
        vibe: The feel of the project. Accepted for callers but not used to
            filter candidates.
        tlds: TLDs to use instead of the library's (e.g. [".com", ".io"]).
        max_results: Maximum number of candidates returned.
        library: Word lists to combine keywords with.

    Returns:
        Candidates in first-appearance order, at most ``max_results`` long.
    """
    active_tlds = list(tlds) if tlds is not None else list(library.tlds)
    cleaned = _clean_keywords(keywords)
    if vibe:
        logger.debug("Generating candidates for %s (vibe=%s)", cleaned, vibe)

    if not cleaned or max_results <= 0:
        return []

    # dict keeps insertion order and drops repeats
    suggestions: dict[str, None] = {}

    for keyword in cleaned:
        for tld in active_tlds:
            suggestions[f"{keyword}{tld}"] = None
        for prefix in library.prefixes:
            for tld in active_tlds:
                suggestions[f"{prefix}{keyword}{tld}"] = None
        for suffix in library.suffixes:
            for tld in active_tlds:
                suggestions[f"{keyword}{suffix}{tld}"] = None

    for first in cleaned:
        for second in cleaned:
            if first == second:
                continue
            for tld in active_tlds:
                suggestions[f"{first}{second}{tld}"] = None

    return list(suggestions)[:max_results]


def extract_keywords(project_idea: str, limit: int = 3) -> list[str]:
    """Pull the most useful words out of a free-text project description.

    Words of four or more characters that aren't stop words, first
    occurrence wins.
    """
    keywords: list[str] = []
    for word in project_idea.lower().split():
        word = normalize_keyword(word)
        if len(word) <= 3 or word in STOP_WORDS or word in keywords:
            continue
        keywords.append(word)
        if len(keywords) >= limit:
            break
    return keywords


def is_well_formed(domain: str) -> bool:
    """Check a candidate against label(.label)+ with [a-z0-9-]{1,63} labels."""
    labels = domain.split(".")
    if len(labels) < 2:
        return False
    return all(_LABEL.match(label) for label in labels)
