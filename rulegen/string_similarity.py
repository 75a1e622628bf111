"""String similarity helpers backed by RapidFuzz."""

from __future__ import annotations

from typing import Iterable, Optional

from rapidfuzz import fuzz, process


def normalize_similarity_text(value: str) -> str:
    """Normalize text for similarity comparisons."""

    if not value:
        return ""
    return value.strip().casefold().replace("_", "-")


def closest_match(
    value: str,
    choices: Iterable[str],
    *,
    threshold: float = 0.6,
) -> Optional[str]:
    """Return the choice most similar to ``value`` if it clears ``threshold``.

    ``threshold`` is a ``[0, 1]`` fraction of RapidFuzz's percentage ratio.
    """

    candidates = list(choices)
    query = normalize_similarity_text(value)
    if not query or not candidates:
        return None
    match = process.extractOne(
        query,
        candidates,
        scorer=fuzz.ratio,
        processor=normalize_similarity_text,
        score_cutoff=threshold * 100.0,
    )
    if match is None:
        return None
    return match[0]


__all__ = ["closest_match", "normalize_similarity_text"]
