"""Search-as-you-type lookup for the header search box.

Matches the query against teacher names only, optionally restricted to one
university, and returns a short list with names starting with the query
first.
"""

from typing import Iterable, List, Mapping, Optional

from profsearch.domain.models import SearchableRecord
from profsearch.logging import get_logger
from profsearch.normalization import COMMON_ABBREVIATIONS, MatchableRecord, normalize_text

logger = get_logger(__name__, component="matching")

DEFAULT_MAX_RESULTS = 4


def resolve_university_name(
    text: Optional[str], abbreviations: Mapping[str, str] = COMMON_ABBREVIATIONS
) -> Optional[str]:
    """Convert a university abbreviation to its full name.

    Args:
        text: Abbreviation or full name as selected by the user
        abbreviations: Abbreviation table keyed by normalized abbreviation

    Returns:
        Full name if text is a known abbreviation, text itself otherwise,
        None for empty input
    """
    if not text or not text.strip():
        return None
    return abbreviations.get(normalize_text(text), text)


def quick_search(
    records: Iterable[SearchableRecord],
    query: str,
    university: Optional[str] = None,
    max_results: int = DEFAULT_MAX_RESULTS,
    abbreviations: Mapping[str, str] = COMMON_ABBREVIATIONS,
) -> List[SearchableRecord]:
    """Find teachers whose name contains the query.

    Args:
        records: Catalog snapshot for this call
        query: Raw text typed so far
        university: Optional university filter (abbreviation or full name)
        max_results: Maximum number of records returned
        abbreviations: Table used to resolve the university filter

    Returns:
        Up to max_results records, prefix matches first, then shorter names
    """
    query_normalized = normalize_text(query)
    if not query_normalized:
        return []

    university_name = resolve_university_name(university, abbreviations)
    university_normalized = normalize_text(university_name) if university_name else None

    matches = []
    for record in records:
        matchable = MatchableRecord.from_record(record)
        if query_normalized not in matchable.name_normalized:
            continue
        if (
            university_normalized is not None
            and matchable.university_normalized != university_normalized
        ):
            continue
        matches.append(matchable)

    # Stable sort: prefix matches first, then shorter names
    matches.sort(
        key=lambda m: (
            not m.name_normalized.startswith(query_normalized),
            len(m.record.name or ""),
        )
    )
    results = [m.record for m in matches[:max_results]]

    logger.debug(
        "Quick search completed",
        extra={
            "event": "matching.quick_search.completed",
            "query_normalized": query_normalized,
            "university": university_name,
            "match_count": len(matches),
            "returned_count": len(results),
        },
    )

    return results
