"""Per-tier predicates over normalized text.

Each tier is a small closure over the normalized query that tests one
normalized candidate string. The suggestion resolver evaluates all four
tiers and unions their hits; the record filter walks EXACT, SUBSTRING and
FUZZY in order and stops at the first tier with results.
"""

from typing import Callable, List, Sequence, Tuple

from .distance import DEFAULT_MAX_DISTANCE, within_distance
from .models import MatchTier

Predicate = Callable[[str], bool]

SUGGESTION_TIERS: Tuple[MatchTier, ...] = (
    MatchTier.EXACT,
    MatchTier.PREFIX,
    MatchTier.SUBSTRING,
    MatchTier.FUZZY,
)

# Prefix hits are a subset of substring hits, so the filter skips that tier.
RECORD_TIERS: Tuple[MatchTier, ...] = (
    MatchTier.EXACT,
    MatchTier.SUBSTRING,
    MatchTier.FUZZY,
)


def build_predicates(
    query_normalized: str,
    tiers: Sequence[MatchTier] = SUGGESTION_TIERS,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> List[Tuple[MatchTier, Predicate]]:
    """Build the ordered (tier, predicate) pairs for a normalized query.

    Args:
        query_normalized: Query already passed through normalize_text
        tiers: Tiers to include, in evaluation order
        max_distance: Inclusive edit-distance threshold for the fuzzy tier

    Returns:
        List of (MatchTier, predicate) in the order given by tiers
    """
    available = {
        MatchTier.EXACT: lambda candidate: candidate == query_normalized,
        MatchTier.PREFIX: lambda candidate: candidate.startswith(query_normalized),
        MatchTier.SUBSTRING: lambda candidate: query_normalized in candidate,
        MatchTier.FUZZY: lambda candidate: within_distance(
            candidate, query_normalized, max_distance
        ),
    }
    return [(tier, available[tier]) for tier in tiers]
