"""Data models for the matching engine.

This module defines the match tiers and the result structures returned by
the record filter and the suggestion resolver.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from profsearch.domain.models import SearchableRecord


class MatchTier(str, Enum):
    """Matching strategies, listed in evaluation order."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"
    FUZZY = "fuzzy"


@dataclass
class FilterResult:
    """Result of filtering a catalog against a query.

    Attributes:
        records: Matched records, in catalog order (original objects)
        tier: Tier that produced the records, or None when nothing matched
        query_normalized: Normalized form of the query that was evaluated
    """

    records: List[SearchableRecord] = field(default_factory=list)
    tier: Optional[MatchTier] = None
    query_normalized: str = ""

    @property
    def is_empty(self) -> bool:
        """Whether no record matched."""
        return not self.records


@dataclass
class SuggestionResult:
    """Result of resolving suggestions for free-text input.

    Attributes:
        suggestions: Deduplicated options, exact hits first, then prefix,
            substring and fuzzy hits
        tier_hits: Options matched by each tier before deduplication
        query_normalized: Normalized form of the input
    """

    suggestions: List[str] = field(default_factory=list)
    tier_hits: Dict[MatchTier, List[str]] = field(default_factory=dict)
    query_normalized: str = ""

    @property
    def hit_counts(self) -> Dict[str, int]:
        """Number of options each tier matched, keyed by tier value."""
        return {tier.value: len(hits) for tier, hits in self.tier_hits.items()}
