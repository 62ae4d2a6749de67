"""Record filter for resolving a search query against catalog records.

This module implements the tiered search behind the results list:
1. Exact: any field equals the normalized query
2. Substring: any field contains the normalized query
3. Fuzzy: any field is within the edit-distance threshold
The first tier that yields records wins; later tiers are not evaluated.
"""

import logging
from typing import Iterable, List, Optional

from profsearch.domain.models import SearchableRecord
from profsearch.logging import get_logger
from profsearch.normalization import MatchableRecord, normalize_text

from .distance import DEFAULT_MAX_DISTANCE
from .models import FilterResult
from .tiers import RECORD_TIERS, Predicate, build_predicates

logger = get_logger(__name__, component="matching")


class RecordFilter:
    """Filters catalog records against a free-text query.

    Responsibilities:
    - Normalize the query and the name/university/department fields
    - Evaluate tiers in order, short-circuiting on the first hit
    - Return the original record objects in catalog order
    """

    def __init__(
        self,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize RecordFilter.

        Args:
            max_distance: Inclusive edit-distance threshold for the fuzzy tier
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.max_distance = max_distance
        self.logger = logger_instance or logger

    def filter(self, records: Iterable[SearchableRecord], query: str) -> FilterResult:
        """Filter records against a query.

        An empty query is not special-cased: records with a missing field
        hit the exact tier, and otherwise every record hits the substring
        tier.

        Args:
            records: Catalog snapshot for this call
            query: Raw query text

        Returns:
            FilterResult with matched records and the winning tier
        """
        query_normalized = normalize_text(query)
        matchables = [MatchableRecord.from_record(record) for record in records]

        for tier, predicate in build_predicates(
            query_normalized, RECORD_TIERS, self.max_distance
        ):
            matched = [
                matchable.record
                for matchable in matchables
                if self._any_field_matches(matchable, predicate)
            ]
            if matched:
                self.logger.debug(
                    f"Query matched {len(matched)} record(s) in {tier.value} tier",
                    extra={
                        "event": "matching.filter.tier_hit",
                        "query_normalized": query_normalized,
                        "tier": tier.value,
                        "record_count": len(matchables),
                        "match_count": len(matched),
                    },
                )
                return FilterResult(records=matched, tier=tier, query_normalized=query_normalized)

        self.logger.debug(
            "Query matched no records",
            extra={
                "event": "matching.filter.no_match",
                "query_normalized": query_normalized,
                "record_count": len(matchables),
            },
        )
        return FilterResult(records=[], tier=None, query_normalized=query_normalized)

    @staticmethod
    def _any_field_matches(matchable: MatchableRecord, predicate: Predicate) -> bool:
        """Check whether the predicate holds for any normalized field."""
        for field_text in matchable.fields():
            if predicate(field_text):
                return True
        return False


def filter_records(
    records: Iterable[SearchableRecord],
    query: str,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> List[SearchableRecord]:
    """Return the records matching the query in the first tier that has any.

    Example:
        >>> records = [SearchableRecord(id="1", name="Juan Perez")]
        >>> [r.id for r in filter_records(records, "jaun perez")]
        ['1']
    """
    return RecordFilter(max_distance=max_distance).filter(records, query).records
