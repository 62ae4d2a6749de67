"""Suggestion resolver for autocomplete-style option lists.

Given free-text input and a list of option strings (university names,
departments, ...), returns every plausible option at once: exact hits,
then prefix, substring and fuzzy hits, deduplicated.
"""

import logging
from typing import Dict, List, Optional, Sequence

from profsearch.logging import get_logger
from profsearch.normalization import normalize_text

from .distance import DEFAULT_MAX_DISTANCE
from .models import MatchTier, SuggestionResult
from .tiers import SUGGESTION_TIERS, build_predicates

logger = get_logger(__name__, component="matching")


class SuggestionResolver:
    """Resolves free-text input against candidate options.

    Unlike the record filter, every tier is evaluated and the hits are
    unioned, so a caller sees all plausible completions in one list.
    """

    def __init__(
        self,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize SuggestionResolver.

        Args:
            max_distance: Inclusive edit-distance threshold for the fuzzy tier
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.max_distance = max_distance
        self.logger = logger_instance or logger

    def resolve(self, text: str, options: Sequence[str]) -> SuggestionResult:
        """Resolve suggestions for the given input.

        Algorithm:
        1. Normalize the input and every option once
        2. Filter options independently with each tier predicate
        3. Concatenate hits in tier order, keeping the first occurrence

        Args:
            text: Raw user input
            options: Candidate option strings (never modified)

        Returns:
            SuggestionResult with original option strings
        """
        query_normalized = normalize_text(text)
        normalized_options = [(option, normalize_text(option)) for option in options]

        tier_hits: Dict[MatchTier, List[str]] = {}
        for tier, predicate in build_predicates(
            query_normalized, SUGGESTION_TIERS, self.max_distance
        ):
            tier_hits[tier] = [
                option for option, normalized in normalized_options if predicate(normalized)
            ]

        # dict preserves insertion order, so the first tier to hit an option wins
        ordered: Dict[str, None] = {}
        for hits in tier_hits.values():
            for option in hits:
                ordered.setdefault(option, None)

        result = SuggestionResult(
            suggestions=list(ordered),
            tier_hits=tier_hits,
            query_normalized=query_normalized,
        )

        self.logger.debug(
            "Suggestions resolved",
            extra={
                "event": "matching.suggestions.resolved",
                "query_normalized": query_normalized,
                "option_count": len(options),
                "suggestion_count": len(result.suggestions),
                "tier_hits": result.hit_counts,
            },
        )

        return result


def get_suggestions(
    text: str, options: Sequence[str], max_distance: int = DEFAULT_MAX_DISTANCE
) -> List[str]:
    """Return deduplicated options matching the input in any tier.

    Example:
        >>> get_suggestions("ucv", ["UCV", "UCAB", "ucv-maracay"])
        ['UCV', 'ucv-maracay', 'UCAB']
    """
    return SuggestionResolver(max_distance=max_distance).resolve(text, options).suggestions
