"""Approximate matching of search queries against catalog data.

This module provides:
- levenshtein_distance: Edit distance between normalized strings
- MatchTier: Exact, prefix, substring and fuzzy strategies
- RecordFilter / filter_records: Tiered short-circuit search over records
- SuggestionResolver / get_suggestions: Unioned tier search over option strings
- quick_search: Search-as-you-type over teacher names
"""

from .distance import DEFAULT_MAX_DISTANCE, levenshtein_distance, within_distance
from .engine import RecordFilter, filter_records
from .models import FilterResult, MatchTier, SuggestionResult
from .quick_search import DEFAULT_MAX_RESULTS, quick_search, resolve_university_name
from .suggestions import SuggestionResolver, get_suggestions

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "DEFAULT_MAX_RESULTS",
    "levenshtein_distance",
    "within_distance",
    "MatchTier",
    "FilterResult",
    "SuggestionResult",
    "RecordFilter",
    "filter_records",
    "SuggestionResolver",
    "get_suggestions",
    "quick_search",
    "resolve_university_name",
]
