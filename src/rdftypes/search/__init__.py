"""Search integration for highlight-scoped result pages."""

from rdftypes.search.highlights import (
    HighlightStore,
    HighlightsSearch,
    ResponseHeader,
    SearchBackend,
    SearchResponse,
    empty_search_result,
)

__all__ = [
    "HighlightStore",
    "HighlightsSearch",
    "ResponseHeader",
    "SearchBackend",
    "SearchResponse",
    "empty_search_result",
]
