"""Highlight-scoped search results.

A user's highlights page runs a search restricted to the items the user
has highlighted. When the user has none, no index query is issued and a
canonical empty response is returned instead.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from rdftypes.core.config import RdfTypesSettings, get_settings
from rdftypes.core.logging import get_logger

logger = get_logger(__name__)

WILDCARD_QUERY = "*:*"


@dataclass
class ResponseHeader:
    """Search response header.

    Attributes:
        status: Backend status code, 0 on success
        params: Request parameters echoed by the backend
    """
    status: int = 0
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResponse:
    """A page of search results in Solr response shape.

    Attributes:
        header: Response header
        num_found: Total number of matching documents
        start: Offset of the first document on this page
        docs: Documents on this page
    """
    header: ResponseHeader = field(default_factory=ResponseHeader)
    num_found: int = 0
    start: int = 0
    docs: list[dict[str, Any]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.num_found

    @property
    def rows(self) -> int | None:
        rows = self.header.params.get("rows")
        return int(rows) if rows is not None else None

    @property
    def is_empty(self) -> bool:
        return self.num_found == 0 and not self.docs

    def to_dict(self) -> dict[str, Any]:
        """Serialize using Solr wire keys."""
        return {
            "responseHeader": {
                "status": self.header.status,
                "params": dict(self.header.params),
            },
            "response": {
                "numFound": self.num_found,
                "start": self.start,
                "docs": list(self.docs),
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchResponse":
        """Parse a Solr-shaped response dictionary."""
        header = data.get("responseHeader", {})
        response = data.get("response", {})
        return cls(
            header=ResponseHeader(
                status=header.get("status", 0),
                params=dict(header.get("params", {})),
            ),
            num_found=response.get("numFound", 0),
            start=response.get("start", 0),
            docs=list(response.get("docs", [])),
        )


def empty_search_result(
    rows: int | None = None,
    settings: RdfTypesSettings | None = None,
) -> tuple[SearchResponse, list[dict[str, Any]]]:
    """Build the canonical empty result.

    Args:
        rows: Page size to report; defaults to ``settings.search_rows``
        settings: Settings to read the default page size from

    Returns:
        Tuple of (response with status 0 and zero matches, empty document list)
    """
    if rows is None:
        rows = (settings or get_settings()).search_rows

    response = SearchResponse(
        header=ResponseHeader(
            status=0,
            params={"wt": "ruby", "rows": str(rows), "q": WILDCARD_QUERY},
        ),
        num_found=0,
        start=0,
        docs=[],
    )
    return response, []


class SearchBackend(ABC):
    """Search index queried for a user's result page."""

    @abstractmethod
    def search(self, user: Any, **params: Any) -> tuple[SearchResponse, list[dict[str, Any]]]:
        """Run a search and return (response, documents)."""
        ...


class HighlightStore(ABC):
    """Lookup of the items a user has highlighted."""

    @abstractmethod
    def count_for(self, user: Any) -> int:
        """Number of items highlighted by ``user``."""
        ...


class HighlightsSearch:
    """Search over a user's highlighted items.

    Example:
        >>> search = HighlightsSearch(backend, highlights)
        >>> response, docs = search.query(user, page=1)
    """

    def __init__(
        self,
        backend: SearchBackend,
        highlights: HighlightStore,
        settings: RdfTypesSettings | None = None,
    ) -> None:
        self.backend = backend
        self.highlights = highlights
        self.settings = settings or get_settings()

    def query(self, user: Any, **params: Any) -> tuple[SearchResponse, list[dict[str, Any]]]:
        """Search the user's highlights.

        Returns the canonical empty result without touching the backend
        when the user has no highlights.
        """
        if self.highlights.count_for(user) == 0:
            logger.debug(f"No highlights for {user!r}; returning empty result")
            return empty_search_result(settings=self.settings)
        return self.backend.search(user, **params)
