"""Normalization and merging of provider citations."""

from typing import Any, Iterable, List, Optional

from ..models.evidence import Source

MAX_SOURCES_PER_PROVIDER = 3
MAX_COMBINED_SOURCES = 5


def normalize_sources(
    raw_citations: Optional[Iterable[Any]],
    limit: int = MAX_SOURCES_PER_PROVIDER,
    title_key: str = "title",
    url_key: str = "url",
    snippet_key: Optional[str] = None,
) -> List[Source]:
    """Map a provider's citation list onto sources.

    Only the first ``limit`` citations are considered. A missing title
    falls back to the URL, a missing snippet to an empty string. Non-string
    values are converted to strings. Citations without a URL are dropped.

    Args:
        raw_citations: Citation dicts as returned by the provider, or None
        limit: Maximum number of citations to keep
        title_key: Field holding the citation title
        url_key: Field holding the citation URL
        snippet_key: Field holding an excerpt, None if the provider has none

    Returns:
        List of sources, possibly empty
    """
    if not raw_citations:
        return []

    sources = []
    for citation in list(raw_citations)[:limit]:
        if not isinstance(citation, dict):
            continue
        url = citation.get(url_key)
        if not url:
            continue
        snippet = None
        if snippet_key:
            snippet = str(citation.get(snippet_key) or "")
        sources.append(
            Source(
                name=str(citation.get(title_key) or url),
                url=str(url),
                snippet=snippet,
            )
        )
    return sources


def merge_sources(groups: Iterable[Iterable[Source]], limit: int = MAX_COMBINED_SOURCES) -> List[Source]:
    """Concatenate source groups in order, keeping the first source seen per URL."""
    seen_urls = set()
    merged = []
    for group in groups:
        for source in group:
            if source.url in seen_urls:
                continue
            seen_urls.add(source.url)
            merged.append(source)
    return merged[:limit]
