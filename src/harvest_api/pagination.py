from __future__ import annotations

from typing import Optional, TypeVar

import httpx

from .models.base import ListOptions, Pagination

O = TypeVar("O", bound=ListOptions)


def get_link_href(listing: Pagination, relation: str) -> Optional[str]:
    """
    Returns one of the navigation links (first, next, previous, last).
    Example: get_link_href(clients, 'next') -> 'https://api.harvestapp.com/v2/clients?page=2&per_page=100'
    """
    if listing.links is None:
        return None
    return getattr(listing.links, relation, None)


def next_page_url(listing: Pagination) -> Optional[str]:
    return get_link_href(listing, "next")


def parse_page_from_href(href: Optional[str]) -> Optional[int]:
    """
    Extracts the page index from a navigation link.
    Example: '/v2/clients?page=3&per_page=100' -> 3
    """
    if not href:
        return None
    try:
        page = httpx.URL(href).params.get("page")
        return int(page) if page is not None else None
    except (ValueError, httpx.InvalidURL):
        return None


def next_page_number(listing: Pagination) -> Optional[int]:
    """
    The page after listing, preferring the server's next link, then next_page,
    then page + 1 while below total_pages. None on the last page.
    """
    from_link = parse_page_from_href(next_page_url(listing))
    if from_link is not None:
        return from_link
    if listing.next_page is not None:
        return listing.next_page
    if listing.links is not None and listing.links.last is not None:
        # links present without a next link means this is the last page
        return None
    if listing.page is not None and listing.total_pages is not None:
        if listing.page < listing.total_pages:
            return listing.page + 1
    return None


def next_page_options(listing: Pagination, opts: Optional[O]) -> Optional[O]:
    """Copy of opts pointing at the next page, or None when there is none."""
    page = next_page_number(listing)
    if page is None:
        return None
    if opts is None:
        return ListOptions(page=page, per_page=listing.per_page)  # type: ignore[return-value]
    return opts.model_copy(update={"page": page})


__all__ = [
    "get_link_href",
    "next_page_url",
    "parse_page_from_href",
    "next_page_number",
    "next_page_options",
]
