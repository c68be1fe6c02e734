from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..stringify import stringify

DEFAULT_PER_PAGE = 100
MAX_PER_PAGE = 100
# A few lookup endpoints (estimate/invoice messages, item categories) allow more.
MAX_LOOKUP_PER_PAGE = 2000


class HarvestModel(BaseModel):
    """
    Base for every resource, request, option and list model.
    All fields are optional; a field that was never set is "absent" and is
    left out of request bodies, while a field explicitly set to None is sent
    as JSON null.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def __str__(self) -> str:
        return stringify(self)

    def is_set(self, name: str) -> bool:
        return name in self.model_fields_set


@dataclass(frozen=True)
class QueryParam:
    """Marks an option field as a query-string parameter."""

    name: str
    omitempty: bool = True


class PageLinks(HarvestModel):
    first: Optional[str] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    last: Optional[str] = None


class Pagination(HarvestModel):
    per_page: Optional[int] = None
    total_pages: Optional[int] = None
    total_entries: Optional[int] = None
    next_page: Optional[int] = None
    previous_page: Optional[int] = None
    page: Optional[int] = None
    links: Optional[PageLinks] = None


PageIndex = Annotated[int, Field(ge=1)]
PageSize = Annotated[int, Field(ge=1, le=MAX_LOOKUP_PER_PAGE)]


class ListOptions(HarvestModel):
    # 1-based page index.
    page: Annotated[Optional[PageIndex], QueryParam("page")] = None
    per_page: Annotated[Optional[PageSize], QueryParam("per_page")] = None


__all__ = [
    "HarvestModel",
    "QueryParam",
    "PageLinks",
    "Pagination",
    "ListOptions",
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "MAX_LOOKUP_PER_PAGE",
]
