from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import Field

from ..values import Date, Timestamp
from .base import HarvestModel, ListOptions, Pagination, QueryParam
from .clients import Client
from .users import User


class EstimateEvent(str, Enum):
    """Workflow transitions accepted by the estimate messages endpoint."""

    SEND = "send"
    ACCEPT = "accept"
    DECLINE = "decline"
    REOPEN = "re-open"


class EstimateLineItem(HarvestModel):
    id: Optional[int] = None
    kind: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    amount: Optional[float] = None
    taxed: Optional[bool] = None
    taxed2: Optional[bool] = None


class Estimate(HarvestModel):
    id: Optional[int] = None
    client: Optional[Client] = None
    line_items: Optional[List[EstimateLineItem]] = None
    creator: Optional[User] = None
    client_key: Optional[str] = None
    number: Optional[str] = None
    purchase_order: Optional[str] = None
    amount: Optional[float] = None
    tax: Optional[float] = None
    tax_amount: Optional[float] = None
    tax2: Optional[float] = None
    tax2_amount: Optional[float] = None
    discount: Optional[float] = None
    discount_amount: Optional[float] = None
    subject: Optional[str] = None
    notes: Optional[str] = None
    currency: Optional[str] = None
    # draft, sent, accepted or declined; kept as the server sends it.
    state: Optional[str] = None
    issue_date: Optional[Date] = None
    sent_at: Optional[Timestamp] = None
    accepted_at: Optional[Timestamp] = None
    declined_at: Optional[Timestamp] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class EstimateList(Pagination):
    estimates: List[Estimate] = []


class EstimateListOptions(ListOptions):
    client_id: Annotated[Optional[int], QueryParam("client_id")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None
    from_: Annotated[Optional[Date], QueryParam("from")] = None
    to: Annotated[Optional[Date], QueryParam("to")] = None
    state: Annotated[Optional[str], QueryParam("state")] = None


class EstimateLineItemRequest(HarvestModel):
    id: Optional[int] = None
    kind: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    taxed: Optional[bool] = None
    taxed2: Optional[bool] = None
    # Set to True on update to remove the line item.
    destroy: Optional[bool] = Field(default=None, alias="_destroy")


class EstimateCreateRequest(HarvestModel):
    client_id: Optional[int] = None
    number: Optional[str] = None
    purchase_order: Optional[str] = None
    tax: Optional[float] = None
    tax2: Optional[float] = None
    discount: Optional[float] = None
    subject: Optional[str] = None
    notes: Optional[str] = None
    currency: Optional[str] = None
    issue_date: Optional[Date] = None
    line_items: Optional[List[EstimateLineItemRequest]] = None


class EstimateUpdateRequest(EstimateCreateRequest):
    pass


class EstimateItemCategory(HarvestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class EstimateItemCategoryList(Pagination):
    estimate_item_categories: List[EstimateItemCategory] = []


class EstimateItemCategoryListOptions(ListOptions):
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class EstimateItemCategoryRequest(HarvestModel):
    name: Optional[str] = None


class EstimateMessageRecipient(HarvestModel):
    name: Optional[str] = None
    email: Optional[str] = None


class EstimateMessage(HarvestModel):
    id: Optional[int] = None
    sent_by: Optional[str] = None
    sent_by_email: Optional[str] = None
    sent_from: Optional[str] = None
    sent_from_email: Optional[str] = None
    recipients: Optional[List[EstimateMessageRecipient]] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    send_me_a_copy: Optional[bool] = None
    # Unrestricted string; a plain message has no event type.
    event_type: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class EstimateMessageList(Pagination):
    estimate_messages: List[EstimateMessage] = []


class EstimateMessageListOptions(ListOptions):
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class EstimateMessageCreateRequest(HarvestModel):
    event_type: Optional[str] = None
    recipients: Optional[List[EstimateMessageRecipient]] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    send_me_a_copy: Optional[bool] = None


__all__ = [
    "EstimateEvent",
    "EstimateLineItem",
    "Estimate",
    "EstimateList",
    "EstimateListOptions",
    "EstimateLineItemRequest",
    "EstimateCreateRequest",
    "EstimateUpdateRequest",
    "EstimateItemCategory",
    "EstimateItemCategoryList",
    "EstimateItemCategoryListOptions",
    "EstimateItemCategoryRequest",
    "EstimateMessageRecipient",
    "EstimateMessage",
    "EstimateMessageList",
    "EstimateMessageListOptions",
    "EstimateMessageCreateRequest",
]
