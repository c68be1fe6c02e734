from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import Field

from ..values import Date, Timestamp
from .base import HarvestModel, ListOptions, Pagination, QueryParam
from .clients import Client
from .estimates import Estimate
from .projects import Project
from .retainers import Retainer
from .users import User


class InvoiceEvent(str, Enum):
    """Workflow transitions accepted by the invoice messages endpoint."""

    SEND = "send"
    CLOSE = "close"
    DRAFT = "draft"
    REOPEN = "re-open"


class InvoiceLineItem(HarvestModel):
    id: Optional[int] = None
    project: Optional[Project] = None
    kind: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    amount: Optional[float] = None
    taxed: Optional[bool] = None
    taxed2: Optional[bool] = None


class Invoice(HarvestModel):
    id: Optional[int] = None
    client: Optional[Client] = None
    line_items: Optional[List[InvoiceLineItem]] = None
    estimate: Optional[Estimate] = None
    retainer: Optional[Retainer] = None
    creator: Optional[User] = None
    client_key: Optional[str] = None
    number: Optional[str] = None
    purchase_order: Optional[str] = None
    amount: Optional[float] = None
    due_amount: Optional[float] = None
    tax: Optional[float] = None
    tax_amount: Optional[float] = None
    tax2: Optional[float] = None
    tax2_amount: Optional[float] = None
    discount: Optional[float] = None
    discount_amount: Optional[float] = None
    subject: Optional[str] = None
    notes: Optional[str] = None
    currency: Optional[str] = None
    # draft, open, paid or closed; kept as the server sends it.
    state: Optional[str] = None
    period_start: Optional[Date] = None
    period_end: Optional[Date] = None
    issue_date: Optional[Date] = None
    due_date: Optional[Date] = None
    payment_term: Optional[str] = None
    sent_at: Optional[Timestamp] = None
    paid_at: Optional[Timestamp] = None
    paid_date: Optional[Date] = None
    closed_at: Optional[Timestamp] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class InvoiceList(Pagination):
    invoices: List[Invoice] = []


class InvoiceListOptions(ListOptions):
    client_id: Annotated[Optional[int], QueryParam("client_id")] = None
    project_id: Annotated[Optional[int], QueryParam("project_id")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None
    from_: Annotated[Optional[Date], QueryParam("from")] = None
    to: Annotated[Optional[Date], QueryParam("to")] = None
    state: Annotated[Optional[str], QueryParam("state")] = None


class InvoiceLineItemRequest(HarvestModel):
    id: Optional[int] = None
    project_id: Optional[int] = None
    kind: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    taxed: Optional[bool] = None
    taxed2: Optional[bool] = None
    destroy: Optional[bool] = Field(default=None, alias="_destroy")


class InvoiceTimeImport(HarvestModel):
    # project, task, people or detailed
    summary_type: Optional[str] = None
    from_: Optional[Date] = Field(default=None, alias="from")
    to: Optional[Date] = None


class InvoiceExpensesImport(HarvestModel):
    # project, category, people or detailed
    summary_type: Optional[str] = None
    from_: Optional[Date] = Field(default=None, alias="from")
    to: Optional[Date] = None
    attach_receipt: Optional[bool] = None


class InvoiceLineItemsImport(HarvestModel):
    """Builds line items from tracked time and expenses of the given projects."""

    project_ids: Optional[List[int]] = None
    time: Optional[InvoiceTimeImport] = None
    expenses: Optional[InvoiceExpensesImport] = None


class InvoiceCreateRequest(HarvestModel):
    client_id: Optional[int] = None
    retainer_id: Optional[int] = None
    estimate_id: Optional[int] = None
    number: Optional[str] = None
    purchase_order: Optional[str] = None
    tax: Optional[float] = None
    tax2: Optional[float] = None
    discount: Optional[float] = None
    subject: Optional[str] = None
    notes: Optional[str] = None
    currency: Optional[str] = None
    issue_date: Optional[Date] = None
    due_date: Optional[Date] = None
    payment_term: Optional[str] = None
    line_items: Optional[List[InvoiceLineItemRequest]] = None
    line_items_import: Optional[InvoiceLineItemsImport] = None


class InvoiceUpdateRequest(HarvestModel):
    client_id: Optional[int] = None
    retainer_id: Optional[int] = None
    estimate_id: Optional[int] = None
    number: Optional[str] = None
    purchase_order: Optional[str] = None
    tax: Optional[float] = None
    tax2: Optional[float] = None
    discount: Optional[float] = None
    subject: Optional[str] = None
    notes: Optional[str] = None
    currency: Optional[str] = None
    issue_date: Optional[Date] = None
    due_date: Optional[Date] = None
    payment_term: Optional[str] = None
    line_items: Optional[List[InvoiceLineItemRequest]] = None


class InvoiceItemCategory(HarvestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    use_as_service: Optional[bool] = None
    use_as_expense: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class InvoiceItemCategoryList(Pagination):
    invoice_item_categories: List[InvoiceItemCategory] = []


class InvoiceItemCategoryListOptions(ListOptions):
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class InvoiceItemCategoryRequest(HarvestModel):
    name: Optional[str] = None


class InvoiceMessageRecipient(HarvestModel):
    name: Optional[str] = None
    email: Optional[str] = None


class InvoiceMessage(HarvestModel):
    id: Optional[int] = None
    sent_by: Optional[str] = None
    sent_by_email: Optional[str] = None
    sent_from: Optional[str] = None
    sent_from_email: Optional[str] = None
    recipients: Optional[List[InvoiceMessageRecipient]] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    include_link_to_client_invoice: Optional[bool] = None
    attach_pdf: Optional[bool] = None
    send_me_a_copy: Optional[bool] = None
    thank_you: Optional[bool] = None
    event_type: Optional[str] = None
    reminder: Optional[bool] = None
    send_reminder_on: Optional[Date] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class InvoiceMessageList(Pagination):
    invoice_messages: List[InvoiceMessage] = []


class InvoiceMessageListOptions(ListOptions):
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class InvoiceMessageCreateRequest(HarvestModel):
    event_type: Optional[str] = None
    recipients: Optional[List[InvoiceMessageRecipient]] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    include_link_to_client_invoice: Optional[bool] = None
    attach_pdf: Optional[bool] = None
    send_me_a_copy: Optional[bool] = None
    thank_you: Optional[bool] = None


class PaymentGateway(HarvestModel):
    id: Optional[int] = None
    name: Optional[str] = None


class InvoicePayment(HarvestModel):
    id: Optional[int] = None
    amount: Optional[float] = None
    paid_at: Optional[Timestamp] = None
    paid_date: Optional[Date] = None
    recorded_by: Optional[str] = None
    recorded_by_email: Optional[str] = None
    notes: Optional[str] = None
    transaction_id: Optional[str] = None
    payment_gateway: Optional[PaymentGateway] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class InvoicePaymentList(Pagination):
    invoice_payments: List[InvoicePayment] = []


class InvoicePaymentListOptions(ListOptions):
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class InvoicePaymentCreateRequest(HarvestModel):
    amount: Optional[float] = None
    # Either paid_at or paid_date, not both.
    paid_at: Optional[Timestamp] = None
    paid_date: Optional[Date] = None
    notes: Optional[str] = None


__all__ = [
    "InvoiceEvent",
    "InvoiceLineItem",
    "Invoice",
    "InvoiceList",
    "InvoiceListOptions",
    "InvoiceLineItemRequest",
    "InvoiceTimeImport",
    "InvoiceExpensesImport",
    "InvoiceLineItemsImport",
    "InvoiceCreateRequest",
    "InvoiceUpdateRequest",
    "InvoiceItemCategory",
    "InvoiceItemCategoryList",
    "InvoiceItemCategoryListOptions",
    "InvoiceItemCategoryRequest",
    "InvoiceMessageRecipient",
    "InvoiceMessage",
    "InvoiceMessageList",
    "InvoiceMessageListOptions",
    "InvoiceMessageCreateRequest",
    "PaymentGateway",
    "InvoicePayment",
    "InvoicePaymentList",
    "InvoicePaymentListOptions",
    "InvoicePaymentCreateRequest",
]
