from __future__ import annotations

from typing import Optional, Tuple, Union

import httpx

from harvest_api.models import (
    Invoice,
    InvoiceCreateRequest,
    InvoiceEvent,
    InvoiceItemCategory,
    InvoiceItemCategoryList,
    InvoiceItemCategoryListOptions,
    InvoiceItemCategoryRequest,
    InvoiceList,
    InvoiceListOptions,
    InvoiceMessage,
    InvoiceMessageCreateRequest,
    InvoiceMessageList,
    InvoiceMessageListOptions,
    InvoicePayment,
    InvoicePaymentCreateRequest,
    InvoicePaymentList,
    InvoicePaymentListOptions,
    InvoiceUpdateRequest,
)
from harvest_api.services.base import Service


class InvoiceService(Service):
    """Invoices, item categories, messages (including workflow events) and payments."""

    name = "invoices"

    async def list(
        self,
        options: Optional[InvoiceListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[InvoiceList], httpx.Response]:
        return await self._get("invoices", InvoiceList, options=options, timeout=timeout)

    async def get(
        self, invoice_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Invoice], httpx.Response]:
        return await self._get(f"invoices/{invoice_id}", Invoice, timeout=timeout)

    async def create(
        self, data: InvoiceCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Invoice], httpx.Response]:
        """
        Create an invoice, either from explicit ``line_items`` or by importing
        tracked time and expenses through ``line_items_import``.
        """
        return await self._post("invoices", data, Invoice, timeout=timeout)

    async def update(
        self,
        invoice_id: int,
        data: InvoiceUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[Invoice], httpx.Response]:
        return await self._patch(
            f"invoices/{invoice_id}", data, Invoice, timeout=timeout
        )

    async def delete(
        self, invoice_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(f"invoices/{invoice_id}", timeout=timeout)

    # --- Item categories ---

    async def list_item_categories(
        self,
        options: Optional[InvoiceItemCategoryListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[InvoiceItemCategoryList], httpx.Response]:
        return await self._get(
            "invoice_item_categories",
            InvoiceItemCategoryList,
            options=options,
            timeout=timeout,
        )

    async def get_item_category(
        self, category_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[InvoiceItemCategory], httpx.Response]:
        return await self._get(
            f"invoice_item_categories/{category_id}",
            InvoiceItemCategory,
            timeout=timeout,
        )

    async def create_item_category(
        self, data: InvoiceItemCategoryRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[InvoiceItemCategory], httpx.Response]:
        return await self._post(
            "invoice_item_categories", data, InvoiceItemCategory, timeout=timeout
        )

    async def update_item_category(
        self,
        category_id: int,
        data: InvoiceItemCategoryRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[InvoiceItemCategory], httpx.Response]:
        return await self._patch(
            f"invoice_item_categories/{category_id}",
            data,
            InvoiceItemCategory,
            timeout=timeout,
        )

    async def delete_item_category(
        self, category_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(
            f"invoice_item_categories/{category_id}", timeout=timeout
        )

    # --- Messages ---

    async def list_messages(
        self,
        invoice_id: int,
        options: Optional[InvoiceMessageListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[InvoiceMessageList], httpx.Response]:
        return await self._get(
            f"invoices/{invoice_id}/messages",
            InvoiceMessageList,
            options=options,
            timeout=timeout,
        )

    async def create_message(
        self,
        invoice_id: int,
        data: InvoiceMessageCreateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[InvoiceMessage], httpx.Response]:
        return await self._post(
            f"invoices/{invoice_id}/messages", data, InvoiceMessage, timeout=timeout
        )

    async def delete_message(
        self, invoice_id: int, message_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(
            f"invoices/{invoice_id}/messages/{message_id}", timeout=timeout
        )

    async def send_event(
        self,
        invoice_id: int,
        event: Union[InvoiceEvent, str],
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[InvoiceMessage], httpx.Response]:
        """
        Post a workflow event for an invoice.
        Raises ValueError for anything outside send, close, draft and re-open.
        """
        event = InvoiceEvent(event)
        data = InvoiceMessageCreateRequest(event_type=event.value)
        return await self.create_message(invoice_id, data, timeout=timeout)

    async def mark_as_sent(
        self, invoice_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[InvoiceMessage], httpx.Response]:
        return await self.send_event(invoice_id, InvoiceEvent.SEND, timeout=timeout)

    async def mark_as_draft(
        self, invoice_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[InvoiceMessage], httpx.Response]:
        return await self.send_event(invoice_id, InvoiceEvent.DRAFT, timeout=timeout)

    async def mark_as_closed(
        self, invoice_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[InvoiceMessage], httpx.Response]:
        return await self.send_event(invoice_id, InvoiceEvent.CLOSE, timeout=timeout)

    async def mark_as_reopened(
        self, invoice_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[InvoiceMessage], httpx.Response]:
        return await self.send_event(invoice_id, InvoiceEvent.REOPEN, timeout=timeout)

    # --- Payments ---

    async def list_payments(
        self,
        invoice_id: int,
        options: Optional[InvoicePaymentListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[InvoicePaymentList], httpx.Response]:
        return await self._get(
            f"invoices/{invoice_id}/payments",
            InvoicePaymentList,
            options=options,
            timeout=timeout,
        )

    async def create_payment(
        self,
        invoice_id: int,
        data: InvoicePaymentCreateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[InvoicePayment], httpx.Response]:
        return await self._post(
            f"invoices/{invoice_id}/payments", data, InvoicePayment, timeout=timeout
        )

    async def delete_payment(
        self, invoice_id: int, payment_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(
            f"invoices/{invoice_id}/payments/{payment_id}", timeout=timeout
        )
