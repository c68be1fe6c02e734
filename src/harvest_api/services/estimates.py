from __future__ import annotations

from typing import Optional, Tuple, Union

import httpx

from harvest_api.models import (
    Estimate,
    EstimateCreateRequest,
    EstimateEvent,
    EstimateItemCategory,
    EstimateItemCategoryList,
    EstimateItemCategoryListOptions,
    EstimateItemCategoryRequest,
    EstimateList,
    EstimateListOptions,
    EstimateMessage,
    EstimateMessageCreateRequest,
    EstimateMessageList,
    EstimateMessageListOptions,
    EstimateUpdateRequest,
)
from harvest_api.services.base import Service


class EstimateService(Service):
    """
    Estimates, their item categories and messages.

    Workflow transitions (send, accept, decline, re-open) are messages with
    an ``event_type``; the server decides whether a transition is allowed
    and the resulting ``state`` is returned as sent.
    """

    name = "estimates"

    async def list(
        self,
        options: Optional[EstimateListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[EstimateList], httpx.Response]:
        return await self._get(
            "estimates", EstimateList, options=options, timeout=timeout
        )

    async def get(
        self, estimate_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Estimate], httpx.Response]:
        return await self._get(f"estimates/{estimate_id}", Estimate, timeout=timeout)

    async def create(
        self, data: EstimateCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Estimate], httpx.Response]:
        return await self._post("estimates", data, Estimate, timeout=timeout)

    async def update(
        self,
        estimate_id: int,
        data: EstimateUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[Estimate], httpx.Response]:
        return await self._patch(
            f"estimates/{estimate_id}", data, Estimate, timeout=timeout
        )

    async def delete(
        self, estimate_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(f"estimates/{estimate_id}", timeout=timeout)

    # --- Item categories ---

    async def list_item_categories(
        self,
        options: Optional[EstimateItemCategoryListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[EstimateItemCategoryList], httpx.Response]:
        return await self._get(
            "estimate_item_categories",
            EstimateItemCategoryList,
            options=options,
            timeout=timeout,
        )

    async def get_item_category(
        self, category_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[EstimateItemCategory], httpx.Response]:
        return await self._get(
            f"estimate_item_categories/{category_id}",
            EstimateItemCategory,
            timeout=timeout,
        )

    async def create_item_category(
        self, data: EstimateItemCategoryRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[EstimateItemCategory], httpx.Response]:
        return await self._post(
            "estimate_item_categories", data, EstimateItemCategory, timeout=timeout
        )

    async def update_item_category(
        self,
        category_id: int,
        data: EstimateItemCategoryRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[EstimateItemCategory], httpx.Response]:
        return await self._patch(
            f"estimate_item_categories/{category_id}",
            data,
            EstimateItemCategory,
            timeout=timeout,
        )

    async def delete_item_category(
        self, category_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(
            f"estimate_item_categories/{category_id}", timeout=timeout
        )

    # --- Messages ---

    async def list_messages(
        self,
        estimate_id: int,
        options: Optional[EstimateMessageListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[EstimateMessageList], httpx.Response]:
        return await self._get(
            f"estimates/{estimate_id}/messages",
            EstimateMessageList,
            options=options,
            timeout=timeout,
        )

    async def create_message(
        self,
        estimate_id: int,
        data: EstimateMessageCreateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[EstimateMessage], httpx.Response]:
        return await self._post(
            f"estimates/{estimate_id}/messages", data, EstimateMessage, timeout=timeout
        )

    async def delete_message(
        self, estimate_id: int, message_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(
            f"estimates/{estimate_id}/messages/{message_id}", timeout=timeout
        )

    async def send_event(
        self,
        estimate_id: int,
        event: Union[EstimateEvent, str],
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[EstimateMessage], httpx.Response]:
        """
        Post a workflow event for an estimate.
        Raises ValueError for anything outside send, accept, decline and re-open.
        """
        event = EstimateEvent(event)
        data = EstimateMessageCreateRequest(event_type=event.value)
        return await self.create_message(estimate_id, data, timeout=timeout)

    async def mark_as_sent(
        self, estimate_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[EstimateMessage], httpx.Response]:
        return await self.send_event(estimate_id, EstimateEvent.SEND, timeout=timeout)

    async def mark_as_accepted(
        self, estimate_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[EstimateMessage], httpx.Response]:
        return await self.send_event(
            estimate_id, EstimateEvent.ACCEPT, timeout=timeout
        )

    async def mark_as_declined(
        self, estimate_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[EstimateMessage], httpx.Response]:
        return await self.send_event(
            estimate_id, EstimateEvent.DECLINE, timeout=timeout
        )

    async def mark_as_reopened(
        self, estimate_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[EstimateMessage], httpx.Response]:
        return await self.send_event(
            estimate_id, EstimateEvent.REOPEN, timeout=timeout
        )
