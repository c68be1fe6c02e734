from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import (
    Expense,
    ExpenseCategory,
    ExpenseCategoryList,
    ExpenseCategoryListOptions,
    ExpenseCategoryRequest,
    ExpenseCreateRequest,
    ExpenseList,
    ExpenseListOptions,
    ExpenseUpdateRequest,
)
from harvest_api.services.base import Service


class ExpenseService(Service):
    """Expenses and expense categories. Receipts are read-only here."""

    name = "expenses"

    async def list(
        self,
        options: Optional[ExpenseListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ExpenseList], httpx.Response]:
        return await self._get("expenses", ExpenseList, options=options, timeout=timeout)

    async def get(
        self, expense_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Expense], httpx.Response]:
        return await self._get(f"expenses/{expense_id}", Expense, timeout=timeout)

    async def create(
        self, data: ExpenseCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Expense], httpx.Response]:
        return await self._post("expenses", data, Expense, timeout=timeout)

    async def update(
        self,
        expense_id: int,
        data: ExpenseUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[Expense], httpx.Response]:
        return await self._patch(
            f"expenses/{expense_id}", data, Expense, timeout=timeout
        )

    async def delete(
        self, expense_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(f"expenses/{expense_id}", timeout=timeout)

    async def list_categories(
        self,
        options: Optional[ExpenseCategoryListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ExpenseCategoryList], httpx.Response]:
        return await self._get(
            "expense_categories", ExpenseCategoryList, options=options, timeout=timeout
        )

    async def get_category(
        self, category_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[ExpenseCategory], httpx.Response]:
        return await self._get(
            f"expense_categories/{category_id}", ExpenseCategory, timeout=timeout
        )

    async def create_category(
        self, data: ExpenseCategoryRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[ExpenseCategory], httpx.Response]:
        return await self._post(
            "expense_categories", data, ExpenseCategory, timeout=timeout
        )

    async def update_category(
        self,
        category_id: int,
        data: ExpenseCategoryRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ExpenseCategory], httpx.Response]:
        return await self._patch(
            f"expense_categories/{category_id}", data, ExpenseCategory, timeout=timeout
        )

    async def delete_category(
        self, category_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(f"expense_categories/{category_id}", timeout=timeout)
