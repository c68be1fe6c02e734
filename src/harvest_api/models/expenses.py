from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from ..values import Date, Timestamp
from .assignments import ProjectUserAssignment
from .base import HarvestModel, ListOptions, Pagination, QueryParam
from .clients import Client
from .invoices import Invoice
from .projects import Project
from .users import User


class ExpenseCategory(HarvestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    unit_name: Optional[str] = None
    unit_price: Optional[float] = None
    is_active: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class ExpenseCategoryList(Pagination):
    expense_categories: List[ExpenseCategory] = []


class ExpenseCategoryListOptions(ListOptions):
    is_active: Annotated[Optional[bool], QueryParam("is_active")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class ExpenseCategoryRequest(HarvestModel):
    name: Optional[str] = None
    unit_name: Optional[str] = None
    unit_price: Optional[float] = None
    is_active: Optional[bool] = None


class Receipt(HarvestModel):
    url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    content_type: Optional[str] = None


class Expense(HarvestModel):
    id: Optional[int] = None
    client: Optional[Client] = None
    project: Optional[Project] = None
    expense_category: Optional[ExpenseCategory] = None
    user: Optional[User] = None
    user_assignment: Optional[ProjectUserAssignment] = None
    receipt: Optional[Receipt] = None
    invoice: Optional[Invoice] = None
    notes: Optional[str] = None
    total_cost: Optional[float] = None
    units: Optional[float] = None
    billable: Optional[bool] = None
    is_closed: Optional[bool] = None
    is_locked: Optional[bool] = None
    is_billed: Optional[bool] = None
    locked_reason: Optional[str] = None
    spent_date: Optional[Date] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class ExpenseList(Pagination):
    expenses: List[Expense] = []


class ExpenseListOptions(ListOptions):
    user_id: Annotated[Optional[int], QueryParam("user_id")] = None
    client_id: Annotated[Optional[int], QueryParam("client_id")] = None
    project_id: Annotated[Optional[int], QueryParam("project_id")] = None
    is_billed: Annotated[Optional[bool], QueryParam("is_billed")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None
    from_: Annotated[Optional[Date], QueryParam("from")] = None
    to: Annotated[Optional[Date], QueryParam("to")] = None


class ExpenseCreateRequest(HarvestModel):
    # project_id, expense_category_id and spent_date are required by the API.
    user_id: Optional[int] = None
    project_id: Optional[int] = None
    expense_category_id: Optional[int] = None
    spent_date: Optional[Date] = None
    total_cost: Optional[float] = None
    units: Optional[float] = None
    notes: Optional[str] = None
    billable: Optional[bool] = None


class ExpenseUpdateRequest(HarvestModel):
    project_id: Optional[int] = None
    expense_category_id: Optional[int] = None
    spent_date: Optional[Date] = None
    total_cost: Optional[float] = None
    units: Optional[float] = None
    notes: Optional[str] = None
    billable: Optional[bool] = None
    delete_receipt: Optional[bool] = None


__all__ = [
    "ExpenseCategory",
    "ExpenseCategoryList",
    "ExpenseCategoryListOptions",
    "ExpenseCategoryRequest",
    "Receipt",
    "Expense",
    "ExpenseList",
    "ExpenseListOptions",
    "ExpenseCreateRequest",
    "ExpenseUpdateRequest",
]
