from __future__ import annotations

from typing import Optional

from .base import HarvestModel


class Company(HarvestModel):
    base_uri: Optional[str] = None
    full_domain: Optional[str] = None
    name: Optional[str] = None
    is_active: Optional[bool] = None
    # Saturday, Sunday or Monday.
    week_start_day: Optional[str] = None
    wants_timestamp_timers: Optional[bool] = None
    # decimal or hours_minutes
    time_format: Optional[str] = None
    date_format: Optional[str] = None
    plan_type: Optional[str] = None
    # 12h or 24h
    clock: Optional[str] = None
    currency_code_display: Optional[str] = None
    currency_symbol_display: Optional[str] = None
    decimal_symbol: Optional[str] = None
    thousands_separator: Optional[str] = None
    color_scheme: Optional[str] = None
    weekly_capacity: Optional[int] = None
    expense_feature: Optional[bool] = None
    invoice_feature: Optional[bool] = None
    estimate_feature: Optional[bool] = None
    approval_feature: Optional[bool] = None


__all__ = ["Company"]
