from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Type

from dotenv import load_dotenv

from .errors import HarvestConfigError

if TYPE_CHECKING:
    from .client import HarvestClient


@dataclass(frozen=True)
class HarvestConfig:
    access_token: str = ""
    account_id: str = ""
    # Empty means the client defaults.
    base_url: str = ""
    user_agent: str = ""


def load_env_config(*, use_dotenv: bool = True) -> HarvestConfig:
    """Load Harvest credentials and endpoint settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    return HarvestConfig(
        access_token=os.getenv("HARVEST_ACCESS_TOKEN", "").strip(),
        account_id=os.getenv("HARVEST_ACCOUNT_ID", "").strip(),
        base_url=os.getenv("HARVEST_BASE_URL", "").strip(),
        user_agent=os.getenv("HARVEST_USER_AGENT", "").strip(),
    )


def create_client_from_env(
    *,
    use_dotenv: bool = True,
    client_cls: Optional[Type["HarvestClient"]] = None,
    **kwargs: Any,
) -> "HarvestClient":
    """Create a HarvestClient from environment variables."""
    if client_cls is None:
        from .client import HarvestClient as client_cls

    config = load_env_config(use_dotenv=use_dotenv)
    if not config.access_token or not config.account_id:
        raise HarvestConfigError(
            "Missing HARVEST_ACCESS_TOKEN or HARVEST_ACCOUNT_ID in environment."
        )

    kwargs.setdefault("access_token", config.access_token)
    kwargs.setdefault("account_id", config.account_id)
    if config.base_url:
        kwargs.setdefault("base_url", config.base_url)
    if config.user_agent:
        kwargs.setdefault("user_agent", config.user_agent)
    return client_cls(**kwargs)


__all__ = ["HarvestConfig", "load_env_config", "create_client_from_env"]
