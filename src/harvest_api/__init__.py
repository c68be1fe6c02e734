"""harvest_api package exports."""

from .client import (
    DEFAULT_BASE_URL,
    DEFAULT_MEDIA_TYPE,
    DEFAULT_USER_AGENT,
    DRAIN_LIMIT,
    HarvestClient,
    __version__,
)
from .config import HarvestConfig, create_client_from_env, load_env_config
from .errors import (
    DateParseError,
    ErrorDetail,
    HarvestAbuseRateLimitError,
    HarvestBuildRequestError,
    HarvestClientError,
    HarvestConfigError,
    HarvestEncodeBodyError,
    HarvestEncodeOptionsError,
    HarvestHTTPError,
    HarvestParseError,
    HarvestRateLimitError,
    HarvestTransportError,
    Rate,
    TimeParseError,
    check_response,
    sanitize_url,
)
from .pagination import next_page_options, next_page_url, parse_page_from_href
from .query import add_options
from .services import RetainerService
from .stringify import stringify
from .values import (
    Date,
    Time,
    Timestamp,
    as_bool,
    as_date,
    as_float,
    as_int32,
    as_int64,
    as_string,
    as_time,
    as_timestamp,
)

__all__ = [
    # Client
    "HarvestClient",
    "RetainerService",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "DEFAULT_MEDIA_TYPE",
    "DRAIN_LIMIT",
    "__version__",
    # Config helpers
    "HarvestConfig",
    "load_env_config",
    "create_client_from_env",
    # Exceptions
    "HarvestClientError",
    "HarvestConfigError",
    "HarvestEncodeOptionsError",
    "HarvestEncodeBodyError",
    "HarvestBuildRequestError",
    "HarvestTransportError",
    "HarvestHTTPError",
    "HarvestRateLimitError",
    "HarvestAbuseRateLimitError",
    "HarvestParseError",
    "DateParseError",
    "TimeParseError",
    "ErrorDetail",
    "Rate",
    "check_response",
    "sanitize_url",
    # Values
    "Date",
    "Time",
    "Timestamp",
    "as_bool",
    "as_int32",
    "as_int64",
    "as_float",
    "as_string",
    "as_date",
    "as_time",
    "as_timestamp",
    "stringify",
    # Query and pagination
    "add_options",
    "next_page_url",
    "next_page_options",
    "parse_page_from_href",
]
