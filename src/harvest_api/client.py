import json
import logging
import time
from typing import Any, BinaryIO, Optional, Tuple, Type, TypeVar

import anyio
import anyio.lowlevel
import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .errors import (
    HarvestBuildRequestError,
    HarvestConfigError,
    HarvestEncodeBodyError,
    HarvestParseError,
    HarvestTransportError,
    check_response,
    sanitize_url,
)
from .query import add_options
from .services import (
    ClientService,
    CompanyService,
    EstimateService,
    ExpenseService,
    InvoiceService,
    ProjectService,
    RoleService,
    TaskService,
    TimesheetService,
    UserService,
)

__version__ = "0.1.0"

DEFAULT_BASE_URL = "https://api.harvestapp.com/v2/"
DEFAULT_USER_AGENT = f"harvest-api-python/{__version__}"
DEFAULT_MEDIA_TYPE = "application/json"
ACCOUNT_ID_HEADER = "Harvest-Account-Id"
# Unread bytes consumed before closing so the connection can go back to the pool.
DRAIN_LIMIT = 512

T = TypeVar("T", bound=BaseModel)


def encode_body(body: Any) -> bytes:
    """
    JSON-encode a request body.
    Models drop fields that were never set; non-ASCII text and characters
    such as ``&`` or ``<`` are written verbatim.
    """
    try:
        if isinstance(body, BaseModel):
            payload = body.model_dump(mode="json", by_alias=True, exclude_unset=True)
        else:
            payload = to_jsonable_python(body, by_alias=True)
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, PydanticSerializationError) as exc:
        raise HarvestEncodeBodyError(
            f"cannot encode {type(body).__name__} as JSON: {exc}"
        ) from exc
    return text.encode("utf-8")


class HarvestClient:
    """
    Async client for the Harvest v2 REST API.
    - Builds requests against a base URL that must end with "/"
    - Sends the Harvest-Account-Id tenant header and a User-Agent
    - Raises typed errors for non-2xx responses; nothing is retried
    - Exposes one service per resource family (clients, invoices, ...)
    """

    def __init__(
        self,
        *,
        access_token: Optional[str] = None,
        account_id: str = "",
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout_seconds: float = 30.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self.account_id = str(account_id or "")
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("harvest_api.client")

        headers = {"Accept": DEFAULT_MEDIA_TYPE}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(headers=headers, timeout=timeout_seconds)

        self.clients = ClientService(self)
        self.company = CompanyService(self)
        self.estimates = EstimateService(self)
        self.expenses = ExpenseService(self)
        self.invoices = InvoiceService(self)
        self.projects = ProjectService(self)
        self.roles = RoleService(self)
        self.tasks = TaskService(self)
        self.timesheets = TimesheetService(self)
        self.users = UserService(self)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "HarvestClient":
        from .config import create_client_from_env

        return create_client_from_env(client_cls=cls, **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "HarvestClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """
        Build a request for ``path`` resolved against the base URL.
        Absolute URLs (e.g. pagination links) are used as given.
        """
        try:
            base = httpx.URL(self.base_url)
        except httpx.InvalidURL as exc:
            raise HarvestConfigError(f"invalid base_url {self.base_url!r}: {exc}") from exc
        # httpx reports an empty path as "/", so check the configured text.
        if not self.base_url.split("?", 1)[0].split("#", 1)[0].endswith("/"):
            raise HarvestConfigError(
                f"base_url must have a trailing slash, but {self.base_url!r} does not"
            )
        if path.startswith("/"):
            raise HarvestBuildRequestError(
                f"path must be relative to base_url, got {path!r}"
            )
        try:
            url = base.join(path)
        except httpx.InvalidURL as exc:
            raise HarvestBuildRequestError(f"invalid request path {path!r}: {exc}") from exc

        headers = {}
        content = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = DEFAULT_MEDIA_TYPE
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        if self.account_id:
            headers[ACCOUNT_ID_HEADER] = self.account_id

        return self.http.build_request(method.upper(), url, headers=headers, content=content)

    async def do(
        self,
        request: httpx.Request,
        model: Optional[Type[T]] = None,
        *,
        writer: Optional[BinaryIO] = None,
        timeout: Optional[float] = None,
        service: Optional[str] = None,
    ) -> Tuple[Optional[T], httpx.Response]:
        """
        Send a built request and handle the response.
        - Raises HarvestHTTPError (or a rate-limit subclass) on non-2xx,
          with the response attached
        - Copies the body verbatim into ``writer`` when given
        - Otherwise validates the JSON body into ``model``; an empty body
          decodes to None
        - A ``timeout`` in seconds bounds the whole exchange and raises
          TimeoutError when exceeded
        The response body is always drained and closed before returning.
        """
        # Cancelled callers never reach the network.
        await anyio.lowlevel.checkpoint()

        method = request.method
        safe_url = str(sanitize_url(request.url))
        start = time.perf_counter()

        with anyio.fail_after(timeout) as scope:
            try:
                response = await self.http.send(request, stream=True)
            except httpx.HTTPError as exc:
                self.log.debug(
                    "harvest.transport_error",
                    extra={"service": service, "method": method, "url": safe_url},
                )
                if scope.cancel_called or anyio.current_time() >= scope.deadline:
                    raise TimeoutError(f"{method} {safe_url} timed out") from exc
                raise HarvestTransportError(method=method, url=safe_url, cause=exc) from exc

            try:
                return await self._handle(response, model, writer, service, start)
            finally:
                await self._drain_and_close(response)

    async def _handle(
        self,
        response: httpx.Response,
        model: Optional[Type[T]],
        writer: Optional[BinaryIO],
        service: Optional[str],
        start: float,
    ) -> Tuple[Optional[T], httpx.Response]:
        method = response.request.method
        safe_url = str(sanitize_url(response.request.url))

        self.log.debug(
            "harvest.request",
            extra={
                "service": service,
                "method": method,
                "url": safe_url,
                "status": response.status_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )

        try:
            if not response.is_success:
                await response.aread()
                error = check_response(response)
                if error is not None:
                    raise error

            if writer is not None:
                async for chunk in response.aiter_bytes():
                    writer.write(chunk)
                return None, response

            if model is None:
                return None, response

            content = await response.aread()
        except httpx.HTTPError as exc:
            raise HarvestTransportError(method=method, url=safe_url, cause=exc) from exc

        return self._decode(response, content, model), response

    def _decode(
        self, response: httpx.Response, content: bytes, model: Type[T]
    ) -> Optional[T]:
        # Empty bodies (e.g. 204 No Content) decode to nothing.
        if not content.strip():
            return None

        method = response.request.method
        url = sanitize_url(response.request.url)
        try:
            data = json.loads(content)
        except ValueError as exc:
            snippet = content[:500].decode("utf-8", errors="replace")
            raise HarvestParseError(
                f"Expected JSON from {method} {url}, got non-JSON body snippet: "
                f"{snippet!r}",
                response=response,
            ) from exc

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise HarvestParseError(
                f"Response from {method} {url} did not match model "
                f"{model.__name__}: {exc}",
                response=response,
            ) from exc

    async def _drain_and_close(self, response: httpx.Response) -> None:
        with anyio.CancelScope(shield=True):
            try:
                try:
                    if not response.is_closed and not response.is_stream_consumed:
                        drained = 0
                        chunks = response.aiter_raw()
                        try:
                            async for chunk in chunks:
                                drained += len(chunk)
                                if drained >= DRAIN_LIMIT:
                                    break
                        finally:
                            await chunks.aclose()
                finally:
                    await response.aclose()
            except httpx.HTTPError as exc:
                self.log.debug(
                    "harvest.close_failed",
                    extra={"url": str(sanitize_url(response.request.url))},
                    exc_info=exc,
                )

    async def request(
        self,
        method: str,
        path: str,
        *,
        options: Optional[BaseModel] = None,
        body: Any = None,
        model: Optional[Type[T]] = None,
        writer: Optional[BinaryIO] = None,
        timeout: Optional[float] = None,
        service: Optional[str] = None,
    ) -> Tuple[Optional[T], httpx.Response]:
        url = add_options(path, options)
        request = self.new_request(method, url, body)
        return await self.do(
            request, model, writer=writer, timeout=timeout, service=service
        )

    async def get(
        self,
        path: str,
        model: Optional[Type[T]] = None,
        *,
        options: Optional[BaseModel] = None,
        timeout: Optional[float] = None,
        service: Optional[str] = None,
    ) -> Tuple[Optional[T], httpx.Response]:
        return await self.request(
            "GET", path, options=options, model=model, timeout=timeout, service=service
        )

    async def post(
        self,
        path: str,
        body: Any,
        model: Optional[Type[T]] = None,
        *,
        timeout: Optional[float] = None,
        service: Optional[str] = None,
    ) -> Tuple[Optional[T], httpx.Response]:
        return await self.request(
            "POST", path, body=body, model=model, timeout=timeout, service=service
        )

    async def patch(
        self,
        path: str,
        body: Any = None,
        model: Optional[Type[T]] = None,
        *,
        timeout: Optional[float] = None,
        service: Optional[str] = None,
    ) -> Tuple[Optional[T], httpx.Response]:
        return await self.request(
            "PATCH", path, body=body, model=model, timeout=timeout, service=service
        )

    async def delete(
        self,
        path: str,
        *,
        timeout: Optional[float] = None,
        service: Optional[str] = None,
    ) -> httpx.Response:
        _, response = await self.request(
            "DELETE", path, timeout=timeout, service=service
        )
        return response


__all__ = [
    "HarvestClient",
    "encode_body",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "DEFAULT_MEDIA_TYPE",
    "ACCOUNT_ID_HEADER",
    "DRAIN_LIMIT",
]
