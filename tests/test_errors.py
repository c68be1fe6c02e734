from datetime import timedelta

import httpx
from harvest_api.errors import (
    ErrorDetail,
    HarvestAbuseRateLimitError,
    HarvestHTTPError,
    HarvestRateLimitError,
    Rate,
    check_response,
    sanitize_url,
)

URL = "https://api.harvestapp.com/v2/clients"


def _response(status, *, url=URL, method="GET", headers=None, json=None, content=None):
    return httpx.Response(
        status,
        headers=headers,
        json=json,
        content=content,
        request=httpx.Request(method, url),
    )


def test_success_is_not_an_error():
    for status in (200, 201, 204, 299):
        assert check_response(_response(status)) is None


def test_api_error_carries_server_details():
    resp = _response(
        422,
        method="POST",
        json={
            "message": "Validation failed",
            "errors": [
                {"resource": "Client", "field": "name", "code": "missing", "message": "x"}
            ],
            "documentation_url": "https://help.getharvest.com/api-v2",
        },
    )
    err = check_response(resp)
    assert type(err) is HarvestHTTPError
    assert err.response is resp
    assert err.status_code == 422
    assert err.method == "POST"
    assert err.message == "Validation failed"
    assert err.errors == [ErrorDetail("Client", "name", "missing", "x")]
    assert err.documentation_url == "https://help.getharvest.com/api-v2"
    assert str(err) == (
        f"POST {URL}: 422 Validation failed "
        "[missing error caused by name field on Client resource]"
    )


def test_block_reason_is_exposed():
    err = check_response(_response(403, json={"message": "Blocked", "block": {"reason": "dmca"}}))
    assert err.block_reason == "dmca"


def test_non_json_error_body_still_classifies():
    err = check_response(_response(502, content=b"<html>Bad gateway</html>"))
    assert isinstance(err, HarvestHTTPError)
    assert err.status_code == 502
    assert err.message == ""


def test_secret_is_redacted_from_error_string():
    resp = _response(401, url=URL + "?client_secret=abc&page=1", json={"message": "nope"})
    err = check_response(resp)
    assert "client_secret=REDACTED" in str(err)
    assert "abc" not in str(err)
    assert "client_secret=REDACTED" in err.url


def test_sanitize_url_keeps_other_params():
    url = sanitize_url("https://id.getharvest.com/oauth?client_id=1&client_secret=s3cr3t")
    assert url.params["client_id"] == "1"
    assert url.params["client_secret"] == "REDACTED"
    assert str(sanitize_url(URL)) == URL


def test_retry_after_yields_abuse_rate_limit():
    resp = _response(429, headers={"Retry-After": "30"}, json={"message": "slow down"})
    err = check_response(resp)
    assert isinstance(err, HarvestAbuseRateLimitError)
    assert err.retry_after == timedelta(seconds=30)
    assert err.message == "slow down"
    assert err.response is resp


def test_unparsable_retry_after_is_none():
    err = check_response(_response(429, headers={"Retry-After": "soon"}))
    assert isinstance(err, HarvestAbuseRateLimitError)
    assert err.retry_after is None


def test_exhausted_rate_limit_headers_yield_rate_limit():
    resp = _response(
        429,
        headers={"X-RateLimit-Limit": "100", "X-RateLimit-Remaining": "0"},
        json={"message": "Too many requests"},
    )
    err = check_response(resp)
    assert isinstance(err, HarvestRateLimitError)
    assert err.rate == Rate(limit=100, remaining=0)
    assert str(err).endswith("rate limit")


def test_bare_429_is_abuse_without_retry_after():
    err = check_response(_response(429))
    assert isinstance(err, HarvestAbuseRateLimitError)
    assert err.retry_after is None


def test_all_http_errors_share_base_class():
    assert issubclass(HarvestRateLimitError, HarvestHTTPError)
    assert issubclass(HarvestAbuseRateLimitError, HarvestHTTPError)
