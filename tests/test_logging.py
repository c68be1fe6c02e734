import logging

from harvest_api.logging import LogfmtFormatter, setup_logging


def _record(msg, **extra):
    record = logging.LogRecord("harvest_api.client", logging.DEBUG, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_renders_known_extras():
    line = LogfmtFormatter().format(
        _record(
            "harvest.request",
            method="GET",
            url="https://api.harvestapp.com/v2/clients?page=2",
            status=200,
            duration_ms=12,
            service="clients",
        )
    )
    assert line == (
        "level=debug logger=harvest_api.client event=harvest.request "
        "service=clients method=GET "
        'url="https://api.harvestapp.com/v2/clients?page=2" status=200 duration_ms=12'
    )


def test_logfmt_skips_missing_extras():
    line = LogfmtFormatter().format(_record("harvest.transport_error", method="POST"))
    assert line == (
        "level=debug logger=harvest_api.client event=harvest.transport_error method=POST"
    )


def test_setup_logging_is_idempotent():
    setup_logging("debug")
    setup_logging("debug")
    log = logging.getLogger("harvest_api")
    try:
        assert len(log.handlers) == 1
        assert isinstance(log.handlers[0].formatter, LogfmtFormatter)
        assert log.level == logging.DEBUG
    finally:
        for handler in list(log.handlers):
            log.removeHandler(handler)
        log.setLevel(logging.NOTSET)
