import logging

from redmine_client.core.logging import LogfmtFormatter
from redmine_client.core.observability import log_event


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="redmine_client.client",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_includes_known_extras():
    line = LogfmtFormatter().format(
        _record("redmine.request", method="GET", path="issues.json", status=200)
    )

    assert line == (
        "level=debug logger=redmine_client.client event=redmine.request "
        "method=GET path=issues.json status=200"
    )


def test_logfmt_quotes_values_with_spaces():
    line = LogfmtFormatter().format(_record("failed", error_kind="http status"))

    assert 'error_kind="http status"' in line


def test_log_event_drops_reserved_keys(caplog):
    logger = logging.getLogger("redmine_client.test")

    with caplog.at_level(logging.INFO, logger="redmine_client.test"):
        log_event("redmine.thing", logger, resource="issues", name="ignored")

    record = next(r for r in caplog.records if r.getMessage() == "redmine.thing")
    assert record.resource == "issues"
    assert record.name == "redmine_client.test"


def test_setup_logging_writes_logfmt_and_quiets_httpx():
    import io

    from redmine_client.core.logging import setup_logging

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    buf = io.StringIO()
    try:
        setup_logging("debug", stream=buf)
        logging.getLogger("redmine_client.client").debug(
            "redmine.request", extra={"status": 204}
        )

        assert logging.getLogger("httpx").level == logging.WARNING
        assert "event=redmine.request status=204" in buf.getvalue()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.getLogger("httpx").setLevel(logging.NOTSET)
        logging.getLogger("httpcore").setLevel(logging.NOTSET)
