"""Tests for perch.taghelpers.diagnostics — skip warnings and verbose traces."""

import logging
from typing import Any

from perch.config import SCRIPT_FALLBACK
from perch.taghelpers.context import element
from perch.taghelpers.diagnostics import (
    MissingAttributeEvent,
    NullLogger,
    TagHelperLogger,
    all_required_attributes_are_present,
    missing_attributes,
)
from perch.taghelpers.fallback import Outcome, ScriptTagHelper


class RecordingLogger:
    """Keeps every (level, message, extra) it is handed."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.logged: list[tuple[int, str, dict[str, Any]]] = []

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802
        return self.enabled

    def log(self, level: int, msg: object, *args: object, **kwargs: Any) -> None:
        self.logged.append((level, str(msg) % args, kwargs.get("extra", {})))


def _context(attributes: dict[str, str], unique_id: str = "abc123"):
    return element(
        "script",
        attributes,
        directives=SCRIPT_FALLBACK.required_attributes,
        unique_id=unique_id,
    )


class TestLoggerProtocol:
    def test_stdlib_logger_satisfies_protocol(self) -> None:
        assert isinstance(logging.getLogger("perch.taghelpers"), TagHelperLogger)

    def test_null_logger_satisfies_protocol(self) -> None:
        assert isinstance(NullLogger(), TagHelperLogger)

    def test_null_logger_is_never_enabled(self) -> None:
        assert NullLogger().isEnabledFor(logging.CRITICAL) is False
        assert NullLogger().log(logging.WARNING, "ignored") is None


class TestSkipDiagnostics:
    async def test_one_missing_attribute_logs_warning_then_trace(self) -> None:
        logger = RecordingLogger()
        context, output = _context({"asp-fallback-test": "isavailable()"})

        assert await ScriptTagHelper(logger=logger).process(context, output) is Outcome.SKIP

        assert len(logger.logged) == 2
        level, message, extra = logger.logged[0]
        assert level == logging.WARNING
        assert extra["missing_attributes"] == ("asp-fallback-src",)
        assert isinstance(extra["event"], MissingAttributeEvent)
        assert "asp-fallback-src" in message

        level, message, extra = logger.logged[1]
        assert level == logging.DEBUG
        assert message == "Skipping processing for ScriptTagHelper abc123"
        assert extra == {"unique_id": "abc123"}

    async def test_all_missing_logs_trace_only(self) -> None:
        logger = RecordingLogger()
        context, output = _context({"src": "/a.js"})

        await ScriptTagHelper(logger=logger).process(context, output)

        assert len(logger.logged) == 1
        assert logger.logged[0][0] == logging.DEBUG
        assert logger.logged[0][1].startswith("Skipping processing for ScriptTagHelper")

    async def test_trace_is_not_built_when_verbose_disabled(self) -> None:
        logger = RecordingLogger(enabled=False)
        context, output = _context({"asp-fallback-src": "/b.js"})

        await ScriptTagHelper(logger=logger).process(context, output)

        assert [entry[0] for entry in logger.logged] == [logging.WARNING]

    async def test_rewrite_logs_nothing(self) -> None:
        logger = RecordingLogger()
        context, output = _context(
            {"src": "/a.js", "asp-fallback-src": "/b.js", "asp-fallback-test": "t()"}
        )
        await ScriptTagHelper(logger=logger).process(context, output)
        assert logger.logged == []

    async def test_stdlib_logging_records(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="perch.taghelpers")
        context, output = _context({"asp-fallback-src": "/b.js"}, unique_id="req-7")

        await ScriptTagHelper().process(context, output)

        warning, trace = [r for r in caplog.records if r.name == "perch.taghelpers"]
        assert warning.levelno == logging.WARNING
        assert warning.missing_attributes == ("asp-fallback-test",)
        assert warning.getMessage() == (
            "Tag helper ScriptTagHelper had the following missing attributes: asp-fallback-test"
        )
        assert trace.levelno == logging.DEBUG
        assert trace.getMessage() == "Skipping processing for ScriptTagHelper req-7"


class TestRequiredAttributes:
    def test_missing_attributes_in_required_order(self) -> None:
        context, _ = _context({"data-x": "1"})
        assert missing_attributes(context, ("b", "a")) == ("b", "a")

    def test_present_returns_true_without_logging(self) -> None:
        logger = RecordingLogger()
        context, _ = _context({"a": "1", "B": "2"})
        assert all_required_attributes_are_present(context, ("a", "b"), logger, helper="X")
        assert logger.logged == []

    def test_event_format(self) -> None:
        event = MissingAttributeEvent(helper="X", unique_id="1", missing_attributes=("a", "b"))
        assert event.format() == "Tag helper X had the following missing attributes: a, b"
