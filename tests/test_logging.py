"""Tests for logging bootstrap and subject log events."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
import unittest

import structlog

from observable_subject.events import Subject
from observable_subject.logging_utils import configure_logging, package_only_filter


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.WARNING,
        pathname="",
        lineno=0,
        msg="msg",
        args=(),
        exc_info=None,
    )


class SubjectLogEventTests(unittest.TestCase):
    """Subject operations emit dotted debug events."""

    def test_subscribe_and_publish_log_events(self) -> None:
        subject = Subject()
        with self.assertLogs("observable_subject.events.subject", level="DEBUG") as logs:
            subject.subscribe("evt", lambda: False).publish("evt")

        messages = [record.getMessage() for record in logs.records]
        self.assertIn("subject.subscribe", messages)
        self.assertIn("subject.publish", messages)
        self.assertIn("subject.publish.short_circuit", messages)
        publish_record = next(r for r in logs.records if r.getMessage() == "subject.publish")
        self.assertEqual(publish_record.event_name, "evt")
        self.assertEqual(publish_record.listener_count, 1)

    def test_unsubscribe_logs_removed_count(self) -> None:
        subject = Subject()
        subject.subscribe("evt", lambda: None).subscribe("evt", lambda: None)
        with self.assertLogs("observable_subject.events.subject", level="DEBUG") as logs:
            subject.unsubscribe("evt")

        record = next(r for r in logs.records if r.getMessage() == "subject.unsubscribe")
        self.assertEqual(record.removed, 2)


class ConfigureLoggingTests(unittest.TestCase):
    """Validate configure_logging() handler setup behavior."""

    def setUp(self) -> None:
        # Preserve root logger state so tests do not pollute each other.
        root = logging.getLogger()
        self._original_level = root.level
        self._original_handlers = list(root.handlers)

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in root.handlers:
            if handler not in self._original_handlers:
                handler.close()
        root.setLevel(self._original_level)
        root.handlers.clear()
        root.handlers.extend(self._original_handlers)
        structlog.reset_defaults()

    def _stream_handlers(self) -> list[logging.Handler]:
        return [
            h
            for h in logging.getLogger().handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]

    def test_configure_logging_sets_root_level(self) -> None:
        configure_logging({"level": "DEBUG", "structured": False, "log_to_file": False})
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_structured_uses_processor_formatter(self) -> None:
        configure_logging({"level": "INFO", "structured": True, "log_to_file": False})
        formatters = [h.formatter for h in self._stream_handlers()]
        self.assertTrue(
            any(isinstance(f, structlog.stdlib.ProcessorFormatter) for f in formatters)
        )

    def test_plain_formatter_when_not_structured(self) -> None:
        configure_logging({"level": "INFO", "structured": False, "log_to_file": False})
        formatters = [h.formatter for h in self._stream_handlers()]
        self.assertFalse(
            any(isinstance(f, structlog.stdlib.ProcessorFormatter) for f in formatters)
        )

    def test_stderr_handler_is_warning_or_above(self) -> None:
        configure_logging({"level": "DEBUG", "structured": False, "log_to_file": False})
        handler = self._stream_handlers()[0]
        self.assertEqual(handler.level, logging.WARNING)

    def test_stderr_handler_filters_to_package(self) -> None:
        configure_logging({"level": "DEBUG", "structured": False, "log_to_file": False})
        handler = self._stream_handlers()[0]
        self.assertTrue(handler.filter(_record("observable_subject.events.subject")))
        self.assertFalse(handler.filter(_record("observable_subject_other")))
        self.assertFalse(handler.filter(_record("urllib3")))

    def test_file_handler_created(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "observable.log"
            configure_logging(
                {
                    "level": "DEBUG",
                    "structured": False,
                    "log_to_file": True,
                    "log_file_path": str(log_path),
                }
            )
            file_handlers = [
                h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)
            ]
            self.assertEqual(len(file_handlers), 1)
            self.assertTrue(log_path.exists())
            file_handlers[0].close()


class PackageFilterTests(unittest.TestCase):
    def test_package_logger_names(self) -> None:
        self.assertTrue(package_only_filter(_record("observable_subject")))
        self.assertTrue(package_only_filter(_record("observable_subject.config")))
        self.assertFalse(package_only_filter(_record("root")))


if __name__ == "__main__":
    unittest.main()
