"""Tests for top-level package lazy exports."""

from __future__ import annotations

import unittest

import observable_subject
from observable_subject.events import Subject


class PackageExportTests(unittest.TestCase):
    """Ensure __getattr__ and exported symbols behave as expected."""

    def test_lazy_exports_resolve_known_symbols(self) -> None:
        for name in observable_subject.__all__:
            with self.subTest(name=name):
                self.assertIsNotNone(getattr(observable_subject, name))
        self.assertIs(observable_subject.Subject, Subject)
        self.assertTrue(callable(observable_subject.load_config))
        self.assertTrue(callable(observable_subject.parse_event_key))

    def test_unknown_symbol_raises_attribute_error(self) -> None:
        with self.assertRaises(AttributeError):
            getattr(observable_subject, "THIS_DOES_NOT_EXIST")


if __name__ == "__main__":
    unittest.main()
