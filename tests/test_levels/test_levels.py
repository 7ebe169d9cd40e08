"""Tests for Severity ordering, parsing and stdlib mapping."""

import logging

import pytest

from partlog.core.levels import TRACE_LEVEL, Severity


class TestOrdering:
    def test_numeric_values(self):
        assert [s.value for s in Severity] == [0, 1, 2, 3, 4, 5]

    def test_total_order(self):
        assert Severity.TRACE < Severity.DEBUG < Severity.INFO < Severity.WARN
        assert Severity.WARN < Severity.ERROR < Severity.FATAL

    def test_cardinality(self):
        assert len(Severity) == 6


class TestParse:
    @pytest.mark.parametrize("name,expected", [
        ("Trace", Severity.TRACE),
        ("debug", Severity.DEBUG),
        ("INFO", Severity.INFO),
        ("warn", Severity.WARN),
        ("warning", Severity.WARN),
        (" Error ", Severity.ERROR),
        ("fatal", Severity.FATAL),
        ("critical", Severity.FATAL),
    ])
    def test_names(self, name, expected):
        assert Severity.parse(name) is expected

    def test_passthrough(self):
        assert Severity.parse(Severity.ERROR) is Severity.ERROR

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown severity"):
            Severity.parse("verbose")


class TestStdlibLevel:
    def test_mapping(self):
        assert Severity.TRACE.stdlib_level == TRACE_LEVEL == 5
        assert Severity.DEBUG.stdlib_level == logging.DEBUG
        assert Severity.INFO.stdlib_level == logging.INFO
        assert Severity.WARN.stdlib_level == logging.WARNING
        assert Severity.ERROR.stdlib_level == logging.ERROR
        assert Severity.FATAL.stdlib_level == logging.CRITICAL

    def test_order_preserved(self):
        stdlib = [s.stdlib_level for s in Severity]
        assert stdlib == sorted(stdlib)
