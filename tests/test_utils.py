"""Unit tests for console helpers (aears.utils)."""

from __future__ import annotations

import pytest

from aears.utils import (
    console,
    format_percentage,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


class TestFormatPercentage:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value, expected",
        [(0, "0.0%"), (50, "50.0%"), (33.3333, "33.3%"), (100.0, "100.0%")],
    )
    def test_format(self, value, expected):
        assert format_percentage(value) == expected


class TestConsoleHelpers:
    @pytest.mark.unit
    def test_messages(self):
        with console.capture() as capture:
            print_success("done")
            print_warning("careful")
            print_error("broken")
        output = capture.get()
        assert "done" in output
        assert "careful" in output
        assert "broken" in output

    @pytest.mark.unit
    def test_summary_table(self):
        with console.capture() as capture:
            print_summary_table({"Items": "3", "Failed": "0"}, title="Run")
        output = capture.get()
        assert "Run" in output
        assert "Items" in output
        assert "Failed" in output
