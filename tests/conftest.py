"""Shared fixtures for unicode_skeleton tests."""

import pytest

from unicode_skeleton.data import reset_table
from unicode_skeleton.table import ConfusablesTable


@pytest.fixture
def fresh_table():
    """Drop the process-wide table before and after the test."""
    reset_table()
    yield
    reset_table()


@pytest.fixture
def small_table() -> ConfusablesTable:
    return ConfusablesTable(
        [
            (0x0441, [0x0063]),  # с -> c
            (0x0455, [0x0073]),  # ѕ -> s
            (0x216B, [0x0058, 0x006C, 0x006C]),  # Ⅻ -> Xll
        ]
    )


@pytest.fixture
def confusables_file(tmp_path):
    path = tmp_path / "confusables.txt"
    path.write_text(
        "\ufeff# confusables.txt\n"
        "# Version: test\n"
        "\n"
        "216B ;\t0058 006C 006C ;\tMA\t# ( Ⅻ → Xll ) ROMAN NUMERAL TWELVE\n"
        "0441 ;\t0063 ;\tMA\t# ( с → c ) CYRILLIC SMALL LETTER ES\n",
        encoding="utf-8",
    )
    return path
