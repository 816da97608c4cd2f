from datetime import date

import pytest

import mykad.birthdate as mod


TODAY = date(2023, 6, 1)


class FixedDate(date):
    @classmethod
    def today(cls):
        return TODAY


TEST = [
    ((91, 4, 1), date(1991, 4, 1)),
    ((46, 9, 11), date(1946, 9, 11)),
    ((0, 11, 3), date(2000, 11, 3)),
    ((23, 1, 15), date(2023, 1, 15)),
    ((22, 12, 31), date(2022, 12, 31)),
    ((30, 1, 1), date(1930, 1, 1)),
    ((99, 12, 31), date(1999, 12, 31)),
    # Exactly 100 years: the earlier century only if the birthday
    # has not passed yet this year
    ((23, 5, 31), date(2023, 5, 31)),
    ((23, 6, 1), date(1923, 6, 1)),
    ((23, 6, 2), date(1923, 6, 2)),
    # Leap years
    ((0, 2, 29), date(2000, 2, 29)),
    ((96, 2, 29), date(1996, 2, 29)),
]

TEST_INVALID = [
    (11, 2, 34),
    (11, 2, 0),
    (54, 13, 24),
    (54, 0, 24),
    (54, 13, 52),
    (54, 0, 0),
    (91, 4, 31),
    (11, 2, 30),
    (1, 2, 29),
    (97, 2, 29),
]


def test10_resolve():
    for (yy, mm, dd), exp in TEST:
        assert mod.resolve_birth_date(yy, mm, dd, today=TODAY) == exp


@pytest.mark.parametrize("fields", TEST_INVALID)
def test20_invalid(fields):
    assert mod.resolve_birth_date(*fields, today=TODAY) is None


def test30_window_moves():
    """
    The same two-digit year resolves to a different century as time passes
    """
    assert mod.resolve_birth_date(25, 3, 1, today=date(2024, 1, 1)) == date(
        1925, 3, 1
    )
    assert mod.resolve_birth_date(25, 3, 1, today=date(2026, 1, 1)) == date(
        2025, 3, 1
    )


def test40_default_today(monkeypatch):
    monkeypatch.setattr(mod, "date", FixedDate)
    assert mod.resolve_birth_date(91, 4, 1) == date(1991, 4, 1)
    assert mod.resolve_birth_date(23, 5, 31) == date(2023, 5, 31)
    assert mod.resolve_birth_date(23, 6, 1) == date(1923, 6, 1)


def test50_code():
    assert mod.birth_date_code(date(1946, 9, 11)) == "460911"
    assert mod.birth_date_code(date(2003, 1, 2)) == "030102"
