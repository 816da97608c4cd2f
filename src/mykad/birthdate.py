"""
Resolve the two-digit year of a MyKad birth date into a full date

The century is chosen relative to the current date: a number is never
considered to belong to somebody older than 100 years. This means the
same number can decode to a different date decades apart.
"""

from datetime import date

from typing import Optional


def resolve_birth_date(
    year: int, month: int, day: int, today: date = None
) -> Optional[date]:
    """
    Convert a two-digit year, a month and a day into a date, or return None
    if they do not form a real calendar date
     :param today: reference date for the century window (default: today)
    """
    if today is None:
        today = date.today()

    full_year = 1900 + year
    age = today.year - full_year
    if age > 100 or (age == 100 and (month, day) < (today.month, today.day)):
        full_year += 100

    try:
        return date(full_year, month, day)
    except ValueError:
        return None


def birth_date_code(birth_date: date) -> str:
    """
    Encode a date as the YYMMDD prefix of a MyKad number
    """
    return birth_date.strftime("%y%m%d")
