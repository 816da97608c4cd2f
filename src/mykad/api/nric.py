"""
Validation, decoding and formatting of MyKad numbers

The number has the form YYMMDD-PP-SSSG:
  * YYMMDD: date of birth
  * PP: place of birth code
  * SSS: serial number
  * G: gender digit (odd for male, even for female)

There is no check digit, so validity is given by the date of birth being a
real date and the place of birth code having an assigned meaning.
"""

from datetime import date

from ..parts import Parts, split
from ..birthdate import resolve_birth_date
from ..birthplace import is_valid_birthplace, parse_birthplace
from ..mykadinfo import MyKadInfo
from ..helper.exception import FormatError, InvalidBirthDate
from ..helper.callback import with_callback


def _gender(digit: str) -> str:
    return "female" if int(digit) % 2 == 0 else "male"


def _birth_date(parts: Parts, today: date = None) -> date:
    birth_date = resolve_birth_date(
        int(parts.year), int(parts.month), int(parts.day), today=today
    )
    if birth_date is None:
        raise InvalidBirthDate(parts.formatted())
    return birth_date


def is_valid(number: str, today: date = None) -> bool:
    """
    Check if a string is a valid MyKad number, formatted or not
     :param today: reference date used to resolve the century of the birth
        date (default: today)
    """
    try:
        parts = split(number)
    except FormatError:
        return False
    birth_date = resolve_birth_date(
        int(parts.year), int(parts.month), int(parts.day), today=today
    )
    return birth_date is not None and is_valid_birthplace(int(parts.place))


def validate(number: str, today: date = None) -> str:
    """
    Check a MyKad number and return it in unformatted form. Raise a
    FormatError (or a more specific subclass) if it is not valid
    """
    parts = split(number)
    _birth_date(parts, today)
    parse_birthplace(int(parts.place))
    return parts.unformatted()


@with_callback
def parse(number: str, today: date = None) -> MyKadInfo:
    """
    Decode the date of birth, place of birth and gender in a MyKad number
    """
    parts = split(number)
    return MyKadInfo(
        _birth_date(parts, today),
        parse_birthplace(int(parts.place)),
        _gender(parts.gender),
    )


@with_callback
def format(number: str) -> str:
    """
    Return a MyKad number in the YYMMDD-PP-SSSG form
    """
    return split(number).formatted()


@with_callback
def unformat(number: str) -> str:
    """
    Return a MyKad number as a plain 12 digit string
    """
    return format(number).replace("-", "")
