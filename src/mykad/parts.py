"""
Split a MyKad number into its fixed-width fields
"""

import regex

from typing import NamedTuple

from .helper.exception import FormatError


# YYMMDD-PP-SSSG, with either both separators or none
_MYKAD_PATTERN = r"""
    ([0-9]{2}) ([0-9]{2}) ([0-9]{2})
    (?P<sep> -? )
    ([0-9]{2})
    (?P=sep)
    ([0-9]{3}) ([0-9])
"""

_MYKAD_REGEX = regex.compile(_MYKAD_PATTERN, flags=regex.X | regex.VERSION0)


class Parts(NamedTuple):
    year: str
    month: str
    day: str
    place: str
    serial: str
    gender: str

    def unformatted(self) -> str:
        return "".join(self)

    def formatted(self) -> str:
        return f"{self.year}{self.month}{self.day}-{self.place}-{self.serial}{self.gender}"


def split(number: str) -> Parts:
    """
    Extract the six digit fields of a MyKad number, either formatted
    (YYMMDD-PP-SSSG) or unformatted (YYMMDDPPSSSG)
    """
    if not isinstance(number, str):
        raise FormatError()
    m = _MYKAD_REGEX.fullmatch(number)
    if not m:
        raise FormatError()
    yy, mm, dd, _, pp, sss, g = m.groups()
    return Parts(yy, mm, dd, pp, sss, g)
