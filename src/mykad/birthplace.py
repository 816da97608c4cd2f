"""
Classification of the place of birth code (the 7th & 8th digits of a MyKad
number), following the numbering of the National Registration Department:
  - 01-16: Malaysian states & federal territories
  - 21-59: additional codes for the same states & territories
  - 60-79: individual foreign countries
  - 82: Malaysia, state unknown
  - 83-93: groups of foreign countries, by region
  - 98, 99: stateless and unspecified
"""

from typing import Dict, Iterable

from .region import Region
from .mykadinfo import BirthPlace
from .helper.exception import InvalidBirthPlace


MALAYSIA = "MY"
UNKNOWN_STATE = "UNKNOWN_STATE"
FOREIGN_UNKNOWN = "FOREIGN_UNKNOWN"
STATELESS = "STATELESS"
UNSPECIFIED = "UNSPECIFIED"


# Place codes assigned to each Malaysian state & federal territory
_STATE_CODES = {
    "JHR": (1, 21, 22, 23, 24),
    "KDH": (2, 25, 26, 27),
    "KTN": (3, 28, 29),
    "MLK": (4, 30),
    "NSN": (5, 31, 59),
    "PHG": (6, 32, 33),
    "PNG": (7, 34, 35),
    "PRK": (8, 36, 37, 38, 39),
    "PLS": (9, 40),
    "SGR": (10, 41, 42, 43, 44),
    "TRG": (11, 45, 46),
    "SBH": (12, 47, 48, 49),
    "SWK": (13, 50, 51, 52, 53),
    "KUL": (14, 54, 55, 56, 57),
    "LBN": (15, 58),
    "PJY": (16,),
    UNKNOWN_STATE: (82,),
}

# Codes for single foreign countries
_COUNTRY_CODES = {
    60: (Region.SOUTHEAST_ASIA, "BN"),
    61: (Region.SOUTHEAST_ASIA, "ID"),
    62: (Region.SOUTHEAST_ASIA, "KH"),
    63: (Region.SOUTHEAST_ASIA, "LA"),
    64: (Region.SOUTHEAST_ASIA, "MM"),
    65: (Region.SOUTHEAST_ASIA, "PH"),
    66: (Region.SOUTHEAST_ASIA, "SG"),
    67: (Region.SOUTHEAST_ASIA, "TH"),
    68: (Region.SOUTHEAST_ASIA, "VN"),
    74: (Region.EAST_ASIA, "CN"),
    75: (Region.SOUTH_ASIA, "IN"),
    76: (Region.SOUTH_ASIA, "PK"),
    77: (Region.MIDDLE_EAST, "SA"),
    78: (Region.SOUTH_ASIA, "LK"),
    79: (Region.SOUTH_ASIA, "BD"),
}

# Codes shared by a group of countries. Lists are kept in registry order
_REGION_CODES = {
    83: (
        Region.ASIA_PACIFIC,
        "AS|AU|CX|CC|CK|FJ|PF|GU|HM|MH|FM|NC|NZ|NU|NF|PG|TL|TK|UM|WF",
    ),
    84: (
        Region.SOUTH_AMERICA,
        "AI|AR|AW|BO|BR|CL|CO|EC|GF|GP|GY|PY|PE|GS|SR|UY|VE",
    ),
    85: (
        Region.AFRICA,
        "DZ|AO|BW|BI|CM|CF|TD|CG|CD|DJ|EG|ER|ET|GA|GM|GH|GN|KE|LR|MW|ML|MR|YT|"
        "MA|MZ|NA|NE|NG|RW|RE|SN|SL|SO|ZA|SD|SZ|TZ|TG|TO|TN|UG|EH|ZR|ZM|ZW",
    ),
    86: (
        Region.EUROPE,
        "AM|AT|BE|CY|DK|FO|FR|FI|DE|DD|GR|VA|IT|LU|MK|MT|MC|NL|NO|PT|MD|SK|SI|"
        "ES|SE|CH",
    ),
    87: (Region.BRITISH_ISLES, "GB|IE"),
    88: (Region.MIDDLE_EAST, "BH|IR|IQ|IL|JO|KW|LB|OM|QA|YE|SY|TR|AE|YD"),
    89: (Region.FAR_EAST, "JP|KP|KR|TW"),
    90: (
        Region.MIDDLE_AMERICA,
        "BS|BB|BZ|CR|CU|DM|DO|SV|GD|GT|HT|HN|JM|MQ|MX|NI|PA|PR|KN|LC|VC|TT|TC|VI",
    ),
    91: (Region.NORTH_AMERICA, "CA|GL|AN|PM|US"),
    92: (
        Region.EASTERN_EUROPE,
        "AL|BY|BA|BG|HR|CZ|CS|EE|GE|HU|LV|LT|ME|PL|XK|RO|RU|RS|UA|SU",
    ),
    93: (
        Region.MISCELLANEOUS,
        "AF|AD|AQ|AG|AZ|BJ|BM|BT|IO|BF|CV|KY|KM|DY|GQ|TF|GI|GW|HK|IS|CI|KZ|KI|KG|"
        "LS|LY|LI|MO|MG|MV|MU|MN|MS|NR|NP|MP|PW|PS|PN|SH|LC|VC|WS|SM|ST|SC|SB|SJ|"
        "TJ|TM|TV|HV|UZ|VU|VA|VG|YU",
    ),
}

# Codes with no region
_SPECIAL_CODES = {
    71: FOREIGN_UNKNOWN,
    72: FOREIGN_UNKNOWN,
    98: STATELESS,
    99: UNSPECIFIED,
}


def _build_table() -> Dict[int, BirthPlace]:
    """
    Assemble the full code -> BirthPlace table
    """
    table = {}
    for state, codes in _STATE_CODES.items():
        for code in codes:
            table[code] = BirthPlace(Region.SOUTHEAST_ASIA, MALAYSIA, state)
    for code, (region, country) in _COUNTRY_CODES.items():
        table[code] = BirthPlace(region, country)
    for code, (region, countries) in _REGION_CODES.items():
        table[code] = BirthPlace(region, countries.split("|"))
    for code, country in _SPECIAL_CODES.items():
        table[code] = BirthPlace(None, country)
    return table


_BIRTHPLACES = _build_table()


def birthplace_codes() -> Iterable[int]:
    """
    Return all the assigned place of birth codes, in ascending order
    """
    return sorted(_BIRTHPLACES)


def is_valid_birthplace(code: int) -> bool:
    """
    Check if a place of birth code has an assigned meaning
    """
    return code in _BIRTHPLACES


def parse_birthplace(code: int) -> BirthPlace:
    """
    Return the place of birth for a code
    """
    try:
        return _BIRTHPLACES[code]
    except KeyError:
        raise InvalidBirthPlace(code) from None
