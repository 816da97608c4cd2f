import pytest

from mykad import Region, BirthPlace
from mykad.helper.exception import InvalidBirthPlace, FormatError
import mykad.birthplace as mod


INVALID_CODES = [0, 17, 18, 19, 20, 69, 70, 73, 80, 81, 94, 95, 96, 97]

MIDDLE_AMERICA = (
    "BS|BB|BZ|CR|CU|DM|DO|SV|GD|GT|HT|HN|JM|MQ|MX|NI|PA|PR|KN|LC|VC|TT|TC|VI"
)

MISCELLANEOUS = (
    "AF|AD|AQ|AG|AZ|BJ|BM|BT|IO|BF|CV|KY|KM|DY|GQ|TF|GI|GW|HK|"
    "IS|CI|KZ|KI|KG|LS|LY|LI|MO|MG|MV|MU|MN|MS|NR|NP|MP|PW|PS|"
    "PN|SH|LC|VC|WS|SM|ST|SC|SB|SJ|TJ|TM|TV|HV|UZ|VU|VA|VG|YU"
)

TEST = [
    (1, BirthPlace(Region.SOUTHEAST_ASIA, "MY", "JHR")),
    (2, BirthPlace(Region.SOUTHEAST_ASIA, "MY", "KDH")),
    (4, BirthPlace(Region.SOUTHEAST_ASIA, "MY", "MLK")),
    (16, BirthPlace(Region.SOUTHEAST_ASIA, "MY", "PJY")),
    (21, BirthPlace(Region.SOUTHEAST_ASIA, "MY", "JHR")),
    (37, BirthPlace(Region.SOUTHEAST_ASIA, "MY", "PRK")),
    (59, BirthPlace(Region.SOUTHEAST_ASIA, "MY", "NSN")),
    (82, BirthPlace(Region.SOUTHEAST_ASIA, "MY", "UNKNOWN_STATE")),
    (63, BirthPlace(Region.SOUTHEAST_ASIA, "LA")),
    (74, BirthPlace(Region.EAST_ASIA, "CN")),
    (78, BirthPlace(Region.SOUTH_ASIA, "LK")),
    (71, BirthPlace(None, "FOREIGN_UNKNOWN")),
    (72, BirthPlace(None, "FOREIGN_UNKNOWN")),
    (87, BirthPlace(Region.BRITISH_ISLES, ["GB", "IE"])),
    (90, BirthPlace(Region.MIDDLE_AMERICA, MIDDLE_AMERICA.split("|"))),
    (93, BirthPlace(Region.MISCELLANEOUS, MISCELLANEOUS.split("|"))),
    (98, BirthPlace(None, "STATELESS")),
    (99, BirthPlace(None, "UNSPECIFIED")),
]


def test10_parse():
    for code, exp in TEST:
        assert mod.parse_birthplace(code) == exp


def test20_valid():
    for code, _ in TEST:
        assert mod.is_valid_birthplace(code)


def test30_invalid():
    for code in INVALID_CODES:
        assert not mod.is_valid_birthplace(code)
        with pytest.raises(InvalidBirthPlace):
            mod.parse_birthplace(code)


def test40_table_membership():
    """
    Every code in 0-99 is either in the table or in the invalid list
    """
    codes = list(mod.birthplace_codes())
    assert len(codes) == 86
    assert sorted(codes + INVALID_CODES) == list(range(100))


def test50_country_alternation():
    assert mod.parse_birthplace(90).country_code == MIDDLE_AMERICA
    assert mod.parse_birthplace(93).country_code == MISCELLANEOUS
    assert mod.parse_birthplace(2).country_code == "MY"
    assert "MX" in mod.parse_birthplace(90).country
    assert isinstance(mod.parse_birthplace(90).country, frozenset)


def test60_state_only_for_malaysia():
    for code in mod.birthplace_codes():
        place = mod.parse_birthplace(code)
        if place.country == "MY":
            assert place.region == Region.SOUTHEAST_ASIA
            assert place.state is not None
        else:
            assert place.state is None


def test70_error():
    with pytest.raises(FormatError) as e:
        mod.parse_birthplace(95)
    assert str(e.value) == "Invalid MyKad place of birth code: 95"
