from datetime import date

from typing import Dict, FrozenSet, Iterable, Optional, Union

from .region import Region


TYPE_COUNTRY = Union[str, FrozenSet[str]]


class _Frozen:
    """
    Base for value objects whose fields cannot change after construction
    """

    __slots__ = ()

    def _set(self, **fields):
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")


class BirthPlace(_Frozen):
    """
    The place of birth encoded in a MyKad number. It contains as fields:
      * region, a Region (or None for foreign-unknown, stateless and
        unspecified codes)
      * country, an ISO 3166 country code, a literal sentinel such as
        "STATELESS", or a frozenset of country codes when several countries
        share the same place code
      * state, the Malaysian state abbreviation (or None outside Malaysia)
    """

    __slots__ = "region", "country", "state", "_order"

    def __init__(
        self,
        region: Optional[Region],
        country: Union[str, Iterable[str]],
        state: str = None,
    ):
        if isinstance(country, str):
            order = (country,)
        else:
            order = tuple(country)
            country = frozenset(order)
        self._set(region=region, country=country, state=state, _order=order)

    @property
    def country_code(self) -> str:
        """
        The country as a single string, with country sets joined by "|"
        """
        return "|".join(self._order)

    def __repr__(self):
        return f"<BirthPlace {self.region}:{self.country_code}:{self.state}>"

    def __eq__(self, other):
        if not isinstance(other, BirthPlace):
            return NotImplemented
        return (
            self.region == other.region
            and self.country == other.country
            and self.state == other.state
        )

    def __hash__(self):
        return hash((self.region, self.country, self.state))

    def to_json(self) -> Dict:
        return {
            "region": self.region.value if self.region else None,
            "country": self.country_code,
            "state": self.state,
        }


class MyKadInfo(_Frozen):
    """
    All the information decoded from a MyKad number:
      * birth_date, a datetime.date
      * birth_place, a BirthPlace
      * gender, either "male" or "female"
    """

    __slots__ = "birth_date", "birth_place", "gender"

    def __init__(self, birth_date: date, birth_place: BirthPlace, gender: str):
        self._set(birth_date=birth_date, birth_place=birth_place, gender=gender)

    def __repr__(self):
        return f"<MyKadInfo {self.birth_date}:{self.birth_place!r}:{self.gender}>"

    def __eq__(self, other):
        if not isinstance(other, MyKadInfo):
            return NotImplemented
        return (
            self.birth_date == other.birth_date
            and self.birth_place == other.birth_place
            and self.gender == other.gender
        )

    def __hash__(self):
        return hash((self.birth_date, self.birth_place, self.gender))

    def to_json(self) -> Dict:
        """
        Return the object data as a dict that can then be serialised as JSON
        (with CustomJSONEncoder)
        """
        return mykadinfo_asdict(self)


def mykadinfo_asdict(info: MyKadInfo, number: str = None) -> Dict:
    """
    Create a dictionary from a MyKadInfo object. Values are kept as objects
    (date, BirthPlace); serialise it with CustomJSONEncoder
     :param number: add the (formatted) number the info was decoded from
    """
    n = {"number": number} if number else {}
    return {
        **n,
        "birthDate": info.birth_date,
        "birthPlace": info.birth_place,
        "gender": info.gender,
    }
