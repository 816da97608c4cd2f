"""
Generation of random (but valid) MyKad numbers
"""

import logging
import random
from datetime import date, timedelta

from ..birthdate import birth_date_code
from ..birthplace import is_valid_birthplace

logger = logging.getLogger(__name__)

# Random birth dates are taken from this many years before today
MAX_AGE = 99


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29 February on a non-leap year
        return day.replace(year=day.year - years, day=28)


def random_birth_date(today: date = None, rng: random.Random = None) -> date:
    """
    Pick a date uniformly between MAX_AGE years ago and today (inclusive)
    """
    rng = rng or random
    if today is None:
        today = date.today()
    start = _years_before(today, MAX_AGE)
    return start + timedelta(days=rng.randint(0, (today - start).days))


def random_birthplace(rng: random.Random = None) -> str:
    """
    Draw place of birth codes until one with an assigned meaning comes out
    """
    rng = rng or random
    while True:
        code = rng.randint(1, 99)
        if is_valid_birthplace(code):
            return f"{code:02d}"


def generate_random(today: date = None, rng: random.Random = None) -> str:
    """
    Create a random unformatted MyKad number, guaranteed to be valid
     :param today: reference date for the birth date range (default: today)
     :param rng: a random.Random instance (default: the global generator)
    """
    rng = rng or random
    birth_date = random_birth_date(today, rng)
    number = (
        birth_date_code(birth_date)
        + random_birthplace(rng)
        + "".join(str(rng.randint(0, 9)) for _ in range(4))
    )
    logger.debug("generated MyKad number %s (born %s)", number, birth_date)
    return number
