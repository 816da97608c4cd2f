VERSION = "0.3.1"

from .region import Region
from .mykadinfo import BirthPlace, MyKadInfo
from .helper.exception import FormatError, InvalidBirthDate, InvalidBirthPlace
from .api import is_valid, validate, parse, format, unformat, generate_random
