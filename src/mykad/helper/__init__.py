from .exception import (
    MyKadException,
    InvArgException,
    FormatError,
    InvalidBirthDate,
    InvalidBirthPlace,
)
from .callback import with_callback
