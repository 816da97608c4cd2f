from .nric import is_valid, validate, parse, format, unformat
from .generator import generate_random
