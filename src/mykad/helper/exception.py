from stdnum.exceptions import InvalidFormat


class MyKadException(Exception):
    def __init__(self, msg, *args):
        super().__init__(msg.format(*args))


class InvArgException(MyKadException):
    pass


class FormatError(MyKadException, InvalidFormat):
    """
    The number does not have the shape of a MyKad number. Since it is also a
    python-stdnum ValidationError, it can be handled together with errors
    coming from any stdnum validator
    """

    def __init__(self, msg="Invalid MyKad number format", *args):
        super().__init__(msg, *args)


class InvalidBirthDate(FormatError):
    def __init__(self, number=None):
        super().__init__("Invalid MyKad birth date: {}", number)


class InvalidBirthPlace(FormatError):
    def __init__(self, code=None):
        super().__init__("Invalid MyKad place of birth code: {}", code)
