"""
Support for the optional callback argument of the API functions
"""

from functools import wraps

from typing import Any, Callable, Optional

from .exception import MyKadException


TYPE_CALLBACK = Callable[[Optional[Exception], Any], Any]


def with_callback(func: Callable) -> Callable:
    """
    Decorate an API function so that it accepts an additional `callback`
    keyword argument. Without a callback the function returns its result or
    raises its exception. With a callback, it is called (synchronously) as
    callback(exception, None) or callback(None, result), and its return value
    is returned.
    """

    @wraps(func)
    def wrapper(*args, callback: TYPE_CALLBACK = None, **kwargs):
        if callback is None:
            return func(*args, **kwargs)
        try:
            result = func(*args, **kwargs)
        except MyKadException as e:
            return callback(e, None)
        return callback(None, result)

    return wrapper
