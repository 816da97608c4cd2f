"""
Provide a custom JSON encoder that can serialize additional objects,
in particular MyKadInfo & BirthPlace objects
"""

import datetime
import json


def keygetter_set(v):
    return str(v).lower()


class CustomJSONEncoder(json.JSONEncoder):
    """
    A custom JSON encoder that can serialize additional objects:
      - date objects (into ISO 8601 strings)
      - sets & frozensets (as sorted lists)
      - any object having a to_json() method that produces a string or
        a serializable object
    """

    def default(self, obj):
        """
        Serialize some special types
        """
        if hasattr(obj, "to_json"):
            return obj.to_json()
        elif isinstance(obj, (datetime.date, datetime.datetime)):
            return obj.isoformat()
        elif isinstance(obj, (set, frozenset)):
            return sorted(obj, key=keygetter_set)
        return super().default(obj)
