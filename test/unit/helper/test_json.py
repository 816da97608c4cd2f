import json
from datetime import date, datetime

from mykad.helper.json import CustomJSONEncoder


def test10_types():
    obj = {
        "date": date(2000, 11, 3),
        "datetime": datetime(2000, 11, 3, 10, 20, 30),
        "set": frozenset(["b", "A", "c"]),
    }
    got = json.loads(json.dumps(obj, cls=CustomJSONEncoder))
    assert got == {
        "date": "2000-11-03",
        "datetime": "2000-11-03T10:20:30",
        "set": ["A", "b", "c"],
    }


def test20_to_json():
    class Example:
        def to_json(self):
            return {"a": 1}

    assert json.dumps(Example(), cls=CustomJSONEncoder) == '{"a": 1}'
