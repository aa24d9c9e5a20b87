"""Diagnostic texts returned to callers when a request is rejected"""

_SUFFIX = " Please send a valid JSON-Object."


def invalid_json() -> str:
    return "Invalid data sent." + _SUFFIX


def missing_key(key: str) -> str:
    return f"Invalid data sent. Missing JSON-Key '{key}'." + _SUFFIX


def not_a_double(key: str) -> str:
    return f"Invalid data sent. JSON-Key '{key}' is not a double value." + _SUFFIX


def not_an_array(key: str) -> str:
    return f"Invalid data sent. JSON-Key '{key}' is not an array." + _SUFFIX


def empty_array(key: str) -> str:
    return f"Invalid data sent. JSON-Key '{key}' is empty." + _SUFFIX


def too_many_arrays(key: str) -> str:
    return f"Invalid data sent. JSON-Key '{key}' contains more than one array." + _SUFFIX


def missing_subobjects(key: str) -> str:
    return f"Invalid data sent. Array in JSON-Key '{key}' contains no JSON subobjects." + _SUFFIX


def improper_subobject(key: str) -> str:
    return (
        f"Invalid data sent. A sub-object in array '{key}' is not a proper JSON-object."
        + _SUFFIX
    )


def empty_caption(key: str) -> str:
    return f"Invalid data sent. A caption of one sub-object in array '{key}' is empty." + _SUFFIX


def field_not_an_array(field: str, key: str) -> str:
    return (
        f"Invalid data sent. JSON-Key '{field}' of one sub-object in array '{key}' is not an array."
        + _SUFFIX
    )


def point_not_a_double(field: str, key: str) -> str:
    return (
        f"Invalid data sent. A point in JSON-Key '{field}' in one sub-object of '{key}' "
        "is not a double value." + _SUFFIX
    )
