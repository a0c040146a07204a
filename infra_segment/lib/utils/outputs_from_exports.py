from dataclasses import is_dataclass, fields
from enum import Enum
from typing import Any

from pulumi import Output, get_stack


def _map(val: Any) -> Any:
    if isinstance(val, (list, tuple)):
        return [_map(v) for v in val]
    elif isinstance(val, dict):
        return {k: _map(v) for k, v in val.items()}
    elif is_dataclass(val) and not isinstance(val, type):
        return {f.name: _map(getattr(val, f.name)) for f in fields(val)}
    elif isinstance(val, Enum):
        return val.value
    elif isinstance(val, Output):
        return val
    elif isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    else:
        return val


def exports_to_dict(exports: object) -> Any:
    """Recursively convert an exports object to plain dicts and lists, leaving `Output`s in place"""
    return _map(exports)


def outputs_from_exports(exports: object) -> dict:
    """Generate a serializable output from a module exports object

    Recursively converts dataclasses to dicts and enums to their values, keyed by the stack name.

    :param exports: A module exports object, usually a dataclass instance
    :return: The output for the module
    """
    return {
        get_stack(): exports_to_dict(exports),
    }
