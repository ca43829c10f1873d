import re
from typing import Mapping, Union

from commentconfig.types import Location

# unquoted property names, e.g. "no-alert: 0"
_bare_key = re.compile(r"([-a-zA-Z0-9/]+\s*):")
# values not separated by a comma, e.g. '"no-alert":0 semi:2'
_missing_comma = re.compile(r"(\]|[0-9])\s+(?=\")")


def format_as_json(string: str) -> str:
    """Trim a JSON-like string and wrap it in curly braces

    Braces are added independently on either side, so an unbalanced string is
    not wrapped a second time on the side that already has one.

    >>> format_as_json("  a: 1 ")
    '{a: 1}'
    >>> format_as_json("{a: 1")
    '{a: 1}'

    """
    trimmed = string.strip()
    prefix = "" if trimmed.startswith("{") else "{"
    suffix = "" if trimmed.endswith("}") else "}"
    return f"{prefix}{trimmed}{suffix}"


def normalize_json_like(string: str) -> str:
    """Normalise a JSON-like string to valid JSON5

    Two conveniences are allowed on top of JSON5:

    1. property names need not be quoted, e.g. "no-alert: 0"
    2. values need not be comma separated, e.g. '"no-alert":0 semi:2'

    NOTE: only the first missing comma is inserted; a string with more than
    one missing comma still fails to parse.

    Parameters
    ----------
    string : str
        The JSON-like string

    Returns
    -------
    str
        The normalised JSON5 string

    >>> normalize_json_like('no-alert: 0 semi:2')
    '{"no-alert": 0,"semi":2}'

    """
    quoted = _bare_key.sub(r'"\1":', string)
    return format_as_json(_missing_comma.sub(r"\1,", quoted, count=1))


def as_location(location: Union[Location, Mapping]) -> Location:
    """Coerce a location mapping, `{"start": {"line": .., "column": ..}}`"""
    if isinstance(location, Location):
        return location
    return Location(**location)
