"""Parsers for list-like directives

Neither parser can fail: any string, including an empty one, results in a
(possibly empty) dictionary.

"""

import logging
import re

from commentconfig.types import (
    CommentRef,
    DirectiveEntry,
    DirectiveMap,
    FlagSet,
)

logger = logging.getLogger(__name__)

_around_separator = re.compile(r"\s*([:,])\s*")
_name_separator = re.compile(r"\s|,+")
_around_comma = re.compile(r"\s*,\s*")
_commas = re.compile(r",+")


def parse_name_value_list(string: str, comment: CommentRef) -> DirectiveMap:
    """Parse a list of "name:value" and/or "name" options

    Options are separated by commas or whitespace.  A repeated name overwrites
    the earlier entry.  Only the first value after a name is kept; i.e.
    "a:b:c" results in the value "b".

    Parameters
    ----------
    string : str
        The string to parse
    comment : CommentRef
        The comment that holds the string, stored with every entry

    Returns
    -------
    DirectiveMap
        Names mapped to their value (`None` if not provided) and comment

    """
    logger.debug("Parsing string config")
    items: DirectiveMap = {}

    # collapse whitespace around `:` and `,` to make splitting easier
    collapsed = _around_separator.sub(r"\1", string)
    for token in _name_separator.split(collapsed):
        if not token:
            continue
        # "foo" => ["foo"], value defaults to None
        name, *rest = token.split(":")
        value = rest[0] if rest else None
        items[name] = DirectiveEntry(value=value, comment=comment)
    return items


def parse_flag_list(string: str) -> FlagSet:
    """Parse a list of names separated by commas into a set of flags"""
    logger.debug("Parsing list config")
    items: FlagSet = {}

    for name in _commas.split(_around_comma.sub(",", string)):
        name = name.strip()
        if name:
            items[name] = True
    return items
