"""Parsers

The modules in this sub-package turn the text of a directive comment into
Python data structures.  Locating the comments in a source file, and merging
the results into a larger configuration, is left to the caller.

- `structured`: JSON-like objects, e.g. ``"no-alert": 0, semi: 2``
- `lists`: name/value lists, e.g. ``foo:bar, baz``, and flag lists, e.g.
  ``no-alert, semi``

"""
from commentconfig.parsers.lists import parse_flag_list, parse_name_value_list
from commentconfig.parsers.structured import parse_structured

__all__ = ["parse_flag_list", "parse_name_value_list", "parse_structured"]
