"""Object interface to the directive parsers"""

from typing import Mapping, Union

import json5

from commentconfig.parsers import (
    parse_flag_list,
    parse_name_value_list,
    parse_structured,
)
from commentconfig.types import (
    CommentRef,
    DirectiveMap,
    FlagSet,
    Location,
    ParseOutcome,
    Reader,
)


class ConfigCommentParser:
    """Parse configuration comments inside source files

    The instance only holds the function used to read JSON-like directives,
    so one parser can be shared freely.

    >>> parser = ConfigCommentParser()
    >>> parser.parse_list_config("semi, no-alert")
    {'semi': True, 'no-alert': True}

    """

    def __init__(self, loads: Reader = json5.loads):
        self.loads = loads

    def parse_string_config(
        self, string: str, comment: CommentRef
    ) -> DirectiveMap:
        """Parse "name:value" or "name" options, e.g. for global variables"""
        return parse_name_value_list(string, comment)

    def parse_json_config(
        self, string: str, location: Union[Location, Mapping]
    ) -> ParseOutcome:
        """Parse a JSON-like config, e.g. rule settings"""
        return parse_structured(string, location, loads=self.loads)

    def parse_list_config(self, string: str) -> FlagSet:
        """Parse names separated by commas, e.g. for enabled rules"""
        return parse_flag_list(string)
