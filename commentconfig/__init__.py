"""CommentConfig

Turn the text of directive comments (configuration overrides written in
source code comments) into structured data.

"""
from commentconfig.comment import ConfigCommentParser
from commentconfig.helpers import format_as_json, normalize_json_like
from commentconfig.parsers import (
    parse_flag_list,
    parse_name_value_list,
    parse_structured,
)
from commentconfig.types import (
    Diagnostic,
    DirectiveEntry,
    Failure,
    Location,
    Position,
    Success,
)

__all__ = [
    "ConfigCommentParser",
    "Diagnostic",
    "DirectiveEntry",
    "Failure",
    "Location",
    "Position",
    "Success",
    "format_as_json",
    "normalize_json_like",
    "parse_flag_list",
    "parse_name_value_list",
    "parse_structured",
]
