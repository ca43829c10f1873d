"""Result types returned by the comment parsers

All types are frozen pydantic dataclasses, created by a single parse call and
owned by the caller afterwards.  The structured parser returns one of the two
`ParseOutcome` variants; check the `success` tag (or use `isinstance`) to tell
them apart.

"""

from dataclasses import asdict
from typing import Any, Callable, ClassVar, Dict, Optional, Union

from glom import glom
from pydantic.dataclasses import dataclass as pydantic_dataclass

__all__ = [
    "CommentRef",
    "Position",
    "Location",
    "DirectiveEntry",
    "DirectiveMap",
    "FlagSet",
    "Diagnostic",
    "Success",
    "Failure",
    "ParseOutcome",
    "Reader",
]

# opaque handle to the source comment, never inspected here
CommentRef = Any

# reads a normalised JSON-like string, e.g. `json5.loads`
Reader = Callable[[str], Any]


@pydantic_dataclass(frozen=True)
class Position:
    line: int
    column: int


@pydantic_dataclass(frozen=True)
class Location:
    """Start of the comment that holds the directive text"""

    start: Position


@pydantic_dataclass(frozen=True)
class DirectiveEntry:
    """A single `name` or `name:value` directive

    `value` is `None` when a bare name was given.  `comment` is passed through
    unchanged, so callers can report problems against the originating comment
    later on.

    """

    value: Optional[str]
    comment: CommentRef


DirectiveMap = Dict[str, DirectiveEntry]
FlagSet = Dict[str, bool]

# wire names of the diagnostic, order of keys important
_diagnostic_spec = {
    "ruleId": "rule_id",
    "fatal": "fatal",
    "severity": "severity",
    "message": "message",
    "line": "line",
    "column": "column",
}


@pydantic_dataclass(frozen=True)
class Diagnostic:
    """A fatal problem found while parsing a directive comment

    >>> Diagnostic("oops", 1, 2).to_dict()["ruleId"] is None
    True

    """

    message: str
    line: int
    column: int
    rule_id: None = None
    fatal: bool = True
    severity: int = 2

    def to_dict(self) -> Dict:
        """Serialise to the shape expected by the problem reporter"""
        return glom(asdict(self), _diagnostic_spec)


@pydantic_dataclass(frozen=True)
class Success:
    config: Dict[str, Any]

    success: ClassVar[bool] = True

    def to_dict(self) -> Dict:
        return {"success": self.success, "config": self.config}


@pydantic_dataclass(frozen=True)
class Failure:
    error: Diagnostic

    success: ClassVar[bool] = False

    def to_dict(self) -> Dict:
        return {"success": self.success, "error": self.error.to_dict()}


ParseOutcome = Union[Success, Failure]
