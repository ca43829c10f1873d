"""Parser for JSON-like directives"""

import logging
from typing import Any, Dict, Mapping, Union

import json5

from commentconfig.helpers import as_location, normalize_json_like
from commentconfig.types import (
    Diagnostic,
    Failure,
    Location,
    ParseOutcome,
    Reader,
    Success,
)

logger = logging.getLogger(__name__)


def parse_structured(
    string: str,
    location: Union[Location, Mapping],
    loads: Reader = json5.loads,
) -> ParseOutcome:
    """Parse a JSON-like config

    The string is normalised (see `normalize_json_like`) before it is handed
    over to `loads`.  Any parse error is reported as a fatal diagnostic pinned
    to the start of the comment; nothing is raised.

    Parameters
    ----------
    string : str
        The JSON-like string, e.g. ``"no-alert": 0, semi: 2``
    location : Union[Location, Mapping]
        Start line and column of the comment, used for the error message
    loads : Reader
        Function used to parse the normalised string (default:
        `json5.loads`); any exception it raises is reported as a failure,
        e.g. a `RecursionError` on deeply nested input

    Returns
    -------
    ParseOutcome
        `Success` with the parsed config, or `Failure` with a diagnostic

    """
    logger.debug("Parsing JSON config")
    location = as_location(location)
    normalized = normalize_json_like(string)

    try:
        items: Dict[str, Any] = loads(normalized) or {}
    except Exception as err:
        logger.debug("Parsing of configuration failed: %s", err)
        return Failure(
            error=Diagnostic(
                message=f"Failed to parse JSON from '{string.strip()}': {err}",
                line=location.start.line,
                column=location.start.column + 1,
            )
        )
    return Success(config=items)
