from __future__ import annotations
import logging
from typing import Callable, Optional, Sequence, TypeVar

from ..exceptions import ColorParseError, InvalidValueRangeError

logger = logging.getLogger(__name__)

T = TypeVar('T')

# A matcher returns None when the string is not in its notation
Matcher = Callable[[str], Optional[T]]

ALPHA_PATTERN = r'(?P<alpha>[01]|0?\.\d+|1\.0)'


def first_match(matchers: Sequence[Matcher[T]], color: str) -> T:
    """
    Try each matcher in order and return the first result.

    A matcher whose notation fits but whose channels are out of range
    counts as a miss; if nothing matches, the last range error is chained
    to the ``ColorParseError``.
    """
    candidate = color.strip()
    range_error: InvalidValueRangeError | None = None

    for matcher in matchers:
        try:
            result = matcher(candidate)
        except InvalidValueRangeError as e:
            logger.debug("%s matched %r but is out of range: %s", matcher.__name__, candidate, e)
            range_error = e
            continue
        if result is not None:
            return result
        logger.debug("%s rejected %r", matcher.__name__, candidate)

    raise ColorParseError(color) from range_error
