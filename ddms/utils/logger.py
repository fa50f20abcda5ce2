#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, Optional, TypeVar, Union

from ddms.exceptions import DdmsValueError

logger = logging.getLogger('ddms')

# The levels selectable by name, the ones mapped by the verbosity of the CLI
LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
}


def set_logging_level(level: Union[str, int]) -> None:
    """Sets the level of the package logger, by name or by number."""
    if isinstance(level, str):
        try:
            level = LOG_LEVELS[level.strip().upper()]
        except KeyError:
            raise DdmsValueError(f"{level!r} is not a valid loglevel") from None
    logger.setLevel(level)


RT = TypeVar('RT')


def logged(func: Callable[..., RT]) -> Callable[..., RT]:
    """
    Decorates a reader method with a 'loglevel' keyword argument, that sets
    the level of the package logger for the duration of the call.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        loglevel: Optional[Union[int, str]] = kwargs.pop('loglevel', None)
        if loglevel is None:
            return func(*args, **kwargs)

        current_level = logger.level
        set_logging_level(loglevel)
        try:
            return func(*args, **kwargs)
        finally:
            logger.setLevel(current_level)

    return wrapper
