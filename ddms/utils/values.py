#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Lexical checks and conversions of the simple values of DDMS components.
The XSD lexical spaces are provided by elementpath's datatypes.
"""
import re
from collections.abc import Iterable, Sequence
from typing import Any, Optional, Union

from elementpath import datatypes
from elementpath.datatypes import AbstractDateTime

from ddms.exceptions import DdmsTypeError, DdmsValueError

SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*$')
INVALID_URI_CHARS = re.compile(r'[\s<>"{}|\\^`]')

DATE_TYPES = (
    ('dateTime', datatypes.DateTime10),
    ('date', datatypes.Date10),
    ('gYearMonth', datatypes.GregorianYearMonth10),
    ('gYear', datatypes.GregorianYear10),
)

BOOLEAN_VALUES = {'true': True, '1': True, 'false': False, '0': False}


def is_empty(value: Any) -> bool:
    """
    Returns `True` if a value is unset or blank. A sequence is empty
    if it has no items or if all its items are empty.
    """
    if value is None:
        return True
    elif isinstance(value, str):
        return not value.strip()
    elif isinstance(value, (list, tuple)):
        return all(is_empty(x) for x in value)
    return False


def is_uri(value: str) -> bool:
    """
    Checks if a string is a valid URI reference. A scheme, when present,
    must be followed by a scheme specific part.
    """
    if not isinstance(value, str) or not value or INVALID_URI_CHARS.search(value):
        return False
    elif not datatypes.AnyURI.is_valid(value):
        return False

    head = re.split(r'[/?#]', value, maxsplit=1)[0]
    if ':' in head:
        scheme, _, specific_part = value.partition(':')
        if SCHEME_PATTERN.match(scheme) is None or not specific_part:
            return False
    return True


def is_ncname(value: str) -> bool:
    return isinstance(value, str) and datatypes.NCName.is_valid(value)


def is_token(value: str) -> bool:
    return isinstance(value, str) and datatypes.NMToken.is_valid(value)


def parse_date(value: str, types: Optional[Iterable[str]] = None) -> Optional[AbstractDateTime]:
    """
    Parses a date string trying the XSD date types in order of precision.
    Returns `None` if the string is not a valid date.

    :param value: the date string.
    :param types: restrict the admitted types to a subset of 'dateTime', \
    'date', 'gYearMonth' and 'gYear'.
    """
    value = value.strip()
    for name, datatype in DATE_TYPES:
        if types is not None and name not in types:
            continue
        try:
            return datatype.fromstring(value)
        except (TypeError, ValueError):
            continue
    return None


def is_date(value: str, types: Optional[Iterable[str]] = None) -> bool:
    return isinstance(value, str) and parse_date(value, types) is not None


def to_datetime(value: AbstractDateTime) -> datatypes.DateTime:
    """
    Converts an XSD date value to an xs:dateTime, for comparing dates of different
    XSD types. The missing parts of the value count as lowest, the timezone is kept.
    """
    if isinstance(value, datatypes.DateTime):
        return value
    return datatypes.DateTime10(value.year, value.month, value.day, value.hour, value.minute,
                                value.second, value.microsecond, value.tzinfo)


def to_boolean(value: str) -> bool:
    try:
        return BOOLEAN_VALUES[value.strip()]
    except KeyError:
        raise DdmsValueError(f"{value!r} is not an xs:boolean value") from None


def to_number(value: str, datatype: type[Union[int, float]]) -> Union[int, float]:
    try:
        return datatype(value.strip())
    except (TypeError, ValueError):
        name = 'xs:integer' if datatype is int else 'xs:double'
        raise DdmsValueError(f"{value!r} is not an {name} value") from None


def to_list(value: Union[None, str, Iterable[str]]) -> tuple[str, ...]:
    """Converts an xs:list string or an iterable of tokens to a tuple."""
    if value is None:
        return ()
    elif isinstance(value, str):
        return tuple(value.split())
    elif isinstance(value, Iterable):
        return tuple(value)
    raise DdmsTypeError(f"invalid type {type(value)!r} for an xs:list value")


def format_value(value: Any) -> str:
    """Formats a simple value for text outputs and XML serialization."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, str):
        return value
    elif isinstance(value, Sequence):
        return ' '.join(format_value(x) for x in value)
    return str(value)
