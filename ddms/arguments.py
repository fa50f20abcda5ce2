#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Validated option descriptors for settings classes."""
from collections.abc import Callable, Iterable, Mapping
from functools import partial
from pathlib import Path
from typing import Any, cast, Generic, Optional, TypeVar, Union

from ddms.exceptions import DdmsAttributeError, DdmsTypeError, DdmsValueError
from ddms.names import VOCABULARIES

DEFUSE_MODES = frozenset(('never', 'remote', 'nonlocal', 'always'))

T = TypeVar('T')


class Option(Generic[T]):
    """
    A descriptor for optional arguments of settings. An option is validated
    when it's set and it can't be changed nor deleted after.

    :param default: The default value for the option.
    """
    __slots__ = ('_name', '_default')

    _validators: tuple[Callable[['Option[T]', T], None], ...] = ()

    def __init__(self, *, default: T) -> None:
        self._default = default

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self._name = f'_{name}'

    def __str__(self) -> str:
        return f'option {self._name[1:]!r}'

    def __get__(self, instance: Optional[Any], owner: type[Any]) -> T:
        try:
            return cast(T, getattr(instance, self._name))
        except AttributeError:
            return self._default

    def __set__(self, instance: Any, value: Any) -> None:
        if hasattr(instance, self._name):
            raise DdmsAttributeError(f"can't change {self}")
        setattr(instance, self._name, self.validated_value(value))

    def __delete__(self, instance: Any) -> None:
        raise DdmsAttributeError(f"can't delete {self}")

    def validated_value(self, value: Any) -> T:
        for validator in self._validators:
            validator(self, value)
        return cast(T, value)


###
# Validation helpers for options

def validate_type(attr: Option[T], value: T,
                  types: Union[type[Any], tuple[type[Any], ...]],
                  none: bool = False) -> None:
    if none and value is None or isinstance(value, types):
        return None
    elif none:
        msg = "invalid type {!r} for {}, must be None or a {!r}"
    else:
        msg = "invalid type {!r} for {}, must be a {!r}"
    raise DdmsTypeError(msg.format(type(value), attr, types))


def validate_choice(attr: Option[T], value: T, choices: Iterable[T]) -> None:
    if value not in choices:
        msg = "invalid value {!r} for {}: must be one of {}"
        raise DdmsValueError(msg.format(value, attr, tuple(choices)))


bool_validator = partial(validate_type, types=bool)
none_bool_validator = partial(validate_type, types=bool, none=True)
none_str_validator = partial(validate_type, types=str, none=True)
str_validator = partial(validate_type, types=str)


class BooleanOption(Option[bool]):
    _validators = (bool_validator,)


class OptionalBooleanOption(Option[Optional[bool]]):
    _validators = (none_bool_validator,)


class VersionOption(Option[Optional[str]]):
    _validators = (none_str_validator,)


class DefuseOption(Option[str]):
    _validators = (str_validator, partial(validate_choice, choices=DEFUSE_MODES))


class PathOption(Option[Optional[Path]]):

    def validated_value(self, value: Any) -> Optional[Path]:
        validate_type(self, value, (str, Path), none=True)
        return None if value is None else Path(value)


class PrefixesOption(Option[Optional[dict[str, str]]]):

    def validated_value(self, value: Any) -> Optional[dict[str, str]]:
        validate_type(self, value, Mapping, none=True)
        if value is None:
            return None

        for vocabulary, prefix in value.items():
            if vocabulary not in VOCABULARIES:
                msg = "invalid value {!r} for {}: unknown vocabulary {!r}"
                raise DdmsValueError(msg.format(value, self, vocabulary))
            elif not isinstance(prefix, str) or not prefix or ':' in prefix:
                msg = "invalid value {!r} for {}: {!r} is not a valid prefix"
                raise DdmsValueError(msg.format(value, self, prefix))
        return dict(value)
