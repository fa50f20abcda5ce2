#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Validation messages attached to DDMS components."""
import dataclasses as dc

from ddms.exceptions import DdmsValueError

WARNING_TYPE = 'Warning'
ERROR_TYPE = 'Error'

MESSAGE_TYPES = frozenset((WARNING_TYPE, ERROR_TYPE))


@dc.dataclass(frozen=True)
class ValidationMessage:
    """
    A validation message. Errors abort the construction of a component and are
    raised as exceptions, warnings are collected by the constructed component.

    :param type: the message kind, can be 'Warning' or 'Error'.
    :param text: the message text.
    :param locator: an XPath-like locator of the element the message refers to.
    """
    type: str
    text: str
    locator: str = ''

    def __post_init__(self) -> None:
        if self.type not in MESSAGE_TYPES:
            raise DdmsValueError(f"invalid validation message type {self.type!r}")

    def __str__(self) -> str:
        if not self.locator:
            return f'{self.type}: {self.text}'
        return f'{self.type}: {self.text} (at {self.locator})'

    @classmethod
    def warning(cls, text: str, locator: str = '') -> 'ValidationMessage':
        return cls(WARNING_TYPE, text, locator)

    @classmethod
    def error(cls, text: str, locator: str = '') -> 'ValidationMessage':
        return cls(ERROR_TYPE, text, locator)

    @property
    def is_warning(self) -> bool:
        return self.type == WARNING_TYPE

    @property
    def is_error(self) -> bool:
        return self.type == ERROR_TYPE

    def with_parent(self, qualified_name: str) -> 'ValidationMessage':
        """Returns a copy of the message with the locator prefixed by a parent name."""
        return dc.replace(self, locator=f'/{qualified_name}{self.locator}')
