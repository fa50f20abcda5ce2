#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ddms.messages import ValidationMessage


class DdmsException(Exception):
    """The base exception that let you catch all the errors generated by the library."""


class DdmsAttributeError(DdmsException, AttributeError):
    pass


class DdmsTypeError(DdmsException, TypeError):
    pass


class DdmsValueError(DdmsException, ValueError):
    pass


class DdmsKeyError(DdmsException, KeyError):
    pass


class UnsupportedVersionError(DdmsValueError):
    """Raised when a version string matches no supported version or alias."""


class NoVersionSelectedError(DdmsException, RuntimeError):
    """Raised when an operation requires a current version but none is set."""


class DdmsReaderError(DdmsValueError):
    """
    Raised when an XML source can't be parsed or is not valid against its schema.

    :param message: the error message.
    :param source: the XML source that caused the error.
    :param errors: an optional list of schema validation reasons.
    """
    def __init__(self, message: str,
                 source: Optional[object] = None,
                 errors: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.errors = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        return '{}:\n  {}'.format(self.message.rstrip('.:'), '\n  '.join(self.errors))


class InvalidDdmsError(DdmsValueError):
    """
    Base class for structural errors of DDMS components.

    :param message: the error message.
    :param locator: an optional XPath-like locator of the offending element.
    """
    def __init__(self, message: str, locator: str = '') -> None:
        super().__init__(message)
        self.message = message
        self.locator = locator

    def __str__(self) -> str:
        if not self.locator:
            return self.message
        return f'{self.message} (at {self.locator})'

    def __repr__(self) -> str:
        return '%s(message=%r, locator=%r)' % (
            self.__class__.__name__, self.message, self.locator
        )

    def with_parent(self, qualified_name: str) -> 'InvalidDdmsError':
        """
        Returns a new error of the same class, with the locator prefixed
        by the qualified name of a parent element.
        """
        return self.__class__(self.message, f'/{qualified_name}{self.locator}')

    def as_message(self) -> 'ValidationMessage':
        """Returns the error as an ERROR validation message."""
        from ddms.messages import ValidationMessage
        return ValidationMessage.error(self.message, self.locator)


class WrongNameError(InvalidDdmsError):
    """Raised when an element has not the expected qualified name for a version."""


class MissingRequiredFieldError(InvalidDdmsError):
    """Raised when a required attribute or child element is missing or blank."""


class InvalidFormatError(InvalidDdmsError):
    """Raised when a value doesn't conform to its lexical form."""


class CrossFieldConsistencyError(InvalidDdmsError):
    """Raised when two or more fields have inconsistent values."""


class IncompatibleVersionError(InvalidDdmsError):
    """Raised when a field or a component is not admitted by the version in use."""
