#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from .exceptions import DdmsException, DdmsValueError, DdmsTypeError, \
    DdmsAttributeError, DdmsKeyError, UnsupportedVersionError, \
    NoVersionSelectedError, DdmsReaderError, InvalidDdmsError, WrongNameError, \
    MissingRequiredFieldError, InvalidFormatError, CrossFieldConsistencyError, \
    IncompatibleVersionError
from .messages import ValidationMessage
from .settings import DdmsSettings, DEFAULT_SETTINGS
from .versions import DdmsVersion, VersionRegistry, SUPPORTED_VERSIONS, registry, \
    get_version, get_current_version, set_current_version, clear_current_version
from .components import *  # noqa: F401, F403
from .components import __all__ as _components_all
from .renderers import render, to_html, to_text, to_json, to_xml, to_etree
from .reader import DdmsReader, read
from .utils.logger import set_logging_level

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2024, SISSA"
__license__ = "MIT"
__status__ = "Beta"

__all__ = [
    'DdmsException', 'DdmsValueError', 'DdmsTypeError', 'DdmsAttributeError',
    'DdmsKeyError', 'UnsupportedVersionError', 'NoVersionSelectedError',
    'DdmsReaderError', 'InvalidDdmsError', 'WrongNameError',
    'MissingRequiredFieldError', 'InvalidFormatError', 'CrossFieldConsistencyError',
    'IncompatibleVersionError', 'ValidationMessage', 'DdmsSettings',
    'DEFAULT_SETTINGS', 'DdmsVersion', 'VersionRegistry', 'SUPPORTED_VERSIONS',
    'registry', 'get_version', 'get_current_version', 'set_current_version',
    'clear_current_version', 'render', 'to_html', 'to_text', 'to_json',
    'to_xml', 'to_etree', 'DdmsReader', 'read', 'set_logging_level',
] + _components_all
