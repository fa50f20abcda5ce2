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
Type aliases for static typing analysis. In a type checking context the aliases
are defined from effective classes imported from package modules. In a runtime
context the aliases that can't be set from the same bases, due to circular
imports, are set with a string.
"""
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, IO, TYPE_CHECKING, TypeVar, Union
from xml.etree.ElementTree import Element

__all__ = ['ElementType', 'NsmapType', 'XMLSourceType', 'VersionType',
           'VersionRulesType', 'OutputItemType', 'ComponentType',
           'AttributeGroupType', 'ComponentClassType', 'FieldValueType']

if TYPE_CHECKING:
    from ddms.versions import DdmsVersion  # noqa: F401
    from ddms.components.base import DdmsComponent, DdmsAttributeGroup  # noqa: F401

T = TypeVar('T')

##
# Type aliases for ElementTree
ElementType = Element
NsmapType = MutableMapping[str, str]
XMLSourceType = Union[str, bytes, Path, IO[str], IO[bytes], Element]

##
# Type aliases for versions
VersionType = Union[str, 'DdmsVersion']
VersionRulesType = Union[T, Mapping[str, T]]

##
# Type aliases for components
ComponentType = 'DdmsComponent'
AttributeGroupType = 'DdmsAttributeGroup'
ComponentClassType = type['DdmsComponent']
FieldValueType = Any
OutputItemType = tuple[str, Any]
