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
Components of the resource metadata: identification, titles, languages,
types, dates, rights and application software.
"""
from ddms.exceptions import MissingRequiredFieldError

from .base import DdmsComponent
from .fields import Attribute, Text, AttributeGroup
from .attributes import SecurityAttributes


class Identifier(DdmsComponent):
    """
    A unique identifier for the resource, qualified by the URI of an
    identification scheme.
    """
    element_name = 'identifier'

    qualifier = Attribute(required=True, checks=('uri',))
    value = Attribute(required=True)


class Title(DdmsComponent):
    """The name of the resource. The security classification is required."""
    element_name = 'title'

    text = Text(required=True)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class Subtitle(DdmsComponent):
    """A secondary name of the resource. The security classification is required."""
    element_name = 'subtitle'

    text = Text(empty_warning=True)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class Description(DdmsComponent):
    """An account of the content of the resource."""
    element_name = 'description'

    text = Text(empty_warning=True)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class _QualifiedValue(DdmsComponent):
    """A qualifier/value pair where the qualifier is required only with a value."""

    def validate(self) -> None:
        super().validate()
        if self.value and not self.qualifier:
            raise MissingRequiredFieldError('qualifier attribute is required.')

    def validate_warnings(self) -> None:
        if self.qualifier and not self.value:
            self.add_warning('A qualifier has been set without an accompanying value attribute.')
        elif not self.qualifier and not self.value:
            self.add_warning(f'Neither a qualifier nor a value was set on this {self.name}.')
        super().validate_warnings()


class Language(_QualifiedValue):
    """The language of the intellectual content of the resource."""
    element_name = 'language'

    qualifier = Attribute(checks=('uri',))
    value = Attribute()


class Type(_QualifiedValue):
    """
    The nature, genre, or discipline of the resource. Since DDMS 4.0.1
    the element can have a description and security attributes.
    """
    element_name = 'type'

    qualifier = Attribute(checks=('uri',))
    value = Attribute()
    description = Text(label='description', since='4.0.1')
    security_attributes = AttributeGroup(SecurityAttributes, since='4.0.1')


class Dates(DdmsComponent):
    """Dates associated with the lifecycle of the resource."""
    element_name = 'dates'

    created = Attribute(checks=('date',))
    posted = Attribute(checks=('date',))
    valid_til = Attribute('validTil', checks=('date',))
    info_cut_off = Attribute('infoCutOff', checks=('date',))
    approved_on = Attribute('approvedOn', checks=('date',), since='3.1')
    received_on = Attribute('receivedOn', checks=('date',), since='4.0.1')

    def validate_warnings(self) -> None:
        if self.is_empty():
            self.add_warning(f'A completely empty {self.qualified_name} element was found.')
        super().validate_warnings()


class Rights(DdmsComponent):
    """Information about the rights held in and over the resource."""
    element_name = 'rights'

    privacy_act = Attribute('privacyAct', datatype=bool, default=False, label='privacy')
    intellectual_property = Attribute('intellectualProperty', datatype=bool,
                                      default=False, label='intellectualproperty')
    copyright = Attribute(datatype=bool, default=False, label='copy')


class ApplicationSoftware(DdmsComponent):
    """The software used to create the resource. The security classification is required."""
    element_name = 'applicationSoftware'
    since = '4.0.1'

    text = Text(empty_warning=True)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)
