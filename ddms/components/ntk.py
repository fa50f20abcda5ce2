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
Need-To-Know access components, available since DDMS 4.0.1.
All the NTK components require a security classification.
"""
from ddms.exceptions import MissingRequiredFieldError
from ddms.names import NTK_VOCABULARY

from .base import DdmsComponent
from .fields import Attribute, Text, Child, Children, AttributeGroup
from .attributes import SecurityAttributes


class NtkComponent(DdmsComponent):
    """Base class of the NTK components."""
    vocabulary = NTK_VOCABULARY
    since = '4.0.1'


class AccessSystemName(NtkComponent):
    """The name of the access system that enforces the need-to-know."""
    element_name = 'AccessSystemName'
    output_name = 'systemName'

    text = Text(required=True)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class _AccessValue(NtkComponent):
    """A value of an access profile, that can be referred by other values."""

    text = Text(empty_warning=True)
    id = Attribute(vocabulary=NTK_VOCABULARY, checks=('ncname',))
    id_reference = Attribute('IDReference', vocabulary=NTK_VOCABULARY,
                             xs_list=True, checks=('ncname',), label='idReference')
    qualifier = Attribute(vocabulary=NTK_VOCABULARY)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class AccessGroupValue(_AccessValue):
    """A group allowed to access the resource."""
    element_name = 'AccessGroupValue'
    output_name = 'groupValue'


class AccessIndividualValue(_AccessValue):
    """An individual allowed to access the resource."""
    element_name = 'AccessIndividualValue'
    output_name = 'individualValue'


class AccessGroup(NtkComponent):
    """The groups allowed to access the resource through an access system."""
    element_name = 'AccessGroup'
    output_name = 'group'

    system_name = Child(AccessSystemName, required=True)
    group_values = Children(AccessGroupValue, min_occurs=1)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class AccessIndividual(NtkComponent):
    """The individuals allowed to access the resource through an access system."""
    element_name = 'AccessIndividual'
    output_name = 'individual'

    system_name = Child(AccessSystemName, required=True)
    individual_values = Children(AccessIndividualValue, min_occurs=1)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class AccessProfileValue(_AccessValue):
    """A value of an access profile, taken from a named vocabulary."""
    element_name = 'AccessProfileValue'
    output_name = 'profileValue'

    vocabulary_name = Attribute('vocabulary', vocabulary=NTK_VOCABULARY, required=True)


class AccessProfile(NtkComponent):
    """The profiles of the users allowed to access the resource through an access system."""
    element_name = 'AccessProfile'
    output_name = 'profile'

    system_name = Child(AccessSystemName, required=True)
    profile_values = Children(AccessProfileValue)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)

    def validate(self) -> None:
        super().validate()
        if not self.profile_values:
            raise MissingRequiredFieldError('At least 1 profile value is required.')
