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
Roles fulfilled by producer entities.
"""
from .base import DdmsComponent
from .fields import Attribute, Child, AttributeGroup
from .attributes import SecurityAttributes
from .entities import Person, Organization, Service, Unknown


class ProducerRole(DdmsComponent):
    """
    Base class of the producer roles. A role wraps exactly one entity, that can
    be a person, an organization, a service or, since DDMS 4.0.1, an unknown entity.
    """
    entity = Child(Person, Organization, Service, Unknown, name='entity', required=True)
    poc_types = Attribute('POCType', xs_list=True, checks=('token',), since='4.0.1')
    security_attributes = AttributeGroup(SecurityAttributes)


class Creator(ProducerRole):
    """An entity primarily responsible for making the content of the resource."""
    element_name = 'creator'


class Publisher(ProducerRole):
    """An entity responsible for making the resource available."""
    element_name = 'publisher'


class Contributor(ProducerRole):
    """An entity responsible for making contributions to the content of the resource."""
    element_name = 'contributor'


class PointOfContact(ProducerRole):
    """An entity that can be contacted about the resource."""
    element_name = 'pointOfContact'


class Addressee(DdmsComponent):
    """
    An entity the resource is addressed to. The entity can be a person or an
    organization, and the security classification is required.
    """
    element_name = 'addressee'
    since = '4.0.1'

    entity = Child(Person, Organization, name='entity', required=True)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class RequesterInfo(DdmsComponent):
    """
    An entity that requested the resource. The entity can be a person or an
    organization, and the security classification is required.
    """
    element_name = 'requesterInfo'
    since = '4.0.1'

    entity = Child(Person, Organization, name='entity', required=True)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)
