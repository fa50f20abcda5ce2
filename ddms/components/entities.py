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
Producer entities: the persons, organizations and services that fulfill
the roles of a resource. The entity elements have been renamed with
lowercase names in DDMS 4.0.1.
"""
from collections.abc import Iterator

from ddms.aliases import OutputItemType

from .base import DdmsComponent
from .fields import Attribute, Text, ChildText, ChildTexts, Children, \
    AttributeGroup, join_key
from .attributes import SecurityAttributes

# DDMS 5.0 stops warning about empty userID and affiliation elements
_UNTIL_5_0 = {'2.0': True, '5.0': False}


class RoleEntity(DdmsComponent):
    """
    Base class of entities. The outputs of an entity are merged with the outputs
    of its role, starting with the type of the entity.
    """
    output_name = None

    names = ChildTexts('name', min_occurs=1, nonempty=True)
    phones = ChildTexts('phone', empty_warning=True)
    emails = ChildTexts('email', empty_warning=True)

    @property
    def entity_type(self) -> str:
        return self.name

    def iter_output(self, prefix: str = '') -> Iterator[OutputItemType]:
        yield join_key(prefix, 'entityType'), self.entity_type
        yield from super().iter_output(prefix)


class Person(RoleEntity):
    """A person, with a mandatory surname."""
    element_name = {'2.0': 'Person', '4.0.1': 'person'}

    surname = ChildText(required=True)
    user_id = ChildText('userID', empty_warning=_UNTIL_5_0)
    affiliations = ChildTexts('affiliation', max_occurs={'2.0': 1, '5.0': None},
                              empty_warning=_UNTIL_5_0)

    def xml_order(self) -> list[str]:
        if self._version.is_at_least('4.0.1'):
            return ['names', 'surname', 'phones', 'emails', 'user_id', 'affiliations']
        return ['names', 'surname', 'user_id', 'affiliations', 'phones', 'emails']


class SubOrganization(DdmsComponent):
    """A named unit of an organization. The security classification is required."""
    element_name = 'subOrganization'
    since = '4.0.1'

    text = Text(required=True)
    security_attributes = AttributeGroup(SecurityAttributes, required=True)


class Organization(RoleEntity):
    """An organization, with optional sub-organizations and acronym since DDMS 4.0.1."""
    element_name = {'2.0': 'Organization', '4.0.1': 'organization'}

    sub_organizations = Children(SubOrganization, since='4.0.1')
    acronym = Attribute(since='4.0.1')


class Service(RoleEntity):
    """A service."""
    element_name = {'2.0': 'Service', '4.0.1': 'service'}


class Unknown(RoleEntity):
    """An entity whose type is unknown."""
    element_name = 'unknown'
    since = '4.0.1'


ENTITY_CLASSES = (Person, Organization, Service, Unknown)
