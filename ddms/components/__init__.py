#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from .fields import Field, SimpleField, Attribute, Text, ChildText, ChildTexts, \
    Child, Children, AttributeGroup, Markup
from .base import DdmsElementBase, DdmsAttributeGroup, DdmsComponent, \
    get_component_class, get_component_classes
from .attributes import SecurityAttributes, XLinkAttributes, SRSAttributes, \
    NoticeAttributes
from .builders import ComponentBuilder, LazyBuilderList, build
from .resource import Identifier, Title, Subtitle, Description, Language, \
    Type, Dates, Rights, ApplicationSoftware
from .entities import RoleEntity, Person, Organization, SubOrganization, \
    Service, Unknown, ENTITY_CLASSES
from .roles import ProducerRole, Creator, Publisher, Contributor, \
    PointOfContact, Addressee, RequesterInfo
from .gml import Position, Point, Polygon
from .tspi import TspiShape, TspiPoint, TspiCircle, TspiEllipse, TspiEnvelope, \
    TspiLine, TspiPolygon, TSPI_SHAPES
from .summary import CountryCode, SubDivisionCode, FacilityIdentifier, \
    GeographicIdentifier, PostalAddress, NonStateActor, VerticalExtent, \
    BoundingGeometry, TemporalCoverage, Link
from .ntk import NtkComponent, AccessSystemName, AccessGroupValue, \
    AccessIndividualValue, AccessProfileValue, AccessGroup, AccessIndividual, \
    AccessProfile
from .notices import NoticeText, Notice, NoticeList

__all__ = ['Field', 'SimpleField', 'Attribute', 'Text', 'ChildText', 'ChildTexts',
           'Child', 'Children', 'AttributeGroup', 'Markup', 'DdmsElementBase',
           'DdmsAttributeGroup', 'DdmsComponent', 'get_component_class',
           'get_component_classes', 'SecurityAttributes', 'XLinkAttributes',
           'SRSAttributes', 'NoticeAttributes', 'ComponentBuilder', 'LazyBuilderList',
           'build', 'Identifier', 'Title', 'Subtitle', 'Description', 'Language', 'Type',
           'Dates', 'Rights', 'ApplicationSoftware', 'RoleEntity', 'Person',
           'Organization', 'SubOrganization', 'Service', 'Unknown', 'ENTITY_CLASSES',
           'ProducerRole', 'Creator', 'Publisher', 'Contributor', 'PointOfContact',
           'Addressee', 'RequesterInfo', 'Position', 'Point', 'Polygon', 'TspiShape',
           'TspiPoint', 'TspiCircle', 'TspiEllipse', 'TspiEnvelope', 'TspiLine',
           'TspiPolygon', 'TSPI_SHAPES', 'CountryCode', 'SubDivisionCode',
           'FacilityIdentifier', 'GeographicIdentifier', 'PostalAddress',
           'NonStateActor', 'VerticalExtent', 'BoundingGeometry', 'TemporalCoverage',
           'Link', 'NtkComponent', 'AccessSystemName', 'AccessGroupValue',
           'AccessIndividualValue', 'AccessProfileValue', 'AccessGroup',
           'AccessIndividual', 'AccessProfile', 'NoticeText', 'Notice', 'NoticeList']
