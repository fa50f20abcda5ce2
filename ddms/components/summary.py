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
Components of the summary content: geographic identifiers, postal addresses,
vertical extents, bounding geometries, temporal coverages, non-state actors
and related links.
"""
from typing import Any, Optional

from ddms.exceptions import CrossFieldConsistencyError, InvalidDdmsError, \
    InvalidFormatError, MissingRequiredFieldError
from ddms.names import EXTENDED_DATE_VALUES, UNKNOWN
from ddms.aliases import ElementType
from ddms.utils.etree import iter_child_elements
from ddms.utils.values import is_empty, parse_date, to_datetime

from .base import DdmsComponent
from .fields import Attribute, Text, ChildText, ChildTexts, Child, Children, \
    AttributeGroup
from .attributes import SecurityAttributes, XLinkAttributes
from .gml import Point, Polygon
from .tspi import TSPI_SHAPES

# Since DDMS 5.0 the code attributes are unqualified and have been renamed
_CODE_VOCABULARY = {'2.0': 'ddms', '5.0': None}


class _CodeValue(DdmsComponent):
    """A code qualified by the URI of its code list."""

    qualifier = Attribute({'2.0': 'qualifier', '5.0': 'codespace'},
                          vocabulary=_CODE_VOCABULARY, required=True)
    value = Attribute({'2.0': 'value', '5.0': 'code'},
                      vocabulary=_CODE_VOCABULARY, required=True)


class CountryCode(_CodeValue):
    """A country code, as defined by a code list like ISO 3166."""
    element_name = 'countryCode'


class SubDivisionCode(_CodeValue):
    """A code of a subdivision of a country, as defined by a code list like ISO 3166-2."""
    element_name = 'subDivisionCode'
    since = '4.0.1'


class FacilityIdentifier(DdmsComponent):
    """A facility identified by its Basic Encyclopedia number and its suffix."""
    element_name = 'facilityIdentifier'

    be_number = Attribute('beNumber', required=True)
    osuffix = Attribute(required=True)


class GeographicIdentifier(DdmsComponent):
    """
    An identifier of a geographic location. A facility identifier can't be
    used together with other identifiers.
    """
    element_name = 'geographicIdentifier'

    names = ChildTexts('name')
    regions = ChildTexts('region')
    country_code = Child(CountryCode)
    sub_division_code = Child(SubDivisionCode, since='4.0.1')
    facility_identifier = Child(FacilityIdentifier)

    def validate(self) -> None:
        super().validate()
        others = (self.names, self.regions, self.country_code, self.sub_division_code)
        if self.facility_identifier is not None:
            if any(others):
                raise CrossFieldConsistencyError(
                    'facilityIdentifier cannot be used in tandem with other components.'
                )
        elif not any(others):
            raise InvalidDdmsError(
                'At least 1 of name, region, countryCode, subDivisionCode, '
                'or facilityIdentifier must exist.'
            )

    @property
    def has_facility_identifier(self) -> bool:
        return self.facility_identifier is not None


class PostalAddress(DdmsComponent):
    """A postal address. At most one of state or province can be used."""
    element_name = 'postalAddress'

    streets = ChildTexts('street', max_occurs=6)
    city = ChildText()
    state = ChildText()
    province = ChildText()
    postal_code = ChildText('postalCode')
    country_code = Child(CountryCode)

    def validate(self) -> None:
        super().validate()
        if not is_empty(self.state) and not is_empty(self.province):
            raise CrossFieldConsistencyError('Only 1 of state or province can be used.')

    def validate_warnings(self) -> None:
        if self.is_empty():
            self.add_warning(f'A completely empty {self.qualified_name} element was found.')
        super().validate_warnings()


class NonStateActor(DdmsComponent):
    """An actor that is not a state, optionally ordered by importance."""
    element_name = 'nonStateActor'
    since = '4.0.1'

    text = Text(label='value', empty_warning=True)
    order = Attribute(datatype=int)
    qualifier = Attribute(checks=('uri',), since='5.0')
    security_attributes = AttributeGroup(SecurityAttributes)


class VerticalExtent(DdmsComponent):
    """
    A vertical spatial extent. The unit of measure and the datum of the
    extent can be repeated on the minimum and maximum elements, with the
    same values.
    """
    element_name = 'verticalExtent'

    unit_of_measure = Attribute('unitOfMeasure', required=True,
                                choices=('Fathom', 'Foot', 'Meter'))
    datum = Attribute(required=True, choices=('AGL', 'MSL', 'HAE'))
    minimum = ChildText({'2.0': 'MinVerticalExtent', '4.0.1': 'minVerticalExtent'},
                        datatype=float, required=True, label='minimum')
    maximum = ChildText({'2.0': 'MaxVerticalExtent', '4.0.1': 'maxVerticalExtent'},
                        datatype=float, required=True, label='maximum')

    def check_element(self, elem: ElementType) -> None:
        super().check_element(elem)
        for field_name in ('minimum', 'maximum'):
            tag = self.fields[field_name].get_tag(self._version)
            for child in iter_child_elements(elem, tag):
                for attr_name in ('unit_of_measure', 'datum'):
                    attr_tag = self.fields[attr_name].get_tag(self._version)
                    value = child.get(attr_tag)
                    if value is not None and value != elem.get(attr_tag):
                        name = self.fields[attr_name].get_name(self._version)
                        raise CrossFieldConsistencyError(
                            f'The {name} on the {self.fields[field_name].get_name(self._version)} '
                            f'element must match the {name} on the enclosing '
                            f'{self.name} element.'
                        )

    def validate(self) -> None:
        super().validate()
        if self.minimum > self.maximum:
            raise CrossFieldConsistencyError(
                'Minimum vertical extent must be less than maximum vertical extent.'
            )


class BoundingGeometry(DdmsComponent):
    """
    The geometries that bound a geospatial coverage. Before DDMS 5.0 these are
    GML polygons and points, since DDMS 5.0 they are TSPI shapes.
    """
    element_name = 'boundingGeometry'

    polygons = Children(Polygon, until='5.0')
    points = Children(Point, until='5.0')
    shapes = Children(*TSPI_SHAPES, name='shape', since='5.0')

    def validate(self) -> None:
        super().validate()
        if self.polygons or self.points or self.shapes:
            return
        elif self._version.is_at_least('5.0'):
            raise MissingRequiredFieldError('At least 1 TSPI shape must be used.')
        raise MissingRequiredFieldError('At least 1 of Polygon or Point must be used.')


class TemporalCoverage(DdmsComponent):
    """
    A period of time, with a start and an end that can be dates or one
    of the extended values "Not Applicable" and "Unknown". Blank start
    and end values default to "Unknown".
    """
    element_name = 'temporalCoverage'

    time_period_name = ChildText(
        'name', wrapper='TimePeriod',
        empty_warning='A {name} element was found with no value. Defaulting to "Unknown".'
    )
    start = ChildText(wrapper='TimePeriod', required=True, default=UNKNOWN)
    end = ChildText(wrapper='TimePeriod', required=True, default=UNKNOWN)
    security_attributes = AttributeGroup(SecurityAttributes, since='3.0')

    @staticmethod
    def _check_date(name: str, value: str) -> Optional[Any]:
        if value in EXTENDED_DATE_VALUES:
            return None
        date = parse_date(value)
        if date is None:
            raise InvalidFormatError(
                f'The {name} value "{value}" is not a valid date or one of '
                f'{", ".join(EXTENDED_DATE_VALUES)}.'
            )
        return date

    def validate(self) -> None:
        super().validate()
        start = self._check_date('start', self.start)
        end = self._check_date('end', self.end)
        if start is not None and end is not None and to_datetime(end) < to_datetime(start):
            raise CrossFieldConsistencyError('The end date is before the start date.')

    @property
    def period_name(self) -> str:
        """The name of the time period, "Unknown" if not provided."""
        return UNKNOWN if is_empty(self.time_period_name) else self.time_period_name

    @property
    def start_date(self) -> Optional[Any]:
        """The start date as an XSD datatype instance, `None` for extended values."""
        return None if self.start in EXTENDED_DATE_VALUES else parse_date(self.start)

    @property
    def end_date(self) -> Optional[Any]:
        """The end date as an XSD datatype instance, `None` for extended values."""
        return None if self.end in EXTENDED_DATE_VALUES else parse_date(self.end)


class Link(DdmsComponent):
    """A locator link to a related resource."""
    element_name = 'link'

    xlink_attributes = AttributeGroup(XLinkAttributes, required=True)
    security_attributes = AttributeGroup(SecurityAttributes, since='4.0.1')

    def validate(self) -> None:
        super().validate()
        if self.xlink_attributes.type != 'locator':
            raise InvalidFormatError('The type attribute must have a fixed value of "locator".')
