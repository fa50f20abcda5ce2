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
Geography Markup Language components used by bounding geometries.
"""
from ddms.exceptions import InvalidDdmsError, CrossFieldConsistencyError
from ddms.names import GML_VOCABULARY

from .base import DdmsComponent
from .fields import Attribute, Text, Child, Children, AttributeGroup
from .attributes import SRSAttributes


class Position(DdmsComponent):
    """
    A position of two or three coordinates. The SRS attributes are optional
    and, if provided, must match the ones of the enclosing geometry.
    """
    element_name = 'pos'
    vocabulary = GML_VOCABULARY

    coordinates = Text(datatype=float, xs_list=True, required=True)
    srs_attributes = AttributeGroup(SRSAttributes)

    def validate(self) -> None:
        super().validate()
        if not 2 <= len(self.coordinates) <= 3:
            raise InvalidDdmsError(
                'A position must be represented by either 2 or 3 coordinates.'
            )


class _Geometry(DdmsComponent):
    """Base class of the GML geometries, identified by a gml:id."""
    vocabulary = GML_VOCABULARY

    srs_attributes = AttributeGroup(SRSAttributes, required=True)
    id = Attribute(vocabulary=GML_VOCABULARY, required=True, checks=('ncname',))

    def check_position_srs(self, position: Position) -> None:
        """Checks that the SRS attributes of a position match the ones of the geometry."""
        position_srs = position.srs_attributes
        for name in ('srs_name', 'srs_dimension', 'axis_labels', 'uom_labels'):
            value = getattr(position_srs, name)
            if value and value != getattr(self.srs_attributes, name):
                field_name = SRSAttributes.fields[name].get_name(self._version)
                raise CrossFieldConsistencyError(
                    f'The {field_name} of the position must match '
                    f'the {field_name} of the {self.name}.'
                )


class Point(_Geometry):
    """A point geometry, identified by a gml:id and located by a position."""
    element_name = 'Point'

    position = Child(Position, name='pos', required=True)

    def validate(self) -> None:
        super().validate()
        self.check_position_srs(self.position)


class Polygon(_Geometry):
    """
    A polygon geometry, bounded by the exterior linear ring of its positions.
    The ring must be closed, so the first and the last positions are the same.
    """
    element_name = 'Polygon'

    positions = Children(Position, name='pos', min_occurs=4, wrapper=('exterior', 'LinearRing'))

    def validate(self) -> None:
        super().validate()
        for position in self.positions:
            self.check_position_srs(position)
        if self.positions[0].coordinates != self.positions[-1].coordinates:
            raise CrossFieldConsistencyError(
                'The first and last position in the Polygon must be the same.'
            )
