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
Time-Space-Position Information shapes, used by bounding geometries since DDMS 5.0.

The content of a shape is kept as opaque XML: only the identity and the spatial
reference system of a shape are modeled, the coordinates are left to the schema
validation of the document.
"""
from ddms.names import GML_VOCABULARY, TSPI_VOCABULARY

from .base import DdmsComponent
from .fields import Attribute, AttributeGroup, Markup
from .attributes import SRSAttributes


class TspiShape(DdmsComponent):
    """Base class of the TSPI shapes."""
    vocabulary = TSPI_VOCABULARY
    since = '5.0'

    srs_attributes = AttributeGroup(SRSAttributes, required=True)
    id = Attribute(vocabulary=GML_VOCABULARY, required=True, checks=('ncname',))
    content = Markup(required=True)


class TspiPoint(TspiShape):
    element_name = 'Point'


class TspiCircle(TspiShape):
    element_name = 'Circle'


class TspiEllipse(TspiShape):
    element_name = 'Ellipse'


class TspiEnvelope(TspiShape):
    """An envelope, that is bounded by its corners and has no gml:id."""
    element_name = 'Envelope'

    id = Attribute(vocabulary=GML_VOCABULARY, checks=('ncname',))


class TspiLine(TspiShape):
    element_name = 'Line'


class TspiPolygon(TspiShape):
    element_name = 'Polygon'


TSPI_SHAPES = (TspiPoint, TspiCircle, TspiEllipse, TspiEnvelope, TspiLine, TspiPolygon)
