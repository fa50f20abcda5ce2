#!/usr/bin/env python
#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Tests of the summary content components."""
from xml.etree import ElementTree

from ddms.exceptions import DdmsValueError, InvalidDdmsError, MissingRequiredFieldError, \
    InvalidFormatError, CrossFieldConsistencyError, IncompatibleVersionError
from ddms.messages import ValidationMessage
from ddms.versions import registry
from ddms.components import CountryCode, SubDivisionCode, FacilityIdentifier, \
    GeographicIdentifier, PostalAddress, NonStateActor, VerticalExtent, \
    BoundingGeometry, TemporalCoverage, Link, Position, Point, Polygon, TspiPoint, \
    TspiCircle, TspiEnvelope
from ddms.names import GML_3_2_NAMESPACE, TSPI_NAMESPACE
from ddms.utils.qnames import local_name
from ddms.testing import DdmsTestCase, get_xmlns, run_ddms_tests

SECURITY = {'classification': 'U', 'owner_producer': ['USA']}
ISO_3166 = 'urn:us:gov:ic:cvenum:irm:coverage:iso3166:trigraph:v1'
SRS_NAME = 'http://metadata.dod.mil/mdr/ns/GSIP/crs/WGS84E_2D'


class TestCodes(DdmsTestCase):

    def test_country_code_versions(self):
        code = CountryCode(qualifier=ISO_3166, value='LAO', version='2.0')
        self.assertEqual(code.to_text(), f'countryCode.qualifier: {ISO_3166}\n'
                                         f'countryCode.value: LAO\n')
        elem = code.to_etree()
        namespace = registry.resolve('2.0').namespace
        self.assertEqual(elem.get(f'{{{namespace}}}qualifier'), ISO_3166)
        self.assertEqual(elem.get(f'{{{namespace}}}value'), 'LAO')
        self.check_round_trip(code)

        code = CountryCode(qualifier=ISO_3166, value='LAO', version='5.0')
        self.assertEqual(code.to_text(), f'countryCode.codespace: {ISO_3166}\n'
                                         f'countryCode.code: LAO\n')
        elem = code.to_etree()
        self.assertEqual(elem.get('codespace'), ISO_3166)
        self.assertEqual(elem.get('code'), 'LAO')
        self.check_round_trip(code)

    def test_country_code_from_element(self):
        elem = self.parse(f'<ddms:countryCode {get_xmlns("5.0")} '
                          f'codespace="{ISO_3166}" code="LAO"/>')
        code = CountryCode.from_element(elem)
        self.assertEqual(code.qualifier, ISO_3166)
        self.assertEqual(code.value, 'LAO')

        # DDMS 5.0 attributes are unqualified
        elem = self.parse(f'<ddms:countryCode {get_xmlns("5.0")} '
                          f'ddms:codespace="{ISO_3166}" ddms:code="LAO"/>')
        err = self.check_invalid(MissingRequiredFieldError, 'codespace attribute is required.',
                                 CountryCode.from_element, elem)
        self.assertEqual(err.locator, '/ddms:countryCode')

        self.check_invalid(MissingRequiredFieldError, 'code attribute is required.',
                           CountryCode, qualifier=ISO_3166, version='5.0')

    def test_sub_division_code(self):
        code = SubDivisionCode(qualifier='ISO-3166-2', value='US-VA', version='4.0.1')
        self.assertEqual(code.to_text(), 'subDivisionCode.qualifier: ISO-3166-2\n'
                                         'subDivisionCode.value: US-VA\n')
        self.check_round_trip(code)

        self.check_invalid(IncompatibleVersionError,
                           'The subDivisionCode element cannot be used until DDMS 4.0.1 or later.',
                           SubDivisionCode, qualifier='ISO-3166-2', value='US-VA', version='3.1')

    def test_facility_identifier(self):
        facility = FacilityIdentifier(be_number='1234DD56789', osuffix='DD123', version='5.0')
        self.assertEqual(facility.to_text(), 'facilityIdentifier.beNumber: 1234DD56789\n'
                                             'facilityIdentifier.osuffix: DD123\n')
        self.check_round_trip(facility)

        self.check_invalid(MissingRequiredFieldError, 'osuffix attribute is required.',
                           FacilityIdentifier, be_number='1234DD56789', version='5.0')


class TestGeographicIdentifier(DdmsTestCase):

    def test_geographic_identifier(self):
        code = CountryCode(qualifier=ISO_3166, value='USA', version='5.0')
        geo_identifier = GeographicIdentifier(names=['The White House'], regions=['Mid-Atlantic'],
                                              country_code=code, version='5.0')
        self.assertFalse(geo_identifier.has_facility_identifier)
        self.assertEqual(geo_identifier.to_text(),
                         'geographicIdentifier.name: The White House\n'
                         'geographicIdentifier.region: Mid-Atlantic\n'
                         f'geographicIdentifier.countryCode.codespace: {ISO_3166}\n'
                         'geographicIdentifier.countryCode.code: USA\n')
        self.check_round_trip(geo_identifier)

    def test_facility_identifier_alone(self):
        facility = FacilityIdentifier(be_number='1234DD56789', osuffix='DD123', version='5.0')
        geo_identifier = GeographicIdentifier(facility_identifier=facility, version='5.0')
        self.assertTrue(geo_identifier.has_facility_identifier)
        self.check_round_trip(geo_identifier)

        self.check_invalid(CrossFieldConsistencyError,
                           'facilityIdentifier cannot be used in tandem with other components.',
                           GeographicIdentifier, names=['The White House'],
                           facility_identifier=facility, version='5.0')

    def test_at_least_one_identifier(self):
        err = self.check_invalid(
            InvalidDdmsError,
            'At least 1 of name, region, countryCode, subDivisionCode, '
            'or facilityIdentifier must exist.',
            GeographicIdentifier, version='5.0'
        )
        self.assertEqual(err.locator, '/ddms:geographicIdentifier')

    def test_sub_division_code_version(self):
        code = SubDivisionCode(qualifier='ISO-3166-2', value='US-VA', version='4.0.1')
        geo_identifier = GeographicIdentifier(sub_division_code=code, version='4.0.1')
        self.check_round_trip(geo_identifier)

        with self.assertRaises(IncompatibleVersionError):
            GeographicIdentifier(sub_division_code=code, version='5.0')


class TestPostalAddress(DdmsTestCase):

    def test_postal_address(self):
        code = CountryCode(qualifier=ISO_3166, value='USA', version='5.0')
        address = PostalAddress(streets=['1600 Pennsylvania Avenue, NW'], city='Washington',
                                state='DC', postal_code='20500', country_code=code,
                                version='5.0')
        self.assertEqual(address.to_text(),
                         'postalAddress.street: 1600 Pennsylvania Avenue, NW\n'
                         'postalAddress.city: Washington\n'
                         'postalAddress.state: DC\n'
                         'postalAddress.postalCode: 20500\n'
                         f'postalAddress.countryCode.codespace: {ISO_3166}\n'
                         'postalAddress.countryCode.code: USA\n')
        self.assertListEqual(address.validation_warnings, [])
        self.check_round_trip(address)

    def test_state_or_province(self):
        self.check_invalid(CrossFieldConsistencyError, 'Only 1 of state or province can be used.',
                           PostalAddress, state='DC', province='Ontario', version='5.0')

        address = PostalAddress(province='Ontario', version='5.0')
        self.assertEqual(address.province, 'Ontario')
        self.assertIsNone(address.state)

    def test_streets_limit(self):
        streets = [f'{k} Street' for k in range(1, 7)]
        self.assertEqual(len(PostalAddress(streets=streets, version='5.0').streets), 6)

        self.check_invalid(InvalidDdmsError, 'No more than 6 street element(s) may exist.',
                           PostalAddress, streets=streets + ['7 Street'], version='5.0')

    def test_empty_address(self):
        address = PostalAddress.from_element(self.parse(
            f'<ddms:postalAddress {get_xmlns("5.0")}/>'
        ))
        self.assertListEqual(address.validation_warnings, [ValidationMessage.warning(
            'A completely empty ddms:postalAddress element was found.', '/ddms:postalAddress'
        )])
        self.assertEqual(address.to_text(), '')


class TestNonStateActor(DdmsTestCase):

    def test_non_state_actor(self):
        actor = NonStateActor(text='Laotian Monks', order=1, qualifier='urn:sample',
                              security_attributes=SECURITY, version='5.0')
        self.assertEqual(actor.to_text(), 'nonStateActor.value: Laotian Monks\n'
                                          'nonStateActor.order: 1\n'
                                          'nonStateActor.qualifier: urn:sample\n'
                                          'nonStateActor.classification: U\n'
                                          'nonStateActor.ownerProducer: USA\n')
        self.check_round_trip(actor)

    def test_non_state_actor_from_element(self):
        elem = self.parse(f'<ddms:nonStateActor {get_xmlns("4.0.1", "ddms", "ism")} '
                          f'ddms:order="2" ISM:classification="U" ISM:ownerProducer="USA">'
                          f'Laotian Monks</ddms:nonStateActor>')
        actor = NonStateActor.from_element(elem)
        self.assertEqual(actor.order, 2)
        self.assertEqual(actor.text, 'Laotian Monks')

        elem = self.parse(f'<ddms:nonStateActor {get_xmlns("4.0.1")} ddms:order="first"/>')
        self.check_invalid(InvalidFormatError, "'first' is not an xs:integer value",
                           NonStateActor.from_element, elem)

    def test_version_rules(self):
        self.check_invalid(IncompatibleVersionError,
                           'The qualifier attribute cannot be used until DDMS 5.0 or later.',
                           NonStateActor, text='Laotian Monks', qualifier='urn:sample',
                           version='4.0.1')
        self.check_invalid(IncompatibleVersionError,
                           'The nonStateActor element cannot be used until DDMS 4.0.1 or later.',
                           NonStateActor, text='Laotian Monks', version='3.1')

    def test_empty_warning(self):
        actor = NonStateActor(security_attributes=SECURITY, version='5.0')
        self.assertListEqual(actor.validation_warnings, [ValidationMessage.warning(
            'A ddms:nonStateActor element was found with no value.', '/ddms:nonStateActor'
        )])


class TestVerticalExtent(DdmsTestCase):

    def test_vertical_extent(self):
        extent = VerticalExtent(unit_of_measure='Meter', datum='AGL',
                                minimum=0.0, maximum=100.0, version='5.0')
        self.assertEqual(extent.to_text(), 'verticalExtent.unitOfMeasure: Meter\n'
                                           'verticalExtent.datum: AGL\n'
                                           'verticalExtent.minimum: 0.0\n'
                                           'verticalExtent.maximum: 100.0\n')
        self.check_round_trip(extent)

        extent = VerticalExtent(unit_of_measure='Foot', datum='MSL',
                                minimum=1.5, maximum=2.5, version='2.0')
        names = [child.tag.rsplit('}', 1)[-1] for child in extent.to_etree()]
        self.assertListEqual(names, ['MinVerticalExtent', 'MaxVerticalExtent'])
        self.check_round_trip(extent)

    def test_invalid_values(self):
        self.check_invalid(InvalidFormatError,
                           'The value "Mile" of the unitOfMeasure attribute must be '
                           'one of Fathom, Foot, Meter.',
                           VerticalExtent, unit_of_measure='Mile', datum='AGL',
                           minimum=0.0, maximum=100.0, version='5.0')
        self.check_invalid(CrossFieldConsistencyError,
                           'Minimum vertical extent must be less than maximum vertical extent.',
                           VerticalExtent, unit_of_measure='Meter', datum='AGL',
                           minimum=10.0, maximum=1.0, version='5.0')
        self.check_invalid(MissingRequiredFieldError,
                           'Exactly 1 minVerticalExtent element must exist.',
                           VerticalExtent, unit_of_measure='Meter', datum='AGL',
                           maximum=1.0, version='5.0')

        xmlns = get_xmlns('5.0')
        elem = self.parse(f'<ddms:verticalExtent {xmlns} ddms:unitOfMeasure="Meter" '
                          f'ddms:datum="AGL"><ddms:minVerticalExtent>low</ddms:minVerticalExtent>'
                          f'<ddms:maxVerticalExtent>100</ddms:maxVerticalExtent>'
                          f'</ddms:verticalExtent>')
        self.check_invalid(InvalidFormatError, "'low' is not an xs:double value",
                           VerticalExtent.from_element, elem)

    def test_mismatched_child_attributes(self):
        xmlns = get_xmlns('5.0')
        elem = self.parse(f'<ddms:verticalExtent {xmlns} ddms:unitOfMeasure="Meter" '
                          f'ddms:datum="AGL"><ddms:minVerticalExtent ddms:unitOfMeasure="Foot">'
                          f'0</ddms:minVerticalExtent>'
                          f'<ddms:maxVerticalExtent>100</ddms:maxVerticalExtent>'
                          f'</ddms:verticalExtent>')
        err = self.check_invalid(
            CrossFieldConsistencyError,
            'The unitOfMeasure on the minVerticalExtent element must match '
            'the unitOfMeasure on the enclosing verticalExtent element.',
            VerticalExtent.from_element, elem
        )
        self.assertEqual(err.locator, '/ddms:verticalExtent')

        elem = self.parse(f'<ddms:verticalExtent {xmlns} ddms:unitOfMeasure="Meter" '
                          f'ddms:datum="AGL"><ddms:minVerticalExtent ddms:datum="AGL">'
                          f'0</ddms:minVerticalExtent>'
                          f'<ddms:maxVerticalExtent ddms:unitOfMeasure="Meter">100'
                          f'</ddms:maxVerticalExtent></ddms:verticalExtent>')
        self.assertEqual(VerticalExtent.from_element(elem).maximum, 100.0)


class TestBoundingGeometry(DdmsTestCase):

    @staticmethod
    def get_point(version):
        position = Position(coordinates=[32.1, 40.1], version=version)
        return Point(srs_attributes={'srs_name': SRS_NAME}, id='IDValue',
                     position=position, version=version)

    @staticmethod
    def get_polygon(version):
        positions = [Position(coordinates=x, version=version) for x in
                     ([32.1, 40.1], [32.2, 40.1], [32.2, 40.2], [32.1, 40.1])]
        return Polygon(srs_attributes={'srs_name': SRS_NAME}, id='PolygonID',
                       positions=positions, version=version)

    def test_gml_geometries(self):
        geometry = BoundingGeometry(points=[self.get_point('3.1')], version='3.1')
        self.assertEqual(geometry.to_text(), f'boundingGeometry.Point.srsName: {SRS_NAME}\n'
                                             'boundingGeometry.Point.id: IDValue\n'
                                             'boundingGeometry.Point.pos: 32.1 40.1\n')
        self.check_round_trip(geometry)

        for version in ('2.0', '4.0.1'):
            geometry = BoundingGeometry(polygons=[self.get_polygon(version)],
                                        points=[self.get_point(version)], version=version)
            elem = geometry.to_etree()
            self.assertListEqual([local_name(e.tag) for e in elem], ['Polygon', 'Point'])
            self.check_round_trip(geometry)

    def test_required_geometry(self):
        err = self.check_invalid(MissingRequiredFieldError,
                                 'At least 1 of Polygon or Point must be used.',
                                 BoundingGeometry, version='3.1')
        self.assertEqual(err.locator, '/ddms:boundingGeometry')

        elem = self.parse(f'<ddms:boundingGeometry {get_xmlns("4.0.1")}/>')
        self.check_invalid(MissingRequiredFieldError,
                           'At least 1 of Polygon or Point must be used.',
                           BoundingGeometry.from_element, elem)

        self.check_invalid(MissingRequiredFieldError, 'At least 1 TSPI shape must be used.',
                           BoundingGeometry, version='5.0')

    def test_gml_geometries_not_in_5_0(self):
        self.check_invalid(IncompatibleVersionError,
                           'The Point element can only be used before DDMS 5.0.',
                           BoundingGeometry, points=[self.get_point('5.0')], version='5.0')

    def test_tspi_shapes(self):
        xmlns = get_xmlns('5.0', 'ddms', 'tspi', 'gml')
        elem = self.parse(
            f'<ddms:boundingGeometry {xmlns}>'
            f'<tspi:Point gml:id="PointMinimalExample" srsName="{SRS_NAME}">'
            f'<gml:pos>53.81 -2.10</gml:pos>'
            f'</tspi:Point>'
            f'</ddms:boundingGeometry>'
        )
        geometry = BoundingGeometry.from_element(elem)
        self.assertIs(geometry.version, registry.resolve('5.0'))
        self.assertEqual(len(geometry.shapes), 1)

        shape = geometry.shapes[0]
        self.assertIsInstance(shape, TspiPoint)
        self.assertEqual(shape.qualified_name, 'tspi:Point')
        self.assertEqual(shape.id, 'PointMinimalExample')
        self.assertEqual(len(shape.content), 1)
        pos = ElementTree.XML(shape.content[0])
        self.assertEqual(pos.tag, f'{{{GML_3_2_NAMESPACE}}}pos')
        self.assertEqual(pos.text, '53.81 -2.10')

        self.assertEqual(geometry.to_text(), f'boundingGeometry.Point.srsName: {SRS_NAME}\n'
                                             'boundingGeometry.Point.id: PointMinimalExample\n')
        self.check_round_trip(geometry)

        built = geometry.to_etree()
        pos = built.find('tspi:Point/gml:pos', {'tspi': TSPI_NAMESPACE, 'gml': GML_3_2_NAMESPACE})
        self.assertIsNotNone(pos)
        self.assertEqual(pos.text, '53.81 -2.10')

    def test_tspi_shape_from_data(self):
        content = f'<gml:pos xmlns:gml="{GML_3_2_NAMESPACE}">\n  53.81 -2.10\n</gml:pos>'
        shape = TspiPoint(srs_attributes={'srs_name': SRS_NAME}, id='PointMinimalExample',
                          content=content, version='5.0')
        pos = ElementTree.XML(f'<gml:pos xmlns:gml="{GML_3_2_NAMESPACE}">53.81 -2.10</gml:pos>')
        other = TspiPoint(srs_attributes={'srs_name': SRS_NAME}, id='PointMinimalExample',
                          content=[pos], version='5.0')
        self.assertEqual(shape, other)
        self.check_round_trip(shape)

        with self.assertRaises(DdmsValueError):
            TspiPoint(srs_attributes={'srs_name': SRS_NAME}, id='PointMinimalExample',
                      content='<gml:pos>53.81 -2.10</gml:pos>', version='5.0')

    def test_tspi_shape_rules(self):
        err = self.check_invalid(MissingRequiredFieldError,
                                 'At least 1 child element must exist within tspi:Point.',
                                 TspiPoint, srs_attributes={'srs_name': SRS_NAME},
                                 id='PointMinimalExample', version='5.0')
        self.assertEqual(err.locator, '/tspi:Point')

        content = (f'<gml:lowerCorner xmlns:gml="{GML_3_2_NAMESPACE}">'
                   f'53.81 -2.10</gml:lowerCorner>')
        envelope = TspiEnvelope(srs_attributes={'srs_name': SRS_NAME}, content=content,
                                version='5.0')
        self.assertIsNone(envelope.id)
        self.check_round_trip(envelope)

        self.check_invalid(MissingRequiredFieldError, 'id attribute is required.',
                           TspiCircle, srs_attributes={'srs_name': SRS_NAME},
                           content=content, version='5.0')
        self.check_invalid(IncompatibleVersionError,
                           'The Point element cannot be used until DDMS 5.0 or later.',
                           TspiPoint, srs_attributes={'srs_name': SRS_NAME},
                           id='PointMinimalExample', content=content, version='4.0.1')


class TestTemporalCoverage(DdmsTestCase):

    def test_temporal_coverage(self):
        coverage = TemporalCoverage(time_period_name='Cold War', start='1979-09-01',
                                    end='Not Applicable', version='5.0')
        self.assertEqual(coverage.period_name, 'Cold War')
        self.assertEqual(str(coverage.start_date), '1979-09-01')
        self.assertIsNone(coverage.end_date)
        self.assertEqual(coverage.to_text(), 'temporalCoverage.name: Cold War\n'
                                             'temporalCoverage.start: 1979-09-01\n'
                                             'temporalCoverage.end: Not Applicable\n')

        elem = coverage.to_etree()
        self.assertEqual(len(elem), 1)
        self.assertEqual(len(elem[0]), 3)
        self.check_round_trip(coverage)

    def test_defaults_to_unknown(self):
        coverage = TemporalCoverage(version='5.0')
        self.assertEqual(coverage.start, 'Unknown')
        self.assertEqual(coverage.end, 'Unknown')
        self.assertEqual(coverage.period_name, 'Unknown')
        self.assertIsNone(coverage.start_date)

        xmlns = get_xmlns('5.0')
        elem = self.parse(f'<ddms:temporalCoverage {xmlns}><ddms:TimePeriod>'
                          f'<ddms:start/><ddms:end>2003</ddms:end>'
                          f'</ddms:TimePeriod></ddms:temporalCoverage>')
        coverage = TemporalCoverage.from_element(elem)
        self.assertEqual(coverage.start, 'Unknown')
        self.assertEqual(coverage.end, '2003')

        elem = self.parse(f'<ddms:temporalCoverage {xmlns}><ddms:TimePeriod>'
                          f'<ddms:end>2003</ddms:end></ddms:TimePeriod></ddms:temporalCoverage>')
        err = self.check_invalid(MissingRequiredFieldError, 'Exactly 1 start element must exist.',
                                 TemporalCoverage.from_element, elem)
        self.assertEqual(err.locator, '/ddms:temporalCoverage')

    def test_invalid_dates(self):
        self.check_invalid(CrossFieldConsistencyError, 'The end date is before the start date.',
                           TemporalCoverage, start='2005', end='2004-12-31', version='5.0')
        self.check_invalid(InvalidFormatError,
                           'The start value "yesterday" is not a valid date or '
                           'one of Not Applicable, Unknown.',
                           TemporalCoverage, start='yesterday', version='5.0')

        coverage = TemporalCoverage(start='2004-12', end='2004-12-31T23:00:00Z', version='5.0')
        self.assertEqual(coverage.end, '2004-12-31T23:00:00Z')

    def test_dates_with_timezones(self):
        # the end is at 13:00 UTC, three hours after the start
        coverage = TemporalCoverage(start='2006-01-01T10:00:00Z',
                                    end='2006-01-01T05:00:00-08:00', version='5.0')
        self.assertLess(coverage.start_date, coverage.end_date)

        coverage = TemporalCoverage(start='2006-01-01T10:00:00Z',
                                    end='2006-01-01T02:00:00-08:00', version='5.0')
        self.assertEqual(coverage.start_date, coverage.end_date)

        self.check_invalid(CrossFieldConsistencyError, 'The end date is before the start date.',
                           TemporalCoverage, start='2006-01-01T10:00:00+02:00',
                           end='2006-01-01T09:00:00+02:00', version='5.0')
        self.check_invalid(CrossFieldConsistencyError, 'The end date is before the start date.',
                           TemporalCoverage, start='2006-01-02+05:00',
                           end='2006-01-01T10:00:00-08:00', version='5.0')

    def test_empty_name_warning(self):
        xmlns = get_xmlns('5.0')
        elem = self.parse(f'<ddms:temporalCoverage {xmlns}><ddms:TimePeriod>'
                          f'<ddms:name/><ddms:start>Unknown</ddms:start><ddms:end>Unknown</ddms:end>'
                          f'</ddms:TimePeriod></ddms:temporalCoverage>')
        coverage = TemporalCoverage.from_element(elem)
        self.assertEqual(coverage.period_name, 'Unknown')
        self.assertListEqual(coverage.validation_warnings, [ValidationMessage.warning(
            'A ddms:name element was found with no value. Defaulting to "Unknown".',
            '/ddms:temporalCoverage/ddms:TimePeriod'
        )])
        self.assertEqual(coverage.to_text(), 'temporalCoverage.start: Unknown\n'
                                             'temporalCoverage.end: Unknown\n')

    def test_security_attributes(self):
        coverage = TemporalCoverage(start='2003', end='2004', security_attributes=SECURITY,
                                    version='3.0')
        self.check_round_trip(coverage)

        self.check_invalid(IncompatibleVersionError,
                           'Security attributes cannot be applied to this component '
                           'until DDMS 3.0 or later.',
                           TemporalCoverage, start='2003', end='2004',
                           security_attributes=SECURITY, version='2.0')


class TestLink(DdmsTestCase):

    XLINK = {'type': 'locator', 'href': 'http://en.wikipedia.org/wiki/Tank',
             'role': 'tank', 'title': 'Tank Page', 'label': 'tank'}

    def test_link(self):
        link = Link(xlink_attributes=self.XLINK, version='5.0')
        self.assertEqual(link.to_text(), 'link.type: locator\n'
                                         'link.href: http://en.wikipedia.org/wiki/Tank\n'
                                         'link.role: tank\n'
                                         'link.title: Tank Page\n'
                                         'link.label: tank\n')
        self.check_round_trip(link)

        link = Link(xlink_attributes=self.XLINK, security_attributes=SECURITY, version='4.0.1')
        self.check_round_trip(link)

    def test_invalid_link(self):
        self.check_invalid(InvalidFormatError,
                           'The type attribute must have a fixed value of "locator".',
                           Link, xlink_attributes=dict(self.XLINK, type='simple'),
                           version='5.0')
        self.check_invalid(MissingRequiredFieldError, 'href attribute is required.',
                           Link, xlink_attributes={'type': 'locator'}, version='5.0')
        self.check_invalid(IncompatibleVersionError,
                           'Security attributes cannot be applied to this component '
                           'until DDMS 4.0.1 or later.',
                           Link, xlink_attributes=self.XLINK, security_attributes=SECURITY,
                           version='3.1')


if __name__ == '__main__':
    run_ddms_tests('summary')
