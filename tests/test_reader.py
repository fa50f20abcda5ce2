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
"""Tests of the reader of DDMS XML documents."""
import logging
import pathlib
from xml.etree import ElementTree

from ddms.exceptions import DdmsReaderError, MissingRequiredFieldError, WrongNameError
from ddms.settings import DdmsSettings
from ddms.versions import registry
from ddms.reader import DdmsReader, read
from ddms.utils.logger import logger
from ddms.components import Identifier, Title, Description, Creator, Point
from ddms.testing import DdmsTestCase, run_ddms_tests

CASES_DIR = pathlib.Path(__file__).parent.joinpath('test_cases')


def casepath(filename):
    return str(CASES_DIR.joinpath(filename))


class TestDdmsReader(DdmsTestCase):

    def setUp(self):
        super().setUp()
        self.reader = DdmsReader()
        self.validating_reader = DdmsReader(DdmsSettings(schema_dir=CASES_DIR))

    def test_read_components(self):
        identifier = self.reader.read(casepath('identifier.xml'))
        self.assertIsInstance(identifier, Identifier)
        self.assertEqual(identifier.value, 'urn:buri:ddmsence:testIdentifier')

        creator = self.reader.read(casepath('creator-4.0.1.xml'))
        self.assertIsInstance(creator, Creator)
        self.assertIs(creator.version, registry.resolve('4.0.1'))

        point = self.reader.read(casepath('point.xml'))
        self.assertIsInstance(point, Point)
        self.assertIs(point.version, registry.resolve('5.0'))

    def test_read_other_sources(self):
        xml_source = pathlib.Path(casepath('identifier.xml')).read_text()
        self.assertIsInstance(self.reader.read(xml_source), Identifier)

        root = ElementTree.parse(casepath('title-3.0.xml')).getroot()
        title = self.reader.read(root)
        self.assertIsInstance(title, Title)
        self.assertEqual(title.text, 'DDMSence Sample')

    def test_read_with_class(self):
        identifier = self.reader.read(casepath('identifier.xml'), cls=Identifier)
        self.assertIsInstance(identifier, Identifier)

        with self.assertRaises(WrongNameError) as ctx:
            self.reader.read(casepath('identifier.xml'), cls=Title)
        self.assertEqual(ctx.exception.message,
                         'Unexpected namespace URI and local name encountered: ddms:identifier')

    def test_read_element(self):
        root, version = self.reader.read_element(casepath('title-3.0.xml'))
        self.assertEqual(root.tag, '{http://metadata.dod.mil/mdr/ns/DDMS/3.0/}title')
        self.assertIs(version, registry.resolve('3.0'))

    def test_unsupported_data(self):
        with self.assertRaises(DdmsReaderError) as ctx:
            self.reader.read(casepath('not-ddms.xml'))
        self.assertEqual(str(ctx.exception), "the namespace 'http://example.test/ns' "
                                             "doesn't belong to a supported DDMS version")

        with self.assertRaises(DdmsReaderError) as ctx:
            self.reader.read(casepath('malformed.xml'))
        self.assertTrue(str(ctx.exception).startswith("can't load XML data: "))
        self.assertEqual(ctx.exception.source, casepath('malformed.xml'))

        with self.assertRaises(DdmsReaderError) as ctx:
            self.reader.read(casepath('missing-file.xml'))
        self.assertTrue(str(ctx.exception).startswith("can't load XML data: "))

        xml_source = f'<ddms:Unexisting xmlns:ddms="{registry.resolve("5.0").namespace}"/>'
        with self.assertRaises(DdmsReaderError) as ctx:
            self.reader.read(xml_source)
        self.assertIn("no component is available for element", str(ctx.exception))

    def test_invalid_component(self):
        with self.assertRaises(MissingRequiredFieldError) as ctx:
            self.reader.read(casepath('identifier-missing-qualifier.xml'))
        self.assertEqual(ctx.exception.message, 'qualifier attribute is required.')
        self.assertEqual(ctx.exception.locator, '/ddms:identifier')

    def test_repr(self):
        self.assertTrue(repr(self.reader).startswith('DdmsReader(settings=DdmsSettings('))


class TestSchemaValidation(DdmsTestCase):

    def setUp(self):
        super().setUp()
        self.reader = DdmsReader(DdmsSettings(schema_dir=CASES_DIR))

    def test_valid_data(self):
        identifier = self.reader.read(casepath('identifier.xml'))
        self.assertIsInstance(identifier, Identifier)

        description = self.reader.read(casepath('description-empty.xml'))
        self.assertIsInstance(description, Description)
        self.assertEqual(len(description.validation_warnings), 1)

    def test_invalid_data(self):
        with self.assertRaises(DdmsReaderError) as ctx:
            self.reader.read(casepath('identifier-extra-attribute.xml'))
        err = ctx.exception
        self.assertEqual(err.message, "XML data is not valid against the DDMS schema.")
        self.assertEqual(len(err.errors), 1)
        self.assertIn('extra', err.errors[0])
        self.assertTrue(str(err).startswith("XML data is not valid against the DDMS schema:\n  "))

        # the schema error comes before the component validation
        with self.assertRaises(DdmsReaderError) as ctx:
            self.reader.read(casepath('identifier-missing-qualifier.xml'))
        self.assertIn('qualifier', ctx.exception.errors[0])

    def test_missing_schemas(self):
        # no schema of the GML vocabulary in the test cases
        point = self.reader.read(casepath('point.xml'))
        self.assertIsInstance(point, Point)
        self.assertIsNone(self.reader.get_schema(point.version, 'gml'))

        reader = DdmsReader(DdmsSettings(schema_dir=CASES_DIR, schema_validation=True))
        with self.assertRaises(DdmsReaderError) as ctx:
            reader.read(casepath('point.xml'))
        self.assertEqual(str(ctx.exception), "no schema available for DDMS 5.0 'gml' vocabulary")

        reader = DdmsReader(DdmsSettings(schema_validation=True))
        with self.assertRaises(DdmsReaderError):
            reader.read(casepath('identifier.xml'))

    def test_disabled_validation(self):
        reader = DdmsReader(DdmsSettings(schema_dir=CASES_DIR, schema_validation=False))
        identifier = reader.read(casepath('identifier-extra-attribute.xml'))
        self.assertIsInstance(identifier, Identifier)

    def test_schema_cache(self):
        version = registry.resolve('5.0')
        with self.assertLogs('ddms', level='DEBUG') as ctx:
            schema = self.reader.get_schema(version)
        self.assertIn('Build schema', ctx.output[0])
        self.assertIsNotNone(schema)
        self.assertIs(self.reader.get_schema(version), schema)


class TestReaderLogging(DdmsTestCase):

    def test_loglevel_argument(self):
        reader = DdmsReader()
        level = logger.level
        with self.assertLogs('ddms', level='DEBUG') as ctx:
            reader.read(casepath('identifier.xml'), loglevel=logging.DEBUG)
        self.assertTrue(any('Build Identifier component from' in x for x in ctx.output))

        reader.read(casepath('identifier.xml'), loglevel='DEBUG')
        self.assertEqual(logger.level, level)

    def test_read_function(self):
        identifier = read(casepath('identifier.xml'))
        self.assertIsInstance(identifier, Identifier)

        settings = DdmsSettings(schema_dir=CASES_DIR)
        with self.assertRaises(DdmsReaderError):
            read(casepath('identifier-extra-attribute.xml'), settings=settings)

        title = read(casepath('title-3.0.xml'), cls=Title, loglevel='ERROR')
        self.assertEqual(title.text, 'DDMSence Sample')


if __name__ == '__main__':
    run_ddms_tests('reader')
