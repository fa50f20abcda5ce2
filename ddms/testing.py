#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""
Unittest extensions for ddms: a base test case for components and
helpers for building test scripts.
"""
import platform
import re
import unittest
from xml.etree import ElementTree

import ddms
from ddms.names import DDMS_VOCABULARY
from ddms.settings import DEFAULT_SETTINGS
from ddms.versions import registry


_REGEX_SPACES = re.compile(r'\s+')


def print_test_header():
    """Print an header that displays Python version and platform used for test session."""
    header1 = "Test %r" % ddms
    header2 = "with Python {} on platform {}".format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{2}\n{0}'.format("*" * max(len(header1), len(header2)), header1, header2))


def run_ddms_tests(name=None):
    """Runs the tests of the calling module, printing an header before."""
    if name is not None:
        print_test_header()
    unittest.main()


def get_xmlns(version, *vocabularies):
    """
    Returns the namespace declarations of a version, as a string of XML attributes.
    For default only the 'ddms' vocabulary is declared.
    """
    descriptor = registry.resolve(version)
    declarations = []
    for vocabulary in vocabularies or (DDMS_VOCABULARY,):
        prefix = DEFAULT_SETTINGS.get_prefix(vocabulary)
        declarations.append(f'xmlns:{prefix}="{descriptor.get_namespace(vocabulary)}"')
    return ' '.join(declarations)


def etree_elements_assert_equal(elem, other, strict=True):
    """
    Tests the equality of two XML Element trees.

    :param elem: the master Element tree.
    :param other: the other Element tree that has to be compared.
    :param strict: asserts strictly equality, if `False` differences of \
    whitespace in texts are ignored.
    :raise: an AssertionError containing information about first difference encountered.
    """
    if elem.tag != other.tag:
        raise AssertionError(f"{elem!r} != {other!r}: tags differ")
    elif elem.attrib != other.attrib:
        msg = "{!r} != {!r}: attributes differ: {!r} != {!r}"
        raise AssertionError(msg.format(elem, other, elem.attrib, other.attrib))

    text1, text2 = elem.text or '', other.text or ''
    if not strict:
        text1 = _REGEX_SPACES.sub(' ', text1.strip())
        text2 = _REGEX_SPACES.sub(' ', text2.strip())
    if text1 != text2:
        raise AssertionError(f"{elem!r} != {other!r}: texts differ: {text1!r} != {text2!r}")

    children = [e for e in elem if isinstance(e.tag, str)]
    other_children = [e for e in other if isinstance(e.tag, str)]
    if len(children) != len(other_children):
        msg = "%r != %r: children number differ: %r != %r"
        raise AssertionError(msg % (elem, other, len(children), len(other_children)))

    for e1, e2 in zip(children, other_children):
        etree_elements_assert_equal(e1, e2, strict)


class DdmsTestCase(unittest.TestCase):
    """
    TestCase class for DDMS components. The current version is cleared
    before and after each test.
    """
    longMessage = True

    def setUp(self):
        registry.clear_current()

    def tearDown(self):
        registry.clear_current()

    @staticmethod
    def parse(xml_data):
        return ElementTree.XML(xml_data)

    def check_round_trip(self, component):
        """Checks that a component can be rebuilt from its XML and from its builder."""
        elem = component.to_etree()
        other = type(component).from_element(elem, component.version, component.settings)
        self.assertEqual(other, component)
        etree_elements_assert_equal(other.to_etree(), elem)

        builder = type(component).builder(component)
        self.assertFalse(builder.is_empty())
        self.assertEqual(builder.commit(component.version, component.settings), component)

    def check_invalid(self, exc_class, message, func, *args, **kwargs):
        """Checks that a call raises an error with a message and returns the error."""
        with self.assertRaises(exc_class) as ctx:
            func(*args, **kwargs)
        self.assertEqual(ctx.exception.message, message)
        return ctx.exception


__all__ = ['print_test_header', 'run_ddms_tests', 'get_xmlns',
           'etree_elements_assert_equal', 'DdmsTestCase']
