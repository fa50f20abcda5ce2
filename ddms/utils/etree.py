#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import copy
from collections.abc import Iterator
from typing import Optional
from xml.etree import ElementTree

from elementpath.etree import etree_tostring

from ddms.aliases import ElementType


def is_etree_element(obj: object) -> bool:
    """A validator for ElementTree elements."""
    return hasattr(obj, 'append') and hasattr(obj, 'tag') and hasattr(obj, 'attrib')


def is_etree_document(obj: object) -> bool:
    """A validator for ElementTree objects."""
    return hasattr(obj, 'getroot') and hasattr(obj, 'parse') and hasattr(obj, 'iter')


def iter_child_elements(elem: ElementType, tag: Optional[str] = None) -> Iterator[ElementType]:
    """
    Iterates the child elements, skipping comments and processing instructions.

    :param elem: the parent element.
    :param tag: an optional expanded QName for filtering the children.
    """
    for child in elem:
        if not isinstance(child.tag, str):
            continue  # lxml's comments and PIs
        elif tag is None or child.tag == tag:
            yield child


def get_element_text(elem: ElementType) -> str:
    """Returns the concatenation of the text nodes of an element, comments excluded."""
    chunks = [elem.text or '']
    for child in elem:
        if isinstance(child.tag, str):
            chunks.append(get_element_text(child))
        chunks.append(child.tail or '')
    return ''.join(chunks)


def etree_sub_element(parent: ElementType, tag: str) -> ElementType:
    """Creates a child element, using the factory of the parent when it's an lxml element."""
    if hasattr(parent, 'makeelement'):
        child = parent.makeelement(tag, {})
        parent.append(child)
        return child
    return ElementTree.SubElement(parent, tag)


def etree_canonical_string(elem: ElementType) -> str:
    """
    Returns the canonical XML (C14N 2.0) of an element, with the tail excluded,
    the surrounding whitespaces of text nodes stripped and the namespace prefixes
    rewritten. Two elements with the same content have the same canonical string.
    """
    elem = copy.copy(elem)
    elem.tail = None
    return ElementTree.canonicalize(etree_tostring(elem), strip_text=True,
                                    rewrite_prefixes=True)


def etree_append_copy(parent: ElementType, elem: ElementType) -> ElementType:
    """Appends a deep copy of an element to a parent, created with the parent's factory."""
    child = etree_sub_element(parent, elem.tag)
    for name, value in elem.attrib.items():
        child.set(name, value)
    child.text = elem.text
    for e in iter_child_elements(elem):
        etree_append_copy(child, e).tail = e.tail
    return child
