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
Output renderers of DDMS components. The HTML, Text and JSON outputs are
flattened representations of the component tree, with dotted keys that
are prefixed with the output names of the enclosing components. The XML
output is a namespace-qualified serialization of the component tree.
"""
import html
import json
from collections.abc import Callable
from typing import Any, Union, TYPE_CHECKING

from elementpath.etree import etree_tostring

from ddms.exceptions import DdmsValueError
from ddms.aliases import ElementType, OutputItemType
from ddms.utils.values import format_value

if TYPE_CHECKING:
    from ddms.components.base import DdmsComponent  # noqa: F401

OUTPUT_FORMATS = ('html', 'text', 'json', 'xml')


def iter_leaves(component: 'DdmsComponent', prefix: str = '') -> list[OutputItemType]:
    """Returns the leaf items of a component, in output order."""
    return component.get_output(prefix)


def to_text(component: 'DdmsComponent', prefix: str = '') -> str:
    """Returns the Text output, a `key: value` line for each leaf value."""
    return ''.join(f'{key}: {format_value(value)}\n'
                   for key, value in iter_leaves(component, prefix))


def to_html(component: 'DdmsComponent', prefix: str = '') -> str:
    """Returns the HTML output, a `<meta>` tag for each leaf value."""
    return ''.join(
        '<meta name="{}" content="{}" />\n'.format(
            html.escape(key), html.escape(format_value(value))
        ) for key, value in iter_leaves(component, prefix)
    )


def _json_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_json_value(x) for x in value]
    return value


def to_dict(component: 'DdmsComponent', prefix: str = '') -> dict[str, Any]:
    """
    Returns the flat mapping of the JSON output. The values of repeated
    keys are collected into lists.
    """
    obj: dict[str, Any] = {}
    repeated: set[str] = set()
    for key, value in iter_leaves(component, prefix):
        value = _json_value(value)
        if key not in obj:
            obj[key] = value
        elif key in repeated:
            obj[key].append(value)
        else:
            obj[key] = [obj[key], value]
            repeated.add(key)
    return obj


def to_json(component: 'DdmsComponent', prefix: str = '', **kwargs: Any) -> str:
    """
    Returns the JSON output of a component.

    :param component: the component to render.
    :param prefix: an optional prefix for the keys.
    :param kwargs: optional arguments for `json.dumps()`.
    """
    return json.dumps(to_dict(component, prefix), **kwargs)


def to_etree(component: 'DdmsComponent') -> ElementType:
    """Builds a new ElementTree element from a component."""
    return component.build_element()


def to_xml(component: 'DdmsComponent',
           xml_declaration: bool = False,
           encoding: str = 'unicode') -> Union[str, bytes]:
    """
    Serializes a component to XML, using the prefixes of the component's settings.

    :param component: the component to serialize.
    :param xml_declaration: if `True` inserts the XML declaration at the head.
    :param encoding: if "unicode" (the default) the output is a string, \
    otherwise it's binary.
    """
    namespaces = component.settings.get_namespaces(component.version)
    return etree_tostring(
        component.build_element(),
        namespaces=namespaces,
        xml_declaration=xml_declaration,
        encoding=encoding,
    )


RENDERERS: dict[str, Callable[..., Any]] = {
    'html': to_html,
    'text': to_text,
    'json': to_json,
    'xml': to_xml,
}


def render(component: 'DdmsComponent', fmt: str = 'text', **kwargs: Any) -> Any:
    """
    Renders a component in one of the output formats.

    :param component: the component to render.
    :param fmt: the output format, can be 'html', 'text', 'json' or 'xml'.
    :param kwargs: other options for the renderer.
    """
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise DdmsValueError(f"unknown output format {fmt!r}, "
                             f"must be one of {OUTPUT_FORMATS!r}") from None
    return renderer(component, **kwargs)
