#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Helper functions for QNames and namespaces."""
from collections.abc import Mapping
from typing import Optional

from ddms.exceptions import DdmsTypeError, DdmsValueError


def get_namespace(qname: str) -> str:
    """
    Returns the namespace URI associated with a QName in extended form or a local name.
    If the argument is not conformant to QName format returns the empty string, which
    means no namespace.
    """
    try:
        if qname[0] != '{':
            return ''
        namespace, _ = qname[1:].split('}')
    except (IndexError, ValueError):
        return ''
    except TypeError:
        raise DdmsTypeError("the argument must be a string-like object")
    else:
        return namespace


def get_qname(uri: Optional[str], name: str) -> str:
    """
    Returns an expanded QName from URI and local part. If the URI is empty or
    `None` returns the *name* argument, that is an unqualified name.

    :param uri: namespace URI
    :param name: local name
    """
    if not isinstance(name, str):
        raise DdmsTypeError("the 2nd argument must be a string")
    elif not name or not uri:
        return name
    return f'{{{uri}}}{name}'


def local_name(qname: str) -> str:
    """
    Return the local part of an expanded QName or a prefixed name.

    :param qname: an expanded QName or a prefixed name or a local name.
    """
    try:
        if qname[0] == '{':
            _namespace, qname = qname.split('}')
        elif ':' in qname:
            _prefix, qname = qname.split(':')
    except IndexError:
        return ''
    except ValueError:
        raise DdmsValueError("the argument 'qname' has an invalid value %r" % qname)
    except TypeError:
        raise DdmsTypeError("the argument 'qname' must be a string-like object")
    else:
        return qname


def get_prefixed_qname(qname: str, namespaces: Optional[Mapping[str, str]]) -> str:
    """
    Get the prefixed form of an expanded QName, using a map from prefixes
    to namespace URIs. Returns the argument if the namespace is not mapped.

    :param qname: an extended QName or a local name.
    :param namespaces: an optional mapping from prefixes to namespace URIs.
    """
    if not namespaces or not qname or qname[0] != '{':
        return qname

    namespace, name = qname[1:].split('}', 1)
    for prefix, uri in namespaces.items():
        if uri == namespace:
            return f'{prefix}:{name}' if prefix else name
    return qname
