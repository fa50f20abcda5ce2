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
This module contains the descriptors of the supported DDMS versions and the
registry that resolves versions, aliases and namespaces to descriptors.
"""
import dataclasses as dc
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Optional, TypeVar, Union

from ddms.exceptions import DdmsTypeError, DdmsValueError, \
    UnsupportedVersionError, NoVersionSelectedError
from ddms.aliases import ElementType, VersionType
from ddms import names as nm
from ddms.utils.qnames import get_namespace
from ddms.utils.logger import logger

T = TypeVar('T')


def parse_version_number(version: str) -> tuple[int, ...]:
    try:
        return tuple(int(x) for x in version.split('.'))
    except (AttributeError, ValueError):
        raise DdmsValueError(f"{version!r} is not a version number") from None


@dc.dataclass(frozen=True, eq=False)
class DdmsVersion:
    """
    The descriptor of a supported DDMS version.

    :param version: the canonical version string.
    :param namespaces: a map from vocabulary keys to namespace URIs. \
    The 'ddms' key is required and maps the primary namespace.
    :param schemas: a map from vocabulary keys to schema resource paths.
    :param aliases: alternative version strings resolved to this version.
    """
    version: str
    namespaces: Mapping[str, str]
    schemas: Mapping[str, str] = dc.field(default_factory=dict)
    aliases: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if nm.DDMS_VOCABULARY not in self.namespaces:
            raise DdmsValueError(f"missing primary namespace for version {self.version!r}")
        parse_version_number(self.version)
        object.__setattr__(self, 'namespaces', MappingProxyType(dict(self.namespaces)))
        object.__setattr__(self, 'schemas', MappingProxyType(dict(self.schemas)))
        object.__setattr__(self, 'aliases', frozenset(self.aliases))

    def __str__(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return '%s(version=%r)' % (self.__class__.__name__, self.version)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DdmsVersion):
            return self.version == other.version
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.version)

    @property
    def namespace(self) -> str:
        """The primary namespace URI."""
        return self.namespaces[nm.DDMS_VOCABULARY]

    @property
    def number(self) -> tuple[int, ...]:
        return parse_version_number(self.version)

    def get_namespace(self, vocabulary: Optional[str]) -> str:
        """
        Returns the namespace URI of a vocabulary, an empty string for
        `None`, that is used for unqualified names.
        """
        if vocabulary is None:
            return ''
        try:
            return self.namespaces[vocabulary]
        except KeyError:
            msg = f"vocabulary {vocabulary!r} is not available in DDMS {self.version}"
            raise DdmsValueError(msg) from None

    def matches(self, version: str) -> bool:
        """Returns `True` if the argument is the canonical version or one of its aliases."""
        return version == self.version or version in self.aliases

    def is_at_least(self, version: Union[str, 'DdmsVersion']) -> bool:
        if isinstance(version, DdmsVersion):
            return self.number >= version.number
        return self.number >= parse_version_number(version)

    def select(self, rules: Union[T, Mapping[str, T]]) -> T:
        """
        Selects a value from a version-keyed rule table. The chosen rule is the
        one with the greatest version not newer than this version. A value that
        is not a mapping is returned as is.
        """
        if not isinstance(rules, Mapping):
            return rules

        selected: Any = None
        selected_number: tuple[int, ...] = ()
        for version, value in rules.items():
            number = parse_version_number(version)
            if selected_number < number <= self.number:
                selected, selected_number = value, number

        if not selected_number:
            raise DdmsValueError(f"no rule for DDMS {self.version} in {rules!r}")
        return selected


def _build_descriptor(version: str, ddms_namespace: str, ism_namespace: str,
                      gml_namespace: str, schema_dir: str, schema_name: str,
                      aliases: Iterable[str] = (), **extra_namespaces: str) -> DdmsVersion:
    namespaces = {
        nm.DDMS_VOCABULARY: ddms_namespace,
        nm.GML_VOCABULARY: gml_namespace,
        nm.ISM_VOCABULARY: ism_namespace,
        nm.XLINK_VOCABULARY: nm.XLINK_NAMESPACE,
    }
    namespaces.update(extra_namespaces)

    schemas = {
        nm.DDMS_VOCABULARY: f'/schemas/{schema_dir}/DDMS/{schema_name}',
        nm.GML_VOCABULARY: f'/schemas/{schema_dir}/DDMS/DDMS-GML-Profile.xsd',
        nm.ISM_VOCABULARY: f'/schemas/{schema_dir}/ISM/IC-ISM.xsd',
    }
    if nm.NTK_VOCABULARY in extra_namespaces:
        schemas[nm.NTK_VOCABULARY] = f'/schemas/{schema_dir}/NTK/IC-NTK.xsd'
    if nm.TSPI_VOCABULARY in extra_namespaces:
        schemas[nm.GML_VOCABULARY] = f'/schemas/{schema_dir}/DDMS/core/DDMS-GML-Profile.xsd'
        schemas[nm.TSPI_VOCABULARY] = f'/schemas/{schema_dir}/tspi/2.0.0/tspi.xsd'

    return DdmsVersion(version, namespaces, schemas, frozenset(aliases))


SUPPORTED_VERSIONS = (
    _build_descriptor('2.0', nm.DDMS_2_0_NAMESPACE, nm.ISM_V2_NAMESPACE,
                      nm.GML_NAMESPACE, '2.0', 'DDMS-v2_0.xsd'),
    _build_descriptor('3.0', nm.DDMS_3_0_NAMESPACE, nm.ISM_NAMESPACE,
                      nm.GML_3_2_NAMESPACE, '3.0', 'DDMS-v3_0.xsd', aliases=('3.0.1',)),
    _build_descriptor('3.1', nm.DDMS_3_1_NAMESPACE, nm.ISM_NAMESPACE,
                      nm.GML_3_2_NAMESPACE, '3.1', 'DDMS-v3_1.xsd'),
    _build_descriptor('4.0.1', nm.DDMS_4_NAMESPACE, nm.ISM_NAMESPACE,
                      nm.GML_3_2_NAMESPACE, '4.0.1', 'ddms.xsd', aliases=('4.0',),
                      ntk=nm.NTK_NAMESPACE, virt=nm.VIRT_NAMESPACE),
    _build_descriptor('5.0', nm.DDMS_5_NAMESPACE, nm.ISM_NAMESPACE,
                      nm.GML_3_2_NAMESPACE, '5.0', 'core/ddms.xsd',
                      ntk=nm.NTK_NAMESPACE, virt=nm.VIRT_NAMESPACE,
                      tspi=nm.TSPI_NAMESPACE),
)
"The descriptors of the supported versions, in ascending order."


class VersionRegistry:
    """
    A registry of DDMS version descriptors, that resolves version strings,
    aliases and namespace URIs. A registry also keeps a current version,
    that is used by operations that are called without an explicit version.

    :param versions: the version descriptors of the registry.
    :param default: an optional fallback version used when no current \
    version is selected.
    """
    _current: Optional[DdmsVersion] = None

    def __init__(self, versions: Iterable[DdmsVersion] = SUPPORTED_VERSIONS,
                 default: Optional[str] = None) -> None:
        self._versions: dict[str, DdmsVersion] = {}
        self._aliases: dict[str, DdmsVersion] = {}
        primary_namespaces: dict[str, DdmsVersion] = {}

        descriptors = list(versions)
        for descriptor in descriptors:
            if not isinstance(descriptor, DdmsVersion):
                raise DdmsTypeError(f"{descriptor!r} is not a DdmsVersion instance")

        for descriptor in sorted(descriptors, key=lambda x: x.number):
            for version in (descriptor.version, *descriptor.aliases):
                if version in self._aliases:
                    msg = f"version {version!r} is resolved by more than one descriptor"
                    raise DdmsValueError(msg)
                self._aliases[version] = descriptor

            if descriptor.namespace in primary_namespaces:
                msg = f"namespace {descriptor.namespace!r} is shared by more than one version"
                raise DdmsValueError(msg)
            primary_namespaces[descriptor.namespace] = descriptor
            self._versions[descriptor.version] = descriptor

        self.default = None if default is None else self.resolve(default)

    def __repr__(self) -> str:
        return '%s(versions=%r)' % (self.__class__.__name__, list(self._versions))

    def __iter__(self) -> Iterator[DdmsVersion]:
        yield from self._versions.values()

    def __len__(self) -> int:
        return len(self._versions)

    def __contains__(self, version: object) -> bool:
        if isinstance(version, DdmsVersion):
            return self._versions.get(version.version) is version
        return version in self._aliases

    @property
    def versions(self) -> list[str]:
        """The canonical version strings, in ascending order."""
        return list(self._versions)

    def is_supported(self, version: str) -> bool:
        return version in self._aliases

    def resolve(self, version: VersionType) -> DdmsVersion:
        """
        Resolves a version string or an alias to its descriptor.

        :raises UnsupportedVersionError: if the version is not supported.
        """
        if isinstance(version, DdmsVersion):
            if version not in self:
                raise UnsupportedVersionError(f"{version!r} is not registered")
            return version

        try:
            return self._aliases[version]
        except (KeyError, TypeError):
            raise UnsupportedVersionError(f"unsupported DDMS version {version!r}") from None

    def resolve_by_namespace(self, namespace: str, vocabulary: str = nm.DDMS_VOCABULARY) \
            -> Optional[DdmsVersion]:
        """
        Returns the descriptor that maps a vocabulary to a namespace, `None`
        if there is no matching descriptor. For auxiliary vocabularies shared
        by several versions the current version is preferred, otherwise the
        most recent matching version is returned.
        """
        current = self.current
        if current is not None and current.namespaces.get(vocabulary) == namespace:
            return current

        for descriptor in reversed(self._versions.values()):
            if descriptor.namespaces.get(vocabulary) == namespace:
                return descriptor
        return None

    def is_compatible(self, version: VersionType, elem: ElementType,
                      current: Optional[VersionType] = None) -> bool:
        """
        Checks if an element is compatible with a version. The element namespace
        must be the primary namespace of the version, and the version must be the
        active one, that is the current version if no *current* argument is provided.

        :raises NoVersionSelectedError: if there is no active version.
        """
        descriptor = self.resolve(version)
        active = self.get_current() if current is None else self.resolve(current)
        return get_namespace(elem.tag) == descriptor.namespace and descriptor == active

    @property
    def current(self) -> Optional[DdmsVersion]:
        """The current version, or the default version if none is selected."""
        return self._current if self._current is not None else self.default

    def get_current(self) -> DdmsVersion:
        """
        Returns the current version.

        :raises NoVersionSelectedError: if no version is selected and \
        no default is configured.
        """
        current = self.current
        if current is None:
            raise NoVersionSelectedError("no DDMS version is selected")
        return current

    def set_current(self, version: VersionType) -> DdmsVersion:
        """Selects the current version, returning its descriptor."""
        self._current = self.resolve(version)
        logger.debug("Set current DDMS version to %s", self._current)
        return self._current

    def clear_current(self) -> None:
        """Clears the current version selection."""
        self._current = None
        logger.debug("Cleared current DDMS version")

    @contextmanager
    def using(self, version: VersionType) -> Iterator[DdmsVersion]:
        """A context manager that selects a version and restores the previous selection."""
        previous = self._current
        try:
            yield self.set_current(version)
        finally:
            self._current = previous

    def get_version(self, version: Optional[VersionType] = None) -> DdmsVersion:
        """Resolves an explicit version, or returns the current version if `None`."""
        if version is None:
            return self.get_current()
        return self.resolve(version)


registry = VersionRegistry()
"The version registry of the package."


def get_version(version: Optional[VersionType] = None) -> DdmsVersion:
    return registry.get_version(version)


def get_current_version() -> DdmsVersion:
    return registry.get_current()


def set_current_version(version: VersionType) -> DdmsVersion:
    return registry.set_current(version)


def clear_current_version() -> None:
    registry.clear_current()
