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
This module contains the reader of DDMS XML documents. XML data is loaded
with xmlschema's XMLResource, that defuses untrusted data, and optionally
validated against the schema of its DDMS version.
"""
from pathlib import Path
from typing import Any, Optional
from xml.etree import ElementTree

from xmlschema import XMLResource, XMLSchema, XMLSchemaException

from ddms.exceptions import DdmsReaderError
from ddms.names import VOCABULARIES, DDMS_VOCABULARY
from ddms.aliases import ElementType, XMLSourceType
from ddms.settings import DdmsSettings, DEFAULT_SETTINGS
from ddms.versions import DdmsVersion, VersionRegistry, registry
from ddms.utils.logger import logger, logged
from ddms.utils.qnames import get_namespace
from ddms.components.base import DdmsComponent, get_component_class


class DdmsReader:
    """
    Reads DDMS components from XML sources.

    :param settings: optional settings, for default the package settings.
    :param versions: an optional version registry, for default the package registry.
    """
    _schemas: dict[Path, XMLSchema]

    def __init__(self, settings: Optional[DdmsSettings] = None,
                 versions: Optional[VersionRegistry] = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.versions = versions if versions is not None else registry
        self._schemas = {}

    def __repr__(self) -> str:
        return '%s(settings=%r)' % (self.__class__.__name__, self.settings)

    def get_resource(self, source: XMLSourceType) -> XMLResource:
        """Loads an XML source, raising a `DdmsReaderError` if it can't be parsed."""
        try:
            return XMLResource(source, defuse=self.settings.defuse)
        except (XMLSchemaException, ElementTree.ParseError, OSError) as err:
            raise DdmsReaderError(f"can't load XML data: {err}", source) from None

    def get_version(self, elem: ElementType) -> tuple[DdmsVersion, str]:
        """
        Returns the DDMS version and the vocabulary of the namespace of an element.
        Raises a `DdmsReaderError` if the namespace doesn't belong to a version.
        """
        namespace = get_namespace(elem.tag)
        for vocabulary in VOCABULARIES:
            version = self.versions.resolve_by_namespace(namespace, vocabulary)
            if version is not None:
                return version, vocabulary

        raise DdmsReaderError(f"the namespace {namespace!r} doesn't "
                              f"belong to a supported DDMS version")

    def get_schema(self, version: DdmsVersion,
                   vocabulary: str = DDMS_VOCABULARY) -> Optional[XMLSchema]:
        """
        Returns the schema of a vocabulary of a version, `None` if no schema is
        available and the schema validation is not mandatory. Built schemas are
        cached by path.
        """
        path = self.settings.get_schema_path(version, vocabulary)
        if path is None or not path.is_file():
            if self.settings.schema_validation:
                raise DdmsReaderError(f"no schema available for DDMS {version} "
                                      f"{vocabulary!r} vocabulary")
            return None

        try:
            return self._schemas[path]
        except KeyError:
            logger.debug("Build schema %r for DDMS %s", str(path), version)
            try:
                schema = self._schemas[path] = XMLSchema(str(path))
            except (XMLSchemaException, ElementTree.ParseError, OSError) as err:
                raise DdmsReaderError(f"can't build the schema {str(path)!r}: {err}") from None
            return schema

    def iter_schema_errors(self, resource: XMLResource, version: DdmsVersion,
                           vocabulary: str = DDMS_VOCABULARY) -> list[str]:
        """Returns the schema validation reasons, an empty list if the resource is valid."""
        if self.settings.schema_validation is False:
            return []

        schema = self.get_schema(version, vocabulary)
        if schema is None:
            logger.debug("Skip schema validation of %r: no schema available", resource)
            return []

        errors = []
        for err in schema.iter_errors(resource):
            reason = err.reason or err.message
            errors.append(f'{reason} (path {err.path})' if err.path else reason)
        return errors

    @logged
    def read_element(self, source: XMLSourceType) -> tuple[ElementType, DdmsVersion]:
        """
        Reads the root element of an XML source, validating it against the
        schema of its version if the settings require it.

        :param source: a path, a URL, a string or an ElementTree element.
        :return: a couple with the root element and the DDMS version.
        """
        resource = self.get_resource(source)
        logger.debug("Read XML resource %r", resource)

        version, vocabulary = self.get_version(resource.root)
        errors = self.iter_schema_errors(resource, version, vocabulary)
        if errors:
            raise DdmsReaderError("XML data is not valid against the DDMS schema.",
                                  source, errors)
        return resource.root, version

    @logged
    def read(self, source: XMLSourceType,
             cls: Optional[type[DdmsComponent]] = None) -> Any:
        """
        Builds a component from an XML source.

        :param source: a path, a URL, a string or an ElementTree element.
        :param cls: the expected component class, for default the class \
        is looked up from the name of the root element.
        """
        root, version = self.read_element(source)
        if cls is None:
            cls = get_component_class(root.tag, version)
            if cls is None:
                raise DdmsReaderError(f"no component is available for "
                                      f"element {root.tag!r}", source)

        logger.debug("Build %s component from %r", cls.__name__, source)
        return cls.from_element(root, version, self.settings)


def read(source: XMLSourceType, cls: Optional[type[DdmsComponent]] = None,
         settings: Optional[DdmsSettings] = None, **kwargs: Any) -> Any:
    """Builds a component from an XML source, using a new reader."""
    return DdmsReader(settings).read(source, cls, **kwargs)
