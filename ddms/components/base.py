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
This module contains the base classes of DDMS components and attribute groups.
"""
from collections.abc import Iterator
from typing import Any, ClassVar, Optional, TypeVar, Union
from xml.etree import ElementTree

from ddms.exceptions import DdmsTypeError, DdmsValueError, InvalidDdmsError, \
    WrongNameError, IncompatibleVersionError
from ddms.names import DDMS_VOCABULARY
from ddms.aliases import ElementType, OutputItemType, VersionType, VersionRulesType
from ddms.messages import ValidationMessage
from ddms.settings import DdmsSettings, DEFAULT_SETTINGS
from ddms.versions import DdmsVersion, registry
from ddms.utils.qnames import get_namespace, get_qname, get_prefixed_qname
from ddms.utils.etree import etree_sub_element

from .fields import Field, Child, AttributeGroup, join_key

T = TypeVar('T', bound='DdmsElementBase')

_component_classes: list[type['DdmsComponent']] = []


def get_version_for(version: Optional[VersionType],
                    settings: DdmsSettings) -> DdmsVersion:
    """
    Returns the version to use for building a component: the explicit version if
    provided, otherwise the current version or the default version of the settings.
    """
    if version is None and registry.current is None and settings.default_version:
        return registry.resolve(settings.default_version)
    return registry.get_version(version)


class DdmsElementBase:
    """
    Common base class for components and attribute groups. Subclasses declare
    their fields as class attributes. The values are immutable after the
    construction and are validated against the rules of a DDMS version.

    :param version: the DDMS version, for default the current version.
    :param settings: optional settings, for default the package settings.
    :param values: the field values, provided with Python attribute names.
    """
    fields: ClassVar[dict[str, Field]] = {}
    since: ClassVar[Optional[str]] = None
    until: ClassVar[Optional[str]] = None

    _values: dict[str, Any]
    _version: DdmsVersion
    _settings: DdmsSettings
    _warnings: list[ValidationMessage]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        fields: dict[str, Field] = {}
        for base in reversed(cls.__mro__):
            for attr, value in base.__dict__.items():
                if isinstance(value, Field):
                    fields[attr] = value
        cls.fields = fields

    def __init__(self, *, version: Optional[VersionType] = None,
                 settings: Optional[DdmsSettings] = None, **values: Any) -> None:
        settings = settings or DEFAULT_SETTINGS
        self._setup(get_version_for(version, settings), settings)

        for name in values:
            if name not in self.fields:
                raise DdmsTypeError(f"{self.__class__.__name__}() got an "
                                    f"unexpected keyword argument {name!r}")

        try:
            self.check_version()
            for name, field in self.fields.items():
                self._values[name] = field.normalize(values.get(name), self)
            self._check()
        except InvalidDdmsError as err:
            raise self._wrap_error(err) from None

    @classmethod
    def from_element(cls: type[T], elem: ElementType,
                     version: Optional[VersionType] = None,
                     settings: Optional[DdmsSettings] = None) -> T:
        """
        Creates an instance from an XML element.

        :param elem: an ElementTree or lxml element.
        :param version: the DDMS version of the element, for default the version \
        is determined from the namespace of the element.
        :param settings: optional settings, for default the package settings.
        """
        settings = settings or DEFAULT_SETTINGS
        if version is None:
            version = cls.get_version_by_element(elem)

        self = cls.__new__(cls)
        self._setup(get_version_for(version, settings), settings)
        try:
            self.check_version()
            self.check_element(elem)
            for name, field in self.fields.items():
                self._values[name] = field.parse(elem, self)
            self._check()
        except InvalidDdmsError as err:
            raise self._wrap_error(err) from None
        return self

    @classmethod
    def get_version_by_element(cls, elem: ElementType) -> Optional[DdmsVersion]:
        return registry.resolve_by_namespace(get_namespace(elem.tag))

    def _setup(self, version: DdmsVersion, settings: DdmsSettings) -> None:
        self._version = version
        self._settings = settings
        self._values = {}
        self._warnings = []

    def _check(self) -> None:
        self.validate()
        self._warnings.clear()
        self.validate_warnings()

    def _wrap_error(self, err: InvalidDdmsError) -> InvalidDdmsError:
        return err

    def __repr__(self) -> str:
        values = ', '.join(f'{k}={v!r}' for k, v in self._values.items()
                           if not self.fields[k].is_empty(v))
        if not values:
            return '%s(version=%r)' % (self.__class__.__name__, self._version.version)
        return '%s(version=%r, %s)' % (self.__class__.__name__, self._version.version, values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DdmsElementBase):
            return NotImplemented
        return type(self) is type(other) and self._version == other._version \
            and self._values == other._values

    def __hash__(self) -> int:
        return hash((type(self), self._version, tuple(self._values.items())))

    @property
    def version(self) -> DdmsVersion:
        return self._version

    @property
    def settings(self) -> DdmsSettings:
        return self._settings

    @property
    def values(self) -> dict[str, Any]:
        """A copy of the field values, keyed by Python attribute names."""
        return self._values.copy()

    @classmethod
    def is_available(cls, version: DdmsVersion) -> bool:
        if cls.since is not None and not version.is_at_least(cls.since):
            return False
        return cls.until is None or not version.is_at_least(cls.until)

    def check_version(self) -> None:
        """Checks that the class can be used with the version of the instance."""

    def check_element(self, elem: ElementType) -> None:
        """Checks the element before extracting the field values."""

    def is_empty(self) -> bool:
        return all(self.fields[k].is_empty(v) for k, v in self._values.items())

    def validate(self) -> None:
        """
        Validates the field values against the rules of the version. Raises an
        `InvalidDdmsError` on the first failure. Subclasses extend this method
        for adding cross-field rules, calling the base method before.
        """
        for name, field in self.fields.items():
            field.validate(self._values[name], self)

    def validate_warnings(self) -> None:
        """
        Adds the non-fatal findings about the field values. Called after
        a successful validation.
        """
        for name, field in self.fields.items():
            field.validate_warnings(self._values[name], self)

    def add_warning(self, text: str, locator: str = '') -> None:
        """
        Adds a warning message.

        :param text: the warning text.
        :param locator: a locator relative to the element of the component.
        """
        self._warnings.append(ValidationMessage.warning(text, locator))

    @property
    def validation_warnings(self) -> list[ValidationMessage]:
        return self._warnings.copy()

    def iter_output(self, prefix: str = '') -> Iterator[OutputItemType]:
        """
        Iterates the key-value items of the text outputs.

        :param prefix: the prefix of the keys, for nested components is the \
        key of the parent component.
        """
        for name, field in self.fields.items():
            yield from field.iter_output(self._values[name], prefix, self)

    def get_output(self, prefix: str = '') -> list[OutputItemType]:
        return list(self.iter_output(prefix))


class DdmsAttributeGroup(DdmsElementBase):
    """
    Base class for groups of attributes that can be attached to components.
    The errors of an attribute group are located by the owning component.
    """
    description: ClassVar[str] = 'attributes'

    def require(self) -> None:
        """Checks the values required when the owning component mandates the group."""

    def build_attributes(self, elem: ElementType) -> None:
        """Sets the attributes of the group on the element of the owning component."""
        for name, field in self.fields.items():
            field.build(elem, self._values[name], self)


class DdmsComponent(DdmsElementBase):
    """
    Base class for DDMS components, immutable objects that represent an XML
    element and its content. Components can be created from XML elements or
    from raw data. In both cases the values are validated against the rules
    of a DDMS version.

    A component class declares the name of the element, that can be a mapping
    from versions to names when the element has been renamed in a version, and
    the vocabulary of its namespace. The output name is used for building the
    keys of the text outputs: an empty string means the element name, `None`
    means that the outputs are merged with the outputs of the parent component.
    """
    element_name: ClassVar[VersionRulesType[str]] = ''
    vocabulary: ClassVar[str] = DDMS_VOCABULARY
    output_name: ClassVar[Optional[str]] = ''

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get('element_name'):
            _component_classes.append(cls)

    def _wrap_error(self, err: InvalidDdmsError) -> InvalidDdmsError:
        return err.with_parent(self.qualified_name)

    @classmethod
    def get_version_by_element(cls, elem: ElementType) -> Optional[DdmsVersion]:
        return registry.resolve_by_namespace(get_namespace(elem.tag), cls.vocabulary)

    @classmethod
    def get_element_name(cls, version: DdmsVersion) -> str:
        try:
            return version.select(cls.element_name)
        except DdmsValueError:
            # not available in the version: use the oldest name
            if isinstance(cls.element_name, str):
                return cls.element_name
            return next(iter(cls.element_name.values()))

    @classmethod
    def get_tag(cls, version: DdmsVersion) -> Optional[str]:
        """Returns the expanded name of the element, `None` if the version has not its namespace."""
        try:
            return get_qname(version.get_namespace(cls.vocabulary), cls.get_element_name(version))
        except DdmsValueError:
            return None

    @property
    def name(self) -> str:
        """The local name of the element."""
        return self.get_element_name(self._version)

    @property
    def prefix(self) -> str:
        return self._settings.get_prefix(self.vocabulary)

    @property
    def qualified_name(self) -> str:
        """The prefixed name of the element."""
        return f'{self.prefix}:{self.name}'

    @property
    def namespace(self) -> str:
        return self._version.get_namespace(self.vocabulary)

    @property
    def tag(self) -> str:
        """The expanded name of the element."""
        return get_qname(self.namespace, self.name)

    def check_version(self) -> None:
        version = self._version
        if self.since is not None and not version.is_at_least(self.since):
            raise IncompatibleVersionError(
                f'The {self.name} element cannot be used until DDMS {self.since} or later.'
            )
        elif self.until is not None and version.is_at_least(self.until):
            raise IncompatibleVersionError(
                f'The {self.name} element can only be used before DDMS {self.until}.'
            )

    def check_element(self, elem: ElementType) -> None:
        if elem.tag != self.tag:
            namespaces = self._settings.get_namespaces(self._version)
            raise WrongNameError('Unexpected namespace URI and local name encountered: '
                                 f'{get_prefixed_qname(elem.tag, namespaces)}')

    @property
    def validation_warnings(self) -> list[ValidationMessage]:
        """
        The warnings of the component, followed by the warnings of its nested
        components. The locators are prefixed with the qualified name.
        """
        qualified_name = self.qualified_name
        messages = [x.with_parent(qualified_name) for x in self._warnings]
        for name, field in self.fields.items():
            value = self._values[name]
            if isinstance(field, AttributeGroup):
                messages.extend(x.with_parent(qualified_name) for x in value.validation_warnings)
            elif isinstance(field, Child):
                children = value if field.multiple else (value,) if value is not None else ()
                for child in children:
                    messages.extend(x.with_parent(qualified_name)
                                    for x in child.validation_warnings)
        return messages

    def xml_order(self) -> list[str]:
        """The names of the fields in the order of the XML representation."""
        return list(self.fields)

    def get_output_key(self, prefix: str = '') -> str:
        if self.output_name is None:
            return prefix
        return join_key(prefix, self.output_name or self.name)

    def iter_output(self, prefix: str = '') -> Iterator[OutputItemType]:
        yield from super().iter_output(self.get_output_key(prefix))

    def build_element(self, parent: Optional[ElementType] = None) -> ElementType:
        """
        Builds the XML element of the component.

        :param parent: an optional parent element, if provided the new element \
        is appended to it.
        """
        if parent is None:
            elem = ElementTree.Element(self.tag)
        else:
            elem = etree_sub_element(parent, self.tag)

        for name in self.xml_order():
            self.fields[name].build(elem, self._values[name], self)
        return elem

    @classmethod
    def builder(cls, component: Optional['DdmsComponent'] = None) -> Any:
        """
        Returns a builder for the class, optionally seeded with
        the values of an existing component.
        """
        from .builders import ComponentBuilder
        return ComponentBuilder(cls, component)

    def to_etree(self) -> ElementType:
        from ddms.renderers import to_etree
        return to_etree(self)

    def to_xml(self, **kwargs: Any) -> str:
        from ddms.renderers import to_xml
        return to_xml(self, **kwargs)

    def to_html(self) -> str:
        from ddms.renderers import to_html
        return to_html(self)

    def to_text(self) -> str:
        from ddms.renderers import to_text
        return to_text(self)

    def to_json(self, **kwargs: Any) -> str:
        from ddms.renderers import to_json
        return to_json(self, **kwargs)


def get_component_class(tag: str, version: Union[None, str, DdmsVersion] = None) \
        -> Optional[type[DdmsComponent]]:
    """
    Returns the component class of an element for a version.

    :param tag: the expanded name of the element.
    :param version: the DDMS version, for default the version that owns \
    the namespace of the tag.
    """
    if version is None:
        descriptor = registry.resolve_by_namespace(get_namespace(tag))
        if descriptor is None:
            for cls in _component_classes:
                if cls.vocabulary != DDMS_VOCABULARY:
                    descriptor = registry.resolve_by_namespace(get_namespace(tag), cls.vocabulary)
                    if descriptor is not None:
                        break
            else:
                return None
    else:
        descriptor = registry.resolve(version)

    for cls in _component_classes:
        if cls.is_available(descriptor) and cls.get_tag(descriptor) == tag:
            return cls
    return None


def get_component_classes() -> list[type[DdmsComponent]]:
    return _component_classes.copy()
