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
Field descriptors of DDMS components. A component class declares its fields,
in output order, and each field knows how to parse, normalize, validate,
build and render the value it describes, following the rules of a version.
"""
from collections.abc import Callable, Iterable, Iterator, Mapping
from functools import partial
from typing import Any, Optional, TYPE_CHECKING, Union
from xml.etree import ElementTree

from ddms.exceptions import DdmsAttributeError, DdmsTypeError, DdmsValueError, \
    InvalidDdmsError, MissingRequiredFieldError, InvalidFormatError, \
    IncompatibleVersionError
from ddms.names import DDMS_VOCABULARY
from ddms.aliases import ElementType, OutputItemType, VersionRulesType
from ddms.utils.qnames import get_qname
from ddms.utils.etree import is_etree_element, iter_child_elements, get_element_text, \
    etree_sub_element, etree_canonical_string, etree_append_copy
from ddms.utils.values import is_empty, is_uri, is_ncname, is_token, is_date, \
    to_boolean, to_number, to_list, format_value

if TYPE_CHECKING:
    from ddms.versions import DdmsVersion  # noqa: F401
    from .base import DdmsElementBase, DdmsComponent, DdmsAttributeGroup  # noqa: F401

FORMAT_CHECKS: dict[str, tuple[Callable[[Any], bool], str]] = {
    'uri': (is_uri, 'a valid URI'),
    'ncname': (is_ncname, 'a valid NCName'),
    'token': (is_token, 'a valid token'),
    'date': (is_date, 'a valid date (xs:dateTime, xs:date, xs:gYearMonth or xs:gYear)'),
    'xs:date': (partial(is_date, types=('date',)), 'a valid xs:date'),
    'positive': (lambda x: x > 0, 'a positive number'),
}


def join_key(*parts: Optional[str]) -> str:
    """Joins the not empty parts of an output key with dots."""
    return '.'.join(x for x in parts if x)


class Field:
    """
    Base class of field descriptors.

    :param name: the XML local name, or a version-keyed mapping of local names.
    :param vocabulary: the vocabulary of the XML name, `None` for unqualified names, \
    maybe version-keyed.
    :param required: a boolean or a version-keyed mapping of booleans.
    :param since: the first version that admits the field.
    :param until: the first version that doesn't admit the field anymore.
    :param label: the label used for building output keys, for default is the \
    name of the field in the version.
    :param default: the value used when the field is unset or blank.
    """
    kind = 'field'
    multiple = False
    attr = ''  # the Python attribute name, set by __set_name__()

    def __init__(self, name: VersionRulesType[str] = None, *,
                 vocabulary: VersionRulesType[Optional[str]] = DDMS_VOCABULARY,
                 required: VersionRulesType[bool] = False,
                 since: Optional[str] = None,
                 until: Optional[str] = None,
                 label: Optional[str] = None,
                 default: Any = None) -> None:
        self.name = name
        self.vocabulary = vocabulary
        self.required = required
        self.since = since
        self.until = until
        self.label = label
        self.default = default

    def __set_name__(self, owner: type[Any], attr: str) -> None:
        self.attr = attr
        if self.name is None:
            self.name = attr

    def __get__(self, instance: Optional['DdmsElementBase'], owner: type[Any]) -> Any:
        if instance is None:
            return self
        return instance._values.get(self.attr, self.empty_value)

    def __set__(self, instance: 'DdmsElementBase', value: Any) -> None:
        raise DdmsAttributeError(f"can't set attribute {self.attr!r}: the object is immutable")

    def __delete__(self, instance: 'DdmsElementBase') -> None:
        raise DdmsAttributeError(f"can't delete attribute {self.attr!r}: the object is immutable")

    def __repr__(self) -> str:
        return '%s(name=%r)' % (self.__class__.__name__, self.name)

    @property
    def empty_value(self) -> Any:
        return None

    def is_available(self, version: 'DdmsVersion') -> bool:
        if self.since is not None and not version.is_at_least(self.since):
            return False
        return self.until is None or not version.is_at_least(self.until)

    def is_required(self, version: 'DdmsVersion') -> bool:
        return bool(version.select(self.required))

    def is_empty(self, value: Any) -> bool:
        return is_empty(value)

    def get_name(self, version: 'DdmsVersion') -> str:
        try:
            return version.select(self.name)
        except DdmsValueError:
            return self.label or self.attr

    def get_label(self, version: 'DdmsVersion') -> str:
        return self.label if self.label is not None else self.get_name(version)

    def get_vocabulary(self, version: 'DdmsVersion') -> Optional[str]:
        return version.select(self.vocabulary)

    def get_tag(self, version: 'DdmsVersion') -> Optional[str]:
        """Returns the expanded name for a version, `None` if it can't be determined."""
        try:
            namespace = version.get_namespace(self.get_vocabulary(version))
            return get_qname(namespace, version.select(self.name))
        except DdmsValueError:
            return None

    def get_prefixed_name(self, component: 'DdmsElementBase') -> str:
        name = self.get_name(component.version)
        vocabulary = self.get_vocabulary(component.version)
        if vocabulary is None:
            return name
        return f'{component.settings.get_prefix(vocabulary)}:{name}'

    def get_description(self, version: 'DdmsVersion') -> str:
        return f'{self.get_name(version)} {self.kind}'

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        """Normalizes a value provided to the raw data constructor."""
        return self.default if value is None else value

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        """Extracts the value of the field from an element."""
        raise NotImplementedError()

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        """Writes the value of the field into an element."""
        raise NotImplementedError()

    def validate(self, value: Any, component: 'DdmsElementBase') -> None:
        """Checks the value against the rules of the version of the component."""
        version = component.version
        if not self.is_available(version):
            if not self.is_empty(value):
                raise IncompatibleVersionError(self.get_version_message(version))
        elif self.is_empty(value) and self.is_required(version):
            raise MissingRequiredFieldError(self.get_required_message(component))

    def validate_warnings(self, value: Any, component: 'DdmsElementBase') -> None:
        """Adds the warnings about the value to the component."""

    def get_required_message(self, component: 'DdmsElementBase') -> str:
        return f'{self.get_description(component.version)} is required.'

    def get_version_message(self, version: 'DdmsVersion') -> str:
        description = self.get_description(version)
        if self.since is not None and not version.is_at_least(self.since):
            return f'The {description} cannot be used until DDMS {self.since} or later.'
        return f'The {description} can only be used before DDMS {self.until}.'

    def iter_output(self, value: Any, base: str, component: 'DdmsElementBase') \
            -> Iterator[OutputItemType]:
        if not self.is_empty(value):
            yield join_key(base, self.get_label(component.version)), value


class SimpleField(Field):
    """
    Base class for fields with simple values.

    :param datatype: the Python type of the value, can be `str`, `bool`, `int` or `float`.
    :param xs_list: if `True` the value is an xs:list, stored as a tuple of items.
    :param checks: the lexical checks of the value, keys of `FORMAT_CHECKS`.
    :param choices: an optional enumeration of admitted values.
    :param fixed: an optional fixed value.
    """
    def __init__(self, name: VersionRulesType[str] = None, *,
                 datatype: type[Any] = str,
                 xs_list: bool = False,
                 checks: Iterable[str] = (),
                 choices: Optional[Iterable[Any]] = None,
                 fixed: Optional[str] = None,
                 **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        if datatype not in (str, bool, int, float):
            raise DdmsTypeError(f"unsupported datatype {datatype!r}")
        self.datatype = datatype
        self.xs_list = xs_list
        self.checks = tuple(checks)
        for check in self.checks:
            if check not in FORMAT_CHECKS:
                raise DdmsValueError(f"unknown format check {check!r}")
        self.choices = None if choices is None else tuple(choices)
        self.fixed = fixed

    @property
    def empty_value(self) -> Any:
        return () if self.xs_list else None

    def convert_item(self, text: str) -> Any:
        if self.datatype is str:
            return text
        elif not text.strip():
            return None

        try:
            if self.datatype is bool:
                return to_boolean(text)
            return to_number(text, self.datatype)
        except DdmsValueError as err:
            raise InvalidFormatError(str(err)) from None

    def convert(self, text: str) -> Any:
        """Converts an XML lexical value to the datatype of the field."""
        if self.xs_list:
            return tuple(self.convert_item(x) for x in to_list(text))
        return self.convert_item(text)

    def normalize_item(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.convert_item(value)
        elif self.datatype is str:
            raise DdmsTypeError(f"{self.attr!r} must be a string, not {type(value)!r}")
        elif self.datatype is bool:
            if not isinstance(value, bool):
                raise DdmsTypeError(f"{self.attr!r} must be a boolean, not {type(value)!r}")
            return value
        elif isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DdmsTypeError(f"{self.attr!r} must be a number, not {type(value)!r}")
        elif self.datatype is int and not isinstance(value, int):
            raise DdmsTypeError(f"{self.attr!r} must be an integer, not {type(value)!r}")
        return self.datatype(value)

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        if value is None:
            return self.default if self.default is not None else self.empty_value
        elif not self.xs_list:
            return self.normalize_item(value)
        elif isinstance(value, str):
            return self.convert(value)
        elif not isinstance(value, Iterable):
            raise DdmsTypeError(f"{self.attr!r} must be a sequence, not {type(value)!r}")
        return tuple(self.normalize_item(x) for x in value)

    def iter_values(self, value: Any) -> Iterator[Any]:
        if self.xs_list:
            yield from value
        elif not self.is_empty(value):
            yield value

    def validate(self, value: Any, component: 'DdmsElementBase') -> None:
        super().validate(value, component)
        if self.is_empty(value):
            return

        description = self.get_description(component.version)
        for item in self.iter_values(value):
            for check in self.checks:
                predicate, message = FORMAT_CHECKS[check]
                if not predicate(item):
                    raise InvalidFormatError(
                        f'The value "{format_value(item)}" of the {description} is not {message}.'
                    )
            if self.choices is not None and item not in self.choices:
                raise InvalidFormatError(
                    f'The value "{format_value(item)}" of the {description} must be '
                    f'one of {", ".join(map(str, self.choices))}.'
                )
            if self.fixed is not None and item != self.fixed:
                raise InvalidFormatError(
                    f'The {description} must have a fixed value of "{self.fixed}".'
                )


class Attribute(SimpleField):
    """A field mapped to an XML attribute."""
    kind = 'attribute'

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        tag = self.get_tag(component.version)
        if tag is None:
            return self.empty_value

        text = elem.get(tag)
        if text is None:
            return self.default if self.default is not None else self.empty_value
        return self.convert(text)

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        if value is None or self.xs_list and not value:
            return
        tag = self.get_tag(component.version)
        if tag is not None:
            elem.set(tag, format_value(value))


class Text(SimpleField):
    """
    A field mapped to the text of the element of the component.

    :param empty_warning: if `True` adds a warning when the element has no value.
    """
    kind = 'element'

    def __init__(self, *, label: str = '', empty_warning: bool = False,
                 **kwargs: Any) -> None:
        super().__init__('', label=label, **kwargs)
        self.empty_warning = empty_warning

    def __set_name__(self, owner: type[Any], attr: str) -> None:
        self.attr = attr

    def get_description(self, version: 'DdmsVersion') -> str:
        return 'element value' if not self.label else f'{self.label} value'

    def get_required_message(self, component: 'DdmsElementBase') -> str:
        return f'{component.name} value is required.'

    def get_version_message(self, version: 'DdmsVersion') -> str:
        if self.since is not None and not version.is_at_least(self.since):
            return f'This element cannot have a value until DDMS {self.since} or later.'
        return f'This element can have a value only before DDMS {self.until}.'

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        if value == '':
            value = None
        return super().normalize(value, component)

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        if not elem.text:
            return self.default if self.default is not None else self.empty_value
        return self.convert(elem.text)

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        if value is not None and value != ():
            elem.text = format_value(value)

    def validate_warnings(self, value: Any, component: 'DdmsElementBase') -> None:
        if self.empty_warning and self.is_empty(value):
            component.add_warning(f'A {component.qualified_name} element was found with no value.')


class ChildText(SimpleField):
    """
    A field mapped to the text of a child element. A present but empty child
    element has an empty string value, a missing child element has a `None` value.

    :param wrapper: the local name of an intermediate wrapper element.
    :param empty_warning: if `True` or a message template, adds a warning for \
    child elements found with no value. The template can refer to the \
    prefixed name of the element with `{name}`. Can be version-keyed.
    """
    kind = 'element'

    def __init__(self, name: VersionRulesType[str] = None, *,
                 wrapper: Optional[str] = None,
                 empty_warning: VersionRulesType[Union[bool, str]] = False,
                 **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        self.wrapper = wrapper
        self.empty_warning = empty_warning

    def get_required_message(self, component: 'DdmsElementBase') -> str:
        return f'Exactly 1 {self.get_name(component.version)} element must exist.'

    def get_parent(self, elem: ElementType, component: 'DdmsElementBase') -> Optional[ElementType]:
        if self.wrapper is None:
            return elem

        namespace = component.version.get_namespace(self.get_vocabulary(component.version))
        for child in iter_child_elements(elem, get_qname(namespace, self.wrapper)):
            return child
        return None

    def get_texts(self, elem: ElementType, component: 'DdmsElementBase') -> list[str]:
        tag = self.get_tag(component.version)
        parent = self.get_parent(elem, component)
        if tag is None or parent is None:
            return []
        return [get_element_text(child) for child in iter_child_elements(parent, tag)]

    def convert(self, text: str) -> Any:
        if self.datatype is str or not text.strip():
            return text
        return super().convert(text)

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        texts = self.get_texts(elem, component)
        if not texts:
            return None
        elif len(texts) > 1:
            if self.is_required(component.version):
                raise InvalidDdmsError(self.get_required_message(component))
            raise InvalidDdmsError(
                f'No more than 1 {self.get_name(component.version)} element(s) may exist.'
            )
        elif self.default is not None and is_empty(texts[0]):
            return self.default
        return self.convert(texts[0])

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        if self.default is not None and is_empty(value):
            return self.default
        return super().normalize(value, component)

    def get_build_parent(self, elem: ElementType, component: 'DdmsElementBase') -> ElementType:
        parent = self.get_parent(elem, component)
        if parent is None:
            namespace = component.version.get_namespace(self.get_vocabulary(component.version))
            parent = etree_sub_element(elem, get_qname(namespace, self.wrapper))
        return parent

    def build_child(self, parent: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        tag = self.get_tag(component.version)
        if tag is not None:
            child = etree_sub_element(parent, tag)
            if value != '':
                child.text = format_value(value)

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        if value is not None:
            self.build_child(self.get_build_parent(elem, component), value, component)

    def get_locator(self, component: 'DdmsElementBase') -> str:
        if self.wrapper is None:
            return ''
        prefix = component.settings.get_prefix(self.get_vocabulary(component.version))
        return f'/{prefix}:{self.wrapper}'

    def has_empty_warning(self, version: 'DdmsVersion') -> bool:
        return bool(version.select(self.empty_warning))

    def get_empty_warning(self, component: 'DdmsElementBase') -> str:
        template = component.version.select(self.empty_warning)
        if isinstance(template, str):
            return template.format(name=self.get_prefixed_name(component))
        return f'A {self.get_prefixed_name(component)} element was found with no value.'

    def validate_warnings(self, value: Any, component: 'DdmsElementBase') -> None:
        if self.has_empty_warning(component.version) and value is not None and is_empty(value):
            component.add_warning(self.get_empty_warning(component), self.get_locator(component))


class ChildTexts(ChildText):
    """
    A field mapped to the texts of repeated child elements, stored as a tuple.

    :param min_occurs: the minimum number of child elements, maybe version-keyed.
    :param max_occurs: the maximum number of child elements, maybe version-keyed, \
    `None` means unbounded.
    :param nonempty: if `True` at least one child element must have a value.
    """
    multiple = True

    def __init__(self, name: VersionRulesType[str] = None, *,
                 min_occurs: VersionRulesType[int] = 0,
                 max_occurs: VersionRulesType[Optional[int]] = None,
                 nonempty: bool = False,
                 **kwargs: Any) -> None:
        super().__init__(name, **kwargs)
        self.min_occurs = min_occurs
        self.max_occurs = max_occurs
        self.nonempty = nonempty

    @property
    def empty_value(self) -> Any:
        return ()

    def is_empty(self, value: Any) -> bool:
        return not value

    def is_required(self, version: 'DdmsVersion') -> bool:
        return version.select(self.min_occurs) > 0

    def get_required_message(self, component: 'DdmsElementBase') -> str:
        min_occurs = component.version.select(self.min_occurs)
        return f'At least {min_occurs} {self.get_name(component.version)} element must exist.'

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        return tuple(self.convert(x) for x in self.get_texts(elem, component))

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        if value is None:
            return ()
        elif isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise DdmsTypeError(f"{self.attr!r} must be a sequence, not {type(value)!r}")
        return tuple(SimpleField.normalize(self, x, component) or '' for x in value)

    def iter_values(self, value: Any) -> Iterator[Any]:
        return (x for x in value if not is_empty(x))

    def validate(self, value: Any, component: 'DdmsElementBase') -> None:
        super().validate(value, component)
        if not self.is_available(component.version):
            return

        name = self.get_name(component.version)
        min_occurs = component.version.select(self.min_occurs)
        max_occurs = component.version.select(self.max_occurs)
        if len(value) < min_occurs:
            raise MissingRequiredFieldError(self.get_required_message(component))
        elif max_occurs is not None and len(value) > max_occurs:
            raise InvalidDdmsError(f'No more than {max_occurs} {name} element(s) may exist.')
        elif self.nonempty and all(is_empty(x) for x in value):
            raise MissingRequiredFieldError(
                f'At least 1 {name} element must have a non-empty value.'
            )

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        if value:
            parent = self.get_build_parent(elem, component)
            for item in value:
                self.build_child(parent, item, component)

    def validate_warnings(self, value: Any, component: 'DdmsElementBase') -> None:
        if self.has_empty_warning(component.version) and any(is_empty(x) for x in value):
            component.add_warning(self.get_empty_warning(component), self.get_locator(component))

    def iter_output(self, value: Any, base: str, component: 'DdmsElementBase') \
            -> Iterator[OutputItemType]:
        key = join_key(base, self.get_label(component.version))
        for item in self.iter_values(value):
            yield key, item


class Child(Field):
    """
    A field mapped to a child component, that can be an instance of one
    of the component classes provided as positional arguments.

    :param name: a name used in messages, for default is the element \
    name of the first class.
    :param wrapper: the local name, or a path of local names, of intermediate \
    wrapper elements. The wrappers are in the namespace of the owner component.
    """
    kind = 'element'

    def __init__(self, *classes: type['DdmsComponent'], name: Optional[str] = None,
                 required: VersionRulesType[bool] = False,
                 wrapper: Union[None, str, tuple[str, ...]] = None,
                 since: Optional[str] = None,
                 until: Optional[str] = None) -> None:
        if not classes:
            raise DdmsTypeError("at least a component class is required")
        super().__init__(name, required=required, since=since, until=until, label='')
        self.classes = classes
        self.wrapper = (wrapper,) if isinstance(wrapper, str) else tuple(wrapper or ())

    def __set_name__(self, owner: type[Any], attr: str) -> None:
        self.attr = attr

    @property
    def polymorphic(self) -> bool:
        return len(self.classes) > 1

    def get_name(self, version: 'DdmsVersion') -> str:
        if self.name is not None:
            return self.name
        return self.classes[0].get_element_name(version)

    def get_description(self, version: 'DdmsVersion') -> str:
        return f'{self.get_name(version)} element'

    def get_required_message(self, component: 'DdmsElementBase') -> str:
        return f'{self.get_name(component.version)} is required.'

    def get_wrapper_tags(self, component: 'DdmsElementBase') -> list[str]:
        namespace = component.version.get_namespace(component.vocabulary)
        return [get_qname(namespace, name) for name in self.wrapper]

    def get_parent(self, elem: ElementType, component: 'DdmsElementBase') -> Optional[ElementType]:
        parent: Optional[ElementType] = elem
        for tag in self.get_wrapper_tags(component):
            parent = next(iter_child_elements(parent, tag), None)
            if parent is None:
                break
        return parent

    def get_build_parent(self, elem: ElementType, component: 'DdmsElementBase') -> ElementType:
        parent = elem
        for tag in self.get_wrapper_tags(component):
            child = next(iter_child_elements(parent, tag), None)
            parent = etree_sub_element(parent, tag) if child is None else child
        return parent

    def iter_components(self, elem: ElementType, component: 'DdmsElementBase') \
            -> Iterator['DdmsComponent']:
        parent = self.get_parent(elem, component)
        if parent is None:
            return

        version = component.version
        tags = {}
        for cls in self.classes:
            if cls.is_available(version):
                tag = cls.get_tag(version)
                if tag is not None:
                    tags[tag] = cls

        for child in iter_child_elements(parent):
            if child.tag in tags:
                yield tags[child.tag].from_element(child, version, component.settings)

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        components = list(self.iter_components(elem, component))
        if not components:
            return None
        elif len(components) > 1:
            raise InvalidDdmsError(
                f'No more than 1 {self.get_name(component.version)} element(s) may exist.'
            )
        return components[0]

    def check_type(self, value: Any) -> Any:
        if not isinstance(value, self.classes):
            names = ', '.join(x.__name__ for x in self.classes)
            raise DdmsTypeError(f"{self.attr!r} must be an instance of {names}, not {type(value)!r}")
        return value

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        return None if value is None else self.check_type(value)

    def check_version(self, value: 'DdmsComponent', component: 'DdmsElementBase') -> None:
        if value.version != component.version:
            raise IncompatibleVersionError(
                f'A child component, {value.qualified_name}, '
                f'is using a different version of DDMS.'
            )

    def validate(self, value: Any, component: 'DdmsElementBase') -> None:
        super().validate(value, component)
        if value is not None:
            self.check_version(value, component)

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        if value is not None:
            value.build_element(self.get_build_parent(elem, component))

    def iter_output(self, value: Any, base: str, component: 'DdmsElementBase') \
            -> Iterator[OutputItemType]:
        if value is not None:
            yield from value.iter_output(base)


class Children(Child):
    """A field mapped to a sequence of child components, stored as a tuple."""
    multiple = True

    def __init__(self, *classes: type['DdmsComponent'],
                 min_occurs: VersionRulesType[int] = 0,
                 max_occurs: VersionRulesType[Optional[int]] = None,
                 **kwargs: Any) -> None:
        super().__init__(*classes, **kwargs)
        self.min_occurs = min_occurs
        self.max_occurs = max_occurs

    @property
    def empty_value(self) -> Any:
        return ()

    def is_empty(self, value: Any) -> bool:
        return not value

    def is_required(self, version: 'DdmsVersion') -> bool:
        return version.select(self.min_occurs) > 0

    def get_required_message(self, component: 'DdmsElementBase') -> str:
        min_occurs = component.version.select(self.min_occurs)
        return f'At least {min_occurs} {self.get_name(component.version)} element must exist.'

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        return tuple(self.iter_components(elem, component))

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        if value is None:
            return ()
        elif not isinstance(value, Iterable):
            raise DdmsTypeError(f"{self.attr!r} must be a sequence, not {type(value)!r}")
        return tuple(self.check_type(x) for x in value)

    def validate(self, value: Any, component: 'DdmsElementBase') -> None:
        Field.validate(self, value, component)
        if not self.is_available(component.version):
            return

        min_occurs = component.version.select(self.min_occurs)
        max_occurs = component.version.select(self.max_occurs)
        if len(value) < min_occurs:
            raise MissingRequiredFieldError(self.get_required_message(component))
        elif max_occurs is not None and len(value) > max_occurs:
            raise InvalidDdmsError(
                f'No more than {max_occurs} {self.get_name(component.version)} '
                f'element(s) may exist.'
            )
        for item in value:
            self.check_version(item, component)

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        if value:
            parent = self.get_build_parent(elem, component)
            for item in value:
                item.build_element(parent)

    def iter_output(self, value: Any, base: str, component: 'DdmsElementBase') \
            -> Iterator[OutputItemType]:
        for item in value:
            yield from item.iter_output(base)


class AttributeGroup(Field):
    """
    A field mapped to an attribute group. The value is always an instance of the
    group class, possibly empty. If the field is required the group's `require()`
    method is called during validation.
    """
    kind = 'attribute group'

    def __init__(self, group_class: type['DdmsAttributeGroup'], *,
                 required: VersionRulesType[bool] = False,
                 since: Optional[str] = None,
                 until: Optional[str] = None) -> None:
        super().__init__('', vocabulary=None, required=required,
                         since=since, until=until, label='')
        self.group_class = group_class

    def __set_name__(self, owner: type[Any], attr: str) -> None:
        self.attr = attr

    def get_description(self, version: 'DdmsVersion') -> str:
        return self.group_class.description

    def get_version_message(self, version: 'DdmsVersion') -> str:
        description = self.group_class.description.capitalize()
        if self.since is not None and not version.is_at_least(self.since):
            return (f'{description} cannot be applied to this component '
                    f'until DDMS {self.since} or later.')
        return f'{description} can only be applied to this component before DDMS {self.until}.'

    def is_empty(self, value: Any) -> bool:
        return value is None or value.is_empty()

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        return self.group_class.from_element(elem, component.version, component.settings)

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        if value is None:
            return self.group_class(version=component.version, settings=component.settings)
        elif isinstance(value, Mapping):
            return self.group_class(version=component.version,
                                    settings=component.settings, **value)
        elif not isinstance(value, self.group_class):
            raise DdmsTypeError(f"{self.attr!r} must be an instance of "
                                f"{self.group_class.__name__}, not {type(value)!r}")
        return value

    def validate(self, value: Any, component: 'DdmsElementBase') -> None:
        version = component.version
        if value.version != version:
            raise IncompatibleVersionError(
                f'The {self.group_class.description} are using a different version of DDMS.'
            )
        elif not self.is_available(version):
            if not self.is_empty(value):
                raise IncompatibleVersionError(self.get_version_message(version))
        elif self.is_required(version):
            value.require()

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        value.build_attributes(elem)

    def iter_output(self, value: Any, base: str, component: 'DdmsElementBase') \
            -> Iterator[OutputItemType]:
        yield from value.iter_output(base)


class Markup(Field):
    """
    A field mapped to the child elements of a component that are kept as opaque
    XML. The value is a tuple with the canonical XML strings of the elements, so
    values are compared by content. Raw data can provide elements or XML strings.
    """
    kind = 'content'
    multiple = True

    def __init__(self, *, required: VersionRulesType[bool] = False,
                 since: Optional[str] = None,
                 until: Optional[str] = None) -> None:
        super().__init__('content', vocabulary=None, required=required,
                         since=since, until=until, label='')

    def __set_name__(self, owner: type[Any], attr: str) -> None:
        self.attr = attr

    @property
    def empty_value(self) -> Any:
        return ()

    def is_empty(self, value: Any) -> bool:
        return not value

    def get_required_message(self, component: 'DdmsElementBase') -> str:
        return f'At least 1 child element must exist within {component.qualified_name}.'

    def parse(self, elem: ElementType, component: 'DdmsElementBase') -> Any:
        return tuple(etree_canonical_string(child) for child in iter_child_elements(elem))

    def canonicalize(self, item: Any) -> str:
        if isinstance(item, str):
            try:
                item = ElementTree.fromstring(item)
            except ElementTree.ParseError as err:
                raise DdmsValueError(f"{self.attr!r} has an invalid XML item: {err}") from None
        elif not is_etree_element(item):
            raise DdmsTypeError(f"{self.attr!r} items must be XML strings or elements, "
                                f"not {type(item)!r}")
        return etree_canonical_string(item)

    def normalize(self, value: Any, component: 'DdmsElementBase') -> Any:
        if value is None:
            return ()
        elif isinstance(value, str) or is_etree_element(value):
            return (self.canonicalize(value),)
        elif not isinstance(value, Iterable):
            raise DdmsTypeError(f"{self.attr!r} must be a sequence, not {type(value)!r}")
        return tuple(self.canonicalize(x) for x in value)

    def build(self, elem: ElementType, value: Any, component: 'DdmsElementBase') -> None:
        for item in value:
            etree_append_copy(elem, ElementTree.fromstring(item))

    def iter_output(self, value: Any, base: str, component: 'DdmsElementBase') \
            -> Iterator[OutputItemType]:
        return iter(())
