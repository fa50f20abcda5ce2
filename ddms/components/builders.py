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
Mutable builders of DDMS components.
"""
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, Optional, TypeVar, Union

from ddms.exceptions import DdmsAttributeError, DdmsTypeError
from ddms.aliases import VersionType
from ddms.settings import DdmsSettings
from ddms.utils.logger import logger
from ddms.utils.values import is_empty

from .base import DdmsElementBase
from .fields import Field, SimpleField, Attribute, ChildTexts, Child, Children, AttributeGroup

E = TypeVar('E', bound=DdmsElementBase)


class LazyBuilderList(list):  # type: ignore[type-arg]
    """A list of builders that grows when an index after the last item is accessed."""

    def __init__(self, factory: Callable[[], 'ComponentBuilder[Any]'],
                 items: Iterable[Any] = ()) -> None:
        super().__init__(items)
        self.factory = factory

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, int):
            while len(self) <= index:
                self.append(self.factory())
        return super().__getitem__(index)


class ComponentBuilder(Generic[E]):
    """
    A mutable staging object for a component class. Field values are set
    and read with the Python attribute names of the fields. The builders
    of monomorphic child components and of attribute groups are created
    lazily on first access. Polymorphic children have to be set explicitly,
    with a builder or with a component.

    :param cls: the component class or the attribute group class.
    :param component: an optional component for seeding the builder.
    """
    _cls: type[E]
    _values: dict[str, Any]

    def __init__(self, cls: type[E], component: Optional[E] = None) -> None:
        if not isinstance(cls, type) or not issubclass(cls, DdmsElementBase):
            raise DdmsTypeError(f"{cls!r} is not a component class")

        object.__setattr__(self, '_cls', cls)
        object.__setattr__(self, '_values', {})
        if component is not None:
            if not isinstance(component, cls):
                raise DdmsTypeError(f"{component!r} is not an instance of {cls!r}")
            for name, field in cls.fields.items():
                self._values[name] = self._seed_value(field, getattr(component, name))

    def __repr__(self) -> str:
        return '%s(%s)' % (self.__class__.__name__, self._cls.__name__)

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)

        try:
            field = self._cls.fields[name]
        except KeyError:
            raise DdmsAttributeError(f"{self._cls.__name__!r} has no field {name!r}") from None

        try:
            return self._values[name]
        except KeyError:
            value = self._values[name] = self._empty_value(field)
            return value

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._cls.fields:
            raise DdmsAttributeError(f"{self._cls.__name__!r} has no field {name!r}")
        self._values[name] = value

    def __delattr__(self, name: str) -> None:
        self._values.pop(name, None)

    @property
    def component_class(self) -> type[E]:
        return self._cls

    @staticmethod
    def _empty_value(field: Field) -> Any:
        if isinstance(field, AttributeGroup):
            return ComponentBuilder(field.group_class)
        elif isinstance(field, Children):
            if field.polymorphic:
                return []
            return LazyBuilderList(lambda: ComponentBuilder(field.classes[0]))
        elif isinstance(field, Child):
            return None if field.polymorphic else ComponentBuilder(field.classes[0])
        elif isinstance(field, ChildTexts) or isinstance(field, Attribute) and field.xs_list:
            return []
        return None

    def _seed_value(self, field: Field, value: Any) -> Any:
        if value is None:
            return self._empty_value(field)
        elif isinstance(value, DdmsElementBase):
            return ComponentBuilder(type(value), value)
        elif isinstance(field, Children):
            builders = [ComponentBuilder(type(x), x) for x in value]
            if field.polymorphic:
                return builders
            return LazyBuilderList(lambda: ComponentBuilder(field.classes[0]), builders)
        elif isinstance(value, tuple):
            return list(value)
        return value

    def update(self, values: Mapping[str, Any]) -> None:
        """
        Updates the builder from a mapping. Mappings provided for child
        components or attribute groups update the nested builders.
        """
        for name, value in values.items():
            field = self._cls.fields.get(name)
            if field is None:
                raise DdmsAttributeError(f"{self._cls.__name__!r} has no field {name!r}")
            elif not isinstance(value, Mapping):
                setattr(self, name, value)
            elif isinstance(field, (AttributeGroup, Child)) and not field.multiple:
                nested = getattr(self, name)
                if nested is None:
                    raise DdmsTypeError(f"can't update the polymorphic field {name!r} "
                                        f"with a mapping, assign a builder instead")
                nested.update(value)
            else:
                raise DdmsTypeError(f"invalid mapping for field {name!r}")

    def is_empty(self) -> bool:
        """
        Returns `True` if every staged value is unset or blank, and if every
        nested builder is empty. False booleans count as unset.
        """
        return all(self._is_empty_value(v) for v in self._values.values())

    def _is_empty_value(self, value: Any) -> bool:
        if isinstance(value, ComponentBuilder):
            return value.is_empty()
        elif isinstance(value, DdmsElementBase):
            return value.is_empty()
        elif isinstance(value, list):
            return all(self._is_empty_value(x) for x in value)
        elif value is False:
            return True
        return is_empty(value)

    def _commit_value(self, field: Field, value: Any, version: Optional[VersionType],
                      settings: Optional[DdmsSettings]) -> Any:
        if isinstance(value, ComponentBuilder):
            return value.commit(version, settings)
        elif isinstance(field, Children) and isinstance(value, list):
            items = (self._commit_value(field, x, version, settings) for x in value)
            return [x for x in items if x is not None]
        elif isinstance(field, SimpleField) and isinstance(value, list):
            return list(value)
        return value

    def commit(self, version: Optional[VersionType] = None,
               settings: Optional[DdmsSettings] = None) -> Optional[E]:
        """
        Builds a new component from the staged values. Returns `None` if
        the builder is empty. Each call validates again the values.

        :param version: the DDMS version, for default the current version.
        :param settings: optional settings, for default the package settings.
        """
        if self.is_empty():
            return None

        values = {name: self._commit_value(self._cls.fields[name], value, version, settings)
                  for name, value in self._values.items()}
        component = self._cls(version=version, settings=settings, **values)
        logger.debug("Committed %r", component)
        return component


def build(cls: type[E], partial: Union[None, Mapping[str, Any], E] = None,
          version: Optional[VersionType] = None,
          settings: Optional[DdmsSettings] = None) -> Optional[E]:
    """
    Builds a component from a partial representation of its values. Returns
    `None` if all the values are empty.

    :param cls: the component class.
    :param partial: a mapping of field values, with nested mappings for child \
    components and attribute groups, or a component to copy.
    :param version: the DDMS version, for default the current version.
    :param settings: optional settings, for default the package settings.
    """
    if isinstance(partial, DdmsElementBase):
        builder = ComponentBuilder(cls, partial)
    else:
        builder = ComponentBuilder(cls)
        if partial:
            builder.update(partial)
    return builder.commit(version, settings)
