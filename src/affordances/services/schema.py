"""
Schema descriptions for request body types.

A SchemaRegistry answers one question: given a type, which first-level named
properties does it expose and what are their declared types?  Types can be
declared explicitly with ``register``/``declare``; anything else is described
from its class declaration: pydantic model fields, dataclass fields or plain
class annotations, plus ``@property`` accessors.  Nested property types are
reported as declared and never expanded.
"""

import dataclasses
import inspect
import logging
import typing
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Type, Union

from pydantic import BaseModel

from affordances.config import Config
from affordances.exceptions import DuplicatePropertyError

logger = logging.getLogger(__name__)

# Every object exposes its own type handle; it is never an input property
META_PROPERTIES = frozenset({"__class__"})

class DuplicatePolicy(str, Enum):
    KEEP_LAST = "keep_last"
    KEEP_FIRST = "keep_first"
    ERROR = "error"

class PropertyDescriptor(NamedTuple):
    name: str
    type: Any

PropertySpec = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

class SchemaRegistry:
    """Maps types to their ordered (name, type) property lists."""

    def __init__(self, policy: Optional[DuplicatePolicy] = None):
        self._declared: Dict[type, List[PropertyDescriptor]] = {}
        self._policy = DuplicatePolicy(policy) if policy is not None else None

    @property
    def policy(self) -> DuplicatePolicy:
        return self._policy if self._policy is not None else Config.duplicate_policy()

    def register(self, tp: type, properties: PropertySpec) -> None:
        """Declare the properties of a type explicitly; replaces any earlier declaration."""
        items = properties.items() if isinstance(properties, Mapping) else properties
        self._declared[tp] = [PropertyDescriptor(name, value_type) for name, value_type in items
                              if name not in META_PROPERTIES]
        logger.debug(f"Declared schema for {_name(tp)}: {[d.name for d in self._declared[tp]]}")

    def declare(self, **properties: Any) -> Callable[[type], type]:
        """Class decorator form of register: @registry.declare(name=str, age=int)."""
        def decorator(tp: type) -> type:
            self.register(tp, properties)
            return tp
        return decorator

    def is_declared(self, tp: Any) -> bool:
        return tp in self._declared

    def properties(self, tp: Any) -> Dict[str, Any]:
        """
        First-level properties of a type as a name -> type dict.

        Args:
            tp: The type to describe. None, builtins and non-class annotations
                (``List[User]``, ``Optional[User]``) have no properties.

        Returns:
            Dict of property name to declared value type

        Raises:
            DuplicatePropertyError: two sources disagree and the policy is 'error'
            NameError: an annotation could not be resolved (propagated as is)
        """
        if tp is None:
            return {}
        if tp in self._declared:
            return {d.name: d.type for d in self._declared[tp]}
        if not isinstance(tp, type):
            return {}

        policy = self.policy
        result: Dict[str, Any] = {}
        # which source supplied the kept value, and which declared the name last
        winner: Dict[str, type] = {}
        last: Dict[str, type] = {}
        for source in self._sources(tp):
            for descriptor in self._describe(source):
                name, value_type = descriptor
                previous = last.get(name)
                last[name] = source
                if name in result and result[name] != value_type:
                    if policy == DuplicatePolicy.ERROR:
                        raise DuplicatePropertyError(_name(tp), name, result[name], value_type)
                    if policy == DuplicatePolicy.KEEP_FIRST:
                        continue
                    logger.debug(f"{_name(tp)}.{name}: {_name(source)} overrides {result[name]!r} with {value_type!r}")
                elif name in result:
                    if winner[name] is previous:
                        winner[name] = source
                    continue
                result[name] = value_type
                winner[name] = source

        if issubclass(tp, BaseModel):
            # pydantic has already substituted type parameters (Page[User].items -> List[User])
            concrete = tp.model_fields
            for name in result:
                if name in concrete and winner[name] is last[name]:
                    result[name] = concrete[name].annotation
        return result

    def _sources(self, tp: type) -> List[type]:
        """Property sources from the most basic supertype down to the type itself."""
        return [klass for klass in reversed(tp.__mro__)
                if klass is not object and klass is not BaseModel
                and klass is not typing.Generic and not _is_protocol_base(klass)]

    def _describe(self, klass: type) -> List[PropertyDescriptor]:
        """Properties declared directly on one class (not inherited): fields, then accessors."""
        if klass in self._declared:
            return list(self._declared[klass])
        return self._fields(klass) + self._accessors(klass)

    def _fields(self, klass: type) -> List[PropertyDescriptor]:
        own = inspect.get_annotations(klass)
        if not own:
            return []

        if issubclass(klass, BaseModel):
            fields = klass.model_fields
            return [PropertyDescriptor(name, fields[name].annotation)
                    for name in own if name in fields and _is_public(name)]

        hints = typing.get_type_hints(klass)
        if dataclasses.is_dataclass(klass):
            names = {f.name for f in dataclasses.fields(klass)}
            return [PropertyDescriptor(name, hints[name]) for name in own
                    if name in names and _is_public(name)]

        return [PropertyDescriptor(name, hints[name]) for name in own
                if _is_public(name) and typing.get_origin(hints[name]) is not typing.ClassVar
                and hints[name] is not typing.ClassVar]

    def _accessors(self, klass: type) -> List[PropertyDescriptor]:
        """``@property`` accessors, typed by the getter's return annotation (Any when absent)."""
        return [PropertyDescriptor(name, typing.get_type_hints(attr.fget).get('return', Any))
                for name, attr in vars(klass).items()
                if isinstance(attr, property) and attr.fget is not None and _is_public(name)]

def _is_public(name: str) -> bool:
    return name not in META_PROPERTIES and not name.startswith('_')

def _is_protocol_base(klass: type) -> bool:
    return klass is typing.Protocol or getattr(klass, '__module__', '') == 'typing'

def _name(tp: Any) -> str:
    return getattr(tp, '__qualname__', None) or str(tp)

# Default registry used when callers do not supply their own
default_registry = SchemaRegistry()

def introspect(tp: Any, registry: Optional[SchemaRegistry] = None) -> Dict[str, Any]:
    """Properties of ``tp`` from the given registry (or the default one)."""
    return (registry or default_registry).properties(tp)

def declare(**properties: Any) -> Callable[[Type[Any]], Type[Any]]:
    """Declare a schema on the default registry."""
    return default_registry.declare(**properties)
