from .schema import DuplicatePolicy, PropertyDescriptor, SchemaRegistry, declare, default_registry, introspect
from .locator import locate_body_type
from .builder import AffordanceBuilder, AffordanceHook, build_affordance

__all__ = [
    "DuplicatePolicy", "PropertyDescriptor", "SchemaRegistry", "declare", "default_registry", "introspect",
    "locate_body_type",
    "AffordanceBuilder", "AffordanceHook", "build_affordance",
]
