"""
Affordances package.

Computes, for a request-handling operation, what a client must supply to invoke
it (verb, whether input is required, and the typed request body properties) and
attaches that description to hypermedia links.
"""

__version__ = "0.1.0"

from . import models
from . import services
from . import links

from .models import Affordance, HttpVerb, Operation, Parameter, ParameterRole
from .services import AffordanceBuilder, DuplicatePolicy, SchemaRegistry, build_affordance
from .links import Link, affordances_by_link

__all__ = [
    "models", "services", "links",
    "Affordance", "HttpVerb", "Operation", "Parameter", "ParameterRole",
    "AffordanceBuilder", "DuplicatePolicy", "SchemaRegistry", "build_affordance",
    "Link", "affordances_by_link",
]
