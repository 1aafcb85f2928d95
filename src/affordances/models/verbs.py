"""
HTTP verbs and the required-input classification.
"""

from enum import Enum
from typing import FrozenSet, Union


class HttpVerb(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    def __str__(self) -> str:
        return self.value


Verb = Union[HttpVerb, str]

# Verbs whose request body describes the resource being written
MUTATING_VERBS: FrozenSet[HttpVerb] = frozenset({HttpVerb.POST, HttpVerb.PUT, HttpVerb.PATCH})

# PATCH is partial, so its input is optional
REQUIRED_VERBS: FrozenSet[HttpVerb] = frozenset({HttpVerb.POST, HttpVerb.PUT})


def normalize_verb(verb: Verb) -> Verb:
    """Return the HttpVerb for a known verb (any case), otherwise the upper-cased string."""
    if isinstance(verb, HttpVerb):
        return verb
    name = str(verb).strip().upper()
    try:
        return HttpVerb(name)
    except ValueError:
        return name


def verb_name(verb: Verb) -> str:
    """Canonical string form of a verb, e.g. 'POST'."""
    normalized = normalize_verb(verb)
    return normalized.value if isinstance(normalized, HttpVerb) else normalized


def is_required(verb: Verb) -> bool:
    return normalize_verb(verb) in REQUIRED_VERBS


def is_mutating(verb: Verb) -> bool:
    return normalize_verb(verb) in MUTATING_VERBS
