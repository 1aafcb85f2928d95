"""
Hypermedia links and the affordances attached to them.
"""

from typing import List, Optional, Tuple

from affordances.models.affordance import Affordance
from affordances.models.operation import Operation
from affordances.services.builder import AffordanceBuilder


class Link:
    """A link to an addressable resource, owning an ordered list of affordances."""

    def __init__(self, href: str, rel: str = "self", affordances: Tuple[Affordance, ...] = ()):
        self.href = href
        self.rel = rel
        self._affordances: List[Affordance] = list(affordances)

    @property
    def affordances(self) -> Tuple[Affordance, ...]:
        return tuple(self._affordances)

    def add_affordance(self, affordance: Affordance) -> None:
        self._affordances.append(affordance)

    def and_affordance(self, affordance: Affordance) -> 'Link':
        """A copy of this link with one more affordance attached."""
        return self.with_affordances(affordance)

    def with_affordances(self, *affordances: Affordance) -> 'Link':
        return Link(self.href, self.rel, (*self._affordances, *affordances))

    def affordance_for(self, operation: Operation, builder: Optional[AffordanceBuilder] = None) -> Affordance:
        """Build the affordance for an operation and attach it to this link."""
        affordance = (builder or AffordanceBuilder()).build(operation)
        self.add_affordance(affordance)
        return affordance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Link):
            return NotImplemented
        return (self.href, self.rel, self._affordances) == (other.href, other.rel, other._affordances)

    def __repr__(self) -> str:
        return f"Link(href={self.href!r}, rel={self.rel!r}, affordances={len(self._affordances)})"


def affordances_by_link(link: Link) -> Tuple[Affordance, ...]:
    """The affordances a link owns, in the order they were attached."""
    return link.affordances
