from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Tuple, Type

from graphql import GraphQLNamedType, GraphQLType
from pydantic import BaseModel

from fast_gql_validation.contracts.rule_predicate import RulePredicate


class RuleTarget(str, Enum):
    """Which shape of value a rule family inspects."""

    SCALAR = "scalar"
    LIST = "list"
    OBJECT = "object"


@dataclass(frozen=True)
class RuleDeclaration:
    """One configured occurrence of a rule family at a schema location."""

    rule_name: str
    target: RuleTarget
    depth: int
    attributes: Any
    predicate: RulePredicate

    def check(self, value: Any, *, graphql_type: GraphQLType, path: str, data: dict, info: Any) -> None:
        self.predicate(self.attributes, value=value, graphql_type=graphql_type, path=path, data=data, info=info)


@dataclass(frozen=True)
class RuleChain:
    """Ordered, immutable sequence of rule declarations for one location."""

    declarations: Tuple[RuleDeclaration, ...] = ()

    def __iter__(self) -> Iterator[RuleDeclaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def __bool__(self) -> bool:
        return bool(self.declarations)

    def for_scalar(self) -> Tuple[RuleDeclaration, ...]:
        return tuple(d for d in self.declarations if d.target is RuleTarget.SCALAR)

    def for_object(self) -> Tuple[RuleDeclaration, ...]:
        return tuple(d for d in self.declarations if d.target is RuleTarget.OBJECT)

    def for_list(self, depth: int) -> Tuple[RuleDeclaration, ...]:
        """List rules partitioned by nesting level; 0 is the outermost list."""
        return tuple(d for d in self.declarations if d.target is RuleTarget.LIST and d.depth == depth)


EMPTY_CHAIN = RuleChain()


def outermost_list(attributes: Any) -> int:
    return 0


@dataclass(frozen=True)
class InputObjectMeta:
    needs_validation: bool = False
    object_rules: RuleChain = EMPTY_CHAIN


@dataclass(frozen=True)
class Violation:
    path: str
    message: str

    def dict(self) -> dict:
        return {"message": self.message, "path": self.path}


@dataclass(frozen=True)
class RuleFamily:
    """
    A named rule family registered into the compiler.

    Families are plain values: a new kind of validation is a new `RuleFamily`,
    never a subclass. `list_depth` selects the nesting level for list rules and
    `location_check` may reject a declaration at compile time.
    """

    name: str
    target: RuleTarget
    predicate: RulePredicate
    type_defs: str = ""
    attributes_model: Optional[Type[BaseModel]] = None
    list_depth: Callable[[Any], int] = outermost_list
    location_check: Optional[Callable[[Any, GraphQLType, str], None]] = None

    def describe_location(self, owner: GraphQLNamedType, *names: str) -> str:
        return ".".join((owner.name,) + names) + f" @{self.name}"
