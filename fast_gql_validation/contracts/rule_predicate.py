from __future__ import annotations

from typing import Any, Protocol

from graphql import GraphQLType


class RulePredicate(Protocol):
    """
    Contract for the leaf check of a rule family.

    Implementations return `None` when the value satisfies the configured
    attributes and raise `ValidationRuleException` (or any exception carrying a
    message) when it does not. Each raise is reported as one violation at `path`.
    """

    def __call__(
        self,
        attributes: Any,
        *,
        value: Any,
        graphql_type: GraphQLType,
        path: str,
        data: dict,
        info: Any,
    ) -> None:
        """
        Args:
            attributes: Parsed directive arguments of this declaration.
            value: The value at the current node (never None).
            graphql_type: Static type of the node, with the outer non-null stripped.
            path: Structural path of the node, e.g. `arg.items[2].name`.
            data: All arguments passed to the resolver.
            info: The graphql-core resolve info, or None outside execution.
        """
        ...
