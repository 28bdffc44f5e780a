from __future__ import annotations

import logging
from typing import Dict, List, Set

from graphql import GraphQLInputObjectType, GraphQLSchema

from fast_gql_validation.core.registry import ValidationRegistry, input_field_key, input_type_key
from fast_gql_validation.utils.graphql_utils import iter_input_object_types, named_input_object


class ReachabilityMarker:
    """
    Decides which input object types need their fields walked at request time.

    A type needs validation if it carries an object rule, if any of its fields
    carries a rule, or if any field's unwrapped type needs validation. The
    answer is the least fixpoint over the group of types reachable from the
    queried one, so self-references and cycles terminate, a bare self-reference
    never marks a type, and the result does not depend on query order.
    """

    def __init__(self, registry: ValidationRegistry) -> None:
        self._registry = registry
        self._memo: Dict[str, bool] = {}

    def mark_reachable(self, input_type: GraphQLInputObjectType) -> bool:
        if input_type.name in self._memo:
            return self._memo[input_type.name]

        group = self._reachable_group(input_type)
        marked: Set[str] = {name for name, t in group.items() if self._memo.get(name) or self._has_direct_rules(t)}

        changed = True
        while changed:
            changed = False
            for name, group_type in group.items():
                if name in marked or name in self._memo:
                    continue
                for field in group_type.fields.values():
                    nested = named_input_object(field.type)
                    if nested is not None and nested.name != name and nested.name in marked:
                        marked.add(name)
                        changed = True
                        break

        for name in group:
            if name in self._memo:
                continue
            self._memo[name] = name in marked
            self._registry.set_needs_validation(name, name in marked)

        return self._memo[input_type.name]

    def _reachable_group(self, root: GraphQLInputObjectType) -> Dict[str, GraphQLInputObjectType]:
        group: Dict[str, GraphQLInputObjectType] = {}
        stack: List[GraphQLInputObjectType] = [root]
        while stack:
            current = stack.pop()
            if current.name in group:
                continue
            group[current.name] = current
            if current.name in self._memo:
                continue
            for field in current.fields.values():
                nested = named_input_object(field.type)
                if nested is not None and nested.name not in group:
                    stack.append(nested)
        return group

    def _has_direct_rules(self, input_type: GraphQLInputObjectType) -> bool:
        if self._registry.has_rules(input_type_key(input_type.name)):
            return True
        return any(
            self._registry.has_rules(input_field_key(input_type.name, field_name))
            for field_name in input_type.fields
        )


def mark_input_types(schema: GraphQLSchema, registry: ValidationRegistry) -> Dict[str, bool]:
    """Run the marker over every input object type of the schema. Call after all compiler passes."""
    marker = ReachabilityMarker(registry)
    results = {input_type.name: marker.mark_reachable(input_type) for input_type in iter_input_object_types(schema)}
    logging.debug(f"[VALIDATION] {sum(results.values())} of {len(results)} input types need validation")
    return results
