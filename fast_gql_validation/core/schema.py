from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence

from graphql import GraphQLObjectType, GraphQLSchema, build_schema

from fast_gql_validation.core.compiler import compile_rules
from fast_gql_validation.core.reachability import mark_input_types
from fast_gql_validation.core.registry import ValidationRegistry
from fast_gql_validation.core.resolver_wrapper import wrap_validated_resolvers
from fast_gql_validation.core.types import RuleFamily
from fast_gql_validation.directives import default_families


def directive_type_defs(families: Optional[Iterable[RuleFamily]] = None) -> str:
    """SDL declaring every family's directive, to be combined with the schema's own type defs."""
    families = list(families) if families is not None else default_families()
    return "\n".join(family.type_defs for family in families)


def compile_validation(schema: GraphQLSchema, families: Optional[Iterable[RuleFamily]] = None) -> ValidationRegistry:
    """
    Compile every family's declarations, then mark input types needing validation.

    Families are compiled in the order given, so a location declaring rules of
    several families runs them family by family, each in declaration order.
    """
    families = list(families) if families is not None else default_families()
    registry = ValidationRegistry()
    for family in families:
        compile_rules(schema, registry, family)
    mark_input_types(schema, registry)
    return registry.freeze()


def add_validation_to_schema(schema: GraphQLSchema, families: Optional[Iterable[RuleFamily]] = None) -> GraphQLSchema:
    """Compile rules for `schema` and wrap every resolver with validated arguments. Returns the schema."""
    registry = compile_validation(schema, families)
    wrap_validated_resolvers(schema, registry)
    return schema


def attach_resolvers(schema: GraphQLSchema, resolvers: Mapping[str, Mapping[str, Callable[..., Any]]]) -> None:
    """Set resolvers from a `{"Type": {"field": resolver}}` map onto the schema's object types."""
    for type_name, field_resolvers in resolvers.items():
        object_type = schema.get_type(type_name)
        if not isinstance(object_type, GraphQLObjectType):
            raise ValueError(f"Cannot attach resolvers: `{type_name}` is not an object type in the schema")
        for field_name, resolver in field_resolvers.items():
            if field_name not in object_type.fields:
                raise ValueError(f"Cannot attach resolver: `{type_name}.{field_name}` is not defined")
            object_type.fields[field_name].resolve = resolver


def make_validated_schema(
    type_defs: str | Sequence[str],
    resolvers: Optional[Dict[str, Dict[str, Callable[..., Any]]]] = None,
    families: Optional[Iterable[RuleFamily]] = None,
) -> GraphQLSchema:
    """
    Build an executable schema from SDL with argument validation installed.

    The directive declarations of `families` (all built-ins by default) are
    prepended to `type_defs`, so the schema's SDL only has to use them.
    """
    families = list(families) if families is not None else default_families()
    if not isinstance(type_defs, str):
        type_defs = "\n".join(type_defs)

    schema = build_schema(directive_type_defs(families) + "\n" + type_defs)
    if resolvers:
        attach_resolvers(schema, resolvers)

    add_validation_to_schema(schema, families)
    logging.debug(f"[VALIDATION] Built validated schema with {len(families)} rule families")
    return schema
