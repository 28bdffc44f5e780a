from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from graphql import GraphQLSchema, GraphQLType
from graphql.execution.values import get_argument_values
from pydantic import ValidationError

from fast_gql_validation.core.registry import (
    ValidationRegistry,
    argument_key,
    input_field_key,
    input_type_key,
)
from fast_gql_validation.core.types import RuleDeclaration, RuleFamily, RuleTarget
from fast_gql_validation.exceptions.common_exceptions import DirectiveConfigurationException
from fast_gql_validation.utils.graphql_utils import (
    directive_nodes,
    iter_fields_with_arguments,
    iter_input_object_types,
)


def compile_rules(schema: GraphQLSchema, registry: ValidationRegistry, family: RuleFamily) -> int:
    """
    Collect every occurrence of `family` in the schema into `registry`.

    Visits each input object type, each of its fields, and each argument of
    every object field. Declarations are appended in source order after any
    chain built by earlier passes for other families. Returns the number of
    declarations compiled.

    Raises:
        DirectiveConfigurationException: If the directive is not declared in the
            schema, or a declaration's attributes are malformed for its location.
    """
    directive = schema.get_directive(family.name)
    if directive is None:
        raise DirectiveConfigurationException(
            f"@{family.name}",
            "directive is not declared in the schema; include its type defs",
        )

    compiled = 0

    for input_type in iter_input_object_types(schema):
        for node in _occurrences(input_type, family.name):
            location = family.describe_location(input_type)
            if family.target is not RuleTarget.OBJECT:
                raise DirectiveConfigurationException(location, "only object rules can be placed on an input object type")
            declaration = _declare(family, get_argument_values(directive, node), input_type, location)
            registry.append(input_type_key(input_type.name), declaration)
            compiled += 1

        for field_name, input_field in input_type.fields.items():
            for node in _occurrences(input_field, family.name):
                location = family.describe_location(input_type, field_name)
                declaration = _declare(family, get_argument_values(directive, node), input_field.type, location)
                registry.append(input_field_key(input_type.name, field_name), declaration)
                compiled += 1

    for object_type, field_name, field in iter_fields_with_arguments(schema):
        for argument_name, argument in field.args.items():
            for node in _occurrences(argument, family.name):
                location = family.describe_location(object_type, field_name, argument_name)
                declaration = _declare(family, get_argument_values(directive, node), argument.type, location)
                registry.append(argument_key(object_type.name, field_name, argument_name), declaration)
                compiled += 1

    logging.debug(f"[VALIDATION] Compiled {compiled} @{family.name} declarations")
    return compiled


def _occurrences(schema_element: Any, directive_name: str) -> list:
    return [node for node in directive_nodes(schema_element) if node.name.value == directive_name]


def _declare(family: RuleFamily, raw: Mapping[str, Any], graphql_type: GraphQLType, location: str) -> RuleDeclaration:
    attributes = _parse_attributes(family, raw, location)
    if family.location_check is not None:
        family.location_check(attributes, graphql_type, location)

    depth = family.list_depth(attributes) if family.target is RuleTarget.LIST else 0
    if not isinstance(depth, int) or depth < 0:
        raise DirectiveConfigurationException(location, f"list depth must be a non-negative integer, got {depth!r}")

    return RuleDeclaration(
        rule_name=family.name,
        target=family.target,
        depth=depth,
        attributes=attributes,
        predicate=family.predicate,
    )


def _parse_attributes(family: RuleFamily, raw: Mapping[str, Any], location: str) -> Any:
    if family.attributes_model is None:
        return MappingProxyType(dict(raw))
    try:
        return family.attributes_model.model_validate(dict(raw))
    except ValidationError as exc:
        reason = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise DirectiveConfigurationException(location, reason) from exc

