from __future__ import annotations

from typing import Any, Optional

from graphql import GraphQLType
from pydantic import BaseModel, ConfigDict, NonNegativeInt
from pydantic.alias_generators import to_camel

from fast_gql_validation.core.types import RuleFamily, RuleTarget
from fast_gql_validation.exceptions.common_exceptions import DirectiveConfigurationException, ValidationRuleException
from fast_gql_validation.utils.formatting import canonical_json
from fast_gql_validation.utils.graphql_utils import list_nesting


class ValidListAttributes(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True)

    max_items: Optional[NonNegativeInt] = None
    min_items: Optional[NonNegativeInt] = None
    unique_items: Optional[bool] = None
    list_depth: Optional[NonNegativeInt] = None


def list_depth(attributes: ValidListAttributes) -> int:
    """
    Nesting level the declaration applies to.

    For `field: [[[String!]!]!]! @validList(maxItems: 2) @validList(maxItems: 5, listDepth: 1)`
    the outer list holds at most two lists, and each of those at most five.
    """
    return attributes.list_depth or 0


def check_list_location(attributes: ValidListAttributes, graphql_type: GraphQLType, location: str) -> None:
    depth = list_depth(attributes)
    if list_nesting(graphql_type) <= depth:
        raise DirectiveConfigurationException(location, f"type {graphql_type} has no list at depth {depth}")


def validate_list(
    attributes: ValidListAttributes,
    *,
    value: Any,
    graphql_type: GraphQLType,
    path: str,
    data: dict,
    info: Any,
) -> None:
    items = list(value)

    if attributes.max_items is not None and len(items) > attributes.max_items:
        raise ValidationRuleException(f"Value must be at most {attributes.max_items} items", loc=path)

    if attributes.min_items is not None and len(items) < attributes.min_items:
        raise ValidationRuleException(f"Value must be at least {attributes.min_items} items", loc=path)

    if attributes.unique_items:
        encoded = [canonical_json(item) for item in items]
        if len(set(encoded)) != len(encoded):
            raise ValidationRuleException("Value must contain unique items", loc=path)


def valid_list(name: str = "validList") -> RuleFamily:
    return RuleFamily(
        name=name,
        target=RuleTarget.LIST,
        predicate=validate_list,
        attributes_model=ValidListAttributes,
        list_depth=list_depth,
        location_check=check_list_location,
        type_defs=f"""
            directive @{name}(
              maxItems: Int
              minItems: Int
              uniqueItems: Boolean
              listDepth: Int
            ) repeatable on INPUT_FIELD_DEFINITION | ARGUMENT_DEFINITION
        """,
    )
