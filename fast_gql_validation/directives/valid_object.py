from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

from graphql import GraphQLType
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fast_gql_validation.core.types import RuleFamily, RuleTarget
from fast_gql_validation.exceptions.common_exceptions import DirectiveConfigurationException, ValidationRuleException
from fast_gql_validation.utils.formatting import canonical_json
from fast_gql_validation.utils.graphql_utils import named_input_object, python_name


class ValidObjectAttributes(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True)

    equal_fields: Optional[List[str]] = None
    non_equal_fields: Optional[List[str]] = None


def check_object_location(attributes: ValidObjectAttributes, graphql_type: GraphQLType, location: str) -> None:
    input_type = named_input_object(graphql_type)
    if input_type is None:
        raise DirectiveConfigurationException(location, f"type {graphql_type} is not an input object")

    for field_name in (attributes.equal_fields or []) + (attributes.non_equal_fields or []):
        if field_name not in input_type.fields:
            raise DirectiveConfigurationException(location, f"input type {input_type.name} has no field `{field_name}`")


def _present_values(value: Any, graphql_type: GraphQLType, field_names: List[str]) -> List[str]:
    """Canonical encodings of the named fields that are set, in the order given."""
    input_type = named_input_object(graphql_type)
    encoded = []
    for field_name in field_names:
        key = python_name(field_name, input_type.fields[field_name]) if input_type and field_name in input_type.fields else field_name
        field_value = value.get(key) if isinstance(value, Mapping) else getattr(value, key, None)
        if field_value is not None:
            encoded.append(canonical_json(field_value))
    return encoded


def validate_object(
    attributes: ValidObjectAttributes,
    *,
    value: Any,
    graphql_type: GraphQLType,
    path: str,
    data: dict,
    info: Any,
) -> None:
    if attributes.equal_fields and len(attributes.equal_fields) > 1:
        encoded = _present_values(value, graphql_type, attributes.equal_fields)
        if len(set(encoded)) > 1:
            raise ValidationRuleException(f"Fields {' and '.join(attributes.equal_fields)} must be equal", loc=path)

    if attributes.non_equal_fields and len(attributes.non_equal_fields) > 1:
        encoded = _present_values(value, graphql_type, attributes.non_equal_fields)
        if len(set(encoded)) != len(encoded):
            raise ValidationRuleException(f"Fields {' and '.join(attributes.non_equal_fields)} must not be equal", loc=path)


def valid_object(name: str = "validObject") -> RuleFamily:
    return RuleFamily(
        name=name,
        target=RuleTarget.OBJECT,
        predicate=validate_object,
        attributes_model=ValidObjectAttributes,
        location_check=check_object_location,
        type_defs=f"""
            directive @{name}(
              equalFields: [String!]
              nonEqualFields: [String!]
            ) repeatable on INPUT_OBJECT | ARGUMENT_DEFINITION
        """,
    )
