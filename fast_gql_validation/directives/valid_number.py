from __future__ import annotations

import math
from numbers import Real
from typing import Any, List, Optional

from graphql import GraphQLType
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from pydantic.alias_generators import to_camel

from fast_gql_validation.core.types import RuleFamily, RuleTarget
from fast_gql_validation.directives.scalar_location import check_scalar_location
from fast_gql_validation.exceptions.common_exceptions import ValidationRuleException
from fast_gql_validation.utils.formatting import format_number, join_numbers


class ValidFloatAttributes(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True)

    multiple_of: Optional[float] = None
    max: Optional[float] = None
    min: Optional[float] = None
    exclusive_max: Optional[float] = None
    exclusive_min: Optional[float] = None
    one_of: Optional[List[float]] = None

    @field_validator("multiple_of")
    @classmethod
    def _non_zero(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value == 0:
            raise ValueError("multipleOf must not be zero")
        return value


class ValidIntAttributes(ValidFloatAttributes):
    """Integer bounds are taken exactly as declared; no rounding is applied."""

    multiple_of: Optional[StrictInt] = None
    max: Optional[StrictInt] = None
    min: Optional[StrictInt] = None
    exclusive_max: Optional[StrictInt] = None
    exclusive_min: Optional[StrictInt] = None
    one_of: Optional[List[StrictInt]] = None


def validate_number(
    attributes: ValidFloatAttributes,
    *,
    value: Any,
    graphql_type: GraphQLType,
    path: str,
    data: dict,
    info: Any,
) -> None:
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        return

    if attributes.multiple_of is not None and value % attributes.multiple_of != 0:
        raise ValidationRuleException(f"Value must be a multiple of {format_number(attributes.multiple_of)}", loc=path)

    if attributes.max is not None and value > attributes.max:
        raise ValidationRuleException(f"Value must not be greater than {format_number(attributes.max)}", loc=path)

    if attributes.min is not None and value < attributes.min:
        raise ValidationRuleException(f"Value must not be less than {format_number(attributes.min)}", loc=path)

    if attributes.exclusive_max is not None and value >= attributes.exclusive_max:
        raise ValidationRuleException(f"Value must be less than {format_number(attributes.exclusive_max)}", loc=path)

    if attributes.exclusive_min is not None and value <= attributes.exclusive_min:
        raise ValidationRuleException(f"Value must be greater than {format_number(attributes.exclusive_min)}", loc=path)

    if attributes.one_of is not None and value not in attributes.one_of:
        raise ValidationRuleException(f"Value must be one of {join_numbers(attributes.one_of)}", loc=path)


def _number_type_defs(name: str, scalar: str) -> str:
    return f"""
        directive @{name}(
          multipleOf: {scalar}
          max: {scalar}
          min: {scalar}
          exclusiveMax: {scalar}
          exclusiveMin: {scalar}
          oneOf: [{scalar}!]
        ) repeatable on INPUT_FIELD_DEFINITION | ARGUMENT_DEFINITION
    """


def valid_float(name: str = "validFloat") -> RuleFamily:
    return RuleFamily(
        name=name,
        target=RuleTarget.SCALAR,
        predicate=validate_number,
        attributes_model=ValidFloatAttributes,
        location_check=check_scalar_location,
        type_defs=_number_type_defs(name, "Float"),
    )


def valid_int(name: str = "validInt") -> RuleFamily:
    return RuleFamily(
        name=name,
        target=RuleTarget.SCALAR,
        predicate=validate_number,
        attributes_model=ValidIntAttributes,
        location_check=check_scalar_location,
        type_defs=_number_type_defs(name, "Int"),
    )
