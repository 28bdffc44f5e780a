from __future__ import annotations

import re
from enum import Enum
from typing import Any, List, Optional

from graphql import GraphQLType
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from fast_gql_validation.core.types import RuleFamily, RuleTarget
from fast_gql_validation.directives.scalar_location import check_scalar_location
from fast_gql_validation.exceptions.common_exceptions import ValidationRuleException
from fast_gql_validation.utils.formatting import join_quoted

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")

# Pattern flags accepted in `regexFlags`; `g`, `u` and `y` have no effect on a single search
REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "g": 0,
    "u": 0,
    "y": 0,
}


class StringFormat(str, Enum):
    EMAIL = "EMAIL"
    UUID = "UUID"


class ValidStringAttributes(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True)

    format: Optional[StringFormat] = None
    max_length: Optional[int] = None
    min_length: Optional[int] = None
    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    includes: Optional[str] = None
    regex: Optional[str] = None
    regex_flags: Optional[str] = None
    one_of: Optional[List[str]] = None

    @field_validator("format", mode="before")
    @classmethod
    def _enum_name(cls, value: Any) -> Any:
        return value.name if isinstance(value, Enum) else value

    @model_validator(mode="after")
    def _compile_regex(self) -> "ValidStringAttributes":
        if self.regex_flags is not None:
            unknown = sorted(set(self.regex_flags) - set(REGEX_FLAGS))
            if unknown:
                raise ValueError(f"unsupported regex flags {''.join(unknown)!r}")
        if self.regex is not None:
            try:
                re.compile(self.regex, self.flags)
            except re.error as exc:
                raise ValueError(f"invalid regex {self.regex!r}: {exc}") from exc
        return self

    @property
    def flags(self) -> int:
        flags = 0
        for letter in self.regex_flags or "":
            flags |= REGEX_FLAGS[letter]
        return flags


def validate_string(
    attributes: ValidStringAttributes,
    *,
    value: Any,
    graphql_type: GraphQLType,
    path: str,
    data: dict,
    info: Any,
) -> None:
    if not isinstance(value, str):
        return

    if attributes.format is StringFormat.EMAIL and not EMAIL_PATTERN.fullmatch(value):
        raise ValidationRuleException("Value must be be a valid email", loc=path)

    if attributes.format is StringFormat.UUID and not UUID_PATTERN.fullmatch(value):
        raise ValidationRuleException("Value must be be a valid UUID", loc=path)

    if attributes.max_length is not None and len(value) > attributes.max_length:
        raise ValidationRuleException(f"Value must be at most {attributes.max_length} characters", loc=path)

    if attributes.min_length is not None and len(value) < attributes.min_length:
        raise ValidationRuleException(f"Value must be at least {attributes.min_length} characters", loc=path)

    if attributes.starts_with is not None and not value.startswith(attributes.starts_with):
        raise ValidationRuleException(f"Value must start with '{attributes.starts_with}'", loc=path)

    if attributes.ends_with is not None and not value.endswith(attributes.ends_with):
        raise ValidationRuleException(f"Value must end with '{attributes.ends_with}'", loc=path)

    if attributes.includes is not None and attributes.includes not in value:
        raise ValidationRuleException(f"Value must include '{attributes.includes}'", loc=path)

    if attributes.regex is not None and not re.search(attributes.regex, value, attributes.flags):
        with_flags = f" with flags '{attributes.regex_flags}'" if attributes.regex_flags is not None else ""
        raise ValidationRuleException(f"Value must match pattern '{attributes.regex}'{with_flags}", loc=path)

    if attributes.one_of is not None and value not in attributes.one_of:
        raise ValidationRuleException(f"Value must be one of {join_quoted(attributes.one_of)}", loc=path)


def valid_string(name: str = "validString") -> RuleFamily:
    format_enum = f"{name[:1].upper()}{name[1:]}FormatEnum"
    return RuleFamily(
        name=name,
        target=RuleTarget.SCALAR,
        predicate=validate_string,
        attributes_model=ValidStringAttributes,
        location_check=check_scalar_location,
        type_defs=f"""
            enum {format_enum} {{
              EMAIL
              UUID
            }}

            directive @{name}(
              format: {format_enum}
              maxLength: Int
              minLength: Int
              startsWith: String
              endsWith: String
              includes: String
              regex: String
              regexFlags: String
              oneOf: [String!]
            ) repeatable on INPUT_FIELD_DEFINITION | ARGUMENT_DEFINITION
        """,
    )
