from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from graphql import GraphQLInputObjectType, GraphQLList, GraphQLType

from fast_gql_validation.core.registry import ValidationRegistry
from fast_gql_validation.core.types import EMPTY_CHAIN, RuleChain, RuleDeclaration, Violation
from fast_gql_validation.exceptions.common_exceptions import ValidationRuleException
from fast_gql_validation.utils.graphql_utils import python_name, strip_non_null


class Validator:
    """
    Walks a runtime value alongside its static type and applies rule chains.

    Every violation is collected; nothing short-circuits except a failing list
    rule (skips that list's items) or a failing object rule (skips that
    object's fields). Null values are never inspected.
    """

    def __init__(self, registry: ValidationRegistry, *, data: Optional[dict] = None, info: Any = None) -> None:
        self.registry = registry
        self.data = data if data is not None else {}
        self.info = info

    def validate(self, value: Any, graphql_type: GraphQLType, chain: RuleChain = EMPTY_CHAIN, path: str = "", depth: int = 0) -> List[Violation]:
        if value is None:
            return []

        value_type = strip_non_null(graphql_type)

        if isinstance(value_type, GraphQLList):
            violations = self._run(chain.for_list(depth), value, value_type, path)
            if violations:
                return violations

            for index, item in enumerate(value):
                violations.extend(self.validate(item, value_type.of_type, chain, f"{path}[{index}]", depth + 1))
            return violations

        if isinstance(value_type, GraphQLInputObjectType):
            meta = self.registry.input_object_meta(value_type)
            violations = self._run(chain.for_object() + meta.object_rules.for_object(), value, value_type, path)
            if violations or not meta.needs_validation:
                return violations

            for field_name, field in value_type.fields.items():
                violations.extend(self.validate(
                    _field_value(value, field_name, python_name(field_name, field)),
                    field.type,
                    self.registry.input_field_chain(value_type.name, field_name),
                    f"{path}.{field_name}" if path else field_name,
                ))
            return violations

        return self._run(chain.for_scalar(), value, value_type, path)

    def _run(self, declarations: Iterable[RuleDeclaration], value: Any, value_type: GraphQLType, path: str) -> List[Violation]:
        violations: List[Violation] = []
        for declaration in declarations:
            try:
                declaration.check(value, graphql_type=value_type, path=path, data=self.data, info=self.info)
            except ValidationRuleException as exc:
                violations.append(Violation(path=exc.loc or path, message=exc.message))
            except Exception as exc:  # noqa: BLE001
                violations.append(Violation(path=path, message=str(exc)))
        return violations


def _field_value(value: Any, field_name: str, key: str) -> Any:
    if isinstance(value, Mapping):
        if key in value:
            return value[key]
        return value.get(field_name)
    return getattr(value, key, None)


def validate_value(
    registry: ValidationRegistry,
    value: Any,
    graphql_type: GraphQLType,
    chain: RuleChain = EMPTY_CHAIN,
    path: str = "",
    *,
    data: Optional[dict] = None,
    info: Any = None,
) -> List[Violation]:
    """Validate one value against its type and rule chain, returning every violation in order."""
    return Validator(registry, data=data, info=info).validate(value, graphql_type, chain, path)
