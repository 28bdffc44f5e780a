from __future__ import annotations

import logging
from typing import Any, Callable, List, Tuple

from graphql import GraphQLArgument, GraphQLField, GraphQLResolveInfo, GraphQLSchema, default_field_resolver

from fast_gql_validation import config
from fast_gql_validation.core.registry import ValidationRegistry
from fast_gql_validation.core.types import RuleChain, Violation
from fast_gql_validation.core.validator import Validator
from fast_gql_validation.exceptions.validation_exceptions import AggregateValidationError
from fast_gql_validation.utils.graphql_utils import iter_fields_with_arguments, named_input_object, python_name


class ValidatedResolver:
    """
    Resolver that validates a field's arguments before delegating.

    Arguments are validated in their declared order and all violations are
    collected. If any exist, `AggregateValidationError` is raised and the
    original resolver is not called; otherwise the original resolver's result
    (or exception) is passed through untouched.
    """

    def __init__(
        self,
        original: Callable[..., Any],
        registry: ValidationRegistry,
        type_name: str,
        field_name: str,
        arguments: List[Tuple[str, GraphQLArgument, RuleChain]],
    ) -> None:
        self.original = original
        self.registry = registry
        self.type_name = type_name
        self.field_name = field_name
        self.arguments = arguments

    def __call__(self, source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        violations = self.validate_arguments(args, info)
        if violations:
            if config.VALIDATION_LOG_FAILURES:
                logging.info(f"[VALIDATION] {self.type_name}.{self.field_name} rejected with {len(violations)} violation(s)")
            raise AggregateValidationError(violations)
        return self.original(source, info, **args)

    def validate_arguments(self, args: dict, info: Any = None) -> List[Violation]:
        validator = Validator(self.registry, data=args, info=info)
        violations: List[Violation] = []
        for argument_name, argument, chain in self.arguments:
            value = args.get(python_name(argument_name, argument))
            violations.extend(validator.validate(value, argument.type, chain, argument_name))
        return violations


def validated_arguments(registry: ValidationRegistry, type_name: str, field_name: str, field: GraphQLField) -> List[Tuple[str, GraphQLArgument, RuleChain]]:
    """Arguments of a field paired with their chains, or an empty list when none is validated."""
    arguments = []
    validated = False
    for argument_name, argument in field.args.items():
        chain = registry.argument_chain(type_name, field_name, argument_name)
        input_type = named_input_object(argument.type)
        if chain or (input_type is not None and registry.input_object_meta(input_type).needs_validation):
            validated = True
        arguments.append((argument_name, argument, chain))
    return arguments if validated else []


def wrap_validated_resolvers(schema: GraphQLSchema, registry: ValidationRegistry) -> int:
    """
    Install a `ValidatedResolver` on every field with a directly or transitively validated argument.

    Fields with no resolver are wrapped around graphql-core's default resolver.
    Fields already wrapped are left as they are. Returns the number of fields wrapped.
    """
    wrapped = 0
    for object_type, field_name, field in iter_fields_with_arguments(schema):
        if isinstance(field.resolve, ValidatedResolver):
            continue
        arguments = validated_arguments(registry, object_type.name, field_name, field)
        if not arguments:
            continue
        field.resolve = ValidatedResolver(
            field.resolve or default_field_resolver,
            registry,
            object_type.name,
            field_name,
            arguments,
        )
        wrapped += 1

    logging.debug(f"[VALIDATION] Wrapped {wrapped} resolver(s) with argument validation")
    return wrapped
