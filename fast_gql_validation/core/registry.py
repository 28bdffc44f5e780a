from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from graphql import GraphQLInputObjectType

from fast_gql_validation.core.types import (
    EMPTY_CHAIN,
    InputObjectMeta,
    RuleChain,
    RuleDeclaration,
)

LocationKey = Tuple[str, ...]


def input_type_key(type_name: str) -> LocationKey:
    return ("input", type_name)


def input_field_key(type_name: str, field_name: str) -> LocationKey:
    return ("input_field", type_name, field_name)


def argument_key(type_name: str, field_name: str, argument_name: str) -> LocationKey:
    return ("argument", type_name, field_name, argument_name)


class ValidationRegistry:
    """
    Side-table from schema locations to their rule chains.

    Locations are addressed by name (type, type + field, type + field +
    argument), which is stable for the lifetime of a schema. The registry is
    filled by compiler passes, then frozen; lookups on a frozen registry never
    mutate it.
    """

    def __init__(self) -> None:
        self._pending: Dict[LocationKey, List[RuleDeclaration]] = {}
        self._chains: Dict[LocationKey, RuleChain] = {}
        self._meta: Dict[str, InputObjectMeta] = {}
        self._frozen = False

    def append(self, key: LocationKey, declaration: RuleDeclaration) -> None:
        """Add a declaration after everything already registered at `key`."""
        if self._frozen:
            raise RuntimeError("Validation registry is frozen; rules can only be added while compiling.")
        self._pending.setdefault(key, []).append(declaration)

    def set_needs_validation(self, type_name: str, needs_validation: bool) -> None:
        if self._frozen:
            raise RuntimeError("Validation registry is frozen; input object metadata is already final.")
        self._meta[type_name] = InputObjectMeta(
            needs_validation=needs_validation,
            object_rules=self.chain(input_type_key(type_name)),
        )

    def freeze(self) -> "ValidationRegistry":
        if self._frozen:
            return self
        self._chains = {key: RuleChain(tuple(declarations)) for key, declarations in self._pending.items()}
        self._pending = {}
        self._frozen = True
        logging.debug(f"[VALIDATION] Registry frozen with {len(self._chains)} rule chains and {len(self._meta)} input types")
        return self

    def chain(self, key: LocationKey) -> RuleChain:
        if self._frozen:
            return self._chains.get(key, EMPTY_CHAIN)
        return RuleChain(tuple(self._pending.get(key, ())))

    def argument_chain(self, type_name: str, field_name: str, argument_name: str) -> RuleChain:
        return self.chain(argument_key(type_name, field_name, argument_name))

    def input_field_chain(self, type_name: str, field_name: str) -> RuleChain:
        return self.chain(input_field_key(type_name, field_name))

    def input_object_meta(self, input_type: GraphQLInputObjectType) -> InputObjectMeta:
        meta = self._meta.get(input_type.name)
        if meta is not None:
            return meta
        return InputObjectMeta(needs_validation=False, object_rules=self.chain(input_type_key(input_type.name)))

    def has_rules(self, key: LocationKey) -> bool:
        return bool(self.chain(key))
