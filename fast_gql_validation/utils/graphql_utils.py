from typing import Any, Iterator, Optional, Tuple

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLList,
    GraphQLInputObjectType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLType,
    get_named_type,
    is_introspection_type,
    is_non_null_type,
)


def strip_non_null(graphql_type: GraphQLType) -> GraphQLType:
    """Remove a single leading non-null wrapper, if any."""
    if is_non_null_type(graphql_type):
        return graphql_type.of_type  # type: ignore[union-attr]
    return graphql_type


def named_input_object(graphql_type: GraphQLType) -> Optional[GraphQLInputObjectType]:
    """Return the input object behind any number of list/non-null wrappers, else None."""
    named = get_named_type(graphql_type)
    return named if isinstance(named, GraphQLInputObjectType) else None


def iter_input_object_types(schema: GraphQLSchema) -> Iterator[GraphQLInputObjectType]:
    for graphql_type in schema.type_map.values():
        if isinstance(graphql_type, GraphQLInputObjectType) and not is_introspection_type(graphql_type):
            yield graphql_type


def iter_fields_with_arguments(schema: GraphQLSchema) -> Iterator[Tuple[GraphQLObjectType, str, GraphQLField]]:
    for graphql_type in schema.type_map.values():
        if not isinstance(graphql_type, GraphQLObjectType) or is_introspection_type(graphql_type):
            continue
        for field_name, field in graphql_type.fields.items():
            if field.args:
                yield graphql_type, field_name, field


def directive_nodes(schema_element: Any) -> list:
    """All directive AST nodes on a schema element, including type extensions, in source order."""
    nodes = []
    ast_nodes = [getattr(schema_element, "ast_node", None)]
    ast_nodes.extend(getattr(schema_element, "extension_ast_nodes", None) or ())
    for ast_node in ast_nodes:
        if ast_node is not None and ast_node.directives:
            nodes.extend(ast_node.directives)
    return nodes


def python_name(name: str, element: GraphQLArgument) -> str:
    """Key under which graphql-core passes an argument or input field value to Python code."""
    return element.out_name or name


def list_nesting(graphql_type: GraphQLType) -> int:
    """Number of list wrappers around the named type, e.g. 2 for `[[String!]]!`."""
    nesting = 0
    current = strip_non_null(graphql_type)
    while isinstance(current, GraphQLList):
        nesting += 1
        current = strip_non_null(current.of_type)
    return nesting
