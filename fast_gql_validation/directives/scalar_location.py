from typing import Any

from graphql import GraphQLType

from fast_gql_validation.exceptions.common_exceptions import DirectiveConfigurationException
from fast_gql_validation.utils.graphql_utils import named_input_object


def check_scalar_location(attributes: Any, graphql_type: GraphQLType, location: str) -> None:
    """Scalar rules only ever reach leaves, so an input object location can never be checked."""
    input_type = named_input_object(graphql_type)
    if input_type is not None:
        raise DirectiveConfigurationException(location, f"type {graphql_type} is an input object; scalar rules apply to leaf values only")
