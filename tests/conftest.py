"""
Pytest configuration and shared fixtures for FastGqlValidation tests.
"""

import pytest
from faker import Faker
from graphql import graphql_sync

from fast_gql_validation import make_validated_schema

fake = Faker()


@pytest.fixture
def sample_data():
    """Provide sample data for tests."""
    return {
        "name": fake.name(),
        "email": fake.email(),
        "uuid": fake.uuid4(),
    }


@pytest.fixture
def build():
    """Build a validated schema whose `Query.testQuery` records the arguments it was called with."""

    def _build(type_defs: str, resolver=None):
        calls = []

        def test_query(_, info, **args):
            calls.append(args)
            return True

        schema = make_validated_schema(type_defs, {"Query": {"testQuery": resolver or test_query}})
        return schema, calls

    return _build


@pytest.fixture
def run():
    def _run(schema, source: str, variables=None):
        return graphql_sync(schema, source, variable_values=variables)

    return _run


@pytest.fixture
def validation_errors():
    """Violations carried by the single error of a rejected result."""

    def _validation_errors(result) -> list:
        assert result.data is None
        assert result.errors is not None and len(result.errors) == 1
        assert result.errors[0].extensions["code"] == "VALIDATION_ERROR"
        return result.errors[0].extensions["validationErrors"]

    return _validation_errors


# Configure pytest-asyncio
pytest_plugins = ['pytest_asyncio']
