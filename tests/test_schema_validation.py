import pytest
from graphql import graphql

from fast_gql_validation import AggregateValidationError, ERROR_MESSAGE, make_validated_schema


def test_float_min_rejects_value_below_bound(build, run, validation_errors):
    schema, calls = build("""
        type Query {
          testQuery(arg: Float! @validFloat(min: 10.1)): Boolean!
        }
    """)

    result = run(schema, "{ testQuery(arg: 10) }")

    assert validation_errors(result) == [{"path": "arg", "message": "Value must not be less than 10.1"}]
    assert result.errors[0].message == ERROR_MESSAGE
    assert calls == []


def test_float_min_accepts_value_on_bound(build, run):
    schema, calls = build("""
        type Query {
          testQuery(arg: Float! @validFloat(min: 10.1)): Boolean!
        }
    """)

    result = run(schema, "{ testQuery(arg: 10.1) }")

    assert result.errors is None
    assert result.data == {"testQuery": True}
    assert calls == [{"arg": 10.1}]


def test_object_rule_on_argument(build, run, validation_errors):
    schema, _ = build("""
        input TestQueryInput {
          string1: String!
          string2: String!
        }

        type Query {
          testQuery(arg: TestQueryInput! @validObject(equalFields: ["string1", "string2"])): Boolean!
        }
    """)

    invalid = run(schema, '{ testQuery(arg: {string1: "a", string2: "b"}) }')
    valid = run(schema, '{ testQuery(arg: {string1: "a", string2: "a"}) }')

    assert validation_errors(invalid) == [{"path": "arg", "message": "Fields string1 and string2 must be equal"}]
    assert valid.data == {"testQuery": True}


def test_object_rule_on_type(build, run, validation_errors):
    schema, _ = build("""
        input TestQueryInput @validObject(equalFields: ["field1", "field2"]) {
          field1: String
          field2: String
        }

        type Query {
          testQuery(arg: TestQueryInput): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(arg: {field1: "a", field2: "b"}) }')

    assert validation_errors(result) == [{"path": "arg", "message": "Fields field1 and field2 must be equal"}]


def test_object_rules_on_argument_run_before_type_rules(build, run, validation_errors):
    schema, _ = build("""
        input TestQueryInput @validObject(nonEqualFields: ["field3", "field4"]) {
          field1: String
          field2: String
          field3: String
          field4: String
        }

        type Query {
          testQuery(arg: TestQueryInput @validObject(equalFields: ["field1", "field2"])): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(arg: {field1: "a", field2: "b", field3: "c", field4: "c"}) }')

    assert validation_errors(result) == [
        {"path": "arg", "message": "Fields field1 and field2 must be equal"},
        {"path": "arg", "message": "Fields field3 and field4 must not be equal"},
    ]


def test_object_rule_on_nested_type(build, run, validation_errors):
    schema, _ = build("""
        input TestQuerySubInput @validObject(equalFields: ["field1", "field2"]) {
          field1: String
          field2: String
        }

        input TestQueryInput {
          sub: TestQuerySubInput
        }

        type Query {
          testQuery(arg: TestQueryInput): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(arg: {sub: {field1: "a", field2: "b"}}) }')

    assert validation_errors(result) == [{"path": "arg.sub", "message": "Fields field1 and field2 must be equal"}]


def test_string_rule_on_input_object_field(build, run, validation_errors):
    schema, _ = build("""
        input TestQueryInput {
          field: String! @validString(startsWith: "a")
        }

        type Query {
          testQuery(arg: TestQueryInput): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(arg: {field: "b"}) }')

    assert validation_errors(result) == [{"path": "arg.field", "message": "Value must start with 'a'"}]


def test_string_rule_on_self_referencing_type(build, run, validation_errors):
    schema, _ = build("""
        input TestQuerySubInput {
          sub: TestQuerySubInput
          field1: String! @validString(startsWith: "a")
        }

        input TestQueryInput {
          sub: TestQuerySubInput
        }

        type Query {
          testQuery(arg: TestQueryInput): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(arg: {sub: {field1: "a", sub: {field1: "b"}}}) }')

    assert validation_errors(result) == [{"path": "arg.sub.sub.field1", "message": "Value must start with 'a'"}]


def test_nested_list_rule_reports_each_inner_list(build, run, validation_errors):
    schema, _ = build("""
        type Query {
          testQuery(arg: [[String!]] @validList(minItems: 2, listDepth: 1)): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(arg: [["a"], ["b"]]) }')

    assert validation_errors(result) == [
        {"path": "arg[0]", "message": "Value must be at least 2 items"},
        {"path": "arg[1]", "message": "Value must be at least 2 items"},
    ]


def test_nested_list_rule_on_input_object_field(build, run, validation_errors):
    schema, _ = build("""
        input TestQueryInput {
          field: [[String!]]! @validList(minItems: 2, listDepth: 1)
        }

        type Query {
          testQuery(arg: TestQueryInput): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(arg: {field: [["a"], ["b", "c"], ["d"]]}) }')

    assert validation_errors(result) == [
        {"path": "arg.field[0]", "message": "Value must be at least 2 items"},
        {"path": "arg.field[2]", "message": "Value must be at least 2 items"},
    ]


class TestListAndItemRules:
    type_defs = """
        type Query {
          testQuery(
            arg: [String!]!
              @validList(minItems: 2)
              @validString(startsWith: "a")
          ): Boolean!
        }
    """

    def test_list_failure_skips_items(self, build, run, validation_errors):
        schema, _ = build(self.type_defs)

        result = run(schema, '{ testQuery(arg: ["b"]) }')

        assert validation_errors(result) == [{"path": "arg", "message": "Value must be at least 2 items"}]

    def test_items_validated_when_list_passes(self, build, run, validation_errors):
        schema, _ = build(self.type_defs)

        result = run(schema, '{ testQuery(arg: ["b", "a", "c"]) }')

        assert validation_errors(result) == [
            {"path": "arg[0]", "message": "Value must start with 'a'"},
            {"path": "arg[2]", "message": "Value must start with 'a'"},
        ]


def test_violations_from_all_arguments_in_declared_order(build, run, validation_errors):
    schema, _ = build("""
        type Query {
          testQuery(
            first: String @validString(maxLength: 1)
            second: Int @validInt(max: 3)
          ): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(second: 4, first: "abc") }')

    assert validation_errors(result) == [
        {"path": "first", "message": "Value must be at most 1 characters"},
        {"path": "second", "message": "Value must not be greater than 3"},
    ]


def test_variables_are_validated(build, run, validation_errors):
    schema, _ = build("""
        type Query {
          testQuery(arg: String! @validString(format: EMAIL)): Boolean!
        }
    """)

    result = run(schema, "query ($arg: String!) { testQuery(arg: $arg) }", {"arg": "not-an-email"})

    assert validation_errors(result) == [{"path": "arg", "message": "Value must be be a valid email"}]


def test_error_carries_violations(build, run):
    schema, _ = build("""
        type Query {
          testQuery(arg: String @validString(minLength: 3)): Boolean!
        }
    """)

    result = run(schema, '{ testQuery(arg: "ab") }')

    error = result.errors[0].original_error
    assert isinstance(error, AggregateValidationError)
    assert [(v.path, v.message) for v in error.violations] == [("arg", "Value must be at least 3 characters")]


@pytest.mark.asyncio
async def test_async_resolver_result_is_passed_through():
    async def test_query(_, info, arg):
        return f"{arg}!"

    schema = make_validated_schema(
        """
        type Query {
          testQuery(arg: String! @validString(oneOf: ["yes", "no"])): String!
        }
        """,
        {"Query": {"testQuery": test_query}},
    )

    valid = await graphql(schema, '{ testQuery(arg: "yes") }')
    invalid = await graphql(schema, '{ testQuery(arg: "maybe") }')

    assert valid.data == {"testQuery": "yes!"}
    assert invalid.data is None
    assert invalid.errors[0].extensions["validationErrors"] == [
        {"path": "arg", "message": "Value must be one of 'yes', 'no'"}
    ]
