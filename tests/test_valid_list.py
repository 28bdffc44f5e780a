import pytest


@pytest.mark.parametrize(
    "directive, invalid, valid, message",
    [
        ("@validList(maxItems: 2)", '["a", "b", "c"]', '["a", "b"]', "Value must be at most 2 items"),
        ("@validList(minItems: 2)", '["a"]', '["a", "b"]', "Value must be at least 2 items"),
        ("@validList(uniqueItems: true)", '["a", "b", "a"]', '["a", "b"]', "Value must contain unique items"),
    ],
)
def test_list_rules(build, run, validation_errors, directive, invalid, valid, message):
    schema, _ = build(f"type Query {{ testQuery(arg: [String!] {directive}): Boolean! }}")

    rejected = run(schema, f"{{ testQuery(arg: {invalid}) }}")
    accepted = run(schema, f"{{ testQuery(arg: {valid}) }}")

    assert validation_errors(rejected) == [{"path": "arg", "message": message}]
    assert accepted.data == {"testQuery": True}


def test_unique_items_compares_objects_by_content(build, run, validation_errors):
    schema, _ = build("""
        input Point { x: Int, y: Int }
        type Query { testQuery(arg: [Point!] @validList(uniqueItems: true)): Boolean! }
    """)

    rejected = run(schema, "{ testQuery(arg: [{x: 1, y: 2}, {y: 2, x: 1}]) }")
    accepted = run(schema, "{ testQuery(arg: [{x: 1, y: 2}, {x: 2, y: 1}]) }")

    assert validation_errors(rejected) == [{"path": "arg", "message": "Value must contain unique items"}]
    assert accepted.data == {"testQuery": True}


def test_rules_per_depth(build, run, validation_errors):
    schema, _ = build("""
        type Query {
          testQuery(
            arg: [[[String!]!]!]!
              @validList(maxItems: 2)
              @validList(maxItems: 3, listDepth: 1)
              @validList(minItems: 1, listDepth: 2)
          ): Boolean!
        }
    """)

    too_long = run(schema, '{ testQuery(arg: [[], [], []]) }')
    nested = run(schema, '{ testQuery(arg: [[["a"], [], ["b"], ["c"]], [["d"], []]]) }')
    valid = run(schema, '{ testQuery(arg: [[["a"]], [["b"], ["c"]]]) }')

    assert validation_errors(too_long) == [{"path": "arg", "message": "Value must be at most 2 items"}]
    assert validation_errors(nested) == [
        {"path": "arg[0]", "message": "Value must be at most 3 items"},
        {"path": "arg[1][1]", "message": "Value must be at least 1 items"},
    ]
    assert valid.data == {"testQuery": True}


def test_single_value_is_coerced_to_list(build, run, validation_errors):
    schema, _ = build("type Query { testQuery(arg: [String!] @validList(minItems: 2)): Boolean! }")

    result = run(schema, '{ testQuery(arg: "a") }')

    assert validation_errors(result) == [{"path": "arg", "message": "Value must be at least 2 items"}]
