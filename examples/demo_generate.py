"""Demo: generate TypeScript declarations for examples/schema.graphql.

Run from the repository root:
    python examples/demo_generate.py
"""

from pathlib import Path

from gql_tsgen.core import (
    GenerateOptions,
    HeaderCommentHook,
    HookRunner,
    ScalarTypeMap,
    generate_all,
    parse_graphql_document,
)

SCHEMA = Path(__file__).parent / "schema.graphql"


def main():
    document = parse_graphql_document(SCHEMA)

    # Serialize DateTime as an ISO string on the TypeScript side
    scalars = ScalarTypeMap({"DateTime": "string"})

    hooks = HookRunner([HeaderCommentHook("eslint-disable")])

    options = GenerateOptions(prefix="I", use_enum_type=True, use_interface_type=True)
    for result in generate_all(document, options, scalar_map=scalars, hooks=hooks):
        print(f"==== {result.filename} ====")
        print(result.content)


if __name__ == "__main__":
    main()
