"""Generate TypeScript declarations from GraphQL schemas."""

from .core import (
    GenerateOptions,
    GenerateResult,
    GraphQLParseError,
    SchemaNotFoundError,
    generate_all,
    get_scalar_type_map,
    parse_graphql_document,
    update_scalar_type_map,
)

__all__ = [
    "GenerateOptions",
    "GenerateResult",
    "GraphQLParseError",
    "SchemaNotFoundError",
    "generate_all",
    "get_scalar_type_map",
    "parse_graphql_document",
    "update_scalar_type_map",
]
