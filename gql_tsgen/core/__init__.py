"""Core modules for GraphQL to TypeScript code generation."""

from .config import GenerateOptions
from .declarations import (
    AliasDeclaration,
    DeclarationBuilder,
    EnumDeclaration,
    InterfaceDeclaration,
    MethodSignature,
    Parameter,
    PropertySignature,
)
from .generator import (
    CodeGenerator,
    GenerateResult,
    TypeScriptRenderer,
    generate_all,
    generate_enums,
    generate_input_types,
    generate_interfaces,
    generate_operations,
    generate_typescript_types,
    generate_unions,
)
from .hooks import (
    ExcludeTypesHook,
    HeaderCommentHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .ir import (
    OPERATION_TYPES,
    DefinitionKind,
    EnumTypeInfo,
    ExtendedTypeMap,
    FieldInfo,
    InterfaceTypeInfo,
    OperationArg,
    OperationField,
    OperationsMap,
    TypeDefinitionInfo,
    UnionTypeInfo,
)
from .parser import (
    GraphQLParseError,
    SchemaNotFoundError,
    SchemaParser,
    parse_extended_types,
    parse_graphql_document,
    parse_graphql_source,
    parse_operations,
    parse_type_definitions,
)
from .resolver import TypeNameResolver, get_type_name
from .scalars import ScalarTypeMap, get_scalar_type_map, update_scalar_type_map

__all__ = [
    # Scalars
    "ScalarTypeMap",
    "get_scalar_type_map",
    "update_scalar_type_map",
    # Resolver
    "TypeNameResolver",
    "get_type_name",
    # IR types
    "OPERATION_TYPES",
    "DefinitionKind",
    "EnumTypeInfo",
    "ExtendedTypeMap",
    "FieldInfo",
    "InterfaceTypeInfo",
    "OperationArg",
    "OperationField",
    "OperationsMap",
    "TypeDefinitionInfo",
    "UnionTypeInfo",
    # Parser
    "GraphQLParseError",
    "SchemaNotFoundError",
    "SchemaParser",
    "parse_extended_types",
    "parse_graphql_document",
    "parse_graphql_source",
    "parse_operations",
    "parse_type_definitions",
    # Options
    "GenerateOptions",
    # Declarations
    "AliasDeclaration",
    "DeclarationBuilder",
    "EnumDeclaration",
    "InterfaceDeclaration",
    "MethodSignature",
    "Parameter",
    "PropertySignature",
    # Generator
    "CodeGenerator",
    "GenerateResult",
    "TypeScriptRenderer",
    "generate_all",
    "generate_enums",
    "generate_input_types",
    "generate_interfaces",
    "generate_operations",
    "generate_typescript_types",
    "generate_unions",
    # Hooks
    "ExcludeTypesHook",
    "HeaderCommentHook",
    "HookRunner",
    "PostGenerateHook",
    "PreGenerateHook",
]
