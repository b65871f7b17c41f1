"""GraphQL schema parser using graphql-core.

Loads .graphql/.graphqls documents and classifies their definitions into
the IR (ExtendedTypeMap and OperationsMap).
"""

import os

from graphql import (
    DefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    GraphQLError,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    UnionTypeDefinitionNode,
    parse,
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
from .resolver import TypeNameResolver
from .scalars import ScalarTypeMap


class GraphQLParseError(Exception):
    """Raised when a schema document cannot be loaded or parsed."""

    def __init__(self, message: str, path: str | None = None, cause: BaseException | None = None):
        self.message = message
        self.path = path
        self.cause = cause
        super().__init__(message)


class SchemaNotFoundError(GraphQLParseError):
    """Raised when the schema file does not exist."""


def parse_graphql_document(schema_file: str | os.PathLike) -> DocumentNode:
    """Read and parse a schema file.

    Raises:
        SchemaNotFoundError: if the file does not exist
        GraphQLParseError: if reading or parsing fails; the original
            exception is chained as the cause
    """
    path = os.fspath(schema_file)
    if not os.path.exists(path):
        raise SchemaNotFoundError(f"Schema file not found: {path}", path=path)

    try:
        with open(path, encoding="utf-8") as f:
            source = f.read()
        return parse(source)
    except (GraphQLError, OSError, UnicodeDecodeError) as e:
        raise GraphQLParseError(
            f"Failed to parse schema file: {path}: {e}", path=path, cause=e
        ) from e


def parse_graphql_source(source: str, path: str = "<string>") -> DocumentNode:
    """Parse SDL text that is already in memory."""
    try:
        return parse(source)
    except GraphQLError as e:
        raise GraphQLParseError(
            f"Failed to parse schema source: {path}: {e}", path=path, cause=e
        ) from e


def _description(node) -> str | None:
    return node.description.value if node.description else None


class SchemaParser:
    """Classifies the definitions of a parsed document into IR."""

    def __init__(self, document: DocumentNode, scalar_map: ScalarTypeMap | None = None):
        """Initialize a parser for a document.

        Args:
            document: The parsed SDL document
            scalar_map: Scalar mapping used to flatten type references;
                        defaults to the process-wide map
        """
        self.document = document
        self.resolver = TypeNameResolver(scalar_map)
        # Definitions of kinds that have no bucket (schema, directive, extensions, ...)
        self.skipped: list[DefinitionNode] = []

    def parse_extended_types(self) -> ExtendedTypeMap:
        """Bucket every type definition of the document by kind."""
        result = ExtendedTypeMap()
        self.skipped = []

        for definition in self.document.definitions or []:
            if isinstance(definition, ObjectTypeDefinitionNode):
                info = self._process_type(definition, DefinitionKind.OBJECT_TYPE_DEFINITION)
                result.objects[info.name] = info
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                info = self._process_type(definition, DefinitionKind.INPUT_OBJECT_TYPE_DEFINITION)
                result.inputs[info.name] = info
            elif isinstance(definition, ScalarTypeDefinitionNode):
                info = self._process_scalar(definition)
                result.scalars[info.name] = info
            elif isinstance(definition, EnumTypeDefinitionNode):
                info = self._process_enum(definition)
                result.enums[info.name] = info
            elif isinstance(definition, InterfaceTypeDefinitionNode):
                info = self._process_interface(definition)
                result.interfaces[info.name] = info
            elif isinstance(definition, UnionTypeDefinitionNode):
                info = self._process_union(definition)
                result.unions[info.name] = info
            else:
                self.skipped.append(definition)

        return result

    def parse_type_definitions(self) -> dict[str, TypeDefinitionInfo]:
        """Collect object, input and scalar definitions into one name-keyed map."""
        type_map: dict[str, TypeDefinitionInfo] = {}
        for definition in self.document.definitions or []:
            if isinstance(definition, ObjectTypeDefinitionNode):
                info = self._process_type(definition, DefinitionKind.OBJECT_TYPE_DEFINITION)
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                info = self._process_type(definition, DefinitionKind.INPUT_OBJECT_TYPE_DEFINITION)
            elif isinstance(definition, ScalarTypeDefinitionNode):
                info = self._process_scalar(definition)
            else:
                continue
            type_map[info.name] = info
        return type_map

    def parse_operations(self) -> OperationsMap:
        """Extract the fields of the Query, Mutation and Subscription types."""
        operations = OperationsMap()
        for definition in self.document.definitions or []:
            if not isinstance(definition, ObjectTypeDefinitionNode):
                continue
            root_name = definition.name.value
            if root_name not in OPERATION_TYPES:
                continue

            # Repeated roots accumulate
            target = operations.get(root_name)
            for field_node in definition.fields or []:
                target.append(self._process_operation_field(field_node))

        return operations

    def _process_type(
        self,
        node: ObjectTypeDefinitionNode | InputObjectTypeDefinitionNode,
        kind: DefinitionKind,
    ) -> TypeDefinitionInfo:
        return TypeDefinitionInfo(
            kind=kind,
            name=node.name.value,
            fields=self._process_fields(node.fields, kind),
            description=_description(node),
        )

    def _process_scalar(self, node: ScalarTypeDefinitionNode) -> TypeDefinitionInfo:
        return TypeDefinitionInfo(
            kind=DefinitionKind.SCALAR_TYPE_DEFINITION,
            name=node.name.value,
            fields=[],
            description=_description(node),
        )

    def _process_enum(self, node: EnumTypeDefinitionNode) -> EnumTypeInfo:
        return EnumTypeInfo(
            name=node.name.value,
            values=[v.name.value for v in node.values or []],
            description=_description(node),
        )

    def _process_interface(self, node: InterfaceTypeDefinitionNode) -> InterfaceTypeInfo:
        return InterfaceTypeInfo(
            name=node.name.value,
            fields=self._process_fields(node.fields, DefinitionKind.INTERFACE_TYPE_DEFINITION),
            description=_description(node),
        )

    def _process_union(self, node: UnionTypeDefinitionNode) -> UnionTypeInfo:
        return UnionTypeInfo(
            name=node.name.value,
            types=[t.name.value for t in node.types or []],
            description=_description(node),
        )

    def _process_fields(self, field_nodes, kind: DefinitionKind) -> list[FieldInfo]:
        """Process field or input value definitions into the FieldInfo list."""
        return [
            FieldInfo(
                kind=kind,
                name=node.name.value,
                type=self.resolver.resolve(node.type),
                description=_description(node),
            )
            for node in field_nodes or []
        ]

    def _process_operation_field(self, node: FieldDefinitionNode) -> OperationField:
        args = [self._process_argument(arg) for arg in node.arguments or []]
        return OperationField(
            name=node.name.value,
            args=args,
            return_type=self.resolver.resolve(node.type),
        )

    def _process_argument(self, node: InputValueDefinitionNode) -> OperationArg:
        return OperationArg(name=node.name.value, type=self.resolver.resolve(node.type))


def parse_extended_types(
    document: DocumentNode, scalar_map: ScalarTypeMap | None = None
) -> ExtendedTypeMap:
    """Bucket the type definitions of a document by kind."""
    return SchemaParser(document, scalar_map).parse_extended_types()


def parse_type_definitions(
    document: DocumentNode, scalar_map: ScalarTypeMap | None = None
) -> dict[str, TypeDefinitionInfo]:
    """Collect object, input and scalar definitions of a document."""
    return SchemaParser(document, scalar_map).parse_type_definitions()


def parse_operations(
    document: DocumentNode, scalar_map: ScalarTypeMap | None = None
) -> OperationsMap:
    """Extract the root operation fields of a document."""
    return SchemaParser(document, scalar_map).parse_operations()
