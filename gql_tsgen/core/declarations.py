"""Declaration IR built from the schema IR.

Each declaration dataclass describes one emitted construct independently
of the output syntax; renderers (see generator.py) turn them into text.
All naming rules are applied here so renderers only lay out text.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from .config import GenerateOptions
from .ir import (
    DefinitionKind,
    EnumTypeInfo,
    FieldInfo,
    InterfaceTypeInfo,
    OperationField,
    OperationsMap,
    TypeDefinitionInfo,
    UnionTypeInfo,
)
from .resolver import TypeNameResolver
from .scalars import ScalarTypeMap

NON_NULL_MARKER = "!"

# Target type every custom scalar is aliased to
SCALAR_ALIAS_TARGET = "string"

# Target of a union without members
EMPTY_UNION_TARGET = "never"


@dataclass
class PropertySignature:
    name: str
    type: str
    optional: bool = False


@dataclass
class Parameter:
    name: str
    type: str


@dataclass
class MethodSignature:
    name: str
    params: list[Parameter] = field(default_factory=list)
    return_type: str = ""


@dataclass
class InterfaceDeclaration:
    """A structural type: `interface X {...}`, or `type X = {...};` when as_type_alias."""
    template: ClassVar[str] = "interface.ts.j2"

    name: str
    members: list[PropertySignature | MethodSignature] = field(default_factory=list)
    as_type_alias: bool = False


@dataclass
class EnumDeclaration:
    """A native enum, or an `as const` object plus a union type when as_const."""
    template: ClassVar[str] = "enum.ts.j2"

    name: str
    values: list[str] = field(default_factory=list)
    as_const: bool = False


@dataclass
class AliasDeclaration:
    """`type X = target;` for scalars and unions."""
    template: ClassVar[str] = "alias.ts.j2"

    name: str
    target: str


Declaration = InterfaceDeclaration | EnumDeclaration | AliasDeclaration


class DeclarationBuilder:
    """Builds declarations from IR entries under a set of options."""

    def __init__(self, options: GenerateOptions | None = None, scalar_map: ScalarTypeMap | None = None):
        self.options = options or GenerateOptions()
        self.resolver = TypeNameResolver(scalar_map)

    def format_name(self, name: str) -> str:
        return self.options.format_type_name(name)

    def type_ref(self, flattened: str) -> str:
        """Render a flattened type reference, keeping primitives unformatted."""
        return self.resolver.render(flattened, self.format_name)

    def build_property(self, info: FieldInfo) -> PropertySignature:
        # Flattened names carry no non-null marker, so under strict null
        # checks every resolved field comes out optional.
        optional = self.options.strict_null_checks and NON_NULL_MARKER not in info.type
        return PropertySignature(
            name=info.name,
            type=self.type_ref(info.type),
            optional=optional,
        )

    def build_type(self, info: TypeDefinitionInfo) -> InterfaceDeclaration | AliasDeclaration:
        """Build an object, input or scalar definition."""
        name = self.format_name(info.name)
        if info.kind == DefinitionKind.SCALAR_TYPE_DEFINITION:
            return AliasDeclaration(name=name, target=SCALAR_ALIAS_TARGET)
        return InterfaceDeclaration(
            name=name,
            members=[self.build_property(f) for f in info.fields],
        )

    def build_enum(self, info: EnumTypeInfo) -> EnumDeclaration:
        return EnumDeclaration(
            name=self.format_name(info.name),
            values=list(info.values),
            as_const=self.options.use_enum_type,
        )

    def build_interface(self, info: InterfaceTypeInfo) -> InterfaceDeclaration:
        return InterfaceDeclaration(
            name=self.format_name(info.name),
            members=[self.build_property(f) for f in info.fields],
            as_type_alias=not self.options.use_interface_type,
        )

    def build_union(self, info: UnionTypeInfo) -> AliasDeclaration:
        members = [self.format_name(t) for t in info.types]
        target = " | ".join(members) if members else EMPTY_UNION_TARGET
        return AliasDeclaration(name=self.format_name(info.name), target=target)

    def build_operation(self, operation: OperationField) -> MethodSignature:
        return MethodSignature(
            name=operation.name,
            params=[Parameter(name=a.name, type=self.type_ref(a.type)) for a in operation.args],
            return_type=self.type_ref(operation.return_type),
        )

    def build_operations(self, operations: OperationsMap) -> list[InterfaceDeclaration]:
        """Build one interface per root operation type."""
        return [
            InterfaceDeclaration(
                name=self.format_name(root_name),
                members=[self.build_operation(op) for op in fields],
            )
            for root_name, fields in operations.items()
        ]
