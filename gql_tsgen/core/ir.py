"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that describe the type and operation
definitions of an SDL document in a normalized, target-neutral form.
Type references are stored flattened (see resolver.TypeNameResolver).
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

# Root operation types, in output order
OPERATION_TYPES = ("Query", "Mutation", "Subscription")


class DefinitionKind(str, Enum):
    """The type definition kinds a document is classified into.

    Values match the `kind` attribute of the graphql-core AST node classes.
    """
    OBJECT_TYPE_DEFINITION = "object_type_definition"
    INPUT_OBJECT_TYPE_DEFINITION = "input_object_type_definition"
    SCALAR_TYPE_DEFINITION = "scalar_type_definition"
    ENUM_TYPE_DEFINITION = "enum_type_definition"
    INTERFACE_TYPE_DEFINITION = "interface_type_definition"
    UNION_TYPE_DEFINITION = "union_type_definition"


@dataclass
class FieldInfo:
    """A field of an object, input or interface type."""
    kind: DefinitionKind
    name: str
    type: str
    description: str | None = None


@dataclass
class TypeDefinitionInfo:
    """An object, input or scalar type. Scalars have no fields."""
    kind: DefinitionKind
    name: str
    fields: list[FieldInfo] = field(default_factory=list)
    description: str | None = None


@dataclass
class EnumTypeInfo:
    """A GraphQL enum type."""
    name: str
    values: list[str] = field(default_factory=list)
    description: str | None = None
    kind: DefinitionKind = DefinitionKind.ENUM_TYPE_DEFINITION


@dataclass
class InterfaceTypeInfo:
    """A GraphQL interface type."""
    name: str
    fields: list[FieldInfo] = field(default_factory=list)
    description: str | None = None
    kind: DefinitionKind = DefinitionKind.INTERFACE_TYPE_DEFINITION


@dataclass
class UnionTypeInfo:
    """A GraphQL union type."""
    name: str
    types: list[str] = field(default_factory=list)
    description: str | None = None
    kind: DefinitionKind = DefinitionKind.UNION_TYPE_DEFINITION


TypeInfo = TypeDefinitionInfo | EnumTypeInfo | InterfaceTypeInfo | UnionTypeInfo


@dataclass
class ExtendedTypeMap:
    """All type definitions of a document, bucketed by kind."""
    objects: dict[str, TypeDefinitionInfo] = field(default_factory=dict)
    inputs: dict[str, TypeDefinitionInfo] = field(default_factory=dict)
    scalars: dict[str, TypeDefinitionInfo] = field(default_factory=dict)
    enums: dict[str, EnumTypeInfo] = field(default_factory=dict)
    interfaces: dict[str, InterfaceTypeInfo] = field(default_factory=dict)
    unions: dict[str, UnionTypeInfo] = field(default_factory=dict)

    def buckets(self) -> dict[str, dict[str, TypeInfo]]:
        """Return the six buckets keyed by bucket name."""
        return {
            "objects": self.objects,
            "inputs": self.inputs,
            "scalars": self.scalars,
            "enums": self.enums,
            "interfaces": self.interfaces,
            "unions": self.unions,
        }

    def get_type_by_name(self, name: str) -> TypeInfo | None:
        """Look up a definition by name in any bucket."""
        for bucket in self.buckets().values():
            if name in bucket:
                return bucket[name]
        return None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets().values())


@dataclass
class OperationArg:
    """An argument of a root operation field."""
    name: str
    type: str


@dataclass
class OperationField:
    """A field of Query, Mutation or Subscription."""
    name: str
    args: list[OperationArg] = field(default_factory=list)
    return_type: str = ""


@dataclass
class OperationsMap:
    """Fields of the three root operation types, in document order."""
    query: list[OperationField] = field(default_factory=list)
    mutation: list[OperationField] = field(default_factory=list)
    subscription: list[OperationField] = field(default_factory=list)

    def get(self, root_name: str) -> list[OperationField]:
        """Get the fields for a root name ("Query", "Mutation" or "Subscription")."""
        if root_name not in OPERATION_TYPES:
            raise KeyError(root_name)
        return getattr(self, root_name.lower())

    def __getitem__(self, root_name: str) -> list[OperationField]:
        return self.get(root_name)

    def items(self) -> Iterator[tuple[str, list[OperationField]]]:
        """Iterate (root name, fields) pairs in output order."""
        for root_name in OPERATION_TYPES:
            yield root_name, self.get(root_name)

    @property
    def is_empty(self) -> bool:
        return not (self.query or self.mutation or self.subscription)
