"""Flattening of GraphQL type references into type-name strings."""

from collections.abc import Callable

from graphql import ListTypeNode, NonNullTypeNode, TypeNode

from . import scalars
from .scalars import ScalarTypeMap

LIST_MARKER = "[]"


class TypeNameResolver:
    """Reduces wrapped type references to flat names.

    The scalar map is copied when the resolver is created, so later
    changes to the shared map do not leak into a run already in progress.
    """

    def __init__(self, scalar_map: ScalarTypeMap | None = None):
        if scalar_map is None:
            scalar_map = scalars.default_scalar_map
        self.scalars = scalar_map.snapshot()
        self.primitives = set(self.scalars.values())

    def resolve(self, type_node: TypeNode) -> str:
        """Flatten a type node: `[Int!]!` becomes `number[]`.

        Non-null wrappers are dropped, each list wrapper appends `[]`.
        """
        if isinstance(type_node, NonNullTypeNode):
            return self.resolve(type_node.type)
        if isinstance(type_node, ListTypeNode):
            return f"{self.resolve(type_node.type)}{LIST_MARKER}"

        name = type_node.name.value
        return self.scalars.get(name, name)

    def render(self, flattened: str, format_name: Callable[[str], str]) -> str:
        """Resolve an already flattened name for output.

        Scalar names are mapped again, primitives are kept as they are and
        every other name goes through format_name.
        """
        if flattened.endswith(LIST_MARKER):
            inner = flattened[: -len(LIST_MARKER)]
            return f"{self.render(inner, format_name)}{LIST_MARKER}"

        if flattened in self.scalars:
            return self.scalars[flattened]
        if flattened in self.primitives:
            return flattened
        return format_name(flattened)


def get_type_name(type_node: TypeNode) -> str:
    """Flatten a type node against the process-wide scalar map."""
    return TypeNameResolver().resolve(type_node)
