"""Scalar type mapping for TypeScript code generation.

Maps built-in GraphQL scalar names to the TypeScript primitive they are
emitted as. Unknown scalars are not an error: they pass through unchanged
and are treated as opaque named types.

Example usage:
    from gql_tsgen.core.scalars import ScalarTypeMap, update_scalar_type_map

    # Per-run map, injected into the resolver/renderer
    scalars = ScalarTypeMap()
    scalars.update({"DateTime": "string"})

    # Or mutate the process-wide default before generating
    update_scalar_type_map({"Date": "Date"})
"""

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_SCALAR_TYPES: dict[str, str] = {
    "ID": "string",
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
}


class ScalarTypeMap:
    """Mapping from GraphQL scalar names to TypeScript primitives.

    Example:
        scalars = ScalarTypeMap()
        scalars.get("Int")          # "number"
        scalars.get("Money", "Money")  # "Money" (passthrough)
    """

    def __init__(self, overrides: Mapping[str, str] | None = None):
        self._types: dict[str, str] = dict(DEFAULT_SCALAR_TYPES)
        if overrides:
            self.update(overrides)

    def update(self, overrides: Mapping[str, str]):
        """Merge overrides into the map. Existing names are overwritten, none are removed."""
        self._types.update(overrides)

    def get(self, scalar_name: str, default: str | None = None) -> str | None:
        """Get the primitive for a scalar name, or default if not mapped."""
        return self._types.get(scalar_name, default)

    def snapshot(self) -> Mapping[str, str]:
        """Return a read-only copy of the current mapping."""
        return MappingProxyType(dict(self._types))

    @property
    def primitives(self) -> set[str]:
        """All target primitive names the map resolves to."""
        return set(self._types.values())

    def __contains__(self, scalar_name: object) -> bool:
        return scalar_name in self._types

    def __repr__(self) -> str:
        return f"ScalarTypeMap({self._types!r})"


# Process-wide default, configured by callers before generation
default_scalar_map = ScalarTypeMap()


def get_scalar_type_map() -> Mapping[str, str]:
    """Return an immutable snapshot of the process-wide scalar map."""
    return default_scalar_map.snapshot()


def update_scalar_type_map(overrides: Mapping[str, str]):
    """Merge overrides into the process-wide scalar map."""
    default_scalar_map.update(overrides)
