"""Generation options."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

# Option names as spelled by JavaScript-style callers
_CAMEL_CASE_OPTIONS = {
    "useEnumType": "use_enum_type",
    "useInterfaceType": "use_interface_type",
    "strictNullChecks": "strict_null_checks",
    "outputDir": "output_dir",
}


@dataclass(frozen=True)
class GenerateOptions:
    """Naming and formatting options shared by every renderer.

    Attributes:
        prefix: Prepended to every generated type name
        suffix: Appended to every generated type name
        use_enum_type: Emit enums as an `as const` object plus a union type
        use_interface_type: Emit interface kinds as `interface` instead of `type`
        strict_null_checks: Mark fields without a non-null marker as optional
        output_dir: Where the CLI writes files; the core ignores it
    """
    prefix: str = ""
    suffix: str = ""
    use_enum_type: bool = False
    use_interface_type: bool = False
    strict_null_checks: bool = False
    output_dir: str | None = None

    def format_type_name(self, name: str) -> str:
        """Apply prefix and suffix to a type name."""
        return f"{self.prefix}{name}{self.suffix}"

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "GenerateOptions":
        """Build options from a dict with snake_case or camelCase keys."""
        if not options:
            return cls()

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = _CAMEL_CASE_OPTIONS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown generate option: {key}")
            # None means "use the default", as with an omitted option
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)


def resolve_options(options: "GenerateOptions | Mapping[str, Any] | None") -> GenerateOptions:
    """Accept options as a GenerateOptions, a mapping or None."""
    if isinstance(options, GenerateOptions):
        return options
    return GenerateOptions.from_mapping(options)
