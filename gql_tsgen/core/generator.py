"""Code generator for GraphQL schemas.

Renders Jinja2 templates to produce TypeScript declarations from IR.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(options, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from graphql import DocumentNode
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GenerateOptions, resolve_options
from .declarations import Declaration, DeclarationBuilder
from .hooks import HookRunner
from .ir import (
    EnumTypeInfo,
    InterfaceTypeInfo,
    OperationsMap,
    TypeDefinitionInfo,
    UnionTypeInfo,
)
from .parser import SchemaParser
from .scalars import ScalarTypeMap

MODULE_TEMPLATE = "module.ts.j2"


@dataclass(frozen=True)
class GenerateResult:
    """One rendered output file."""
    filename: str
    content: str


class TypeScriptRenderer:
    """Renders declarations as TypeScript source.

    Available templates to override:
        - module.ts.j2: File banner and declaration layout
        - interface.ts.j2: Interfaces and object type aliases
        - enum.ts.j2: Native enums and `as const` enums
        - alias.ts.j2: Scalar and union type aliases
    """

    def __init__(self, template_dir: str | None = None):
        # Custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates/typescript"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, declaration: Declaration) -> str:
        """Render a single declaration."""
        template = self.env.get_template(declaration.template)
        return template.render(decl=declaration)

    def render_module(self, title: str, declarations: Iterable[Declaration]) -> str:
        """Render a file: banner, category comment, then each declaration."""
        template = self.env.get_template(MODULE_TEMPLATE)
        return template.render(
            title=title,
            declarations=[self.render(d) for d in declarations],
        )


class CodeGenerator:
    """Generates TypeScript files from GraphQL IR."""

    def __init__(
        self,
        options: GenerateOptions | Mapping[str, Any] | None = None,
        scalar_map: ScalarTypeMap | None = None,
        template_dir: str | None = None,
        hooks: HookRunner | None = None,
    ):
        """Initialize the code generator.

        Args:
            options: Naming and formatting options
            scalar_map: Scalar mapping; defaults to the process-wide map
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
            hooks: Optional pre/post generation hooks
        """
        self.options = resolve_options(options)
        self.scalar_map = scalar_map
        self.builder = DeclarationBuilder(self.options, scalar_map)
        self.renderer = TypeScriptRenderer(template_dir)
        self.hooks = hooks or HookRunner()

    def generate_types(self, definitions: Mapping[str, TypeDefinitionInfo]) -> str:
        return self.renderer.render_module(
            "Type Definitions",
            [self.builder.build_type(info) for info in definitions.values()],
        )

    def generate_inputs(self, definitions: Mapping[str, TypeDefinitionInfo]) -> str:
        return self.renderer.render_module(
            "Input Types",
            [self.builder.build_type(info) for info in definitions.values()],
        )

    def generate_enums(self, definitions: Mapping[str, EnumTypeInfo]) -> str:
        return self.renderer.render_module(
            "Enum Types",
            [self.builder.build_enum(info) for info in definitions.values()],
        )

    def generate_interfaces(self, definitions: Mapping[str, InterfaceTypeInfo]) -> str:
        return self.renderer.render_module(
            "Interface Types",
            [self.builder.build_interface(info) for info in definitions.values()],
        )

    def generate_unions(self, definitions: Mapping[str, UnionTypeInfo]) -> str:
        return self.renderer.render_module(
            "Union Types",
            [self.builder.build_union(info) for info in definitions.values()],
        )

    def generate_operations(self, operations: OperationsMap) -> str:
        return self.renderer.render_module(
            "Operations",
            self.builder.build_operations(operations),
        )

    def generate_all(self, document: DocumentNode) -> list[GenerateResult]:
        """Classify the document and render every non-empty category.

        Output order is fixed: types, inputs, enums, interfaces, unions,
        operations.
        """
        parser = SchemaParser(document, self.scalar_map)
        types = self.hooks.pre_generate(parser.parse_extended_types())
        operations = parser.parse_operations()

        categories = [
            ("types.ts", types.objects, self.generate_types),
            ("inputs.ts", types.inputs, self.generate_inputs),
            ("enums.ts", types.enums, self.generate_enums),
            ("interfaces.ts", types.interfaces, self.generate_interfaces),
            ("unions.ts", types.unions, self.generate_unions),
        ]

        results = []
        for filename, definitions, render in categories:
            if definitions:
                results.append(self._result(filename, render(definitions)))
        if not operations.is_empty:
            results.append(self._result("operations.ts", self.generate_operations(operations)))
        return results

    def _result(self, filename: str, content: str) -> GenerateResult:
        return GenerateResult(filename, self.hooks.post_generate(filename, content))


def generate_typescript_types(definitions, options=None, scalar_map=None) -> str:
    """Render object (and scalar) definitions as `types.ts` content."""
    return CodeGenerator(options, scalar_map).generate_types(definitions)


def generate_input_types(definitions, options=None, scalar_map=None) -> str:
    """Render input definitions as `inputs.ts` content."""
    return CodeGenerator(options, scalar_map).generate_inputs(definitions)


def generate_enums(definitions, options=None, scalar_map=None) -> str:
    """Render enum definitions as `enums.ts` content."""
    return CodeGenerator(options, scalar_map).generate_enums(definitions)


def generate_interfaces(definitions, options=None, scalar_map=None) -> str:
    """Render interface definitions as `interfaces.ts` content."""
    return CodeGenerator(options, scalar_map).generate_interfaces(definitions)


def generate_unions(definitions, options=None, scalar_map=None) -> str:
    """Render union definitions as `unions.ts` content."""
    return CodeGenerator(options, scalar_map).generate_unions(definitions)


def generate_operations(operations, options=None, scalar_map=None) -> str:
    """Render root operations as `operations.ts` content."""
    return CodeGenerator(options, scalar_map).generate_operations(operations)


def generate_all(
    document: DocumentNode,
    options: GenerateOptions | Mapping[str, Any] | None = None,
    *,
    scalar_map: ScalarTypeMap | None = None,
    hooks: HookRunner | None = None,
    template_dir: str | None = None,
) -> list[GenerateResult]:
    """Generate every non-empty output file for a document."""
    generator = CodeGenerator(options, scalar_map, template_dir=template_dir, hooks=hooks)
    return generator.generate_all(document)
