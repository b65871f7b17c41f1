"""Command-line interface for gql-tsgen."""

from pathlib import Path

import click

from .core.config import GenerateOptions
from .core.generator import CodeGenerator
from .core.hooks import ExcludeTypesHook, HeaderCommentHook, HookRunner
from .core.parser import GraphQLParseError, SchemaParser, parse_graphql_document
from .core.scalars import ScalarTypeMap


def parse_scalar_overrides(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated NAME=TYPE options into a mapping."""
    overrides = {}
    for value in values:
        name, sep, ts_type = value.partition("=")
        if not sep or not name.strip() or not ts_type.strip():
            raise click.BadParameter(
                f"Expected NAME=TYPE, got {value!r}", param_hint="--scalar"
            )
        overrides[name.strip()] = ts_type.strip()
    return overrides


@click.group()
@click.version_option(package_name="gql-tsgen")
def main():
    """GraphQL to TypeScript code generator.

    Generate TypeScript declarations from GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a GraphQL schema file.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory for generated code.",
)
@click.option("--prefix", default="", help="Prefix for every generated type name.")
@click.option("--suffix", default="", help="Suffix for every generated type name.")
@click.option(
    "--use-enum-type",
    is_flag=True,
    help="Emit enums as 'as const' objects with a union type.",
)
@click.option(
    "--use-interface-type",
    is_flag=True,
    help="Emit GraphQL interfaces as TypeScript interfaces instead of type aliases.",
)
@click.option(
    "--strict-null-checks",
    is_flag=True,
    help="Mark nullable fields as optional.",
)
@click.option(
    "--scalar",
    "scalars",
    multiple=True,
    metavar="NAME=TYPE",
    help="Map a GraphQL scalar to a TypeScript type (repeatable).",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with custom Jinja2 templates.",
)
@click.option(
    "--exclude-prefix",
    "exclude_prefixes",
    multiple=True,
    metavar="PREFIX",
    help="Skip types whose name starts with PREFIX (repeatable).",
)
@click.option(
    "--exclude-type",
    "exclude_types",
    multiple=True,
    metavar="NAME",
    help="Skip the type named NAME (repeatable).",
)
@click.option("--header", help="Comment placed at the top of every generated file.")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    prefix: str,
    suffix: str,
    use_enum_type: bool,
    use_interface_type: bool,
    strict_null_checks: bool,
    scalars: tuple[str, ...],
    template_dir: str | None,
    exclude_prefixes: tuple[str, ...],
    exclude_types: tuple[str, ...],
    header: str | None,
    verbose: bool,
):
    """Generate TypeScript declarations from a GraphQL schema.

    Examples:

        gql-tsgen generate --schema ./schema.graphql --output ./src/types

        gql-tsgen generate -s ./schema.graphql -o ./types --prefix I --use-enum-type

        gql-tsgen generate -s ./schema.graphql -o ./types --scalar DateTime=string

        gql-tsgen generate -s ./schema.graphql -o ./types --exclude-prefix _
    """
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    options = GenerateOptions(
        prefix=prefix,
        suffix=suffix,
        use_enum_type=use_enum_type,
        use_interface_type=use_interface_type,
        strict_null_checks=strict_null_checks,
        output_dir=str(output_path),
    )
    scalar_map = ScalarTypeMap(parse_scalar_overrides(scalars))

    hooks = HookRunner([ExcludeTypesHook(exclude_prefixes, exclude_types)])
    if header:
        hooks.add(HeaderCommentHook(header))

    if verbose:
        click.echo(f"Schema: {schema_path}")
        click.echo(f"Output: {output_path}")

    # Parse schema
    click.echo("Parsing schema...")
    try:
        document = parse_graphql_document(schema_path)
    except GraphQLParseError as e:
        raise click.ClickException(e.message) from e

    if verbose:
        parser = SchemaParser(document, scalar_map)
        types = parser.parse_extended_types()
        operations = parser.parse_operations()
        click.echo(f"  Objects: {len(types.objects)}")
        click.echo(f"  Inputs: {len(types.inputs)}")
        click.echo(f"  Scalars: {len(types.scalars)}")
        click.echo(f"  Enums: {len(types.enums)}")
        click.echo(f"  Interfaces: {len(types.interfaces)}")
        click.echo(f"  Unions: {len(types.unions)}")
        for root_name, fields in operations.items():
            click.echo(f"  {root_name} fields: {len(fields)}")
        if parser.skipped:
            click.echo(f"  Skipped definitions: {len(parser.skipped)}")

    # Generate code
    click.echo("Generating code...")
    generator = CodeGenerator(options, scalar_map, template_dir=template_dir, hooks=hooks)
    results = generator.generate_all(document)

    output_path.mkdir(parents=True, exist_ok=True)
    for result in results:
        file_path = output_path / result.filename
        if verbose:
            click.echo(f"  Writing {file_path}")
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(result.content)

    click.echo(f"Done! Generated {len(results)} files in {output_path}")


if __name__ == "__main__":
    main()
