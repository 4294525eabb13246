"""Command-line interface for gql-urqlgen."""

from pathlib import Path

import click

from .core.config import ConfigError, load_config
from .core.generator import CodeGenerator
from .core.ir import OperationType
from .core.parser import DocumentParseError, DocumentParser
from .logging import configure_logging

DEFAULT_CONFIG_FILE = ".urqlgen.json"


def parse_with_loaders(value: str | None) -> bool | str | None:
    """Interpret --with-loaders: 'true'/'false' or a '<module>#<export>' client source."""
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0", ""):
        return False
    return value.strip()


@click.group()
@click.version_option(package_name="gql-urqlgen")
def main():
    """urql binding generator for GraphQL operations.

    Generate typed urql components, hooks and react-router loaders.
    """
    pass


@main.command()
@click.option(
    "--documents",
    "-d",
    required=True,
    type=click.Path(exists=True),
    help="Path to a .graphql/.gql document or a directory of documents.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for the generated module (e.g., graphql.tsx).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help=f"JSON configuration file with camelCase option names (default: {DEFAULT_CONFIG_FILE}).",
)
@click.option("--with-component/--no-with-component", default=None, help="Generate urql components.")
@click.option("--with-hooks/--no-with-hooks", default=None, help="Generate urql hooks.")
@click.option(
    "--with-loaders",
    default=None,
    help="Generate react-router loaders: 'true', 'false' or '<module>#<export>' for the client.",
)
@click.option("--urql-import-from", default=None, help="Module to import urql from (default: urql).")
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with Jinja2 templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    documents: str,
    output: str,
    config_path: str | None,
    with_component: bool | None,
    with_hooks: bool | None,
    with_loaders: str | None,
    urql_import_from: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate urql bindings from GraphQL operation documents.

    Examples:

        gql-urqlgen generate --documents ./src/graphql --output ./src/generated/graphql.tsx

        gql-urqlgen generate -d ./queries.graphql -o ./graphql.ts --no-with-hooks --with-loaders '~/urql#client'
    """
    configure_logging(verbose=verbose)
    documents_path = Path(documents).resolve()
    output_path = Path(output).resolve()

    try:
        config = load_config(Path(config_path or DEFAULT_CONFIG_FILE))
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    # Command-line flags override the configuration file
    overrides = {
        "with_component": with_component,
        "with_hooks": with_hooks,
        "with_loaders": parse_with_loaders(with_loaders),
        "urql_import_from": urql_import_from,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        config = config.model_copy(update=overrides)

    if verbose:
        click.echo(f"Documents: {documents_path}")
        click.echo(f"Output: {output_path}")

    click.echo("Parsing documents...")
    try:
        operations = DocumentParser(str(documents_path), config).parse_all()
    except DocumentParseError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        for kind in OperationType:
            count = len([op for op in operations if op.operation_type is kind])
            click.echo(f"  {kind.value}: {count}")

    click.echo("Generating code...")
    generator = CodeGenerator(operations, config, template_dir=template_dir)
    generator.generate(str(output_path))

    click.echo(f"Done! Generated bindings for {len(operations)} operation(s) in {output_path}")


if __name__ == "__main__":
    main()
