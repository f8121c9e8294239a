import json
import logging

import click

from .catalog import load_catalog_file
from .config import CodeGeneratorConfig, NullablePolicy
from .errors import CodeGenerationError
from .generator import TypeScriptGenerator
from .writer import AtomicWriter


def _load_config(path: str) -> CodeGeneratorConfig:
    try:
        with open(path) as f:
            return CodeGeneratorConfig.from_dict(json.load(f))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid config file {path}: {e}") from e
    except (AttributeError, TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid config in {path}: {e}") from e


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--nullable-policy",
    default=None,
    type=click.Choice([p.value for p in NullablePolicy]),
    help="How nullable columns are rendered (overrides config file if set)",
)
@click.option("--export-namespaces", is_flag=True, default=False, help="Emit 'export namespace' blocks")
@click.option("--generation-comment", is_flag=True, default=False, help="Start the file with a '// Generated by' comment")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("catalog", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def sql_schema_to_code(config, nullable_policy, export_namespaces, generation_comment, verbose, catalog, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s - %(message)s")

    config = _load_config(config) if config is not None else CodeGeneratorConfig()

    # CLI flags override the config file
    if nullable_policy is not None:
        config.nullable_policy = NullablePolicy(nullable_policy)
    if export_namespaces:
        config.export_namespaces = True
    if generation_comment:
        config.add_generation_comment = True

    try:
        row_shapes = load_catalog_file(catalog)
        out = TypeScriptGenerator(row_shapes, config).generate()
        AtomicWriter().write(output, out)
    except CodeGenerationError as e:
        raise click.ClickException(str(e)) from e
