"""CLI entry point for demokit-inference."""

import json
import logging
import os
from pathlib import Path

import click
import yaml

from demokit_inference.config import load_settings
from demokit_inference.dataset.builder import build_dataset
from demokit_inference.dataset.models import COLUMN_TYPE_LABELS
from demokit_inference.mapping.crud import infer_mappings_from_models
from demokit_inference.mapping.inferer import infer_endpoint_mappings
from demokit_inference.parser.detect import load_schema


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else os.getenv("DEMOKIT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_models(models: tuple[str, ...], models_file: Path | None) -> list[str]:
    names = list(models)
    if models_file is not None:
        for line in models_file.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                names.append(line)
    return names


def _emit(payload, output: Path | None) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Saved to {output}")


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML file overriding inference settings.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool):
    """Demokit inference: map API endpoints to data models and type CSV datasets."""
    _setup_logging(verbose)
    try:
        ctx.obj = load_settings(config_path)
    except (ValueError, OSError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid config: {e}")


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, path_type=Path))
@click.option("-m", "--model", "models", multiple=True, help="Available model name (repeatable).")
@click.option("--models-file", default=None, type=click.Path(exists=True, path_type=Path), help="File with one model name per line.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "swagger", "postman"]), help="Schema format.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the result JSON here instead of stdout.")
@click.pass_obj
def infer(settings, schema_path: Path, models: tuple[str, ...], models_file: Path | None, fmt: str, output: Path | None):
    """Infer endpoint-to-model mappings from an API schema."""
    try:
        schema = load_schema(schema_path, fmt)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Could not parse {schema_path}: {e}")
    except ValueError as e:
        raise click.ClickException(str(e))

    available = _read_models(models, models_file)
    result = infer_endpoint_mappings(schema, available, settings)

    click.echo(
        f"{len(schema.endpoints)} endpoints: {len(result.mappings)} mapped, "
        f"{len(result.unmapped)} unmapped, {len(result.skipped)} skipped.",
        err=True,
    )
    _emit(result.model_dump(mode="json", by_alias=True), output)


@main.command()
@click.argument("models", nargs=-1, required=True)
@click.option("--base-path", default=None, help="Path prefix for generated endpoints (default /api).")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the mappings JSON here instead of stdout.")
@click.pass_obj
def crud(settings, models: tuple[str, ...], base_path: str | None, output: Path | None):
    """Generate CRUD endpoint mappings for MODELS."""
    mappings = infer_mappings_from_models(models, base_path=base_path, settings=settings)
    _emit([m.model_dump(mode="json", by_alias=True) for m in mappings], output)


@main.command()
@click.argument("csv_path", type=click.Path(exists=True, path_type=Path))
@click.option("--name", default=None, help="Dataset name (defaults to the file name).")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the full dataset JSON here.")
@click.pass_obj
def csv(settings, csv_path: Path, name: str | None, output: Path | None):
    """Parse a CSV file into a typed dataset."""
    try:
        content = csv_path.read_text(encoding="utf-8")
        dataset = build_dataset(name or csv_path.stem, content, settings=settings)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Dataset {dataset.name} ({dataset.id}): {len(dataset.rows)} rows")
    if dataset.truncated:
        click.echo(f"  Truncated from {dataset.original_row_count} rows")
    for column, column_type in zip(dataset.columns, dataset.column_types):
        click.echo(f"  {column}: {COLUMN_TYPE_LABELS[column_type]}")

    if output is not None:
        _emit(dataset.model_dump(mode="json", by_alias=True), output)
