"""CLI entrypoint for flexval."""

import json
import sys
from pathlib import Path

import click

from flexval import __version__
from flexval.engine import validation_engine
from flexval.exceptions import FlexvalError
from flexval.log import configure_logging
from flexval.spec import load_spec


@click.group()
@click.version_option(__version__, prog_name="flexval")
def cli() -> None:
    """flexval - Declarative per-attribute validation."""
    configure_logging()


@cli.command()
@click.argument("spec_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("object_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strict", is_flag=True, help="Reject unknown rule kinds in the spec")
@click.option("--json", "output_json", is_flag=True, help="Print errors as a JSON list")
def check(spec_file: Path, object_file: Path, strict: bool, output_json: bool) -> None:
    """Validate the JSON object in OBJECT_FILE against SPEC_FILE."""
    try:
        spec = load_spec(spec_file, strict=strict or None)
        obj = json.loads(object_file.read_text(encoding="utf-8"))
        report = validation_engine.report(spec, obj)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Cannot parse object JSON: {e}")
    except FlexvalError as e:
        raise click.ClickException(str(e))

    if output_json:
        click.echo(json.dumps(report.to_legacy(), indent=2))
    elif report.passed:
        click.echo(f"OK: {report.rules_evaluated} rule(s) on {report.attributes_checked} attribute(s)")
    else:
        for err in report.errors:
            for message in err.messages:
                click.echo(f"{err.attr} [{err.rule}]: {message}")

    sys.exit(0 if report.passed else 1)
