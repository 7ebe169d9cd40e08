"""
Command line interface for partlog using Click.

Inspect the effective levels of a configuration and emit test messages
through the same path applications use.
"""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from . import __version__
from .bootstrap import init_logging
from .config.loader import load_config
from .config.schema import AppConfig
from .core import PartitionLevelStore, Severity

EXIT_SUCCESS = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 3

_LEVEL_CHOICES = [s.name.lower() for s in Severity] + ["warning", "critical"]


def _load_or_exit(config: Path | None, **cli_args) -> AppConfig:
    try:
        return load_config(config_path=config, cli_args=cli_args)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except ValidationError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)


def _level_label(level: Severity | None) -> str:
    return level.name.lower() if level is not None else "none"


@click.group()
@click.version_option(version=__version__, prog_name="partlog")
def main() -> None:
    """partlog - partition-aware logging facade.

    Inspect logging configurations and emit messages through the
    configured outputs.
    """
    pass


@main.command("validate-config")
@click.option(
    "-c",
    "--config",
    type=click.Path(path_type=Path),
    required=True,
    help="Path to the YAML configuration file",
)
def validate_config(config: Path) -> None:
    """Validate a YAML configuration file."""
    app_config = _load_or_exit(config)
    logging_config = app_config.logging
    click.echo("Valid configuration")
    click.echo(f"  Root level: {logging_config.root.level}")
    click.echo(f"  Loggers defined: {len(logging_config.loggers)}")
    click.echo(f"  Data dir: {app_config.data_dir}")


@main.command()
@click.argument("partitions", nargs=-1)
@click.option(
    "-c",
    "--config",
    type=click.Path(path_type=Path),
    help="Path to the YAML configuration file",
)
@click.option("--log-level", help="Override the root level")
def levels(partitions: tuple[str, ...], config: Path | None, log_level: str | None) -> None:
    """Show the effective minimum level of each partition.

    Without PARTITIONS, lists the root and every configured logger.
    """
    app_config = _load_or_exit(config, log_level=log_level)
    store = PartitionLevelStore.from_config(app_config.logging)

    click.echo(f"  {'root':<24} {_level_label(store.root_level)}")
    names = partitions or tuple(sorted(store.levels()))
    for name in names:
        click.echo(f"  {name:<24} {_level_label(store.current_minimum_level(name))}")


@main.command()
@click.argument("partition")
@click.argument("message", nargs=-1, required=True)
@click.option(
    "-c",
    "--config",
    type=click.Path(path_type=Path),
    help="Path to the YAML configuration file",
)
@click.option(
    "-l",
    "--level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default="info",
    show_default=True,
    help="Severity of the message",
)
@click.option("--log-level", help="Override the root level")
@click.option("--log-file", type=click.Path(path_type=Path), help="Override the root log file")
@click.option("--data-dir", type=click.Path(path_type=Path), help="Base directory for log files")
@click.option("--json", "json_output", is_flag=True, help="Render console output as JSON")
def emit(
    partition: str,
    message: tuple[str, ...],
    config: Path | None,
    level: str,
    log_level: str | None,
    log_file: Path | None,
    data_dir: Path | None,
    json_output: bool,
) -> None:
    """Emit MESSAGE on PARTITION through the configured outputs.

    Words of MESSAGE are joined with single spaces. Prints whether the
    message passed the partition's level.
    """
    app_config = _load_or_exit(
        config,
        log_level=log_level,
        log_file=str(log_file) if log_file else None,
        data_dir=str(data_dir) if data_dir else None,
    )
    severity = Severity.parse(level)

    failures: list[Exception] = []
    try:
        log = init_logging(
            app_config,
            json_output=json_output,
            on_sink_error=lambda error, _partition, _severity: failures.append(error),
        )
    except OSError as e:
        click.echo(f"Error: cannot open log output: {e}", err=True)
        sys.exit(EXIT_FAILED)

    enabled = log.is_enabled(partition, severity)
    with log.clog(severity, partition) as msg:
        for i, word in enumerate(message):
            if i:
                msg.append(" ")
            msg.append(word)

    if failures:
        click.echo(f"Error: delivery failed: {failures[0]}", err=True)
        sys.exit(EXIT_FAILED)

    state = "emitted" if enabled else "filtered"
    click.echo(f"{state}: {partition} {severity.name.lower()}")


if __name__ == "__main__":
    main()
