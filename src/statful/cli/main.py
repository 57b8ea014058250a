"""CLI entry point for statful-client.

Invoked as::

    statful [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m statful.cli.main
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from statful.domain.tags import Tags
    from statful.schema.config import ClientConfiguration

console = Console()
error_console = Console(stderr=True, style="bold red")

_AGGREGATION_NAMES = ["avg", "p90", "count", "last", "sum", "first", "p95", "p99", "min", "max"]
_FREQUENCY_VALUES = ["10", "30", "60", "120", "180", "300"]


def _load_config(config: str | None) -> ClientConfiguration:
    from statful.config.loader import ConfigLoader

    loader = ConfigLoader()
    try:
        return loader.load(config) if config else loader.load_auto()
    except Exception as exc:  # noqa: BLE001
        error_console.print(f"Could not load config: {exc}")
        raise SystemExit(1) from exc


def _parse_tags(raw_tags: tuple[str, ...]) -> Tags:
    from statful.domain.tags import Tags

    tags = Tags()
    for raw in raw_tags:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint="--tag")
        tags.put_tag(key, value)
    return tags


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="statful-client")
def cli() -> None:
    """Statful line-protocol encoder and metrics sender"""


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from statful import __version__

    console.print(f"[bold]statful-client[/bold] v{__version__}")
    console.print(f"Python {sys.version}")


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


@cli.command(name="init")
@click.option(
    "--directory",
    "-d",
    default=".",
    show_default=True,
    help="Directory in which to create the config file.",
)
def init_command(directory: str) -> None:
    """Initialise a statful config file in DIRECTORY."""
    target_dir = Path(directory).resolve()
    config_path = target_dir / "statful.yaml"

    if config_path.exists():
        console.print(
            f"[yellow]Config already exists at {config_path}. Skipping.[/yellow]"
        )
        return

    default_yaml = """\
# statful client configuration
namespace: application
sample_rate: 100
tags: {}
aggregations: []
aggregation_frequency: null
dry_run: false
"""
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        config_path.write_text(default_yaml, encoding="utf-8")
        console.print(f"[green]Created statful config at {config_path}[/green]")
    except OSError as exc:
        error_console.print(f"Failed to create config: {exc}")
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


@cli.command(name="config")
@click.option("--show", is_flag=True, help="Show the current configuration.")
@click.option("--validate", is_flag=True, help="Validate the config file.")
@click.option("--config", "-c", default=None, help="Path to a statful config file.")
def config_command(show: bool, validate: bool, config: str | None) -> None:
    """Show or validate the statful configuration."""
    cfg = _load_config(config)

    if validate:
        from statful.config.schema import validate_config

        try:
            validate_config(cfg.model_dump())
            console.print("[green]Configuration is valid.[/green]")
        except Exception as exc:  # noqa: BLE001
            error_console.print(f"Validation failed: {exc}")
            raise SystemExit(1) from exc

    if show or not validate:
        table = Table(title="statful configuration", show_header=True, header_style="bold cyan")
        table.add_column("Setting", style="dim")
        table.add_column("Value")
        table.add_row("namespace", cfg.namespace)
        table.add_row("sample_rate", str(cfg.sample_rate))
        table.add_row(
            "tags",
            ", ".join(f"{k}={v}" for k, v in cfg.tags.items()) if cfg.tags else "(none)",
        )
        table.add_row(
            "aggregations",
            ", ".join(a.value for a in cfg.aggregations) if cfg.aggregations else "(none)",
        )
        table.add_row(
            "aggregation_frequency",
            str(int(cfg.aggregation_frequency)) if cfg.aggregation_frequency else "(none)",
        )
        table.add_row("dry_run", str(cfg.dry_run))
        console.print(table)


# ---------------------------------------------------------------------------
# encode
# ---------------------------------------------------------------------------


@cli.command(name="encode")
@click.argument("name")
@click.argument("value")
@click.option("--namespace", "-n", default=None, help="Metric namespace.")
@click.option("--tag", "-t", "raw_tags", multiple=True, metavar="KEY=VALUE", help="Tag (repeatable).")
@click.option(
    "--agg", "-a", "aggs", multiple=True, type=click.Choice(_AGGREGATION_NAMES), help="Aggregation (repeatable)."
)
@click.option("--freq", "-f", default=None, type=click.Choice(_FREQUENCY_VALUES), help="Aggregation frequency.")
@click.option("--timestamp", default=None, type=int, help="Unix timestamp in seconds.")
@click.option("--sample-rate", default=None, type=click.IntRange(1, 100), help="Sample rate (1-100).")
def encode_command(
    name: str,
    value: str,
    namespace: str | None,
    raw_tags: tuple[str, ...],
    aggs: tuple[str, ...],
    freq: str | None,
    timestamp: int | None,
    sample_rate: int | None,
) -> None:
    """Print the protocol line for metric NAME with VALUE."""
    from statful.domain.aggregations import Aggregation, AggregationFrequency, Aggregations
    from statful.message.builder import MessageBuilder
    from statful.schema.errors import MessageBuildError

    try:
        line = (
            MessageBuilder.new_builder()
            .with_namespace(namespace)
            .with_name(name)
            .with_value(value)
            .with_tags(_parse_tags(raw_tags))
            .with_aggregations(Aggregations.from_values(*(Aggregation(a) for a in aggs)))
            .with_aggregation_freq(AggregationFrequency(int(freq)) if freq else None)
            .with_timestamp(timestamp)
            .with_sample_rate(sample_rate)
            .build()
        )
    except MessageBuildError as exc:
        error_console.print(f"Could not encode metric: {exc}")
        raise SystemExit(1) from exc

    click.echo(line)


# ---------------------------------------------------------------------------
# send
# ---------------------------------------------------------------------------


@cli.command(name="send")
@click.argument("name")
@click.argument("value")
@click.option("--tag", "-t", "raw_tags", multiple=True, metavar="KEY=VALUE", help="Tag (repeatable).")
@click.option(
    "--agg", "-a", "aggs", multiple=True, type=click.Choice(_AGGREGATION_NAMES), help="Aggregation (repeatable)."
)
@click.option("--freq", "-f", default=None, type=click.Choice(_FREQUENCY_VALUES), help="Aggregation frequency.")
@click.option(
    "--output",
    "-o",
    default=None,
    type=click.Path(dir_okay=False),
    help="Append the line to this file instead of printing it.",
)
@click.option("--config", "-c", default=None, help="Path to a statful config file.")
def send_command(
    name: str,
    value: str,
    raw_tags: tuple[str, ...],
    aggs: tuple[str, ...],
    freq: str | None,
    output: str | None,
    config: str | None,
) -> None:
    """Send metric NAME with VALUE using the configured defaults."""
    from statful.api.sender_api import MetricsSenderAPI
    from statful.domain.aggregations import Aggregation, AggregationFrequency
    from statful.sender.base import TransportMetricsSender
    from statful.sender.transport import ConsoleTransport, FileTransport

    cfg = _load_config(config)
    transport = FileTransport(output) if output else ConsoleTransport()
    sender = TransportMetricsSender(transport, dry_run=cfg.dry_run)

    (
        MetricsSenderAPI(sender)
        .configuration(cfg)
        .metric_name(name)
        .value(value)
        .tags(_parse_tags(raw_tags))
        .aggregations(*(Aggregation(a) for a in aggs))
        .agg_freq(AggregationFrequency(int(freq)) if freq else None)
        .send()
    )
    sender.flush()

    if sender.sent_count == 0:
        error_console.print("Metric was not sent (invalid, sampled out, or transport failure).")
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
