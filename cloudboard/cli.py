"""CLI entry point for the cloud operations dashboard."""

import logging
import random
import sys
import threading

import click

from cloudboard.catalog import default_config
from cloudboard.classifier import classify
from cloudboard.insights import category_style, generate
from cloudboard.loader import ConfigValidationError, load_config
from cloudboard.models import SessionSnapshot
from cloudboard.render import (
    render_architecture,
    render_deployments,
    render_insights,
    render_overview,
    severity_color,
)
from cloudboard.session import SessionConfigError, TelemetrySession

logger = logging.getLogger(__name__)

# click has no orange/gray; map presentation colors onto terminal colors.
_TERMINAL_COLORS = {
    "orange": "bright_yellow",
    "gray": "bright_black",
}


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose):
    """Cloud Operations Dashboard -- simulated live telemetry for a cloud platform."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True),
    help="Optional dashboard config (YAML or JSON). Uses the built-in catalog if omitted.",
)
@click.option(
    "--ticks",
    default=0,
    type=click.IntRange(min=0),
    help="Stop after this many ticks (0 runs until interrupted).",
)
@click.option(
    "--interval-ms",
    default=None,
    type=click.FloatRange(min=0, min_open=True),
    help="Tick interval in milliseconds. Overrides the config file.",
)
@click.option(
    "--seed",
    default=None,
    type=int,
    help="Seed for the random walk. Overrides the config file.",
)
def watch(config_path, ticks, interval_ms, seed):
    """Start a telemetry session and print the overview on every tick."""
    config = _load_or_exit(config_path)
    if interval_ms is None:
        interval_ms = config.tick_interval_ms
    if seed is None:
        seed = config.seed

    try:
        session = TelemetrySession(interval_ms=interval_ms, rng=random.Random(seed))
    except SessionConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    done = threading.Event()
    tick_count = 0

    def _on_tick(sample):
        nonlocal tick_count
        tick_count += 1
        _echo_lines(render_overview(session.snapshot(), config))
        click.echo("")
        if ticks and tick_count >= ticks:
            session.stop()
            done.set()

    # Seed overview goes out before the tick thread exists.
    _echo_lines(render_overview(session.snapshot(), config))
    click.echo("")
    session.subscribe(_on_tick)
    session.start()
    try:
        done.wait()
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping session")
    finally:
        session.stop()
        session.unsubscribe(_on_tick)
    click.echo(f"Stopped after {session.snapshot().ticks} tick(s)")


@main.command()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True),
    help="Optional dashboard config (YAML or JSON).",
)
def snapshot(config_path):
    """Print the seed overview, architecture, deployments, and insights without ticking."""
    config = _load_or_exit(config_path)
    session = TelemetrySession(interval_ms=config.tick_interval_ms)
    session.start()
    session.stop()
    snap: SessionSnapshot = session.snapshot()

    _echo_lines(render_overview(snap, config))
    click.echo("")
    _echo_lines(render_architecture())
    click.echo("")
    _echo_lines(render_deployments(config))
    click.echo("")
    _echo_lines(render_insights(list(snap.insights)))


@main.command(name="classify")
@click.argument("tokens", nargs=-1, required=True)
def classify_cmd(tokens):
    """Classify raw status tokens into severity classes."""
    for token in tokens:
        color = _terminal_color(severity_color(token))
        click.echo(f"{token} -> " + click.style(classify(token), fg=color))


@main.command()
def architecture():
    """Print the layered architecture and request data flow."""
    _echo_lines(render_architecture())


@main.command()
def insights():
    """List the advisory insights in display order."""
    for insight in generate():
        _, color = category_style(insight.category)
        label = click.style(f"[{insight.category}]", fg=_terminal_color(color))
        click.echo(f"{label} {insight.message}")


def _load_or_exit(config_path):
    if config_path is None:
        return default_config()
    try:
        return load_config(config_path)
    except ConfigValidationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _echo_lines(lines):
    for line in lines:
        click.echo(line)


def _terminal_color(color):
    return _TERMINAL_COLORS.get(color, color)


if __name__ == "__main__":
    main()
