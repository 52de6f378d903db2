from __future__ import annotations

import logging
import threading
from dataclasses import asdict
from typing import Optional

import typer

from cli.render import echo_heading, echo_key_values, render_banner, render_report
from logging_config import configure_logging
from services.scheduler import RestartPolicy
from services.simulation import build_default_simulation
from settings import get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Simulated high-frequency temperature feed with periodic trend analysis.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command("run")
def run_command(
    duration: Optional[float] = typer.Option(
        None,
        "--duration",
        "-d",
        min=0.0,
        help="Seconds to run before exiting (runs until interrupted when omitted).",
    ),
    analysis: bool = typer.Option(
        True,
        "--analysis/--no-analysis",
        help="Launch the trend analyzer alongside the feed.",
    ),
    max_restarts: int = typer.Option(
        0,
        "--max-restarts",
        min=0,
        help="Restart a crashed task up to this many times (0 disables restarts).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Start the sensor feed, the evictor and, optionally, the analyzer."""
    if log_level:
        configure_logging(log_level.upper(), force=True)
    else:
        configure_logging()
    render_banner()

    policy = RestartPolicy(max_restarts=max_restarts) if max_restarts else None
    simulation = build_default_simulation(sink=render_report, restart_policy=policy)
    simulation.start()
    if analysis:
        simulation.start_analysis()

    finished = threading.Event()
    try:
        finished.wait(duration)
    except KeyboardInterrupt:
        logger.info("Interrupted; stopping simulation.")
    finally:
        simulation.shutdown()
        build_default_simulation.cache_clear()


@app.command("settings")
def settings_command() -> None:
    """Print the effective configuration."""
    echo_heading("Settings")
    echo_key_values(asdict(get_settings()).items())


def main() -> None:
    app()
