from __future__ import annotations

from pathlib import Path

import click

from order_tracker.infrastructure.bootstrap import (
    DEFAULT_LOG_FILE,
    order_log_writer,
    order_manager,
    refund_notifier,
)
from order_tracker.infrastructure.cli.menu import TrackerMenu
from order_tracker.infrastructure.logging_setup import configure_logging


@click.command()
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_FILE,
    show_default=True,
    envvar="ORDER_TRACKER_LOG_FILE",
    help="File that 'Save Orders to File' writes to.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    envvar="ORDER_TRACKER_VERBOSE",
    help="Log diagnostics to stderr.",
)
def cli(log_file: Path, verbose: bool) -> None:
    """Customer Order Tracker — record, refund and query orders in memory."""
    configure_logging(verbose)
    menu = TrackerMenu(
        manager=order_manager(),
        notifier=refund_notifier(),
        writer=order_log_writer(log_file),
        destination=str(log_file),
    )
    menu.run()
