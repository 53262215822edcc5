from typing import Optional

import typer

from clockhands.counter import SharedCounter
from clockhands.utilities.env import Configuration
from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)


def count_command(
    threads: Optional[int] = typer.Option(
        None,
        "--threads",
        "-n",
        help="Number of worker threads, each incrementing the counter once",
    ),
) -> None:
    try:
        thread_count = threads if threads is not None else Configuration.counter_threads()
        counter = SharedCounter()
        counter.run_threads(thread_count)
    except ValueError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Final counter value: {counter.get_value()}")
