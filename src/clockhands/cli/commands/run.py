from typing import Optional

import typer

from clockhands.clock.engine import ClockEngine
from clockhands.clock.smoothing import HandSmoother
from clockhands.runtime.clock_loop import ClockLoop
from clockhands.runtime.display_context import DisplayContext
from clockhands.utilities.env import Configuration, SmoothingPolicy
from clockhands.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    smoothing: Optional[SmoothingPolicy] = typer.Option(
        None,
        "--smoothing",
        case_sensitive=False,
        help="How the displayed hands follow the wall clock",
    ),
    factor: Optional[float] = typer.Option(
        None,
        "--factor",
        help="Exponential smoothing factor in (0, 1]",
    ),
    width: Optional[int] = typer.Option(None, "--width", help="Initial window width"),
    height: Optional[int] = typer.Option(None, "--height", help="Initial window height"),
    max_fps: Optional[int] = typer.Option(None, "--max-fps", min=1),
) -> None:
    try:
        smoother = HandSmoother(
            policy=smoothing or Configuration.smoothing_policy(),
            factor=factor if factor is not None else Configuration.smoothing_factor(),
        )
        default_width, default_height = Configuration.window_size()
        display = DisplayContext(size=(width or default_width, height or default_height))
        loop = ClockLoop(
            engine=ClockEngine(smoother=smoother),
            display=display,
            max_fps=max_fps,
        )
    except ValueError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc
    loop.start()
