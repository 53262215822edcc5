import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from clockhands.cli.commands.count import count_command
from clockhands.cli.commands.run import run_command

app = typer.Typer(help="Analog clock face and shared-counter demo.")

app.command(name="run")(run_command)
app.command(name="count")(count_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
