"""Card matching CLI game.

Runs one complete two-player game in the terminal and narrates every
turn.
"""

import logging
import os
from typing import Optional

import click

from cardmatch.controller import GameConfiguration, GameController, GameResult
from cardmatch.core import CardGameError, EventBus, GameEvent
from .input_handler import CLIInputHandler
from .render import CLIRenderer

SEED_ENV = "CARDMATCH_SEED"
LOG_LEVEL_ENV = "CARDMATCH_LOG_LEVEL"


class CardMatchCLI:
    """Card matching CLI game.

    Wires a GameController to the terminal: every game event is rendered
    and echoed as it happens.
    """

    def __init__(self, config: GameConfiguration, event_bus: Optional[EventBus] = None):
        """Initialize the CLI game.

        Args:
            config: Game configuration
            event_bus: Event bus shared with the controller
        """
        self.logger = logging.getLogger(__name__)
        self.event_bus = event_bus or EventBus()
        self.event_bus.subscribe_all(self._on_event)
        self.controller = GameController(config, event_bus=self.event_bus)

    def _on_event(self, event: GameEvent) -> None:
        text = CLIRenderer.render_event(event)
        if text is not None:
            click.echo(text)

    def run(self) -> GameResult:
        """Deal, play the game to the end and return the result."""
        self.controller.setup()
        return self.controller.start_game()


def _seed_from_env() -> Optional[int]:
    raw = os.environ.get(SEED_ENV)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise click.ClickException(f"{SEED_ENV} must be an integer, got {raw!r}") from e


def _setup_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@click.command()
def main() -> None:
    """Play a two-player card matching game."""
    _setup_logging()
    seed = _seed_from_env()
    pack_count = CLIInputHandler.get_pack_count()

    config = GameConfiguration(pack_count=pack_count, seed=seed)
    try:
        CardMatchCLI(config).run()
    except CardGameError as e:
        logging.getLogger(__name__).error(f"Game aborted: {e}")
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
