"""CLI command for a local TAKI game."""

from __future__ import annotations

import logging
import sys

import click

from taki.console.input import ConsoleIO
from taki.engine.errors import AllocationFailure, GameAborted
from taki.engine.session import GameSession, SessionConfig

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Logs go to stderr so they do not interleave with the board on stdout.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--start-cards", type=click.IntRange(min=1), default=4, show_default=True,
              help="Cards dealt to each player")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(seed: int | None, start_cards: int, verbose: bool):
    """Play TAKI with friends on one terminal."""
    setup_logging(verbose)

    config = SessionConfig(seed=seed, start_cards=start_cards)
    io = ConsoleIO(output_fn=click.echo)
    session = GameSession(io, config)

    io.welcome()
    try:
        session.run()
    except GameAborted:
        click.echo("\n\nGame interrupted.")
        sys.exit(130)
    except AllocationFailure as e:
        logger.error(f"Memory allocation failed: {e}")
        click.echo("Memory allocation failed!!!", err=True)
        sys.exit(1)

    logger.debug(f"Replay this game with --seed {session.seed}")


if __name__ == "__main__":
    main()
