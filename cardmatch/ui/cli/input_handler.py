"""CLI input handling.

Collects the pack count from the user, re-prompting until the answer is
a whole number from one to ten.
"""

from typing import Optional

import click

from cardmatch.core import MIN_PACKS, MAX_PACKS

PACK_COUNT_PROMPT = "Enter the number of packs of cards from one to ten"


class CLIInputHandler:
    """CLI input handler.

    Uses click for prompting. Invalid answers are ignored without an error
    message and the question is asked again.
    """

    @staticmethod
    def parse_pack_count(text: str) -> Optional[int]:
        """Parse a pack count answer.

        Args:
            text: Raw user input

        Returns:
            The pack count, or None when the input is not a number in range
        """
        try:
            value = int(text.strip())
        except ValueError:
            return None
        if MIN_PACKS <= value <= MAX_PACKS:
            return value
        return None

    @staticmethod
    def get_pack_count() -> int:
        """Ask for the number of packs until a valid answer is given.

        Raises:
            click.Abort: When input ends before a valid answer
        """
        while True:
            answer = click.prompt(PACK_COUNT_PROMPT, type=str, prompt_suffix=": ",
                                  default="", show_default=False)
            pack_count = CLIInputHandler.parse_pack_count(answer)
            if pack_count is not None:
                return pack_count
