import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError

from rich.console import Console
from rich.logging import RichHandler

from wordler.consts import MAX_TURNS, SECRET_ENV_VAR
from wordler.dictionary import WordListDictionary
from wordler.errors import LoadError, NotInDictionary, PlayError
from wordler.render import render_board, render_keyboard
from wordler.state import Status
from wordler.wordle import Wordle

EXIT_WON = 0
EXIT_LOST = 1
EXIT_ABORTED = 2


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main() -> None:
    parser = ArgumentParser(description="Guess the hidden five letter word")
    parser.add_argument("--seed", type=int, default=None, help="Random seed used to pick the word")
    parser.add_argument(
        "--dictionary_path",
        type=str,
        default=None,
        help="File containing the list of eligible words, e.g. /usr/share/dict/words",
    )
    parser.add_argument("--max_turns", type=positive_int, default=MAX_TURNS, help="Number of guesses allowed")
    parser.add_argument(
        "--secret",
        type=str,
        default=None,
        help=f"Word to guess instead of a random one (defaults to ${SECRET_ENV_VAR})",
    )
    parser.add_argument("--log_level", type=str, default="WARNING", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(message)s", handlers=[RichHandler()])
    console = Console()

    try:
        dictionary = WordListDictionary.load(args.dictionary_path, seed=args.seed)
        wordle = Wordle(dictionary, max_turns=args.max_turns, secret=args.secret)
    except (LoadError, NotInDictionary) as e:
        console.print(str(e), style="bold red", markup=False)
        sys.exit(EXIT_ABORTED)

    while True:
        try:
            guess = console.input(f"Enter your guess ({wordle.current_attempt}/{wordle.max_turns}): ")
        except (EOFError, KeyboardInterrupt):
            console.print(f"\nThe word was [bold]{wordle.target}[/]")
            sys.exit(EXIT_ABORTED)

        try:
            result = wordle.play(guess)
        except PlayError as e:
            console.print(str(e), style="red", markup=False)
            continue

        console.print(render_board(wordle.state))
        console.print()
        console.print(render_keyboard(wordle.state))

        if result.status == Status.WON:
            console.print(f"[bold white on green]You won in {wordle.turn}/{wordle.max_turns}![/]")
            sys.exit(EXIT_WON)
        if result.status == Status.LOST:
            console.print(f"[bold white on red]You lost, the word was {wordle.target}[/]")
            sys.exit(EXIT_LOST)


if __name__ == "__main__":
    main()
