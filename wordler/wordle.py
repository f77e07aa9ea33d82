import collections
import copy
import logging
import os

from wordler.consts import MAX_TURNS, SECRET_ENV_VAR
from wordler.dictionary import Dictionary
from wordler.errors import GameAlreadyOver, InvalidLength, NotInDictionary
from wordler.state import Mark, PlayResult, State, Status, TurnResult

log = logging.getLogger(__name__)


def compute_marks(target: str, guess: str) -> tuple[Mark, ...]:
    assert len(target) == len(guess)
    marks = [Mark.ABSENT] * len(guess)
    remaining = collections.Counter()
    for idx, (target_letter, guessed_letter) in enumerate(zip(target, guess)):
        if target_letter == guessed_letter:
            marks[idx] = Mark.CORRECT
        else:
            remaining[target_letter] += 1

    for idx, guessed_letter in enumerate(guess):
        if marks[idx] == Mark.CORRECT:
            continue

        if remaining[guessed_letter] > 0:
            marks[idx] = Mark.PRESENT
            remaining[guessed_letter] -= 1

    return tuple(marks)


class Wordle:
    """A single game session against a hidden target word.

    The target is drawn from `dictionary` unless `secret` (or the WORDLER_SECRET
    environment variable) fixes it, in which case it must be a dictionary word.
    """

    def __init__(self, dictionary: Dictionary, max_turns: int = MAX_TURNS, secret: str | None = None) -> None:
        if max_turns < 1:
            raise ValueError(f"A game needs at least one turn, got max_turns={max_turns}")
        self.dictionary = dictionary

        secret = secret or os.environ.get(SECRET_ENV_VAR)
        if secret:
            secret = secret.strip().upper()
            if not dictionary.contains(secret):
                raise NotInDictionary(secret)
            self._target = secret
        else:
            self._target = dictionary.random_word().upper()

        self.state = State(turns=[], max_turns=max_turns)
        log.debug(f"New game with target {self._target} and {max_turns} turns")

    @property
    def target(self) -> str:
        return self._target

    @property
    def turn(self) -> int:
        return len(self.state.turns)

    @property
    def current_attempt(self) -> int:
        return self.turn + 1

    @property
    def max_turns(self) -> int:
        return self.state.max_turns

    @property
    def turns(self) -> tuple[TurnResult, ...]:
        return tuple(self.state.turns)

    @property
    def status(self) -> Status:
        return self.state.status

    def play(self, guess: str) -> PlayResult:
        if self.state.terminal:
            raise GameAlreadyOver()

        guess = guess.strip().upper()
        if len(guess) != len(self._target):
            raise InvalidLength(guess, expected=len(self._target))

        if not self.dictionary.contains(guess):
            raise NotInDictionary(guess)

        turn = TurnResult(guess=guess, marks=compute_marks(self._target, guess))
        state = copy.deepcopy(self.state)
        state.turns.append(turn)
        self.state = state

        status = state.status
        log.debug(f"Turn {self.turn}/{self.max_turns}: {guess} -> {[mark.name for mark in turn.marks]} ({status.name})")
        return PlayResult(status=status, turn=turn)
