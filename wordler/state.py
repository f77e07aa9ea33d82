import enum
from dataclasses import dataclass, field

from wordler.consts import MAX_TURNS


class Mark(enum.IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


class Status(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class TurnResult:
    guess: str
    marks: tuple[Mark, ...]

    @property
    def solved(self) -> bool:
        return all(mark == Mark.CORRECT for mark in self.marks)


@dataclass(frozen=True)
class PlayResult:
    status: Status
    turn: TurnResult


@dataclass
class State:
    turns: list[TurnResult] = field(default_factory=list)
    max_turns: int = MAX_TURNS

    @property
    def win(self) -> bool:
        return bool(self.turns) and self.turns[-1].solved

    @property
    def terminal(self) -> bool:
        return len(self.turns) == self.max_turns or self.win

    @property
    def status(self) -> Status:
        if self.win:
            return Status.WON
        if self.terminal:
            return Status.LOST
        return Status.IN_PROGRESS

    def letter_marks(self) -> dict[str, Mark]:
        """Best mark seen so far for every guessed letter."""
        marks = {}
        for turn in self.turns:
            for letter, mark in zip(turn.guess, turn.marks):
                marks[letter] = max(mark, marks.get(letter, Mark.ABSENT))
        return marks
