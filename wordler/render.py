from rich.console import Group
from rich.text import Text

from wordler.state import Mark, State, TurnResult

MARK_STYLES = {
    Mark.CORRECT: "bold black on green",
    Mark.PRESENT: "bold black on yellow",
    Mark.ABSENT: "bold white on grey37",
}
UNUSED_STYLE = "white"

KEYBOARD_ROWS = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]


def render_turn(turn: TurnResult) -> Text:
    text = Text()
    for letter, mark in zip(turn.guess, turn.marks):
        text.append(f" {letter} ", style=MARK_STYLES[mark])
    return text


def render_board(state: State) -> Group:
    return Group(*[render_turn(turn) for turn in state.turns])


def render_keyboard(state: State) -> Group:
    letter_marks = state.letter_marks()
    rows = []
    for indent, row in enumerate(KEYBOARD_ROWS):
        text = Text(" " * indent)
        for letter in row:
            mark = letter_marks.get(letter)
            text.append(f" {letter} ", style=MARK_STYLES[mark] if mark is not None else UNUSED_STYLE)
        rows.append(text)
    return Group(*rows)
