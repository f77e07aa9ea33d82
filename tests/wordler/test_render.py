from rich.console import Console

from wordler.render import render_board, render_keyboard, render_turn
from wordler.state import Mark, State, TurnResult

A, P, C = Mark.ABSENT, Mark.PRESENT, Mark.CORRECT


def test_render() -> None:
    turn = TurnResult(guess="TRACE", marks=(A, C, C, P, C))
    text = render_turn(turn)
    assert text.plain == " T  R  A  C  E "
    assert [span.style for span in text.spans] == [
        "bold white on grey37",
        "bold black on green",
        "bold black on green",
        "bold black on yellow",
        "bold black on green",
    ]

    console = Console(width=80, color_system=None)
    with console.capture() as capture:
        console.print(render_board(State(turns=[turn])))
        console.print(render_keyboard(State(turns=[turn])))
    lines = [line.rstrip() for line in capture.get().splitlines()]
    assert lines[0] == " T  R  A  C  E"
    assert lines[1].startswith(" Q  W  E  R  T")
    assert len(lines) == 4
