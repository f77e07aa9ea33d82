from wordler.state import Mark, State, Status, TurnResult

A, P, C = Mark.ABSENT, Mark.PRESENT, Mark.CORRECT


def test_state() -> None:
    state = State(max_turns=2)
    assert not state.win
    assert not state.terminal
    assert state.status == Status.IN_PROGRESS

    state.turns.append(TurnResult(guess="TRACE", marks=(A, C, C, P, C)))
    assert state.status == Status.IN_PROGRESS

    state.turns.append(TurnResult(guess="CRANE", marks=(C,) * 5))
    assert state.win
    assert state.terminal
    assert state.status == Status.WON


def test_state_lost() -> None:
    state = State(turns=[TurnResult(guess="TRACE", marks=(A, C, C, P, C))], max_turns=1)
    assert not state.win
    assert state.terminal
    assert state.status == Status.LOST


def test_letter_marks() -> None:
    state = State(
        turns=[
            TurnResult(guess="STEEP", marks=(A, A, P, A, A)),
            TurnResult(guess="RAISE", marks=(P, P, A, A, C)),
        ]
    )
    assert state.letter_marks() == {"S": A, "T": A, "E": C, "P": A, "R": P, "A": P, "I": A}
