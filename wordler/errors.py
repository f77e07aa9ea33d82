class WordleError(Exception):
    pass


class LoadError(WordleError):
    pass


class PlayError(WordleError):
    """A rejected guess. The game state is left untouched."""


class InvalidLength(PlayError):
    def __init__(self, guess: str, expected: int) -> None:
        super().__init__(f"Please enter a valid word with {expected} letters, got {len(guess)}: {guess!r}")
        self.guess = guess
        self.expected = expected


class NotInDictionary(PlayError):
    def __init__(self, word: str) -> None:
        super().__init__(f"Word not in dictionary: {word}")
        self.word = word


class GameAlreadyOver(PlayError):
    def __init__(self) -> None:
        super().__init__("Game ended, start a new one to keep playing")
