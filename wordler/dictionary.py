import abc
import logging
import random

import more_itertools

from wordler.consts import WORD_LENGTH, WORDS_PATH
from wordler.errors import LoadError

log = logging.getLogger(__name__)


def is_candidate(word: str) -> bool:
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()


def load_words(path: str) -> list[str]:
    """Reads a whitespace separated word list, keeping the playable words in file order."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read word list {path}: {e}") from e

    entries = contents.split()
    words = list(more_itertools.unique_everseen(w.upper() for w in entries if is_candidate(w)))
    log.debug(f"Skipped {len(entries) - len(words)} entries from {path}")
    if not words:
        raise LoadError(f"No {WORD_LENGTH} letter words found in {path}")

    log.info(f"Loaded {len(words)} words from {path}")
    return words


class Dictionary(abc.ABC):
    @abc.abstractmethod
    def random_word(self) -> str:
        ...

    @abc.abstractmethod
    def contains(self, word: str) -> bool:
        ...


class WordListDictionary(Dictionary):
    def __init__(self, words: list[str], seed: int | None = None) -> None:
        if not words:
            raise LoadError("Word list is empty")

        words = [word.upper() for word in words]
        lengths = {len(word) for word in words}
        if len(lengths) != 1:
            raise LoadError(f"Word list mixes word lengths {sorted(lengths)}")

        self._words = tuple(words)
        self._lookup = frozenset(self._words)
        self.rng = random.Random(seed)

    @classmethod
    def load(cls, path: str | None = None, seed: int | None = None) -> "WordListDictionary":
        return cls(load_words(path or WORDS_PATH), seed=seed)

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def random_word(self) -> str:
        return self.rng.choice(self._words)

    def contains(self, word: str) -> bool:
        return word.upper() in self._lookup
