import os

WORD_LENGTH = 5
MAX_TURNS = 6

WORDS_PATH = os.path.join(os.path.dirname(__file__), "words.txt")

# Fixes the target word instead of drawing a random one.
SECRET_ENV_VAR = "WORDLER_SECRET"
