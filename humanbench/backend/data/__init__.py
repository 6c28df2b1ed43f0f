from humanbench.backend.data.texts import TEXTS
from humanbench.backend.data.words import WORDS

__all__ = ["TEXTS", "WORDS"]
