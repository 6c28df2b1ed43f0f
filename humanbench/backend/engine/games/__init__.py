from humanbench.backend.engine.games.aim_trainer import AimTrainer
from humanbench.backend.engine.games.chimp_test import ChimpTest
from humanbench.backend.engine.games.number_memory import NumberMemory
from humanbench.backend.engine.games.reaction_time import ReactionTime
from humanbench.backend.engine.games.sequence_memory import SequenceMemory
from humanbench.backend.engine.games.typing_test import TypingTest
from humanbench.backend.engine.games.verbal_memory import VerbalMemory
from humanbench.backend.engine.games.visual_memory import VisualMemory

# Menu layout, row by row.
GAME_GRID = (
    (ReactionTime, SequenceMemory, AimTrainer),
    (NumberMemory, VerbalMemory, ChimpTest),
    (VisualMemory, TypingTest),
)

ALL_GAMES = tuple(cls for row in GAME_GRID for cls in row)

__all__ = [
    "ALL_GAMES",
    "AimTrainer",
    "ChimpTest",
    "GAME_GRID",
    "NumberMemory",
    "ReactionTime",
    "SequenceMemory",
    "TypingTest",
    "VerbalMemory",
    "VisualMemory",
]
