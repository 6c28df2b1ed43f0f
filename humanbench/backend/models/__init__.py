from humanbench.backend.models.events import (
    Direction,
    InputEvent,
    Key,
    Mouse,
    MouseButton,
    Resize,
    Tick,
)
from humanbench.backend.models.savestate import ScoreRecord, ScoreStore, merge

__all__ = [
    "Direction",
    "InputEvent",
    "Key",
    "Mouse",
    "MouseButton",
    "Resize",
    "ScoreRecord",
    "ScoreStore",
    "Tick",
    "merge",
]
