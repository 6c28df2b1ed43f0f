from humanbench.backend.engine.navigator import MenuEntry, Navigator
from humanbench.backend.engine.runloop import run_loop, run_session
from humanbench.backend.engine.session import GameSession

__all__ = ["GameSession", "MenuEntry", "Navigator", "run_loop", "run_session"]
