"""Terminal reflex and memory minigames in the style of Human Benchmark."""

__version__ = "0.1.0"
