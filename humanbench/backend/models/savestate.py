"""Per-game running-average records and their JSON persistence."""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from humanbench.backend.logger import get_logger


@dataclass(frozen=True)
class ScoreRecord:
    """Mean of ``count`` samples.  ``average`` is ``0.0`` while empty."""

    average: float = 0.0
    count: int = 0

    # -- serialisation ----------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {"average": self.average, "count": self.count}

    @classmethod
    def from_dict(cls, data: Any) -> ScoreRecord:
        """Validate decoded JSON and build a record.

        Accepts the current ``average``/``count`` keys as well as the older
        ``avg_score``/``num_entries`` ones.  Raises ``ValueError`` on
        anything that could not have been written by :meth:`to_dict`.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        average = data.get("average", data.get("avg_score"))
        count = data.get("count", data.get("num_entries"))

        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"invalid count: {count!r}")
        if isinstance(average, bool) or not isinstance(average, (int, float)):
            raise ValueError(f"invalid average: {average!r}")
        try:
            average = float(average)
        except OverflowError as exc:
            raise ValueError("average out of range") from exc
        if not math.isfinite(average):
            raise ValueError(f"invalid average: {average!r}")

        if count == 0:
            return cls()
        return cls(average=average, count=count)


def merge(record: ScoreRecord, sample: float) -> ScoreRecord:
    """Fold *sample* into *record*'s running mean.

    ``avg' = (avg * n + s) / (n + 1)``, ``n' = n + 1``.  Every call counts,
    so replaying the same sample twice adds it twice.
    """
    n = record.count
    return ScoreRecord(
        average=(record.average * n + sample) / (n + 1),
        count=n + 1,
    )


class ScoreStore:
    """Loads and saves one ``<game_id>.json`` record per game.

    Failures never reach the caller: a record that cannot be read is
    replaced by the empty default and a record that cannot be written is
    dropped.  Both are logged.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def path_for(self, game_id: str) -> Path:
        return self.directory / f"{game_id}.json"

    # -- persistence ----------------------------------------------------------

    def load(self, game_id: str) -> ScoreRecord:
        log = get_logger(game_id)
        path = self.path_for(game_id)
        if not path.exists():
            log.info("no record at %s yet", path)
            return ScoreRecord()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return ScoreRecord.from_dict(data)
        except OSError as exc:
            log.warning("could not read %s: %s", path, exc)
        except (ValueError, RecursionError) as exc:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors too;
            # deeply nested arrays exhaust the decoder's recursion limit.
            log.warning("corrupt record in %s: %s", path, exc)
        return ScoreRecord()

    def save(self, game_id: str, record: ScoreRecord) -> None:
        log = get_logger(game_id)
        path = self.path_for(game_id)
        tmp = path.with_name(path.name + ".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(record.to_dict()) + "\n", encoding="utf-8")
            os.replace(tmp, path)
        except OSError as exc:
            log.error("could not write %s: %s", path, exc)
            return
        log.info("%s", record)

    # -- queries --------------------------------------------------------------

    def load_all(self, game_ids: Iterable[str]) -> dict[str, ScoreRecord]:
        return {game_id: self.load(game_id) for game_id in game_ids}
