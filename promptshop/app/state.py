"""The shop's state document: products and cart, held in memory and mirrored to disk.

The document is replaced wholesale on every mutation. Nothing here validates it
against the schema; whatever JSON the model hands back becomes the new state.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any, Dict

from promptshop.app.common.errors import ModelOutputError

logger = logging.getLogger(__name__)


class StateStore:
    def __init__(self, state_path: Path, seed_path: Path, state: Dict[str, Any]):
        self.state_path = state_path
        self.seed_path = seed_path
        self._state = state
        # True only while memory holds changes the file does not have.
        self.dirty = False

    @property
    def state(self) -> Dict[str, Any]:
        return self._state

    @state.setter
    def state(self, value: Dict[str, Any]) -> None:
        self._state = value
        self.dirty = True

    @classmethod
    def open(cls, state_path: str | Path, seed_path: str | Path) -> "StateStore":
        """Load the state file, seeding it verbatim from the fixture on first run."""
        state_path = Path(state_path)
        seed_path = Path(seed_path)
        if not state_path.exists():
            state_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(seed_path, state_path)
            logger.info("Seeded %s from %s", state_path, seed_path)
        state = json.loads(state_path.read_text(encoding="utf-8"))
        return cls(state_path, seed_path, state)

    def as_json(self) -> str:
        return json.dumps(self._state, separators=(",", ":"), ensure_ascii=False)

    def replace(self, text: str) -> Dict[str, Any]:
        # Parse before touching memory or disk so a bad answer leaves both as they were.
        try:
            new_state = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise ModelOutputError(
                "Model returned a state document that is not valid JSON",
                {"reason": str(exc)},
            ) from exc
        self._state = new_state
        self.state_path.write_text(text, encoding="utf-8")
        self.dirty = False
        return new_state

    def flush(self) -> bool:
        """Write unsaved in-memory changes; a clean store leaves the file alone.

        Another process sharing the file (the dev server's reloader parent) may
        have written newer state since this one loaded it.
        """
        if not self.dirty:
            return False
        self.state_path.parent.mkdir(parents=True, exist_ok=True)
        self.state_path.write_text(self.as_json(), encoding="utf-8")
        self.dirty = False
        logger.info("Flushed state to %s", self.state_path)
        return True

    def reset(self) -> None:
        self.state_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.seed_path, self.state_path)
        self._state = json.loads(self.state_path.read_text(encoding="utf-8"))
        self.dirty = False
