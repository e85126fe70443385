from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from promptshop.app.prompts import LAYOUT_PAGE

logger = logging.getLogger(__name__)


class ViewCache:
    """Fragment templates, generated once per page name and kept on disk."""

    def __init__(self, cache_dir: str | Path):
        self.cache_dir = Path(cache_dir)

    def path_for(self, name: str) -> Path:
        return self.cache_dir / f"{name}.html"

    def resolve(self, name: str, generate: Callable[[], str]) -> str:
        if name == LAYOUT_PAGE:
            raise ValueError(f"{LAYOUT_PAGE!r} is the layout template, not a page")
        path = self.path_for(name)
        if path.exists():
            return path.read_text(encoding="utf-8")

        logger.info("No cached template for %r, generating one", name)
        template = generate()
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(template, encoding="utf-8")
        return template

    def clear(self) -> int:
        removed = 0
        if not self.cache_dir.exists():
            return removed
        for path in self.cache_dir.glob("*.html"):
            path.unlink()
            removed += 1
        return removed
