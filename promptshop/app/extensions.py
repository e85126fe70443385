"""Process-wide shop context, built once by the app factory."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

from flask import current_app

from promptshop.app import prompts
from promptshop.app.gateway import ModelGateway
from promptshop.app.state import StateStore
from promptshop.app.views import ViewCache

logger = logging.getLogger(__name__)

EXTENSION_KEY = "shop"
STATE_FILE = "db.json"


@dataclass
class ShopContext:
    store: StateStore
    schema: str
    layout: str
    gateway: ModelGateway
    views: ViewCache
    shop_name: str = "MyShop"
    parsed_schema: Dict[str, Any] = field(init=False)

    def __post_init__(self):
        self.parsed_schema = json.loads(self.schema)

    @classmethod
    def from_config(cls, config: Mapping[str, Any], gateway: ModelGateway) -> "ShopContext":
        cache_dir = Path(config["CACHE_DIR"])
        return cls(
            store=StateStore.open(cache_dir / STATE_FILE, config["SEED_PATH"]),
            schema=Path(config["SCHEMA_PATH"]).read_text(encoding="utf-8"),
            layout=Path(config["LAYOUT_PATH"]).read_text(encoding="utf-8"),
            gateway=gateway,
            views=ViewCache(cache_dir),
            shop_name=config.get("SHOP_NAME", "MyShop"),
        )

    def command(self, instruction: str) -> Dict[str, Any]:
        """Ask the model for the next state document and make it current."""
        prompt = prompts.build_command_prompt(self.store.as_json(), self.schema, instruction)
        logger.info("command: %s", prompts.preview(prompt))
        response = self.gateway.complete_json(prompt, self.parsed_schema)
        return self.store.replace(response)

    def render(self, name: str, question: str, params: Mapping[str, Any]) -> str:
        """Render page ``name`` from its cached fragment template."""
        template = self.views.resolve(name, lambda: self.generate_template(question, params))
        prompt = prompts.build_page_prompt(self.store.as_json(), self.schema, params, template, question)
        logger.info("render %s: %s", name, prompts.preview(prompt))
        return prompts.strip_code_fences(self.gateway.complete(prompt))

    def generate_template(self, question: str, params: Mapping[str, Any]) -> str:
        prompt = prompts.build_template_prompt(self.schema, params, self.layout, question, self.shop_name)
        logger.info("template: %s", prompts.preview(prompt))
        return prompts.strip_code_fences(self.gateway.complete(prompt))

    def close(self) -> None:
        self.store.flush()


def get_shop() -> ShopContext:
    return current_app.extensions[EXTENSION_KEY]
