import os
import sys
import json
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from promptshop.app.config import Config
from promptshop.app.factory import create_app
from promptshop.app.gateway import ModelGateway

EMPTY_STATE = '{"products":[],"cart":[]}'


class FakeGateway(ModelGateway):
    """Canned answers instead of a completion service; remembers every prompt."""

    def __init__(self, text="<div>{{#products}}{{name}}{{/products}}</div>", json_text=None):
        self.text = text
        self.json_text = json_text
        self.calls = []

    def complete(self, prompt):
        self.calls.append(("text", prompt))
        if isinstance(self.text, Exception):
            raise self.text
        return self.text

    def complete_json(self, prompt, schema, name="shop"):
        self.calls.append(("json", prompt))
        if isinstance(self.json_text, Exception):
            raise self.json_text
        return self.json_text

    def prompts(self, kind):
        return [p for k, p in self.calls if k == kind]


@pytest.fixture()
def seed_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(EMPTY_STATE, encoding="utf-8")
    return path


@pytest.fixture()
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture()
def test_config(seed_file, cache_dir):
    class TestConfig(Config):
        TESTING = True
        OPENAI_API_KEY = "test-key"
        OPENAI_MODEL = "gpt-4o-mini"
        OPENAI_TEMPERATURE = 0.7
        SEED_PATH = str(seed_file)
        CACHE_DIR = str(cache_dir)
        FLUSH_ON_EXIT = False

    return TestConfig


@pytest.fixture()
def gateway():
    return FakeGateway()


@pytest.fixture()
def app(test_config, gateway):
    return create_app(test_config, gateway=gateway)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


def read_state(cache_dir):
    return json.loads((cache_dir / "db.json").read_text(encoding="utf-8"))
