import json

import pytest

from promptshop.app.common.errors import ModelOutputError
from promptshop.app.state import StateStore


SEED = '{"products": [{"id": "P1", "name": "Mug", "price": 8.5, "description": "A mug."}], "cart": []}'


@pytest.fixture()
def seed(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(SEED, encoding="utf-8")
    return path


# STATE-001: missing state file is seeded verbatim from the fixture
def test_open_seeds_missing_state_file(tmp_path, seed):
    state_path = tmp_path / "cache" / "db.json"

    store = StateStore.open(state_path, seed)

    assert state_path.read_text(encoding="utf-8") == SEED
    assert store.state["products"][0]["name"] == "Mug"


# STATE-002: existing state file wins over the seed
def test_open_keeps_existing_state(tmp_path, seed):
    state_path = tmp_path / "db.json"
    state_path.write_text('{"products": [], "cart": [{"product": "P1", "count": 2}]}', encoding="utf-8")

    store = StateStore.open(state_path, seed)

    assert store.state["cart"] == [{"product": "P1", "count": 2}]


# STATE-003: replace writes the model's text verbatim and matches memory
def test_replace_overwrites_memory_and_disk(tmp_path, seed):
    store = StateStore.open(tmp_path / "db.json", seed)
    text = '{"products": [], "cart": [{"product": "P1", "count": 1}]}'

    store.replace(text)

    assert (tmp_path / "db.json").read_text(encoding="utf-8") == text
    assert json.loads((tmp_path / "db.json").read_text(encoding="utf-8")) == store.state


# STATE-004: invalid JSON leaves both memory and disk untouched
def test_replace_with_invalid_json_changes_nothing(tmp_path, seed):
    store = StateStore.open(tmp_path / "db.json", seed)
    before = store.state

    with pytest.raises(ModelOutputError) as excinfo:
        store.replace("Sure! Here is your cart: {")

    assert excinfo.value.status_code == 502
    assert store.state is before
    assert (tmp_path / "db.json").read_text(encoding="utf-8") == SEED


def test_as_json_is_compact(tmp_path, seed):
    store = StateStore.open(tmp_path / "db.json", seed)
    assert " " not in store.as_json().replace("A mug.", "")


def test_flush_and_reset(tmp_path, seed):
    state_path = tmp_path / "db.json"
    store = StateStore.open(state_path, seed)
    store.state = {"products": [], "cart": []}

    store.flush()
    assert json.loads(state_path.read_text(encoding="utf-8")) == {"products": [], "cart": []}

    store.reset()
    assert state_path.read_text(encoding="utf-8") == SEED
    assert store.state["products"][0]["id"] == "P1"


def test_flush_leaves_file_alone_when_nothing_changed(tmp_path, seed):
    state_path = tmp_path / "db.json"
    store = StateStore.open(state_path, seed)
    state_path.write_text('{"products": [], "cart": []}', encoding="utf-8")

    assert store.flush() is False
    assert state_path.read_text(encoding="utf-8") == '{"products": [], "cart": []}'


# STATE-005: an idle second process sharing the file must not undo a mutation at exit
def test_idle_store_does_not_clobber_newer_state(tmp_path, seed):
    state_path = tmp_path / "db.json"
    idle = StateStore.open(state_path, seed)
    serving = StateStore.open(state_path, seed)
    text = '{"products": [], "cart": [{"product": "P1", "count": 1}]}'

    serving.replace(text)
    idle.flush()

    assert state_path.read_text(encoding="utf-8") == text


def test_replace_and_reset_leave_store_clean(tmp_path, seed):
    store = StateStore.open(tmp_path / "db.json", seed)
    store.state = {"products": [], "cart": []}
    assert store.dirty

    store.replace('{"products": [], "cart": []}')
    assert not store.dirty

    store.state = {"products": [], "cart": [{"product": "P1", "count": 3}]}
    store.reset()
    assert not store.dirty
    assert store.flush() is False
