"""Integration tests for the JSON checkpoint manager against the real filesystem."""

import json
import logging
from pathlib import Path

import pytest

from bookadapt.domain.errors import PersistenceError
from bookadapt.domain.models.checkpoint import AdaptationCheckpoint
from bookadapt.infrastructure.adapters.checkpoint_manager import JsonCheckpointManagerAdapter


@pytest.fixture
def manager() -> JsonCheckpointManagerAdapter:
    return JsonCheckpointManagerAdapter()


def _checkpoint() -> AdaptationCheckpoint:
    return AdaptationCheckpoint(
        completed_count=2,
        total_count=3,
        adapted_chunks=["Le chat.", "Il était très content."],
        target_level="B1",
        model="gemma3n",
        source_fingerprint="f" * 64,
    )


def test_save_then_load(tmp_path: Path, manager):
    path = tmp_path / "books" / "adapted_b1_progress.json"

    checkpoint = _checkpoint()
    manager.save_checkpoint(checkpoint, path)

    assert manager.checkpoint_exists(path)
    assert manager.load_checkpoint(path) == checkpoint


def test_saved_file_is_readable_json(tmp_path: Path, manager):
    path = tmp_path / "progress.json"

    manager.save_checkpoint(_checkpoint(), path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["completed_count"] == 2
    assert data["total_count"] == 3
    assert data["adapted_chunks"][1] == "Il était très content."
    assert "last_updated" in data


def test_save_replaces_previous_file_without_leftovers(tmp_path: Path, manager):
    path = tmp_path / "progress.json"
    first = AdaptationCheckpoint(total_count=3)
    first.record_chunk("One.")
    manager.save_checkpoint(first, path)
    first.record_chunk("Two.")
    manager.save_checkpoint(first, path)

    assert manager.load_checkpoint(path).adapted_chunks == ["One.", "Two."]
    assert [p.name for p in tmp_path.iterdir()] == ["progress.json"]


def test_missing_file_loads_empty(tmp_path: Path, manager):
    path = tmp_path / "absent.json"

    assert not manager.checkpoint_exists(path)
    assert manager.load_checkpoint(path).is_empty


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"completed_count": 1}',
        '{"completed_count": 3, "total_count": 2, "adapted_chunks": ["a", "b", "c"]}',
        pytest.param("[" * 100000 + "]" * 100000, id="deeply-nested"),
    ],
)
def test_corrupt_file_loads_empty_with_warning(tmp_path: Path, manager, caplog, content):
    path = tmp_path / "progress.json"
    path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        checkpoint = manager.load_checkpoint(path)

    assert checkpoint.is_empty
    assert "unreadable" in caplog.text


def test_save_into_unwritable_location_raises(tmp_path: Path, manager):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file in the way")

    with pytest.raises(PersistenceError, match="Failed to write"):
        manager.save_checkpoint(_checkpoint(), blocker / "progress.json")


def test_unencodable_text_raises_and_keeps_previous_file(tmp_path: Path, manager):
    path = tmp_path / "x_progress.json"
    checkpoint = AdaptationCheckpoint(total_count=2)
    checkpoint.record_chunk("Hi there.")
    manager.save_checkpoint(checkpoint, path)

    checkpoint.record_chunk("Hi \ud800 there")
    with pytest.raises(PersistenceError, match="Failed to write"):
        manager.save_checkpoint(checkpoint, path)

    assert [p.name for p in tmp_path.iterdir()] == ["x_progress.json"]
    assert manager.load_checkpoint(path).adapted_chunks == ["Hi there."]
