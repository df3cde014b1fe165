"""Unit tests for the adaptation checkpoint model."""

from datetime import datetime

import pytest

from bookadapt.domain.models.checkpoint import AdaptationCheckpoint


def test_empty_checkpoint():
    checkpoint = AdaptationCheckpoint.empty()

    assert checkpoint.is_empty
    assert not checkpoint.is_complete
    assert checkpoint.completed_count == 0
    assert checkpoint.adapted_chunks == []


def test_record_chunk_advances_progress():
    checkpoint = AdaptationCheckpoint(total_count=2)

    checkpoint.record_chunk("First.")
    assert checkpoint.completed_count == 1
    assert checkpoint.remaining == 1
    assert not checkpoint.is_complete

    checkpoint.record_chunk("Second.")
    assert checkpoint.adapted_chunks == ["First.", "Second."]
    assert checkpoint.is_complete


def test_record_chunk_beyond_total_is_rejected():
    checkpoint = AdaptationCheckpoint(completed_count=1, total_count=1, adapted_chunks=["Only."])

    with pytest.raises(ValueError, match="already recorded"):
        checkpoint.record_chunk("Extra.")


def test_zero_chunk_checkpoint_is_not_complete():
    assert not AdaptationCheckpoint(total_count=0).is_complete


def test_count_must_match_chunk_list():
    with pytest.raises(ValueError, match="adapted_chunks has 1 entries"):
        AdaptationCheckpoint(completed_count=2, total_count=3, adapted_chunks=["a"])


def test_completed_cannot_exceed_total():
    with pytest.raises(ValueError, match="exceeds total_count"):
        AdaptationCheckpoint(completed_count=2, total_count=1, adapted_chunks=["a", "b"])


def test_negative_counts_rejected():
    with pytest.raises(ValueError):
        AdaptationCheckpoint(total_count=-1)


def test_to_dict_uses_persisted_keys():
    checkpoint = AdaptationCheckpoint(
        completed_count=1,
        total_count=3,
        adapted_chunks=["The cat sat."],
        last_updated=datetime(2024, 5, 1, 12, 30, 0),
    )

    assert checkpoint.to_dict() == {
        "completed_count": 1,
        "total_count": 3,
        "adapted_chunks": ["The cat sat."],
        "last_updated": "2024-05-01T12:30:00",
    }


def test_optional_fields_survive_serialization():
    checkpoint = AdaptationCheckpoint(
        completed_count=1,
        total_count=2,
        adapted_chunks=["Hello."],
        target_level="A2",
        model="gemma3n",
        source_fingerprint="abc123",
    )

    restored = AdaptationCheckpoint.from_dict(checkpoint.to_dict())

    assert restored == checkpoint


def test_from_dict_without_timestamp_or_optionals():
    restored = AdaptationCheckpoint.from_dict(
        {"completed_count": 0, "total_count": 4, "adapted_chunks": []}
    )

    assert restored.total_count == 4
    assert restored.target_level is None
    assert restored.source_fingerprint is None
    assert isinstance(restored.last_updated, datetime)


@pytest.mark.parametrize(
    "data, message",
    [
        ([], "JSON object"),
        ({"completed_count": 0, "adapted_chunks": []}, "missing key"),
        ({"completed_count": "1", "total_count": 2, "adapted_chunks": ["a"]}, "integers"),
        ({"completed_count": 1, "total_count": 2, "adapted_chunks": [1]}, "list of strings"),
        ({"completed_count": 2, "total_count": 2, "adapted_chunks": ["a"]}, "adapted_chunks has"),
    ],
)
def test_from_dict_rejects_malformed_data(data, message):
    with pytest.raises(ValueError, match=message):
        AdaptationCheckpoint.from_dict(data)
