"""Tests for source stores."""

import pytest

from exifbridge.exceptions import SourceStoreError
from exifbridge.source_store import MappingSourceStore


def test_mapping_store_accessors():
    store = MappingSourceStore({"Make": "Canon", "Model": None})

    assert store.has_attribute("Make")
    assert store.get_attribute("Make") == "Canon"
    assert store.has_attribute("Model")
    assert store.get_attribute("Model") is None
    assert not store.has_attribute("Artist")
    assert store.get_attribute("Artist") is None
    assert sorted(store.keys()) == ["Make", "Model"]
    assert len(store) == 2


def test_mapping_store_copies_its_input():
    attributes = {"Make": "Canon"}
    store = MappingSourceStore(attributes)
    attributes["Make"] = "Nikon"

    assert store.get_attribute("Make") == "Canon"


def test_from_json_converts_scalars():
    store = MappingSourceStore.from_json(
        '{"Make": "Canon", "ImageWidth": 4000, "FNumber": 2.8, "Model": null, "Flag": true}'
    )

    assert store.get_attribute("Make") == "Canon"
    assert store.get_attribute("ImageWidth") == "4000"
    assert store.get_attribute("FNumber") == "2.8"
    assert store.has_attribute("Model")
    assert store.get_attribute("Model") is None
    assert store.get_attribute("Flag") == "true"


@pytest.mark.parametrize(
    "text",
    ["not json", "[]", '"Make"', '{"Make": ["Canon"]}', '{"GPS": {"GPSLatitude": "1/1"}}'],
)
def test_from_json_rejects_unusable_documents(text):
    with pytest.raises(SourceStoreError):
        MappingSourceStore.from_json(text)
