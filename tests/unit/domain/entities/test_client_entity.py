"""Unit tests for the Client entity and label normalization."""

import pytest

from ceramic_catalog.domain.entities import Client, normalize_labels


def test_normalize_labels_strips_and_deduplicates():
    """Blanks are dropped and first-seen order is kept."""
    assert normalize_labels([" Paris", "Tokyo", "", "Paris ", "  "]) == ["Paris", "Tokyo"]


def test_normalize_labels_none():
    assert normalize_labels(None) == []


def test_client_normalizes_labels():
    client = Client(
        id="c1",
        code="A",
        name="Alpha",
        regions=["Tokyo", "Tokyo", "Paris"],
        departments=[" Spa "],
    )

    assert client.regions == ["Tokyo", "Paris"]
    assert client.departments == ["Spa"]


def test_client_display_name():
    client = Client(id="c1", code="A01", name="Alpha Hotels")

    assert client.display_name == "Alpha Hotels (A01)"


def test_client_allows_empty_relationships():
    client = Client(id="c1", code="A", name="Alpha")

    assert client.regions == []
    assert client.departments == []


@pytest.mark.parametrize("field", ["id", "code", "name"])
def test_client_requires_identity_fields(field):
    values = {"id": "c1", "code": "A", "name": "Alpha"}
    values[field] = ""

    with pytest.raises(ValueError, match="required"):
        Client(**values)
