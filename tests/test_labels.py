# tests/test_labels.py
import pytest

from grouper.domain.labels import group_label


@pytest.mark.parametrize("index, label", [
    (0, "A"),
    (1, "B"),
    (25, "Z"),
    (26, "AA"),
    (27, "AB"),
    (51, "AZ"),
    (52, "BA"),
    (701, "ZZ"),
    (702, "AAA"),
])
def test_group_label(index, label):
    assert group_label(index) == label


def test_labels_are_unique():
    labels = [group_label(i) for i in range(1000)]
    assert len(set(labels)) == 1000


def test_negative_index():
    with pytest.raises(ValueError):
        group_label(-1)
