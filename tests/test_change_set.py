import pytest

from wschanges import ChangeSet, TextEdit


@pytest.fixture
def changes():
    cs = ChangeSet()
    for edit in (TextEdit(5, 7, " "), TextEdit(0, 0, "\n"), TextEdit(2, 3, "")):
        cs.add(edit)
    return cs


def test_kept_sorted(changes):
    assert [e.start for e in changes] == [0, 2, 5]
    assert [e.start for e in reversed(changes)] == [5, 2, 0]
    assert len(changes) == 3


def test_membership_by_value(changes):
    assert TextEdit(2, 3, "") in changes
    assert TextEdit(2, 3, " ") not in changes
    assert TextEdit(2, 4, "") not in changes
    assert "not an edit" not in changes


def test_duplicate_start_rejected(changes):
    with pytest.raises(ValueError):
        changes.add(TextEdit(2, 2, " "))


def test_remove(changes):
    changes.remove(TextEdit(2, 3, ""))
    assert [e.start for e in changes] == [0, 5]
    with pytest.raises(KeyError):
        changes.remove(TextEdit(2, 3, ""))


def test_floor_ceiling_higher(changes):
    assert changes.floor(1) == TextEdit(0, 0, "\n")
    assert changes.floor(5) == TextEdit(5, 7, " ")
    assert changes.ceiling(3) == TextEdit(5, 7, " ")
    assert changes.ceiling(2) == TextEdit(2, 3, "")
    assert changes.higher(2) == TextEdit(5, 7, " ")
    assert changes.ceiling(8) is None
    assert ChangeSet().floor(0) is None


def test_at_covering_ending_at(changes):
    assert changes.at(5) == TextEdit(5, 7, " ")
    assert changes.at(6) is None
    assert changes.covering(6) == TextEdit(5, 7, " ")
    assert changes.covering(7) is None
    # an insertion covers no base character
    assert changes.covering(0) is None
    assert changes.ending_at(3) == TextEdit(2, 3, "")
    assert changes.ending_at(0) == TextEdit(0, 0, "\n")
    assert changes.ending_at(4) is None


def test_between(changes):
    assert changes.between(0, 7) == list(changes)
    assert changes.between(1, 6) == [TextEdit(2, 3, "")]
    assert changes.between(0, 0) == [TextEdit(0, 0, "\n")]
    assert changes.between(4, 6) == []
