import pytest

from tests.infrastructure import replaced_with, with_changes
from wschanges import (
    InBase,
    ResultType,
    SearchType,
    TextEdit,
    TextWithChanges,
    in_base,
    in_edit,
    up_to,
)


class TestEmptyText:

    @pytest.mark.parametrize("search_type", list(SearchType))
    @pytest.mark.parametrize("from_start", [True, False])
    def test_nothing_found(self, search_type, from_start):
        text = TextWithChanges("")
        assert text.search(up_to(in_base(0), in_base(0)), search_type, from_start) is None


class TestInBaseText:

    rng = up_to(in_base(0), in_base(6))

    @pytest.mark.parametrize("search_type,expected", [
        (SearchType.LINE_BREAK, (in_base(1), ResultType.LINE_BREAK)),
        (SearchType.NON_WHITESPACE, (in_base(2), ResultType.NON_WHITESPACE)),
        (SearchType.BOTH, (in_base(1), ResultType.LINE_BREAK)),
    ])
    def test_forward(self, search_type, expected):
        assert TextWithChanges(" \na a\n").search(self.rng, search_type) == expected

    @pytest.mark.parametrize("search_type,expected", [
        (SearchType.LINE_BREAK, (in_base(5), ResultType.LINE_BREAK)),
        (SearchType.NON_WHITESPACE, (in_base(4), ResultType.NON_WHITESPACE)),
        (SearchType.BOTH, (in_base(5), ResultType.LINE_BREAK)),
    ])
    def test_backward(self, search_type, expected):
        assert TextWithChanges(" \na a\n").search_last(self.rng, search_type) == expected


class TestInsertedText:
    """ "aa" with insertions giving " \\na a\\n". """

    first = TextEdit(0, 0, " \n")
    last = TextEdit(2, 2, "\n")

    @pytest.fixture
    def text(self):
        return with_changes(
            "aa",
            replaced_with(up_to(in_base(0), in_base(0)), " \n"),
            replaced_with(up_to(in_base(1), in_base(1)), " "),
            replaced_with(up_to(in_base(2), in_base(2)), "\n"),
        )

    @property
    def rng(self):
        return up_to(in_edit(self.first, 0), in_base(2))

    def test_forward(self, text):
        assert text.search(self.rng, SearchType.LINE_BREAK) == (in_edit(self.first, 1), ResultType.LINE_BREAK)
        assert text.search(self.rng, SearchType.NON_WHITESPACE) == (in_base(0), ResultType.NON_WHITESPACE)
        assert text.search(self.rng, SearchType.BOTH) == (in_edit(self.first, 1), ResultType.LINE_BREAK)

    def test_backward(self, text):
        assert text.search_last(self.rng, SearchType.LINE_BREAK) == (in_edit(self.last, 0), ResultType.LINE_BREAK)
        assert text.search_last(self.rng, SearchType.NON_WHITESPACE) == (in_base(1), ResultType.NON_WHITESPACE)
        assert text.search_last(self.rng, SearchType.BOTH) == (in_edit(self.last, 0), ResultType.LINE_BREAK)

    def test_base_start_skips_insertion_before_it(self, text):
        rng = up_to(in_base(0), in_base(1))
        assert text.search(rng, SearchType.LINE_BREAK) is None
        assert text.search(rng, SearchType.NON_WHITESPACE) == (in_base(0), ResultType.NON_WHITESPACE)

    def test_within_one_change(self, text):
        rng = up_to(in_edit(self.first, 0), in_edit(self.first, 1))
        assert text.search(rng, SearchType.BOTH) is None
        rng = up_to(in_edit(self.first, 1), in_edit(self.first, 2))
        assert text.search_last(rng, SearchType.LINE_BREAK) == (in_edit(self.first, 1), ResultType.LINE_BREAK)


class TestRemovedText:

    @pytest.fixture
    def text(self):
        return with_changes(
            " \na a\n",
            replaced_with(up_to(in_base(0), in_base(2)), ""),
            replaced_with(up_to(in_base(3), in_base(4)), ""),
            replaced_with(up_to(in_base(5), in_base(6)), ""),
        )

    rng = up_to(in_base(2), in_base(6))

    def test_forward(self, text):
        assert text.search(self.rng, SearchType.LINE_BREAK) is None
        assert text.search(self.rng, SearchType.NON_WHITESPACE) == (InBase(2), ResultType.NON_WHITESPACE)
        assert text.search(self.rng, SearchType.BOTH) == (InBase(2), ResultType.NON_WHITESPACE)

    def test_backward(self, text):
        assert text.search_last(self.rng, SearchType.LINE_BREAK) is None
        assert text.search_last(self.rng, SearchType.NON_WHITESPACE) == (InBase(4), ResultType.NON_WHITESPACE)
        assert text.search_last(self.rng, SearchType.BOTH) == (InBase(4), ResultType.NON_WHITESPACE)


class TestInvalidRanges:

    @pytest.mark.parametrize("rng", [
        up_to(in_base(3), in_base(1)),
        up_to(in_base(0), in_base(99)),
        up_to(in_base(0), in_edit(TextEdit(1, 1, "\n"), 0)),
    ])
    def test_not_found(self, rng):
        text = TextWithChanges("a\nb\n")
        assert text.search(rng, SearchType.BOTH) is None
        assert text.search_last(rng, SearchType.BOTH) is None

    def test_inside_replaced_base_text(self):
        text = with_changes("a\t\nb", replaced_with(up_to(in_base(1), in_base(3)), " "))
        assert text.search(up_to(in_base(2), in_base(4)), SearchType.NON_WHITESPACE) is None
