"""
Tests for tagselect: picking one tag out of several.
"""

from tagparse import TagEntry
from tagselect import COLUMNS, SEARCH_COLUMN, choose_tag, tag_row, tag_rows
from tests.factories import FakeHost


FOO_A = TagEntry("foo", "/src/a.c", 10, "f")
FOO_B = TagEntry("foo", "/src/b.c", "    int foo(void)", "f\tfile:")


class TestRows:
    """Display rows: name, file name, locator, extra info."""

    def test_row(self):
        assert tag_row(FOO_A) == ("foo", "a.c", "10", "")

    def test_indentation_and_kind_stripped(self):
        assert tag_row(FOO_B) == ("foo", "b.c", "int foo(void)", "file:")

    def test_long_kind_stripped(self):
        tag = TagEntry("x", "/x.py", 3, "kind:function\tclass:Foo")
        assert tag_row(tag)[3] == "class:Foo"

    def test_extra_without_kind(self):
        tag = TagEntry("x", "/x.py", 3, "class:Foo")
        assert tag_row(tag)[3] == "class:Foo"

    def test_several_fields_kept_in_order(self):
        tag = TagEntry("x", "/x.c", 3, "f\tclass:Foo\tsignature:(int a)")
        assert tag_row(tag)[3] == "class:Foo\tsignature:(int a)"

    def test_windows_path(self):
        tag = TagEntry("x", "C:\\src\\x.c", 1)
        assert tag_row(tag)[1] == "x.c"

    def test_rows(self):
        assert len(tag_rows([FOO_A, FOO_B])) == 2


class TestChooseTag:
    """Prompting only happens when there is a real choice."""

    def test_empty(self):
        host = FakeHost()
        assert choose_tag([], host) is None
        assert host.prompts == []

    def test_single_without_prompt(self):
        host = FakeHost()
        assert choose_tag([FOO_A], host) is FOO_A
        assert host.prompts == []

    def test_many_prompts(self):
        host = FakeHost(choice=1)
        assert choose_tag([FOO_A, FOO_B], host) is FOO_B
        title, columns, rows, search_column = host.prompts[0]
        assert title == "Go To"
        assert columns == COLUMNS
        assert search_column == SEARCH_COLUMN
        assert columns[search_column] == "File"
        assert rows == [tag_row(FOO_A), tag_row(FOO_B)]

    def test_cancelled(self):
        host = FakeHost(choice=None)
        assert choose_tag([FOO_A, FOO_B], host) is None

    def test_out_of_range_choice(self):
        host = FakeHost(choice=5)
        assert choose_tag([FOO_A, FOO_B], host) is None
