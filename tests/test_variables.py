"""Tests for VariableTable."""

from __future__ import annotations

import pytest

from sqlbatch import ErrorKind, PreprocessError, VariableTable


class TestMappingBehavior:
    """VariableTable is a case-insensitive MutableMapping."""

    def test_empty(self) -> None:
        table = VariableTable()
        assert len(table) == 0
        assert list(table) == []

    def test_initial_mapping(self) -> None:
        table = VariableTable({"Foo": "1", "bar": "2"})
        assert table["FOO"] == "1"
        assert table["BAR"] == "2"

    def test_initial_pairs(self) -> None:
        table = VariableTable([("a", "1"), ("A", "2")])
        assert len(table) == 1
        assert table["a"] == "2"

    def test_initial_empty_values_are_skipped(self) -> None:
        table = VariableTable({"a": "", "b": "x"})
        assert "a" not in table
        assert list(table) == ["b"]

    @pytest.mark.parametrize("name", ["foo", "FOO", "Foo", "fOO"])
    def test_lookup_ignores_case(self, name: str) -> None:
        table = VariableTable({"foo": "bar"})
        assert name in table
        assert table[name] == "bar"

    def test_casefold_comparison(self) -> None:
        table = VariableTable({"Straße": "x"})
        assert table["STRASSE"] == "x"

    def test_iteration_uses_latest_spelling(self) -> None:
        table = VariableTable({"foo": "1"})
        table["FOO"] = "2"
        assert list(table) == ["FOO"]
        assert dict(table.items()) == {"FOO": "2"}

    def test_delete(self) -> None:
        table = VariableTable({"foo": "1"})
        del table["Foo"]
        assert "foo" not in table

    def test_delete_missing_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            del VariableTable()["foo"]

    def test_missing_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            VariableTable()["foo"]

    def test_non_string_not_contained(self) -> None:
        assert 1 not in VariableTable({"1": "x"})

    def test_repr(self) -> None:
        assert repr(VariableTable({"a": "b"})) == "VariableTable({'a': 'b'})"


class TestSet:
    """Assigning an empty value removes the variable."""

    def test_set_and_replace(self) -> None:
        table = VariableTable()
        table.set("foo", "1")
        table.set("Foo", "2")
        assert table["foo"] == "2"
        assert len(table) == 1

    @pytest.mark.parametrize("empty", ["", None])
    def test_empty_value_removes(self, empty: str | None) -> None:
        table = VariableTable({"foo": "bar"})
        table.set("FOO", empty)
        assert "foo" not in table

    def test_empty_value_for_missing_name_is_noop(self) -> None:
        table = VariableTable()
        table.set("foo", "")
        assert len(table) == 0

    def test_setitem_empty_removes(self) -> None:
        table = VariableTable({"foo": "bar"})
        table["foo"] = ""
        assert "foo" not in table

    def test_whitespace_value_is_kept(self) -> None:
        table = VariableTable()
        table.set("foo", " ")
        assert table["foo"] == " "


class TestResolveAndExpand:
    """Reference lookup used by the batch assembler."""

    def test_resolve(self) -> None:
        assert VariableTable({"foo": "bar"}).resolve("FOO") == "bar"

    def test_resolve_undefined(self) -> None:
        with pytest.raises(PreprocessError) as exc_info:
            VariableTable().resolve("Foo")
        err = exc_info.value
        assert err.kind is ErrorKind.UNDEFINED_VARIABLE
        assert err.message == "SqlCmd variable 'Foo' is not defined."
        assert err.location is None

    def test_expand_without_references_returns_same_object(self) -> None:
        text = "SELECT 1"
        assert VariableTable().expand(text) is text

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("$(a)", "1"),
            ("x$(a)y$(B)z", "x1y2z"),
            ("$(a)$(a)", "11"),
            ("$(a", "$(a"),
            ("$()", "$()"),
            ("$ (a)", "$ (a)"),
            ("$(a b)", "$(a b)"),
            ("$($(a))", "$(1)"),
            ("$(my-var)", "3"),
        ],
    )
    def test_expand(self, text: str, expected: str) -> None:
        table = VariableTable({"a": "1", "b": "2", "my-var": "3"})
        assert table.expand(text) == expected

    def test_expand_undefined(self) -> None:
        with pytest.raises(PreprocessError, match="'nope'"):
            VariableTable({"a": "1"}).expand("$(a) $(nope)")

    def test_expand_does_not_rescan_values(self) -> None:
        table = VariableTable({"a": "$(b)", "b": "x"})
        assert table.expand("$(a)") == "$(b)"
