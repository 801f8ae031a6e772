"""Tests for utility modules: StringBuilder and the logger helper."""

import logging

import pytest

from sqlbatch import MappingLoader, Preprocessor
from sqlbatch.stringbuilder import StringBuilder
from sqlbatch.utils.logger import get_logger


class TestStringBuilder:
    def test_empty(self) -> None:
        sb = StringBuilder()
        assert sb.build() == ""
        assert not sb
        assert len(sb) == 0

    def test_append_chain(self) -> None:
        assert StringBuilder().append("a").append("b").build() == "ab"

    def test_empty_append_ignored(self) -> None:
        sb = StringBuilder().append("")
        assert not sb

    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [(0, None, "hello"), (1, 3, "el"), (3, None, "lo"), (2, 2, "")],
    )
    def test_append_range(self, start: int, end: int | None, expected: str) -> None:
        assert StringBuilder().append_range("hello", start, end).build() == expected

    def test_clear_allows_reuse(self) -> None:
        sb = StringBuilder().append("old")
        assert sb.clear().append("new").build() == "new"


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        logger = get_logger("mymodule")
        assert logger.name == "sqlbatch.mymodule"

    def test_logger_with_sqlbatch_prefix(self) -> None:
        logger = get_logger("sqlbatch.assembler")
        assert logger.name == "sqlbatch.assembler"

    def test_logger_name_starting_with_sqlbatch_not_submodule(self) -> None:
        logger = get_logger("sqlbatch_other")
        assert logger.name == "sqlbatch.sqlbatch_other"

    def test_logger_exact_sqlbatch_name(self) -> None:
        assert get_logger("sqlbatch").name == "sqlbatch"

    def test_debug_records_for_includes_and_batches(self, caplog: pytest.LogCaptureFixture) -> None:
        pp = Preprocessor(loader=MappingLoader({"inc.sql": "x\n"}))

        with caplog.at_level(logging.DEBUG, logger="sqlbatch"):
            list(pp.process(":setvar a 1\n:r inc.sql\nGO\n", name="main.sql"))

        messages = [r.getMessage() for r in caplog.records]
        assert "Preprocessing main.sql (26 chars)" in messages
        assert "Set variable a" in messages
        assert "Including inc.sql (depth 1)" in messages
        assert "Finished inc.sql" in messages
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    def test_silent_at_default_level(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="sqlbatch"):
            list(Preprocessor().process(":setvar a 1\nSELECT $(a)"))
        assert caplog.records == []
