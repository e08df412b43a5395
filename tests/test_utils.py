"""Tests for fsf utility modules."""

import logging


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        from fsf.utils.logger import get_logger

        assert get_logger("pages").name == "fsf.pages"

    def test_keeps_namespaced_name(self) -> None:
        from fsf.utils.logger import get_logger

        assert get_logger("fsf.builder").name == "fsf.builder"
        assert get_logger("fsf").name == "fsf"

    def test_does_not_match_lookalike_prefix(self) -> None:
        from fsf.utils.logger import get_logger

        assert get_logger("fsfx").name == "fsf.fsfx"

    def test_returns_stdlib_logger(self) -> None:
        from fsf.utils import get_logger

        assert isinstance(get_logger("x"), logging.Logger)
