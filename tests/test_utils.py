"""Tests for pullxml utility modules."""


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        from pullxml.utils.logger import get_logger

        assert get_logger("mymodule").name == "pullxml.mymodule"

    def test_keeps_package_names(self) -> None:
        from pullxml.utils import get_logger

        assert get_logger("pullxml").name == "pullxml"
        assert get_logger("pullxml.reader").name == "pullxml.reader"
