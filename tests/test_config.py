"""Tests for ContextVar-based reader configuration.

Validates thread isolation, context manager behavior, and from_dict.
"""

from threading import Thread

import pytest

from pullxml import (
    ReaderConfig,
    get_reader_config,
    open_reader,
    reader_config_context,
    reset_reader_config,
    set_reader_config,
)


class TestReaderConfigDataclass:
    """Test ReaderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ReaderConfig()
        assert config.strict_accessors is False
        assert config.log_events is True

    def test_immutability(self) -> None:
        config = ReaderConfig()
        with pytest.raises(AttributeError):
            config.strict_accessors = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown(self) -> None:
        config = ReaderConfig.from_dict({"strict_accessors": True, "unknown": 1})
        assert config.strict_accessors is True
        assert config.log_events is True


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def setup_method(self) -> None:
        reset_reader_config()

    def teardown_method(self) -> None:
        reset_reader_config()

    def test_default(self) -> None:
        assert get_reader_config() == ReaderConfig()

    def test_set_and_reset(self) -> None:
        set_reader_config(ReaderConfig(strict_accessors=True))
        assert get_reader_config().strict_accessors is True
        reset_reader_config()
        assert get_reader_config().strict_accessors is False

    def test_context_manager_restores(self) -> None:
        with reader_config_context(ReaderConfig(log_events=False)):
            assert get_reader_config().log_events is False
        assert get_reader_config().log_events is True

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with reader_config_context(ReaderConfig(strict_accessors=True)):
                raise RuntimeError("boom")
        assert get_reader_config().strict_accessors is False

    def test_explicit_config_overrides_context(self) -> None:
        with reader_config_context(ReaderConfig(strict_accessors=True)):
            reader = open_reader("<a>", config=ReaderConfig())
        assert reader.config.strict_accessors is False


class TestThreadIsolation:
    """Config set in a worker thread does not leak into the caller."""

    def test_worker_config_does_not_leak(self) -> None:
        reset_reader_config()
        seen: list[bool] = []

        def worker() -> None:
            set_reader_config(ReaderConfig(strict_accessors=True))
            seen.append(get_reader_config().strict_accessors)

        t = Thread(target=worker)
        t.start()
        t.join()

        assert seen == [True]
        assert get_reader_config().strict_accessors is False
