"""
Tests for rate limiting, structured logging, configuration and errors.
"""

import dataclasses
import json
import logging
import time

import pytest
from fastapi import HTTPException


class TestRateLimiter:
    """Rate limiting tests."""

    def test_under_limit_passes(self):
        from slopsense.rate_limit import check_rate_limit, RateLimits, _windows, _lock

        with _lock:
            _windows.pop("test_under", None)

        check_rate_limit("test_under", RateLimits(per_minute=10, per_hour=100))

    def test_over_minute_limit_raises(self):
        from slopsense.rate_limit import check_rate_limit, RateLimits, RateWindow, _windows, _lock

        with _lock:
            window = RateWindow()
            now = time.time()
            window.timestamps = [now - i for i in range(10)]
            _windows["test_minute"] = window

        with pytest.raises(HTTPException) as exc_info:
            check_rate_limit("test_minute", RateLimits(per_minute=10, per_hour=1000))
        assert exc_info.value.status_code == 429
        assert "Retry-After" in exc_info.value.headers

    def test_over_hour_limit_raises(self):
        from slopsense.rate_limit import check_rate_limit, RateLimits, RateWindow, _windows, _lock

        with _lock:
            window = RateWindow()
            now = time.time()
            # spread across the hour so the minute window stays clear
            window.timestamps = [now - 120 - i * 60 for i in range(5)]
            _windows["test_hour"] = window

        with pytest.raises(HTTPException) as exc_info:
            check_rate_limit("test_hour", RateLimits(per_minute=10, per_hour=5))
        assert exc_info.value.headers["Retry-After"] == "3600"

    def test_none_client_skips(self):
        from slopsense.rate_limit import check_rate_limit
        check_rate_limit(None)

    def test_get_usage(self):
        from slopsense.rate_limit import get_usage, check_rate_limit, RateLimits, _windows, _lock

        with _lock:
            _windows.pop("test_usage", None)

        check_rate_limit("test_usage", RateLimits(per_minute=100, per_hour=1000))
        usage = get_usage("test_usage")
        assert usage == {"minute": 1, "hour": 1}

    def test_usage_keeps_hour_history(self):
        from slopsense.rate_limit import get_usage, RateWindow, _windows, _lock

        with _lock:
            window = RateWindow()
            now = time.time()
            window.timestamps = [now - 600, now - 300, now - 5]
            _windows["test_hour_history"] = window

        assert get_usage("test_hour_history") == {"minute": 1, "hour": 3}
        # a second read must not lose the older entries
        assert get_usage("test_hour_history") == {"minute": 1, "hour": 3}

    def test_minute_check_does_not_drop_hour_entries(self):
        from slopsense.rate_limit import check_rate_limit, RateLimits, RateWindow, _windows, _lock

        with _lock:
            window = RateWindow()
            now = time.time()
            window.timestamps = [now - 1800, now - 900]
            _windows["test_hour_kept"] = window

        limits = RateLimits(per_minute=10, per_hour=3)
        check_rate_limit("test_hour_kept", limits)
        with pytest.raises(HTTPException) as exc_info:
            check_rate_limit("test_hour_kept", limits)
        assert exc_info.value.headers["Retry-After"] == "3600"

    def test_prune_drops_entries_older_than_an_hour(self):
        from slopsense.rate_limit import RateWindow

        now = time.time()
        window = RateWindow(timestamps=[now - 4000, now - 100])
        window.prune(now)
        assert window.timestamps == [now - 100]

    def test_unknown_client_usage(self):
        from slopsense.rate_limit import get_usage
        assert get_usage("never_seen") == {"minute": 0, "hour": 0}

    def test_lru_eviction(self, monkeypatch):
        from slopsense import rate_limit

        rate_limit.reset()
        monkeypatch.setattr(rate_limit, "MAX_TRACKED_CLIENTS", 2)
        for client_id in ("a", "b", "c"):
            rate_limit.check_rate_limit(client_id)
        assert list(rate_limit._windows) == ["b", "c"]
        rate_limit.reset()


class TestLogging:
    """Structured logging tests."""

    def _record(self, msg="Test message"):
        return logging.LogRecord(
            name="slopsense.test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg=msg,
            args=(),
            exc_info=None,
        )

    def test_json_formatter(self):
        from slopsense.logging import JSONFormatter

        parsed = json.loads(JSONFormatter().format(self._record()))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert parsed["logger"] == "slopsense.test"
        assert "timestamp" in parsed

    def test_json_formatter_extra_fields(self):
        from slopsense.logging import JSONFormatter

        record = self._record("Analysis complete")
        record.score = 42.5
        record.patterns_count = 3
        record.client_id = "127.0.0.1"
        record.unrelated = "dropped"
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["score"] == 42.5
        assert parsed["patterns_count"] == 3
        assert parsed["client_id"] == "127.0.0.1"
        assert "unrelated" not in parsed

    def test_json_formatter_exception(self):
        from slopsense.logging import JSONFormatter

        try:
            raise ValueError("boom")
        except ValueError:
            import sys
            record = self._record()
            record.exc_info = sys.exc_info()
        parsed = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in parsed["exception"]

    def test_get_logger(self):
        from slopsense.logging import get_logger
        assert get_logger("api").name == "slopsense.api"

    def test_setup_logging_text_format(self):
        from slopsense.logging import setup_logging, TextFormatter

        root = setup_logging(level="debug", fmt="text")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_setup_logging_json_format(self):
        from slopsense.logging import setup_logging, JSONFormatter

        root = setup_logging(level="INFO", fmt="json")
        assert isinstance(root.handlers[0].formatter, JSONFormatter)


class TestConfig:
    def test_settings_frozen(self):
        from slopsense.config import settings

        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.PORT = 1

    def test_settings_fields(self):
        from slopsense.config import Settings

        fields = {f.name for f in dataclasses.fields(Settings)}
        assert "MAX_BATCH_ITEMS" in fields
        assert "API_VERSION" not in fields

    def test_cors_origin_list(self):
        from slopsense.config import Settings

        s = Settings(CORS_ORIGINS="https://a.example, https://b.example,")
        assert s.cors_origin_list == ["https://a.example", "https://b.example"]


class TestErrors:
    def test_input_too_large(self):
        from slopsense.errors import InputTooLarge, SlopSenseError

        err = InputTooLarge(150_000, 100_000)
        assert isinstance(err, SlopSenseError)
        assert err.length == 150_000
        assert err.limit == 100_000
        assert "100,000" in str(err)

    def test_invalid_input_is_engine_error(self):
        from slopsense.errors import InvalidInput, SlopSenseError
        assert issubclass(InvalidInput, SlopSenseError)
