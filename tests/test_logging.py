import json
import logging

import structlog

from config.settings import LOGGING, mask_sensitive_data


class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_authorization_header_masked(self):
        event_dict = {"event": "test", "header": "Authorization: Bearer-abc"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "Bearer-abc" not in result["header"]

    def test_non_string_values_untouched(self):
        event_dict = {"event": "product.saved", "product_id": 7}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["product_id"] == 7

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "product.created", "name": "Laptop"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {"event": "product.created", "name": "Laptop"}


class TestJsonFormatter:
    def _formatter(self):
        options = dict(LOGGING["formatters"]["json"])
        factory = options.pop("()")
        return factory(**options)

    def test_stdlib_record_rendered_as_json(self):
        record = logging.LogRecord(
            "modules.products", logging.INFO, __file__, 1, "plain message", None, None
        )
        line = json.loads(self._formatter().format(record))
        assert line["event"] == "plain message"
        assert line["level"] == "info"
        assert "timestamp" in line

    def test_bound_context_is_included(self):
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id="cid-1")
        try:
            record = logging.LogRecord(
                "modules.products", logging.INFO, __file__, 1, "hello", None, None
            )
            line = json.loads(self._formatter().format(record))
        finally:
            structlog.contextvars.clear_contextvars()
        assert line["correlation_id"] == "cid-1"
