"""
Tests for sensitive data filtering and the JSON log formatter.
"""

import json
import logging

from core.logging.structured import SensitiveDataFilter, StructuredFormatter


def make_record(msg, args=None, **extra):
    record = logging.LogRecord('test', logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSensitiveDataFilter:

    def setup_method(self):
        self.filter = SensitiveDataFilter()

    def test_redacts_email_in_message(self):
        record = make_record("Login failed for mary@example.com")
        self.filter.filter(record)
        assert record.msg == "Login failed for [EMAIL]"

    def test_redacts_jwt(self):
        record = make_record("Bearer eyJhbGciOi.eyJzdWIiOiIx.c2lnbmF0dXJl")
        self.filter.filter(record)
        assert '[JWT_TOKEN]' in record.msg
        assert 'eyJ' not in record.msg

    def test_redacts_password_assignment(self):
        record = make_record("payload password='hunter22'")
        self.filter.filter(record)
        assert 'hunter22' not in record.msg

    def test_filters_sensitive_extras(self):
        record = make_record("Token issued", refresh='abc', context={'token': 'x', 'church': 'St. Mary'})
        self.filter.filter(record)
        assert record.refresh == '[FILTERED]'
        assert record.context == {'token': '[FILTERED]', 'church': 'St. Mary'}

    def test_always_allows_record(self):
        assert self.filter.filter(make_record("plain")) is True


class TestStructuredFormatter:

    def test_outputs_json_with_extras(self):
        record = make_record("Joined church", correlation_id='req-1', user_id='u-1')

        payload = json.loads(StructuredFormatter().format(record))

        assert payload['message'] == "Joined church"
        assert payload['level'] == 'INFO'
        assert payload['correlation_id'] == 'req-1'
        assert payload['user_id'] == 'u-1'
