"""Unit tests for internal constants."""

import pytest

from src.core.constants import PROCESSOR_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH


@pytest.mark.unit
class TestConstants:
    def test_processor_timeout_is_positive_float(self):
        assert isinstance(PROCESSOR_TIMEOUT_DEFAULT, float)
        assert PROCESSOR_TIMEOUT_DEFAULT > 0

    def test_response_body_limit_is_positive_int(self):
        assert isinstance(RESPONSE_BODY_MAX_LENGTH, int)
        assert RESPONSE_BODY_MAX_LENGTH > 0
