"""Tests for rt.core.errors module."""

import pytest

from rt.core.errors import ErrorCode


class TestErrorCode:
    def test_values_are_stable(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.IO_ERROR == 5

    def test_invalid_lookup_raises(self) -> None:
        with pytest.raises(ValueError):
            ErrorCode(99)
