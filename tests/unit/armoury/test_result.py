"""Tests for the Ok/Err result type."""
import pytest

from armoury.result import Err, Ok

pytestmark = pytest.mark.unit


class TestOk:

    def test_flags(self):
        result = Ok(11)
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap(self):
        assert Ok(11).unwrap() == 11

    def test_error_is_none(self):
        assert Ok("steel").error is None

    def test_repr(self):
        assert repr(Ok("steel")) == "Ok('steel')"


class TestErr:

    def test_flags(self):
        result = Err("no weapon type detected")
        assert result.is_ok() is False
        assert result.is_err() is True

    def test_unwrap_raises(self):
        with pytest.raises(ValueError, match="no weapon type detected"):
            Err("no weapon type detected").unwrap()

    def test_value_is_none(self):
        assert Err("boom").value is None

    def test_equality(self):
        assert Err("a") == Err("a")
        assert Err("a") != Ok("a")
