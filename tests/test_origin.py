import pytest

from bytesource.origin import InvalidArgumentError, Origin, OriginKind


def test_origin_kind_values():
    assert OriginKind.MEMORY.value == "memory"
    assert OriginKind.STREAM.value == "stream"
    assert OriginKind("stream") is OriginKind.STREAM
    assert OriginKind.MEMORY == "memory"


def test_invalid_argument_error_is_value_error():
    with pytest.raises(ValueError, match="bad"):
        raise InvalidArgumentError("bad")


def test_base_origin_hooks():
    origin = Origin()
    with pytest.raises(NotImplementedError):
        origin.read(1)
    with pytest.raises(NotImplementedError):
        origin.size()
    origin.close()
    assert not origin.closed
