from bytesource.buffer import Buffer
from bytesource.origin import OriginKind


def test_buffer_init():
    buf = Buffer(bytearray(b"hello"))
    assert buf._data == b"hello"
    assert isinstance(buf._data, bytes)
    assert buf.kind == OriginKind.MEMORY
    assert buf.size() == 5
    assert buf.tell() == 0


def test_buffer_read():
    buf = Buffer(b"0123456789")

    assert buf.read(4) == b"0123"
    assert buf.tell() == 4

    assert buf.read(4) == b"4567"
    assert buf.tell() == 8

    assert buf.read(10) == b"89"  # Read more than remaining
    assert buf.tell() == 10

    assert buf.read(1) == b""
    assert buf.tell() == 10


def test_buffer_seek():
    buf = Buffer(b"retry")
    buf.read(2)
    assert buf.tell() == 2

    buf.seek(0)
    assert buf.tell() == 0
    assert buf.read(5) == b"retry"

    buf.seek(3)
    assert buf.read(5) == b"ry"


def test_buffer_does_not_share_source_data():
    data = bytearray(b"abc")
    buf = Buffer(data)
    data[0:1] = b"z"
    assert buf.read(3) == b"abc"


def test_buffer_close_is_noop():
    buf = Buffer(b"abc")
    buf.close()
    assert not buf.closed
    assert buf.read(3) == b"abc"
