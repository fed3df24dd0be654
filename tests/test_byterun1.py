from iffilbm import unpack_byterun1


def test_literal_run():
    assert unpack_byterun1(bytes([5, 1, 2, 3, 4, 5, 6])) == bytes([1, 2, 3, 4, 5, 6])


def test_repeat_run():
    assert unpack_byterun1(bytes([0xfb, 0xaa])) == bytes([0xaa] * 6)


def test_noop():
    assert unpack_byterun1(bytes([0x80])) == b''
    assert unpack_byterun1(bytes([0x80, 0x00, 0x42])) == b'\x42'


def test_longest_runs():
    assert unpack_byterun1(bytes([0x81, 0x07])) == b'\x07' * 128
    assert unpack_byterun1(bytes([0x7f]) + bytes(range(128))) == bytes(range(128))


def test_mixed_stream():
    data = bytes([0x02, 0x10, 0x11, 0x12, 0xff, 0x00, 0x80, 0xfd, 0x33, 0x00, 0x44])
    assert unpack_byterun1(data) == bytes([0x10, 0x11, 0x12, 0x00, 0x00, 0x33, 0x33, 0x33, 0x33, 0x44])


def test_truncated_literal_keeps_available_bytes():
    assert unpack_byterun1(bytes([0x00, 0xaa, 0x04, 0x01, 0x02])) == bytes([0xaa, 0x01, 0x02])


def test_truncated_repeat():
    assert unpack_byterun1(bytes([0x00, 0x55, 0xfe])) == bytes([0x55])


def test_empty():
    assert unpack_byterun1(b'') == b''
