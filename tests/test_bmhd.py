import struct

import pytest

from iffbuild import bmhd
from iffilbm import InvalidData, parse_bmhd
from iffilbm.bmhd import parse_camg


def test_parse_bmhd_fields():
    hdr = parse_bmhd(bmhd(320, 256, 5, masking=2, compression=1, transparent=7,
                          x_aspect=44, y_aspect=52, origin=(-3, 4), page=(320, -1))[8:])
    assert hdr.width == 320 and hdr.height == 256
    assert hdr.x == -3 and hdr.y == 4
    assert hdr.planes == 5
    assert hdr.masking == 2
    assert hdr.compression == 1
    assert hdr.transparent_color == 7
    assert hdr.x_aspect == 44 and hdr.y_aspect == 52
    assert hdr.page_width == 320 and hdr.page_height == -1


def test_parse_bmhd_ignores_pad_byte():
    payload = bytearray(bmhd(16, 16, 4)[8:])
    payload[11] = 0xff
    assert parse_bmhd(bytes(payload)) == parse_bmhd(bmhd(16, 16, 4)[8:])


def test_parse_bmhd_accepts_odd_values():
    hdr = parse_bmhd(bmhd(0, 65535, 200, compression=9)[8:])
    assert hdr.width == 0 and hdr.height == 65535
    assert hdr.planes == 200 and hdr.compression == 9


def test_parse_bmhd_short():
    with pytest.raises(InvalidData):
        parse_bmhd(b'\0' * 19)


def test_parse_camg():
    assert parse_camg(struct.pack('>L', 0x00011804)) == 0x00011804
    assert parse_camg(b'\0\0\x08') is None
