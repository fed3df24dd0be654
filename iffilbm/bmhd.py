from collections import namedtuple
from struct import unpack
from typing import Optional

from .errors import InvalidData

BMHD_SIZE = 20

# Masking technique with an extra mask plane after the colour planes of each row
MASK_HAS_MASK = 1

# Compression
COMPRESS_NONE = 0
COMPRESS_BYTERUN1 = 1

# Viewport mode bits of the CAMG chunk
CAMG_EHB = 0x0080
CAMG_HAM = 0x0800

BitmapHeader = namedtuple('BitmapHeader', 'width, height, x, y, planes, masking, compression, transparent_color, x_aspect, y_aspect, page_width, page_height')


def parse_bmhd(payload: bytes) -> BitmapHeader:
    if len(payload) < BMHD_SIZE:
        raise InvalidData('Expected length of BMHD chunk to be %d bytes, got %d' % (BMHD_SIZE, len(payload)))
    return BitmapHeader(*unpack('>HHhhBBBxHBBhh', payload[:BMHD_SIZE]))


def parse_camg(payload: bytes) -> Optional[int]:
    """Return the viewport mode word, or None if the chunk is too short to hold one."""
    if len(payload) < 4:
        return None
    return unpack('>L', payload[:4])[0]
