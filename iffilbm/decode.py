"""Decoding the BODY of an ILBM or PBM file into RGBA pixels.

Five layouts are understood:

- indexed bitplanes, including Extra-Half-Brite (the palette does the work)
- HAM6 and HAM8 (Hold-And-Modify)
- 24-bit and 32-bit direct colour stored as 24 or 32 bitplanes
- PBM chunky pixels, one palette index per byte

Bitplane rows are padded to a multiple of 16 pixels. Bytes that lie past the
end of the body read as zero, so a short body gives a partially black image
rather than an error.

Alpha depends on the layout. Bitplane formats and in-palette PBM pixels are
opaque, PBM pixels outside the palette are transparent black and 32-bit
images carry their own alpha plane.
"""

import logging
from collections import namedtuple
from enum import Enum

from PIL import Image

from .bmhd import CAMG_HAM, COMPRESS_BYTERUN1, COMPRESS_NONE, MASK_HAS_MASK, parse_bmhd, parse_camg
from .byterun1 import unpack_byterun1
from .chunks import chunk_payload, read_form_type, walk_chunks
from .errors import DecodingFailed, MissingBody, MissingHeader, UnsupportedCompression
from .palette import build_palette

log = logging.getLogger(__name__)


class DecodeMode(Enum):
    CHUNKY = 'chunky'
    DIRECT24 = 'direct24'
    DIRECT32 = 'direct32'
    HAM = 'ham'
    INDEXED = 'indexed'


class DecodedImage(namedtuple('DecodedImage', 'width, height, pixels, mode')):
    """RGBA8 pixels, row-major with a stride of ``width * 4`` bytes."""

    __slots__ = ()

    def to_image(self) -> Image.Image:
        try:
            return Image.frombytes('RGBA', (self.width, self.height), self.pixels)
        except ValueError as e:
            raise DecodingFailed('Failed to decode image data: %s' % e) from e


def plane_row_bytes(width: int) -> int:
    """Bytes in one bitplane row; rows are padded to a multiple of 16 pixels."""
    return ((width + 15) // 16) * 2


def resolve_mode(form_type: bytes, header, camg: int) -> DecodeMode:
    # HAM is tested before EHB; the EHB case is handled by the palette.
    if form_type == b'PBM ':
        return DecodeMode.CHUNKY
    if header.planes == 24:
        return DecodeMode.DIRECT24
    if header.planes == 32:
        return DecodeMode.DIRECT32
    if camg & CAMG_HAM:
        return DecodeMode.HAM
    return DecodeMode.INDEXED


def _plane_values(body, width, height, planes, bytes_per_row, row_stride):
    """Gather one bit per plane into a value per pixel (plane n is bit n)."""
    values = [0] * (width * height)
    size = len(body)

    for y in range(height):
        row_start = y * row_stride
        pixel_row = y * width

        for plane in range(planes):
            plane_start = row_start + plane * bytes_per_row
            plane_bit = 1 << plane

            for byte_idx in range(bytes_per_row):
                offset = plane_start + byte_idx
                byte = body[offset] if offset < size else 0
                if not byte:
                    continue

                base_x = byte_idx * 8
                for bit in range(8):
                    x = base_x + bit
                    if x >= width:
                        break
                    if byte & (0x80 >> bit):
                        values[pixel_row + x] |= plane_bit

    return values


def decode_indexed(body, width, height, planes, palette, has_mask=False) -> bytearray:
    bytes_per_row = plane_row_bytes(width)
    total_planes = planes + (1 if has_mask else 0)
    values = _plane_values(body, width, height, planes, bytes_per_row, bytes_per_row * total_planes)

    pixels = bytearray(b'\0\0\0\xff') * (width * height)
    colors = [bytes(c) for c in palette]
    count = len(colors)

    for i, ci in enumerate(values):
        if ci < count:
            pi = i * 4
            pixels[pi:pi + 3] = colors[ci]

    return pixels


def decode_ham(body, width, height, planes, palette) -> bytearray:
    """Decode HAM6 / HAM8.

    The low bits of every pixel are a colour value, the top bits say what to
    do with it: 0 loads a palette entry, 1, 2 and 3 replace blue, red and
    green of the pixel to the left. Each row starts from black.
    """
    bytes_per_row = plane_row_bytes(width)
    color_planes = 4 if planes < 7 else 6
    shift = 8 - color_planes
    color_mask = (1 << color_planes) - 1

    values = _plane_values(body, width, height, planes, bytes_per_row, bytes_per_row * planes)

    pixels = bytearray(b'\0\0\0\xff') * (width * height)
    count = len(palette)

    for y in range(height):
        pixel_row = y * width
        r = g = b = 0

        for x in range(width):
            value = values[pixel_row + x]
            color = value & color_mask
            modifier = value >> color_planes

            if modifier == 0:
                if color < count:
                    r, g, b = palette[color]
            elif modifier == 1:
                b = color << shift
            elif modifier == 2:
                r = color << shift
            elif modifier == 3:
                g = color << shift

            pi = (pixel_row + x) * 4
            pixels[pi] = r
            pixels[pi + 1] = g
            pixels[pi + 2] = b

    return pixels


def decode_direct(body, width, height, planes) -> bytearray:
    """Decode 24 or 32 bitplanes of direct colour.

    Planes 0-7 hold red, 8-15 green, 16-23 blue and, with 32 planes, 24-31
    alpha, least significant bit first. Without an alpha plane every pixel is
    opaque.
    """
    channels = planes // 8
    bytes_per_row = plane_row_bytes(width)
    row_stride = bytes_per_row * planes
    size = len(body)

    pixels = bytearray(b'\xff' if channels == 3 else b'\x00') * (width * height * 4)
    scratch = bytearray(planes)

    for y in range(height):
        row_start = y * row_stride
        pixel_row = y * width

        for byte_idx in range(bytes_per_row):
            for plane in range(planes):
                offset = row_start + plane * bytes_per_row + byte_idx
                scratch[plane] = body[offset] if offset < size else 0

            base_x = byte_idx * 8
            for bit in range(8):
                x = base_x + bit
                if x >= width:
                    break
                mask = 0x80 >> bit
                pi = (pixel_row + x) * 4

                for channel in range(channels):
                    group = channel * 8
                    value = 0
                    for plane in range(8):
                        if scratch[group + plane] & mask:
                            value |= 1 << plane
                    pixels[pi + channel] = value

    return pixels


def decode_chunky(body, width, height, palette) -> bytearray:
    row_stride = ((width + 1) // 2) * 2
    size = len(body)

    pixels = bytearray(width * height * 4)
    colors = [bytes(c) + b'\xff' for c in palette]
    count = len(colors)

    for y in range(height):
        for x in range(width):
            offset = y * row_stride + x
            if offset >= size:
                continue
            ci = body[offset]
            if ci < count:
                pi = (y * width + x) * 4
                pixels[pi:pi + 4] = colors[ci]

    return pixels


def decode_ilbm(data: bytes) -> DecodedImage:
    form_type = read_form_type(data)

    header = None
    cmap = None
    camg = 0
    body = None

    for chunk in walk_chunks(data):
        if chunk.tag == b'BMHD':
            header = parse_bmhd(chunk_payload(data, chunk))
        elif chunk.tag == b'CMAP':
            cmap = chunk_payload(data, chunk)
        elif chunk.tag == b'CAMG':
            flags = parse_camg(chunk_payload(data, chunk))
            if flags is not None:
                camg = flags
        elif chunk.tag == b'BODY':
            body = chunk

    if header is None:
        raise MissingHeader()
    if body is None or body.size == 0:
        raise MissingBody()

    palette = build_palette(cmap, camg, header.planes)

    if header.compression == COMPRESS_BYTERUN1:
        body_data = unpack_byterun1(chunk_payload(data, body))
    elif header.compression == COMPRESS_NONE:
        body_data = memoryview(data)[body.offset:body.offset + body.size]
    else:
        raise UnsupportedCompression(header.compression)

    mode = resolve_mode(form_type, header, camg)
    width, height, planes = header.width, header.height, header.planes
    log.debug('Decoding %s %dx%d, %d planes, compression %d, mode %s',
              form_type.decode('ascii'), width, height, planes, header.compression, mode.value)

    if mode is DecodeMode.CHUNKY:
        pixels = decode_chunky(body_data, width, height, palette)
    elif mode is DecodeMode.DIRECT24 or mode is DecodeMode.DIRECT32:
        pixels = decode_direct(body_data, width, height, planes)
    elif mode is DecodeMode.HAM:
        pixels = decode_ham(body_data, width, height, planes, palette)
    else:
        pixels = decode_indexed(body_data, width, height, planes, palette,
                                has_mask=header.masking == MASK_HAS_MASK)

    if width == 0 or height == 0:
        raise DecodingFailed('Image has no pixels (%dx%d)' % (width, height))
    if len(pixels) != width * height * 4:
        raise DecodingFailed()

    return DecodedImage(width, height, bytes(pixels), mode)


def open_ilbm(fp) -> Image.Image:
    """Read an ILBM or PBM file (a path or a binary file object) as an RGBA image."""
    if hasattr(fp, 'read'):
        data = fp.read()
    else:
        with open(fp, 'rb') as f:
            data = f.read()
    return decode_ilbm(data).to_image()
