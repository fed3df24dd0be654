"""Walking the chunks of an IFF FORM.

An IFF file is a ``FORM`` chunk whose payload starts with a four byte type
(``ILBM`` or ``PBM ``) followed by a flat list of chunks. Every chunk is a
four byte tag, a big-endian 32-bit length and the payload, padded to an even
number of bytes.
"""

import logging
from collections import namedtuple
from struct import unpack

from .errors import InvalidData, NotContainerFormat

log = logging.getLogger(__name__)

FORM_TYPES = (b'ILBM', b'PBM ')

RawChunk = namedtuple('RawChunk', 'tag, size, offset')


class ByteBuffer:
    def __init__(self, data: bytes, pos: int = 0):
        self.data = data
        self.pos = pos

    def remaining(self):
        return len(self.data) - self.pos

    def get_pos(self):
        return self.pos

    def skip(self, n: int):
        self.pos += n

    def get_bytes(self, n: int):
        self.pos += n
        return bytes(self.data[self.pos - n:self.pos])

    def get_long(self) -> int:
        return unpack('>L', self.get_bytes(4))[0]


def read_form_type(data: bytes) -> bytes:
    """Check the FORM header and return the form type (``ILBM`` or ``PBM ``).

    The FORM length field is not checked against the buffer size.
    """
    if len(data) < 12:
        raise InvalidData()
    if bytes(data[0:4]) != b'FORM':
        raise NotContainerFormat('Expected FORM header')
    form_type = bytes(data[8:12])
    if form_type not in FORM_TYPES:
        raise NotContainerFormat('Expected ILBM or PBM type, got %r' % form_type)
    return form_type


def walk_chunks(data: bytes):
    """Yield a RawChunk for every complete chunk after the FORM header.

    The walk ends quietly at the first chunk whose header or payload does not
    fit in ``data``.
    """
    bb = ByteBuffer(data, 12)

    while bb.remaining() >= 8:
        tag = bb.get_bytes(4)
        size = bb.get_long()
        offset = bb.get_pos()
        if size > bb.remaining():
            log.warning('Chunk %r at offset %d declares %d bytes but only %d remain; '
                        'ignoring the rest of the file', tag, offset - 8, size, bb.remaining())
            return
        yield RawChunk(tag, size, offset)
        bb.skip(size + (size & 1))


def chunk_payload(data: bytes, chunk: RawChunk) -> bytes:
    return bytes(data[chunk.offset:chunk.offset + chunk.size])
