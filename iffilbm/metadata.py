"""Descriptive information about an ILBM file, read without decoding the BODY."""

from collections import namedtuple

from .bmhd import CAMG_EHB, CAMG_HAM, parse_bmhd, parse_camg
from .chunks import chunk_payload, read_form_type, walk_chunks
from .errors import MissingHeader

TEXT_CHUNKS = {
    b'NAME': 'name',
    b'AUTH': 'author',
    b'(c) ': 'copyright',
    b'ANNO': 'annotation',
}


class IFFMetadata(namedtuple('IFFMetadata', 'width, height, planes, compression, camg, palette_count, x_aspect, y_aspect, name, author, copyright, annotation')):
    __slots__ = ()

    @property
    def bits_per_sample(self) -> int:
        # The plane count, not the depth of a colour channel.
        return self.planes

    @property
    def color_mode(self) -> str:
        if self.planes == 32:
            return 'Direct 32-bit'
        if self.planes == 24:
            return 'Direct 24-bit'
        if self.camg & CAMG_HAM:
            return 'HAM6' if self.planes <= 6 else 'HAM8'
        if self.camg & CAMG_EHB:
            return 'EHB'
        return 'Indexed'

    def attributes(self) -> dict:
        """The record handed to a search indexer."""
        attrs = {
            'pixel_width': self.width,
            'pixel_height': self.height,
            'bits_per_sample': self.bits_per_sample,
            'color_space': self.color_mode,
        }
        if self.name is not None:
            attrs['title'] = self.name
        if self.author is not None:
            attrs['authors'] = [self.author]
        if self.copyright is not None:
            attrs['copyright'] = self.copyright
        if self.annotation is not None:
            attrs['comment'] = self.annotation
        return attrs


def read_text(payload: bytes):
    """Latin-1 text up to the first NUL, or None for an empty chunk."""
    if not payload:
        return None
    return payload.split(b'\0', 1)[0].decode('latin-1')


def parse_metadata(data: bytes) -> IFFMetadata:
    read_form_type(data)

    header = None
    palette_count = 0
    camg = 0
    text = dict.fromkeys(TEXT_CHUNKS.values())

    for chunk in walk_chunks(data):
        if chunk.tag == b'BMHD':
            header = parse_bmhd(chunk_payload(data, chunk))
        elif chunk.tag == b'CMAP':
            palette_count = chunk.size // 3
        elif chunk.tag == b'CAMG':
            flags = parse_camg(chunk_payload(data, chunk))
            if flags is not None:
                camg = flags
        elif chunk.tag in TEXT_CHUNKS:
            text[TEXT_CHUNKS[chunk.tag]] = read_text(chunk_payload(data, chunk))

    if header is None:
        raise MissingHeader()

    return IFFMetadata(
        width=header.width,
        height=header.height,
        planes=header.planes,
        compression=header.compression,
        camg=camg,
        palette_count=palette_count,
        x_aspect=header.x_aspect,
        y_aspect=header.y_aspect,
        **text,
    )
