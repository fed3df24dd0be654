from .bmhd import BitmapHeader, parse_bmhd
from .byterun1 import unpack_byterun1
from .chunks import RawChunk, read_form_type, walk_chunks
from .decode import DecodedImage, DecodeMode, decode_ilbm, open_ilbm
from .errors import (DecodingFailed, ILBMError, InvalidData, MissingBody, MissingHeader, NotContainerFormat,
                     UnsupportedCompression)
from .metadata import IFFMetadata, parse_metadata
from .palette import build_palette
