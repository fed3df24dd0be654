class ILBMError(RuntimeError):
    """Base class for everything that can go wrong while reading an IFF file."""


class InvalidData(ILBMError):
    def __init__(self, message='Invalid or corrupt IFF data'):
        super().__init__(message)


class NotContainerFormat(ILBMError):
    def __init__(self, message='Not an IFF ILBM file'):
        super().__init__(message)


class MissingHeader(ILBMError):
    def __init__(self):
        super().__init__('Missing BMHD chunk')


class MissingBody(ILBMError):
    def __init__(self):
        super().__init__('Missing BODY chunk')


class UnsupportedCompression(ILBMError):
    def __init__(self, compression: int):
        super().__init__('Unsupported compression type: %d' % compression)
        self.compression = compression


class DecodingFailed(ILBMError):
    def __init__(self, message='Failed to decode image data'):
        super().__init__(message)
