import logging

log = logging.getLogger(__name__)


def unpack_byterun1(data: bytes) -> bytes:
    """Decompress a ByteRun1 (PackBits) stream.

    Each control byte n, read as a signed byte, is followed by:

    - 0..127: n + 1 literal bytes
    - -127..-1: one byte, repeated 1 - n times
    - -128: nothing, it is a no-op

    A run cut short by the end of the input ends the stream. Whatever was
    decoded up to that point is returned.
    """
    out = bytearray()

    pos = 0
    end = len(data)
    while pos < end:
        n = data[pos]
        pos += 1
        if n < 128:
            count = n + 1
            if pos + count > end:
                log.debug('ByteRun1 literal run of %d bytes truncated at input offset %d', count, pos - 1)
                out += data[pos:end]
                break
            out += data[pos:pos + count]
            pos += count
        elif n != 128:
            if pos >= end:
                log.debug('ByteRun1 repeat run truncated at input offset %d', pos - 1)
                break
            out += bytes((data[pos],)) * (257 - n)
            pos += 1

    return bytes(out)
