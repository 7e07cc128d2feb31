from __future__ import annotations

import logging
import struct
import zlib
from typing import Callable, Iterator, List, Optional

from .scanline import decode_scanlines, filter_scanlines
from .types import COLOR_TYPE_RGBA, SUPPORTED_COLOR_TYPES, Chunk, Header, Raster
from ..errors import FormatError, UnsupportedFormatError

PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])
IHDR_LENGTH = 13

Codec = Callable[[bytes], bytes]

logger = logging.getLogger(__name__)


def make_chunk(chunk_type: bytes, data: bytes) -> bytes:
    """Frame ``data`` as a PNG chunk: length, type, data, CRC over type + data."""
    chunk = Chunk(chunk_type, bytes(data))
    return struct.pack(">I", len(chunk.data)) + chunk.type + chunk.data + struct.pack(">I", chunk.checksum)


def iter_chunks(data: bytes) -> Iterator[Chunk]:
    """Walk chunks after the signature, stopping after IEND or at end of data."""
    if data[: len(PNG_SIGNATURE)] != PNG_SIGNATURE:
        raise FormatError("Not a PNG file: bad signature")
    offset = len(PNG_SIGNATURE)
    total = len(data)
    while offset < total:
        if offset + 8 > total:
            raise FormatError(f"Truncated chunk header at offset {offset}")
        length, chunk_type = struct.unpack_from(">I4s", data, offset)
        end = offset + 8 + length
        if end + 4 > total:
            raise FormatError(
                f"Chunk {chunk_type.decode('ascii', errors='replace')} at offset {offset} "
                f"runs past end of data ({length} bytes declared)"
            )
        (stored,) = struct.unpack_from(">I", data, end)
        chunk = Chunk(chunk_type, bytes(data[offset + 8 : end]), stored)
        logger.debug("chunk %s length=%d offset=%d", chunk.name, length, offset)
        yield chunk
        if chunk_type == b"IEND":
            return
        offset = end + 4


def parse_header(chunk: Chunk) -> Header:
    if len(chunk.data) < IHDR_LENGTH:
        raise FormatError(f"IHDR chunk too short: {len(chunk.data)} bytes")
    width, height, bit_depth, color_type = struct.unpack_from(">IIBB", chunk.data, 0)
    interlace = chunk.data[12]
    if bit_depth != 8 or color_type not in SUPPORTED_COLOR_TYPES or interlace != 0:
        raise UnsupportedFormatError(bit_depth, color_type, interlace)
    if width == 0 or height == 0:
        raise FormatError(f"Invalid image size {width}x{height}")
    return Header(width, height, bit_depth, color_type)


def parse_png(
    data: bytes,
    decompress: Codec = zlib.decompress,
    verify_checksums: bool = False,
) -> Raster:
    """Decode an 8-bit RGB or RGBA PNG into an RGBA raster."""
    header: Optional[Header] = None
    idats: List[bytes] = []
    for chunk in iter_chunks(data):
        if verify_checksums and chunk.checksum != chunk.stored_checksum:
            raise FormatError(
                f"Checksum mismatch in {chunk.name} chunk: "
                f"stored 0x{chunk.stored_checksum:08X}, computed 0x{chunk.checksum:08X}"
            )
        if chunk.type == b"IHDR":
            if header is None:
                header = parse_header(chunk)
        elif chunk.type == b"IDAT":
            idats.append(chunk.data)
    if header is None:
        raise FormatError("Missing IHDR chunk")
    try:
        raw = decompress(b"".join(idats))
    except zlib.error as exc:
        raise FormatError(f"Corrupt image data: {exc}") from exc
    return decode_scanlines(raw, header)


def serialize_png(raster: Raster, compress: Codec = zlib.compress) -> bytes:
    """Encode a raster as an 8-bit RGBA PNG with a single IDAT chunk."""
    compressed = compress(filter_scanlines(raster))
    ihdr = struct.pack(">IIBBBBB", raster.width, raster.height, 8, COLOR_TYPE_RGBA, 0, 0, 0)
    return b"".join(
        [
            PNG_SIGNATURE,
            make_chunk(b"IHDR", ihdr),
            make_chunk(b"IDAT", compressed),
            make_chunk(b"IEND", b""),
        ]
    )
