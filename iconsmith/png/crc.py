from __future__ import annotations

from typing import Tuple

CRC32_POLYNOMIAL = 0xEDB88320


def build_crc32_table() -> Tuple[int, ...]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            if crc & 1:
                crc = CRC32_POLYNOMIAL ^ (crc >> 1)
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


CRC32_TABLE = build_crc32_table()


def crc32(data: bytes, initial: int = 0) -> int:
    """Return the CRC-32 of ``data`` as used by PNG chunk trailers."""
    crc = initial ^ 0xFFFFFFFF
    for value in data:
        crc = (crc >> 8) ^ CRC32_TABLE[(crc ^ value) & 0xFF]
    return crc ^ 0xFFFFFFFF
