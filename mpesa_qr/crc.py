"""CRC16-CCITT (FALSE variant) checksum for MPM payload strings."""
from __future__ import annotations

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def crc16_ccitt(data: str | bytes) -> str:
    """Return the CRC16-CCITT of ``data`` as four uppercase hex digits.

    Text is read one character per byte (ISO-8859-1), so characters above
    U+00FF raise ``UnicodeEncodeError`` instead of being folded into a byte.
    """

    raw = data.encode("latin-1") if isinstance(data, str) else data

    checksum = CRC16_INIT
    for byte in raw:
        checksum ^= byte << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ CRC16_POLY
            else:
                checksum <<= 1
            checksum &= 0xFFFF
    return f"{checksum:04X}"
