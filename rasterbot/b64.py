"""Base64 encoding and a lenient decoder that skips noise."""

from __future__ import annotations

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DECODE = {byte: value for value, byte in enumerate(_ALPHABET)}


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("ascii")
    return bytes(data)


def encode(data: bytes | bytearray | memoryview | str) -> bytes:
    """Encode ``data`` as padded base64 without line breaks."""
    raw = _as_bytes(data)
    if not raw:
        raise ValueError("cannot encode empty input")
    out = bytearray()
    for start in range(0, len(raw), 3):
        chunk = raw[start:start + 3]
        value = int.from_bytes(chunk.ljust(3, b"\0"), "big")
        digits = [(value >> shift) & 0x3F for shift in (18, 12, 6, 0)]
        used = len(chunk) + 1
        out.extend(_ALPHABET[d] for d in digits[:used])
        out.extend(b"=" * (4 - used))
    return bytes(out)


def decode(data: bytes | bytearray | memoryview | str) -> bytes:
    """Decode base64, discarding line breaks, padding and other noise."""
    out = bytearray()
    last = 0
    position = 0
    for byte in _as_bytes(data):
        digit = _DECODE.get(byte)
        if digit is None:
            continue
        phase = position % 4
        if phase == 1:
            out.append(((last << 2) | ((digit & 0x30) >> 4)) & 0xFF)
        elif phase == 2:
            out.append((((last & 0x0F) << 4) | ((digit & 0x3C) >> 2)) & 0xFF)
        elif phase == 3:
            out.append((((last & 0x03) << 6) | digit) & 0xFF)
        last = digit
        position += 1
    return bytes(out)