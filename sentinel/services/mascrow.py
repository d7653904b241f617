"""
Mascrow integrity fingerprints for QR payloads.

A 32-bit rolling hash (h = h * 31 + unit) over the UTF-16 code units of
``content + salt``, rendered as ``hash_<hex of |h|>``. Fingerprints issued by
the dashboard's QR generator use the same scheme, so stored values keep
verifying.

This is a tamper-evident checksum, not a cryptographic hash. It catches
accidental or naive edits to a QR payload; it does not resist an attacker who
recomputes the fingerprint.
"""

from __future__ import annotations

from typing import Optional

_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_units(text: str):
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def compute_fingerprint(content: str, salt: str = "") -> str:
    h = 0
    for unit in _utf16_units(content + salt):
        h = _to_int32((h << 5) - h + unit)
    return "hash_" + format(abs(h), "x")


def verify_fingerprint(provided: Optional[str], content: str, salt: str = "") -> bool:
    return provided == compute_fingerprint(content, salt)
