"""Hash functions for map keys, all based on 64-bit FNV."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _fnv1(data: bytes) -> int:
    h = _FNV_OFFSET
    for byte in data:
        h = (h * _FNV_PRIME) & _UINT64_MASK
        h ^= byte
    return h


def _fnv1a(data: bytes) -> int:
    h = _FNV_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV_PRIME) & _UINT64_MASK
    return h


def _format_float(x: float) -> str:
    """Shortest representation, switching to exponent form like '%g'."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    nd = len(digits)
    dp = nd + exponent
    exp = dp - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        esign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{esign}{abs(exp):02d}"
    if dp <= 0:
        return f"{prefix}0.{'0' * -dp}{digits}"
    if dp >= nd:
        return f"{prefix}{digits}{'0' * (dp - nd)}"
    return f"{prefix}{digits[:dp]}.{digits[dp:]}"


def _format_value(value: Any) -> str:
    """Render a value in the plain default text form used for hashing."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in value) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(v) for v in value) + "]"
    if isinstance(value, dict):
        try:
            items = sorted(value.items())
        except TypeError:
            items = list(value.items())
        body = " ".join(f"{_format_value(k)}:{_format_value(v)}" for k, v in items)
        return f"map[{body}]"
    return str(value)


class Hasher(ABC):
    """Something that maps a key to a 64-bit hash."""

    @abstractmethod
    def hash(self, key: Any) -> int:
        """Return the 64-bit hash of key."""

    def __call__(self, key: Any) -> int:
        return self.hash(key)


class FNVHasher(Hasher):
    """FNV-1 over the key's default text rendering; accepts any key."""

    def hash(self, key: Any) -> int:
        return _fnv1(_format_value(key).encode("utf-8"))


def default_hasher(key: Any) -> int:
    """FNV-1a hash of a str, bytes-like or int key.

    Integers are hashed as their little-endian 64-bit two's-complement bytes.
    Any other key type raises TypeError.
    """
    if isinstance(key, str):
        data = key.encode("utf-8")
    elif isinstance(key, (bytes, bytearray, memoryview)):
        data = bytes(key)
    elif isinstance(key, int) and not isinstance(key, bool):
        data = (key & _UINT64_MASK).to_bytes(8, "little")
    else:
        raise TypeError("Unsupported key type")
    return _fnv1a(data)