"""String hash functions used to pick a bucket in a scope table.

Characters are hashed byte by byte from the UTF-8 form of the text. As in
the classic definitions, bytes above 127 enter the SDBM, BKDR and RS sums as
signed values. Arithmetic wraps at 32 bits (SDBM) or 64 bits (BKDR, RS).
"""

from __future__ import annotations

from typing import Union

__all__ = [
    "HASH_NAMES",
    "sdbm_hash",
    "sdbm_raw",
    "bkdr_hash",
    "rs_hash",
    "bucket_index",
]

HASH_NAMES = ("SDBM", "BKDR", "RS")

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_RS_A = 63689
_RS_B = 378551
_BKDR_SEED = 131

Text = Union[str, bytes, bytearray]


def _as_bytes(text: Text) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    raise TypeError(f"cannot hash object of type {type(text).__name__}")


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def _check_buckets(num_buckets: int) -> None:
    if num_buckets <= 0:
        raise ValueError(f"number of buckets must be positive, got {num_buckets}")


def _sdbm_step(value: int, char: int) -> int:
    return (char + (value << 6) + (value << 16) - value) & _MASK32


def sdbm_hash(text: Text, num_buckets: int, reduce_each_step: bool = False) -> int:
    """SDBM hash of ``text`` reduced to a bucket index.

    With ``reduce_each_step`` the running value is taken modulo the bucket
    count after every character instead of only at the end.
    """
    _check_buckets(num_buckets)
    value = 0
    for byte in _as_bytes(text):
        value = _sdbm_step(value, _signed(byte))
        if reduce_each_step:
            value %= num_buckets
    return value % num_buckets


def sdbm_raw(text: Text) -> int:
    """Full 32-bit SDBM hash, reading bytes unsigned and stopping at a NUL."""
    value = 0
    for byte in _as_bytes(text):
        if byte == 0:
            break
        value = _sdbm_step(value, byte)
    return value


def bkdr_hash(text: Text, num_buckets: int) -> int:
    """BKDR hash (seed 131) of ``text`` reduced to a bucket index."""
    _check_buckets(num_buckets)
    value = 0
    for byte in _as_bytes(text):
        value = (value * _BKDR_SEED + _signed(byte)) & _MASK64
    return value % num_buckets


def rs_hash(text: Text, num_buckets: int) -> int:
    """RS hash of ``text`` reduced to a bucket index."""
    _check_buckets(num_buckets)
    value = 0
    multiplier = _RS_A
    for byte in _as_bytes(text):
        value = (value * multiplier + _signed(byte)) & _MASK64
        multiplier = (multiplier * _RS_B) & _MASK64
    return value % num_buckets


def bucket_index(
    text: Text,
    num_buckets: int,
    hash_name: str = "SDBM",
    reduce_each_step: bool = False,
) -> int:
    """Bucket index for ``text`` using the named hash.

    ``"BKDR"`` and ``"RS"`` select those hashes; any other name selects SDBM.
    """
    if hash_name == "BKDR":
        return bkdr_hash(text, num_buckets)
    if hash_name == "RS":
        return rs_hash(text, num_buckets)
    return sdbm_hash(text, num_buckets, reduce_each_step)