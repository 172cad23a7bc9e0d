"""
Handles the encoding and decoding of database IDs into short, non-sequential,
and reversible strings. This is the core protection against scraping and
enumeration attacks.

Wire format: the obfuscated value as 8 little-endian bytes, encoded with
unpadded URL-safe base64 (11 characters).
"""
import base64
import binascii
import re
import struct

import config
from obfuscation import ObfuscationParameters, obfuscate, deobfuscate

# Byte order is part of the wire contract, never host-native.
ID_STRUCT = struct.Struct("<Q")
URLSAFE_ALPHABET = re.compile(r"^[A-Za-z0-9_-]*\Z")


class IDDecodeError(ValueError):
    """The text is not valid unpadded URL-safe base64."""


class IDFormatError(ValueError):
    """The text decoded to the wrong number of bytes."""


def pack_id(n: int) -> bytes:
    return ID_STRUCT.pack(n & config.UINT64_MASK)


def unpack_id(buf: bytes) -> int:
    if len(buf) != config.ID_BYTE_LENGTH:
        raise IDFormatError(f"unexpected id format: expected {config.ID_BYTE_LENGTH} bytes, got {len(buf)}")
    return ID_STRUCT.unpack(buf)[0]


def _urlsafe_b64decode(s: str) -> bytes:
    # urlsafe_b64decode silently drops characters outside the alphabet and
    # accepts padding, so the input is checked against the raw alphabet first.
    if not URLSAFE_ALPHABET.match(s):
        raise binascii.Error("invalid character in base64 input")
    return base64.urlsafe_b64decode(s + "=" * (-len(s) % 4))


def encode_id(n: int, params: ObfuscationParameters | None = None) -> str:
    """Encodes a single integer ID into a short, non-sequential string."""
    buf = pack_id(obfuscate(n, params))
    return base64.urlsafe_b64encode(buf).rstrip(b"=").decode("ascii")


def decode_id(s: str, params: ObfuscationParameters | None = None) -> int:
    """Decodes a short string back into an integer ID."""
    try:
        buf = _urlsafe_b64decode(s)
    except (binascii.Error, ValueError) as e:
        raise IDDecodeError(f"fails to decode id: {e}") from e
    return deobfuscate(unpack_id(buf), params)
