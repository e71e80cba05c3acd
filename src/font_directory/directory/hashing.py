"""Rendering of content hashes as lookup values."""


def to_hex(data: bytes | bytearray | memoryview) -> str:
    """Convert a content hash to lowercase hex, two zero-padded characters per byte."""
    return bytes(data).hex()
