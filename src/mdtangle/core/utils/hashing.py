"""SHA-256 content hashing for written-file change detection"""

import hashlib


def sha256_bytes(data: bytes) -> str:
    """Return the hex SHA-256 digest of raw bytes (e.g. a file already on disk)."""
    return hashlib.sha256(data).hexdigest()
