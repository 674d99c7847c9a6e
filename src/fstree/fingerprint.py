"""Content fingerprints for scanned files."""

import hashlib

from fstree.io.chunked_file_reader import ChunkedFileReader
from fstree.types import PathType


def compute_tag(path: PathType, chunk_size: int = 65536) -> str:
    """Compute the content tag of a file: the hex MD5 digest of its bytes.

    This is the same value object stores commonly report as the ETag of an object
    uploaded in one part.

    Args:
        path: File to fingerprint.
        chunk_size: Read size passed to ChunkedFileReader.

    Raises:
        OSError: If the file cannot be opened or read.

    Example:
        >>> compute_tag("empty.txt")  # doctest: +SKIP
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    digest = hashlib.md5(usedforsecurity=False)
    with open(path, "rb") as file_obj:
        for chunk in ChunkedFileReader(file_obj, chunk_size):
            digest.update(chunk)
    return digest.hexdigest()
