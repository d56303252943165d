from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Tuple, Union

from pngmeta.config import READ_BLOCK_SIZE
from pngmeta.services.text_chunks import TEXT_TAG, ZTEXT_TAG, decode

logger = logging.getLogger(__name__)

PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])
END_TAG = b"IEND"
ENTRY_SEPARATOR = b"\n\n"


@dataclass
class Chunk:
	length: int
	type: bytes
	payload: bytes
	checksum: bytes


def read_u32_be(data: bytes) -> int:
	"""Interpret 4 bytes as a big-endian unsigned 32-bit integer."""
	return int.from_bytes(data[:4], "big")


def _read_exact(stream: BinaryIO, n: int, block_size: int = READ_BLOCK_SIZE) -> Optional[bytes]:
	"""
	Read exactly n bytes, requesting at most block_size per call so a bogus
	length field cannot force a huge allocation. Returns None on a short read.
	"""
	if n <= block_size:
		data = stream.read(n)
		return data if len(data) == n else None
	buf = bytearray()
	while len(buf) < n:
		piece = stream.read(min(block_size, n - len(buf)))
		if not piece:
			return None
		buf += piece
	return bytes(buf)


def has_png_signature(stream: BinaryIO) -> bool:
	return stream.read(len(PNG_SIGNATURE)) == PNG_SIGNATURE


def is_png(path: Union[str, Path]) -> bool:
	try:
		with open(path, "rb") as f:
			return has_png_signature(f)
	except OSError as e:
		logger.warning("cannot read %s: %s", path, e)
		return False


def iter_chunks(stream: BinaryIO) -> Iterator[Chunk]:
	"""
	Yield chunks from a stream positioned just after the signature.
	Stops at IEND or at the first short read; truncation is not an error.
	"""
	while True:
		header = _read_exact(stream, 8)
		if header is None:
			return
		length = read_u32_be(header)
		chunk_type = header[4:8]
		payload = _read_exact(stream, length)
		if payload is None:
			logger.debug("truncated %r payload (declared %d bytes)", chunk_type, length)
			return
		checksum = _read_exact(stream, 4)
		if checksum is None:
			return
		if chunk_type == END_TAG:
			return
		yield Chunk(length, chunk_type, payload, checksum)


def scan(stream: BinaryIO) -> Tuple[bytes, bool]:
	"""
	Collect tEXt/zTXt entries from a PNG stream into one metadata document.
	Returns (document, found); a stream without the PNG signature gives (b"", False).
	"""
	if not has_png_signature(stream):
		return b"", False
	parts: List[bytes] = []
	for chunk in iter_chunks(stream):
		if chunk.type not in (TEXT_TAG, ZTEXT_TAG):
			continue
		entry = decode(chunk.type, chunk.payload)
		if entry is None:
			continue
		parts.append(entry.render())
	return ENTRY_SEPARATOR.join(parts), bool(parts)


def scan_bytes(data: bytes) -> Tuple[bytes, bool]:
	return scan(io.BytesIO(data))


def scan_file(path: Union[str, Path]) -> Tuple[bytes, bool]:
	with open(path, "rb") as f:
		return scan(f)
