from __future__ import annotations

import logging
import zlib
from dataclasses import dataclass
from typing import List, Optional

from pngmeta.config import INFLATE_BUFFER_SIZE

logger = logging.getLogger(__name__)

TEXT_TAG = b"tEXt"
ZTEXT_TAG = b"zTXt"
# zTXt compression method 0: zlib/deflate
DEFLATE_METHOD = 0


@dataclass
class TextEntry:
	keyword: bytes
	text: bytes

	def render(self) -> bytes:
		return self.keyword + b": " + self.text


def inflate(data: bytes, buffer_size: int = INFLATE_BUFFER_SIZE) -> Optional[bytes]:
	"""
	Decompress a zlib-wrapped deflate stream in steps of at most buffer_size bytes.
	Returns None when the stream is malformed, truncated, needs a preset
	dictionary, or cannot be held in memory.
	"""
	d = zlib.decompressobj()
	parts: List[bytes] = []
	pending = data
	try:
		while not d.eof:
			piece = d.decompress(pending, buffer_size)
			pending = d.unconsumed_tail
			if piece:
				parts.append(piece)
			elif not pending:
				# input exhausted before the end marker
				break
	except (zlib.error, MemoryError) as e:
		logger.debug("inflate failed: %s", e)
		return None
	if not d.eof:
		logger.debug("inflate stopped before end of stream (%d bytes in)", len(data))
		return None
	return b"".join(parts)


def _split_keyword(payload: bytes):
	sep = payload.find(b"\x00")
	if sep < 0:
		return None, None
	return payload[:sep], payload[sep + 1:]


def decode(chunk_type: bytes, payload: bytes) -> Optional[TextEntry]:
	keyword, value = _split_keyword(payload)
	if keyword is None:
		logger.debug("%s chunk without keyword separator skipped", chunk_type.decode("latin-1"))
		return None
	if chunk_type == TEXT_TAG:
		return TextEntry(keyword, value)
	if chunk_type == ZTEXT_TAG:
		if not value or value[0] != DEFLATE_METHOD:
			logger.debug("zTXt %r: unsupported compression method", keyword)
			return None
		text = inflate(value[1:])
		if not text:
			return None
		return TextEntry(keyword, text)
	return None
