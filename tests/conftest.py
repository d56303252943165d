import struct
import zlib

import pytest

from pngmeta import config

SIGNATURE = b"\x89PNG\r\n\x1a\n"
IHDR_PAYLOAD = struct.pack("!IIBBBBB", 1, 1, 8, 0, 0, 0, 0)


def build_chunk(chunk_type: bytes, payload: bytes = b"") -> bytes:
	crc = zlib.crc32(chunk_type + payload) & 0xFFFFFFFF
	return struct.pack("!L", len(payload)) + chunk_type + payload + struct.pack("!L", crc)


def build_png(*chunks: bytes, end: bool = True) -> bytes:
	body = build_chunk(b"IHDR", IHDR_PAYLOAD) + b"".join(chunks)
	if end:
		body += build_chunk(b"IEND")
	return SIGNATURE + body


def text_chunk(keyword: bytes, text: bytes) -> bytes:
	return build_chunk(b"tEXt", keyword + b"\x00" + text)


def ztext_chunk(keyword: bytes, text: bytes, method: int = 0) -> bytes:
	return build_chunk(b"zTXt", keyword + b"\x00" + bytes([method]) + zlib.compress(text))


@pytest.fixture
def chunk():
	return build_chunk


@pytest.fixture
def png():
	return build_png


@pytest.fixture
def text():
	return text_chunk


@pytest.fixture
def ztext():
	return ztext_chunk


@pytest.fixture
def jobs_dir(tmp_path, monkeypatch):
	d = tmp_path / "jobs"
	monkeypatch.setattr(config, "JOBS_DIR", d)
	return d
