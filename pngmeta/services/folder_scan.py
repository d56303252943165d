from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from pngmeta.services.png_chunks import is_png, scan_file

logger = logging.getLogger(__name__)

PNG_EXT = ".png"
TXT_EXT = ".txt"
INVALID_FOLDER_MESSAGE = "Invalid or inaccessible folder path."


@dataclass
class ScanSummary:
	processed: int = 0
	extracted: int = 0
	written: List[str] = field(default_factory=list)
	error: Optional[str] = None


class ConsoleProgress:
	"""Single-line running counter on stdout, summary line at the end."""

	def __init__(self, out=None, err=None):
		self.out = out or sys.stdout
		self.err = err or sys.stderr

	def update(self, processed: int, extracted: int) -> None:
		self.out.write(f"\rProcessed: {processed} | Metadata found: {extracted}")
		self.out.flush()

	def finish(self, processed: int, extracted: int) -> None:
		self.out.write(f"\n\nFinished! Scanned {processed} PNG files, extracted metadata from {extracted}.\n")
		self.out.flush()

	def fail(self, message: str) -> None:
		self.err.write(f"Error: {message}\n")


def normalize_folder_path(raw: str) -> Path:
	text = raw.strip()
	# paths copied from a file explorer often come quoted
	if len(text) >= 2 and text[0] == text[-1] and text[0] in ("\"", "'"):
		text = text[1:-1].strip()
	if not text:
		raise ValueError("No path provided.")
	return Path(os.path.normpath(text))


def list_png_files(folder: Path) -> List[Path]:
	return sorted([p for p in folder.iterdir() if p.is_file() and p.suffix.lower() == PNG_EXT])


def metadata_path_for(png_path: Path) -> Path:
	return png_path.with_suffix(TXT_EXT)


def extract_file(path: Path) -> Optional[bytes]:
	if not is_png(path):
		logger.debug("not a PNG, skipped: %s", path)
		return None
	try:
		document, found = scan_file(path)
	except OSError as e:
		logger.warning("failed reading %s: %s", path, e)
		return None
	return document if found else None


def write_document(document: bytes, txt_path: Path) -> str:
	with txt_path.open("wb") as f:
		f.write(document)
	return str(txt_path)


def process_folder(folder: Path, reporter=None) -> ScanSummary:
	summary = ScanSummary()
	try:
		candidates = list_png_files(folder) if folder.is_dir() else None
	except OSError as e:
		logger.error("cannot list %s: %s", folder, e)
		candidates = None
	if candidates is None:
		logger.error("invalid folder: %s", folder)
		summary.error = INVALID_FOLDER_MESSAGE
		if reporter is not None:
			reporter.fail(INVALID_FOLDER_MESSAGE)
		return summary

	for p in candidates:
		document = extract_file(p)
		if document is not None:
			try:
				summary.written.append(write_document(document, metadata_path_for(p)))
				summary.extracted += 1
			except OSError as e:
				logger.warning("failed writing metadata for %s: %s", p, e)
		summary.processed += 1
		if reporter is not None:
			reporter.update(summary.processed, summary.extracted)

	logger.info("scanned %d files in %s, extracted %d", summary.processed, folder, summary.extracted)
	if reporter is not None:
		reporter.finish(summary.processed, summary.extracted)
	return summary
