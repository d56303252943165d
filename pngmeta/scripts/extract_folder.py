"""
Extract Metadata - PNG tEXt/zTXt chunks to sibling .txt files

Scans one folder (non-recursive) for *.png files, writes "<name>.txt" next to
every image that carries text metadata, and prints running counters.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pngmeta.config import LOG_LEVEL, configure_logging
from pngmeta.services.folder_scan import ConsoleProgress, normalize_folder_path, process_folder

BANNER = "Stable Diffusion PNG Metadata Extractor (tEXt + zTXt)"


def _prompt_for_folder() -> str:
	print(BANNER)
	print("=" * len(BANNER) + "\n")
	print("Paste or type the full path to your PNG folder:")
	try:
		return input("> ")
	except EOFError:
		return ""


def main(argv: Optional[List[str]] = None) -> int:
	parser = argparse.ArgumentParser(description="Extract PNG text metadata (tEXt/zTXt) into .txt files")
	parser.add_argument("folder", nargs="?", help="Folder containing PNG files; prompted for when omitted")
	parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
	args = parser.parse_args(argv)

	configure_logging(args.log_level)

	raw = args.folder if args.folder is not None else _prompt_for_folder()
	try:
		folder = normalize_folder_path(raw)
	except ValueError as e:
		print(str(e), file=sys.stderr)
		return 1

	summary = process_folder(folder, reporter=ConsoleProgress())
	return 1 if summary.error else 0


if __name__ == "__main__":
	raise SystemExit(main())
