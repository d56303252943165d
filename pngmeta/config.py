from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

# Job status files for the HTTP API
JOBS_DIR = Path(os.getenv("PNGMETA_JOBS_DIR", "jobs"))
LOG_LEVEL = os.getenv("PNGMETA_LOG_LEVEL", "INFO")
# Max bytes produced per inflate step (zTXt decompression)
INFLATE_BUFFER_SIZE = int(os.getenv("PNGMETA_INFLATE_BUFFER", str(128 * 1024)))
# Max bytes requested per read when pulling a chunk payload
READ_BLOCK_SIZE = int(os.getenv("PNGMETA_READ_BLOCK", str(64 * 1024)))


def configure_logging(level: Optional[str] = None) -> None:
	logging.basicConfig(
		level=(level or LOG_LEVEL).upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
