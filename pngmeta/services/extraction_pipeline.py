from __future__ import annotations

import logging
from pathlib import Path

from pngmeta.services.folder_scan import process_folder
from pngmeta.services.status_store import write_status

logger = logging.getLogger(__name__)


class StatusProgress:
	"""Mirrors folder scan progress into the job status file."""

	def __init__(self, job_id: str, folder: Path):
		self.job_id = job_id
		self.folder = folder

	def _write(self, status: str, step: str, processed: int, extracted: int) -> None:
		write_status(self.job_id, {
			"job_id": self.job_id,
			"status": status,
			"step": step,
			"folder": str(self.folder),
			"processed": processed,
			"extracted": extracted,
		})

	def update(self, processed: int, extracted: int) -> None:
		self._write("scanning", "Extract Metadata", processed, extracted)

	def finish(self, processed: int, extracted: int) -> None:
		# final record is written by run_folder_job with the output list
		pass

	def fail(self, message: str) -> None:
		write_status(self.job_id, {"job_id": self.job_id, "status": "error", "folder": str(self.folder), "error": message})


def run_folder_job(job_id: str, folder: Path) -> None:
	try:
		write_status(job_id, {"job_id": job_id, "status": "scanning", "step": "List Files", "folder": str(folder)})
		summary = process_folder(folder, reporter=StatusProgress(job_id, folder))
		if summary.error:
			return
		write_status(job_id, {
			"job_id": job_id,
			"status": "completed",
			"step": "Done",
			"folder": str(folder),
			"processed": summary.processed,
			"extracted": summary.extracted,
			"written": summary.written,
		})
	except Exception as e:
		logger.exception("job %s failed", job_id)
		write_status(job_id, {"job_id": job_id, "status": "error", "error": str(e)})
