from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, BackgroundTasks, File, Form, HTTPException, UploadFile

from pngmeta.services.extraction_pipeline import run_folder_job
from pngmeta.services.folder_scan import normalize_folder_path
from pngmeta.services.metadata import extract_uploaded
from pngmeta.services.status_store import read_status, write_status


router = APIRouter(prefix="/extract", tags=["extract"])


def _slugify(text: str) -> str:
	return "".join(ch if (ch.isalnum() or ch in ("-", "_")) else "-" for ch in text).strip("-_").lower()


@router.post("/folder", summary="Scan a server-side folder of PNGs in the background")
def extract_folder(background_tasks: BackgroundTasks, path: str = Form(...)):
	try:
		folder = normalize_folder_path(path)
	except ValueError as e:
		raise HTTPException(status_code=400, detail=str(e))
	# Human-readable job_id: "<folder_name>_<ddmmyyyy>"
	stem = _slugify(folder.name) or "folder"
	job_id = f"{stem}_{datetime.now().strftime('%d%m%Y')}"
	write_status(job_id, {"job_id": job_id, "status": "queued", "step": "Queued", "folder": str(folder)})
	background_tasks.add_task(run_folder_job, job_id, folder)
	return {
		"job_id": job_id,
		"status": "queued",
		"folder": str(folder),
		"status_endpoint": f"/extract/status/{job_id}",
		"result_endpoint": f"/extract/result/{job_id}",
	}


@router.get("/status/{job_id}", summary="Get job status")
def status(job_id: str):
	return read_status(job_id)


@router.get("/result/{job_id}", summary="Get job results")
def result(job_id: str):
	data = read_status(job_id)
	if data.get("status") != "completed":
		return {"job_id": job_id, "status": data.get("status"), "message": "not completed yet"}
	return {
		"job_id": job_id,
		"folder": data.get("folder"),
		"processed": data.get("processed", 0),
		"extracted": data.get("extracted", 0),
		"written": data.get("written", []),
	}


@router.post("/upload", summary="Extract metadata from uploaded PNGs")
async def upload(files: List[UploadFile] = File(...)):
	files_meta = []
	for f in files:
		data = await f.read()
		files_meta.append({"filename": f.filename or "image.png", "data": data})
	return extract_uploaded(files_meta)
