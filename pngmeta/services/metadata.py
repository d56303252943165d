from __future__ import annotations

from typing import Any, Dict, List, Optional

from pngmeta.services.png_chunks import PNG_SIGNATURE, scan_bytes


def _bytes_to_str(v: Optional[bytes]) -> Optional[str]:
	if v is None:
		return None
	# keywords are Latin-1 by the PNG rules, but SD front-ends write UTF-8 text
	return v.decode("utf-8", errors="replace")


def extract_uploaded(files_meta: List[Dict[str, Any]]) -> Dict[str, Any]:
	"""
	Scan in-memory PNG uploads ({"filename", "data"} dicts) for tEXt/zTXt metadata.
	Nothing is written to disk.
	"""
	records: List[Dict[str, Any]] = []
	for fm in files_meta:
		data: bytes = fm["data"]
		info: Dict[str, Any] = {
			"filename": fm["filename"],
			"is_png": data[:len(PNG_SIGNATURE)] == PNG_SIGNATURE,
			"found": False,
			"metadata": None,
		}
		if info["is_png"]:
			document, found = scan_bytes(data)
			info["found"] = found
			info["metadata"] = _bytes_to_str(document) if found else None
		records.append(info)
	return {
		"images": records,
		"processed": len(records),
		"extracted": sum(1 for r in records if r["found"]),
	}
