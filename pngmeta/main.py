from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pngmeta.config import configure_logging
from pngmeta.routers.extract import router as extract_router


def create_app() -> FastAPI:
	app = FastAPI(title="PNG Metadata Extractor", version="0.1.0")

	# CORS (adjust origins in production)
	app.add_middleware(
		CORSMiddleware,
		allow_origins=["*"],
		allow_credentials=False,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	app.include_router(extract_router)

	return app


app = create_app()


if __name__ == "__main__":
	# Local dev server: uvicorn pngmeta.main:app --reload
	import uvicorn

	configure_logging()
	uvicorn.run("pngmeta.main:app", host="0.0.0.0", port=8000, reload=True)
