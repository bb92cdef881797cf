# imagegen/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from imagegen.api import images, downloads
from imagegen.core.config import get_settings
from imagegen.core.errors import ImageGeneratorError

VERSION = "1.0.0"

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI Image Generator", version=VERSION)

app.include_router(images.router)
app.include_router(downloads.router)


@app.exception_handler(ImageGeneratorError)
async def image_generator_error_handler(request: Request, exc: ImageGeneratorError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        message = "Request body must be valid JSON"
    else:
        message = "Invalid request body"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/")
async def root():
    return {"message": "AI Image Generator is running", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
