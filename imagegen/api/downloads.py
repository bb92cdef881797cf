# POST /api/download-image
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from imagegen.core.config import AppSettings, get_settings
from imagegen.core.schemas import DownloadImageIn, ErrorOut
from imagegen.services.fetch import content_disposition, fetch_image

router = APIRouter(prefix="/api", tags=["downloads"])


# Plain def: requests blocks, so FastAPI runs this in its threadpool
@router.post(
    "/download-image",
    response_class=Response,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def download_image(payload: DownloadImageIn, settings: AppSettings = Depends(get_settings)):
    """Relay a hosted image back as an attachment (server-side to avoid CORS)"""
    image = fetch_image(payload.image_url, timeout=settings.download_timeout)
    return Response(
        content=image.content,
        media_type=image.content_type,
        headers={"Content-Disposition": content_disposition()},
    )
