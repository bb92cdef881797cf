# POST /api/generate-images
from fastapi import APIRouter, Depends
from imagegen.core.config import AppSettings, get_settings
from imagegen.core.openai_client import get_image_client
from imagegen.core.schemas import ErrorOut, GenerateImagesIn, GenerateImagesOut
from imagegen.services.generation import generate_images, validate_prompt

router = APIRouter(prefix="/api", tags=["images"])


@router.post(
    "/generate-images",
    response_model=GenerateImagesOut,
    responses={code: {"model": ErrorOut} for code in (400, 401, 429, 500)},
)
async def generate(payload: GenerateImagesIn, settings: AppSettings = Depends(get_settings)):
    """Generate one image per prompt variant via the configured provider"""
    prompt = validate_prompt(payload.prompt)
    client = get_image_client(settings)

    images = await generate_images(
        prompt,
        client,
        model=settings.image_model,
        size=settings.image_size,
        count=settings.variant_count,
    )
    return GenerateImagesOut(images=images)
