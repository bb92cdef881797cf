# imagegen/core/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class GenerateImagesIn(BaseModel):
    prompt: Optional[str] = None


class GenerateImagesOut(BaseModel):
    images: List[str]


class DownloadImageIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class ErrorOut(BaseModel):
    error: str
