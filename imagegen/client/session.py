"""Client-side flow: generate, select, download, regenerate in style."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Optional

import requests

from imagegen.client import state as transitions
from imagegen.client.state import SessionState
from imagegen.client.storage import ImageStorage
from imagegen.core.schemas import GenerateImagesOut

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-images"
DOWNLOAD_PATH = "/api/download-image"

GENERATE_FAILED = "Failed to generate images"
DOWNLOAD_FAILED = "Failed to download image"

# Generation runs its variants one after another on the server
DEFAULT_TIMEOUT = 300.0


class ImageGeneratorSession:
    """Drives the generator endpoints and keeps the session snapshot.

    ``http`` is anything with ``post(url, json=..., timeout=...)`` returning
    a response with ``status_code``, ``json()`` and ``content``: a
    ``requests.Session`` by default, or a FastAPI ``TestClient``.

    While a generation is outstanding further generate/regenerate calls are
    ignored, and likewise for downloads.
    """

    def __init__(
        self,
        base_url: str = "",
        http: Any = None,
        storage: Optional[ImageStorage] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http if http is not None else requests.Session()
        self._storage = storage or ImageStorage(Path("downloads"))
        self._timeout = timeout
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _post(self, path: str, body: dict) -> Any:
        return self._http.post(self._url(path), json=body, timeout=self._timeout)

    def set_prompt(self, text: str) -> None:
        self._state = transitions.set_prompt(self._state, text)

    def select(self, index: int) -> None:
        self._state = transitions.image_selected(self._state, index)

    def generate(self) -> None:
        if self._state.loading:
            return
        if not self._state.prompt.strip():
            self._state = transitions.failed(self._state, "Please enter a prompt first")
            return
        self._state = transitions.generation_started(self._state)
        self._request_images(self._state.prompt, clear_selection=False)

    def regenerate_with_style(self) -> None:
        if self._state.loading:
            return
        if self._state.selected is None:
            self._state = transitions.failed(self._state, "Please select an image first")
            return
        self._state = transitions.generation_started(self._state, clear_selection=False)
        self._request_images(transitions.style_prompt(self._state.prompt), clear_selection=True)

    def _request_images(self, prompt: str, clear_selection: bool) -> None:
        try:
            response = self._post(GENERATE_PATH, {"prompt": prompt})
            if response.status_code != 200:
                raise RuntimeError(_error_message(response, GENERATE_FAILED))
            # ValidationError is a ValueError
            images = GenerateImagesOut.model_validate(response.json()).images
        except (requests.RequestException, RuntimeError, ValueError) as e:
            logger.warning("Generation failed: %s", e)
            self._state = transitions.generation_failed(self._state, str(e) or GENERATE_FAILED)
            return
        self._state = transitions.generation_succeeded(
            self._state, images, clear_selection=clear_selection
        )

    def download(self) -> Optional[Path]:
        """Save the selected image locally; returns the written path."""
        if self._state.download_loading:
            return None
        image_url = self._state.selected_image
        if image_url is None:
            return None

        self._state = transitions.download_started(self._state)
        try:
            response = self._post(DOWNLOAD_PATH, {"imageUrl": image_url})
            if response.status_code != 200:
                raise RuntimeError(DOWNLOAD_FAILED)
            filename = f"ai-generated-image-{int(time.time() * 1000)}.png"
            path = self._storage.save_file(response.content, filename)
        except (requests.RequestException, RuntimeError, OSError) as e:
            logger.warning("Download failed: %s", e)
            self._state = transitions.download_failed(self._state, str(e) or DOWNLOAD_FAILED)
            return None

        self._state = transitions.download_finished(self._state)
        return path


def _error_message(response: Any, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return default
