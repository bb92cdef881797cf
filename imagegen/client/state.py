"""Client session state and the transitions that move it.

Every transition is a pure function returning a new frozen snapshot, so the
generate/select/download flow can be checked step by step without HTTP.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

STYLE_SUFFIX = "in the same style as the selected image"


class SessionState(BaseModel):
    """Snapshot of one generator session."""

    model_config = ConfigDict(frozen=True)

    prompt: str = ""
    images: Tuple[str, ...] = ()
    selected: Optional[int] = None
    loading: bool = False
    download_loading: bool = False
    progress: int = 0
    error: str = ""

    @property
    def selected_image(self) -> Optional[str]:
        if self.selected is None:
            return None
        return self.images[self.selected]


def style_prompt(prompt: str) -> str:
    # Text hint only; no image data reaches the provider
    return f"{prompt} {STYLE_SUFFIX}"


def set_prompt(state: SessionState, text: str) -> SessionState:
    return state.model_copy(update={"prompt": text})


def failed(state: SessionState, message: str) -> SessionState:
    return state.model_copy(update={"error": message})


def generation_started(state: SessionState, clear_selection: bool = True) -> SessionState:
    update = {"loading": True, "error": "", "progress": 0}
    if clear_selection:
        update["selected"] = None
    return state.model_copy(update=update)


def generation_succeeded(
    state: SessionState, images: Sequence[str], clear_selection: bool = False
) -> SessionState:
    update = {"images": tuple(images), "loading": False, "progress": 100}
    if clear_selection:
        update["selected"] = None
    return state.model_copy(update=update)


def generation_failed(state: SessionState, message: str) -> SessionState:
    return state.model_copy(update={"error": message, "loading": False, "progress": 100})


def image_selected(state: SessionState, index: int) -> SessionState:
    if not 0 <= index < len(state.images):
        return state
    return state.model_copy(update={"selected": index})


def download_started(state: SessionState) -> SessionState:
    return state.model_copy(update={"download_loading": True, "error": ""})


def download_finished(state: SessionState) -> SessionState:
    return state.model_copy(update={"download_loading": False})


def download_failed(state: SessionState, message: str) -> SessionState:
    return state.model_copy(update={"download_loading": False, "error": message})
