"""Pure session transitions."""

import pydantic
import pytest

from imagegen.client import state as s


def test_snapshot_is_immutable():
    state = s.SessionState()
    with pytest.raises(pydantic.ValidationError):
        state.prompt = "changed"


def test_generation_started_clears_error_and_selection():
    state = s.SessionState(images=("a", "b"), selected=1, error="old")
    started = s.generation_started(state)

    assert started.loading
    assert started.progress == 0
    assert started.error == ""
    assert started.selected is None
    assert state.selected == 1


def test_restyle_start_keeps_selection_until_success():
    state = s.SessionState(images=("a", "b"), selected=1)
    started = s.generation_started(state, clear_selection=False)
    assert started.selected == 1

    done = s.generation_succeeded(started, ["c", "d", "e"], clear_selection=True)
    assert done.images == ("c", "d", "e")
    assert done.selected is None
    assert not done.loading
    assert done.progress == 100


def test_generation_failed_returns_to_idle_with_error():
    state = s.generation_started(s.SessionState(images=("a",)))
    failed = s.generation_failed(state, "Rate limit")

    assert not failed.loading
    assert failed.error == "Rate limit"
    assert failed.images == ("a",)


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_selecting_outside_displayed_images_is_noop(index):
    state = s.SessionState(images=("a", "b"))
    assert s.image_selected(state, index) is state


def test_selecting_with_no_images_is_noop():
    state = s.SessionState()
    assert s.image_selected(state, 0).selected is None


def test_selected_image():
    state = s.image_selected(s.SessionState(images=("a", "b")), 1)
    assert state.selected_image == "b"
    assert s.SessionState().selected_image is None


def test_style_prompt():
    assert s.style_prompt("sunset") == "sunset in the same style as the selected image"


def test_download_transitions():
    state = s.download_started(s.SessionState(error="old"))
    assert state.download_loading
    assert state.error == ""

    assert not s.download_finished(state).download_loading
    failed = s.download_failed(state, "Failed to download image")
    assert not failed.download_loading
    assert failed.error == "Failed to download image"
