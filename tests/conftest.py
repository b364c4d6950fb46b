"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def model():
    """Provide a fresh model in its default state."""
    from expression_editor import ExpressionEditorModel

    return ExpressionEditorModel()


@pytest.fixture
def model_2_plus_3_times_4():
    """Provide a model holding 2 + 3 * 4 with slot 0 selected."""
    from expression_editor import ExpressionEditorModel

    editor = ExpressionEditorModel()
    for slot, content in enumerate(["2", "+", "3", "*", "4"]):
        editor.select_slot(slot)
        assert editor.set_selected_content(content)
    editor.select_slot(0)
    return editor


@pytest.fixture
def presenter(model):
    """Provide a presenter over a fresh model."""
    from expression_editor import EditorPresenter

    return EditorPresenter(model)


@pytest.fixture
def rejected_samples():
    """Strings no slot accepts."""
    return [
        "",
        " ",
        "10",
        "00000",
        "-1",
        " 5",
        "5 ",
        "a",
        "/",
        "++",
        "٣",  # Arabic-Indic digit three
        "x",
    ]
