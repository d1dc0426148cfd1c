"""Tests for card shadows, title glitch, and reading progress."""

import random

import pytest

from termblog.script.effects import (
    CARD_SHADOW_JS,
    DEFAULT_CARD_COLORS,
    GLITCH_JS,
    READING_PROGRESS_JS,
    card_shadow,
    glitch_frames,
    reading_progress,
)


class TestCardShadow:
    def test_colors_cycle_by_index(self) -> None:
        assert card_shadow(0) == "8px 8px 0 var(--accent)"
        assert card_shadow(1) == "8px 8px 0 var(--accent-2)"
        assert card_shadow(2) == "8px 8px 0 var(--accent-3)"
        assert card_shadow(3) == card_shadow(0)

    def test_custom_colors_and_offset(self) -> None:
        assert card_shadow(1, ("red", "blue"), offset=4) == "4px 4px 0 blue"

    def test_default_colors(self) -> None:
        assert len(DEFAULT_CARD_COLORS) == 3
        assert "mouseenter" in CARD_SHADOW_JS
        assert "mouseleave" in CARD_SHADOW_JS


class TestGlitch:
    def test_ends_with_reset(self) -> None:
        frames = glitch_frames(rng=random.Random(7))
        assert len(frames) == 4
        assert frames[-1] == "translate(0, 0)"

    def test_offsets_within_amplitude(self) -> None:
        frames = glitch_frames(steps=20, amplitude=2.0, rng=random.Random(1))
        for frame in frames[:-1]:
            x, y = frame.removeprefix("translate(").removesuffix(")").split(", ")
            assert -2.0 <= float(x.removesuffix("px")) <= 2.0
            assert -2.0 <= float(y.removesuffix("px")) <= 2.0

    def test_snippet_uses_interval(self) -> None:
        assert ".hero-title" in GLITCH_JS
        assert "cfg.glitchIntervalMs" in GLITCH_JS


class TestReadingProgress:
    def test_halfway(self) -> None:
        assert reading_progress(500, 2000, 1000) == pytest.approx(50.0)

    def test_capped_at_100(self) -> None:
        assert reading_progress(5000, 2000, 1000) == 100.0

    def test_top_of_page(self) -> None:
        assert reading_progress(0, 2000, 1000) == 0.0

    def test_unscrollable_page_is_complete(self) -> None:
        assert reading_progress(0, 800, 1000) == 100.0
        assert reading_progress(0, 1000, 1000) == 100.0

    def test_snippet_targets_bar(self) -> None:
        assert ".reading-progress" in READING_PROGRESS_JS
        assert ".article-detail" in READING_PROGRESS_JS
