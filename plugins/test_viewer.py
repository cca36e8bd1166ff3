#!/usr/bin/env python3
"""
Tests for the pygame frame player (headless parts only).
"""

import numpy as np
import pytest

pygame = pytest.importorskip("pygame")

from paranormal.viewer import FrameViewer, fit_size  # noqa: E402


def test_fit_size():
    """Frames scale by a whole factor and never below 1x."""
    assert fit_size(4, 4, 900, 900) == (900, 900)
    assert fit_size(100, 50, 900, 900) == (900, 450)
    assert fit_size(1000, 10, 900, 900) == (1000, 10)


def test_key_handling():
    """Stepping pauses and wraps around the frame list."""
    frames = [np.zeros((2, 3, 3), dtype=np.uint8) for _ in range(3)]
    viewer = FrameViewer(frames)
    assert (viewer.canvas_w, viewer.canvas_h) == (900, 600)

    viewer._handle_keydown(pygame.K_LEFT)
    assert viewer.paused
    assert viewer.index == 2
    viewer._handle_keydown(pygame.K_RIGHT)
    assert viewer.index == 0
    viewer._handle_keydown(pygame.K_SPACE)
    assert not viewer.paused
    assert viewer.show_hud
    viewer._handle_keydown(pygame.K_h)
    assert not viewer.show_hud
    viewer._handle_keydown(pygame.K_q)
    assert not viewer.running


def test_surface_conversion():
    """Frames (H, W) become pygame surfaces (W, H)."""
    frame = np.zeros((2, 3, 3), dtype=np.uint8)
    frame[1, 2] = (255, 0, 0)
    frame.flags.writeable = False
    viewer = FrameViewer([frame])
    surface = viewer._surface(0)
    assert surface.get_size() == (3, 2)
    assert tuple(surface.get_at((2, 1)))[:3] == (255, 0, 0)


def test_needs_frames():
    with pytest.raises(ValueError):
        FrameViewer([])


if __name__ == "__main__":
    test_fit_size()
    test_key_handling()
    test_surface_conversion()
    test_needs_frames()
    print("\n✓ All tests passed!\n")
