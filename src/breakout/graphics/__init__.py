"""Rendering of engine state into numpy frame buffers."""

from .renderer import FrameRenderer, Palette, SceneSnapshot

__all__ = ["FrameRenderer", "Palette", "SceneSnapshot"]
