"""Rendering engines the overlay can be attached to."""

from __future__ import annotations

from enum import IntEnum


class EngineType(IntEnum):
    """Graphics API or translation layer a frame was produced by."""

    UNKNOWN = 0
    OPENGL = 1
    VULKAN = 2
    DXVK = 3
    VKD3D = 4
    DAMAVAND = 5
    ZINK = 6
    WINED3D = 7
    FERAL3D = 8
    TOGL = 9
    GAMESCOPE = 10


_ENGINE_NAMES = {
    EngineType.UNKNOWN: "Unknown",
    EngineType.OPENGL: "OpenGL",
    EngineType.VULKAN: "VULKAN",
    EngineType.DXVK: "DXVK",
    EngineType.VKD3D: "VKD3D",
    EngineType.DAMAVAND: "DAMAVAND",
    EngineType.ZINK: "ZINK",
    EngineType.WINED3D: "WINED3D",
    EngineType.FERAL3D: "Feral3D",
    EngineType.TOGL: "ToGL",
    EngineType.GAMESCOPE: "GAMESCOPE",
}


def engine_name(engine: EngineType | int) -> str:
    """Return the display name of an engine.

    Raises ValueError for a value that is not a known engine.
    """
    return _ENGINE_NAMES[EngineType(engine)]