import pytest

from hudcore.engine_types import EngineType, engine_name


def test_display_names_follow_source_table():
    assert engine_name(EngineType.OPENGL) == "OpenGL"
    assert engine_name(EngineType.FERAL3D) == "Feral3D"
    assert engine_name(EngineType.TOGL) == "ToGL"


def test_plain_integer_is_accepted():
    assert engine_name(0) == "Unknown"
    assert engine_name(int(EngineType.GAMESCOPE)) == "GAMESCOPE"


def test_every_engine_has_a_distinct_name():
    names = [engine_name(engine) for engine in EngineType]
    assert len(names) == len(EngineType)
    assert len(set(names)) == len(names)
    assert all(names)


def test_values_are_consecutive_from_zero():
    names_by_int = [engine_name(value) for value in range(len(EngineType))]
    assert names_by_int == [
        "Unknown",
        "OpenGL",
        "VULKAN",
        "DXVK",
        "VKD3D",
        "DAMAVAND",
        "ZINK",
        "WINED3D",
        "Feral3D",
        "ToGL",
        "GAMESCOPE",
    ]
    assert names_by_int == [engine_name(engine) for engine in EngineType]


@pytest.mark.parametrize("bad", [-1, len(EngineType), 100])
def test_unknown_value_raises(bad):
    with pytest.raises(ValueError):
        engine_name(bad)