import pytest

from raycub.scene import (
    Scene,
    SceneError,
    count_map_lines,
    parse_rgb,
    parse_scene,
    parse_texture_path,
    read_scene,
)


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for name in ("north", "south", "west", "east", "door"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("x")
        paths[name] = str(path)
    return paths


def scene_lines(textures):
    return [
        f"NO {textures['north']}\n",
        f"SO {textures['south']}\n",
        f"WE {textures['west']}\n",
        f"EA {textures['east']}\n",
        f"DO {textures['door']}\n",
        "F 0,0,255\n",
        "C 1,0,0\n",
        "\n",
        "111\n",
        "1N1\n",
        "111\n",
    ]


def test_parse_texture_path_valid(textures):
    assert parse_texture_path(f"NO {textures['north']}\n", None) == textures["north"]


def test_parse_texture_path_already_set(textures):
    assert parse_texture_path(f"NO {textures['north']}\n", textures["south"]) is None


def test_parse_texture_path_bad_word_count(textures):
    assert parse_texture_path(f"NO {textures['north']} extra\n", None) is None
    assert parse_texture_path("NO\n", None) is None


def test_parse_texture_path_missing_file(tmp_path):
    assert parse_texture_path(f"NO {tmp_path / 'none.xpm'}\n", None) is None


def test_parse_rgb_values():
    assert parse_rgb("F 0,0,255\n", 0) == 255
    assert parse_rgb("C 1,0,0\n", 0) == 65536


@pytest.mark.parametrize(
    "line",
    ["F 1,2\n", "F 1,2,3,4\n", "F 1,2,\n", "F\n", "F 1,2,3 x\n"],
)
def test_parse_rgb_malformed(line):
    assert parse_rgb(line, 0) == -1


def test_parse_rgb_already_set():
    assert parse_rgb("F 0,0,255\n", 255) == -1


def test_parse_scene(textures):
    scene = parse_scene(scene_lines(textures))
    assert isinstance(scene, Scene)
    assert scene.north == textures["north"]
    assert scene.door == textures["door"]
    assert scene.floor == 255
    assert scene.ceiling == 65536
    assert scene.map_lines == ["111", "1N1", "111"]


def test_parse_scene_missing_texture(textures):
    lines = [line for line in scene_lines(textures) if not line.startswith("DO")]
    with pytest.raises(SceneError, match="Path Error"):
        parse_scene(lines)


def test_parse_scene_duplicate_texture(textures):
    lines = scene_lines(textures) + [f"NO {textures['north']}\n"]
    with pytest.raises(SceneError):
        parse_scene(lines)


def test_parse_scene_bad_colour(textures):
    lines = [line for line in scene_lines(textures) if not line.startswith("C")]
    lines.append("C 1,2\n")
    with pytest.raises(SceneError):
        parse_scene(lines)


def test_read_scene_round_trip(tmp_path, textures):
    path = tmp_path / "map.cub"
    lines = scene_lines(textures)
    path.write_text("".join(lines))
    assert read_scene(path) == parse_scene(lines)


def test_read_scene_missing_file(tmp_path):
    with pytest.raises(SceneError, match="File Error"):
        read_scene(tmp_path / "missing.cub")


def test_count_map_lines(textures):
    lines = scene_lines(textures)
    assert count_map_lines(lines) == len(lines) - 1
    assert count_map_lines(["\n", "\n"]) == 0