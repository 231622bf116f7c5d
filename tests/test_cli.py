import os

import pytest

from minirt.cli import main
from minirt.errors import FilenameError, FilePermissionError, UsageError
from minirt.image import encode_packed_ppm
from minirt.raytrace import BACKGROUND, vec_to_color
from minirt.vector import Vec

SCENE = (
    "A 0.2 255,255,255\n"
    "\n"
    "C 0,0,0 0,0,-1 70\n"
    "L -40,0,30 0.7 255,255,255\n"
    "sp 0,0,-20 10 255,0,0\n"
)


@pytest.fixture
def small_screen(monkeypatch):
    monkeypatch.setenv("MINIRT_WIDTH", "4")
    monkeypatch.setenv("MINIRT_HEIGHT", "4")


def test_main_renders_scene(tmp_path, small_screen):
    scene_file = tmp_path / "scene.rt"
    scene_file.write_text(SCENE)
    assert main([str(scene_file)]) == 0
    data = (tmp_path / "scene.ppm").read_bytes()
    header = b"P6\n4 4\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 4 * 4 * 3
    background = encode_packed_ppm([vec_to_color(BACKGROUND)], 1, 1)[-3:]
    assert data[len(header):len(header) + 3] == background
    centre = len(header) + (1 * 4 + 1) * 3
    hit = encode_packed_ppm([vec_to_color(Vec())], 1, 1)[-3:]
    assert data[centre:centre + 3] == hit


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == str(UsageError())


def test_main_bad_extension(capsys):
    assert main(["scene.txt"]) == 1
    assert capsys.readouterr().err == str(FilenameError())


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.rt")]) == 1
    assert capsys.readouterr().err == str(FilePermissionError())


def test_main_incomplete_scene(tmp_path, capsys, small_screen):
    scene_file = tmp_path / "partial.rt"
    scene_file.write_text("A 0.2 255,255,255\n")
    assert main([str(scene_file)]) == 1
    assert capsys.readouterr().err.startswith("Error\n")
    assert not (tmp_path / "partial.ppm").exists()


def test_main_empty_environment(tmp_path, capsys, monkeypatch):
    scene_file = tmp_path / "scene.rt"
    scene_file.write_text(SCENE)
    monkeypatch.setattr(os, "environ", {})
    assert main([str(scene_file)]) == 1
    assert capsys.readouterr().err == "Error\nInvalid environement\n"


def test_main_invalid_screen_size(tmp_path, capsys, monkeypatch):
    scene_file = tmp_path / "scene.rt"
    scene_file.write_text(SCENE)
    monkeypatch.setenv("MINIRT_WIDTH", "wide")
    assert main([str(scene_file)]) == 1
    assert "MINIRT_WIDTH" in capsys.readouterr().err