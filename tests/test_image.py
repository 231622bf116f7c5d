import pytest

from minirt.image import encode_packed_ppm, encode_ppm, write_ppm
from minirt.vector import Vec


def test_encode_ppm_header_and_length():
    data = encode_ppm([Vec(), Vec()], 2, 1)
    assert data.startswith(b"P6\n2 1\n255\n")
    assert len(data) == len(b"P6\n2 1\n255\n") + 6


def test_encode_ppm_full_and_empty_channels():
    data = encode_ppm([Vec(1.0, 1.0, 1.0), Vec(0.0, 0.0, 0.0)], 2, 1)
    assert data[-6:] == bytes([255, 255, 255, 0, 0, 0])


def test_encode_ppm_scales_bright_colours():
    bright = encode_ppm([Vec(2.0, 2.0, 2.0)], 1, 1)
    plain = encode_ppm([Vec(1.0, 1.0, 1.0)], 1, 1)
    assert bright == plain


def test_encode_ppm_clamps_negative():
    data = encode_ppm([Vec(-0.5, 0.0, 0.0)], 1, 1)
    assert data[-3] == 0


def test_encode_ppm_wrong_size():
    with pytest.raises(ValueError):
        encode_ppm([Vec()], 2, 2)


def test_encode_packed_ppm_unpacks_channels():
    data = encode_packed_ppm([0x102030], 1, 1)
    assert data == b"P6\n1 1\n255\n" + bytes([0x10, 0x20, 0x30])


def test_encode_packed_ppm_wrong_size():
    with pytest.raises(ValueError):
        encode_packed_ppm([0, 0, 0], 2, 1)


def test_write_ppm_round_trip(tmp_path):
    data = encode_packed_ppm([0xFFFFFF, 0], 2, 1)
    path = tmp_path / "frame.ppm"
    write_ppm(path, data)
    assert path.read_bytes() == data