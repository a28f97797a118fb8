import struct
import zlib

import pytest

from gadgetry import gfx
from gadgetry.gfx import Rgba32, Rgba64


def _chunks(data):
    pos = 8
    while pos < len(data):
        (length,) = struct.unpack(">I", data[pos:pos + 4])
        tag = data[pos + 4:pos + 8]
        body = data[pos + 8:pos + 8 + length]
        (crc,) = struct.unpack(">I", data[pos + 8 + length:pos + 12 + length])
        yield tag, body, crc
        pos += 12 + length


def test_rgba_from_values_counts():
    assert Rgba64.from_values() == Rgba64(0.0, 0.0, 0.0, 0.0)
    assert Rgba64.from_values(0.5) == Rgba64(0.5, 0.0, 0.0, 0.0)
    assert Rgba64.from_values(0.1, 0.2) == Rgba64(0.1, 0.2, 0.0, 0.0)
    assert Rgba64.from_values(0.1, 0.2, 0.3) == Rgba64(0.1, 0.2, 0.3, 1.0)
    assert Rgba64.from_values(0.1, 0.2, 0.3, 0.4, 0.9) == Rgba64(0.1, 0.2, 0.3, 0.4)


def test_rgba32_is_single_precision():
    c = Rgba32.from_values(0.1, 0.25, 0.5)
    assert c.r != 0.1
    assert abs(c.r - 0.1) < 1e-7
    assert c.g == 0.25
    assert c.a == 1.0


@pytest.mark.parametrize("v", [0.0, 0.001, 0.02, 0.2, 0.5, 0.9, 1.0])
def test_gamma_linear_round_trip(v):
    assert gfx.linear_to_gamma_space(gfx.gamma_to_linear_space(v)) == pytest.approx(v, abs=1e-9)
    assert gfx.gamma_to_linear_space(gfx.linear_to_gamma_space(v)) == pytest.approx(v, abs=1e-9)


def test_gamma_endpoints_and_monotonic():
    assert gfx.gamma_to_linear_space(0.0) == 0.0
    assert gfx.gamma_to_linear_space(1.0) == pytest.approx(1.0)
    samples = [gfx.gamma_to_linear_space(i / 50) for i in range(51)]
    assert samples == sorted(samples)


def test_index_2d_is_bijective():
    xs, ys = 4, 5
    idx = [gfx.index_2d(x, y, ys) for x in range(xs) for y in range(ys)]
    assert sorted(idx) == list(range(xs * ys))


def test_index_3d_is_bijective():
    xs, ys, zs = 3, 4, 2
    idx = [gfx.index_3d(x, y, z, xs, ys) for x in range(xs) for y in range(ys) for z in range(zs)]
    assert sorted(idx) == list(range(xs * ys * zs))


def test_save_png_structure(tmp_path):
    rows = [
        [(255, 0, 0, 255), (0, 255, 0, 128), (0, 0, 255)],
        [(1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12)],
    ]
    path = tmp_path / "img.png"
    gfx.save_png_image_file(rows, str(path))
    data = path.read_bytes()
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    chunks = list(_chunks(data))
    assert [c[0] for c in chunks] == [b"IHDR", b"IDAT", b"IEND"]
    for tag, body, crc in chunks:
        assert zlib.crc32(tag + body) & 0xFFFFFFFF == crc
    width, height, depth, ctype = struct.unpack(">IIBB", chunks[0][1][:10])
    assert (width, height, depth, ctype) == (3, 2, 8, 6)
    raw = zlib.decompress(chunks[1][1])
    expected = b"".join(
        b"\x00" + bytes(c for px in row for c in (px if len(px) == 4 else px + (255,)))
        for row in rows
    )
    assert raw == expected


def test_save_png_rejects_empty(tmp_path):
    with pytest.raises(ValueError):
        gfx.save_png_image_file([], str(tmp_path / "a.png"))
    with pytest.raises(ValueError):
        gfx.save_png_image_file([[]], str(tmp_path / "b.png"))


def test_save_png_rejects_ragged_and_bad_pixels(tmp_path):
    with pytest.raises(ValueError):
        gfx.save_png_image_file([[(0, 0, 0)], [(0, 0, 0), (0, 0, 0)]], str(tmp_path / "c.png"))
    with pytest.raises(ValueError):
        gfx.save_png_image_file([[(0, 0)]], str(tmp_path / "d.png"))
    with pytest.raises(ValueError):
        gfx.save_png_image_file([[(300, 0, 0)]], str(tmp_path / "e.png"))