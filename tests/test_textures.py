import pygame
import pytest

from wolfcast.textures import SKY_SLOT, TEXTURE_FILES, Texture, load_textures
from wolfcast.world import TEXTURE_COUNT


def test_solid_texture_has_color_everywhere():
    color = (10, 20, 30, 40)
    texture = Texture.solid(3, 2, color)
    assert texture.width == 3
    assert texture.height == 2
    for x in range(3):
        for y in range(2):
            assert texture.get_pixel(x, y) == color


def test_get_pixel_reads_row_major():
    pixels = bytes([1, 2, 3, 4, 5, 6, 7, 8])
    texture = Texture(2, 1, pixels)
    assert texture.get_pixel(0, 0) == (1, 2, 3, 4)
    assert texture.get_pixel(1, 0) == (5, 6, 7, 8)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_get_pixel_out_of_range(x, y):
    texture = Texture.solid(2, 2, (0, 0, 0, 255))
    with pytest.raises(IndexError):
        texture.get_pixel(x, y)


def test_wrong_pixel_length_rejected():
    with pytest.raises(ValueError):
        Texture(2, 2, bytes(3))


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        Texture(0, 1, b"")


def test_from_file_round_trip(tmp_path):
    surface = pygame.Surface((3, 2))
    colors = {(0, 0): (255, 0, 0), (2, 1): (0, 0, 255), (1, 0): (12, 34, 56)}
    for position, rgb in colors.items():
        surface.set_at(position, rgb)
    path = tmp_path / "image.bmp"
    pygame.image.save(surface, str(path))

    texture = Texture.from_file(path)
    assert (texture.width, texture.height) == (3, 2)
    for (x, y), rgb in colors.items():
        assert texture.get_pixel(x, y)[:3] == rgb
        assert texture.get_pixel(x, y)[3] == 255


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Texture.from_file(tmp_path / "nothing.png")


def test_from_file_not_an_image(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(OSError):
        Texture.from_file(path)


def test_load_textures_empty_directory(tmp_path):
    textures = load_textures(tmp_path)
    assert len(textures) == TEXTURE_COUNT
    assert all(texture is None for texture in textures)


def test_load_textures_picks_named_files(tmp_path):
    surface = pygame.Surface((4, 4))
    surface.fill((0, 128, 0))
    pygame.image.save(surface, str(tmp_path / TEXTURE_FILES[SKY_SLOT]))

    textures = load_textures(tmp_path)
    assert textures[0] is None
    sky = textures[SKY_SLOT]
    assert sky is not None and sky.get_pixel(1, 1)[:3] == (0, 128, 0)
    assert [i for i, t in enumerate(textures) if t is not None] == [SKY_SLOT]