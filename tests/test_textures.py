from pathlib import Path

import pygame
import pytest

from wavesurvivor.definitions import TextureName
from wavesurvivor.textures import TEXTURE_FILES, TextureHandler


def _write_textures(directory: Path) -> dict:
    sizes = {}
    for name, file_name in TEXTURE_FILES.items():
        size = (4 + name.value, 2 + name.value)
        pygame.image.save(pygame.Surface(size), str(directory / file_name))
        sizes[name] = size
    return sizes


def test_every_texture_name_loads(tmp_path):
    _write_textures(tmp_path)
    handler = TextureHandler(tmp_path)
    loaded = {name: handler.texture(name).get_size() for name in TextureName}
    assert set(loaded) == set(TextureName)


def test_background_loaded_from_its_file(tmp_path):
    _write_textures(tmp_path)
    pygame.image.save(pygame.Surface((17, 13)), str(tmp_path / "mapTexture_huge.png"))
    handler = TextureHandler(tmp_path)
    assert handler.texture(TextureName.BACKGROUND_TEXTURE).get_size() == (17, 13)


def test_loads_every_texture_with_its_size(tmp_path):
    sizes = _write_textures(tmp_path)
    handler = TextureHandler(tmp_path)
    for name, size in sizes.items():
        assert handler.texture(name).get_size() == size


def test_accepts_string_path(tmp_path):
    sizes = _write_textures(tmp_path)
    handler = TextureHandler(str(tmp_path))
    assert handler.texture(TextureName.BOLT_TEXTURE).get_size() == sizes[TextureName.BOLT_TEXTURE]


def test_texture_by_enum_value(tmp_path):
    sizes = _write_textures(tmp_path)
    handler = TextureHandler(tmp_path)
    value = TextureName.CHEST_TEXTURE.value
    assert handler.texture(value).get_size() == sizes[TextureName.CHEST_TEXTURE]


def test_missing_file_raises(tmp_path):
    _write_textures(tmp_path)
    (tmp_path / TEXTURE_FILES[TextureName.ZOMBIE_TEXTURE]).unlink()
    with pytest.raises(FileNotFoundError, match="zombieTexture.png"):
        TextureHandler(tmp_path)


def test_unknown_name_raises(tmp_path):
    _write_textures(tmp_path)
    handler = TextureHandler(tmp_path)
    with pytest.raises(ValueError):
        handler.texture("nope")