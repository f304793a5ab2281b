"""Loading of the game's textures from image files."""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType

import pygame

from .definitions import TextureName

DEFAULT_TEXTURE_PATH = "textures"

TEXTURE_FILES = MappingProxyType(
    {
        TextureName.BACKGROUND_TEXTURE: "mapTexture_huge.png",
        TextureName.PLAYER_TEXTURE: "playerAnimTexture.png",
        TextureName.PLAYER_MOVE_ANIMATION: "playerMoveAnimation.png",
        TextureName.PLAYER_IDLE_ANIMATION: "playerIdleAnimation.png",
        TextureName.ZOMBIE_TEXTURE: "zombieTexture.png",
        TextureName.XP_ORB_TEXTURE: "xpOrbTexture.png",
        TextureName.CHEST_TEXTURE: "chestTexture.png",
        TextureName.CARD_TEXTURE: "cardTexture_biggest.png",
        TextureName.DAMAGE_UPGRADE_TEXTURE: "damageUpgradeTexture.png",
        TextureName.HEALTH_UPGRADE_TEXTURE: "healthUpgradeTexture.png",
        TextureName.MOVE_SPEED_UPGRADE_TEXTURE: "moveSpeedUpgradeTexture.png",
        TextureName.FIRE_SPEED_UPGRADE_TEXTURE: "fireSpeedUpgradeTexture.png",
        TextureName.PICKUP_UPGRADE_TEXTURE: "pickupUpgradeTexture.png",
        TextureName.THORN_AURA_TEXTURE: "thornAuraTexture.png",
        TextureName.BOLT_TEXTURE: "boltTexture.png",
        TextureName.BUTTON_TEXTURE: "buttonTexture.png",
        TextureName.MAIN_MENU_BACKGROUND_TEXTURE: "mainMenuBackgroundTexture.png",
        TextureName.ALT_MENU_BACKGROUND_TEXTURE: "altMenuBackground.png",
        TextureName.CHARACTER_SELECT_BORDER_TEXTURE: "characterSelectBorder.png",
    }
)


class TextureHandler:
    """Loads every texture once and hands them out by name."""

    def __init__(self, base_path: str | os.PathLike[str] = DEFAULT_TEXTURE_PATH) -> None:
        self.base_path = Path(base_path)
        self._textures = {
            name: self._load(self.base_path / file_name)
            for name, file_name in TEXTURE_FILES.items()
        }

    @staticmethod
    def _load(path: Path) -> pygame.Surface:
        if not path.is_file():
            raise FileNotFoundError(f"texture not found: {path}")
        image = pygame.image.load(str(path))
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def texture(self, name: TextureName) -> pygame.Surface:
        """The texture of the given name; ValueError for an unknown name."""
        return self._textures[TextureName(name)]