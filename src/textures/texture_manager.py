"""Id-keyed asset registry used by scenes.

Scene documents list their assets as ``{"id": ..., "src": ...}`` entries.
`AssetLoader` loads them up front (images into pygame Surfaces, audio
through the AudioManager) and hands them out by id. Loading is safe when
files are missing: images fall back to the placeholder, audio is skipped.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import pygame

from textures.texture_utils import load_image
from textures.resourcepath import ASSETS_PATH

AssetEntry = Union[str, Mapping[str, object]]


def resolve_asset_path(src: str, base_path: Optional[str] = None) -> str:
    """Resolve a document-relative asset path.

    Absolute paths are returned unchanged. Relative ones are taken relative
    to the scene document's directory when known, else to ASSETS_PATH.
    """
    if os.path.isabs(src):
        return src
    root = base_path if base_path is not None else ASSETS_PATH
    return os.path.join(root, src)


def _entry_id_and_src(entry: AssetEntry) -> Optional[Tuple[str, str]]:
    if isinstance(entry, str):
        # bare path: id is the file name without extension
        return os.path.splitext(os.path.basename(entry))[0], entry
    src = entry.get("src") or entry.get("path")
    asset_id = entry.get("id")
    if not src:
        print(f"[AssetLoader] Warning: asset entry without src: {dict(entry)}")
        return None
    if not asset_id:
        asset_id = os.path.splitext(os.path.basename(str(src)))[0]
    return str(asset_id), str(src)


class AssetLoader:
    def __init__(self, audio_manager=None) -> None:
        self.audio_manager = audio_manager
        self._images: Dict[str, pygame.Surface] = {}

    # --------------------------- images ---------------------------------
    def load_images(
        self, entries: Iterable[AssetEntry], base_path: Optional[str] = None
    ) -> List[str]:
        """Load every image entry; returns the ids registered."""
        loaded: List[str] = []
        for entry in entries:
            parsed = _entry_id_and_src(entry)
            if parsed is None:
                continue
            asset_id, src = parsed
            path = resolve_asset_path(src, base_path)
            if not os.path.exists(path):
                print(f"[AssetLoader] Missing image '{asset_id}': {path}")
            self._images[asset_id] = load_image(path)
            loaded.append(asset_id)
        return loaded

    def get_image(self, asset_id: str) -> Optional[pygame.Surface]:
        return self._images.get(asset_id)

    def has_image(self, asset_id: str) -> bool:
        return asset_id in self._images

    # --------------------------- audio ----------------------------------
    def load_audio_files(
        self, entries: Iterable[AssetEntry], base_path: Optional[str] = None
    ) -> List[str]:
        if self.audio_manager is None:
            return []
        loaded: List[str] = []
        for entry in entries:
            parsed = _entry_id_and_src(entry)
            if parsed is None:
                continue
            asset_id, src = parsed
            volume = entry.get("volume") if isinstance(entry, Mapping) else None
            path = resolve_asset_path(src, base_path)
            if self.audio_manager.load(asset_id, path, volume=volume):
                loaded.append(asset_id)
        return loaded

    # --------------------------- lifetime -------------------------------
    def unload_assets(self, asset_ids: Iterable[str]) -> None:
        for asset_id in asset_ids:
            self._images.pop(asset_id, None)
            if self.audio_manager is not None:
                self.audio_manager.unload(asset_id)

    def clear(self) -> None:
        self._images.clear()


__all__ = ["AssetLoader", "resolve_asset_path"]
