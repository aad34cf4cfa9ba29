"""
Resource cache: loads named images once and tells listeners when all are ready
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)


def find_assets_root() -> Path:
    """Return the directory holding ``img/``.

    Works from a source checkout and from a PyInstaller bundle.

    :raises FileNotFoundError: If no assets directory can be found.
    """
    # pylint: disable=protected-access
    if hasattr(sys, "_MEIPASS"):
        candidate = Path(sys._MEIPASS) / "assets"
        if candidate.is_dir():
            return candidate
    # pylint: enable=protected-access

    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / "assets"
        if candidate.is_dir():
            return candidate

    raise FileNotFoundError("Could not locate 'assets' directory.")


def load_image(path: Path):
    """Decode an image file with arcade (returns a PIL image)"""
    import arcade

    return arcade.load_image(path)


class ResourceCache:
    """Image cache keyed by asset name (e.g. ``img/sprites.png``)"""

    def __init__(self, root: Optional[Union[str, Path]] = None,
                 loader: Callable[[Path], Any] = load_image):
        self.root = Path(root) if root is not None else None
        self.loader = loader
        self._cache: Dict[str, Any] = {}
        self._ready_callbacks: List[Callable[[], None]] = []
        self._fired = False

    def _resolve(self, name: str) -> Path:
        if self.root is None:
            self.root = find_assets_root()
        return self.root / name

    def load(self, names: Union[str, Iterable[str]]):
        if isinstance(names, str):
            names = [names]
        names = list(names)
        # queue the whole batch first so ready cannot fire half way through
        for name in names:
            self._cache.setdefault(name, None)
        for name in names:
            self._load(name)
        if self.is_ready() and not self._fired:
            self._fire_ready()

    def _load(self, name: str):
        if self._cache.get(name) is not None:
            return
        try:
            self._cache[name] = self.loader(self._resolve(name))
        except OSError as exc:
            logger.error("Failed to load %s: %s", name, exc)
            return
        logger.debug("Loaded %s", name)

    def get(self, name: str):
        return self._cache.get(name)

    def is_ready(self) -> bool:
        return bool(self._cache) and all(v is not None for v in self._cache.values())

    def on_ready(self, callback: Callable[[], None]):
        """Register ``callback``; runs at once if everything already loaded.

        Callbacks fire a single time, the first time every queued asset is in.
        """
        self._ready_callbacks.append(callback)
        if self._fired:
            callback()

    def _fire_ready(self):
        self._fired = True
        for callback in list(self._ready_callbacks):
            callback()
