"""Sound cues played on placement and reset."""

import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import QSoundEffect

logger = logging.getLogger(__name__)


class CuePlayer:
    """Plays short named sound effects. Cues whose file is missing stay silent."""

    def __init__(self, sounds: Dict[str, str], base_dir: Optional[Path] = None):
        self._effects: Dict[str, QSoundEffect] = {}
        for name, filename in sounds.items():
            path = Path(filename)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            if not path.exists():
                logger.warning("Failed to load sound effect '%s' from %s", name, path)
                continue
            effect = QSoundEffect()
            effect.setSource(QUrl.fromLocalFile(str(path.resolve())))
            self._effects[name] = effect

    def play(self, name: str):
        effect = self._effects.get(name)
        if effect is not None:
            effect.play()

    def stop_all(self):
        for effect in self._effects.values():
            effect.stop()
