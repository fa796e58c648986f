import logging

import pytest

pytest.importorskip("PySide6.QtMultimedia")

from gridpath.app.audio import CuePlayer


def test_missing_sound_file_is_silent(qt_app, tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="gridpath.app.audio"):
        player = CuePlayer({"place": "sound1.wav"}, base_dir=tmp_path)

    assert "Failed to load sound effect 'place'" in caplog.text
    player.play("place")
    player.play("unknown")
    player.stop_all()
