"""Music and sound effects, each played only when sound is on."""

from pathlib import Path
from types import TracebackType
from typing import Any

import pygame

DEFAULT_ASSETS_DIR = Path("assets") / "mix"

_INTRO_FILE = "intro_music.mp3"
_BACKGROUND_FILE = "background_music.mp3"
_EFFECT_FILES = {
    "start": "start_sound.mp3",
    "move": "move_sound.mp3",
    "rotate": "rotate_sound.mp3",
    "drop": "drop_sound.mp3",
    "land": "land_sound.mp3",
    "score": "score_sound.mp3",
    "high_score": "highscore_sound.mp3",
    "game_over": "gameover_sound.mp3",
}


class Sound:
    """Plays the game's music and effects.

    If the audio device cannot be opened, or a file is missing, the
    corresponding calls do nothing.
    """

    def __init__(self, assets_dir: str | Path = DEFAULT_ASSETS_DIR, mixer: Any = None) -> None:
        self._mixer = pygame.mixer if mixer is None else mixer
        self._assets = Path(assets_dir)
        self._intro: Path | None = None
        self._background: Path | None = None
        self._effects: dict[str, Any] = {}
        self.available = False
        try:
            self._mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
        except pygame.error:
            return
        self.available = True
        self._intro = self._music_path(_INTRO_FILE)
        self._background = self._music_path(_BACKGROUND_FILE)
        for name, filename in _EFFECT_FILES.items():
            effect = self._load_effect(filename)
            if effect is not None:
                self._effects[name] = effect

    def __enter__(self) -> "Sound":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release the audio device."""
        if self.available:
            self._mixer.quit()
            self.available = False
            self._effects.clear()

    def _music_path(self, filename: str) -> Path | None:
        path = self._assets / filename
        return path if path.is_file() else None

    def _load_effect(self, filename: str) -> Any:
        path = self._assets / filename
        if not path.is_file():
            return None
        try:
            return self._mixer.Sound(str(path))
        except pygame.error:
            return None

    def _play_music(self, path: Path | None, loops: int, muted: bool) -> None:
        if muted or path is None or not self.available:
            return
        try:
            self._mixer.music.load(str(path))
            self._mixer.music.play(loops)
        except pygame.error:
            pass

    def _play_effect(self, name: str, muted: bool) -> None:
        effect = self._effects.get(name)
        if not muted and effect is not None:
            effect.play()

    def play_intro_music(self, muted: bool) -> None:
        self._play_music(self._intro, 0, muted)

    def play_background_music(self, muted: bool) -> None:
        self._play_music(self._background, -1, muted)

    def pause_background_music(self) -> None:
        if self.available:
            self._mixer.music.pause()

    def resume_background_music(self, muted: bool) -> None:
        if not muted and self._background is not None and self.available:
            self._mixer.music.unpause()

    def play_start_sound(self, muted: bool) -> None:
        self._play_effect("start", muted)

    def play_move_sound(self, muted: bool) -> None:
        self._play_effect("move", muted)

    def play_rotate_sound(self, muted: bool) -> None:
        self._play_effect("rotate", muted)

    def play_drop_sound(self, muted: bool) -> None:
        self._play_effect("drop", muted)

    def play_land_sound(self, muted: bool) -> None:
        self._play_effect("land", muted)

    def play_score_sound(self, muted: bool) -> None:
        self._play_effect("score", muted)

    def play_new_high_score_sound(self, muted: bool) -> None:
        self._play_effect("high_score", muted)

    def play_game_over_sound(self, muted: bool) -> None:
        self._play_effect("game_over", muted)