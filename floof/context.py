"""Audio playback of registry sounds."""

from __future__ import annotations

import os
import random

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from floof.registry import SoundRegistry, default_registry  # noqa: E402
from floof.vfs import EmbeddedVFS, VFSError  # noqa: E402


class FloofError(Exception):
    """Raised when the audio engine fails or a sound cannot be played."""


class Floof:
    """Holds the audio engine and plays sounds from a registry."""

    def __init__(self, registry: SoundRegistry | None = None, seed: int | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._vfs = EmbeddedVFS(self._registry)
        self._rng = random.Random(seed)
        self._cache: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise FloofError(f"failed to initialise audio engine: {exc}") from exc
        self._open = True

    def sound_count(self) -> int:
        return len(self._registry)

    def sound_name(self, index: int) -> str:
        return self._registry.name(index)

    def _load(self, name: str) -> pygame.mixer.Sound:
        sound = self._cache.get(name)
        if sound is not None:
            return sound
        try:
            with self._vfs.open(name) as handle:
                sound = pygame.mixer.Sound(file=handle)
        except VFSError as exc:
            raise FloofError(f"cannot open sound {name!r}: {exc}") from exc
        except pygame.error as exc:
            raise FloofError(f"cannot decode sound {name!r}: {exc}") from exc
        self._cache[name] = sound
        return sound

    def play(self, name: str) -> None:
        """Start playing the sound called ``name`` without waiting for it."""
        if not self._open:
            raise FloofError("context is closed")
        self._load(name).play()

    def play_random(self) -> str:
        """Play a randomly chosen sound and return its name."""
        if len(self._registry) == 0:
            raise FloofError("no sounds available")
        name = self._registry.name(self._rng.randrange(len(self._registry)))
        self.play(name)
        return name

    def close(self) -> None:
        if not self._open:
            return
        self._cache.clear()
        pygame.mixer.quit()
        self._open = False

    def __enter__(self) -> Floof:
        return self

    def __exit__(self, *args) -> None:
        self.close()