"""Registry of the sound clips bundled with the package."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

SOUND_SUFFIXES = frozenset({".wav", ".flac", ".aiff", ".mp3", ".ogg"})


@dataclass(frozen=True)
class EmbeddedSound:
    """A named, encoded audio clip held in memory."""

    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class SoundRegistry:
    """An ordered, read-only collection of sounds addressed by index or name."""

    def __init__(self, sounds: Iterable[EmbeddedSound] = ()) -> None:
        self._sounds = tuple(sounds)
        self._by_name: dict[str, EmbeddedSound] = {}
        for sound in self._sounds:
            if sound.name in self._by_name:
                raise ValueError(f"duplicate sound name: {sound.name!r}")
            self._by_name[sound.name] = sound

    def __len__(self) -> int:
        return len(self._sounds)

    def __iter__(self) -> Iterator[EmbeddedSound]:
        return iter(self._sounds)

    def name(self, index: int) -> str:
        """Return the name of the sound at ``index``."""
        if not 0 <= index < len(self._sounds):
            raise IndexError(f"sound index out of range: {index}")
        return self._sounds[index].name

    def get(self, name: str) -> EmbeddedSound | None:
        """Return the sound called ``name``, or None if there is none."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [sound.name for sound in self._sounds]


def _sound_name(path: Path) -> str:
    # The name is the file name up to its first dot.
    return path.name.split(".", 1)[0]


def load_directory(directory: str | Path) -> SoundRegistry:
    """Load every audio file in ``directory`` into a registry, sorted by file name."""
    root = Path(directory)
    if not root.exists():
        raise FileNotFoundError(f"sound directory does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")
    files = sorted(
        path for path in root.iterdir()
        if path.is_file() and path.suffix in SOUND_SUFFIXES
    )
    return SoundRegistry(
        EmbeddedSound(_sound_name(path), path.read_bytes()) for path in files
    )


def default_registry() -> SoundRegistry:
    """Return the sounds shipped in the package's ``sounds`` directory."""
    sounds_dir = Path(__file__).resolve().parent / "sounds"
    if not sounds_dir.is_dir():
        return SoundRegistry()
    return load_directory(sounds_dir)