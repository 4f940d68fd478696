# floof

A small library that plays cat sounds. Sounds are gathered into a registry
and can be played by name or picked at random. Playback goes through
`pygame`'s mixer.

## Installation

```
pip install floof
```

## Command line

```
meow
meow --sounds DIR
```

`meow` lists every available sound, then plays one at random and waits for
Enter before exiting. With `--sounds DIR` the sounds are loaded from `DIR`
instead of the package's own `sounds` directory. If there are no sounds it
prints a message saying so and exits. If the sounds or the audio engine
cannot be set up it prints `Failed to initialise floof` and exits with
status 1; if playback fails it prints `Playback failed!` and exits normally.

## Library use

```python
from floof.context import Floof, FloofError

with Floof() as floof:
    print(f"{floof.sound_count()} sound(s) available")
    for index in range(floof.sound_count()):
        print(floof.sound_name(index))
    try:
        name = floof.play_random()
        print(f"playing {name}")
    except FloofError as exc:
        print(f"Playback failed: {exc}")
```

`Floof(registry=None, seed=None)` starts the audio engine. Without a
registry it uses `default_registry()`; a `seed` makes the random choice
repeatable.

- `sound_count()` returns the number of sounds.
- `sound_name(index)` returns the name at `index`, raising `IndexError`
  when the index is out of range.
- `play(name)` starts a sound and returns at once. Decoded sounds are
  cached for reuse.
- `play_random()` plays a randomly chosen sound and returns its name.
- `close()` stops the engine; it is also called on leaving a `with` block.

`FloofError` is raised when the engine cannot start, when a sound cannot
be found or decoded, when there are no sounds to choose from, and when
playing on a closed context.

### Registries

`floof.registry.SoundRegistry` holds `EmbeddedSound` entries (a `name`,
the encoded `data` bytes and its `size`) in order. Names must be unique;
a duplicate raises `ValueError`. `len()` gives how many there are,
iterating yields each entry, `names()` lists their names, `name(index)`
returns the name at an index and `get(name)` returns the sound with that
name or `None`.

- `load_directory(directory)` builds a registry from the files ending in
  `.wav`, `.flac`, `.aiff`, `.mp3` or `.ogg` in a directory, sorted by file
  name. Each sound is named after its file name up to the first dot. A
  missing directory raises `FileNotFoundError`, a path that is not a
  directory raises `NotADirectoryError`.
- `default_registry()` loads the `sounds` directory inside the installed
  `floof` package, or returns an empty registry when there is none.

### In-memory files

`floof.vfs.EmbeddedVFS(registry)` opens the sounds of a registry by name
as read-only `EmbeddedFile` objects, which support `read`, `seek`, `tell`,
`size` and `close` and can be used in a `with` block. `read()` with no
size or a negative one reads to the end. Failures raise subclasses of
`VFSError` (itself an `OSError`):

- `AccessDeniedError` when the mode asks for writing (`w`, `a`, `x` or `+`).
- `SoundNotFoundError` when no sound has the given name.
- `BadSeekError` when a seek would land before the start or past the end.

An unknown `whence` passed to `seek` raises `ValueError`, as does any
operation on a closed file.

## What it does not do

The package does not come with sounds built in: it plays whatever audio
files are placed in its `sounds` directory or passed with `--sounds`. It
has no controls for stopping, pausing or adjusting the volume of a sound
once started.