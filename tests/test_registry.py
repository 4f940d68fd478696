import pytest

from floof.registry import (
    EmbeddedSound,
    SoundRegistry,
    default_registry,
    load_directory,
)


@pytest.fixture
def sound_dir(tmp_path):
    (tmp_path / "b.wav").write_bytes(b"bee")
    (tmp_path / "a.ogg").write_bytes(b"ay")
    (tmp_path / "notes.txt").write_bytes(b"ignored")
    (tmp_path / "d.tar.mp3").write_bytes(b"dee")
    (tmp_path / "upper.WAV").write_bytes(b"ignored")
    return tmp_path


def test_load_directory_sorted_and_filtered(sound_dir):
    registry = load_directory(sound_dir)
    assert registry.names() == ["a", "b", "d"]


def test_load_directory_reads_data(sound_dir):
    registry = load_directory(sound_dir)
    assert registry.get("b").data == b"bee"
    assert registry.get("d").size == 3


def test_load_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_directory(tmp_path / "missing")


def test_load_file_as_directory(tmp_path):
    path = tmp_path / "file.wav"
    path.write_bytes(b"x")
    with pytest.raises(NotADirectoryError):
        load_directory(path)


def test_empty_directory(tmp_path):
    registry = load_directory(tmp_path)
    assert len(registry) == 0
    assert registry.names() == []


def test_len_iter_and_name():
    sounds = [EmbeddedSound("x", b"1"), EmbeddedSound("y", b"22")]
    registry = SoundRegistry(sounds)
    assert len(registry) == 2
    assert list(registry) == sounds
    assert registry.name(1) == "y"


@pytest.mark.parametrize("index", [-1, 2, 100])
def test_name_out_of_range(index):
    registry = SoundRegistry([EmbeddedSound("x", b"1"), EmbeddedSound("y", b"2")])
    with pytest.raises(IndexError):
        registry.name(index)


def test_get_missing_returns_none():
    registry = SoundRegistry([EmbeddedSound("x", b"1")])
    assert registry.get("nope") is None


def test_duplicate_names_rejected():
    with pytest.raises(ValueError):
        SoundRegistry([EmbeddedSound("x", b"1"), EmbeddedSound("x", b"2")])


def test_default_registry_consistent():
    registry = default_registry()
    assert registry.names() == [sound.name for sound in registry]
    assert len(registry.names()) == len(registry)