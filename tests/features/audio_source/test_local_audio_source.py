import pytest
from pathlib import Path

from vocalcoach.features.audio_source.data.local_fs import LocalAudioSource, mime_type_for
from vocalcoach.features.audio_source.domain.interfaces import AudioSourceNotFound


@pytest.fixture
def recordings_root(tmp_path):
    """
    Creates a recordings root with one lesson recording:
    <root>/Lessons/take-1.m4a
    """
    root = tmp_path / "recordings"
    (root / "Lessons").mkdir(parents=True)
    (root / "Lessons" / "take-1.m4a").write_bytes(b"FAKE_AUDIO" * 10)
    return root


def test_resolves_relative_reference(recordings_root):
    payload = LocalAudioSource(recordings_root).resolve("Lessons/take-1.m4a")

    assert payload.data == b"FAKE_AUDIO" * 10
    assert payload.size_bytes == 100
    assert payload.mime_type == "audio/mp4"
    assert payload.path == recordings_root / "Lessons" / "take-1.m4a"


def test_legacy_absolute_path_is_rerooted(recordings_root):
    source = LocalAudioSource(recordings_root)
    stale = "/var/mobile/Containers/Data/Application/OLD-ID/Documents/Lessons/take-1.m4a"

    assert source.resolve(stale).path == recordings_root / "Lessons" / "take-1.m4a"
    assert source.resolve("file://" + stale).path == recordings_root / "Lessons" / "take-1.m4a"


def test_absolute_path_outside_lessons_used_as_is(tmp_path, recordings_root):
    outside = tmp_path / "elsewhere.wav"
    outside.write_bytes(b"RIFF")

    payload = LocalAudioSource(recordings_root).resolve(str(outside))

    assert payload.path == outside
    assert payload.mime_type == "audio/wav"


def test_missing_file_raises_not_found(recordings_root):
    with pytest.raises(AudioSourceNotFound):
        LocalAudioSource(recordings_root).resolve("Lessons/missing.m4a")


def test_directory_is_not_a_recording(recordings_root):
    with pytest.raises(AudioSourceNotFound):
        LocalAudioSource(recordings_root).resolve("Lessons")


def test_not_found_is_a_file_not_found_error(recordings_root):
    with pytest.raises(FileNotFoundError):
        LocalAudioSource(recordings_root).resolve("/does/not/exist.m4a")


@pytest.mark.parametrize("name, expected", [
    ("a.mp3", "audio/mpeg"),
    ("a.MP3", "audio/mpeg"),
    ("a.wav", "audio/wav"),
    ("a.aac", "audio/aac"),
    ("a.m4a", "audio/mp4"),
    ("a.mp4", "audio/mp4"),
    ("a", "audio/mp4"),
])
def test_mime_type_by_extension(name, expected):
    assert mime_type_for(Path(name)) == expected
