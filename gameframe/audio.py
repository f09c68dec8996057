"""WAVE file parsing and a registry of loaded sounds with playback state."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

DEFAULT_DIRECTORY = "Resources/Audio/"

_CHUNK_HEADER = struct.Struct("<4si")
_RIFF_HEADER = struct.Struct("<4si4s")
_FORMAT_FULL = struct.Struct("<HHIIHHH")  # 18 bytes


class WaveFormatError(ValueError):
    """Raised when data is not a well-formed RIFF/WAVE file."""


@dataclass(frozen=True)
class WaveFormat:
    """Contents of the ``fmt `` chunk."""

    format_tag: int = 0
    channels: int = 0
    samples_per_sec: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0
    cb_size: int = 0


@dataclass(frozen=True)
class SoundData:
    """Wave format and raw sample bytes of one sound."""

    wfex: WaveFormat
    buffer: bytes

    @property
    def buffer_size(self) -> int:
        return len(self.buffer)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def take(self, size: int) -> bytes:
        if size < 0 or self._pos + size > len(self._data):
            raise WaveFormatError("unexpected end of wave data")
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def unpack(self, layout: struct.Struct) -> tuple:
        return layout.unpack(self.take(layout.size))


def parse_wave(data: bytes) -> SoundData:
    """Parse RIFF/WAVE bytes: ``fmt `` chunk, an optional ``JUNK`` chunk, then ``data``."""
    reader = _Reader(bytes(data))

    riff_id, _, wave_type = reader.unpack(_RIFF_HEADER)
    if riff_id != b"RIFF":
        raise WaveFormatError("missing RIFF header")
    if wave_type != b"WAVE":
        raise WaveFormatError("RIFF type is not WAVE")

    fmt_id, fmt_size = reader.unpack(_CHUNK_HEADER)
    if fmt_id != b"fmt ":
        raise WaveFormatError("missing fmt chunk")
    if not 0 <= fmt_size <= _FORMAT_FULL.size:
        raise WaveFormatError(f"fmt chunk of {fmt_size} bytes is too large")
    fmt_body = reader.take(fmt_size).ljust(_FORMAT_FULL.size, b"\0")
    wfex = WaveFormat(*_FORMAT_FULL.unpack(fmt_body))

    chunk_id, chunk_size = reader.unpack(_CHUNK_HEADER)
    if chunk_id == b"JUNK":
        reader.take(chunk_size)
        chunk_id, chunk_size = reader.unpack(_CHUNK_HEADER)
    if chunk_id != b"data":
        raise WaveFormatError("missing data chunk")

    return SoundData(wfex=wfex, buffer=reader.take(chunk_size))


@dataclass
class _Voice:
    playing: bool = False
    looping: bool = False
    volume: float = 1.0


class SoundLibrary:
    """Sounds loaded by file name, each with its own playback voice."""

    def __init__(self, directory_path: Union[str, Path] = DEFAULT_DIRECTORY) -> None:
        self.directory_path = Path(directory_path)
        self.sounds: Dict[str, SoundData] = {}
        self._voices: Dict[str, _Voice] = {}

    def _voice(self, filename: str) -> _Voice:
        try:
            return self._voices[filename]
        except KeyError:
            raise KeyError(f"sound {filename!r} is not loaded") from None

    def load_wave(self, filename: str) -> SoundData:
        """Load a wave file from the directory; loading the same name twice is a no-op."""
        if filename in self.sounds:
            return self.sounds[filename]
        sound = parse_wave((self.directory_path / filename).read_bytes())
        self.sounds[filename] = sound
        self._voices[filename] = _Voice()
        return sound

    def play_wave(self, filename: str, loop: bool = False) -> None:
        """Start the sound from the beginning, looping forever if asked."""
        voice = self._voice(filename)
        voice.playing = True
        voice.looping = bool(loop)

    def stop_wave(self, filename: str) -> None:
        self._voice(filename).playing = False

    def is_playing(self, filename: str) -> bool:
        return self._voice(filename).playing

    def is_looping(self, filename: str) -> bool:
        return self._voice(filename).looping

    def volume(self, filename: str) -> float:
        return self._voice(filename).volume

    def set_volume(self, filename: str, volume: float) -> None:
        self._voice(filename).volume = float(volume)

    def finalize(self) -> None:
        """Release every loaded sound and voice."""
        self.sounds.clear()
        self._voices.clear()