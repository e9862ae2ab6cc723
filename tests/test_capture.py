from __future__ import annotations

import sys
import types

import numpy as np
import pytest

from tuner import main as tuner_main
from tuner.capture import AudioCapture
from tuner.config import AudioConfig
from tuner.window import SampleWindow


class FakeInputStream:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.samplerate = float(kwargs["samplerate"])
        self.started = False
        self.closed = False

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.started = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_sd(monkeypatch):
    module = types.ModuleType("sounddevice")
    module.InputStream = FakeInputStream
    monkeypatch.setitem(sys.modules, "sounddevice", module)
    return module


def test_stream_is_opened_with_audio_config(fake_sd) -> None:
    capture = AudioCapture(AudioConfig(sample_rate=48000, block_size=256, device=3))
    kwargs = capture.stream.kwargs
    assert (kwargs["samplerate"], kwargs["blocksize"], kwargs["channels"], kwargs["device"]) == (48000, 256, 1, 3)
    assert kwargs["callback"] == capture._callback
    assert capture.sample_rate == 48000


def test_callback_keeps_first_channel_and_drops_flagged_blocks(fake_sd) -> None:
    capture = AudioCapture(AudioConfig())
    stereo = np.array([[0.1, 9.0], [0.2, 9.0], [0.3, 9.0]], dtype=np.float32)
    capture._callback(stereo, 3, None, None)
    capture._callback(np.full((3, 2), 5.0, dtype=np.float32), 3, None, "input overflow")
    capture._callback(np.array([[0.4], [0.5]], dtype=np.float32), 2, None, None)

    window = SampleWindow(6)
    assert capture.drain(window) == 5
    assert window.snapshot().tolist() == pytest.approx([0.0, 0.1, 0.2, 0.3, 0.4, 0.5])
    assert capture.drain(window) == 0


def test_callback_copies_the_block(fake_sd) -> None:
    capture = AudioCapture(AudioConfig())
    block = np.array([[0.25], [0.5]], dtype=np.float32)
    capture._callback(block, 2, None, None)
    block[:] = 0.0

    window = SampleWindow(2)
    capture.drain(window)
    assert window.snapshot().tolist() == [0.25, 0.5]


def test_context_manager_starts_and_closes_stream(fake_sd) -> None:
    with AudioCapture(AudioConfig()) as capture:
        assert capture.stream.started
    assert not capture.stream.started
    assert capture.stream.closed


def test_bad_window_fails_before_capture_opens(monkeypatch, capsys) -> None:
    def no_capture(config):
        raise AssertionError("capture opened")

    monkeypatch.setattr(tuner_main, "AudioCapture", no_capture)
    monkeypatch.setattr(sys, "argv", ["tuner", "--headless", "--window", "17"])
    assert tuner_main.main() == 2
    assert "janela" in capsys.readouterr().err
