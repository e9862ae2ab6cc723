from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Union

from .analysis import TunerPipeline
from .capture import AudioCapture, list_devices
from .config import AudioConfig, DisplayConfig, TunerConfiguration
from .display import ConsoleDisplay, build_display_state
from .window import SampleWindow


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Afinador cromatico por autocorrelacao")
    parser.add_argument("--device", help="Dispositivo de entrada de audio (indice ou nome)")
    parser.add_argument("--samplerate", type=int, default=44100, help="Sample rate")
    parser.add_argument("--window", type=int, default=2048, help="Tamanho da janela de analise (par, >= 16)")
    parser.add_argument("--blocksize", type=int, default=512, help="Tamanho do bloco de audio")
    parser.add_argument("--reference", type=float, default=440.0, help="Frequencia do A4 em Hz")
    parser.add_argument("--fullscreen", action="store_true", help="Tela cheia")
    parser.add_argument("--headless", action="store_true", help="Sem UI, leitura no terminal")
    parser.add_argument("--list-devices", action="store_true", help="Lista dispositivos de audio e sai")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    if args.list_devices:
        list_devices()
        return 0

    try:
        tuner_cfg = TunerConfiguration(reference_frequency=args.reference)
        audio_cfg = AudioConfig(
            sample_rate=args.samplerate,
            window_size=args.window,
            block_size=args.blocksize,
            device=_parse_device(args.device),
        )
    except ValueError as exc:
        print(f"Configuracao invalida: {exc}", file=sys.stderr)
        return 2
    display_cfg = DisplayConfig()

    pipeline = TunerPipeline(tuner_cfg)
    window = SampleWindow(audio_cfg.window_size)

    if args.headless:
        sink = ConsoleDisplay(display_cfg)
    else:
        from .ui import PygameUI

        sink = PygameUI(display_cfg, fullscreen=args.fullscreen)

    try:
        with AudioCapture(audio_cfg) as capture:
            running = True
            while running:
                capture.drain(window)
                reading = pipeline.analyze(window.snapshot(), capture.sample_rate)
                running = sink.update(build_display_state(reading, display_cfg))
                if args.headless:
                    time.sleep(1.0 / display_cfg.refresh_hz)
    except KeyboardInterrupt:
        pass
    finally:
        sink.close()
    return 0


def _parse_device(raw: Optional[str]) -> Optional[Union[int, str]]:
    if raw is None:
        return None
    return int(raw) if raw.isdigit() else raw


if __name__ == "__main__":
    raise SystemExit(main())
