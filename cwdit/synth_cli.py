"""Command that synthesises a mono CW WAV file from text."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .synth import SynthError, SynthOptions, Track, synth_to_path

PROG = "cwdit-synth"


def parse_channel(spec: str) -> Track:
    """Parse a ``TEXT:WPM:TONE`` spec; ``TEXT`` itself may contain colons."""
    parts = spec.rsplit(":", 2)
    if len(parts) != 3:
        raise ValueError(f"expected TEXT:WPM:TONE, got {spec!r}")
    text, wpm_text, tone_text = parts
    try:
        tone = float(tone_text)
    except ValueError as exc:
        raise ValueError(f"bad tone in {spec!r}: {exc}") from None
    try:
        wpm = float(wpm_text)
    except ValueError as exc:
        raise ValueError(f"bad wpm in {spec!r}: {exc}") from None
    return Track(text, wpm, tone)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Synthesise a mono CW WAV file from text"
    )
    parser.add_argument("-o", "--output", required=True, help="output WAV path")
    parser.add_argument(
        "-t", "--text", default="CQ DE W1AW",
        help="message to encode; ignored when --channel is given",
    )
    parser.add_argument(
        "-f", "--tone", type=float, default=700.0,
        help="tone frequency in Hz for the single-track form",
    )
    parser.add_argument(
        "-w", "--wpm", type=float, default=20.0,
        help="keying speed in words per minute for the single-track form",
    )
    parser.add_argument(
        "-s", "--sample-rate", type=int, default=8000, help="output sample rate in Hz"
    )
    parser.add_argument(
        "-c", "--channel", dest="channels", action="append", default=[],
        help="add a keyed channel as TEXT:WPM:TONE (repeatable)",
    )
    parser.add_argument(
        "--lead", type=float, default=0.2, help="lead silence in seconds"
    )
    parser.add_argument(
        "--tail", type=float, default=0.2, help="tail silence in seconds"
    )
    parser.add_argument(
        "--ramp-ms", type=float, default=10.0, help="on/off ramp length in ms"
    )
    parser.add_argument(
        "--amplitude", type=float, default=0.8, help="peak post-mix amplitude (0.0-1.0)"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.channels:
            tracks = [parse_channel(spec) for spec in args.channels]
        else:
            tracks = [Track(args.text, args.wpm, args.tone)]
        options = SynthOptions(
            sample_rate=args.sample_rate,
            lead_silence_s=args.lead,
            tail_silence_s=args.tail,
            ramp_ms=args.ramp_ms,
            amplitude=args.amplitude,
        )
        synth_to_path(args.output, tracks, options)
    except (SynthError, ValueError, OSError) as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())