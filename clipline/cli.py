"""Command-line interface for clipline.

WHY: Captions and clip checks are normally driven by the video pipeline,
but editors and operators need to regenerate a caption file, try a clip
range, or eyeball a transcript's pauses from a terminal without the rest
of the system running.

HOW: argparse with three subcommands, all reading a WhisperX transcript
JSON file (or "-" for stdin):
  captions — write the ASS caption file for a segment range
  clip     — validate a proposed clip against existing ones, print the
             resolution and padded timing as JSON
  rows     — print the transcript with timestamps and pause markers
Status messages go to stderr; content goes to stdout unless -o is given.

RULES:
- Exit codes: 0 = success, 1 = error, 2 = clip proposal rejected
- Without --starts-at/--ends-at, captions use the padded clip timing
- --verbose turns on DEBUG logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from clipline import config
from clipline.captions import render_clip_captions
from clipline.clips.intervals import (
    ClipRules,
    calculate_pause_timing,
    propose_create,
    propose_update,
)
from clipline.clips.rows import build_transcript_rows
from clipline.core.ir import ClipInterval, Transcript
from clipline.core.loader import TranscriptError, load_transcript
from clipline.formatters import FORMATTERS

EXIT_REJECTED = 2

# CLI flag dest -> style option key
_STYLE_FLAGS = {
    "font_size": "fontSize",
    "outline_width": "outlineWidth",
    "margin_h": "marginH",
    "margin_v": "marginV",
    "primary_color": "primaryColor",
    "highlight_color": "highlightColor",
}


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _read_transcript(path: str, duration_s: Optional[float]) -> Transcript:
    try:
        if path == "-":
            data = json.load(sys.stdin)
        else:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
    except OSError as e:
        _fail("Cannot read {}: {}".format(path, e))
    except json.JSONDecodeError as e:
        _fail("Invalid JSON in {}: {}".format(path, e))

    try:
        return load_transcript(data, duration_s=duration_s)
    except TranscriptError as e:
        _fail(str(e))


def _parse_range(text: str) -> ClipInterval:
    """Parse "START-END" into a ClipInterval (used for --existing)."""
    try:
        start, end = (int(p) for p in text.split("-", 1))
    except ValueError:
        raise argparse.ArgumentTypeError(
            "expected START-END segment range, got {!r}".format(text)
        ) from None
    return ClipInterval(start_index=start, end_index=end)


def _video_duration(transcript: Transcript) -> float:
    if transcript.duration_s is not None:
        return transcript.duration_s
    if transcript.segments:
        return transcript.segments[-1].end
    return 0.0


def _cmd_captions(args: argparse.Namespace) -> None:
    transcript = _read_transcript(args.transcript, args.duration)
    segments = transcript.segments
    if not segments:
        _fail("Transcript has no segments")

    end_index = args.end_index if args.end_index is not None else len(segments) - 1
    start_index, end_index = sorted((args.start_index, end_index))
    if start_index < 0 or end_index >= len(segments):
        _fail("Segment range {}-{} outside 0-{}".format(start_index, end_index, len(segments) - 1))

    starts_at, ends_at = args.starts_at, args.ends_at
    if starts_at is None or ends_at is None:
        timing = calculate_pause_timing(
            start_index, end_index, segments, _video_duration(transcript)
        )
        if starts_at is None:
            starts_at = timing.starts_at
        if ends_at is None:
            ends_at = timing.ends_at

    options: Dict[str, Any] = {}
    for dest, key in _STYLE_FLAGS.items():
        value = getattr(args, dest)
        if value is not None:
            options[key] = value

    try:
        output = render_clip_captions(
            transcript, start_index, end_index, starts_at, ends_at,
            style=args.style, options=options,
        )
    except ValueError as e:
        _fail(str(e))

    if output is None:
        _fail("No words to caption in segments {}-{}".format(start_index, end_index))

    if args.output:
        Path(args.output).write_text(output.content, encoding="utf-8")
        _status("Wrote {} captions for segments {}-{} to {}".format(
            args.style, start_index, end_index, args.output
        ))
    else:
        sys.stdout.write(output.content)


def _cmd_clip(args: argparse.Namespace) -> None:
    transcript = _read_transcript(args.transcript, args.duration)
    segments = transcript.segments
    existing = list(args.existing or [])
    # Existing clips are numbered 1..n in the order given.
    for n, clip in enumerate(existing, 1):
        clip.id = n

    rules = ClipRules(max_duration_s=args.max_duration)
    if args.update is not None:
        result = propose_update(
            len(segments), existing, args.update, args.start, args.end, segments, rules
        )
    else:
        result = propose_create(
            len(segments), existing, args.start, args.end, segments, rules
        )

    report: Dict[str, Any] = {"accepted": result.accepted}
    if result.rejection is not None:
        report["rejection"] = {
            "kind": result.rejection.kind.value,
            "detail": result.rejection.detail,
        }
    else:
        interval = result.interval
        timing = calculate_pause_timing(
            interval.start_index, interval.end_index, segments, _video_duration(transcript)
        )
        report.update({
            "start_index": interval.start_index,
            "end_index": interval.end_index,
            "truncated": result.truncated,
            "boundaries_changed": result.boundaries_changed,
            "pause_before": round(timing.pause_before, 3),
            "pause_after": round(timing.pause_after, 3),
            "starts_at": round(timing.starts_at, 3),
            "ends_at": round(timing.ends_at, 3),
            "duration": round(timing.duration, 3),
        })

    print(json.dumps(report, indent=2))
    if not result.accepted:
        sys.exit(EXIT_REJECTED)


def _cmd_rows(args: argparse.Namespace) -> None:
    transcript = _read_transcript(args.transcript, None)
    rows = build_transcript_rows(transcript.segments, gap_threshold_s=args.gap_threshold)
    for row in rows:
        if row.type == "gap":
            print("        -- {} --".format(row.label))
        else:
            print("[{}] {}".format(row.timestamp, row.text))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser (separate from main() for testability)."""
    parser = argparse.ArgumentParser(
        prog="clipline",
        description="Generate clip captions and validate clip ranges from "
                    "word-level transcripts.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # captions
    cap = sub.add_parser("captions", help="Write the ASS caption file for a clip.")
    cap.add_argument("transcript", help="Transcript JSON file, or - for stdin.")
    cap.add_argument("--start-index", type=int, default=0,
                     help="First segment of the clip (default: %(default)s).")
    cap.add_argument("--end-index", type=int, default=None,
                     help="Last segment of the clip (default: last segment).")
    cap.add_argument("--starts-at", type=float, default=None,
                     help="Absolute clip start in seconds (default: padded segment start).")
    cap.add_argument("--ends-at", type=float, default=None,
                     help="Absolute clip end in seconds (default: padded segment end).")
    cap.add_argument("--duration", type=float, default=None,
                     help="Source video duration in seconds, for padding the last segment.")
    cap.add_argument("--style", choices=sorted(FORMATTERS), default="karaoke",
                     help="Caption style (default: %(default)s).")
    cap.add_argument("--font-size", type=int, default=None)
    cap.add_argument("--outline-width", type=int, default=None)
    cap.add_argument("--margin-h", type=int, default=None)
    cap.add_argument("--margin-v", type=int, default=None)
    cap.add_argument("--primary-color", default=None, help="ASS colour, e.g. &H00FFFFFF.")
    cap.add_argument("--highlight-color", default=None, help="ASS colour, e.g. &H0000E5FF.")
    cap.add_argument("-o", "--output", default=None,
                     help="Output .ass path (default: stdout).")
    cap.set_defaults(func=_cmd_captions)

    # clip
    clip = sub.add_parser("clip", help="Validate a proposed clip range.")
    clip.add_argument("transcript", help="Transcript JSON file, or - for stdin.")
    clip.add_argument("start", type=int, help="First segment index.")
    clip.add_argument("end", type=int, help="Last segment index (inclusive).")
    clip.add_argument("--existing", type=_parse_range, action="append", default=None,
                      help="Existing clip as START-END. Repeatable; numbered 1..n.")
    clip.add_argument("--update", type=int, default=None, metavar="N",
                      help="Treat the proposal as an edit of existing clip N.")
    clip.add_argument("--duration", type=float, default=None,
                      help="Source video duration in seconds.")
    clip.add_argument("--max-duration", type=float, default=config.MAX_CLIP_DURATION_S,
                      help="Clip duration cap in seconds (default: %(default)s).")
    clip.set_defaults(func=_cmd_clip)

    # rows
    rows = sub.add_parser("rows", help="Print the transcript with pause markers.")
    rows.add_argument("transcript", help="Transcript JSON file, or - for stdin.")
    rows.add_argument("--gap-threshold", type=float, default=config.ROW_GAP_THRESHOLD_S,
                      help="Show pauses longer than this many seconds (default: %(default)s).")
    rows.set_defaults(func=_cmd_rows)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``clipline`` and ``python -m clipline``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args.func(args)


if __name__ == "__main__":
    main()
