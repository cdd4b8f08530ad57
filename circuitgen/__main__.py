import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from circuitgen import (
    PRESETS,
    Scene,
    SvgSurface,
    TikzSurface,
    ValidationError,
    check_scene,
    generate,
    parse_seed,
    preset_options,
    seed_to_fragment,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _write(path: Path, text: str, kind: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing %s document to %s", kind, path)
    path.write_text(text, encoding="utf-8")
    print(f"{kind} document written to {path}")


def _render_frame(seed: int, args: argparse.Namespace) -> Scene:
    options = preset_options(args.preset)
    # One recording feeds both back ends.
    surface = SvgSurface()
    scene = generate(seed, surface, options)

    print(f"Seed: {seed} ({seed_to_fragment(seed)})")
    print(f"Points: {len(scene.points)}")
    print(f"Connections: {len(scene.connections)} ({len(scene.segments)} segment(s))")
    print(f"Nodes: {len(scene.nodes)}")

    if args.check:
        check_scene(scene)
        print("Checks: passed")

    if args.svg_output_path:
        _write(Path(args.svg_output_path), surface.to_svg(title=seed_to_fragment(seed)), "SVG")
    if args.tikz_output_path:
        tikz = TikzSurface(width=surface.width, height=surface.height, commands=list(surface.commands))
        _write(Path(args.tikz_output_path), tikz.to_document(), "TikZ")
    return scene


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate seeded circuit-diagram line art")
    parser.add_argument(
        "--seed",
        help="Seed digits (default: a fresh 12-digit seed)",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="default",
        help="Canvas preset (default: default)",
    )
    parser.add_argument(
        "--svg-output-path",
        help="Write the drawing as a standalone SVG file",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write the drawing as a standalone TikZ document",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Verify point separation and that no committed segments cross",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=1,
        help="Regenerate this many times with fresh seeds, rewriting the outputs (default: 1)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=0.0,
        help="Seconds to wait between frames (default: 0)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    seed = parse_seed(args.seed)
    for frame in range(max(args.frames, 1)):
        if frame:
            if args.interval > 0:
                time.sleep(args.interval)
            seed = parse_seed(None)
        try:
            _render_frame(seed, args)
        except ValidationError as exc:
            logger.error("Scene for seed %s failed checks: %s", seed, exc)
            raise SystemExit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
