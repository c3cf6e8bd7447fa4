#!/usr/bin/env python3
"""Render a canvas and export it as PNG.

Builds a canvas from the render config, optionally plots a projectile
trajectory (Point/Vector algebra driving canvas writes), and saves the
result atomically.

Refactored architecture:
    - render_main(config_path, ...) → dict
        * Callable function (used by tests)
        * Returns: {output_path, width, height, encoding, pixels_written}
    - CLI entry point: if __name__ == "__main__"

CLI:
    python scripts/render_canvas.py
    python scripts/render_canvas.py --demo --output outputs/projectile.png
    python scripts/render_canvas.py --size 64 48 --encoding truncate

Exit codes:
    0  PNG written
    1  export failed (header or data stage; see log)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.raster import Canvas, ExportError, GridCoord
from src.tuples import Color, Point, Vector
from src.utils import logging_config, validators

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "configs/render_canvas_v1.yaml"

TRAJECTORY_COLOR = Color(1.0, 0.3, 0.2)


def plot_projectile(
    canvas: Canvas,
    color: Color = TRAJECTORY_COLOR,
    max_ticks: int = 10_000
) -> int:
    """Trace a projectile under gravity and wind, marking each position.

    Parameters
    ----------
    canvas : Canvas
        Target canvas; y is flipped so the ground is the bottom row
    color : Color
        Trajectory color
    max_ticks : int
        Safety bound on simulation steps

    Returns
    -------
    int
        Number of cell writes (positions that landed inside the canvas)
    """
    position = Point(0.0, 1.0, 0.0)
    velocity = Vector(1.0, 1.8, 0.0).normalize().scale(11.25)
    gravity = Vector(0.0, -0.1, 0.0)
    wind = Vector(-0.01, 0.0, 0.0)

    written = 0
    for _ in range(max_ticks):
        if position.y <= 0.0:
            break

        x = int(round(position.x))
        y = canvas.height - int(round(position.y))
        if x >= 0 and y >= 0 and canvas.in_bounds(GridCoord(x, y)):
            canvas.write_color(GridCoord(x, y), color)
            written += 1

        position = position.add(velocity)
        velocity = velocity.add(gravity).add(wind)

    logger.debug(f"Projectile plotted: {written} cells")
    return written


def render_main(
    config_path: str = DEFAULT_CONFIG,
    output_path: Optional[str] = None,
    size: Optional[Tuple[int, int]] = None,
    encoding: Optional[str] = None,
    demo: bool = False
) -> Dict:
    """Build, populate and save a canvas.

    Parameters
    ----------
    config_path : str
        render_canvas.v1 YAML file
    output_path : str, optional
        PNG path; defaults to export.output_path from the config
    size : (int, int), optional
        (width, height) override
    encoding : str, optional
        "truncate" or "scaled" override
    demo : bool
        Plot the projectile trajectory before export

    Returns
    -------
    dict
        output_path, width, height, encoding, pixels_written

    Raises
    ------
    ExportError
        If the canvas cannot be encoded (e.g. zero area)
    """
    cfg = validators.load_render_canvas_config(config_path)

    width, height = size if size else (cfg.canvas.width, cfg.canvas.height)
    encoding = encoding or cfg.export.encoding
    out = Path(output_path or cfg.export.output_path)

    logging_config.push_context(canvas=f"{width}x{height}")
    logger.info(f"Rendering {width}x{height} canvas → {out} (encoding={encoding})")

    try:
        canvas = Canvas(width, height)
        written = plot_projectile(canvas) if demo else 0
        canvas.save(out, encoding=encoding)
    finally:
        logging_config.pop_context(keys=["canvas"])

    return {
        'output_path': str(out),
        'width': width,
        'height': height,
        'encoding': encoding,
        'pixels_written': written,
    }


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render a canvas and export it as PNG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG,
        help="Path to render config",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output PNG path (default: export.output_path from config)",
    )
    parser.add_argument(
        "--size",
        type=int,
        nargs=2,
        metavar=("W", "H"),
        help="Canvas size override",
    )
    parser.add_argument(
        "--encoding",
        choices=["truncate", "scaled"],
        default=None,
        help="Channel encoding override",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Plot a projectile trajectory before export",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level override (DEBUG, INFO, ...)",
    )

    args = parser.parse_args()

    cfg = validators.load_render_canvas_config(args.config)
    logging_config.setup_logging(
        log_level=args.log_level or cfg.logging.log_level,
        log_file=cfg.logging.log_file,
        json=cfg.logging.json_format,
        quiet_libs=["PIL"],
        context={"app": "render_canvas"},
    )
    logging_config.install_excepthook()

    try:
        result = render_main(
            config_path=args.config,
            output_path=args.output,
            size=tuple(args.size) if args.size else None,
            encoding=args.encoding,
            demo=args.demo,
        )
    except ExportError as e:
        logger.error(f"Export failed ({e.stage}): {e}")
        sys.exit(1)

    print(f"Canvas: {result['width']}x{result['height']} ({result['encoding']})")
    print(f"PNG: {result['output_path']}")
    if args.demo:
        print(f"Trajectory cells: {result['pixels_written']}")


if __name__ == "__main__":
    main()
