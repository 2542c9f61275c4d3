"""
Chart Axes - Cartesian Axis Layout

Compute axis and grid configuration for a chart payload.

Usage:
    python main.py <chart_json> [--output output.json] [--measure opencv|pillow]

Examples:
    python main.py examples/sales_by_month.json
    python main.py chart.json -o layout.json
    python main.py chart.json --measure pillow --font DejaVuSans.ttf
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from chart_axes.config.settings import ChartSettings
from chart_axes.layout.cartesian import build_cartesian_layout, to_jsonable
from chart_axes.models.data_types import AxesFormatters, ChartModel, ChartLayoutError
from chart_axes.rendering.context import default_rendering_context
from chart_axes.rendering.text_metrics import OpenCVTextMeasurer, PillowTextMeasurer


def format_number(value) -> str:
    """Plain tick formatter for metric axes."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:,.2f}".rstrip("0").rstrip(".")
    return str(value)


def format_dimension(value) -> str:
    """Plain tick formatter for the dimension axis."""
    return "" if value is None else str(value)


def main() -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Compute axis and grid layout for a cartesian chart",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py chart.json                   # Print JSON to stdout
  python main.py chart.json -o layout.json    # Save to file
  python main.py chart.json --measure pillow  # Use Pillow font metrics
        """
    )
    parser.add_argument(
        "chart",
        type=str,
        help="Path to chart JSON (dataset, dimension, y_axis_extents, settings)"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output JSON file path (default: print to stdout)"
    )
    parser.add_argument(
        "--measure",
        type=str,
        choices=["opencv", "pillow"],
        default="opencv",
        help="Text measurement backend (default: opencv)"
    )
    parser.add_argument(
        "--font",
        type=str,
        default="Lato",
        help="Font family used for text measurement (default: Lato)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    chart_path = Path(args.chart)
    if not chart_path.exists():
        print(f"Error: Chart file not found: {args.chart}", file=sys.stderr)
        return 1

    try:
        payload = json.loads(chart_path.read_text(encoding="utf-8"))
        chart_model = ChartModel.from_dict(payload)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.chart}: {e}", file=sys.stderr)
        return 1
    except (UnicodeDecodeError, OSError) as e:
        print(f"Error: Failed to read chart file: {e}", file=sys.stderr)
        return 1
    except ChartLayoutError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    raw_settings = payload.get("settings")
    settings = ChartSettings.from_dict(raw_settings if isinstance(raw_settings, dict) else {})
    measurer = PillowTextMeasurer() if args.measure == "pillow" else OpenCVTextMeasurer()
    ctx = default_rendering_context(font_family=args.font, measurer=measurer)

    left_extent, right_extent = chart_model.y_axis_extents
    formatters = AxesFormatters(
        bottom=format_dimension,
        left=format_number if left_extent is not None else None,
        right=format_number if right_extent is not None else None,
    )

    layout = build_cartesian_layout(chart_model, settings, formatters, ctx)

    # Format output as JSON
    output_json = json.dumps(to_jsonable(layout), indent=2, ensure_ascii=False)

    # Write to file or stdout
    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(output_json, encoding="utf-8")
            print(f"Layout saved to: {args.output}")
        except IOError as e:
            print(f"Error: Failed to write output file: {e}", file=sys.stderr)
            return 1
    else:
        print(output_json)

    return 0


if __name__ == "__main__":
    sys.exit(main())
