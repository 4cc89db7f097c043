"""Command-line interface for chart-lens."""

import argparse
import sys
from dataclasses import replace

from chart_lens import __version__, generate_chart, sample_series, sample_url
from chart_lens.exceptions import ChartLensError, InvalidURLError
from chart_lens.fetch import FetchConfig
from chart_lens.normalization import NormalizationConfig, resolve_mode


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="chart-lens",
        description="Convert a JSON API URL into chart-ready series",
    )
    parser.add_argument("url", nargs="?", help="URL returning a JSON document")
    parser.add_argument(
        "--type",
        dest="mode",
        default="bar",
        choices=["bar", "pie", "categorical", "proportional"],
        help="Chart type (default: bar)",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Print the built-in sample series without fetching",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Fetch timeout in seconds (default: CHART_LENS_FETCH_TIMEOUT_SEC or 10)",
    )
    parser.add_argument(
        "--field-profile",
        choices=["default", "legacy"],
        help="Candidate field lists used for array payloads (default: CHART_LENS_FIELD_PROFILE or default)",
    )
    parser.add_argument(
        "--uniform-magnitude",
        action="store_true",
        help="Apply the billion threshold to object payloads too (default: CHART_LENS_UNIFORM_MAGNITUDE)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"chart-lens {__version__}",
    )

    args = parser.parse_args(argv)
    mode = resolve_mode(args.mode)

    if args.sample:
        result = sample_series(mode)
    elif not args.url:
        parser.error("a URL is required unless --sample is given")
    else:
        fetch_config = FetchConfig.from_env()
        if args.timeout is not None:
            fetch_config = FetchConfig(timeout_sec=args.timeout, user_agent=fetch_config.user_agent)
        config = NormalizationConfig.from_env()
        if args.field_profile:
            config = replace(config, field_profile=args.field_profile)
        if args.uniform_magnitude:
            config = replace(config, uniform_magnitude=True)
        try:
            result = generate_chart(args.url, mode, config=config, fetch_config=fetch_config)
        except InvalidURLError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except ChartLensError as e:
            print(f"Error: {e}", file=sys.stderr)
            print(f"Unable to parse data. Try the sample: {sample_url(mode)}", file=sys.stderr)
            return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        _print_formatted(result)

    return 0


def _print_formatted(result) -> None:
    """Print series in human-readable format."""
    print()
    title = "Bar Chart" if result.mode == "bar" else "Pie Chart"
    if result.source == "sample":
        title += " (sample)"
    print(f"  {title}")
    print()

    if result.mode == "bar":
        rows = list(zip(result.labels, result.values))
        if not rows:
            rows = [("-", value) for value in result.values]
        for label, value in rows:
            print(f"  {label + ':':<8} {_format_number(value)}")
    else:
        for item in result.slices:
            print(f"  {item.label + ':':<12} {_format_number(item.value):<12} {item.color}")

    note = result.magnitude_note
    if note:
        print()
        print(f"  * {note}")
    print()


def _format_number(value: float) -> str:
    """Format integral floats without a trailing .0."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


if __name__ == "__main__":
    sys.exit(main())
