"""Command-line interface for the Colors API."""

import argparse
import json
import sys
from pathlib import Path

from colors_api import __version__
from colors_api.config import LogLevel, get_settings
from colors_api.design_system.themes import get_available_themes
from colors_api.domain.colors import (
    CaseStyle,
    ExportMode,
    ExportOptions,
    JsonStructure,
    ThemeOption,
)
from colors_api.exceptions import ColorsApiError
from colors_api.exporters.factory import ExporterFactory
from colors_api.logging_config import configure_logging
from colors_api.services.export import ExportServiceImpl
from colors_api.services.palette import PaletteServiceImpl


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"Colors API v{__version__}")
    return 0


def cmd_suggest(args: argparse.Namespace) -> int:
    """Print secondary color suggestions for a primary color."""
    try:
        suggestions = PaletteServiceImpl().generate_secondary_color_suggestions(
            args.primary
        )
    except ColorsApiError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(f"Suggestions for {args.primary}:")
    for suggestion in suggestions:
        print(f"  {suggestion.color}  {suggestion.name:<20} {suggestion.description}")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a palette and write it in an export format."""
    try:
        palette = PaletteServiceImpl().generate_complete_color_system(
            args.primary,
            args.secondary,
            gray_theme=args.gray_theme,
            background_theme=args.background_theme,
        )
        options = ExportOptions.from_values(
            prefix=args.prefix,
            case_style=args.case_style,
            mode=args.mode,
            structure=args.structure,
        )
        if args.format is None:
            content = json.dumps(palette.to_dict(), indent=2, ensure_ascii=False)
        else:
            content = ExportServiceImpl().export_palette(palette, args.format, options)
    except ColorsApiError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        print(
            f"Wrote {palette.total_colors} colors in {palette.section_count} "
            f"sections to {output}"
        )
    else:
        print(content)
    return 0


def cmd_formats(args: argparse.Namespace) -> int:
    """List available export formats."""
    for info in ExporterFactory.format_infos():
        print(f"{info.id:<10} {info.name:<22} {info.extension:<6} {info.description}")
    return 0


def cmd_themes(args: argparse.Namespace) -> int:
    """List gray and background theme keywords."""
    if args.json:
        print(json.dumps(get_available_themes(), indent=2))
        return 0

    themes = get_available_themes()
    print("Gray themes:")
    for theme in themes["grayThemes"]:
        print(f"  {theme['id']:<10} {theme['description']}")
    print("Background themes:")
    for theme in themes["backgroundThemes"]:
        print(f"  {theme['id']:<10} {theme['description']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.api_host
    port = args.port or settings.api_port
    reload = args.reload or settings.api_reload

    uvicorn.run(
        "colors_api.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="colors-api",
        description="Colors API - design-system palette generation and export",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log at the configured level instead of warnings only",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    # suggest command
    suggest_parser = subparsers.add_parser(
        "suggest", help="Suggest secondary colors for a primary color"
    )
    suggest_parser.add_argument("primary", help="Primary color as #RRGGBB")
    suggest_parser.set_defaults(func=cmd_suggest)

    # generate command
    theme_choices = [option.value for option in ThemeOption]
    generate_parser = subparsers.add_parser(
        "generate", help="Generate a palette and export it"
    )
    generate_parser.add_argument("primary", help="Primary color as #RRGGBB")
    generate_parser.add_argument("secondary", help="Secondary color as #RRGGBB")
    generate_parser.add_argument(
        "--gray-theme",
        choices=theme_choices,
        default=ThemeOption.AUTO.value,
        help="Gray harmony theme (default: auto)",
    )
    generate_parser.add_argument(
        "--background-theme",
        choices=theme_choices,
        default=ThemeOption.AUTO.value,
        help="Interface background theme (default: auto)",
    )
    generate_parser.add_argument(
        "--format",
        "-f",
        choices=ExporterFactory.supported_formats(),
        default=None,
        help="Export format (default: the palette itself as JSON)",
    )
    generate_parser.add_argument(
        "--prefix", default="--", help="Variable name prefix (default: --)"
    )
    generate_parser.add_argument(
        "--case-style",
        choices=[style.value for style in CaseStyle],
        default=CaseStyle.SNAKE_CASE.value,
        help="Section name casing (default: snake_case)",
    )
    generate_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ExportMode],
        default=ExportMode.BOTH.value,
        help="Light, dark or both themes (default: both)",
    )
    generate_parser.add_argument(
        "--structure",
        choices=[structure.value for structure in JsonStructure],
        default=JsonStructure.SECTIONS.value,
        help="JSON layout (default: sections)",
    )
    generate_parser.add_argument(
        "--output", "-o", default=None, help="Write to this file instead of stdout"
    )
    generate_parser.set_defaults(func=cmd_generate)

    # formats command
    formats_parser = subparsers.add_parser("formats", help="List export formats")
    formats_parser.set_defaults(func=cmd_formats)

    # themes command
    themes_parser = subparsers.add_parser("themes", help="List theme keywords")
    themes_parser.add_argument(
        "--json", action="store_true", help="Print the theme listing as JSON"
    )
    themes_parser.set_defaults(func=cmd_themes)

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes"
    )
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    if not args.verbose:
        settings = settings.model_copy(update={"log_level": LogLevel.WARNING})
    configure_logging(settings)

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
