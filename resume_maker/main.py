import argparse
import sys

from resume_maker.cmd import cmd_render, cmd_themes, cmd_validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-maker",
        description="Validate jsonresume files and render them to HTML or PDF.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a resume against the jsonresume schema"
    )
    validate_parser.add_argument("file", help="Resume file to validate")
    validate_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    render_parser = subparsers.add_parser("render", help="Render a resume with a theme")
    render_parser.add_argument("file", help="Resume file to render (.json or .yaml)")
    render_parser.add_argument(
        "theme",
        help="Theme to render with: a bundled theme name, an installed theme "
        "entry point, or an importable module name",
    )
    render_parser.add_argument(
        "-o",
        "--output-name",
        help="Name of the output file without extension; the extension is set "
        "by the render mode (default: input file name)",
    )
    render_parser.add_argument(
        "-r",
        "--render",
        nargs="+",
        action="extend",
        metavar="MODE",
        help="Render mode(s) [PDF, HTML]",
    )
    render_parser.add_argument(
        "--config", help="Path to a YAML config file (default: ./resume-maker.yaml)"
    )
    render_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    subparsers.add_parser("themes", help="List available themes")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "validate":
        return cmd_validate(args)
    elif args.command == "render":
        return cmd_render(args)
    elif args.command == "themes":
        return cmd_themes(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
