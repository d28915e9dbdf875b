import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from tqdm import tqdm

from code2snippets import ConversionPipeline, ErrorHandler, SnippetConfig, SnippetError
from code2snippets.config import DEFAULT_INDENT, default_output_dir


logger = logging.getLogger("code2snippets")


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors on one line with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        usage="%(prog)s [flags] (FILE|DIR)...",
        description="Convert source files into VS Code user snippets, one JSON file per extension",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="FILE|DIR",
        help="Source files or directories to convert (directories are walked recursively)",
    )
    parser.add_argument(
        "-i",
        dest="indent",
        default=DEFAULT_INDENT,
        help="Indentation used to pretty-print the JSON output (default: four spaces)",
    )
    parser.add_argument(
        "-o",
        dest="output_dir",
        default=default_output_dir(),
        help="Path to the VS Code snippets folder (default: %(default)s)",
    )
    parser.add_argument(
        "--no-progress",
        dest="show_progress",
        action="store_false",
        default=None,
        help="Never show the progress bar (default: shown when stderr is a terminal)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress details to stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    error_handler = ErrorHandler("DEBUG" if args.verbose else "WARNING")
    config = SnippetConfig(
        indent=args.indent,
        output_dir=args.output_dir,
        show_progress=args.show_progress,
    )
    pipeline = ConversionPipeline(config)

    try:
        written = pipeline.run(args.paths)
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return 1
    except SnippetError as exc:
        print(error_handler.handle_error(exc), file=sys.stderr)
        return 1

    stats = pipeline.last_run_stats or {}
    logger.debug("Snippet files: %s", ", ".join(str(path) for path in written))
    tqdm.write(
        f"✅ Wrote {stats.get('total_snippets', 0)} snippets to {len(written)} files "
        f"in {config.output_dir or '.'}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
