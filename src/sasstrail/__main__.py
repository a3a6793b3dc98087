"""CLI entry point: run `sasstrail file.scss -I path` or `python -m sasstrail file.scss`."""

import logging
import sys
from pathlib import Path


def main(argv=None) -> int:
    import argparse
    from .compiler.driver import StylesheetCompiler
    from .compiler.engine import register_with
    from .pipeline.filesystem import FileSystemPipeline
    from .shared.errors import AssetNotFoundError, SassCompileError, format_error_report
    from .utils.config import DEFAULT_OUTPUT_STYLE
    from .utils.io_utils import read_source_file

    parser = argparse.ArgumentParser(
        prog="sasstrail",
        description="Compile a Sass/SCSS file, resolving @import through search paths.",
    )
    parser.add_argument("file", type=Path, help="Path to .scss or .sass source file")
    parser.add_argument(
        "-I", "--load-path", dest="load_paths", action="append", type=Path, default=[],
        help="Search root (repeatable; default: the file's directory)",
    )
    parser.add_argument(
        "--output-style", default=DEFAULT_OUTPUT_STYLE,
        choices=("nested", "expanded", "compact", "compressed"),
        help=f"CSS output style (default: {DEFAULT_OUTPUT_STYLE})",
    )
    parser.add_argument("--show-imports", action="store_true", help="Print the import tree to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = args.file.resolve()
    if not path.exists():
        sys.stderr.write(f"sasstrail: error: file not found: {path}\n")
        return 1
    if not path.is_file():
        sys.stderr.write(f"sasstrail: error: not a file: {path}\n")
        return 1

    roots = [p.resolve() for p in args.load_paths] or [path.parent]

    pipeline = FileSystemPipeline(roots)
    register_with(pipeline)
    compiler = StylesheetCompiler(output_style=args.output_style)

    try:
        result = compiler.compile(read_source_file(path), str(path), pipeline)
    except SassCompileError as e:
        sys.stderr.write(format_error_report(e) + "\n")
        return 1
    except AssetNotFoundError as e:
        sys.stderr.write(f"sasstrail: error: {e}\n")
        return 1

    if args.show_imports and result.dependency_tree.edges:
        sys.stderr.write(result.dependency_tree.format() + "\n")

    sys.stdout.write(result.css)
    return 0


if __name__ == "__main__":
    sys.exit(main())
