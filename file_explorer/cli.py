import argparse
import os
import sys

from file_explorer.config.settings import Settings
from file_explorer.container import container
from file_explorer.exceptions import ConfigurationError
from file_explorer.shell.render import PlainRenderer, RichRenderer
from file_explorer.shell.repl import ShellRepl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="file-explorer",
        description="Interactive shell to browse and manage a filesystem tree.",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Initial working directory (default: FILE_EXPLORER_START_DIR or cwd)",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=None,
        help="Logging level (default: FILE_EXPLORER_LOG_LEVEL or ERROR)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Colour output, banner and help table with rich",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    settings.configure_logging(args.log_level)

    start = args.start_dir or settings.start_directory or os.getcwd()
    cwd = os.path.realpath(start)
    if not os.path.isdir(cwd):
        print(f"Start directory is not a directory: {start}", file=sys.stderr)
        return 2

    renderer = RichRenderer() if args.pretty else PlainRenderer()
    repl = ShellRepl(container.get_dispatcher(), cwd, renderer)
    return repl.run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
