"""Command-line interface for deps-sweeper"""

import os
import sys

from rich.console import Console

from deps_sweeper.args import parse_args
from deps_sweeper.config import Config
from deps_sweeper.core import DepsSweeper
from deps_sweeper.logging_config import setup_logging

console = Console(stderr=True)


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(debug=parsed_args.debug, quiet=parsed_args.quiet)

        config = Config(
            mode=parsed_args.mode,
            root_path=os.getcwd(),
            debug=parsed_args.debug,
            quiet=parsed_args.quiet,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        DepsSweeper(config).run()
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"Error: {e}", style="red", markup=False)
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
