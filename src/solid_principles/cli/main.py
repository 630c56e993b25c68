"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the application bootstrap
"""
import argparse
import os
import sys
from typing import Any, List, Optional, Tuple

from solid_principles._package import DESCRIPTION, __version__
from solid_principles.bootstrap import Application
from solid_principles.cli.formatters import format_output
from solid_principles.config.manager import get_config_manager
from solid_principles.domain.base.exceptions import DomainException


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "solid-principles",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                      # List all examples
  %(prog)s --format table list       # Display as table
  %(prog)s run                       # Run every enabled example
  %(prog)s run birds shapes          # Run selected examples
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (.json, .yaml, .yml)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--log-format', choices=['plain', 'console', 'json'],
                        help='Set log line format')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list', help='List registered examples')

    run_parser = subparsers.add_parser('run', help='Run examples')
    run_parser.add_argument('examples', nargs='*', metavar='EXAMPLE',
                            help='Example names to run (default: all enabled)')
    run_parser.add_argument('--summary', action='store_true',
                            help='Print a result summary after running')

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, app: Application) -> Tuple[Any, int]:
    """
    Execute the parsed command.

    Returns:
        Data to print (or None) and the exit code; a run with any failed
        example exits with 1
    """
    if args.command == 'list':
        return {"examples": app.list_examples()}, 0

    if args.command == 'run':
        results = app.run(args.examples)
        exit_code = 1 if "failed" in results.values() else 0
        if args.summary:
            return {"results": results}, exit_code
        return None, exit_code

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        if not args.command:
            print("Error: No command specified. Use --help for usage information.",
                  file=sys.stderr)
            return 1

        try:
            config_manager = get_config_manager(args.config)
            if args.log_level:
                config_manager.set('logging.level', args.log_level)
            if args.log_format:
                config_manager.set('logging.format', args.log_format)

            app = Application(config_manager=config_manager)
            app.initialize()

            result, exit_code = execute_command(args, app)
        except DomainException as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if result is not None:
            print(format_output(result, args.format))
        return exit_code

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
