"""Command-line interface for oxydendrum.

This module draws each directory named on the command line as an ASCII tree.
It handles argument parsing, output writing, and signal management for
graceful interruption handling.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion, or no directories given (usage is printed)
    1: Runtime error, such as a directory that doesn't exist or can't be read
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    $ oxydendrum src
    src
    `-- oxydendrum
        +-- __init__.py
        `-- types.py
"""

import sys

from oxydendrum.cli.argparser import create_parser, usage_line, validate_args
from oxydendrum.cli.safe_writer import SafeWriter
from oxydendrum.cli.signal_handler import setup_signal_handling, signal_handler
from oxydendrum.exclusion_rules.git_rules import GitIgnoreExclusionRules
from oxydendrum.tree import from_path


def main() -> None:
    """Main entry point for the oxydendrum command-line interface.

    Directories are processed in order and each tree is written as soon as it
    is built. The first error stops the run; trees already written stay written.

    Exit codes:
        0: Successful completion, or no directories given
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        exclusion_rules = GitIgnoreExclusionRules()

        # argparse exits with 2 on syntax errors and 0 for --version
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        if not args.directories:
            print(usage_line(parser))
            return

        validate_args(args)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                for directory in args.directories:
                    safe_writer.write_tree(from_path(directory, exclusion_rules))
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except KeyboardInterrupt:
        # SIGINT stops a walk wherever it is
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
