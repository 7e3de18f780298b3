"""Command-line argument parsing for oxydendrum.

This module defines the command-line interface for oxydendrum,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from oxydendrum import __version__
from oxydendrum.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an argparse action that feeds -e/-i values into exclusion_rules.

    Rules are added while the command line is being parsed, so file-based and
    pattern-based exclusions keep the order in which they were given.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Adds one -e/--exclude file or -i/--ignore pattern to the exclusion rules."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            # -e/-i values are recorded on exclusion_rules only
            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(values)  # type: ignore[arg-type]
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with oxydendrum's options.
    """
    description = """
    oxydendrum: draw directories as ASCII trees.

    Each directory given on the command line is walked recursively and printed
    as a tree, one entry per line, with "+--" marking entries that have a
    sibling below them and "`--" marking the last entry of a directory.
    Entries appear in the order the operating system lists them.
    """

    epilog = """
    Examples:
      # Draw one directory
      oxydendrum /path/to/project

      # Draw several directories, one tree after another
      oxydendrum src tests

      # Leave out entries matched by gitignore-style files
      oxydendrum -e .gitignore /path/to/project

      # Leave out entries matched by individual patterns
      oxydendrum -i "__pycache__/" -i "*.pyc" /path/to/project

      # Write the trees to a file
      oxydendrum -o tree.txt /path/to/project

      # Display version information and exit
      oxydendrum -V
    """

    parser = argparse.ArgumentParser(
        prog="oxydendrum",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"oxydendrum {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directories",
        nargs="*",
        metavar="dir",
        help="Directories to draw. Each tree's root is labeled with the path exactly as given.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style file of patterns to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to leave out, such as '*.pyc' or 'build/'. Can be specified "
            "multiple times, and patterns apply in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def usage_line(parser: argparse.ArgumentParser) -> str:
    """Return the one-line usage message printed when no directory is given."""
    return f"usage: {parser.prog} dir [dir2 ...]"


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"--output must be a file, not a directory: {args.output}")
