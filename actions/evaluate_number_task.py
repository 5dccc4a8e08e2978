#!/usr/bin/env python3
"""
Evaluate one numtasks function on values given on the command line.

**Conceptual**: A thin CLI over the library for quick checks and demos. The
first argument names the task; the remaining arguments are its inputs.

**Usage**:
    # List available tasks
    python actions/evaluate_number_task.py --list

    # Call a task
    python actions/evaluate_number_task.py get_rectangle_area 5 10
    python actions/evaluate_number_task.py number_to_string_in_base 255 16
    python actions/evaluate_number_task.py to_fixed 12.345 1

    # Reproducible random draws
    NUMTASKS_RANDOM_SEED=42 python actions/evaluate_number_task.py get_random_integer 1 6

**Argument conversion**:
    Each value is converted with the library's number-literal rules
    ("5", "-1.5e3", "0xff", "Infinity"). Values that are not number literals
    are passed through as strings, so string tasks such as
    get_float_on_string receive them unchanged. Use --raw to pass every
    value as a string.

**Exit codes**:
  - 0: Success (result printed to stdout)
  - 1: The task is not implemented
  - 2: Invalid input (bad task name, wrong argument count, or the task
       rejected its arguments)
"""

import argparse
import inspect
import sys
from pathlib import Path

# Add project root to Python path so we can import numtasks
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from numtasks import arithmetic, formatting, geometry, number_theory, parsing, randomness, rounding
from numtasks.config.settings import get_settings
from numtasks.utils.errors import NumericTaskError
from numtasks.utils.log import configure_logging

TASK_MODULES = (
    geometry,
    arithmetic,
    number_theory,
    rounding,
    formatting,
    parsing,
    randomness,
)

# Helpers that are not tasks in their own right
EXCLUDED_TASKS = {"seed_random_generator"}


def build_task_registry() -> dict:
    """
    Collect the public functions of every task module, keyed by name.

    Returns:
        Dict mapping task name to function, sorted by name.
    """
    tasks = {}
    for module in TASK_MODULES:
        for name, func in inspect.getmembers(module, inspect.isfunction):
            if name.startswith("_") or name in EXCLUDED_TASKS:
                continue
            # Only functions defined in the module, not imported helpers
            if func.__module__ != module.__name__:
                continue
            tasks[name] = func
    return dict(sorted(tasks.items()))


def convert_argument(raw: str):
    """
    Convert one command-line value to a number when it is a number literal.

    Example:
        >>> convert_argument("5"), convert_argument("abc")
        (5, 'abc')
    """
    return parsing.to_number(raw, raw) if raw.strip() else raw


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Evaluate a numtasks function on command-line values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("task", nargs="?", help="Task (function) name, see --list")
    parser.add_argument("values", nargs="*", help="Arguments passed to the task")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available tasks with their signatures and exit",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Pass every value as a string instead of converting number literals",
    )
    return parser, parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code (see module docstring).
    """
    parser, args = parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    tasks = build_task_registry()

    if args.list:
        for name, func in tasks.items():
            print(f"{name}{inspect.signature(func)}")
        return 0

    if args.task is None:
        parser.print_usage(sys.stderr)
        print("error: a task name is required (see --list)", file=sys.stderr)
        return 2

    func = tasks.get(args.task)
    if func is None:
        print(f"error: unknown task '{args.task}' (see --list)", file=sys.stderr)
        return 2

    values = list(args.values) if args.raw else [convert_argument(v) for v in args.values]

    try:
        inspect.signature(func).bind(*values)
    except TypeError as e:
        print(f"error: {args.task}{inspect.signature(func)}: {e}", file=sys.stderr)
        return 2

    try:
        result = func(*values)
    except NumericTaskError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except NotImplementedError as e:
        print(f"error: {args.task} is not implemented ({e})", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
