"""
numtasks – Main entry point.

Runs the evaluate_number_task action, e.g.:

    python main.py get_fibonacci_number 10
    python main.py --list
"""

import sys

from actions.evaluate_number_task import main

if __name__ == "__main__":
    sys.exit(main())
