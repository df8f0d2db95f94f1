"""
Console demo: prints the argument list and walks an ItemList through
add-if-absent, transform and lookup.
"""

import logging
import sys
from typing import Optional, Sequence, TextIO

from .demo import ItemList
from .logs import setup_logging

logger = logging.getLogger(__name__)

GREETING = "Hello from utilkit!"
SEED_ITEMS = ("apple", "banana", "cherry")


def print_info(args: Sequence[str], file: Optional[TextIO] = None) -> None:
    """Print the argument count and each argument on its own line."""
    out = file if file is not None else sys.stdout
    print(f"Running with {len(args)} arguments", file=out)
    for i, arg in enumerate(args):
        print(f"Argument {i}: {arg}", file=out)


def run_demo(out: TextIO) -> ItemList:
    items = ItemList(SEED_ITEMS)

    print("\nOriginal items:", file=out)
    items.print(out)

    index, added = items.add_if_not_exists("date")
    print(
        f"\nAdded 'date' at index {index}, newly added: {'yes' if added else 'no'}",
        file=out,
    )

    items.transform_all("fruit: ")
    print("\nAfter transformation:", file=out)
    items.print(out)

    item = items.get_at(1)
    if item is not None:
        print(f"\nItem at index 1: {item}", file=out)

    missing = items.get_at(10)
    print(f"Item at index 10 exists: {'yes' if missing is not None else 'no'}", file=out)

    return items


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    """
    Run the demo.

    Args:
        argv: Full argument list including the program name (default: sys.argv)
        out: Stream for the demo output (default: sys.stdout)

    Returns:
        Process exit status, always 0.
    """
    args = list(sys.argv if argv is None else argv)
    out = out if out is not None else sys.stdout

    setup_logging()
    logger.debug("Starting demo with %d arguments", len(args))

    print(GREETING, file=out)
    print_info(args, file=out)
    run_demo(out)
    return 0
