"""Interactive menu for working with an integer AVL tree."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Optional, TextIO

from avlkit.extensions import equals, extract_subtree, map_tree, where
from avlkit.templates import (
    TraversalOrder,
    from_order_template,
    parse_values,
    to_string_template,
    traverse,
)
from avlkit.tree import AVLTree

MENU = (
    "\n--- AVL Tree Menu ---\n"
    "1. Insert\n2. Remove\n3. Search\n4. Print In-Order\n5. Print Pre-Order\n"
    "6. Map (\u00d72)\n7. Where (x > n)\n8. Extract Subtree\n9. Compare trees\n"
    "10. Save to template string\n11. Build from string and template\n"
    "12. Traverse with selected order\n13. Exit\n> "
)


class _EndOfInput(Exception):
    """Raised when the input stream runs out."""


class _Reader:
    """Reads whitespace-separated tokens and whole lines from one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._rest: Optional[str] = None

    def _next_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")

    def token(self) -> str:
        while True:
            if self._rest is None:
                self._rest = self._next_line()
            stripped = self._rest.lstrip()
            if stripped:
                head, _, tail = stripped.partition(" ")
                head, sep, tail2 = head.partition("\t")
                self._rest = (tail2 + " " + tail) if sep else tail
                if sep and not tail:
                    self._rest = tail2
                return head
            self._rest = None

    def skip_char(self) -> None:
        if self._rest is None:
            return
        self._rest = None if self._rest == "" else self._rest[1:]

    def line(self) -> str:
        if self._rest is not None:
            text, self._rest = self._rest, None
            return text
        return self._next_line()

    def integer(self) -> Optional[int]:
        try:
            return int(self.token())
        except ValueError:
            return None


def _write_values(out: TextIO, values: Iterable[int]) -> None:
    out.write("".join(f"{value} " for value in values))
    out.write("\n")


def _ask_int(reader: _Reader, out: TextIO, prompt: str) -> Optional[int]:
    out.write(prompt)
    number = reader.integer()
    if number is None:
        out.write("Invalid number\n")
    return number


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends; return 0."""
    reader = _Reader(stdin)
    tree: AVLTree[int] = AVLTree()
    out = stdout
    try:
        while True:
            out.write(MENU)
            choice = reader.integer()
            if choice == 1:
                value = _ask_int(reader, out, "Value to insert: ")
                if value is not None:
                    tree.insert(value)
            elif choice == 2:
                value = _ask_int(reader, out, "Value to remove: ")
                if value is not None:
                    tree.remove(value)
            elif choice == 3:
                value = _ask_int(reader, out, "Value to search: ")
                if value is not None:
                    out.write("Found\n" if value in tree else "Not found\n")
            elif choice == 4:
                _write_values(out, tree.in_order())
            elif choice == 5:
                _write_values(out, tree.pre_order())
            elif choice == 6:
                _write_values(out, map_tree(tree, lambda x: x * 2).in_order())
            elif choice == 7:
                bound = _ask_int(reader, out, "Filter x > ? ")
                if bound is not None:
                    _write_values(out, where(tree, lambda x: x > bound).in_order())
            elif choice == 8:
                key = _ask_int(reader, out, "Subtree key: ")
                if key is not None:
                    _write_values(out, extract_subtree(tree, key).in_order())
            elif choice == 9:
                reader.skip_char()
                out.write("Enter values for other tree (space-separated): ")
                other: AVLTree[int] = AVLTree()
                for number in parse_values(reader.line()):
                    other.insert(number)
                out.write("Trees are equal.\n" if equals(tree, other) else "Trees are NOT equal.\n")
            elif choice == 10:
                out.write("Pattern (KLP, LKP, LPK): ")
                pattern = reader.token()
                try:
                    out.write(f"Serialized: {to_string_template(tree, pattern)}\n")
                except ValueError as error:
                    out.write(f"Error: {error}\n")
            elif choice == 11:
                reader.skip_char()
                out.write("Values: ")
                text = reader.line()
                out.write("Pattern (KLP, LKP, LPK): ")
                pattern = reader.line()
                try:
                    built = from_order_template(parse_values(text), pattern)
                    _write_values(out, built.in_order())
                except ValueError as error:
                    out.write(f"Error: {error}\n")
            elif choice == 12:
                out.write("Traversal (KLP, LKP, LPK): ")
                name = reader.token()
                try:
                    order = TraversalOrder(name)
                except ValueError:
                    out.write("Unknown\n")
                    continue
                _write_values(out, traverse(tree, order))
            elif choice == 13:
                return 0
    except _EndOfInput:
        return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive menu on standard input and output."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())