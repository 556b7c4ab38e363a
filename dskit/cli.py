"""Interactive, menu-driven sessions for the dskit data structures.

Run ``dskit <structure>`` and type menu choices and values on standard input.
Input is read as whitespace-separated integers. The session ends at the exit
choice or at end of input.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional, TextIO

from dskit.avl import AVLTree
from dskit.bst import BinarySearchTree
from dskit.fixed_queue import LinearQueue, QueueEmptyError, QueueFullError
from dskit.hash_table import LinearProbingTable, TableFullError
from dskit.linked_list import LinkedList
from dskit.stack import BoundedStack, StackOverflow, StackUnderflow


class _EndOfInput(Exception):
    """Raised when standard input runs out of tokens."""


class _Session:
    """Reads integer tokens from a stream and writes replies to another."""

    def __init__(self, stream: Iterable[str], out: TextIO) -> None:
        self._tokens = (token for line in stream for token in line.split())
        self.out = out

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def ask(self, prompt: str) -> Optional[int]:
        """Show ``prompt`` and return the next integer, or None if not a number."""
        self.out.write(prompt)
        self.out.flush()
        token = next(self._tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return int(token)
        except ValueError:
            return None

    def ask_value(self, prompt: str) -> Optional[int]:
        """Like ``ask``, but report a token that is not a number."""
        value = self.ask(prompt)
        if value is None:
            self.say("Invalid number")
        return value


@dataclass
class _Menu:
    prompt: str
    actions: dict[int, Callable[[], None]]
    exit_choice: int
    invalid_message: str
    exit_message: Optional[str] = None

    def run(self, session: _Session) -> None:
        try:
            while True:
                choice = session.ask(self.prompt)
                if choice == self.exit_choice:
                    if self.exit_message is not None:
                        session.say(self.exit_message)
                    return
                action = self.actions.get(choice) if choice is not None else None
                if action is None:
                    session.say(self.invalid_message)
                else:
                    action()
        except _EndOfInput:
            session.say()


def _join(values: Iterable[object]) -> str:
    return "".join(f"{value} " for value in values)


def _linked_list_menu(session: _Session) -> _Menu:
    items = LinkedList()

    def insert() -> None:
        value = session.ask_value("Enter value to insert: ")
        if value is not None:
            items.append(value)

    def delete() -> None:
        value = session.ask_value("Enter value to delete: ")
        if value is None:
            return
        try:
            items.remove(value)
        except ValueError:
            session.say("Value not found!")
        else:
            session.say(f"Deleted {value}")

    def display() -> None:
        session.say(f"Linked List: {items}")

    return _Menu(
        prompt="\n1. Insert  2. Delete  3. Display  4. Exit\nChoice: ",
        actions={1: insert, 2: delete, 3: display},
        exit_choice=4,
        invalid_message="Invalid choice!",
        exit_message="Exiting...",
    )


def _stack_menu(session: _Session) -> _Menu:
    stack = BoundedStack(100)

    def push() -> None:
        value = session.ask_value("Enter value to push: ")
        if value is None:
            return
        try:
            stack.push(value)
        except StackOverflow as error:
            session.say(str(error))

    def pop() -> None:
        try:
            session.say(f"Popped: {stack.pop()}")
        except StackUnderflow as error:
            session.say(str(error))

    def peek() -> None:
        try:
            session.say(f"Top Element: {stack.peek()}")
        except StackUnderflow as error:
            session.say(str(error))

    def display() -> None:
        if len(stack) == 0:
            session.say("Stack is Empty")
        else:
            session.say(f"Stack: {_join(stack)}")

    return _Menu(
        prompt="\n1.Push 2.Pop 3.Peek 4.Display 5.Exit\nChoice: ",
        actions={1: push, 2: pop, 3: peek, 4: display},
        exit_choice=5,
        invalid_message="Invalid choice!",
        exit_message="Exiting...",
    )


def _queue_menu(session: _Session) -> _Menu:
    queue = LinearQueue(5)

    def enqueue() -> None:
        value = session.ask_value("Enter value to insert: ")
        if value is None:
            return
        try:
            queue.enqueue(value)
        except QueueFullError as error:
            session.say(str(error))
        else:
            session.say(f"Inserted {value}")

    def dequeue() -> None:
        try:
            session.say(f"Deleted {queue.dequeue()}")
        except QueueEmptyError as error:
            session.say(str(error))

    def display() -> None:
        if len(queue) == 0:
            session.say("Queue is Empty")
        else:
            session.say(f"Queue Elements: {_join(queue)}")

    return _Menu(
        prompt="\n1. ENQUEUE\n2. DEQUEUE\n3. DISPLAY\n4. EXIT\nEnter choice: ",
        actions={1: enqueue, 2: dequeue, 3: display},
        exit_choice=4,
        invalid_message="Invalid Choice",
    )


def _bst_menu(session: _Session) -> _Menu:
    tree = BinarySearchTree(allow_duplicates=False)

    def insert() -> None:
        value = session.ask_value("Enter value to insert: ")
        if value is not None:
            tree.insert(value)

    def search() -> None:
        key = session.ask_value("Enter number to search: ")
        if key is None:
            return
        if key in tree:
            session.say(f"Number {key} found in the tree.")
        else:
            session.say(f"Number {key} not found.")

    def display() -> None:
        session.say(f"Inorder Traversal: {_join(tree.inorder())}")

    return _Menu(
        prompt="\n1. Insert\n2. Search\n3. Display Inorder\n4. Exit\nEnter choice: ",
        actions={1: insert, 2: search, 3: display},
        exit_choice=4,
        invalid_message="Invalid choice",
    )


def _avl_menu(session: _Session) -> _Menu:
    tree = AVLTree()

    def insert() -> None:
        key = session.ask_value("Enter key: ")
        if key is not None:
            tree.insert(key)

    def delete() -> None:
        key = session.ask_value("Enter key: ")
        if key is not None:
            tree.delete(key)

    def search() -> None:
        key = session.ask_value("Enter key: ")
        if key is not None:
            session.say("Found" if key in tree else "Not Found")

    def display() -> None:
        session.say(_join(tree.inorder()))

    return _Menu(
        prompt="\n1.Insert 2.Delete 3.Search 4.Display 5.Exit: ",
        actions={1: insert, 2: delete, 3: search, 4: display},
        exit_choice=5,
        invalid_message="Invalid choice",
    )


def _hash_menu(session: _Session) -> _Menu:
    table = LinearProbingTable(10)

    def insert() -> None:
        key = session.ask_value("Enter key to insert: ")
        if key is None:
            return
        try:
            index = table.insert(key)
        except TableFullError as error:
            session.say(str(error))
        else:
            session.say(f"Inserted {key} at index {index}")

    def search() -> None:
        key = session.ask_value("Enter key to search: ")
        if key is None:
            return
        try:
            index = table.find(key)
        except KeyError:
            session.say(f"Key {key} not found!")
        else:
            session.say(f"Key {key} found at index {index}")

    def display() -> None:
        session.say("Hash Table:")
        for index, slot in enumerate(table):
            session.say(f"Index {index}: {-1 if slot is None else slot}")

    return _Menu(
        prompt=(
            "\nHash Table Operations:\n1. Insert\n2. Search\n3. Display\n4. Exit\n"
            "Enter your choice: "
        ),
        actions={1: insert, 2: search, 3: display},
        exit_choice=4,
        invalid_message="Invalid choice! Try again.",
    )


_MENUS: dict[str, Callable[[_Session], _Menu]] = {
    "list": _linked_list_menu,
    "stack": _stack_menu,
    "queue": _queue_menu,
    "bst": _bst_menu,
    "avl": _avl_menu,
    "hash": _hash_menu,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive menu for the chosen data structure."""
    parser = argparse.ArgumentParser(
        prog="dskit",
        description="Interactive menus for the dskit data structures.",
    )
    parser.add_argument("structure", choices=sorted(_MENUS), help="structure to work with")
    args = parser.parse_args(argv)
    session = _Session(sys.stdin, sys.stdout)
    _MENUS[args.structure](session).run(session)
    return 0