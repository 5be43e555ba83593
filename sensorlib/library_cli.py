"""Interactive menu for managing a library."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence, TextIO

from sensorlib.library import MAX_BOOKS, MAX_USERS, Library, LibraryError

MENU = (
    "\nLibrary Management System\n"
    "1. Add Book\n"
    "2. Edit Book\n"
    "3. Delete Book\n"
    "4. Display Books\n"
    "5. Add User\n"
    "6. Edit User\n"
    "7. Delete User\n"
    "8. Display Users\n"
    "9. Borrow Book\n"
    "10. Return Book\n"
    "0. Exit\n"
)


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def say(self, text: str) -> None:
        self._stdout.write(text + "\n")

    def ask(self, prompt: str) -> str:
        """Return the next non-blank line, stripped; raise EOFError at end of input."""
        self.write(prompt)
        while True:
            line = self._stdin.readline()
            if not line:
                raise EOFError
            if line.strip():
                return line.strip()

    def ask_int(self, prompt: str) -> int:
        return int(self.ask(prompt))


def _add_book(library: Library, console: _Console) -> None:
    if len(library.books()) >= MAX_BOOKS:
        console.say(" Cannot add more books, library is full.")
        return
    book_id = console.ask_int("Enter book ID: ")
    title = console.ask("Enter book title: ")
    author = console.ask("Enter author name: ")
    book = library.add_book(book_id, title, author)
    console.say(f' Book "{book.title}" added successfully!')


def _edit_book(library: Library, console: _Console) -> None:
    book_id = console.ask_int("Enter the book ID to edit: ")
    library.find_book(book_id)
    title = console.ask("Enter new title: ")
    author = console.ask("Enter new author name: ")
    library.edit_book(book_id, title, author)
    console.say(" Book details updated!")


def _delete_book(library: Library, console: _Console) -> None:
    library.delete_book(console.ask_int("Enter the book ID to delete: "))
    console.say(" Book deleted successfully!")


def _display_books(library: Library, console: _Console) -> None:
    console.say("\nAvailable Books:")
    books = library.available_books()
    for book in books:
        console.say(f" {book.format()}")
    if not books:
        console.say(" No available books!")


def _add_user(library: Library, console: _Console) -> None:
    if len(library.users()) >= MAX_USERS:
        console.say(" Cannot add more users, maximum limit reached.")
        return
    user_id = console.ask_int("Enter user ID: ")
    name = console.ask("Enter user name: ")
    user = library.add_user(user_id, name)
    console.say(f' User "{user.name}" added successfully!')


def _edit_user(library: Library, console: _Console) -> None:
    user_id = console.ask_int("Enter the user ID to edit: ")
    library.find_user(user_id)
    library.edit_user(user_id, console.ask("Enter new name: "))
    console.say(" User details updated!")


def _delete_user(library: Library, console: _Console) -> None:
    library.delete_user(console.ask_int("Enter the user ID to delete: "))
    console.say(" User deleted successfully!")


def _display_users(library: Library, console: _Console) -> None:
    console.say("\n User Information & Borrowed Books:")
    for user, books in library.user_loans():
        console.say(f"\n👤 ID: {user.user_id} | Name: {user.name}")
        console.say(" Borrowed Books:")
        for book in books:
            console.say(f" {book.format()}")
        if not books:
            console.say("No books currently borrowed.")


def _borrow_book(library: Library, console: _Console) -> None:
    user_id = console.ask_int("Enter user ID: ")
    book_id = console.ask_int("Enter book ID: ")
    book = library.borrow_book(user_id, book_id)
    console.say(f' User {user_id} borrowed book "{book.title}"!')


def _return_book(library: Library, console: _Console) -> None:
    user_id = console.ask_int("Enter user ID: ")
    book_id = console.ask_int("Enter book ID: ")
    book = library.return_book(user_id, book_id)
    console.say(f' User {user_id} returned book "{book.title}"!')


_ACTIONS: dict[int, Callable[[Library, _Console], None]] = {
    1: _add_book,
    2: _edit_book,
    3: _delete_book,
    4: _display_books,
    5: _add_user,
    6: _edit_user,
    7: _delete_user,
    8: _display_users,
    9: _borrow_book,
    10: _return_book,
}


def run(library: Library, stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends."""
    console = _Console(stdin, stdout)
    while True:
        console.write(MENU)
        try:
            choice = console.ask_int("Enter your choice: ")
        except EOFError:
            console.write("\n")
            return 0
        except ValueError:
            console.say("Invalid choice! Please try again.")
            continue
        if choice == 0:
            console.say("Exiting program...")
            return 0
        action = _ACTIONS.get(choice)
        if action is None:
            console.say("Invalid choice! Please try again.")
            continue
        try:
            action(library, console)
        except EOFError:
            console.write("\n")
            return 0
        except ValueError:
            console.say(" Invalid input! Please enter a number.")
        except LibraryError as exc:
            console.say(f" {exc}")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive library menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive library management.")
    parser.parse_args(argv)
    return run(Library(), sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())