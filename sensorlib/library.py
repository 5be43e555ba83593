"""An in-memory library of books and users with borrowing rules."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_BOOKS = 100
MAX_USERS = 50
MAX_BORROWED = 10


class LibraryError(Exception):
    """Base class for library errors."""


class CapacityError(LibraryError):
    """Raised when the library cannot hold more books or users."""


class NotFoundError(LibraryError):
    """Raised when a book, user or loan does not exist."""


class BorrowError(LibraryError):
    """Raised when a book cannot be borrowed."""


@dataclass
class Book:
    """A book in the library."""

    id: int
    title: str
    author: str
    is_borrowed: bool = False

    def format(self) -> str:
        return f"ID: {self.id} | Title: {self.title} | Author: {self.author}"


@dataclass
class User:
    """A library user and the IDs of the books they hold."""

    user_id: int
    name: str
    borrowed_books: list[int] = field(default_factory=list)


class Library:
    """Holds up to MAX_BOOKS books and MAX_USERS users, in insertion order."""

    def __init__(self) -> None:
        self._books: list[Book] = []
        self._users: list[User] = []

    def books(self) -> tuple[Book, ...]:
        return tuple(self._books)

    def users(self) -> tuple[User, ...]:
        return tuple(self._users)

    def add_book(self, book_id: int, title: str, author: str) -> Book:
        if len(self._books) >= MAX_BOOKS:
            raise CapacityError("Cannot add more books, library is full.")
        book = Book(book_id, title, author)
        self._books.append(book)
        return book

    def find_book(self, book_id: int) -> Book:
        """Return the first book with this ID."""
        for book in self._books:
            if book.id == book_id:
                return book
        raise NotFoundError(f"Book ID {book_id} not found!")

    def edit_book(self, book_id: int, title: str, author: str) -> Book:
        book = self.find_book(book_id)
        book.title = title
        book.author = author
        return book

    def delete_book(self, book_id: int) -> Book:
        book = self.find_book(book_id)
        self._books.remove(book)
        return book

    def add_user(self, user_id: int, name: str) -> User:
        if len(self._users) >= MAX_USERS:
            raise CapacityError("Cannot add more users, maximum limit reached.")
        user = User(user_id, name)
        self._users.append(user)
        return user

    def find_user(self, user_id: int) -> User:
        """Return the first user with this ID."""
        for user in self._users:
            if user.user_id == user_id:
                return user
        raise NotFoundError(f"User ID {user_id} not found!")

    def edit_user(self, user_id: int, name: str) -> User:
        user = self.find_user(user_id)
        user.name = name
        return user

    def delete_user(self, user_id: int) -> User:
        user = self.find_user(user_id)
        self._users.remove(user)
        return user

    def borrow_book(self, user_id: int, book_id: int) -> Book:
        """Lend the first available copy of a book to a user."""
        for book in self._books:
            if book.id != book_id or book.is_borrowed:
                continue
            try:
                user = self.find_user(user_id)
            except NotFoundError:
                continue
            if len(user.borrowed_books) >= MAX_BORROWED:
                raise BorrowError("User has reached the borrowing limit!")
            user.borrowed_books.append(book_id)
            book.is_borrowed = True
            return book
        raise BorrowError("Cannot borrow book!")

    def return_book(self, user_id: int, book_id: int) -> Book:
        """Take a book back from a user who holds it."""
        for user in self._users:
            if user.user_id == user_id and book_id in user.borrowed_books:
                user.borrowed_books.remove(book_id)
                book = next(
                    (b for b in self._books if b.id == book_id and b.is_borrowed),
                    None,
                ) or next((b for b in self._books if b.id == book_id), None)
                if book is None:
                    break
                book.is_borrowed = False
                return book
        raise NotFoundError("Book not found in borrowed list!")

    def search(self, keyword: str) -> list[Book]:
        """Return books whose title or author contains the keyword."""
        return [b for b in self._books if keyword in b.title or keyword in b.author]

    def available_books(self) -> list[Book]:
        return [b for b in self._books if not b.is_borrowed]

    def user_loans(self) -> list[tuple[User, list[Book]]]:
        """Pair each user with the library books they currently hold."""
        return [
            (
                user,
                [
                    book
                    for book_id in user.borrowed_books
                    for book in self._books
                    if book.id == book_id
                ],
            )
            for user in self._users
        ]