# ABOUTME: Title-ordered binary search tree holding the book catalog.
# ABOUTME: Nodes live in an arena list and point at their children by integer handle.

from collections.abc import Iterator
from dataclasses import dataclass

from booktree.catalog.errors import DuplicateTitleError, InsertResult, ValidationError
from booktree.catalog.keys import keys_equal, title_key
from booktree.catalog.types import BookRecord


@dataclass
class _Node:
    record: BookRecord
    key: str
    left: int | None = None
    right: int | None = None


class BookCatalog:
    """In-memory catalog of books ordered by case-insensitive title.

    Every title in a node's left subtree sorts before the node's title key and
    every title in its right subtree sorts after it. Titles are unique once
    case-folded. The tree is never rebalanced, so its shape depends only on
    insertion order.

    Nodes are stored in a flat arena and addressed by their index; dropping
    the arena releases the whole tree at once.
    """

    def __init__(self) -> None:
        self._nodes: list[_Node] = []
        self._root: int | None = None

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[BookRecord]:
        return self._in_order()

    def __contains__(self, title: object) -> bool:
        if not isinstance(title, str):
            return False
        return self.find_by_title(title) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(books={len(self)})"

    def insert(self, title: str, author: str, genre: str) -> InsertResult:
        """Add a book to the catalog.

        Fields are checked for emptiness exactly as given; nothing is trimmed.
        The new record is placed at the first free slot found by descending
        from the root: left when its title key sorts before the node's, right
        otherwise.

        Args:
            title: Book title. Unique within the catalog, ignoring case.
            author: Author name.
            genre: Genre label.

        Returns:
            An InsertResult that is truthy on success. On failure it carries a
            ValidationError or DuplicateTitleError and the tree is unchanged.
        """
        empty = tuple(
            name
            for name, value in (("title", title), ("author", author), ("genre", genre))
            if not value
        )
        if empty:
            return InsertResult(error=ValidationError(empty))

        key = title_key(title)
        parent: int | None = None
        go_left = False
        current = self._root
        while current is not None:
            node = self._nodes[current]
            if key == node.key:
                return InsertResult(error=DuplicateTitleError(title, node.record))
            parent = current
            go_left = key < node.key
            current = node.left if go_left else node.right

        record = BookRecord(title=title, author=author, genre=genre)
        handle = len(self._nodes)
        self._nodes.append(_Node(record=record, key=key))

        if parent is None:
            self._root = handle
        elif go_left:
            self._nodes[parent].left = handle
        else:
            self._nodes[parent].right = handle

        return InsertResult(record=record)

    def find_by_title(self, title: str) -> BookRecord | None:
        """Return the book whose title matches ignoring case, or None."""
        key = title_key(title)
        current = self._root
        while current is not None:
            node = self._nodes[current]
            if key == node.key:
                return node.record
            current = node.left if key < node.key else node.right
        return None

    def find_by_author(self, author: str) -> Iterator[BookRecord]:
        """Yield every book by ``author``, ignoring case.

        Authors are not ordered in the tree, so every node is visited. Each
        call starts a fresh scan.
        """
        return self._scan("author", author)

    def find_by_genre(self, genre: str) -> Iterator[BookRecord]:
        """Yield every book in ``genre``, ignoring case."""
        return self._scan("genre", genre)

    def list_all(self) -> list[BookRecord]:
        """Return all books in ascending case-insensitive title order."""
        return list(self._in_order())

    def clear(self) -> None:
        """Release every book in the catalog."""
        self._nodes = []
        self._root = None

    @property
    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            handle, depth = stack.pop()
            node = self._nodes[handle]
            deepest = max(deepest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return deepest

    def _scan(self, field: str, value: str) -> Iterator[BookRecord]:
        for node in self._pre_order():
            if keys_equal(getattr(node.record, field), value):
                yield node.record

    def _pre_order(self) -> Iterator[_Node]:
        # Node, then left subtree, then right subtree. Stops if clear() swaps the arena.
        nodes = self._nodes
        stack = [] if self._root is None else [self._root]
        while stack and nodes is self._nodes:
            node = nodes[stack.pop()]
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _in_order(self) -> Iterator[BookRecord]:
        nodes = self._nodes
        stack: list[int] = []
        current = self._root
        while (stack or current is not None) and nodes is self._nodes:
            while current is not None:
                stack.append(current)
                current = nodes[current].left
            handle = stack.pop()
            yield nodes[handle].record
            current = nodes[handle].right
