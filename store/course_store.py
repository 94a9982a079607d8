"""
Ordered course store.

A left-leaning red-black tree keyed by course number. Every insert keeps the
tree balanced, so loading an already-sorted file still gives O(log n) lookups
instead of the linked-list shape a plain BST would take.

Public API:
    normalize_number(raw)            → str
    Course(number, title, prereqs)
    CourseStore.insert_or_update(course)
    CourseStore.find(number)         → Course | None
    CourseStore.in_order()           → Iterator[Course]
    CourseStore.clear() / CourseStore.size()
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, field_validator


def normalize_number(raw: str) -> str:
    """
    Canonicalise a course number: ' csci200 ' → 'CSCI200'.

    str.upper() maps full Unicode ('ß' → 'SS'), not just ASCII; for
    ASCII course codes the result is the same.
    """
    return raw.strip().upper()


class Course(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: str
    title: str
    prereqs: tuple[str, ...] = ()

    @field_validator("number")
    @classmethod
    def _check_number(cls, value: str) -> str:
        value = normalize_number(value)
        if not value:
            raise ValueError("course number must not be empty")
        return value


class _Node:
    __slots__ = ("key", "course", "left", "right", "red")

    def __init__(self, course: Course):
        self.key    = course.number
        self.course = course
        self.left: _Node | None  = None
        self.right: _Node | None = None
        self.red    = True   # new nodes always join as red links


def _is_red(node: _Node | None) -> bool:
    return node is not None and node.red


def _rotate_left(h: _Node) -> _Node:
    x = h.right
    assert x is not None
    h.right = x.left
    x.left  = h
    x.red   = h.red
    h.red   = True
    return x


def _rotate_right(h: _Node) -> _Node:
    x = h.left
    assert x is not None
    h.left  = x.right
    x.right = h
    x.red   = h.red
    h.red   = True
    return x


def _flip_colors(h: _Node) -> None:
    h.red = True
    h.left.red  = False
    h.right.red = False


class CourseStore:
    def __init__(self):
        self._root: _Node | None = None
        self._count = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_or_update(self, course: Course) -> None:
        """
        Insert course, or replace the stored record if its number exists.

        Replacing swaps the payload in place; the node keeps its key and
        position, so no rebalancing happens on an update.
        """
        self._root = self._insert(self._root, course)
        self._root.red = False

    def _insert(self, h: _Node | None, course: Course) -> _Node:
        if h is None:
            self._count += 1
            return _Node(course)

        if course.number < h.key:
            h.left = self._insert(h.left, course)
        elif course.number > h.key:
            h.right = self._insert(h.right, course)
        else:
            h.course = course

        if _is_red(h.right) and not _is_red(h.left):
            h = _rotate_left(h)
        if _is_red(h.left) and _is_red(h.left.left):
            h = _rotate_right(h)
        if _is_red(h.left) and _is_red(h.right):
            _flip_colors(h)
        return h

    def clear(self) -> None:
        self._root  = None
        self._count = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(self, number: str) -> Course | None:
        key = normalize_number(number)
        node = self._root
        while node is not None:
            if key == node.key:
                return node.course
            node = node.left if key < node.key else node.right
        return None

    def in_order(self) -> Iterator[Course]:
        """Yield every course, lowest course number first."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def size(self) -> int:
        return self._count

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        def _height(node: _Node | None) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))
        return _height(self._root)

    def __iter__(self) -> Iterator[Course]:
        return self.in_order()

    def __len__(self) -> int:
        return self._count

    def __contains__(self, number: object) -> bool:
        return isinstance(number, str) and self.find(number) is not None
