"""Daily todo list with a single selected item."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

DEFAULT_TODO_TEXT = "Make TODO list"


@dataclass
class TodoItem:
    text: str
    done: bool = False


class TodoList:
    """Ordered todo items plus the index of the selected one."""

    def __init__(self, items: Iterable[TodoItem] = ()):
        self._items: list[TodoItem] = [TodoItem(item.text, item.done) for item in items]
        self._selected = 0

    @classmethod
    def with_default(cls, items: Iterable[TodoItem]) -> "TodoList":
        """Build a list that never starts out empty."""
        todos = cls(items)
        if not todos.items:
            todos.append(DEFAULT_TODO_TEXT)
        return todos

    @property
    def items(self) -> tuple[TodoItem, ...]:
        return tuple(self._items)

    @property
    def selected_index(self) -> int:
        return self._selected

    def __len__(self) -> int:
        return len(self._items)

    def current_item_text(self) -> str:
        if not self._items:
            return ""
        return self._items[self._selected].text

    def pending_items(self) -> list[TodoItem]:
        return [TodoItem(item.text, item.done) for item in self._items if not item.done]

    def advance_selection(self, delta: int) -> None:
        if not self._items:
            self._selected = 0
            return
        self._selected = max(0, min(len(self._items) - 1, self._selected + delta))

    def toggle_done(self) -> None:
        if not self._items:
            return
        item = self._items[self._selected]
        item.done = not item.done

    def insert(self, text: str) -> bool:
        """Insert a new item at the top and select it."""
        text = " ".join(text.split())
        if not text:
            return False
        self._items.insert(0, TodoItem(text))
        self._selected = 0
        return True

    def append(self, text: str) -> bool:
        text = " ".join(text.split())
        if not text:
            return False
        self._items.append(TodoItem(text))
        return True

    def delete(self) -> None:
        if not self._items:
            return
        del self._items[self._selected]
        self.advance_selection(0)
