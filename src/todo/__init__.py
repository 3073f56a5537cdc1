from .todo_list import DEFAULT_TODO_TEXT, TodoItem, TodoList

__all__ = ["DEFAULT_TODO_TEXT", "TodoItem", "TodoList"]
