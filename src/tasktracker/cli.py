"""Interactive menu loop for the task tracker.

Eight numbered choices, each mapped to one TaskStore operation. The store
is saved after every mutation (when autosave is on) and once more on exit.
"""
from __future__ import annotations
import logging
from typing import Callable, Dict, Optional

from .display import render_statistics, render_tasks
from .errors import InvalidInput, NotFound
from .store import CompletionOutcome, TaskStore
from .theme import color, HEADER_COLOR, BOLD

logger = logging.getLogger(__name__)

MENU_RULE = '=' * 40
EXIT_CHOICE = 8


def _clear_screen() -> None:
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def parse_int(raw: str) -> int:
    """Parse a user-typed integer, raising InvalidInput otherwise."""
    text = raw.strip().rstrip('.')
    try:
        return int(text)
    except ValueError:
        raise InvalidInput(f"Not a number: {raw.strip()!r}") from None


class MenuShell:
    def __init__(self, store: TaskStore, clear_screen: bool = False):
        self.store: TaskStore = store
        self.clear_screen: bool = clear_screen
        self._actions: Dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._complete,
            3: self._view_all,
            4: self._view_pending,
            5: self._view_completed,
            6: self._delete,
            7: self._statistics,
        }

    def run(self) -> int:
        """Main REPL loop; returns the process exit code.

        EOF and Ctrl-C behave like choosing Exit.
        """
        exit_message = "\nThank you for using Task Manager! Goodbye!"
        try:
            while True:
                if self.clear_screen:
                    _clear_screen()
                self._menu()
                raw = input("Choose an option (1-8): ")
                try:
                    choice = parse_int(raw)
                except InvalidInput:
                    choice = None
                if choice == EXIT_CHOICE:
                    break
                action = self._actions.get(choice) if choice is not None else None
                if action is None:
                    print("Invalid choice! Please select 1-8.")
                    continue
                action()
        except (KeyboardInterrupt, EOFError):
            logger.info("Input closed or interrupted; saving and exiting")
            exit_message = "\nInterrupted. Goodbye."
        self.store.save()
        if not self.store.last_save_ok:
            print(f"Warning: tasks could not be saved to {self.store.path}.")
        print(exit_message)
        return 0

    # -------------------- prompts --------------------
    def _menu(self) -> None:
        print()
        print(color("TASK MANAGER", HEADER_COLOR, BOLD))
        print(color(MENU_RULE, HEADER_COLOR))
        print("1. Add Task")
        print("2. Mark Task as Completed")
        print("3. View All Tasks")
        print("4. View Pending Tasks")
        print("5. View Completed Tasks")
        print("6. Delete Task")
        print("7. Show Statistics")
        print("8. Exit")
        print(color(MENU_RULE, HEADER_COLOR))

    def _prompt_id(self, prompt: str) -> Optional[int]:
        """Ask until a number is typed; an empty answer cancels (None)."""
        while True:
            raw = input(prompt)
            if not raw.strip():
                return None
            try:
                return parse_int(raw)
            except InvalidInput:
                print("Invalid ID! Please enter a number (or press Enter to cancel).")

    def _report_save(self) -> None:
        if not self.store.last_save_ok:
            print(f"Warning: changes could not be saved to {self.store.path}.")

    @staticmethod
    def _print_lines(lines) -> None:
        for line in lines:
            print(line)

    # -------------------- actions --------------------
    def _add(self) -> None:
        description = input("\nEnter task description: ")
        try:
            self.store.add(description)
        except InvalidInput as exc:
            print(exc)
            return
        print("Task added successfully!")
        self._report_save()

    def _complete(self) -> None:
        if not len(self.store):
            print("No tasks available!")
            return
        self._view_pending()
        tid = self._prompt_id("\nEnter task ID to mark as completed: ")
        if tid is None:
            return
        try:
            outcome = self.store.mark_completed(tid)
        except NotFound as exc:
            print(exc)
            return
        if outcome is CompletionOutcome.ALREADY_COMPLETED:
            print("Task is already completed!")
            return
        print("Task marked as completed!")
        self._report_save()

    def _view_all(self) -> None:
        self._print_lines(render_tasks("ALL TASKS", self.store.tasks, "No tasks available!"))

    def _view_pending(self) -> None:
        self._print_lines(render_tasks("PENDING TASKS", self.store.filter_pending(), "No pending tasks! Great job!"))

    def _view_completed(self) -> None:
        self._print_lines(render_tasks("COMPLETED TASKS", self.store.filter_completed(), "No completed tasks yet!"))

    def _delete(self) -> None:
        if not len(self.store):
            print("No tasks available!")
            return
        self._view_all()
        tid = self._prompt_id("\nEnter task ID to delete: ")
        if tid is None:
            return
        try:
            self.store.delete(tid)
        except NotFound as exc:
            print(exc)
            return
        print("Task deleted successfully!")
        self._report_save()

    def _statistics(self) -> None:
        self._print_lines(render_statistics(self.store.statistics()))
