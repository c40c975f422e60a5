from collections.abc import Mapping

from rich.console import Console
from rich.text import Text

INDENT = "  "


class Reporter:
    """Console progress reporting for a unit of work and its nested subtasks.

    A reporter prints its title and attributes when started and returns a ``Task``
    one indentation level deeper. Tasks log lines and open subtasks of their own.
    Reporting never influences the work being reported.

    Example::

        reporter = Reporter("Synthesizing policy", {"function": "resize"})
        task = reporter.start()
        task.log("images: s3:GetObject")
        reporter.success()
    """

    def __init__(
        self,
        title: str,
        attributes: Mapping[str, str] | None = None,
        *,
        console: Console | None = None,
        level: int = 0,
    ):
        self.title = title
        self.attributes = dict(attributes or {})
        self.console = console or Console(highlight=False)
        self.level = level

    def start(self) -> "Task":
        _print_message(self.console, self.level, self.title, self.attributes)
        return Task(self.console, self.level + 1)

    def success(self) -> None:
        _print_message(self.console, self.level, f"{self.title}: SUCCESS", style="green")

    def failure(self, error: BaseException) -> None:
        _print_message(self.console, self.level, f"{self.title}: FAILED", style="red")
        _print_error(self.console, error)


class Task:
    def __init__(self, console: Console, level: int):
        self.console = console
        self.level = level

    def log(self, title: str, attributes: Mapping[str, str] | None = None) -> "Task":
        _print_message(self.console, self.level, title, attributes)
        return self

    def subtask(self, title: str, attributes: Mapping[str, str] | None = None) -> "Task":
        return Reporter(title, attributes, console=self.console, level=self.level + 1).start()

    def success(self, result: Mapping[str, str] | None = None) -> None:
        title = "SUCCESS:" if result else "SUCCESS"
        _print_message(self.console, self.level, title, result, style="green")

    def failure(self, error: BaseException) -> None:
        _print_message(self.console, self.level, "FAILURE", style="red")
        _print_error(self.console, error)


def _print_message(
    console: Console,
    level: int,
    title: str,
    attributes: Mapping[str, str] | None = None,
    style: str = "cyan",
) -> None:
    tab = INDENT * level
    console.print(Text(f"{tab}{title}", style=style), soft_wrap=True)
    for name, value in (attributes or {}).items():
        console.print(Text(f"{tab}{INDENT}- {name}: {value}", style="blue"), soft_wrap=True)


def _print_error(console: Console, error: BaseException) -> None:
    console.print(Text("Error is:", style="bold red"), soft_wrap=True)
    console.print(Text(str(error), style="red"), soft_wrap=True)
