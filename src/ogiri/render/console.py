"""
Terminal view backed by rich.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence

from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from .view_model import RankedAnswer, TopicView

if TYPE_CHECKING:
    from ..presenter import NavigationEntry


def _answer_block(answer: RankedAnswer) -> Group:
    lines = [
        Text.assemble((f"{answer.rank}位", "bold"), f" ({answer.votes}票)"),
        Text(answer.text),
        Text(f"回答者: {answer.respondent}", style="dim"),
    ]
    if answer.breakdown:
        lines.append(Text(f"投票内訳: {answer.breakdown}", style="bright_black"))
    return Group(*lines)


def topic_renderable(view: TopicView) -> Group:
    """Build the rich renderable for one topic."""
    header = Panel(
        Group(
            Text(view.title, style="bold"),
            Text(f"出題者: {view.submitter}"),
        ),
        title=Text(f"お題 (番号: {view.key})"),
        title_align="left",
    )
    blocks = []
    for answer in view.answers:
        blocks.append(_answer_block(answer))
        blocks.append(Text(""))
    return Group(header, Rule(style="dim"), *blocks)


class ConsoleView:
    """
    ResultView that paints to a rich Console.

    Like a page's result container, the view keeps the latest navigation
    strip and topic; `render()` paints whatever is currently held. Errors
    are printed immediately to `error_console` (stderr by default).
    """

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self.keys: List[str] = []
        self.topic: Optional[TopicView] = None

    @property
    def visible(self) -> bool:
        return self.topic is not None

    def clear_error(self) -> None:
        # Terminal output is append-only; nothing to erase.
        pass

    def show_error(self, message: str) -> None:
        self.error_console.print(Text(f"❌ {message}", style="bold red"))

    def hide_results(self) -> None:
        self.keys = []
        self.topic = None

    def show_navigation(self, entries: Sequence["NavigationEntry"]) -> None:
        self.keys = [e.key for e in entries]

    def show_topic(self, view: TopicView) -> None:
        self.topic = view

    def navigation_text(self) -> Text:
        active = self.topic.key if self.topic else None
        nav = Text("お題:")
        for key in self.keys:
            nav.append(" ")
            nav.append(key, style="bold reverse" if key == active else "cyan")
        return nav

    def render(self) -> None:
        """Paint the navigation strip and the selected topic."""
        if not self.visible:
            return
        self.console.print(self.navigation_text())
        self.console.print(topic_renderable(self.topic))
