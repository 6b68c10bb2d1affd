import logging
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    import arcade

logger = logging.getLogger(__name__)


class ArcadeViewHost:
    """
    ViewHost binding for an arcade window.

    Attaching shows the loading view in place of whatever the window was
    showing; detaching puts the previous view back. If the application already
    switched to a new view (typically inside `on_complete`), detaching leaves
    that view alone.

    Implements:
        The 'ViewHost' Protocol (duck typing).
    """

    def __init__(self, window: "arcade.Window"):
        self.window = window
        # One stack per view, keyed by id(), so nested and re-entrant
        # attaches of the same view unwind in order.
        self._previous: Dict[int, List[Optional["arcade.View"]]] = {}

    def attach(self, view: "arcade.View"):
        self._previous.setdefault(id(view), []).append(self.window.current_view)
        logger.debug("Switching to loading screen")
        self.window.show_view(view)

    def detach(self, view: "arcade.View"):
        stack = self._previous.get(id(view))
        previous = stack.pop() if stack else None
        if not stack:
            self._previous.pop(id(view), None)

        if self.window.current_view is not view or previous is view:
            return

        if previous is not None:
            logger.debug("Restoring previous view %s", type(previous).__name__)
            self.window.show_view(previous)
        else:
            self.window.hide_view()
