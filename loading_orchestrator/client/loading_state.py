from typing import Any, Callable, Optional


class LoadingScreenState:
    """
    What a loading screen displays, independent of how it is drawn.

    Implements:
        The 'LoadingScreen' Protocol (duck typing).

    Responsibilities:
        - Holds the latest progress fraction and status line.
        - Turns caller-defined status objects into display text.
        - Keeps an error line that error handlers can show before the screen goes away.
    """

    def __init__(self,
                 status_text: str = "Initializing...",
                 format_status: Callable[[Any], str] = str):
        self.progress: float = 0.0
        self.status_text: str = status_text
        self.error_text: Optional[str] = None
        self.format_status = format_status
        self.update_count: int = 0

    def update_loading_state(self, progress: float, status: Any):
        """Stores the latest report. Values are kept as reported."""
        self.progress = progress
        self.status_text = self.format_status(status)
        self.update_count += 1

    def show_error(self, error: BaseException):
        self.error_text = str(error) or type(error).__name__

    def finalize(self, text: str):
        """Pins the screen at 100% while the next view is being prepared."""
        self.progress = 1.0
        self.status_text = text

    @property
    def percent_text(self) -> str:
        return f"{self.progress * 100:.0f}%"
