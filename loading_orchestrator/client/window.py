import arcade
from typing import Coroutine, Any
from loading_orchestrator.client.hosts import ArcadeViewHost
from loading_orchestrator.client.orchestrator import LoadingOrchestrator
from loading_orchestrator.client.services.async_pump import AsyncPump

# Window configuration
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
SCREEN_TITLE = "Loading Orchestrator"

class MainWindow(arcade.Window):
    """
    Main application window.
    Acts as a container for Views and owns the services shared between them:
    the asyncio pump and a LoadingOrchestrator bound to this window.
    """
    def __init__(self, title: str = SCREEN_TITLE):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, title, resizable=True)
        self.pump = AsyncPump()
        self.orchestrator = LoadingOrchestrator(ArcadeViewHost(self))

        arcade.schedule(self.pump.pump, 1 / 120)

    def run_async(self, coro: Coroutine[Any, Any, Any]):
        """Starts a coroutine on the window's event loop."""
        return self.pump.submit(coro)

    def on_close(self):
        arcade.unschedule(self.pump.pump)
        self.pump.close()
        super().on_close()
