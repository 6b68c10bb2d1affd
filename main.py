import argparse
import asyncio
import arcade

from loading_orchestrator.client.tasks.demo_tasks import StagedLoadable, compile_lookup_tables
from loading_orchestrator.client.views.loading_view import LoadingScreenView
from loading_orchestrator.client.views.ready_view import ReadyView
from loading_orchestrator.client.window import MainWindow
from loading_orchestrator.core.step import LoadingStep
from loading_orchestrator.shared.config import OrchestratorConfig
from loading_orchestrator.shared.logging import setup_logging

def build_steps(fail: bool):
    async def warm_up():
        await asyncio.sleep(0.5)

    async def broken_step():
        await asyncio.sleep(0.3)
        raise RuntimeError("Shader cache is corrupted")

    steps = [
        LoadingStep.from_loadable(3.0, StagedLoadable("World database", ["regions", "countries", "economy"])),
        LoadingStep.from_blocking(2.0, "Compiling lookup tables...", compile_lookup_tables, 1.0),
        LoadingStep.from_loadable(2.0, StagedLoadable("Textures", ["terrain", "flags"], stage_delay=0.5)),
        LoadingStep.from_action(1.0, "Warming up systems...", warm_up),
    ]
    if fail:
        steps.insert(3, LoadingStep.from_action(1.0, "Building shader cache...", broken_step))
    return steps

def main():
    parser = argparse.ArgumentParser(description="Loading orchestrator demo")
    parser.add_argument("--config", default="loading.toml", help="TOML config file")
    parser.add_argument("--fail", action="store_true", help="Insert a step that fails")
    args = parser.parse_args()

    config = OrchestratorConfig.load(args.config)
    setup_logging(config.log_level, config.log_file)

    window = MainWindow()
    screen = LoadingScreenView(config.loading_screen)

    async def on_complete():
        screen.state.finalize(config.loading_screen.finalizing_text)
        # Let the 100% frame render before switching
        await asyncio.sleep(0.2)
        window.show_view(ReadyView("Loading complete."))

    async def on_error(error: BaseException):
        # The screen stays attached until this returns
        screen.show_error(error)
        await asyncio.sleep(2.0)
        window.show_view(ReadyView(f"Loading failed: {error}"))

    window.run_async(window.orchestrator.execute_steps_with_loading_screen(
        screen, build_steps(args.fail), on_complete, on_error
    ))

    arcade.run()

if __name__ == "__main__":
    main()
