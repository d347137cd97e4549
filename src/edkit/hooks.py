"""Editor event hooks and the session that installs them."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from edkit.config import EdkitConfig
from edkit.constants.hooks import BUF_WRITE, PLOT_HOOK_NAME
from edkit.external import CommandRunner, plot_command

logger = logging.getLogger(__name__)

HookCallback: TypeAlias = Callable[[Path], None]


class HookRegistry:
    """Named callbacks per event; re-registering a name replaces the old callback."""

    def __init__(self) -> None:
        self._hooks: dict[str, dict[str, HookCallback]] = {}

    def register(self, event: str, name: str, callback: HookCallback) -> None:
        callbacks = self._hooks.setdefault(event, {})
        if name in callbacks:
            logger.debug("Replacing %s hook %s", event, name)
        callbacks[name] = callback

    def names(self, event: str) -> tuple[str, ...]:
        return tuple(self._hooks.get(event, {}))

    def fire(self, event: str, path: Path) -> int:
        """Run every callback registered for *event*; return how many ran."""
        callbacks = list(self._hooks.get(event, {}).items())
        for name, callback in callbacks:
            logger.debug("Running %s hook %s for %s", event, name, path)
            callback(path)
        return len(callbacks)


class Session:
    """Per-process host state, created once by the embedding host.

    Construction installs the built-in hooks; building another session
    gives a fresh registry rather than stacking duplicate hooks.
    """

    def __init__(self, config: EdkitConfig, runner: CommandRunner) -> None:
        self.config = config
        self.runner = runner
        self.hooks = HookRegistry()
        self.hooks.register(BUF_WRITE, PLOT_HOOK_NAME, self._render_plot)

    def _render_plot(self, path: Path) -> None:
        if path.suffix.lower() not in self.config.plot_suffixes:
            return
        command = plot_command(path, self.config)
        logger.info("Rendering plot %s", path.name)
        self.runner.launch(command)

    def file_written(self, path: Path) -> int:
        """Notify the session that *path* was saved."""
        return self.hooks.fire(BUF_WRITE, path)
