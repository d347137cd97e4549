"""Editor event names understood by the hook registry."""

from __future__ import annotations

BUF_WRITE: str = "BufWritePost"
PLOT_HOOK_NAME: str = "render-plot"
