"""Allow ``python -m edkit``."""

from __future__ import annotations

from edkit.cli.main import main

raise SystemExit(main())
