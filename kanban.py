#!/usr/bin/env python3
"""Thin loader delegating the CLI/TUI to the interface layer."""

import sys

from core.interface import kanban_app as _kanban_app

if __name__ != "__main__":
    # When imported, expose the interface implementation directly.
    sys.modules[__name__] = _kanban_app
else:
    sys.exit(_kanban_app.main())
