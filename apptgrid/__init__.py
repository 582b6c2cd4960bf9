"""apptgrid: conflict-aware calendar timeline layout.

Public API:
  - import from `apptgrid.api` (preferred) or `import apptgrid` (re-export)
"""

from __future__ import annotations

from .api import *  # noqa: F401,F403
from . import api as _api

__all__ = list(_api.__all__)
