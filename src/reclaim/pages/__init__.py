"""NiceGUI pages for Reclaim.

Import this module to register all page routes with NiceGUI.
"""

from reclaim.pages import signin

__all__ = ["signin"]

# Touch module to prevent linter from removing the "unused" import.
# The import registers @ui.page decorators as a side effect.
_PAGES = (signin,)
