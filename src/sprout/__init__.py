"""Interactive git branch creation tool.

Features:
- Pick a starting branch from local branches, most recent first
- Pick a work category (feature, fix, performance, ...)
- Create and switch to a uniquely named branch like @feat/1a2b3c4d
"""

__version__ = "0.1.0"
