"""
statekit CLI

Commands:
- statekit replay - Replay an action log through a reducer
- statekit log show - List actions in an action log
- statekit version - Show version information
"""

from statekit import __version__

__all__ = ["__version__"]
