"""
Privy - private-mode dispatch for default-browser links.

Opens links that match your routing patterns in a private browser session
and everything else normally.
"""

from __future__ import annotations

__version__ = "0.1.0"

from privy.privy import main

__all__ = ["main", "__version__"]
