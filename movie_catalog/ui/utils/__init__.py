"""
Shell utilities: session state shared by pages and components.
"""

from movie_catalog.ui.utils.session_state import ShellContext

__all__ = ["ShellContext"]
