"""
connectfour.interfaces - Front ends for Connect Four

This package contains the terminal CLI, the drop animation it uses, and a
Gymnasium environment for scripted play.
"""

# Don't import anything here so the CLI does not pull in gymnasium
__all__ = []
