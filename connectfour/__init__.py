"""
connectfour - Connect Four rules engine with terminal and Gymnasium front ends

This package provides the board state machine and win/draw evaluation for
Connect Four, a game session that turns column choices into move events,
and presentation adapters that render the board and animate piece drops.
"""

# Version number
__version__ = '0.1.0'
