"""
ogiri - ranked results viewer for odai (topic) contest CSV exports.
"""

__version__ = "0.1.0"
