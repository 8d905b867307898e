"""
mathbot - a Discord bot that renders typst math and looks up player stats

Architecture:
- Rendering Context: typst compilation of user expressions in scratch workspaces
- Stats Context: remote player statistics lookup
- Dispatch Context: static command registry and the Discord client
"""

__version__ = "0.1.0"
