"""
MyTeamStats - personal football statistics analytics
"""

__version__ = "1.0.0"
