#!/usr/bin/env python3
"""
MyTeamStats - Main Entry Point
Development server for the analytics API
"""

from myteamstats.main import main

if __name__ == '__main__':
    main()
