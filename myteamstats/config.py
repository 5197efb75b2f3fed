"""
Configuration constants for MyTeamStats
"""
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Analytics constants. These drive displayed scores, keep them fixed.

# Morale
MORALE_WINDOW = 8
MORALE_MIN_MATCHES = 3
MORALE_WEIGHT_DECAY = 0.1
MORALE_POINTS = {
    'win': 3,
    'draw': 1,
    'loss': -2,
}
MORALE_GOAL_WEIGHT = 1.0
MORALE_ASSIST_WEIGHT = 0.5
MORALE_GOAL_DIFFERENCE_WEIGHT = 0.2
MORALE_MIN_RAW_SCORE = -5
MORALE_MAX_RAW_SCORE = 15
MORALE_TREND_MARGIN = 1

# Consistency
CONSISTENCY_DEFAULT_SCORE = 5
CONSISTENCY_MAX_SCORE = 10
CONSISTENCY_STDDEV_FACTOR = 4
MOMENTUM_WINDOW = 10

# Player level
XP_PER_MATCH = 10
XP_PER_GOAL = 5
XP_PER_ASSIST = 3
XP_BASE = 100
XP_GROWTH = 1.2

# Application settings - can be overridden by environment variables
MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 4 * 1024 * 1024))  # 4MB of match history
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
HOST = os.environ.get('HOST', '127.0.0.1')
PORT = int(os.environ.get('PORT', 8080))
