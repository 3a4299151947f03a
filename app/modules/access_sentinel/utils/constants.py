"""
constants.py - Project constants
-------------------------------
Single responsibility: Hold project-wide constants
"""

# Travel model
WALKING_SPEED_M_PER_MIN = 83.3
FLOOR_CHANGE_MINUTES = 0.5
BUILDING_CHANGE_MINUTES = 2.0

# Only consecutive accesses at most this far apart are paired
MAX_PAIR_GAP_MINUTES = 60.0

# Alert feed
ALERT_BUFFER_CAPACITY = 50

# Behavior profile defaults
DEFAULT_LOGIN_HOURS = (8, 18)
TOP_PREFERENCES = 3
