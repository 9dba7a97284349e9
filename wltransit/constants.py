"""
Constants used across the transition modules.

Consolidates magic numbers and shared values to improve code readability
and maintainability.
"""

# Number of campaigns (games) in a decoded state
GAME_COUNT = 2

# Destination code meaning "send the player back where they came from"
LOCATION_PREVIOUS = 255

# Sub-locations occupy the range starting here; regular locations sit below
SUB_LOCATION_MIN = 256

# Destination class tag of a transition that opens a shop instead of a map
ACTION_CLASS_SHOP = 11
