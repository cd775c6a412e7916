"""
Provides debugging utilities.

Adapted from `roosterize.Debug` at
https://github.com/EngineeringSoftware/roosterize.
"""


class Debug:
    """
    For holding some debugging variables.
    """

    is_debug = False
