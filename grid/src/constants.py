"""
Column Select Grid - Constants and Configuration

This module contains the constant values used throughout the application:
- Demo record layout
- Deferred selection timing
- Config file location and defaults
"""

# ======================================================================
# DEMO RECORDS
# ======================================================================

# Field names of the demo record, in display order
RECORD_FIELDS = ('col1', 'col2', 'col3')

# Number of records created when the window opens (if unspecified in config)
DEFAULT_RECORD_COUNT = 10

# First value handed out by a RecordFactory
FIRST_DEBUG_VALUE = 1

# ======================================================================
# SELECTION
# ======================================================================

# Delay for the deferred single-in-column reassertion.
# Zero posts the call behind the event currently being dispatched.
DEFERRED_SELECT_DELAY_MS = 0

# Selection is constrained to one column unless the config turns it off
DEFAULT_CONSTRAIN_DRAG = True

# ======================================================================
# CONFIG
# ======================================================================

CONFIG_DIR_NAME = ".columnselect"
CONFIG_FILE_NAME = "config.json"

DEFAULT_WINDOW_SIZE = (640, 400)
MIN_WINDOW_SIZE = (320, 200)
