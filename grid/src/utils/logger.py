"""Global logging and error handling utilities"""
import sys
import logging
import traceback
from PyQt5.QtWidgets import QMessageBox

# True when running from source, False in a frozen build
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('GridDemo')
_main_window = None

def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window

def configure_logging(debug: bool = False):
    """Configure root logging for the demo application

    Args:
        debug: Log everything from DEBUG up instead of warnings only
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE the exception is raised straight away.
    Otherwise the traceback is logged, a popup is shown on the registered
    main window, and the exception is raised.
    """
    if DEBUG_MODE:
        raise e

    _logger.error("%s\n%s", user_message or title, traceback.format_exc())

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error("ERROR POPUP (no window): %s - %s", title, message)

    raise e
