import sys
import os
import argparse
import logging

# Add grid/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

from constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from utils.logger import loggerRaise, set_main_window, configure_logging

# Mixin imports
from window.config_mixin import ConfigMixin
from window.ui_setup_mixin import UISetupMixin


class GridDemoWindow(ConfigMixin, UISetupMixin, QMainWindow):
    def __init__(self, config_dir=None):
        super().__init__()
        self._logger = logging.getLogger('GridDemo')
        self.setWindowTitle("Column Select Grid")

        # Config
        self.config_dir = config_dir or os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
        self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
        self._load_config()

        set_main_window(self)

        self.setup_ui()
        self.resize(*self.config['window_size'])

    def add_record(self):
        """Append one demo record"""
        try:
            record = self.record_model.add_new()
            self.status_left.setText(f"Added record {record.col1}")
        except Exception as e:
            loggerRaise(e, "Failed to add record")

    def set_constrain_drag(self, enabled):
        """Toggle the one-column drag constraint"""
        self.table.set_constrained(enabled)
        self.config['constrain_drag'] = enabled
        self.status_left.setText("Drag constrained to one column" if enabled else "Default drag selection")
        self._on_constraint_changed(self.table.controller.constraint)

    def _on_constraint_changed(self, constraint):
        if not self.table.is_constrained():
            self.status_right.setText("")
            return
        self.status_right.setText(f"Selection: {constraint}")

    def closeEvent(self, event):
        """Save config before closing"""
        self._save_config()
        event.accept()


def main():
    """Main entry point for the Column Select Grid demo"""
    parser = argparse.ArgumentParser(
        description='Grid demo whose drag selection stays within one column.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args()

    configure_logging(args.verbose)

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setStyle("Fusion")

    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(245, 245, 245))
    palette.setColor(QPalette.WindowText, Qt.black)
    palette.setColor(QPalette.Base, Qt.white)
    palette.setColor(QPalette.AlternateBase, QColor(235, 235, 235))
    palette.setColor(QPalette.Text, Qt.black)
    palette.setColor(QPalette.Button, QColor(240, 240, 240))
    palette.setColor(QPalette.ButtonText, Qt.black)
    palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setPalette(palette)

    window = GridDemoWindow()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
