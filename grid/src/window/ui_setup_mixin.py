"""UI setup for GridDemoWindow"""

from PyQt5.QtWidgets import QLabel, QAction

from components.column_select_table import ColumnSelectTable
from models.record import RecordTableModel


class UISetupMixin:
    """UI initialization and component wiring"""

    def setup_ui(self):
        """Build the table, menus and status bar"""
        # Demo data
        self.record_model = RecordTableModel(parent=self)
        for _ in range(self.config['record_count']):
            self.record_model.add_new()

        # Central table
        self.table = ColumnSelectTable(self, constrained=self.config['constrain_drag'])
        self.table.setModel(self.record_model)
        self.table.controller.on_constraint_changed = self._on_constraint_changed
        self.setCentralWidget(self.table)

        self._create_menu_bar()

        # Status bar: left shows messages, right shows the live constraint
        self.status_left = QLabel("Ready")
        self.status_right = QLabel("")
        self.statusBar().addWidget(self.status_left, 1)
        self.statusBar().addPermanentWidget(self.status_right)
        self._on_constraint_changed(self.table.controller.constraint)

    def _create_menu_bar(self):
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")
        add_action = QAction("&Add Record", self)
        add_action.setShortcut("Ctrl+N")
        add_action.triggered.connect(self.add_record)
        file_menu.addAction(add_action)
        file_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Selection menu
        selection_menu = menubar.addMenu("&Selection")
        self.constrain_action = QAction("&Constrain Drag to One Column", self)
        self.constrain_action.setCheckable(True)
        self.constrain_action.setChecked(self.table.is_constrained())
        self.constrain_action.toggled.connect(self.set_constrain_drag)
        selection_menu.addAction(self.constrain_action)
        clear_action = QAction("C&lear Selection", self)
        clear_action.setShortcut("Escape")
        clear_action.triggered.connect(self.table.clearSelection)
        selection_menu.addAction(clear_action)
