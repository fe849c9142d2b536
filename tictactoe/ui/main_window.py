from ..ai import Difficulty
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QComboBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: draws the game and forwards input to the controller

    registered as a game listener, so every board change, game over and
    reset arrives here as a callback on the gui thread
    """
    def __init__(self, game_logic, controller):
        """
        init ui widgets and signals
        """
        super().__init__()
        self.game_logic = game_logic
        self.controller = controller
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self._update_message(self.game_logic.message)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe Game")
        self.resize(400, 500)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(16); f.setBold(True)
        self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.message_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        game_menu = self.menuBar().addMenu("Game")
        new_action = QAction("New Game", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self._on_reset_clicked)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)

    def _create_bottom_controls(self):
        # difficulty picker + new game button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.difficulty_combo = QComboBox()
        for d in Difficulty:
            self.difficulty_combo.addItem(d.label, d.value)
        self.difficulty_combo.setCurrentIndex(
            self.difficulty_combo.findData(self.controller.difficulty.value))
        self.difficulty_combo.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        # connect after the initial selection so startup does not reset
        self.difficulty_combo.currentIndexChanged.connect(self._on_difficulty_selected)
        self.reset_button = QPushButton("New Game")
        self.reset_button.clicked.connect(self._on_reset_clicked)
        hl.addWidget(self.difficulty_combo)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)

    def _update_message(self, text, is_over=False):
        # set status text + style
        style = "color: lime;" if is_over else ""
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    # ---- input -> controller ----

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        self.controller.on_cell_clicked(r, c)

    @Slot()
    def _on_reset_clicked(self):
        self.controller.on_reset_requested()

    @Slot(int)
    def _on_difficulty_selected(self, index):
        self.controller.on_difficulty_changed(Difficulty(self.difficulty_combo.itemData(index)))

    # ---- game notifications -> widgets ----

    def on_board_changed(self, row, col, symbol, status_text):
        self._update_message(status_text)
        self.board_widget.update()

    def on_game_over(self, status_text):
        self._update_message(status_text, is_over=True)
        self.board_widget.set_accept_clicks(False)
        self.board_widget.update()

    def on_reset(self):
        self._update_message(self.game_logic.message)
        self.board_widget.set_accept_clicks(True)
        self.board_widget.update()

    def closeEvent(self, event):
        # ensure the worker thread stops
        self.controller.computer_player.shutdown()
        event.accept()
