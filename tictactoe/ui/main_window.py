import logging

from ..config import DEFAULT_PLAYER_ONE_NAME, DEFAULT_PLAYER_TWO_NAME
from ..game_logic import GameController, RoundOutcome
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, player_one_name=DEFAULT_PLAYER_ONE_NAME,
                 player_two_name=DEFAULT_PLAYER_TWO_NAME):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self._names = (player_one_name, player_two_name)
        self.controller = GameController(player_one_name, player_two_name)
        self.board_widget = BoardWidget(self.controller, parent=self)

        self._setup_ui()
        self._update_screen()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_score_bar()           # both players' scores
        self.main_layout.addWidget(self.score_bar_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_score_bar(self):
        # left score for player one, right for player two
        self.score_bar_widget = QWidget()
        hl = QHBoxLayout(self.score_bar_widget)
        f = QFont(); f.setPointSize(12); f.setBold(True)
        self.left_score_label = QLabel("")
        self.right_score_label = QLabel("")
        self.left_score_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.right_score_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.left_score_label.setStyleSheet("color: #8acaff;")
        self.right_score_label.setStyleSheet("color: #ff8a8a;")
        for label in (self.left_score_label, self.right_score_label):
            label.setFont(f)
        hl.addWidget(self.left_score_label); hl.addStretch(1); hl.addWidget(self.right_score_label)

    def _create_bottom_controls(self):
        # announcement label + play again button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.play_again_button = QPushButton("Play Again")
        self.play_again_button.clicked.connect(self.play_again)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.play_again_button)

    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _update_scores(self):
        one, two = self.controller.players
        self.left_score_label.setText(f"{one.name}: {one.score}")
        self.right_score_label.setText(f"{two.name}: {two.score}")

    def _update_screen(self):
        # redraw board, scores, turn banner, play-again visibility
        over = self.controller.is_round_over
        self._update_scores()
        self.board_widget.set_accept_clicks(not over)
        self.board_widget.update()
        self.play_again_button.setVisible(over)
        if not over:
            self._update_message(f"It's {self.controller.active_player.name}'s turn!", is_turn=True)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # ignore clicks after game over
        if self.controller.is_round_over:
            return
        mover = self.controller.active_player
        res = self.controller.play_round(r, c)
        if res == RoundOutcome.INVALID:
            self._update_message("That cell is already taken.", is_error=True)
            return
        self._update_screen()
        if res == RoundOutcome.WIN:
            self._update_message(f"{mover.name} has won this round!", is_success=True)
        elif res == RoundOutcome.DRAW:
            self._update_message("This game has ended in a tie!", is_success=True)

    @Slot()
    def play_again(self):
        # clear board, keep scores
        self.controller.reset_board()
        self._update_screen()

    @Slot()
    def new_game(self):
        # fresh controller, scores back to zero
        logger.info("starting new game")
        self.controller = GameController(*self._names)
        self.board_widget.set_controller(self.controller)
        self._update_screen()
