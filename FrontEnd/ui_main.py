import logging
from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
	QListWidget, QListWidgetItem, QStackedWidget, QSpinBox, QCheckBox, QFormLayout,
	QMessageBox, QSystemTrayIcon
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from BackEnd.core import config
from BackEnd.core.clock import fmt_mmss, parse_date
from BackEnd.services.timer_service import TimerMode, TimerState, SESSIONS_PER_CYCLE
from FrontEnd.components.footer_today import FooterToday
from FrontEnd.components.stat_card import StatCard
from FrontEnd.styles.design_tokens import COLORS, MODE_COLORS, stylesheet

logger = logging.getLogger(__name__)

TOGGLE_LABELS = [
	("autoStartBreaks", "Auto-start breaks"),
	("autoStartFocus", "Auto-start focus sessions"),
	("enableNotifications", "Show notifications"),
	("enableSounds", "Play sounds"),
]


def make_tray_icon(color):
	"""Plain filled circle in the mode colour."""
	pixmap = QPixmap(32, 32)
	pixmap.fill(Qt.transparent)
	painter = QPainter(pixmap)
	painter.setRenderHint(QPainter.Antialiasing)
	painter.setBrush(QColor(color))
	painter.setPen(Qt.NoPen)
	painter.drawEllipse(2, 2, 28, 28)
	painter.end()
	return QIcon(pixmap)


class MainWindow(QMainWindow):
	def __init__(self, engine, tray=None):
		super().__init__()
		self.engine = engine
		self.store = engine.store
		self.tray = tray
		self.setWindowTitle("Tempo")
		self.resize(1000, 650)

		self.sidebar = QListWidget()
		self.sidebar.setFixedWidth(200)
		self.sidebar.setSpacing(8)
		for name in ("Timer", "Statistics", "Settings"):
			self.sidebar.addItem(QListWidgetItem(name))

		self.stack = QStackedWidget()
		self.stack.addWidget(self._build_timer_tab())
		self.stack.addWidget(self._build_stats_tab())
		self.stack.addWidget(self._build_settings_tab())
		self.sidebar.currentRowChanged.connect(self._on_page_changed)
		self.sidebar.setCurrentRow(0)

		self.footer_today = FooterToday("")
		content = QWidget()
		content_layout = QVBoxLayout()
		content_layout.setContentsMargins(0, 0, 0, 0)
		content_layout.addWidget(self.stack)
		content_layout.addWidget(self.footer_today, alignment=Qt.AlignmentFlag.AlignRight)
		content.setLayout(content_layout)

		main_layout = QHBoxLayout()
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(0)
		main_layout.addWidget(self.sidebar)
		main_layout.addWidget(content)
		container = QWidget()
		container.setLayout(main_layout)
		self.setCentralWidget(container)

		# engine -> UI
		self.engine.changed.connect(self._refresh_timer)
		self.engine.mode_changed.connect(self._apply_theme)
		self.engine.session_completed.connect(self._on_session_completed)
		self.engine.data_reset.connect(self._refresh_stats)

		self._apply_theme(self.engine.mode.value)
		self._refresh_timer()
		self._refresh_stats()

	# --- pages -------------------------------------------------------

	def _build_timer_tab(self):
		w = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)
		outer.addStretch()

		self.mode_label = QLabel("")
		self.mode_label.setObjectName("ModeLabel")
		self.mode_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		outer.addWidget(self.mode_label)

		self.timer_label = QLabel("25:00")
		self.timer_label.setObjectName("TimerLabel")
		self.timer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		outer.addWidget(self.timer_label)

		self.cycle_label = QLabel("")
		self.cycle_label.setObjectName("CycleLabel")
		self.cycle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		outer.addWidget(self.cycle_label)
		outer.addSpacing(24)

		controls = QHBoxLayout()
		controls.setSpacing(24)
		controls.addStretch()
		self.stop_btn = QPushButton("Stop")
		self.stop_btn.setObjectName("SecondaryBtn")
		self.start_pause_btn = QPushButton("Start")
		self.start_pause_btn.setObjectName("StartBtn")
		self.start_pause_btn.setMinimumHeight(56)
		self.skip_btn = QPushButton("Skip")
		self.skip_btn.setObjectName("SecondaryBtn")
		for btn in (self.stop_btn, self.start_pause_btn, self.skip_btn):
			btn.setCursor(Qt.PointingHandCursor)
			controls.addWidget(btn)
		controls.addStretch()
		outer.addLayout(controls)
		outer.addStretch()
		w.setLayout(outer)

		self.start_pause_btn.clicked.connect(self._start_pause)
		self.stop_btn.clicked.connect(self.engine.stop)
		self.skip_btn.clicked.connect(self.engine.skip)
		return w

	def _build_stats_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		layout.setContentsMargins(32, 32, 32, 32)

		cards = QHBoxLayout()
		self.today_card = StatCard("Today", "sessions")
		self.week_card = StatCard("This Week", "sessions")
		self.total_card = StatCard("Total Time", "focused")
		for card in (self.today_card, self.week_card, self.total_card):
			cards.addWidget(card)
		layout.addLayout(cards)

		self.figure = Figure(figsize=(5, 2.5))
		self.canvas = FigureCanvas(self.figure)
		layout.addWidget(self.canvas)

		insights = QGridLayout()
		self.best_card = StatCard("Best Day", color=COLORS['insight_best'])
		self.average_card = StatCard("Daily Average", color=COLORS['insight_average'])
		self.streak_card = StatCard("Current Streak", color=COLORS['insight_streak'])
		insights.addWidget(self.best_card, 0, 0)
		insights.addWidget(self.average_card, 0, 1)
		insights.addWidget(self.streak_card, 0, 2)
		layout.addLayout(insights)

		self.no_data_label = QLabel("No Data Yet: complete some focus sessions to see insights")
		self.no_data_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.no_data_label)
		w.setLayout(layout)
		return w

	def _build_settings_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		layout.setContentsMargins(32, 32, 32, 32)

		form = QFormLayout()
		self.duration_spins = {}
		for mode in TimerMode:
			spin = QSpinBox()
			lo, hi = config.duration_range(mode)
			spin.setRange(lo, hi)
			spin.setSuffix(" min")
			spin.setValue(config.duration_minutes(self.store, mode))
			spin.valueChanged.connect(lambda value, m=mode: self._on_duration_changed(m, value))
			self.duration_spins[mode] = spin
			form.addRow(f"{mode.label}:", spin)
		layout.addLayout(form)
		layout.addSpacing(16)

		self.toggle_boxes = {}
		for name, text in TOGGLE_LABELS:
			box = QCheckBox(text)
			box.setChecked(config.toggle(self.store, name))
			box.toggled.connect(lambda checked, n=name: config.set_toggle(self.store, n, checked))
			self.toggle_boxes[name] = box
			layout.addWidget(box)
		layout.addSpacing(24)

		reset_btn = QPushButton("Reset All Data")
		reset_btn.setObjectName("DangerBtn")
		reset_btn.clicked.connect(self._confirm_reset)
		layout.addWidget(reset_btn, alignment=Qt.AlignmentFlag.AlignLeft)
		w.setLayout(layout)
		return w

	# --- handlers ----------------------------------------------------

	def _on_page_changed(self, row):
		self.stack.setCurrentIndex(row)
		if row == 1:
			self._refresh_stats()

	def _start_pause(self):
		if self.engine.state == TimerState.RUNNING:
			self.engine.pause()
		else:
			self.engine.start()

	def _on_duration_changed(self, mode, minutes):
		config.set_duration(self.store, mode, minutes)
		self.engine.update_duration()

	def _on_session_completed(self, completed_mode):
		self._refresh_stats()
		# auto-start is a host preference; the engine always halts at a transition
		if config.auto_start_enabled(self.store, self.engine.mode):
			self.engine.start()

	def _confirm_reset(self):
		answer = QMessageBox.question(
			self, "Reset All Data",
			"This will delete all your statistics and reset settings to defaults. This action cannot be undone."
		)
		if answer != QMessageBox.StandardButton.Yes:
			return
		config.reset_settings(self.store)
		self.engine.reset_all_data()
		for mode, spin in self.duration_spins.items():
			spin.blockSignals(True)
			spin.setValue(config.duration_minutes(self.store, mode))
			spin.blockSignals(False)
		for name, box in self.toggle_boxes.items():
			box.blockSignals(True)
			box.setChecked(config.toggle(self.store, name))
			box.blockSignals(False)

	# --- rendering ---------------------------------------------------

	def _apply_theme(self, mode_value):
		accent = MODE_COLORS.get(mode_value, MODE_COLORS['focus'])
		self.setStyleSheet(stylesheet(accent))
		if self.tray is not None:
			self.tray.setIcon(make_tray_icon(accent))

	def _refresh_timer(self):
		engine = self.engine
		self.mode_label.setText(engine.mode.label)
		self.timer_label.setText(fmt_mmss(engine.time_remaining))
		done = engine.completed_sessions % SESSIONS_PER_CYCLE
		if engine.completed_sessions and done == 0 and engine.mode == TimerMode.LONG_BREAK:
			done = SESSIONS_PER_CYCLE
		self.cycle_label.setText("●" * done + "○" * (SESSIONS_PER_CYCLE - done))
		if engine.state == TimerState.RUNNING:
			self.start_pause_btn.setText("Pause")
		elif engine.state == TimerState.PAUSED:
			self.start_pause_btn.setText("Resume")
		else:
			self.start_pause_btn.setText("Start")
		self.stop_btn.setEnabled(engine.state != TimerState.STOPPED)
		if self.tray is not None:
			self.tray.setToolTip(f"Tempo: {engine.mode.label} {fmt_mmss(engine.time_remaining)}")

	def _refresh_stats(self):
		summary = self.engine.stats.weekly_summary()
		self.today_card.set_value(self.engine.today_sessions)
		self.week_card.set_value(summary["total_sessions"])
		self.total_card.set_value(f"{int(self.engine.total_focus_seconds / 3600)}h")

		best = summary["best_day"]
		has_data = best is not None
		for card in (self.best_card, self.average_card, self.streak_card):
			card.setVisible(has_data)
		self.no_data_label.setVisible(not has_data)
		if has_data:
			self.best_card.set_value(best.day_of_week, f"with {best.sessions} sessions")
			self.average_card.set_value(f"{summary['daily_average']:.1f}", "sessions per day")
			streak = summary["streak"]
			self.streak_card.set_value(streak, f"day{'' if streak == 1 else 's'} in a row")
		self._update_bar_chart()
		self.footer_today.set_sessions(self.engine.today_sessions)

	def _update_bar_chart(self):
		series = self.engine.stats.week_series()
		x = []
		for day, _ in series:
			d = parse_date(day)
			x.append(d.strftime("%a") if d else day)
		y = [minutes for _, minutes in series]

		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		ax.set_facecolor(COLORS['background'])
		bars = ax.bar(x, y, color=COLORS['chart_bar'], edgecolor=COLORS['chart_edge'], linewidth=1.5, alpha=0.9)
		for bar, value in zip(bars, y):
			if value > 0:
				ax.text(bar.get_x() + bar.get_width()/2, bar.get_height() + 0.5,
				       f'{value:.0f}m', ha='center', va='bottom',
				       fontsize=9, fontweight='600', color=COLORS['text_strong'])
		ax.set_ylabel("Focus Minutes", fontsize=12, fontweight='600', color=COLORS['text_strong'], labelpad=10)
		ax.set_title("Last 7 Days", fontsize=14, fontweight='bold', color=COLORS['text_strong'], pad=15)
		ax.set_ylim(bottom=0)
		ax.grid(True, axis='y', alpha=0.25, linestyle='--', linewidth=0.8, color=COLORS['border'])
		ax.set_axisbelow(True)
		ax.tick_params(axis='both', colors=COLORS['text_strong'], labelsize=10)
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		for spine in ['bottom', 'left']:
			ax.spines[spine].set_color(COLORS['border'])
		self.figure.tight_layout()
		self.canvas.draw()

	def closeEvent(self, event):
		# an unfinished interval is abandoned, never recorded
		if self.engine.state != TimerState.STOPPED:
			self.engine.stop()
		if self.tray is not None:
			self.tray.hide()
		super().closeEvent(event)


def create_tray(parent=None):
	if not QSystemTrayIcon.isSystemTrayAvailable():
		logger.info("System tray not available, notifications disabled")
		return None
	tray = QSystemTrayIcon(parent)
	tray.setIcon(make_tray_icon(MODE_COLORS['focus']))
	tray.setToolTip("Tempo")
	tray.show()
	return tray
