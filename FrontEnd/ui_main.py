from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
	QComboBox, QLineEdit, QCheckBox, QSizePolicy
)
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6.QtCore import Qt
from BackEnd.core.clock import local_today
from BackEnd.services.timer_service import TimerService
from BackEnd.services import stats_service
from FrontEnd.charts import draw_daily_chart, draw_breakdown_pie
from FrontEnd.components.summary_stats import SummaryStats
from FrontEnd.styles.design_tokens import stylesheet, theme

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
NO_WORK_TYPE = "Select Work Type"


class MainWindow(QMainWindow):
	def __init__(self, app_state, timer_service=None):
		super().__init__()
		self.setWindowTitle("Flow")
		self.resize(1100, 800)
		self.app_state = app_state
		self.timer_service = timer_service or TimerService(app_state)

		root = QWidget()
		outer = QVBoxLayout()
		outer.setContentsMargins(16, 16, 16, 16)

		# Dark mode switch, top right
		top_row = QHBoxLayout()
		top_row.addStretch()
		self.dark_toggle = QCheckBox("Dark mode")
		self.dark_toggle.setChecked(self.app_state.dark_mode)
		self.dark_toggle.toggled.connect(self._on_dark_mode)
		top_row.addWidget(self.dark_toggle)
		outer.addLayout(top_row)

		grid = QGridLayout()
		grid.setSpacing(16)
		grid.addWidget(self._build_timer_card(), 0, 0)
		grid.addWidget(self._build_calendar_card(), 0, 1)
		grid.addWidget(self._build_bar_card(), 1, 0, 1, 2)
		grid.addWidget(self._build_pie_card(), 2, 0)
		self.summary = SummaryStats()
		grid.addWidget(self.summary, 2, 1)
		outer.addLayout(grid)
		root.setLayout(outer)
		self.setCentralWidget(root)

		self.timer_service.tick.connect(self._on_tick)
		self.timer_service.state_changed.connect(self._on_state)
		self.timer_service.session_completed.connect(lambda _session: self._refresh_stats())

		self._apply_theme()
		self._on_tick(self.timer_service.remaining_sec)
		self._on_state(self.timer_service.state.value)
		self._reload_work_types()
		self._reload_months()
		self._refresh_stats()

	def closeEvent(self, event):
		# stop the tick source; the in-flight countdown is not recorded
		self.timer_service.reset()
		super().closeEvent(event)

	# ----- Timer card -----
	def _build_timer_card(self):
		card = QWidget()
		card.setObjectName("Card")
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.setSpacing(12)

		self.timer_label = QLabel("00:00")
		self.timer_label.setObjectName("TimerLabel")
		self.timer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.timer_label)

		minutes_row = QHBoxLayout()
		minutes_row.addStretch()
		self.minutes_input = QLineEdit(str(self.timer_service.configured_minutes))
		self.minutes_input.setFixedWidth(80)
		self.minutes_input.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.minutes_input.setPlaceholderText("Minutes")
		self.minutes_input.editingFinished.connect(self._on_minutes_entered)
		minutes_row.addWidget(self.minutes_input)
		minutes_label = QLabel("minutes")
		minutes_label.setObjectName("Muted")
		minutes_row.addWidget(minutes_label)
		minutes_row.addStretch()
		layout.addLayout(minutes_row)

		# Work type picker with remove button
		type_row = QHBoxLayout()
		self.work_type_combo = QComboBox()
		self.work_type_combo.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
		self.work_type_combo.activated.connect(self._on_work_type_selected)
		self.remove_type_btn = QPushButton("✕")
		self.remove_type_btn.setFixedWidth(36)
		self.remove_type_btn.clicked.connect(self._remove_selected_work_type)
		type_row.addWidget(self.work_type_combo)
		type_row.addWidget(self.remove_type_btn)
		layout.addLayout(type_row)

		add_row = QHBoxLayout()
		self.new_type_input = QLineEdit()
		self.new_type_input.setPlaceholderText("New work type")
		self.new_type_input.returnPressed.connect(self._add_work_type)
		add_btn = QPushButton("+")
		add_btn.setFixedWidth(36)
		add_btn.clicked.connect(self._add_work_type)
		add_row.addWidget(self.new_type_input)
		add_row.addWidget(add_btn)
		layout.addLayout(add_row)

		self.start_pause_btn = QPushButton("Start")
		self.start_pause_btn.setObjectName("StartBtn")
		self.reset_btn = QPushButton("Reset")
		for btn in (self.start_pause_btn, self.reset_btn):
			btn.setMinimumHeight(40)
			layout.addWidget(btn)
		self.start_pause_btn.clicked.connect(self.timer_service.toggle)
		self.reset_btn.clicked.connect(self.timer_service.reset)

		card.setLayout(layout)
		return card

	def _on_tick(self, remaining):
		self.timer_label.setText(self.timer_service.format_remaining())

	def _on_state(self, state):
		running = state == "running"
		self.start_pause_btn.setText("Pause" if running else "Start")
		self.start_pause_btn.setProperty("active", "true" if running else "false")
		self.start_pause_btn.style().unpolish(self.start_pause_btn)
		self.start_pause_btn.style().polish(self.start_pause_btn)
		self.minutes_input.setEnabled(state == "idle")

	def _on_minutes_entered(self):
		if not self.timer_service.configure(self.minutes_input.text()):
			self.minutes_input.setText(str(self.timer_service.configured_minutes))

	def _reload_work_types(self):
		self.work_type_combo.clear()
		self.work_type_combo.addItem(NO_WORK_TYPE, "")
		for work_type in self.app_state.work_types:
			self.work_type_combo.addItem(work_type, work_type)
		selected = self.app_state.selected_work_type
		self.work_type_combo.setCurrentIndex(max(0, self.work_type_combo.findData(selected)))
		self.remove_type_btn.setEnabled(bool(selected))

	def _on_work_type_selected(self, index):
		self.app_state.select_work_type(self.work_type_combo.itemData(index) or "")
		self.remove_type_btn.setEnabled(bool(self.app_state.selected_work_type))

	def _add_work_type(self):
		if self.app_state.add_work_type(self.new_type_input.text()):
			self.new_type_input.clear()
			self._reload_work_types()
			self._refresh_stats()

	def _remove_selected_work_type(self):
		if self.app_state.remove_work_type(self.app_state.selected_work_type):
			self._reload_work_types()
			self._refresh_stats()

	# ----- Calendar card -----
	def _build_calendar_card(self):
		card = QWidget()
		card.setObjectName("Card")
		layout = QVBoxLayout()

		nav = QHBoxLayout()
		self.prev_btn = QPushButton("◀")
		self.prev_btn.setFixedWidth(36)
		self.next_btn = QPushButton("▶")
		self.next_btn.setFixedWidth(36)
		self.month_combo = QComboBox()
		self.month_combo.setMinimumWidth(180)
		self.month_combo.activated.connect(self._on_month_selected)
		self.prev_btn.clicked.connect(lambda: self.app_state.previous_month() and self._on_month_changed())
		self.next_btn.clicked.connect(lambda: self.app_state.next_month() and self._on_month_changed())
		nav.addWidget(self.prev_btn)
		nav.addStretch()
		nav.addWidget(self.month_combo)
		nav.addStretch()
		nav.addWidget(self.next_btn)
		layout.addLayout(nav)

		self.calendar_grid = QGridLayout()
		self.calendar_grid.setSpacing(6)
		layout.addLayout(self.calendar_grid)

		self.month_total_label = QLabel("")
		self.month_total_label.setObjectName("Muted")
		self.month_total_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.month_total_label)
		card.setLayout(layout)
		return card

	def _reload_months(self):
		self.month_combo.clear()
		for month in self.app_state.selectable_months():
			self.month_combo.addItem(month.label(), str(month))
		self.month_combo.setCurrentIndex(max(0, self.month_combo.findData(str(self.app_state.selected_month))))
		self.prev_btn.setEnabled(self.app_state.can_go_previous())
		self.next_btn.setEnabled(self.app_state.can_go_next())

	def _on_month_selected(self, index):
		if self.app_state.select_month(self.month_combo.itemData(index)):
			self._on_month_changed()

	def _on_month_changed(self):
		self._reload_months()
		self._refresh_stats()

	def _render_calendar(self, days):
		while self.calendar_grid.count():
			item = self.calendar_grid.takeAt(0)
			if item.widget():
				item.widget().deleteLater()
		colors = theme(self.app_state.dark_mode)
		for col, name in enumerate(WEEKDAYS):
			header = QLabel(name)
			header.setObjectName("Muted")
			header.setAlignment(Qt.AlignmentFlag.AlignCenter)
			self.calendar_grid.addWidget(header, 0, col)

		today = local_today()
		offset = stats_service.leading_blank_days(self.app_state.selected_month)
		for i, day in enumerate(days):
			row, col = divmod(offset + i, 7)
			text = str(day.day.day)
			if day.total > 0:
				text += f"\n{day.total:.1f}"
			cell = QLabel(text)
			cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
			if day.day == today:
				bg, fg = colors['day_today'], colors['day_today_text']
			elif day.total > 0:
				bg, fg = colors['day_active'], colors['day_active_text']
			else:
				bg, fg = colors['day_idle'], colors['text']
			cell.setStyleSheet(f"background: {bg}; color: {fg}; border-radius: 6px; padding: 6px;")
			self.calendar_grid.addWidget(cell, row + 1, col)
		total = stats_service.month_total_hours(days)
		self.month_total_label.setText(f"Total: {total:.2f} hours")

	# ----- Charts -----
	def _build_bar_card(self):
		card = QWidget()
		card.setObjectName("Card")
		layout = QVBoxLayout()
		self.bar_figure = Figure(figsize=(8, 3))
		self.bar_canvas = FigureCanvas(self.bar_figure)
		layout.addWidget(self.bar_canvas)
		card.setLayout(layout)
		return card

	def _build_pie_card(self):
		card = QWidget()
		card.setObjectName("Card")
		layout = QVBoxLayout()
		self.pie_figure = Figure(figsize=(4, 3))
		self.pie_canvas = FigureCanvas(self.pie_figure)
		layout.addWidget(self.pie_canvas)
		card.setLayout(layout)
		return card

	def _refresh_stats(self):
		dark = self.app_state.dark_mode
		days = self.app_state.daily_breakdown()
		self._render_calendar(days)
		draw_daily_chart(self.bar_figure, days, self.app_state.work_types, dark)
		self.bar_canvas.draw()
		draw_breakdown_pie(self.pie_figure, self.app_state.current_month_breakdown(), dark)
		self.pie_canvas.draw()
		self.summary.set_values(
			self.app_state.total_hours(),
			self.app_state.average_hours_per_active_day(),
		)

	# ----- Theme -----
	def _on_dark_mode(self, checked):
		self.app_state.set_dark_mode(checked)
		self._apply_theme()
		self._refresh_stats()

	def _apply_theme(self):
		self.setStyleSheet(stylesheet(self.app_state.dark_mode))
