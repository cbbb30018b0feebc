from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel


class SummaryStats(QWidget):
    """Total hours this month and average hours per active day."""

    def __init__(self):
        super().__init__()
        self.setObjectName("Card")
        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)
        self.total_value = self._add_stat(layout, "Total Time")
        self.average_value = self._add_stat(layout, "Average Time Per Day")
        layout.addStretch()
        self.setLayout(layout)

    def _add_stat(self, layout, title):
        caption = QLabel(title)
        caption.setObjectName("Muted")
        value = QLabel("0.00 hours")
        value.setObjectName("StatValue")
        layout.addWidget(caption)
        layout.addWidget(value)
        return value

    def set_values(self, total_hours, average_hours):
        self.total_value.setText(f"{total_hours:.2f} hours")
        self.average_value.setText(f"{average_hours:.2f} hours")
