from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel


class StatCard(QWidget):
    """Title / big value / subtitle tile used on the statistics page."""

    def __init__(self, title, subtitle="", color=None):
        super().__init__()
        self.setObjectName("Card")
        layout = QVBoxLayout()
        layout.setContentsMargins(20, 16, 20, 16)
        self.title_label = QLabel(title)
        self.title_label.setObjectName("CardTitle")
        self.value_label = QLabel("0")
        self.value_label.setObjectName("CardValue")
        if color:
            self.value_label.setStyleSheet(f"color: {color};")
        self.subtitle_label = QLabel(subtitle)
        self.subtitle_label.setObjectName("CardTitle")
        layout.addWidget(self.title_label)
        layout.addWidget(self.value_label)
        layout.addWidget(self.subtitle_label)
        self.setLayout(layout)

    def set_value(self, value, subtitle=None):
        self.value_label.setText(str(value))
        if subtitle is not None:
            self.subtitle_label.setText(subtitle)
