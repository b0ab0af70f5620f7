# classicpass/gui.py
# ClassicPass GUI: generator view, about view, strength bar, clipboard copy with toast

import sys
import logging
import typing
from datetime import date
from functools import partial

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QClipboard
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel, QLineEdit,
    QPushButton, QSlider, QCheckBox, QProgressBar, QGroupBox, QStackedWidget,
)

from classicpass.config import load_config, default_options, length_bounds
from classicpass.controls import (
    HOME, ABOUT, OPTION_NAMES, CopyFeedback, toggle_option, toggle_view,
    view_titles, strength_style,
)
from classicpass.generator import generate_from
from classicpass.log import setup_logging
from classicpass.score import classify

logger = logging.getLogger(__name__)

CFG = load_config()
COPY_FEEDBACK_MS = int(CFG.get("copy_feedback_ms", 2000))
CLEAR_CLIP_SECONDS = int(CFG.get("clipboard_clear_seconds", 20))

OPTION_LABELS = {
    "include_letters": "Include Letters (A-z)",
    "include_numbers": "Include Numbers (0-9)",
    "include_symbols": "Include Symbols (!@#)",
}

PROFILE_URL = "https://instagram.com/gauravyt_"

DISCLAIMER = (
    "This application generates random passwords locally on your device using the "
    "operating system's cryptographic random source. No password data is transmitted "
    "to any server or stored by us. Please use generated passwords at your own risk "
    "and store them securely."
)

# ---------------- UI building helpers ----------------

def make_home_view(options):
    box = QWidget()
    layout = QVBoxLayout()
    box.setLayout(layout)

    layout.addWidget(QLabel("GENERATED PASSWORD"))
    row = QHBoxLayout()
    txt_password = QLineEdit()
    txt_password.setReadOnly(True)
    btn_copy = QPushButton("Copy")
    btn_copy.setToolTip("Copy to clipboard")
    row.addWidget(txt_password, 1)
    row.addWidget(btn_copy)
    layout.addLayout(row)

    strength_row = QHBoxLayout()
    strength_row.addWidget(QLabel("STRENGTH"))
    lbl_strength = QLabel("")
    lbl_strength.setAlignment(Qt.AlignRight)
    strength_row.addWidget(lbl_strength)
    layout.addLayout(strength_row)
    bar_strength = QProgressBar()
    bar_strength.setRange(0, 100)
    bar_strength.setTextVisible(False)
    bar_strength.setMaximumHeight(8)
    layout.addWidget(bar_strength)

    len_row = QHBoxLayout()
    len_row.addWidget(QLabel("Password Length"))
    lbl_length = QLabel(str(options.length))
    lbl_length.setAlignment(Qt.AlignRight)
    len_row.addWidget(lbl_length)
    layout.addLayout(len_row)
    slider_len = QSlider(Qt.Horizontal)
    slider_len.setRange(*length_bounds(CFG))
    slider_len.setValue(options.length)
    layout.addWidget(slider_len)

    opts_box = QGroupBox("Character Types")
    opts_layout = QVBoxLayout()
    opts_box.setLayout(opts_layout)
    checkboxes = {}
    for name in OPTION_NAMES:
        chk = QCheckBox(OPTION_LABELS[name])
        chk.setChecked(getattr(options, name))
        opts_layout.addWidget(chk)
        checkboxes[name] = chk
    layout.addWidget(opts_box)

    btn_generate = QPushButton("Generate New Password")
    layout.addWidget(btn_generate)

    return {
        "widget": box,
        "txt_password": txt_password,
        "btn_copy": btn_copy,
        "lbl_strength": lbl_strength,
        "bar_strength": bar_strength,
        "lbl_length": lbl_length,
        "slider_len": slider_len,
        "checkboxes": checkboxes,
        "btn_generate": btn_generate,
    }


def make_about_view():
    box = QWidget()
    layout = QVBoxLayout()
    box.setLayout(layout)

    name = QLabel("Gaurav")
    name.setAlignment(Qt.AlignCenter)
    role = QLabel("Lead Developer")
    role.setAlignment(Qt.AlignCenter)
    layout.addWidget(name)
    layout.addWidget(role)

    follow = QLabel(f'<a href="{PROFILE_URL}">Follow @gauravyt_</a>')
    follow.setAlignment(Qt.AlignCenter)
    follow.setOpenExternalLinks(True)
    layout.addWidget(follow)

    layout.addWidget(QLabel("<b>Disclaimer</b>"))
    disclaimer = QLabel(DISCLAIMER)
    disclaimer.setWordWrap(True)
    layout.addWidget(disclaimer)

    layout.addWidget(QLabel("<b>Copyright Policy</b>"))
    copyright_ = QLabel(
        f"© {date.today().year} Classic Password Generator. All rights reserved. "
        "Unauthorized reproduction or distribution of this software, or any portion of it, "
        "may result in severe civil and criminal penalties."
    )
    copyright_.setWordWrap(True)
    layout.addWidget(copyright_)

    btn_back = QPushButton("← Back to Generator")
    layout.addWidget(btn_back)
    layout.addStretch(1)

    return {"widget": box, "btn_back": btn_back}


class ClassicPassGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Classic Password Generator")
        self.setMinimumSize(440, 560)
        self.clip_timer: typing.Optional[QTimer] = None

        self.options = default_options(CFG)
        self.view = HOME
        self.password = ""
        self.feedback = CopyFeedback(COPY_FEEDBACK_MS)

        main = QVBoxLayout()
        self.setLayout(main)

        # header
        header = QHBoxLayout()
        titles = QVBoxLayout()
        self.lbl_title = QLabel()
        self.lbl_subtitle = QLabel()
        titles.addWidget(self.lbl_title)
        titles.addWidget(self.lbl_subtitle)
        header.addLayout(titles, 1)
        self.btn_view = QPushButton()
        header.addWidget(self.btn_view)
        main.addLayout(header)

        home = make_home_view(self.options)
        about = make_about_view()
        self.stack = QStackedWidget()
        self.stack.addWidget(home["widget"])
        self.stack.addWidget(about["widget"])
        main.addWidget(self.stack, 1)

        footer = QLabel(f"Classic Password Generator © {date.today().year}")
        footer.setAlignment(Qt.AlignCenter)
        main.addWidget(footer)

        self.toast = QLabel("✓ Password copied to clipboard")
        self.toast.setAlignment(Qt.AlignCenter)
        self.toast.hide()
        main.addWidget(self.toast)

        # Wire up controls
        home["btn_generate"].clicked.connect(self.on_generate_click)
        home["btn_copy"].clicked.connect(self.on_copy)
        home["slider_len"].valueChanged.connect(self.on_length_changed)
        for name, chk in home["checkboxes"].items():
            chk.clicked.connect(partial(self.on_option_clicked, name))
        self.btn_view.clicked.connect(self.on_toggle_view)
        about["btn_back"].clicked.connect(self.on_toggle_view)

        self.home = home
        self.about = about

        self.render_view()
        # generate on startup
        self.on_generate_click()

    # ----------------- Navigation -----------------
    def on_toggle_view(self):
        self.view = toggle_view(self.view)
        self.render_view()

    def render_view(self):
        title, subtitle = view_titles(self.view)
        self.lbl_title.setText(f"<h2>{title}</h2>")
        self.lbl_subtitle.setText(subtitle)
        if self.view == HOME:
            self.btn_view.setText("ⓘ")
            self.btn_view.setToolTip("About Us")
            self.stack.setCurrentIndex(0)
        else:
            self.btn_view.setText("←")
            self.btn_view.setToolTip("Back to Generator")
            self.stack.setCurrentIndex(1)

    # ----------------- Generator actions -----------------
    def on_length_changed(self, value: int):
        self.options = self.options._replace(length=value)
        self.home["lbl_length"].setText(str(value))

    def on_option_clicked(self, name: str, _checked: bool = False):
        self.options = toggle_option(self.options, name)
        # re-sync in case the guard refused the change
        for n, chk in self.home["checkboxes"].items():
            chk.setChecked(getattr(self.options, n))

    def on_generate_click(self):
        self.password = generate_from(self.options)
        self.feedback.reset()
        self.home["btn_copy"].setText("Copy")
        self.toast.hide()
        self.home["txt_password"].setText(self.password)
        self.render_strength()

    def render_strength(self):
        label = classify(self.password)
        color, fraction = strength_style(label)
        self.home["lbl_strength"].setText(label.upper())
        bar = self.home["bar_strength"]
        bar.setValue(int(round(fraction * 100)))
        bar.setStyleSheet(f"QProgressBar::chunk {{ background-color: {color}; }}")

    # ----------------- Clipboard -----------------
    def on_copy(self):
        if not self.feedback.mark_copied(self.password):
            return
        try:
            clipboard: QClipboard = QApplication.clipboard()
            clipboard.setText(self.password, mode=QClipboard.Clipboard)
        except RuntimeError:
            logger.exception("Failed to copy!")
            self.feedback.reset()
            return

        self.home["btn_copy"].setText("Copied!")
        self.toast.show()
        QTimer.singleShot(self.feedback.duration_ms, self.end_copy_feedback)
        self.start_clipboard_clear_timer(CLEAR_CLIP_SECONDS)

    def end_copy_feedback(self):
        self.feedback.reset()
        self.home["btn_copy"].setText("Copy")
        self.toast.hide()

    def start_clipboard_clear_timer(self, seconds: int):
        if self.clip_timer and self.clip_timer.isActive():
            self.clip_timer.stop()
        self.clip_timer = QTimer(self)
        self.clip_timer.setSingleShot(True)
        self.clip_timer.timeout.connect(self.clear_clipboard)
        self.clip_timer.start(seconds * 1000)

    def clear_clipboard(self):
        clipboard: QClipboard = QApplication.clipboard()
        # only clear what we put there
        if clipboard.text(mode=QClipboard.Clipboard) == self.password:
            clipboard.setText("", mode=QClipboard.Clipboard)


def main():
    setup_logging(CFG.get("log_level", "WARNING"))
    app = QApplication(sys.argv)
    gui = ClassicPassGUI()
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
