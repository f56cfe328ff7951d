# randpass/gui.py
# Random Password Generator desktop form

import sys
import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel,
    QLineEdit, QPushButton, QCheckBox, QGroupBox, QMessageBox
)

from randpass.config import load_config
from randpass.form import (
    FormController,
    FIELD_LENGTH, FIELD_UPPERCASE, FIELD_LOWERCASE, FIELD_NUMBER, FIELD_SYMBOL, FIELD_EXCLUDE,
    DEFAULT_COPIED_RESET_SECONDS,
)
from randpass.generator import DEFAULT_LENGTH

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Random Password Generator"
PROJECT_URL = "https://github.com/firdaus-edymainoe/password-generator"
COPY_TEXT = "Copy"
COPIED_TEXT = "Copied ✓"
MIN_LENGTH_HINT = 8

# ---------------- UI building helpers ----------------

def make_password_group():
    box = QGroupBox("Password")
    layout = QHBoxLayout()
    box.setLayout(layout)

    txt_password = QLineEdit()
    txt_password.setObjectName("generated-password")
    txt_password.setReadOnly(True)

    btn_copy = QPushButton(COPY_TEXT)
    btn_copy.setEnabled(False)

    layout.addWidget(txt_password, 1)
    layout.addWidget(btn_copy)

    return {
        "widget": box,
        "txt_password": txt_password,
        "btn_copy": btn_copy,
    }


def make_form_group():
    box = QGroupBox("Options")
    layout = QVBoxLayout()
    box.setLayout(layout)

    txt_length = QLineEdit(str(DEFAULT_LENGTH))
    txt_length.setPlaceholderText(f"{MIN_LENGTH_HINT} or more")
    txt_length.setToolTip(f"Use at least {MIN_LENGTH_HINT} characters")

    def checkbox(label):
        chk = QCheckBox(label)
        chk.setChecked(True)
        return chk

    chk_upper = checkbox("Include Uppercases")
    chk_lower = checkbox("Include Lowercases")
    chk_number = checkbox("Include Numbers")
    chk_symbol = checkbox("Include Symbols")

    txt_exclude = QLineEdit()
    btn_generate = QPushButton("Generate")

    layout.addWidget(QLabel("Password Length"))
    layout.addWidget(txt_length)
    for chk in (chk_upper, chk_lower, chk_number, chk_symbol):
        layout.addWidget(chk)
    layout.addWidget(QLabel("Exclude Characters"))
    layout.addWidget(txt_exclude)
    layout.addWidget(btn_generate)

    fields = {
        FIELD_LENGTH: txt_length,
        FIELD_UPPERCASE: chk_upper,
        FIELD_LOWERCASE: chk_lower,
        FIELD_NUMBER: chk_number,
        FIELD_SYMBOL: chk_symbol,
        FIELD_EXCLUDE: txt_exclude,
    }
    for name, w in fields.items():
        w.setObjectName(name)

    return {
        "widget": box,
        "fields": fields,
        "btn_generate": btn_generate,
    }


class PasswordGeneratorGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(420, 480)

        self.cfg = load_config()
        reset_seconds = float(self.cfg.get("copied_reset_seconds", DEFAULT_COPIED_RESET_SECONDS))

        main = QVBoxLayout()
        self.setLayout(main)

        header = QLabel(WINDOW_TITLE)
        header.setAlignment(Qt.AlignCenter)
        pw = make_password_group()
        form = make_form_group()
        footer = QLabel(f'Open sourced on <a href="{PROJECT_URL}">GitHub</a>')
        footer.setOpenExternalLinks(True)
        footer.setAlignment(Qt.AlignCenter)

        main.addWidget(header)
        main.addWidget(pw["widget"])
        main.addWidget(form["widget"])
        main.addWidget(footer)

        self.pw = pw
        self.form = form

        self.controller = FormController(
            lookup=form["fields"].get,
            clipboard=QApplication.clipboard(),
            timer=QTimer(self),
            alert=self.show_copy_failed,
            copied_reset_seconds=reset_seconds,
            on_change=self.refresh,
        )

        # Wire up controls; Enter in a text field submits like a web form
        form["btn_generate"].clicked.connect(self.on_submit)
        form["fields"][FIELD_LENGTH].returnPressed.connect(self.on_submit)
        form["fields"][FIELD_EXCLUDE].returnPressed.connect(self.on_submit)
        pw["btn_copy"].clicked.connect(self.on_copy)

        self.controller.load()

    def on_submit(self):
        self.controller.submit()

    def on_copy(self):
        self.controller.copy()

    def show_copy_failed(self, message: str):
        QMessageBox.warning(self, "Clipboard", message)

    def refresh(self, controller: FormController):
        self.pw["txt_password"].setText(controller.password)
        btn = self.pw["btn_copy"]
        btn.setEnabled(controller.copy_enabled)
        btn.setText(COPIED_TEXT if controller.copied else COPY_TEXT)


def main(log_level=logging.INFO):
    logging.basicConfig(level=log_level)
    app = QApplication(sys.argv)
    gui = PasswordGeneratorGUI()
    gui.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
