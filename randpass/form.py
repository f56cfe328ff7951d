"""
randpass.form
Form controller: reads the generator form, holds the displayed password and the
"copied" state, and talks to the clipboard.

The controller never imports Qt. Widgets, clipboard and timer are passed in and
only used through the Qt method names (isChecked, text, setText, start, stop,
isActive, timeout.connect), so tests can hand it plain fakes.
"""

import logging
import random
from typing import Any, Callable, Optional

from .generator import DEFAULT_LENGTH, GenerationResult, build

logger = logging.getLogger(__name__)

FIELD_LENGTH = "length"
FIELD_UPPERCASE = "uppercase"
FIELD_LOWERCASE = "lowercase"
FIELD_NUMBER = "number"
FIELD_SYMBOL = "symbol"
FIELD_EXCLUDE = "exclude"

IDLE = "idle"
COPIED = "copied"

COPY_FAILED_MESSAGE = "Failed to copy password. Please copy it manually."
DEFAULT_COPIED_RESET_SECONDS = 3


def coerce_length(raw: Any, default: int = DEFAULT_LENGTH) -> int:
    """
    Turn the raw length field value into a usable length.

    Anything missing, blank, non-numeric, fractional or below 1 becomes
    ``default``. "12.0" counts as 12.
    """
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    else:
        try:
            number = float(str(raw).strip())
        except ValueError:
            return default
        if not number.is_integer():
            return default
        value = int(number)
    return value if value >= 1 else default


class FormController:
    def __init__(
        self,
        lookup: Callable[[str], Any],
        clipboard: Any,
        timer: Any,
        alert: Callable[[str], None],
        rng: Optional[random.Random] = None,
        copied_reset_seconds: float = DEFAULT_COPIED_RESET_SECONDS,
        on_change: Optional[Callable[["FormController"], None]] = None,
    ):
        self.lookup = lookup
        self.clipboard = clipboard
        self.alert = alert
        self.rng = rng
        self.copied_reset_ms = int(copied_reset_seconds * 1000)
        self.on_change = on_change

        self.password = ""
        self.copied = False

        self.timer = timer
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(self._on_copied_expired)

    @property
    def state(self) -> str:
        return COPIED if self.copied else IDLE

    @property
    def copy_enabled(self) -> bool:
        return bool(self.password)

    # ----------------- Form reads -----------------
    def read_checkbox(self, field: str) -> bool:
        widget = self.lookup(field)
        if widget is None:
            logger.error("Could not find %s input element.", field)
            return False
        checked = bool(widget.isChecked())
        logger.debug("%s from form: %s", field, checked)
        return checked

    def read_length(self) -> int:
        widget = self.lookup(FIELD_LENGTH)
        if widget is None:
            logger.error("Could not find %s input element.", FIELD_LENGTH)
            return DEFAULT_LENGTH
        return coerce_length(widget.text())

    def read_exclude(self) -> str:
        widget = self.lookup(FIELD_EXCLUDE)
        if widget is None:
            logger.error("Could not find %s input element.", FIELD_EXCLUDE)
            return ""
        return widget.text() or ""

    # ----------------- Actions -----------------
    def load(self) -> GenerationResult:
        """Initial password: every class enabled, default length."""
        result = build(True, True, True, True, rng=self.rng)
        self._display(result)
        return result

    def submit(self) -> GenerationResult:
        result = build(
            self.read_checkbox(FIELD_UPPERCASE),
            self.read_checkbox(FIELD_LOWERCASE),
            self.read_checkbox(FIELD_NUMBER),
            self.read_checkbox(FIELD_SYMBOL),
            self.read_length(),
            self.read_exclude(),
            rng=self.rng,
        )
        if not result.ok:
            logger.info("Generation failed: %s", result.kind.value)
        self._display(result)
        return result

    def copy(self) -> bool:
        """Copy the displayed password. Returns True when the clipboard accepted it."""
        if not self.password:
            return False
        try:
            self.clipboard.setText(self.password)
        except Exception:
            logger.exception("Failed to copy")
            self.alert(COPY_FAILED_MESSAGE)
            return False

        if self.timer.isActive():
            self.timer.stop()
        self.copied = True
        self.timer.start(self.copied_reset_ms)
        self._changed()
        return True

    # ----------------- Internals -----------------
    def _display(self, result: GenerationResult) -> None:
        self.password = result.text
        self._changed()

    def _on_copied_expired(self) -> None:
        self.copied = False
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)
