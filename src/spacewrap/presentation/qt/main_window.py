"""Main window: input editor, mode selector, output view and integrity indicators."""

from __future__ import annotations

import logging
from uuid import uuid4

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from spacewrap.application.process_text_use_case import (
    ProcessTextCommand,
    ProcessTextUseCase,
)
from spacewrap.application.text_normalizer import is_blank
from spacewrap.application.verification import count_lines, count_words
from spacewrap.domain.normalization import Mode, ProcessingResult, VerificationResult
from spacewrap.infrastructure.config import SpaceWrapSettings

LOGGER = logging.getLogger(__name__)

MODE_LABELS: dict[Mode, str] = {
    Mode.SINGLE_PARAGRAPH: "Single paragraph",
    Mode.CLEAN_PARAGRAPH: "Clean paragraphs",
    Mode.HARD_NORMALIZE: "Hard normalization",
}
PROCESSING_ERROR_MESSAGE = "Processing error occurred. Original text preserved."
VERIFICATION_WARNING_MESSAGE = "Content verification failed. Review the output before copying."
_MATCH_MARK = "✓"
_MISMATCH_MARK = "✗"


class MainWindow(QMainWindow):
    """Single-screen shell around the normalization use case."""

    def __init__(
        self,
        settings: SpaceWrapSettings | None = None,
        use_case: ProcessTextUseCase | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("SpaceWrap")
        self.resize(1120, 720)

        self._settings = settings or SpaceWrapSettings()
        self._use_case = use_case or ProcessTextUseCase()
        self._latest_result: ProcessingResult | None = None

        self._input_edit = QPlainTextEdit()
        self._output_edit = QPlainTextEdit()
        self._mode_group = QButtonGroup(self)
        self._mode_buttons: dict[Mode, QRadioButton] = {}

        self._input_word_label = QLabel()
        self._input_char_label = QLabel()
        self._input_line_label = QLabel()
        self._output_word_label = QLabel()
        self._output_char_label = QLabel()
        self._line_breaks_label = QLabel()
        self._word_match_label = QLabel()
        self._char_match_label = QLabel()
        self._content_match_label = QLabel()
        self._warning_banner = QLabel()

        self._process_button = QPushButton("Process")
        self._clear_button = QPushButton("Clear")
        self._copy_button = QPushButton("Copy output")

        self._build_ui()
        self.set_mode(self._settings.default_mode)
        self._update_input_stats()
        self.clear_output()

    def _build_ui(self) -> None:
        root = QWidget(self)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(32, 28, 32, 24)
        layout.setSpacing(14)

        title_label = QLabel("SpaceWrap", root)
        title_label.setObjectName("mainTitleLabel")
        subtitle_label = QLabel(
            "Normalize whitespace and line breaks without touching URLs, code or structure.",
            root,
        )
        subtitle_label.setObjectName("mainSubtitleLabel")
        subtitle_label.setWordWrap(True)
        layout.addWidget(title_label)
        layout.addWidget(subtitle_label)

        separator = QFrame(root)
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setObjectName("headerSeparator")
        layout.addWidget(separator)

        self._warning_banner.setObjectName("warningBanner")
        self._warning_banner.setWordWrap(True)
        self._warning_banner.hide()
        layout.addWidget(self._warning_banner)

        content_layout = QHBoxLayout()
        content_layout.setSpacing(20)
        content_layout.addWidget(self._build_input_panel(root), stretch=1)
        content_layout.addWidget(self._build_output_panel(root), stretch=1)
        layout.addLayout(content_layout, stretch=1)
        layout.addWidget(self._build_mode_panel(root))

        self._input_edit.textChanged.connect(self._on_input_changed)
        self._process_button.clicked.connect(self.process_text)
        self._clear_button.clicked.connect(self.clear_input)
        self._copy_button.clicked.connect(self.copy_to_clipboard)

        self.setCentralWidget(root)
        self.statusBar().showMessage("Ready", 2000)

    def _build_input_panel(self, parent: QWidget) -> QGroupBox:
        panel = QGroupBox("Input", parent)
        panel.setObjectName("inputPanel")
        panel_layout = QVBoxLayout(panel)
        panel_layout.setContentsMargins(16, 24, 16, 16)
        panel_layout.setSpacing(10)

        self._input_edit.setObjectName("inputTextEdit")
        self._input_edit.setPlaceholderText("Paste text to normalize.")
        panel_layout.addWidget(self._input_edit, stretch=1)

        stats_row = QHBoxLayout()
        for label in (self._input_word_label, self._input_char_label, self._input_line_label):
            label.setObjectName("statsLabel")
            stats_row.addWidget(label)
        stats_row.addStretch(1)
        panel_layout.addLayout(stats_row)

        actions_row = QHBoxLayout()
        self._process_button.setObjectName("processButton")
        self._clear_button.setObjectName("clearButton")
        actions_row.addWidget(self._process_button)
        actions_row.addWidget(self._clear_button)
        actions_row.addStretch(1)
        panel_layout.addLayout(actions_row)
        return panel

    def _build_output_panel(self, parent: QWidget) -> QGroupBox:
        panel = QGroupBox("Output", parent)
        panel.setObjectName("outputPanel")
        panel_layout = QVBoxLayout(panel)
        panel_layout.setContentsMargins(16, 24, 16, 16)
        panel_layout.setSpacing(10)

        self._output_edit.setObjectName("outputTextEdit")
        self._output_edit.setReadOnly(True)
        self._output_edit.setPlaceholderText("Normalized text will appear here.")
        panel_layout.addWidget(self._output_edit, stretch=1)

        stats_row = QHBoxLayout()
        for label in (self._output_word_label, self._output_char_label, self._line_breaks_label):
            label.setObjectName("statsLabel")
            stats_row.addWidget(label)
        stats_row.addStretch(1)
        panel_layout.addLayout(stats_row)

        verification_row = QHBoxLayout()
        for caption, label in (
            ("Words", self._word_match_label),
            ("Characters", self._char_match_label),
            ("Content", self._content_match_label),
        ):
            verification_row.addWidget(QLabel(caption, panel))
            label.setObjectName("verificationValue")
            verification_row.addWidget(label)
        verification_row.addStretch(1)
        self._copy_button.setObjectName("copyButton")
        verification_row.addWidget(self._copy_button)
        panel_layout.addLayout(verification_row)
        return panel

    def _build_mode_panel(self, parent: QWidget) -> QGroupBox:
        panel = QGroupBox("Mode", parent)
        panel.setObjectName("modePanel")
        panel_layout = QHBoxLayout(panel)
        panel_layout.setContentsMargins(16, 24, 16, 16)

        for mode, caption in MODE_LABELS.items():
            button = QRadioButton(caption, panel)
            button.setObjectName(f"modeButton_{mode.value}")
            button.toggled.connect(
                lambda checked, selected=mode: self._on_mode_toggled(selected, checked)
            )
            self._mode_group.addButton(button)
            self._mode_buttons[mode] = button
            panel_layout.addWidget(button)
        panel_layout.addStretch(1)
        return panel

    def selected_mode(self) -> Mode:
        """Return mode of the checked radio button."""
        for mode, button in self._mode_buttons.items():
            if button.isChecked():
                return mode
        return self._settings.default_mode

    def set_mode(self, mode: Mode) -> None:
        """Check radio button for mode programmatically for tests."""
        self._mode_buttons[mode].setChecked(True)

    def set_input_text(self, text: str) -> None:
        """Set input text programmatically for tests."""
        self._input_edit.setPlainText(text)

    def input_text(self) -> str:
        return self._input_edit.toPlainText()

    def output_text(self) -> str:
        return self._output_edit.toPlainText()

    def latest_result(self) -> ProcessingResult | None:
        return self._latest_result

    def is_copy_enabled(self) -> bool:
        return self._copy_button.isEnabled()

    def warning_text(self) -> str | None:
        """Return banner text when the warning banner is displayed."""
        if self._warning_banner.isHidden():
            return None
        return self._warning_banner.text()

    def stats_texts(self) -> dict[str, str]:
        """Return counter captions keyed by counter name."""
        return {
            "input_words": self._input_word_label.text(),
            "input_chars": self._input_char_label.text(),
            "input_lines": self._input_line_label.text(),
            "output_words": self._output_word_label.text(),
            "output_chars": self._output_char_label.text(),
            "line_breaks_removed": self._line_breaks_label.text(),
        }

    def verification_marks(self) -> tuple[str, str, str]:
        return (
            self._word_match_label.text(),
            self._char_match_label.text(),
            self._content_match_label.text(),
        )

    def process_text(self) -> None:
        """Run normalization for current input and show results."""
        raw_text = self.input_text()
        if is_blank(raw_text):
            self.clear_output()
            return

        correlation_id = str(uuid4())
        mode = self.selected_mode()
        try:
            result = self._use_case.execute(ProcessTextCommand(content=raw_text, mode=mode))
        except Exception as exc:
            self._latest_result = None
            LOGGER.exception(
                "event=ui_process_failed correlation_id=%s mode=%s error_type=%s",
                correlation_id,
                mode.value,
                exc.__class__.__name__,
            )
            self._output_edit.setPlainText(raw_text)
            self._copy_button.setEnabled(True)
            self._show_warning(PROCESSING_ERROR_MESSAGE)
            return

        self._latest_result = result
        self._output_edit.setPlainText(result.output)
        self._copy_button.setEnabled(bool(result.output))
        self._render_stats(result)
        self._render_verification(result.verification)

        if not result.ok:
            self._show_warning(PROCESSING_ERROR_MESSAGE)
        elif result.warnings:
            self._show_warning(VERIFICATION_WARNING_MESSAGE)
        else:
            self._warning_banner.hide()

        LOGGER.info(
            "event=ui_process_done correlation_id=%s mode=%s ok=%s warnings=%s",
            correlation_id,
            mode.value,
            result.ok,
            len(result.warnings),
        )
        self.statusBar().showMessage("Text processed.", 3000)

    def clear_input(self) -> None:
        self._input_edit.clear()
        self._update_input_stats()
        self.clear_output()

    def clear_output(self) -> None:
        """Reset output view, counters and verification marks."""
        self._latest_result = None
        self._output_edit.clear()
        self._copy_button.setEnabled(False)
        self._warning_banner.hide()
        self._output_word_label.setText("Words: 0")
        self._output_char_label.setText("Chars: 0")
        self._line_breaks_label.setText("Line breaks removed: 0")
        self._render_verification(VerificationResult())

    def copy_to_clipboard(self) -> None:
        output = self.output_text()
        if not output:
            return

        QGuiApplication.clipboard().setText(output)
        LOGGER.info("event=ui_output_copied length=%s", len(output))
        self.statusBar().showMessage("Output copied to clipboard.", 3000)

    def _on_input_changed(self) -> None:
        self._update_input_stats()
        self.clear_output()

    def _on_mode_toggled(self, mode: Mode, checked: bool) -> None:
        if checked:
            LOGGER.info("event=ui_mode_selected mode=%s", mode.value)

    def _update_input_stats(self) -> None:
        text = self.input_text()
        self._input_word_label.setText(f"Words: {count_words(text)}")
        self._input_char_label.setText(f"Chars: {len(text)}")
        self._input_line_label.setText(f"Lines: {count_lines(text)}")

    def _render_stats(self, result: ProcessingResult) -> None:
        self._output_word_label.setText(f"Words: {result.stats.words_out}")
        self._output_char_label.setText(f"Chars: {result.stats.chars_out}")
        self._line_breaks_label.setText(
            f"Line breaks removed: {result.stats.line_breaks_removed}"
        )

    def _render_verification(self, verification: VerificationResult) -> None:
        for label, matched in (
            (self._word_match_label, verification.word_match),
            (self._char_match_label, verification.char_match),
            (self._content_match_label, verification.content_match),
        ):
            label.setText(_MATCH_MARK if matched else _MISMATCH_MARK)
            label.setProperty("matched", matched)
            label.style().unpolish(label)
            label.style().polish(label)

    def _show_warning(self, message: str) -> None:
        self._warning_banner.setText(message)
        self._warning_banner.show()
