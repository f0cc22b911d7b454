# presence_settings/utils/ui_utils.py
from PyQt6.QtWidgets import QWidget

from qfluentwidgets import InfoBar, InfoBarPosition, Dialog


class UiUtils:
    """A collection of static helpers shared by the dialogs."""

    @staticmethod
    def show_confirm_dialog(
        parent: QWidget, title: str, content: str, yes_text: str, no_text: str
    ) -> bool:
        """
        Shows a fluent Yes/No dialog.

        Returns
        -------
        bool
            True if the user clicked Yes, False if they clicked No or closed it.
        """
        dialog = Dialog(title, content, parent)
        dialog.yesButton.setText(yes_text or "Confirm")
        dialog.cancelButton.setText(no_text or "Cancel")
        return bool(dialog.exec())

    @staticmethod
    def show_toast(
        parent: QWidget,
        message: str,
        level: str = "info",
        title: str | None = None,
        duration: int = 3000,
        position: InfoBarPosition = InfoBarPosition.TOP_RIGHT,
    ):
        """
        Shows a non-blocking InfoBar notification over `parent`.

        `level` is one of 'info', 'success', 'warning', 'error'; warnings and
        errors stay on screen longer.
        """
        level = level.lower()
        final_title = title if title is not None else level.capitalize()
        final_duration = 5000 if level in ("error", "warning") else duration

        factory = {
            "success": InfoBar.success,
            "warning": InfoBar.warning,
            "error": InfoBar.error,
        }.get(level, InfoBar.info)
        factory(
            final_title,
            message,
            duration=final_duration,
            position=position,
            parent=parent,
        )
