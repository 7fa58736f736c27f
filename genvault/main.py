"""
Main entry point for the GenVault client.

Usage:
    genvault [USER_ID]

When USER_ID is omitted the user is prompted for it.
"""

import sys
import signal
import logging
from typing import Optional
from PyQt5.QtWidgets import QApplication, QInputDialog, QLineEdit
from PyQt5.QtCore import Qt

from genvault.api_client import RemoteVaultAPI
from genvault.view_model import VaultViewModel
from genvault.ui import MainWindow
from genvault import config

logger = logging.getLogger(__name__)


class GenVaultApp:
    """Main application class for the vault client."""

    def __init__(self, argv):
        """Initialize the application."""
        self.app = QApplication(argv)
        self.app.setApplicationName(config.APP_NAME)
        self.app.setOrganizationName(config.APP_NAME)
        self.app.setStyle(config.APP_STYLE)

        self.argv = argv
        self.api: Optional[RemoteVaultAPI] = None
        self.view_model: Optional[VaultViewModel] = None
        self.main_window: Optional[MainWindow] = None

        # Handle Ctrl+C gracefully
        signal.signal(signal.SIGINT, signal.SIG_DFL)

    def _resolve_user_id(self) -> Optional[str]:
        """Take the user ID from the command line, or ask for it."""
        if len(self.argv) > 1 and self.argv[1].strip():
            return self.argv[1].strip()
        user_id, ok = QInputDialog.getText(
            None, config.APP_TITLE_PREFIX, config.USER_ID_PROMPT, QLineEdit.Normal
        )
        if ok and user_id.strip():
            return user_id.strip()
        return None

    def run(self) -> int:
        """Run the application."""
        user_id = self._resolve_user_id()
        if not user_id:
            logger.info("No user ID given, exiting")
            return 1

        logger.info(f"Connecting to {config.API_BASE_URL} as user {user_id}")
        self.api = RemoteVaultAPI()
        self.view_model = VaultViewModel(self.api)
        self.main_window = MainWindow(self.view_model, user_id)
        self.main_window.show()
        return self.app.exec_()

    def cleanup(self):
        """Clean up resources."""
        if self.api is not None:
            self.api.close()


def main():
    """Main entry point."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    # Enable high DPI scaling
    if hasattr(Qt, 'AA_EnableHighDpiScaling'):
        QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    if hasattr(Qt, 'AA_UseHighDpiPixmaps'):
        QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = GenVaultApp(sys.argv)

    try:
        return app.run()
    finally:
        app.cleanup()


if __name__ == "__main__":
    sys.exit(main())
