import logging
import secrets
import threading
import time

import pyperclip

from passguard.config.config_passguard import *
from passguard.config.logging_config import timestamp
from .password_generator import random_password

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str,
                      timeout: int = CLIPBOARD_TIMEOUT,
                      prompt: bool = True) -> None:
    """
    Copy a generated password to the system clipboard with optional
    auto-clear.

    Args:
        text: Text to copy to the clipboard.
        timeout: Number of seconds before the clipboard is cleared.
            A value of 0 or less disables auto-clear.
        prompt: If True, prompt the user before copying.

    Side Effects:
        Copies data to the system clipboard.
        Spawns a background daemon thread if auto-clear is enabled.
    """
    if not text:
        print(" Nothing to copy.")
        return

    if prompt and input(" Copy to clipboard? (y/n): ").strip().lower() != "y":
        return

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.error(f"[{timestamp()}] Clipboard unavailable: {e}")
        print(" Clipboard unavailable on this system.")
        return

    print(" Copied!" + (f" (auto-clears in {timeout}s)" if timeout > 0 else ""),
          flush=True)

    if timeout <= 0:
        return

    def auto_clear():
        time.sleep(timeout)
        try:
            clear_clipboard_history()
        except pyperclip.PyperclipException as e:
            logger.error(f"[{timestamp()}] Clipboard clear failed: {e}")

    threading.Thread(target=auto_clear, daemon=True).start()


def clear_clipboard_history(clipboard_length: int = CLIPBOARD_LENGTH) -> None:
    """
    Clear the clipboard and, if enabled, flood its history with decoys.

    Decoys are freshly generated passwords so nothing recognisable is
    left behind. Best-effort only; some clipboard managers retain long
    histories.
    """
    pyperclip.copy("")

    if not WIPE_CLIPBOARD:
        return

    for i in range(clipboard_length):
        pyperclip.copy(f"[{i:03d}] {random_password()} - {secrets.token_hex(8)}")
        # Defeats throttling
        time.sleep(0.07)

    pyperclip.copy("Clipboard history cleared")
