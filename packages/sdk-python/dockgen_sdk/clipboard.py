"""Copy generated text to the system clipboard."""

import pyperclip

from dockgen_common import ClipboardError, get_logger

logger = get_logger(__name__)


def write_clipboard(text: str) -> None:
    """
    Write text to the clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Clipboard unavailable: {e}") from e


def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the clipboard, logging instead of raising on failure.

    Returns:
        True if the text was copied
    """
    try:
        write_clipboard(text)
    except (ClipboardError, OSError) as e:
        logger.warning(f"Failed to copy text: {e}")
        return False
    logger.debug(f"Copied {len(text)} characters to clipboard")
    return True
