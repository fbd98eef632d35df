import time
from typing import Callable, Optional

from src import config


class Acknowledgement:
    """Transient confirmation text ("Content copied!", "Saved successfully")."""

    def __init__(self, seconds: float = config.COPY_ACK_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.seconds = seconds
        self.clock = clock
        self._text: Optional[str] = None
        self._shown_at = 0.0

    def show(self, text: str) -> None:
        self._text = text
        self._shown_at = self.clock()

    def copied(self, label: str) -> None:
        self.show(f"{label} copied!")

    @property
    def message(self) -> Optional[str]:
        if self._text is None:
            return None
        if self.clock() - self._shown_at >= self.seconds:
            self._text = None
        return self._text


def copy_script_html(text: str) -> str:
    """Script that writes text to the browser clipboard when the component mounts."""
    payload = (text or "").replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${").replace("</", "<\\/")
    return f"""
        <script>
        navigator.clipboard.writeText(`{payload}`);
        </script>
        """
