from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


class CrashSupervisor:
    """
    Top-level guard around page rendering.

    Any exception raised while the page is being built is logged and
    recorded; the shell then shows a recovery screen until reset() is called.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.error: Optional[str] = None

    @property
    def crashed(self) -> bool:
        return self.error is not None

    def run(self, render: Callable[[], T], fallback: Callable[[str], T]) -> T:
        if self.crashed:
            return fallback(self.error)
        try:
            return render()
        except Exception as e:
            self.logger.exception("Page render failed; showing recovery view")
            self.error = str(e) or type(e).__name__
            return fallback(self.error)

    def reset(self) -> None:
        self.logger.info("Recovery view dismissed")
        self.error = None
