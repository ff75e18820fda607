import logging
from typing import List

from skytap_builder.models.enums import LogLevel
from skytap_builder.schemas.api import LogLine

logger = logging.getLogger("skytap_builder.step")

BANNER = "----------------------------------------"


class StepLogger:
    """
    Collects the ordered log lines of one step invocation.

    Every line is also forwarded to the ``skytap_builder.step`` logger so the
    host sees it in its own output. ``info`` lines are dropped when plugin
    logging is disabled; banners and errors are always kept.
    """

    def __init__(self, action: str, enabled: bool = True):
        self.action = action
        self.enabled = enabled
        self.lines: List[LogLine] = []

    def _append(self, level: LogLevel, message: str):
        self.lines.append(LogLine(level=level, message=message))
        if level == LogLevel.ERROR:
            logger.error("[%s] %s", self.action, message)
        else:
            logger.info("[%s] %s", self.action, message)

    def banner(self, title: str):
        self._append(LogLevel.INFO, BANNER)
        self._append(LogLevel.INFO, title)
        self._append(LogLevel.INFO, BANNER)

    def always(self, message: str):
        self._append(LogLevel.INFO, message)

    def info(self, message: str):
        if self.enabled:
            self._append(LogLevel.INFO, message)

    def error(self, message: str):
        self._append(LogLevel.ERROR, message)

    def messages(self) -> List[str]:
        return [line.message for line in self.lines]
