"""Redirect sinks - where the widget sends the user once an outcome is final."""
from __future__ import annotations

import logging
import webbrowser
from typing import Protocol

logger = logging.getLogger(__name__)


class RedirectSink(Protocol):
    def navigate(self, url: str) -> None: ...


class LoggingRedirectSink:
    """Records every URL it is asked to navigate to."""

    def __init__(self) -> None:
        self.urls: list[str] = []

    def navigate(self, url: str) -> None:
        logger.info("navigate %s", url)
        self.urls.append(url)


class BrowserRedirectSink:
    """Opens the destination in the system web browser."""

    def __init__(self, new_tab: bool = False) -> None:
        self._new = 2 if new_tab else 0

    def navigate(self, url: str) -> None:
        if not webbrowser.open(url, new=self._new):
            logger.warning("No browser available to open %s", url)
