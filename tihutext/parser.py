"""Base class of the stages that a corpus passes through."""

from __future__ import annotations

import abc
from collections.abc import Callable
from typing import Any

from .corpus import Corpus
from .helper import chomp

TEXT_MESSAGE = "text_message"

Callback = Callable[[str, str], Any]


class Parser(abc.ABC):
    """A stage of the text pipeline that reads and annotates a corpus."""

    def __init__(self, settings: Any = None, callback: Callback | None = None) -> None:
        self.settings = settings
        self.callback = callback

    @abc.abstractmethod
    def load(self, param: str = "") -> None:
        """Load the data the stage needs; raise if it cannot be loaded."""

    @abc.abstractmethod
    def parse(self, corpus: Corpus) -> None:
        """Annotate the words of ``corpus`` in place."""

    def message(self, text: str) -> None:
        """Report a message, without its trailing line ending, to the callback."""
        if self.callback is not None:
            self.callback(TEXT_MESSAGE, chomp(text))