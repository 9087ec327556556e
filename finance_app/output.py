"""
Output Sink Module

Abstract output interface with a console implementation for the demo and
an in-memory implementation for tests.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TextIO
import sys


class OutputSink(ABC):
    """Abstract interface for human-readable output"""

    @abstractmethod
    def write(self, line: str = "") -> None:
        """Emit one line of output"""
        pass


class ConsoleOutput(OutputSink):
    """Writes lines to a text stream, stdout by default"""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, line: str = "") -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()


class MemoryOutput(OutputSink):
    """Collects lines in memory (for testing)"""

    def __init__(self):
        self.lines: List[str] = []

    def write(self, line: str = "") -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
