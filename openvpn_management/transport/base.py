from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """
    Abstract line-oriented transport to a management interface.

    Contract:
      - open()/close() manage the underlying connection.
      - readline() returns the next line including its b"\\n", or the
        unterminated remainder at end of stream, or b"" once the peer closed.
      - write(data) sends all of data and returns the number of bytes written.
    """

    @abstractmethod
    def open(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...

    @abstractmethod
    def readline(self) -> bytes: ...

    @abstractmethod
    def write(self, data: bytes) -> int: ...

    def __enter__(self) -> "Transport":
        self.open()
        return self

    def __exit__(self, exc_type: type | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        self.close()
