"""Custom exception hierarchy for pytram."""

from __future__ import annotations


class TramError(Exception):
    """Base exception for all pytram errors."""


class TramConfigError(TramError):
    """Invalid or missing configuration."""


class TramConnectionError(TramError):
    """The TCP connection to the tram server could not be established."""

    def __init__(
        self,
        message: str,
        *,
        host: str = "",
        port: int | None = None,
    ) -> None:
        self.host = host
        self.port = port
        super().__init__(message)


class TramStreamError(TramError):
    """A read from the server failed or the stream ended mid-frame.

    ``expected`` is the number of bytes the reader was waiting for and
    ``received`` how many of them arrived before the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: int = 0,
        received: int = 0,
    ) -> None:
        self.expected = expected
        self.received = received
        super().__init__(message)


class TramProtocolError(TramError):
    """Content did not match its structural role in a message.

    Also raised for unknown message types and for frames that would push a
    message past the configured maximum size.  The stream position is no
    longer trustworthy after this error, so processing cannot resume.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: bytes | None = None,
        actual: bytes | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class TramValidationError(TramError):
    """A well-formed content unit carried a semantically invalid value."""

    def __init__(
        self,
        message: str,
        *,
        tram_id: bytes = b"",
        raw_value: bytes = b"",
    ) -> None:
        self.tram_id = tram_id
        self.raw_value = raw_value
        super().__init__(message)
