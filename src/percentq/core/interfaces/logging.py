from __future__ import annotations

"""Logging seams for percentq components.

The scanner and the renderer accept any object with this surface, so an
embedding application can hand in its own adapter instead of a stdlib
``logging.Logger``.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """What the scanner, renderer and CLI call on a logger.

    ``isEnabledFor`` lets trace output skip formatting its context when
    debug records would be dropped anyway.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...

    def isEnabledFor(self, level: int) -> bool: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers under the ``percentq.*`` namespace."""

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
