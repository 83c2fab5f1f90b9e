"""
Base Service.

Base class for use-case services. Services sit between state holders and
repositories; they are the seam tests mock, and they carry the logging
context for every operation that passes through them.

Usage:
    from notes_app.services.base import BaseService

    class NotesUseCase(BaseService):
        def __init__(self, repo: NoteRepository) -> None:
            super().__init__()
            self.repo = repo

        async def delete_all(self) -> None:
            self._log_operation("Deleting all notes")
            await self.repo.delete_all_notes()
"""

from typing import Any

from notes_app.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - A logger named after the concrete service module
    - Helpers that tag log records with the service name
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
