"""High-level Telegraph client with every API method."""

from __future__ import annotations

from types import TracebackType

from .account import AccountMethods
from .client import Client
from .page import PageMethods


class Telegraph(AccountMethods, PageMethods, Client):
    """Telegraph API client: account, page and upload methods over one session."""

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> Telegraph:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()