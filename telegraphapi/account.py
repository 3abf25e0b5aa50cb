"""Account methods of the Telegraph API."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from typing import Any, Protocol, TypeVar

from .errors import APIError
from .models import Account
from .request import Request, RequestOption

_Model = TypeVar("_Model")

_JSON_ESCAPES = (
    ("&", "\\u0026"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


class _FromDict(Protocol):
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any: ...


def _marshal(value: Any) -> str:
    """Encode a value as compact JSON with HTML-sensitive characters escaped."""
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    for char, escape in _JSON_ESCAPES:
        text = text.replace(char, escape)
    return text


def _decode_result(data: bytes, model: type[_Model]) -> _Model | None:
    """Unwrap an API envelope, raising APIError when it reports a failure."""
    payload = json.loads(data)
    if not isinstance(payload, dict):
        raise ValueError("unexpected response from the API")
    if not payload.get("ok"):
        raise APIError(payload.get("error") or "")
    result = payload.get("result")
    if result is None:
        return None
    return model.from_dict(result)  # type: ignore[attr-defined]


class AccountMethods:
    """Account calls, mixed into a class that provides call_api."""

    def create_account(
        self,
        short_name: str,
        author_name: str = "",
        author_url: str = "",
        options: Iterable[RequestOption] = (),
    ) -> Account | None:
        """Create a new Telegraph account; the result carries an access token."""
        request = Request("POST", "createAccount")
        request.set_form_param("short_name", short_name)
        if author_url:
            request.set_form_param("author_url", author_url)
        if author_name:
            request.set_form_param("author_name", author_name)
        return _decode_result(self.call_api(request, options), Account)  # type: ignore[attr-defined]

    def edit_account_info(
        self,
        short_name: str = "",
        author_name: str = "",
        author_url: str = "",
        options: Iterable[RequestOption] = (),
    ) -> Account | None:
        """Update the account; only non-empty values are sent."""
        request = Request("POST", "editAccountInfo", secured=True)
        if short_name:
            request.set_form_param("short_name", short_name)
        if author_name:
            request.set_form_param("author_name", author_name)
        if author_url:
            request.set_form_param("author_url", author_url)
        return _decode_result(self.call_api(request, options), Account)  # type: ignore[attr-defined]

    def get_account_info(
        self,
        fields: Sequence[str] | None = None,
        options: Iterable[RequestOption] = (),
    ) -> Account | None:
        """Return information about the account, limited to the given fields."""
        request = Request("POST", "getAccountInfo", secured=True)
        if fields:
            request.set_form_param("fields", _marshal(list(fields)))
        return _decode_result(self.call_api(request, options), Account)  # type: ignore[attr-defined]

    def revoke_access_token(
        self, options: Iterable[RequestOption] = ()
    ) -> Account | None:
        """Revoke the access token and return the account with a new one."""
        request = Request("POST", "revokeAccessToken", secured=True)
        return _decode_result(self.call_api(request, options), Account)  # type: ignore[attr-defined]