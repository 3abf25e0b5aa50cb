"""Description of a single API request and options that modify it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


def _canonical_key(key: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Request:
    """An API request: method, endpoint, form parameters, headers and body."""

    method: str
    endpoint: str
    secured: bool = False
    form: dict[str, str] = field(default_factory=dict)
    headers: dict[str, list[str]] = field(default_factory=dict)
    body: bytes | None = None
    full_url: str = ""

    def set_form_param(self, key: str, value: object) -> None:
        """Set a form parameter, replacing any earlier value for the key."""
        if self.form is None:
            self.form = {}
        self.form[key] = _format_value(value)

    def validate(self) -> None:
        """Make the request ready for sending."""
        if self.form is None:
            self.form = {}
        if self.headers is None:
            self.headers = {}

    def _header(self, key: str) -> str:
        values = (self.headers or {}).get(_canonical_key(key))
        return values[0] if values else ""

    def _set_header(self, key: str, value: str) -> None:
        self.headers[_canonical_key(key)] = [value]


RequestOption = Callable[[Request], None]


def with_header(key: str, value: str, replace: bool) -> RequestOption:
    """Return an option that sets or adds a header on the request."""
    canonical = _canonical_key(key)

    def apply(request: Request) -> None:
        if request.headers is None:
            request.headers = {}
        if replace:
            request.headers[canonical] = [value]
        else:
            request.headers.setdefault(canonical, []).append(value)

    return apply