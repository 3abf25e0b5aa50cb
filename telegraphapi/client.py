"""Low-level HTTP client for the Telegraph API."""

from __future__ import annotations

import copy
import sys
import time
from collections.abc import Callable, Iterable
from urllib.parse import urlencode

import requests

from .errors import EmptyAccessTokenError
from .request import Request, RequestOption

API_URL = "https://api.telegra.ph/"
BASE_URL = "https://telegra.ph/"
USER_AGENT = "Telegraph/python"

Logger = Callable[[str], None]


def _stderr_logger(message: str) -> None:
    stamp = time.strftime("%Y/%m/%d %H:%M:%S")
    print(f"Telegraph-python {stamp} {message}", file=sys.stderr)


class Client:
    """Sends requests to the Telegraph API and returns raw response bodies."""

    def __init__(
        self,
        access_token: str = "",
        base_url: str = API_URL,
        user_agent: str = USER_AGENT,
        session: requests.Session | None = None,
        debug: bool = False,
        logger: Logger | None = _stderr_logger,
    ) -> None:
        self.access_token = access_token
        self.base_url = base_url
        self.user_agent = user_agent
        self.session = session if session is not None else requests.Session()
        self.debug = debug
        self.logger = logger

    def _debug(self, message: str, *args: object) -> None:
        if self.debug and self.logger is not None:
            self.logger(message % args if args else message)

    def _prepare(self, request: Request, options: Iterable[RequestOption]) -> None:
        for option in options:
            option(request)
        request.validate()

        full_url = f"{self.base_url}{request.endpoint}"

        if request.secured:
            if not self.access_token:
                raise EmptyAccessTokenError()
            request.set_form_param("access_token", self.access_token)

        body = urlencode(sorted(request.form.items()))
        headers = {key: list(values) for key, values in request.headers.items()}
        request.headers = headers

        if body:
            if not request._header("Content-Type"):
                request._set_header("Content-Type", "application/x-www-form-urlencoded")
            request.body = body.encode("ascii")
        if self.user_agent and not request._header("User-Agent"):
            request._set_header("User-Agent", self.user_agent)
        self._debug("full url: %s, body: %s", full_url, body)

        request.full_url = full_url

    def call_api(self, request: Request, options: Iterable[RequestOption] = ()) -> bytes:
        """Send the request and return the raw body of the response."""
        self._prepare(request, options)
        self._debug("method: %r, fullUrl: %r", request.method, request.full_url)
        headers = {key: ", ".join(values) for key, values in request.headers.items()}
        self._debug("request: %s %s headers=%r", request.method, request.full_url, headers)

        response = self.session.request(
            request.method, request.full_url, data=request.body, headers=headers
        )
        try:
            data = response.content
        finally:
            response.close()

        self._debug("response: %r", response)
        self._debug("response body: %s", data.decode("utf-8", errors="replace"))
        self._debug("response status code: %d", response.status_code)
        return data

    def with_base_url(self, base_url: str) -> Client:
        """Return a shallow copy of the client that talks to another base URL."""
        clone = copy.copy(self)
        clone.base_url = base_url
        return clone