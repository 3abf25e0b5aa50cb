"""Page and upload methods of the Telegraph API."""

from __future__ import annotations

import hashlib
import json
import secrets
from collections.abc import Iterable, Sequence
from contextlib import ExitStack
from typing import Any, BinaryIO, Union

from .account import _decode_result, _marshal
from .client import BASE_URL
from .errors import APIError
from .models import Node, Page, PageList, PageViews, node_to_json
from .request import Request, RequestOption, with_header

UploadContent = Union[bytes, bytearray, BinaryIO]


def _escape_quotes(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _multipart(files: Iterable[tuple[str, bytes]]) -> tuple[bytes, str]:
    """Build a multipart/form-data body; each field is named by the filename's SHA-256."""
    boundary = secrets.token_hex(30)
    chunks: list[bytes] = []
    for filename, data in files:
        field_name = hashlib.sha256(filename.encode("utf-8")).hexdigest()
        head = (
            f"--{boundary}\r\n"
            f'Content-Disposition: form-data; name="{field_name}"; '
            f'filename="{_escape_quotes(filename)}"\r\n'
            "Content-Type: application/octet-stream\r\n\r\n"
        )
        chunks.append(head.encode("utf-8") + data + b"\r\n")
    chunks.append(f"--{boundary}--\r\n".encode("ascii"))
    return b"".join(chunks), f"multipart/form-data; boundary={boundary}"


def _decode_upload(data: bytes) -> list[str]:
    payload = json.loads(data)
    if payload is None:
        return []
    if isinstance(payload, list) and all(
        item is None or isinstance(item, dict) for item in payload
    ):
        return [(item or {}).get("src", "") for item in payload]
    if isinstance(payload, dict) and all(isinstance(v, str) for v in payload.values()):
        raise APIError(payload.get("error", ""))
    raise ValueError("unexpected response from the upload endpoint")


def _read_content(content: UploadContent) -> bytes:
    if isinstance(content, (bytes, bytearray)):
        return bytes(content)
    data = content.read()
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _content_json(content: Sequence[Any] | None) -> str:
    if content is None:
        return "null"
    return _marshal([node_to_json(node) for node in content])


class PageMethods:
    """Page calls, mixed into a class that provides call_api and with_base_url."""

    def _page_request(
        self,
        endpoint: str,
        title: str,
        content: Sequence[Node] | None,
        author_name: str,
        author_url: str,
        return_content: bool,
    ) -> Request:
        request = Request("POST", endpoint, secured=True)
        request.set_form_param("title", title)
        request.set_form_param("content", _content_json(content))
        if author_name:
            request.set_form_param("author_name", author_name)
        if author_url:
            request.set_form_param("author_url", author_url)
        if return_content:
            request.set_form_param("return_content", return_content)
        return request

    def create_page(
        self,
        title: str,
        content: Sequence[Node] | None,
        author_name: str = "",
        author_url: str = "",
        return_content: bool = False,
        options: Iterable[RequestOption] = (),
    ) -> Page | None:
        """Create a new page."""
        request = self._page_request(
            "createPage", title, content, author_name, author_url, return_content
        )
        return _decode_result(self.call_api(request, options), Page)  # type: ignore[attr-defined]

    def edit_page(
        self,
        path: str,
        title: str,
        content: Sequence[Node] | None,
        author_name: str = "",
        author_url: str = "",
        return_content: bool = False,
        options: Iterable[RequestOption] = (),
    ) -> Page | None:
        """Edit an existing page."""
        request = self._page_request(
            f"editPage/{path}", title, content, author_name, author_url, return_content
        )
        return _decode_result(self.call_api(request, options), Page)  # type: ignore[attr-defined]

    def get_page(
        self,
        path: str,
        return_content: bool = False,
        options: Iterable[RequestOption] = (),
    ) -> Page | None:
        """Return a page; no access token is needed."""
        request = Request("POST", f"getPage/{path}")
        if return_content:
            request.set_form_param("return_content", return_content)
        return _decode_result(self.call_api(request, options), Page)  # type: ignore[attr-defined]

    def get_page_list(
        self,
        offset: int = 0,
        limit: int = 0,
        options: Iterable[RequestOption] = (),
    ) -> PageList | None:
        """Return the account's pages, most recently created first."""
        request = Request("POST", "getPageList", secured=True)
        if offset > 1:
            request.set_form_param("offset", offset)
        if limit > 1:
            request.set_form_param("limit", limit)
        return _decode_result(self.call_api(request, options), PageList)  # type: ignore[attr-defined]

    def get_views(
        self,
        path: str,
        year: int = 0,
        month: int = 0,
        day: int = 0,
        hour: int = 0,
        options: Iterable[RequestOption] = (),
    ) -> PageViews | None:
        """Return the number of views of a page, optionally for a period."""
        request = Request("POST", f"getViews/{path}")
        for key, value in (("year", year), ("month", month), ("day", day), ("hour", hour)):
            if value > 0:
                request.set_form_param(key, value)
        return _decode_result(self.call_api(request, options), PageViews)  # type: ignore[attr-defined]

    def _send_upload(
        self, files: Iterable[tuple[str, bytes]], options: Iterable[RequestOption]
    ) -> list[str]:
        body, content_type = _multipart(files)
        request = Request("POST", "upload", body=body)
        all_options = [*options, with_header("Content-Type", content_type, False)]
        client = self.with_base_url(BASE_URL)  # type: ignore[attr-defined]
        return _decode_upload(client.call_api(request, all_options))

    def upload_files(
        self, filenames: Iterable[str], options: Iterable[RequestOption] = ()
    ) -> list[str]:
        """Upload files from disk and return their paths on the server."""
        with ExitStack() as stack:
            files = []
            for filename in filenames:
                handle = stack.enter_context(open(filename, "rb"))
                files.append((str(filename), handle.read()))
        return self._send_upload(files, options)

    def upload(
        self,
        filename: str,
        content: UploadContent,
        options: Iterable[RequestOption] = (),
    ) -> list[str]:
        """Upload in-memory or streamed content under the given filename."""
        return self._send_upload([(filename, _read_content(content))], options)