"""Walk through the main API calls against a Telegraph account."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

import requests

from .api import Telegraph
from .content import content_format
from .errors import TelegraphError

log = logging.getLogger("telegraphapi.demo")

_FAILURES = (TelegraphError, requests.RequestException, ValueError)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="telegraph-demo",
        description="Exercise the Telegraph API with a sandbox account.",
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("TELEGRAPH_TOKEN", ""),
        help="access token (default: $TELEGRAPH_TOKEN)",
    )
    parser.add_argument("--debug", action="store_true", help="log HTTP traffic")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration; return 0 on success and 1 on a fatal error."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    with Telegraph(args.token, debug=args.debug) as client:
        log.info("> Loaded client: %r", client)

        try:
            log.info("> GetAccountInfo result: %r", client.get_account_info())
        except _FAILURES as err:
            log.info("* GetAccountInfo error: %s", err)

        try:
            account = client.edit_account_info(short_name="Sandbox", author_name="Anonymous")
            log.info("> EditAccountInfo result: %r", account)
        except _FAILURES as err:
            log.info("* EditAccountInfo error: %s", err)

        try:
            content = content_format("<p>Hello, World!</p>")
            page = client.create_page("Test page", content, return_content=True)
        except _FAILURES as err:
            log.error("* CreatePage error: %s", err)
            return 1
        if page is None:
            log.error("* CreatePage error: no page returned")
            return 1
        log.info("> CreatePage result: %r", page)
        log.info("> Created page url: %s", page.url)
        path = page.path

        try:
            log.info("> GetPage result: %r", client.get_page(path, return_content=True))
        except _FAILURES as err:
            log.info("* GetPage error: %s", err)

        try:
            content = content_format("<p>Hello, New World!</p>")
            edited = client.edit_page(path, "Test page (edited)", content, return_content=True)
            log.info("> EditPage result: %r", edited)
            if edited is not None:
                log.info("> Edited page url: %s", edited.url)
        except _FAILURES as err:
            log.info("* EditPage error: %s", err)

        try:
            pages = client.get_page_list(offset=0, limit=50)
        except _FAILURES as err:
            log.error("* GetPageList error: %s", err)
            return 1
        log.info("> GetPageList result: %r", pages)

        for listed in pages.pages if pages is not None else []:
            try:
                views = client.get_views(listed.path, year=2016, month=1, day=1, hour=3)
            except _FAILURES as err:
                log.error("* GetViews error: %s", err)
                return 1
            log.info("> GetViews result for %s: %r", listed.path, views)

        try:
            account = client.revoke_access_token()
        except _FAILURES as err:
            log.error("* RevokeAccessToken error: %s", err)
            return 1
        log.info("> RevokeAccessToken result: %r", account)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())