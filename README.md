# telegraphapi

A small client for the Telegraph publishing API. It covers account
management, creating and editing pages, listing pages, reading view counts
and uploading files, and it turns ordinary HTML into the node format that
Telegraph pages are built from.

## Installation

```
pip install telegraphapi
```

The package depends on `requests` for HTTP and `html5lib` for HTML parsing.

## Quick start

```python
from telegraphapi.api import Telegraph
from telegraphapi.content import content_format

with Telegraph(access_token="token") as client:
    account = client.get_account_info(fields=["short_name", "author_name", "page_count"])
    print(account.short_name, account.page_count)

    content = content_format("<p>Hello, World!</p>")
    page = client.create_page(title="Test page", content=content, return_content=True)
    print(page.url)

    page = client.get_page(page.path, return_content=True)

    content = content_format("<p>Hello, New World!</p>")
    page = client.edit_page(path=page.path, title="Test page (edited)", content=content)

    pages = client.get_page_list(offset=0, limit=50)
    for item in pages.pages:
        views = client.get_views(item.path, year=2016, month=1, day=1, hour=3)
        print(item.path, views.views)
```

`telegraphapi.api.Telegraph` combines every API method with the HTTP client
and is a context manager; leaving the `with` block, or calling `close()`,
closes its `requests` session. Its constructor takes `access_token`,
`base_url`, `user_agent`, `session` (a `requests.Session` to reuse), `debug`
and `logger`. With `debug=True` each request and response is passed as a
line of text to `logger`, which by default writes to standard error.

A new account needs no access token:

```python
account = Telegraph(access_token="").create_account("Sandbox", author_name="Anonymous")
print(account.access_token)
```

Methods return objects from `telegraphapi.models`: `Account`, `Page`,
`PageList` and `PageViews`. Optional parameters that are left empty or zero
are not sent; `get_page_list` sends `offset` and `limit` only when they are
greater than 1.

## Errors

Methods that act on behalf of an account (`edit_account_info`,
`get_account_info`, `revoke_access_token`, `create_page`, `edit_page`,
`get_page_list`) raise `telegraphapi.errors.EmptyAccessTokenError` when the
client has no access token. When the service answers with `"ok": false`, or
an upload answers with an error object, the method raises
`telegraphapi.errors.APIError` carrying the service's error text. All of the
package's own errors derive from `telegraphapi.errors.TelegraphError`;
network failures surface as the exceptions of `requests`.

## Content

`telegraphapi.content.content_format` accepts a `str`, `bytes` or a binary or
text file object holding HTML and returns a list with one node: the parsed
document's root element. Text becomes plain strings and elements become
`telegraphapi.models.NodeElement` objects. Only the tags Telegraph
understands keep their name (`a`, `aside`, `b`, `blockquote`, `br`, `code`,
`em`, `figcaption`, `figure`, `h3`, `h4`, `hr`, `i`, `iframe`, `img`, `li`,
`ol`, `p`, `pre`, `s`, `strong`, `u`, `ul`, `video`); any other element is kept
with an empty tag so that its children survive. Of the attributes only one
`href` or `src` is carried over, and only on the allowed tags. Any other input
type raises `telegraphapi.errors.InvalidDataTypeError`.

Extra positional arguments are filters: callables that receive a parsed DOM
node and return `True` to drop it, together with everything beneath it.

`telegraphapi.models.node_to_json` and `node_from_json` convert nodes to and
from their JSON form; `NodeElement.to_dict()` leaves out empty attributes and
children.

## Uploads

```python
paths = client.upload_files(["picture.png"])
with open("picture.png", "rb") as handle:
    paths = client.upload("picture.png", handle)
```

Both send the files as one multipart request and return the paths the
service assigned to them. `upload` also accepts `bytes`.

## Request options

Every API method accepts `options`, a sequence of callables applied to the
outgoing `telegraphapi.request.Request` before it is sent.
`telegraphapi.request.with_header` builds one that sets (`replace=True`) or
adds a header:

```python
from telegraphapi.request import with_header

client.get_page("Sample-Page-12-15", options=[with_header("X-Trace", "1", True)])
```

## Demo

Installing the package provides a command that walks through the API methods
in turn against the live service and logs each result:

```
telegraphapi-demo --token token
```

The token defaults to the `TELEGRAPH_TOKEN` environment variable; `--debug`
logs the HTTP traffic. The command exits with status 1 if creating the page,
listing pages, reading views or revoking the token fails. Note that it
revokes the account's access token at the end.