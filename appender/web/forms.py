"""Form decoding that keeps field values as the bytes the client sent.

Starlette's ``request.form()`` decodes values to ``str``, which replaces or
reinterprets bytes that are not valid UTF-8. Appended text must reach the
file unchanged, so the body is parsed here instead.
"""

from urllib.parse import parse_qsl

import python_multipart
from fastapi import HTTPException, Request
from python_multipart.exceptions import FormParserError
from python_multipart.multipart import parse_options_header


class _MultipartCollector:
    """Collect multipart parts as raw bytes, keeping the first value per name."""

    def __init__(self):
        self.fields: dict[str, bytes] = {}
        self._header_name = b""
        self._header_value = b""
        self._disposition = b""
        self._data = bytearray()

    def on_part_begin(self):
        self._disposition = b""
        self._data = bytearray()

    def on_part_data(self, data: bytes, start: int, end: int):
        self._data.extend(data[start:end])

    def on_part_end(self):
        _, options = parse_options_header(self._disposition)
        if b"name" not in options:
            raise HTTPException(400, 'Multipart part is missing a "name"')
        name = options[b"name"].decode("utf-8", errors="replace")
        self.fields.setdefault(name, bytes(self._data))

    def on_header_field(self, data: bytes, start: int, end: int):
        self._header_name += data[start:end]

    def on_header_value(self, data: bytes, start: int, end: int):
        self._header_value += data[start:end]

    def on_header_end(self):
        if self._header_name.lower() == b"content-disposition":
            self._disposition = self._header_value
        self._header_name = b""
        self._header_value = b""

    def callbacks(self) -> dict:
        return {
            "on_part_begin": self.on_part_begin,
            "on_part_data": self.on_part_data,
            "on_part_end": self.on_part_end,
            "on_header_field": self.on_header_field,
            "on_header_value": self.on_header_value,
            "on_header_end": self.on_header_end,
        }


def parse_urlencoded(body: bytes) -> dict[str, bytes]:
    """Decode an urlencoded body; percent escapes become their raw bytes."""
    fields: dict[str, bytes] = {}
    # latin-1 maps every byte to one code point, so encoding back is lossless
    for name, value in parse_qsl(body.decode("latin-1"), keep_blank_values=True, encoding="latin-1"):
        key = name.encode("latin-1").decode("utf-8", errors="replace")
        fields.setdefault(key, value.encode("latin-1"))
    return fields


async def parse_multipart(request: Request, boundary: bytes) -> dict[str, bytes]:
    collector = _MultipartCollector()
    parser = python_multipart.MultipartParser(boundary, collector.callbacks())
    try:
        async for chunk in request.stream():
            parser.write(chunk)
        parser.finalize()
    except FormParserError as e:
        raise HTTPException(400, f"Malformed multipart body: {e}") from e
    return collector.fields


async def read_raw_form(request: Request) -> dict[str, bytes]:
    """Return the request's form fields as ``{name: raw value bytes}``.

    Repeated names keep their first value.
    """
    content_type, params = parse_options_header(request.headers.get("content-type"))
    if content_type == b"multipart/form-data":
        if b"boundary" not in params:
            raise HTTPException(400, "Missing boundary in multipart")
        return await parse_multipart(request, params[b"boundary"])
    return parse_urlencoded(await request.body())
