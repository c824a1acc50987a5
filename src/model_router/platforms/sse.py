"""Server-sent events parsing for streamed provider responses."""

import json
from typing import Iterable, Iterator, Union

from model_router.logging import get_logger

DONE_SENTINEL = "[DONE]"


def iter_sse_events(lines: Iterable[Union[str, bytes]]) -> Iterator[dict]:
    """Yield the decoded JSON payload of every ``data:`` event.

    ``lines`` are already split on newlines (``requests.Response.iter_lines``
    reassembles events that arrive split across network chunks). Multi-line
    data fields are joined before decoding; payloads that are not JSON are
    skipped.
    """
    event_name = None
    data_lines = []

    def dispatch():
        if not data_lines:
            return None
        data = "\n".join(data_lines)
        if data == DONE_SENTINEL:
            return None
        try:
            payload = json.loads(data)
        except json.JSONDecodeError:
            get_logger().debug("Skipping unparseable stream event", data=data[:80])
            return None
        if isinstance(payload, dict) and event_name and "type" not in payload:
            payload["type"] = event_name
        return payload

    for line in lines:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        line = line.rstrip("\r")

        if not line:
            payload = dispatch()
            if payload is not None:
                yield payload
            event_name = None
            data_lines = []
            continue

        if line.startswith(":"):
            continue
        field, _, value = line.partition(":")
        value = value[1:] if value.startswith(" ") else value
        if field == "event":
            event_name = value
        elif field == "data":
            data_lines.append(value)

    payload = dispatch()
    if payload is not None:
        yield payload
