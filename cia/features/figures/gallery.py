from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

# 10x10 light-grey PNG used until figures are extracted from uploaded reports.
PLACEHOLDER_PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAoAAAAKCAIAAAACUFjqAAAAE0lEQVR4nGO4ee8xHsQwKo0NAQCKuQQ4h05EwwAAAABJRU5ErkJggg=="
)
PLACEHOLDER_DATA_URL = f"data:image/png;base64,{PLACEHOLDER_PNG_B64}"

GALLERY_SIZE = 8
DEFAULT_SELECTED = 3


@dataclass(frozen=True)
class Figure:
    id: str
    caption: str
    data_url: str
    selected: bool = False


class InvalidImagePayload(ValueError):
    pass


def default_gallery() -> tuple[Figure, ...]:
    return tuple(
        Figure(
            id=f"fig-{i + 1}",
            caption=f"Figure {i + 1}: Placeholder diagram/map",
            data_url=PLACEHOLDER_DATA_URL,
            selected=i < DEFAULT_SELECTED,
        )
        for i in range(GALLERY_SIZE)
    )


def decode_data_url(data_url: str) -> bytes:
    """Return the raw bytes of a base64 `data:` URL.

    Raises InvalidImagePayload for anything that is not a non-empty base64 data URL.
    """

    header, sep, payload = data_url.partition(",")
    if not sep or not header.startswith("data:") or ";base64" not in header:
        raise InvalidImagePayload("not a base64 data URL")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImagePayload(f"bad base64 payload: {e}") from e
    if not data:
        raise InvalidImagePayload("empty image payload")
    return data
