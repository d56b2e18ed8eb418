#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import base64
import binascii
import io
from pathlib import Path

from PIL import Image

from ..core.errors import DrawingBackendError
from .surface import ImageRef

_DATA_URI_PREFIX = "data:"


def load_image(ref: ImageRef) -> bytes:
    """Resolve an image reference to bytes that Pillow can decode.

    Accepts raw bytes, a ``data:`` URI (as stored by the company settings screen) or a file path.
    """
    try:
        payload = _read_image_payload(ref)
    except (OSError, ValueError, binascii.Error) as exc:
        raise DrawingBackendError(f"unable to read image: {exc}") from exc
    try:
        with Image.open(io.BytesIO(payload)) as image:
            image.verify()
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise DrawingBackendError(f"unable to decode image: {exc}") from exc
    return payload


def _read_image_payload(ref: ImageRef) -> bytes:
    if isinstance(ref, (bytes, bytearray)):
        return bytes(ref)
    text = ref.strip()
    if not text:
        raise ValueError("empty image reference")
    if text.startswith(_DATA_URI_PREFIX):
        header, sep, encoded = text.partition(",")
        if not sep:
            raise ValueError("malformed data URI")
        if header.endswith(";base64"):
            return base64.b64decode(encoded, validate=True)
        raise ValueError("only base64 data URIs are supported")
    return Path(text).expanduser().read_bytes()
