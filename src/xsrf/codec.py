# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Fixed-width URL-safe base64 encoding for token bytes.

Token bytes travel as URL-safe base64 (``A-Z a-z 0-9 - _``) with standard
``=`` padding, so they fit in URLs, headers and HTML attributes unescaped.
Every encoding of ``size`` bytes is exactly :func:`encoded_length` characters
long, and decoding accepts only that exact width.
"""

from __future__ import annotations

import base64
import functools
import re

from xsrf.exceptions import InvalidTokenException

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
TOKEN_LEN: int = 32
"""Number of bytes in a session secret, a one-time pad and a mask."""


def encoded_length(size: int) -> int:
    """Return the padded base64 length for *size* bytes."""
    return 4 * ((size + 2) // 3)


ENCODED_LEN: int = encoded_length(TOKEN_LEN)
"""Number of characters in the encoding of ``TOKEN_LEN`` bytes (44)."""


@functools.lru_cache(maxsize=8)
def _shape(size: int) -> re.Pattern[str]:
    padding = (3 - size % 3) % 3
    return re.compile(rf"[A-Za-z0-9_-]{{{encoded_length(size) - padding}}}={{{padding}}}")


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------
def encode_fixed(data: bytes) -> str:
    """Encode *data* as padded URL-safe base64 text."""
    return base64.urlsafe_b64encode(data).decode("ascii")


def decode_fixed(text: str, size: int = TOKEN_LEN) -> bytes:
    """Decode exactly ``encoded_length(size)`` characters into *size* bytes.

    The length is checked before anything else is looked at. The text must
    then match the URL-safe alphabet with the padding that *size* implies,
    and must be the canonical encoding of its bytes (no stray low bits in
    the last symbol), which keeps decoding a bijection.

    Raises:
        InvalidTokenException: On any of the above; the message is the same
            whichever check failed.
    """
    if not isinstance(text, str) or len(text) != encoded_length(size):
        raise InvalidTokenException()
    if _shape(size).fullmatch(text) is None:
        raise InvalidTokenException()
    data = base64.urlsafe_b64decode(text)
    if len(data) != size or encode_fixed(data) != text:
        raise InvalidTokenException()
    return data
