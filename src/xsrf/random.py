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
"""RandomSource — the port supplying cryptographically secure random bytes."""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Port defining where token randomness comes from."""

    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """Default RandomSource backed by the operating system CSPRNG."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


_SYSTEM_SOURCE = SystemRandomSource()


def default_random_source() -> RandomSource:
    """Return the shared system random source."""
    return _SYSTEM_SOURCE


def draw(n: int, source: RandomSource | None = None) -> bytes:
    """Draw exactly *n* bytes from *source* (the system source by default)."""
    data = bytes((source if source is not None else _SYSTEM_SOURCE).token_bytes(n))
    if len(data) != n:
        raise ValueError(f"random source returned {len(data)} bytes, expected {n}")
    return data
