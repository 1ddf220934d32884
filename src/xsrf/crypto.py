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
"""Byte-level primitives shared by token minting and verification."""

from __future__ import annotations

BytesLike = bytes | bytearray | memoryview


def xor_into(a: BytesLike, b: BytesLike, out: bytearray) -> None:
    """Write ``a XOR b`` byte-wise into *out*.

    All three buffers must have the same length.
    """
    a_view = memoryview(a)
    b_view = memoryview(b)
    assert len(a_view) == len(b_view) == len(out), "xor_into requires equal-length buffers"
    for index in range(len(out)):
        out[index] = a_view[index] ^ b_view[index]


def constant_time_eq(a: BytesLike, b: BytesLike) -> bool:
    """Compare two byte buffers without an early exit.

    Every byte pair is visited and folded into a single accumulator with
    bitwise OR; the accumulator is inspected once after the loop. Buffers of
    unequal length compare unequal.
    """
    a_view = memoryview(a)
    b_view = memoryview(b)
    if len(a_view) != len(b_view):
        return False
    diff = 0
    for x, y in zip(a_view, b_view):
        diff |= x ^ y
    return diff == 0


def wipe(buffer: bytearray) -> None:
    """Overwrite a scratch buffer with zeros."""
    for index in range(len(buffer)):
        buffer[index] = 0
