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
"""Tests for the RandomSource port and its system adapter."""

import pytest

from xsrf.random import RandomSource, SystemRandomSource, default_random_source, draw


class TestRandomSourceProtocol:
    def test_system_source_conforms(self):
        assert isinstance(SystemRandomSource(), RandomSource)

    def test_conforming_class_is_instance(self):
        class Fixed:
            def token_bytes(self, n: int) -> bytes:
                return b"\x00" * n

        assert isinstance(Fixed(), RandomSource)

    def test_non_conforming_class_is_not_instance(self):
        class Incomplete:
            pass

        assert not isinstance(Incomplete(), RandomSource)


class TestSystemRandomSource:
    def test_returns_requested_length(self):
        assert len(SystemRandomSource().token_bytes(32)) == 32

    def test_default_is_shared_system_source(self):
        assert default_random_source() is default_random_source()
        assert isinstance(default_random_source(), SystemRandomSource)


class TestDraw:
    def test_uses_given_source(self):
        class Fixed:
            def token_bytes(self, n: int) -> bytes:
                return b"\x42" * n

        assert draw(4, Fixed()) == b"\x42\x42\x42\x42"

    def test_short_read_is_rejected(self):
        class Short:
            def token_bytes(self, n: int) -> bytes:
                return b"\x00" * (n - 1)

        with pytest.raises(ValueError, match="returned 31 bytes"):
            draw(32, Short())

    def test_source_failure_propagates(self):
        class Broken:
            def token_bytes(self, n: int) -> bytes:
                raise OSError("entropy source unavailable")

        with pytest.raises(OSError):
            draw(32, Broken())
