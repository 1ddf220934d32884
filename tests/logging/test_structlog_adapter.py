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
"""Tests for StructlogAdapter — default LoggingPort implementation."""

import logging

import pytest

from xsrf import InvalidTokenException, SessionToken, TokenMismatchException
from xsrf.config import Config
from xsrf.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config.defaults())
        assert adapter.root_level == "INFO"
        assert adapter.format == "console"
        assert adapter.module_levels == {"xsrf": "WARNING"}

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"xsrf": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter.root_level == "DEBUG"

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"xsrf": {"logging": {"format": "json"}}}))
        assert adapter.format == "json"

    def test_configure_applies_module_levels(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"xsrf": {"logging": {"level": {"root": "INFO", "xsrf.tokens": "DEBUG"}}}}))
        assert adapter.module_levels == {"xsrf.tokens": "DEBUG"}
        assert logging.getLogger("xsrf.tokens").level == logging.DEBUG

    def test_configure_ignores_scalar_env_for_level_map(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("XSRF_LOGGING_LEVEL", "DEBUG")
        adapter = StructlogAdapter()
        adapter.configure(Config.defaults())
        assert adapter.root_level == "INFO"
        assert adapter.module_levels == {"xsrf": "WARNING"}


class TestStructlogAdapterLoggers:
    def test_get_logger_returns_bound_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("xsrf.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))

    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("xsrf.codec", "error")
        assert logging.getLogger("xsrf.codec").level == logging.ERROR


class TestTokenLogging:
    def test_mismatch_is_logged_without_token_material(self, caplog: pytest.LogCaptureFixture):
        session = SessionToken.create()
        foreign = SessionToken.create().mint_request_token()
        with caplog.at_level(logging.DEBUG, logger="xsrf.tokens"):
            with pytest.raises(TokenMismatchException):
                session.verify(foreign)
        assert "xsrf request token mismatch" in caplog.text
        assert session.encode() not in caplog.text
        assert foreign.encode()[:40] not in caplog.text

    def test_malformed_token_is_logged(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="xsrf.tokens"):
            with pytest.raises(InvalidTokenException):
                SessionToken.decode("short")
        assert "malformed xsrf session token rejected" in caplog.text
