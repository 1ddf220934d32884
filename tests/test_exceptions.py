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
"""Tests for the xsrf exception hierarchy."""

from xsrf.exceptions import (
    InvalidTokenException,
    SecurityException,
    TokenMismatchException,
    ValidationException,
    XsrfException,
)


class TestXsrfException:
    def test_basic_creation(self):
        exc = XsrfException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_context_not_shared_between_instances(self):
        exc = XsrfException("test")
        exc.context["key"] = "value"
        assert XsrfException("test2").context == {}


class TestTokenExceptions:
    def test_invalid_token_defaults(self):
        exc = InvalidTokenException()
        assert str(exc) == "invalid xsrf token"
        assert exc.code == "XSRF_INVALID_TOKEN"
        assert exc.context == {}

    def test_token_mismatch_defaults(self):
        exc = TokenMismatchException()
        assert str(exc) == "xsrf token mismatch"
        assert exc.code == "XSRF_TOKEN_MISMATCH"

    def test_context_is_carried(self):
        exc = InvalidTokenException(context={"source": "header"})
        assert exc.context["source"] == "header"


class TestExceptionHierarchy:
    def test_invalid_token_is_validation(self):
        assert issubclass(InvalidTokenException, ValidationException)
        assert not issubclass(InvalidTokenException, SecurityException)

    def test_mismatch_is_security(self):
        assert issubclass(TokenMismatchException, SecurityException)
        assert not issubclass(TokenMismatchException, ValidationException)

    def test_catch_all_xsrf_exceptions(self):
        for exc in (InvalidTokenException(), TokenMismatchException()):
            try:
                raise exc
            except XsrfException as caught:
                assert caught is exc
