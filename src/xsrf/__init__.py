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
"""xsrf — one-time-pad double-submit XSRF tokens."""

from xsrf.codec import ENCODED_LEN, TOKEN_LEN
from xsrf.exceptions import (
    InvalidTokenException,
    SecurityException,
    TokenMismatchException,
    ValidationException,
    XsrfException,
)
from xsrf.random import RandomSource, SystemRandomSource
from xsrf.tokens import REQUEST_TOKEN_ENCODED_LEN, RequestToken, SessionToken

__all__ = [
    # Constants
    "TOKEN_LEN",
    "ENCODED_LEN",
    "REQUEST_TOKEN_ENCODED_LEN",
    # Tokens
    "SessionToken",
    "RequestToken",
    # Randomness
    "RandomSource",
    "SystemRandomSource",
    # Exceptions
    "XsrfException",
    "ValidationException",
    "SecurityException",
    "InvalidTokenException",
    "TokenMismatchException",
]
