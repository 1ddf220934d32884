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
"""Session and request tokens for double-submit XSRF protection.

Usage:

- Issue a :class:`SessionToken` once per session and store ``encode()`` in a
  signed cookie or the session. This library does not sign it for you.
- From that session token, mint one or more :class:`RequestToken` values,
  one per page render or per request, and embed their ``encode()`` in a form
  field or have JavaScript send it in a header.
- On a state-changing request, decode both and call
  :meth:`SessionToken.verify`. Any number of outstanding request tokens stay
  valid until the caller rotates the session token.

A request token is a fresh one-time pad plus ``pad XOR secret``. Its wire
bytes differ on every issuance, so the session secret never appears
verbatim in a response body and compression oracles (BREACH) have nothing
stable to latch on to.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from xsrf.codec import ENCODED_LEN, TOKEN_LEN, decode_fixed, encode_fixed
from xsrf.crypto import constant_time_eq, wipe, xor_into
from xsrf.exceptions import InvalidTokenException, TokenMismatchException
from xsrf.random import RandomSource, draw

logger = logging.getLogger(__name__)

REQUEST_TOKEN_ENCODED_LEN: int = 2 * ENCODED_LEN
"""Number of characters in an encoded request token (88)."""

_MINT = object()


class _Immutable:
    __slots__ = ()

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> _Immutable:
        return self

    def __deepcopy__(self, memo: dict) -> _Immutable:
        return self

    __hash__ = None  # type: ignore[assignment]


class RequestToken(_Immutable):
    """A per-issuance token derived from a :class:`SessionToken`.

    Instances come only from :meth:`SessionToken.mint_request_token` or
    :meth:`decode`; calling the class directly raises :class:`TypeError`.
    """

    __slots__ = ("_otp", "_mask")

    def __init_subclass__(cls, **kwargs: object) -> NoReturn:
        raise TypeError("RequestToken cannot be subclassed")

    _otp: bytes
    _mask: bytes

    def __init__(self, otp: bytes, mask: bytes, *, _key: object = None) -> None:
        if _key is not _MINT:
            raise TypeError(
                "RequestToken cannot be constructed directly; use "
                "SessionToken.mint_request_token() or RequestToken.decode()"
            )
        assert len(otp) == TOKEN_LEN and len(mask) == TOKEN_LEN
        object.__setattr__(self, "_otp", bytes(otp))
        object.__setattr__(self, "_mask", bytes(mask))

    @property
    def otp(self) -> bytes:
        """The one-time pad."""
        return self._otp

    @property
    def mask(self) -> bytes:
        """The pad XOR the session secret."""
        return self._mask

    def encode(self) -> str:
        """Return ``encode(otp) + encode(mask)``, ``2 * ENCODED_LEN`` characters."""
        return encode_fixed(self._otp) + encode_fixed(self._mask)

    @classmethod
    def decode(cls, text: str) -> RequestToken:
        """Parse an encoded request token.

        Raises:
            InvalidTokenException: If *text* is not exactly
                ``2 * ENCODED_LEN`` characters or either half is not a valid
                encoding of ``TOKEN_LEN`` bytes.
        """
        if not isinstance(text, str) or len(text) != REQUEST_TOKEN_ENCODED_LEN:
            logger.debug("malformed xsrf request token rejected")
            raise InvalidTokenException()
        try:
            otp = decode_fixed(text[:ENCODED_LEN])
            mask = decode_fixed(text[ENCODED_LEN:])
        except InvalidTokenException:
            logger.debug("malformed xsrf request token rejected")
            raise
        return cls(otp, mask, _key=_MINT)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestToken):
            return NotImplemented
        # Both halves are always compared.
        same_otp = constant_time_eq(self._otp, other._otp)
        same_mask = constant_time_eq(self._mask, other._mask)
        return same_otp & same_mask

    def __reduce__(self) -> tuple:
        return type(self).decode, (self.encode(),)

    def __repr__(self) -> str:
        return "RequestToken(<redacted>)"


class SessionToken(_Immutable):
    """The per-session secret that request tokens are minted from and checked against."""

    __slots__ = ("_secret",)

    def __init_subclass__(cls, **kwargs: object) -> NoReturn:
        raise TypeError("SessionToken cannot be subclassed")

    _secret: bytes

    def __init__(self, secret: bytes, *, _key: object = None) -> None:
        if _key is not _MINT:
            raise TypeError(
                "SessionToken cannot be constructed directly; use "
                "SessionToken.create() or SessionToken.decode()"
            )
        assert len(secret) == TOKEN_LEN
        object.__setattr__(self, "_secret", bytes(secret))

    @classmethod
    def create(cls, random: RandomSource | None = None) -> SessionToken:
        """Create a new session token from *random* (the system CSPRNG by default)."""
        return cls(draw(TOKEN_LEN, random), _key=_MINT)

    def encode(self) -> str:
        """Return the ``ENCODED_LEN``-character text form of the secret."""
        return encode_fixed(self._secret)

    @classmethod
    def decode(cls, text: str) -> SessionToken:
        """Parse an encoded session token.

        Raises:
            InvalidTokenException: If *text* is not a valid fixed-width
                encoding of ``TOKEN_LEN`` bytes.
        """
        try:
            secret = decode_fixed(text)
        except InvalidTokenException:
            logger.debug("malformed xsrf session token rejected")
            raise
        return cls(secret, _key=_MINT)

    def mint_request_token(self, random: RandomSource | None = None) -> RequestToken:
        """Derive a new request token with a fresh one-time pad."""
        otp = draw(TOKEN_LEN, random)
        mask = bytearray(TOKEN_LEN)
        xor_into(otp, self._secret, mask)
        return RequestToken(otp, bytes(mask), _key=_MINT)

    def verify(self, token: RequestToken) -> None:
        """Check that *token* was minted from this session token.

        The recovered secret is compared with a constant-time equality, so
        the running time does not depend on how many leading bytes match.

        Raises:
            TokenMismatchException: If *token* does not recover this secret.
        """
        if not isinstance(token, RequestToken):
            raise TypeError(f"expected RequestToken, got {type(token).__name__}")
        candidate = bytearray(TOKEN_LEN)
        xor_into(token._otp, token._mask, candidate)
        matches = constant_time_eq(candidate, self._secret)
        wipe(candidate)
        if not matches:
            logger.debug("xsrf request token mismatch")
            raise TokenMismatchException()

    def verify_encoded(self, text: str) -> None:
        """Decode *text* as a request token and :meth:`verify` it.

        Raises:
            InvalidTokenException: If *text* is malformed.
            TokenMismatchException: If it does not match this session.
        """
        self.verify(RequestToken.decode(text))

    def is_valid(self, token: RequestToken) -> bool:
        """Return ``True`` if *token* verifies against this session token."""
        try:
            self.verify(token)
        except TokenMismatchException:
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SessionToken):
            return NotImplemented
        return constant_time_eq(self._secret, other._secret)

    def __reduce__(self) -> tuple:
        return type(self).decode, (self.encode(),)

    def __repr__(self) -> str:
        return "SessionToken(<redacted>)"
