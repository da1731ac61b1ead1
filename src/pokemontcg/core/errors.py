"""Error hierarchy of the SDK.

Not-found is not here on purpose: `find` reports a missing resource as `None`
(or `NotFound` from `lookup`), never as an exception.
"""

from __future__ import annotations


class PokemonTcgError(Exception):
    """Base class for every failure raised by the client."""


class TransportError(PokemonTcgError):
    """The API could not be reached (connection, timeout, protocol)."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class RemoteError(PokemonTcgError):
    """The API answered with a non-success status."""

    def __init__(self, status_code: int, *, url: str, message: str | None = None) -> None:
        detail = f"HTTP {status_code} from {url}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)
        self.status_code = status_code
        self.url = url
        self.message = message

    @property
    def unauthorized(self) -> bool:
        return self.status_code in (401, 403)

    @property
    def rate_limited(self) -> bool:
        return self.status_code == 429


class DecodeError(PokemonTcgError):
    """A response body did not match the schema of the requested resource."""

    def __init__(self, resource: str, message: str) -> None:
        super().__init__(f"could not decode {resource}: {message}")
        self.resource = resource
