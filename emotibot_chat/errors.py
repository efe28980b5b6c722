"""
Failures of the remote text-completion path.

None of these ever reach a chat turn: the remote adapter turns them into a
``Failure`` outcome and the caller substitutes the local result.
"""

from dataclasses import dataclass


class RemoteError(Exception):
    """Base class for anything that makes a remote call unusable."""


class RemoteUnavailable(RemoteError):
    """No credential is configured, so the remote path is off."""


class RemoteCallFailed(RemoteError):
    """Network error, timeout or non-2xx response."""


class RemoteResponseUnparseable(RemoteError):
    """The service answered, but not with anything usable."""


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Failure:
    error: RemoteError


Outcome = Success | Failure
