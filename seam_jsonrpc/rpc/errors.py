"""
JSON-RPC client error taxonomy

Every failure produced while building, sending, validating or extracting a
JSON-RPC call is raised as one of the exceptions below. The set is closed:
callers can branch on the exception class or on ``error.kind``.
"""

from enum import Enum
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from seam_jsonrpc.rpc.protocol import RpcError


class ErrorKind(Enum):
    """Failure kinds a JSON-RPC call can end with"""
    DECODE = "decode"
    TRANSPORT = "transport"
    RPC = "rpc"
    NO_ERROR_OR_RESULT = "no_error_or_result"
    VERSION_MISMATCH = "version_mismatch"
    NONCE_MISMATCH = "nonce_mismatch"


class JsonRpcClientError(Exception):
    """Base class for all JSON-RPC client failures.

    Attributes:
        kind: ErrorKind of this failure
        cause: underlying exception, if the failure wraps one
    """

    kind: ErrorKind

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class DecodeError(JsonRpcClientError):
    """JSON could not be encoded/parsed, or a value did not fit the requested type"""

    kind = ErrorKind.DECODE


class TransportError(JsonRpcClientError):
    """The underlying send/receive failed"""

    kind = ErrorKind.TRANSPORT


class RpcCallError(JsonRpcClientError):
    """The server reply carried an ``error`` object.

    The server's RpcError is kept unchanged so callers can branch on
    server-defined codes.
    """

    kind = ErrorKind.RPC

    def __init__(self, error: "RpcError"):
        super().__init__(f"RPC error {error.code}: {error.message}")
        self.error = error

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def data(self) -> Any:
        return self.error.data


class NoErrorOrResultError(JsonRpcClientError):
    """The reply carried neither ``result`` nor ``error``"""

    kind = ErrorKind.NO_ERROR_OR_RESULT

    def __init__(self, message: str = "Response carried neither result nor error"):
        super().__init__(message)


class VersionMismatchError(JsonRpcClientError):
    """The reply's ``jsonrpc`` field was present and not "2.0" """

    kind = ErrorKind.VERSION_MISMATCH

    def __init__(self, version: Any):
        super().__init__(f"Unsupported JSON-RPC version in response: {version!r}")
        self.version = version


class NonceMismatchError(JsonRpcClientError):
    """The reply's ``id`` did not match the request's ``id``"""

    kind = ErrorKind.NONCE_MISMATCH

    def __init__(self, expected: Any, actual: Any):
        super().__init__(f"Response ID mismatch: {actual!r} != {expected!r}")
        self.expected = expected
        self.actual = actual
