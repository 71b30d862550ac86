"""
JSON-RPC 2.0 Protocol Definition

Defines the request, response and error objects exchanged with a JSON-RPC 2.0
server, their encoding to and decoding from wire bytes, and the extraction of
results from a response.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from seam_jsonrpc.rpc.errors import DecodeError, NoErrorOrResultError, RpcCallError
from seam_jsonrpc.utils.serialization import decode, decode_as, encode

JSONRPC_VERSION = "2.0"

T = TypeVar("T")


class _Absent(Enum):
    """Marker for an optional field that is missing from a message"""
    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


# A present JSON null is None; a missing field is ABSENT.
ABSENT = _Absent.ABSENT


def json_equal(left: Any, right: Any) -> bool:
    """Type-strict structural equality of two JSON values.

    Unlike ``==``, ``True`` does not equal ``1`` and ``1`` does not equal ``1.0``.
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, list):
        return len(left) == len(right) and all(
            json_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(
            json_equal(value, right[key]) for key, value in left.items()
        )
    return left == right


def _expect_object(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _expect_version(data: Dict[str, Any], what: str) -> Optional[str]:
    jsonrpc = data.get("jsonrpc")
    if jsonrpc is not None and not isinstance(jsonrpc, str):
        raise DecodeError(f"{what} 'jsonrpc' must be a string, got {type(jsonrpc).__name__}")
    return jsonrpc


@dataclass(frozen=True)
class RpcError:
    """Error object returned by a JSON-RPC server"""
    code: int
    message: str
    data: Any = ABSENT

    def to_dict(self) -> Dict[str, Any]:
        d = {"code": self.code, "message": self.message}
        if self.data is not ABSENT:
            d["data"] = self.data
        return d

    @classmethod
    def from_dict(cls, data: Any) -> "RpcError":
        d = _expect_object(data, "Error")
        code = d.get("code")
        # bool is an int subclass but never a valid error code
        if isinstance(code, bool) or not isinstance(code, int):
            raise DecodeError(f"Error 'code' must be an integer, got {code!r}")
        message = d.get("message")
        if not isinstance(message, str):
            raise DecodeError(f"Error 'message' must be a string, got {message!r}")
        return cls(code=code, message=message, data=d.get("data", ABSENT))


@dataclass(frozen=True)
class Request:
    """A JSON-RPC request object

    ``params`` is stored as a list whatever sequence it was given as.
    """
    method: str
    params: List[Any] = field(default_factory=list)
    id: Any = None
    jsonrpc: Optional[str] = JSONRPC_VERSION

    def __post_init__(self):
        object.__setattr__(self, "params", list(self.params))
        if self.jsonrpc is not None and self.jsonrpc != JSONRPC_VERSION:
            raise ValueError(f"Request 'jsonrpc' must be {JSONRPC_VERSION!r}, got {self.jsonrpc!r}")

    def to_dict(self) -> Dict[str, Any]:
        d = {"method": self.method, "params": list(self.params), "id": self.id}
        if self.jsonrpc is not None:
            d["jsonrpc"] = self.jsonrpc
        return d

    def to_bytes(self) -> bytes:
        return encode(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "Request":
        d = _expect_object(data, "Request")
        method = d.get("method")
        if not isinstance(method, str):
            raise DecodeError(f"Request 'method' must be a string, got {method!r}")
        params = d.get("params", [])
        if not isinstance(params, list):
            raise DecodeError(f"Request 'params' must be an array, got {type(params).__name__}")
        jsonrpc = _expect_version(d, "Request")
        if jsonrpc is not None and jsonrpc != JSONRPC_VERSION:
            raise DecodeError(f"Request 'jsonrpc' must be {JSONRPC_VERSION!r}, got {jsonrpc!r}")
        return cls(method=method, params=params, id=d.get("id"), jsonrpc=jsonrpc)

    @classmethod
    def from_bytes(cls, data: Union[bytes, str]) -> "Request":
        return cls.from_dict(decode(data))


@dataclass(frozen=True)
class Response:
    """A JSON-RPC response object

    A well-formed reply carries exactly one of ``result`` and ``error``. This is
    not enforced: when both are present, ``error`` takes precedence on
    extraction.
    """
    result: Any = ABSENT
    error: Optional[RpcError] = None
    id: Any = None
    jsonrpc: Optional[str] = JSONRPC_VERSION

    def to_dict(self) -> Dict[str, Any]:
        d = {}
        if self.result is not ABSENT:
            d["result"] = self.result
        if self.error is not None:
            d["error"] = self.error.to_dict()
        d["id"] = self.id
        if self.jsonrpc is not None:
            d["jsonrpc"] = self.jsonrpc
        return d

    def to_bytes(self) -> bytes:
        return encode(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "Response":
        d = _expect_object(data, "Response")
        error = d.get("error")
        return cls(
            result=d.get("result", ABSENT),
            error=RpcError.from_dict(error) if error is not None else None,
            id=d.get("id"),
            jsonrpc=_expect_version(d, "Response"),
        )

    @classmethod
    def from_bytes(cls, data: Union[bytes, str]) -> "Response":
        return cls.from_dict(decode(data))

    def get_result(self, into: Optional[Type[T]] = None) -> Union[T, Any]:
        """Extract the result from the response

        Args:
            into: Type to decode the result into; the raw JSON value is
                returned when None

        Returns:
            The result, decoded into ``into`` when given

        Raises:
            RpcCallError: the response carries an error (even if it also has a result)
            DecodeError: the result does not fit ``into``
            NoErrorOrResultError: the response has neither result nor error
        """
        if self.error is not None:
            raise RpcCallError(self.error)
        if self.result is ABSENT:
            raise NoErrorOrResultError()
        if into is None:
            return self.result
        return decode_as(self.result, into)

    def check_error(self) -> None:
        """Raise the RPC error, if there was one, without looking at the result"""
        if self.error is not None:
            raise RpcCallError(self.error)

    def is_none(self) -> bool:
        """Whether the ``result`` field is absent"""
        return self.result is ABSENT
