import logging
from typing import Any, Callable, Dict, Optional

from .errors import ArgumentError

logger = logging.getLogger(__name__)

_MISSING = object()


class MethodCall:
    """
    A single invocation arriving on a channel: a method name plus a
    loosely-typed argument bag.
    """

    def __init__(self, method: str, arguments: Optional[Dict[str, Any]] = None):
        self.method = method
        self.arguments = arguments if arguments is not None else {}

    def argument(self, name: str, expected_type: Any = _MISSING) -> Any:
        """
        Return the named argument.
        Raises ArgumentError if it is absent or not of the expected type.
        """
        if not isinstance(self.arguments, dict):
            raise ArgumentError(name, "arguments must be a key/value object")
        if name not in self.arguments or self.arguments[name] is None:
            raise ArgumentError(name, "missing")

        value = self.arguments[name]
        if expected_type is not _MISSING and not isinstance(value, expected_type):
            raise ArgumentError(name, f"expected {_type_label(expected_type)}, got {type(value).__name__}")
        return value

    def __repr__(self):
        return f"MethodCall({self.method!r})"


def _type_label(expected_type: Any) -> str:
    if isinstance(expected_type, tuple):
        return " or ".join(t.__name__ for t in expected_type)
    return expected_type.__name__


class MethodResult:
    """Outcome of a method call: success, error or not implemented."""
    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "not_implemented"

    def __init__(self, status: str, value: Any = None, code: Optional[str] = None, message: Optional[str] = None):
        self.status = status
        self.value = value
        self.code = code
        self.message = message

    @classmethod
    def success(cls, value: Any) -> "MethodResult":
        return cls(cls.SUCCESS, value=value)

    @classmethod
    def error(cls, code: str, message: str) -> "MethodResult":
        return cls(cls.ERROR, code=code, message=message)

    @classmethod
    def not_implemented(cls) -> "MethodResult":
        return cls(cls.NOT_IMPLEMENTED)

    @property
    def ok(self) -> bool:
        return self.status == self.SUCCESS

    def __repr__(self):
        if self.ok:
            return f"MethodResult(success, {self.value!r})"
        if self.status == self.ERROR:
            return f"MethodResult(error, {self.code}: {self.message})"
        return "MethodResult(not_implemented)"


MethodCallHandler = Callable[[MethodCall], MethodResult]


class MethodChannel:
    """
    Named endpoint between the host and a plugin.
    At most one handler is bound at a time; with none bound every call
    is answered with 'not implemented'.
    """

    def __init__(self, name: str):
        self.name = name
        self._handler: Optional[MethodCallHandler] = None

    @property
    def has_handler(self) -> bool:
        return self._handler is not None

    def set_method_call_handler(self, handler: Optional[MethodCallHandler]) -> None:
        if handler is None:
            logger.debug(f"Channel '{self.name}': handler unbound")
        else:
            logger.debug(f"Channel '{self.name}': handler bound")
        self._handler = handler

    def invoke(self, method: str, arguments: Optional[Dict[str, Any]] = None) -> MethodResult:
        call = MethodCall(method, arguments)
        if self._handler is None:
            logger.warning(f"Channel '{self.name}': no handler for {call}")
            return MethodResult.not_implemented()

        try:
            result = self._handler(call)
        except ArgumentError as e:
            logger.warning(f"Channel '{self.name}': bad argument for {call}: {e}")
            return MethodResult.error("bad_argument", str(e))

        if result.status == MethodResult.NOT_IMPLEMENTED:
            logger.info(f"Channel '{self.name}': method '{method}' not implemented")
        return result
