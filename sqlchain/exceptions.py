from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from sqlchain.builder._state import StatementKind

__all__ = (
    "ExtraParameterError",
    "ImproperConfigurationError",
    "IncompatibleOperationError",
    "MalformedQueryError",
    "MissingParameterError",
    "ParameterError",
    "SQLBuilderError",
    "SQLChainError",
    "SerializationError",
    "UnsupportedParameterTypeError",
)


class SQLChainError(Exception):
    """Base exception class from which all sqlchain exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLChainError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLChainError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class MalformedQueryError(SQLBuilderError):
    """The accumulated builder state cannot be rendered into a complete statement."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Builder state does not describe a complete SQL statement."
        super().__init__(message)


class IncompatibleOperationError(MalformedQueryError):
    """A modifier was used with a statement kind that does not accept it."""

    operation: str
    statement_kind: "StatementKind"

    def __init__(self, operation: str, statement_kind: "StatementKind") -> None:
        self.operation = operation
        self.statement_kind = statement_kind
        super().__init__(f"Operation '{operation}' is not valid for {statement_kind.name} statements.")


# -- SQL Parameter Errors --
class ParameterError(SQLChainError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(ParameterError):
    """Raised when a clause has more placeholders than arguments."""


class ExtraParameterError(ParameterError):
    """Raised when a clause has more arguments than placeholders."""


class UnsupportedParameterTypeError(ParameterError):
    """Raised when a parameter value falls outside the supported value kinds."""

    value: Any

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unsupported parameter type: {type(value).__name__}")


class ImproperConfigurationError(SQLChainError):
    """Improper Configuration error.

    Raised when a :class:`~sqlchain.config.BuilderConfig` is constructed with invalid values.
    """


class SerializationError(SQLChainError):
    """Encoding or decoding of an object failed."""
