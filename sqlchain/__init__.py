"""sqlchain: fluent SQL query building with positional parameters."""

from sqlchain import builder, exceptions, parameters, typing, utils
from sqlchain.__metadata__ import __version__
from sqlchain._sql import SQLFactory, sql
from sqlchain.builder import Clause, QueryBuilder, SafeQuery, StatementKind
from sqlchain.config import BuilderConfig
from sqlchain.exceptions import (
    ExtraParameterError,
    IncompatibleOperationError,
    MalformedQueryError,
    MissingParameterError,
    ParameterError,
    SQLBuilderError,
    SQLChainError,
    UnsupportedParameterTypeError,
)
from sqlchain.parameters import ParameterStyle
from sqlchain.typing import ParameterKind, TypedParameter

__all__ = (
    "BuilderConfig",
    "Clause",
    "ExtraParameterError",
    "IncompatibleOperationError",
    "MalformedQueryError",
    "MissingParameterError",
    "ParameterError",
    "ParameterKind",
    "ParameterStyle",
    "QueryBuilder",
    "SQLBuilderError",
    "SQLChainError",
    "SQLFactory",
    "SafeQuery",
    "StatementKind",
    "TypedParameter",
    "UnsupportedParameterTypeError",
    "__version__",
    "builder",
    "exceptions",
    "parameters",
    "sql",
    "typing",
    "utils",
)
