"""Factory object for starting query builders.

This module provides the `sql` factory object for easy SQL construction::

    from sqlchain import sql

    query, parameters = sql.select("id", "name").from_("users").where("age > ?", 18).build()
"""

from typing import Optional

from sqlchain.builder import QueryBuilder
from sqlchain.config import BuilderConfig

__all__ = ("SQLFactory", "sql")


class SQLFactory:
    """Creates builders that share one :class:`BuilderConfig`.

    Example:
        ```python
        from sqlchain import BuilderConfig, ParameterStyle, SQLFactory

        oracle = SQLFactory(BuilderConfig(parameter_style=ParameterStyle.POSITIONAL_COLON))
        oracle.delete("sessions").where("expires_at < ?", now).build()
        # DELETE FROM sessions WHERE expires_at < :1
        ```
    """

    def __init__(self, config: Optional[BuilderConfig] = None) -> None:
        """Initialize the SQL factory.

        Args:
            config: Configuration applied to every builder this factory creates.
        """
        self.config = config or BuilderConfig()

    def builder(self) -> QueryBuilder:
        """An empty builder with this factory's configuration."""
        return QueryBuilder(config=self.config)

    def select(self, *columns: str) -> QueryBuilder:
        """Create a SELECT builder.

        Args:
            *columns: Columns to select. None selects ``*``.

        Returns:
            QueryBuilder: A new builder.
        """
        return self.builder().select(*columns)

    def insert(self, table: str) -> QueryBuilder:
        """Create an INSERT builder for ``table``."""
        return self.builder().insert(table)

    def update(self, table: str) -> QueryBuilder:
        """Create an UPDATE builder for ``table``."""
        return self.builder().update(table)

    def delete(self, table: Optional[str] = None) -> QueryBuilder:
        """Create a DELETE builder.

        Args:
            table: Optional table to delete from, equivalent to calling ``from_(table)``.

        Returns:
            QueryBuilder: A new builder.
        """
        builder = self.builder().delete()
        if table:
            return builder.from_(table)
        return builder


sql = SQLFactory()
