"""Unit tests for UPDATE rendering."""

import datetime

from sqlchain import QueryBuilder


def test_update_numbers_set_then_where(builder: QueryBuilder) -> None:
    """Test one counter runs through SET assignments and on into WHERE."""
    sql, parameters = builder.update("t").set("a = ?", 1).set("b = ?", 2).where("id = ?", 3).build()

    assert sql == "UPDATE t SET a = $1, b = $2 WHERE id = $3"
    assert parameters == [1, 2, 3]


def test_update_where_added_before_set(builder: QueryBuilder) -> None:
    """Test SET is numbered first even when where() was called earlier."""
    sql, parameters = builder.update("users").where("id = ?", 9).set("name = ?", "Jane").build()

    assert sql == "UPDATE users SET name = $1 WHERE id = $2"
    assert parameters == ["Jane", 9]


def test_update_with_multiple_where(builder: QueryBuilder) -> None:
    cutoff = datetime.datetime(2023, 6, 1)
    sql, parameters = (
        builder.update("users")
        .set("status = ?", "inactive")
        .where("age < ?", 18)
        .where("last_login < ?", cutoff)
        .build()
    )

    assert sql == "UPDATE users SET status = $1 WHERE age < $2 AND last_login < $3"
    assert parameters == ["inactive", 18, cutoff]


def test_update_without_where(builder: QueryBuilder) -> None:
    sql, parameters = builder.update("users").set("status = ?", "active").build()

    assert sql == "UPDATE users SET status = $1"
    assert parameters == ["active"]


def test_update_with_returning(builder: QueryBuilder) -> None:
    sql, parameters = (
        builder.update("products")
        .set("price = ?", 899.99)
        .set("stock = stock - ?", 1)
        .where("id = ?", 123)
        .returning("id", "price")
        .build()
    )

    assert sql == "UPDATE products SET price = $1, stock = stock - $2 WHERE id = $3 RETURNING id, price"
    assert parameters == [899.99, 1, 123]


def test_update_multiple_markers_per_clause(builder: QueryBuilder) -> None:
    sql, parameters = (
        builder.update("t").set("a = ?, b = ?", 1, 2).set("c = ?", 3).where("d BETWEEN ? AND ?", 4, 5).build()
    )

    assert sql == "UPDATE t SET a = $1, b = $2, c = $3 WHERE d BETWEEN $4 AND $5"
    assert parameters == [1, 2, 3, 4, 5]


def test_update_set_from_dict(builder: QueryBuilder) -> None:
    sql, parameters = builder.update("users").set_from_dict({"name": "Ada", "age": 36}).where_eq("id", 1).build()

    assert sql == "UPDATE users SET name = $1, age = $2 WHERE id = $3"
    assert parameters == ["Ada", 36, 1]


def test_update_from_field_mask(builder: QueryBuilder) -> None:
    """Test assignments chosen at runtime keep SET numbering ahead of WHERE."""
    updated_at = datetime.datetime(2024, 2, 2, 8, 30)
    fields = {"name": "Lamp", "tags": ["home"], "available": False}
    query = builder.update("products").where("id = ?", "p-7").returning("id")
    for path in ("name", "tags", "available"):
        query = query.set(f"{path} = ?", fields[path])
    query = query.set("updated_at = ?", updated_at)

    sql, parameters = query.build()

    assert sql == (
        "UPDATE products SET name = $1, tags = $2, available = $3, updated_at = $4 WHERE id = $5 RETURNING id"
    )
    assert parameters == ["Lamp", ["home"], False, updated_at, "p-7"]


def test_update_ignores_limit_and_columns(builder: QueryBuilder) -> None:
    query = builder.update("t").set("a = ?", 1).limit(10).columns("x").build()

    assert query.sql == "UPDATE t SET a = $1"
