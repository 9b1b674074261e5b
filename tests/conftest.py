import pytest

from sqlchain import BuilderConfig, QueryBuilder


@pytest.fixture
def builder() -> QueryBuilder:
    return QueryBuilder()


@pytest.fixture
def strict_builder() -> QueryBuilder:
    return QueryBuilder(config=BuilderConfig(strict=True))
