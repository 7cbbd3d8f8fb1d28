"""
Unit tests for StatementBuilder.
"""

import pytest

from simple_query.infrastructure.sql.operations.select import StatementBuilder


@pytest.fixture
def builder():
    builder = StatementBuilder("users", "postgresql")
    builder.set_statement("fields", ["id", "name"])
    return builder


@pytest.fixture
def mssql_builder():
    builder = StatementBuilder("users", "mssql")
    builder.set_statement("fields", ["id", "name"])
    return builder


@pytest.mark.unit
class TestStatements:
    """Tests for the generic fragment accessors."""

    def test_unset_fragment_is_none(self):
        assert StatementBuilder("users").get_statement("where") is None

    @pytest.mark.parametrize("value", [0, [], "", False, None])
    def test_falsy_fragment_is_none(self, value):
        builder = StatementBuilder("users")
        builder.set_statement("limit", value)
        assert builder.get_statement("limit") is None

    def test_set_and_get(self):
        builder = StatementBuilder("users")
        builder.set_statement("where", "id = :id")
        assert builder.get_statement("where") == "id = :id"


@pytest.mark.unit
class TestSelect:
    """Tests for the SELECT clause."""

    def test_plain_select(self, builder):
        assert builder.build_query() == "SELECT id, name FROM users"

    def test_distinct_select(self, builder):
        builder.set_statement("distinct", True)
        assert builder.build_query() == "SELECT DISTINCT id, name FROM users"

    def test_distinct_false(self, builder):
        builder.set_statement("distinct", False)
        assert builder.build_query() == "SELECT id, name FROM users"

    def test_set_table(self, builder):
        builder.set_table("accounts")
        assert builder.build_query() == "SELECT id, name FROM accounts"

    def test_build_is_deterministic(self, builder):
        builder.set_join("left", "orders", "orders.user_id=users.id")
        builder.set_statement("where", "users.id = :id")
        builder.set_order("name", "asc")
        builder.set_limit(5)

        assert builder.build_query() == builder.build_query()


@pytest.mark.unit
class TestJoins:
    """Tests for JOIN handling."""

    def test_joins_keep_call_order(self, builder):
        builder.set_join("left", "orders", "orders.user_id=users.id")
        builder.set_join("inner", "payments", "payments.order_id=orders.id")

        assert builder.build_query() == (
            "SELECT id, name FROM users "
            "LEFT JOIN orders ON orders.user_id=users.id "
            "INNER JOIN payments ON payments.order_id=orders.id"
        )

    def test_join_type_is_case_insensitive(self):
        lower = StatementBuilder("users")
        upper = StatementBuilder("users")
        lower.set_join("left", "orders", "orders.user_id=users.id")
        upper.set_join("LEFT", "orders", "orders.user_id=users.id")

        assert lower.get_statement("join") == upper.get_statement("join")

    def test_duplicate_joins_are_kept(self, builder):
        builder.set_join("right", "orders", "a=b")
        builder.set_join("right", "orders", "a=b")

        assert builder.get_statement("join") == [
            "RIGHT JOIN orders ON a=b",
            "RIGHT JOIN orders ON a=b",
        ]

    def test_invalid_join_type(self, builder):
        with pytest.raises(ValueError) as excinfo:
            builder.set_join("outer", "orders", "a=b")

        message = str(excinfo.value)
        assert "OUTER" in message
        assert "INNER, LEFT, RIGHT" in message
        assert builder.get_statement("join") is None


@pytest.mark.unit
class TestWhere:
    """Tests for WHERE handling."""

    def test_where_clause(self, builder):
        builder.set_statement("where", "id = :id")
        assert builder.build_query() == "SELECT id, name FROM users WHERE id = :id"

    def test_empty_where_omitted(self, builder):
        builder.set_statement("where", "")
        assert builder.build_query() == "SELECT id, name FROM users"


@pytest.mark.unit
class TestOrder:
    """Tests for ORDER BY handling."""

    def test_order_clause(self, builder):
        builder.set_order("name", "desc")
        assert builder.build_query() == "SELECT id, name FROM users ORDER BY name DESC"

    def test_last_order_wins(self, builder):
        builder.set_order("name", "desc")
        builder.set_order("id", "ASC")

        assert builder.get_statement("order") == {"column": "id", "direction": "ASC"}

    def test_invalid_direction(self, builder):
        with pytest.raises(ValueError) as excinfo:
            builder.set_order("x", "up")

        assert "UP" in str(excinfo.value)
        assert "ASC, DESC" in str(excinfo.value)


@pytest.mark.unit
class TestGenericPagination:
    """Tests for LIMIT/OFFSET pagination through the builder."""

    def test_limit_only(self, builder):
        builder.set_limit(10)

        query = builder.build_query()
        assert query == "SELECT id, name FROM users LIMIT 10"
        assert "OFFSET" not in query

    def test_limit_and_offset(self, builder):
        builder.set_limit(10)
        builder.set_offset(20)

        assert builder.build_query() == "SELECT id, name FROM users LIMIT 10 OFFSET 20"

    def test_zero_limit_disables_pagination(self, builder):
        builder.set_limit(0)
        builder.set_offset(20)

        assert builder.build_query() == "SELECT id, name FROM users"

    def test_offset_without_limit_ignored(self, builder):
        builder.set_offset(20)
        assert builder.build_query() == "SELECT id, name FROM users"

    def test_no_driver_uses_generic_dialect(self):
        builder = StatementBuilder("users")
        builder.set_statement("fields", ["*"])
        builder.set_limit(3)

        assert builder.build_query() == "SELECT * FROM users LIMIT 3"


@pytest.mark.unit
class TestOffsetFetchPagination:
    """Tests for OFFSET/FETCH pagination through the builder."""

    def test_default_order_injected(self, mssql_builder):
        mssql_builder.set_limit(10)

        assert mssql_builder.build_query() == (
            "SELECT id, name FROM users "
            "ORDER BY 1 OFFSET 0 ROWS FETCH NEXT 10 ROWS ONLY"
        )

    def test_explicit_order_replaces_default(self, mssql_builder):
        mssql_builder.set_order("name", "asc")
        mssql_builder.set_limit(10)
        mssql_builder.set_offset(30)

        assert mssql_builder.build_query() == (
            "SELECT id, name FROM users ORDER BY name ASC "
            "OFFSET 30 ROWS FETCH NEXT 10 ROWS ONLY"
        )

    def test_zero_limit_disables_pagination(self, mssql_builder):
        mssql_builder.set_limit(0)
        assert mssql_builder.build_query() == "SELECT id, name FROM users"

    def test_set_driver_switches_dialect(self, builder):
        builder.set_limit(10)
        builder.set_driver("mssql")

        assert builder.build_query().endswith("OFFSET 0 ROWS FETCH NEXT 10 ROWS ONLY")


@pytest.mark.unit
class TestFullQuery:
    """Tests for segment ordering."""

    def test_all_segments(self, builder):
        builder.set_statement("distinct", True)
        builder.set_join("inner", "orders", "orders.user_id=users.id")
        builder.set_statement("where", "orders.total > :total")
        builder.set_order("name", "asc")
        builder.set_limit(10)
        builder.set_offset(5)

        assert builder.build_query() == (
            "SELECT DISTINCT id, name FROM users "
            "INNER JOIN orders ON orders.user_id=users.id "
            "WHERE orders.total > :total "
            "ORDER BY name ASC "
            "LIMIT 10 OFFSET 5"
        )


@pytest.mark.unit
class TestParametersAndReset:
    """Tests for parameters, statements and reset."""

    def test_set_parameter_normalizes(self, builder):
        builder.set_parameter({"id": 1})
        builder.set_parameter({":id": 2})

        assert builder.get_parameters() == {":id": 2}

    def test_build_statement_snapshot(self, builder):
        builder.set_statement("where", "id = :id")
        builder.set_parameter({"id": 1})

        statement = builder.build_statement()
        builder.set_parameter({"id": 2})
        builder.set_statement("where", "name = :name")

        assert statement.sql == "SELECT id, name FROM users WHERE id = :id"
        assert dict(statement.parameters) == {":id": 1}

    def test_reset_clears_fragments_and_parameters(self, builder):
        builder.set_statement("where", "id = :id")
        builder.set_parameter({"id": 1})
        builder.set_limit(10)

        builder.reset()

        assert builder.get_statement("fields") is None
        assert builder.get_statement("where") is None
        assert builder.get_parameters() == {}
        assert builder.build_query() == "SELECT  FROM users"

    def test_reset_keeps_table_and_driver(self, mssql_builder):
        mssql_builder.reset()

        assert mssql_builder.table == "users"
        assert mssql_builder.driver == "mssql"

    def test_fragments_persist_between_builds(self, builder):
        builder.set_statement("where", "id = :id")
        builder.build_query()

        assert builder.get_statement("where") == "id = :id"
