"""
Unit tests for the SQLAlchemy driver adapter against in-memory SQLite.
"""

import pytest
import sqlalchemy as sa

from simple_query.infrastructure.sql.core.parameters import BindType
from simple_query.io.connectors.driver import Driver, PreparedStatement
from simple_query.io.connectors.exceptions import DriverError, PreparationError
from simple_query.io.connectors.sqlalchemy_driver import SQLAlchemyDriver


@pytest.fixture
def connection():
    engine = sa.create_engine("sqlite://")
    with engine.connect() as conn:
        conn.execute(
            sa.text("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, active BOOLEAN)")
        )
        conn.execute(
            sa.text("INSERT INTO users (id, name, active) VALUES (1, 'Ada', 1), (2, 'Grace', 0)")
        )
        conn.commit()
        yield conn
    engine.dispose()


@pytest.fixture
def driver(connection):
    return SQLAlchemyDriver(connection)


def count_users(connection):
    value = connection.execute(sa.text("SELECT COUNT(*) FROM users")).scalar()
    connection.commit()
    return value


@pytest.mark.unit
class TestProtocol:
    """Tests for protocol conformance."""

    def test_driver_conforms(self, driver):
        assert isinstance(driver, Driver)

    def test_statement_conforms(self, driver):
        assert isinstance(driver.prepare("SELECT 1"), PreparedStatement)

    def test_name_is_dialect_name(self, driver):
        assert driver.name == "sqlite"


@pytest.mark.unit
class TestPrepareAndExecute:
    """Tests for prepare, bind and execute."""

    def test_select_rows(self, driver):
        stmt = driver.prepare("SELECT id, name FROM users ORDER BY id")

        assert stmt.execute() is True
        assert stmt.row_count() == 2
        assert stmt.fetch_all() == [{"id": 1, "name": "Ada"}, {"id": 2, "name": "Grace"}]
        assert stmt.fetch_one() == {"id": 1, "name": "Ada"}

    def test_bind_parameter(self, driver):
        stmt = driver.prepare("SELECT name FROM users WHERE id = :id")
        stmt.bind(":id", 2, BindType.INTEGER)
        stmt.execute()

        assert stmt.fetch_one() == {"name": "Grace"}

    def test_bind_without_colon(self, driver):
        stmt = driver.prepare("SELECT name FROM users WHERE name = :name")
        stmt.bind("name", "Ada", BindType.STRING)
        stmt.execute()

        assert stmt.row_count() == 1

    def test_bind_boolean_and_null(self, driver, connection):
        stmt = driver.prepare("INSERT INTO users (id, name, active) VALUES (:id, :name, :active)")
        stmt.bind(":id", 3, BindType.INTEGER)
        stmt.bind(":name", None, BindType.NULL)
        stmt.bind(":active", True, BindType.BOOLEAN)

        assert stmt.execute() is True
        assert stmt.row_count() == 1
        row = connection.execute(sa.text("SELECT name, active FROM users WHERE id = 3")).one()
        assert row.name is None
        assert row.active == 1

    def test_no_rows(self, driver):
        stmt = driver.prepare("SELECT id FROM users WHERE id = 99")
        stmt.execute()

        assert stmt.row_count() == 0
        assert stmt.fetch_all() == []
        assert stmt.fetch_one() is None

    def test_empty_sql_raises(self, driver):
        with pytest.raises(PreparationError) as excinfo:
            driver.prepare("  ")
        assert "Error preparing SQL statement" in str(excinfo.value)

    def test_unknown_parameter_raises(self, driver):
        stmt = driver.prepare("SELECT 1")
        with pytest.raises(PreparationError):
            stmt.bind(":missing", 1, BindType.INTEGER)

    def test_execution_error_is_driver_error(self, driver, connection):
        stmt = driver.prepare("SELECT * FROM missing_table")

        with pytest.raises(DriverError) as excinfo:
            stmt.execute()

        assert isinstance(excinfo.value.__cause__, sa.exc.SQLAlchemyError)
        assert connection.in_transaction() is False

    def test_error_message_omits_bound_values(self, driver):
        stmt = driver.prepare("INSERT INTO users (id, name) VALUES (:id, :name)")
        stmt.bind(":id", 1, BindType.INTEGER)
        stmt.bind(":name", "hunter2-secret", BindType.STRING)

        with pytest.raises(DriverError) as excinfo:
            stmt.execute()

        message = str(excinfo.value)
        assert message.startswith("IntegrityError: UNIQUE constraint failed")
        assert "hunter2-secret" not in message
        assert "INSERT INTO" not in message


@pytest.mark.unit
class TestTransactions:
    """Tests for explicit and implicit transactions."""

    def test_autocommit_outside_transaction(self, driver, connection):
        driver.prepare("DELETE FROM users WHERE id = 2").execute()

        assert connection.in_transaction() is False
        assert count_users(connection) == 1

    def test_commit(self, driver, connection):
        driver.begin_transaction()
        assert driver.in_transaction is True

        driver.prepare("DELETE FROM users WHERE id = 1").execute()
        driver.commit()

        assert driver.in_transaction is False
        assert count_users(connection) == 1

    def test_roll_back(self, driver, connection):
        driver.begin_transaction()
        driver.prepare("DELETE FROM users").execute()
        driver.roll_back()

        assert count_users(connection) == 2

    def test_roll_back_without_transaction_is_noop(self, driver):
        driver.roll_back()
        assert driver.in_transaction is False

    def test_commit_without_transaction_raises(self, driver):
        with pytest.raises(DriverError):
            driver.commit()

    def test_nested_begin_raises(self, driver):
        driver.begin_transaction()
        with pytest.raises(DriverError):
            driver.begin_transaction()
        driver.roll_back()
