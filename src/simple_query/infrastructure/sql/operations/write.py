"""
SQL INSERT, UPDATE and DELETE statement builders.

Every column is bound through a named placeholder of the same name, so the
record attribute mapping can be passed to the driver as the parameter set.
"""

from typing import List, Sequence


def build_placeholders(columns: Sequence[str]) -> List[str]:
    """
    Build colon-prefixed placeholders for columns.

    Examples:
        >>> build_placeholders(["name", "email"])
        [':name', ':email']
    """
    return [f":{col}" for col in columns]


def build_insert(table: str, columns: Sequence[str]) -> str:
    """
    Build a single-row INSERT statement.

    Args:
        table: Target table name
        columns: Column names in bind order

    Returns:
        INSERT SQL statement

    Example:
        >>> build_insert("users", ["name", "email"])
        'INSERT INTO users (name, email) VALUES (:name, :email)'
    """
    if not table:
        raise ValueError("Table name is required")

    col_list = ", ".join(columns)
    values = ", ".join(build_placeholders(columns))
    return f"INSERT INTO {table} ({col_list}) VALUES ({values})"


def build_update(table: str, columns: Sequence[str], primary_key: str) -> str:
    """
    Build a single-row UPDATE statement keyed on the primary key.

    Example:
        >>> build_update("users", ["name", "email"], "id")
        'UPDATE users SET name=:name, email=:email WHERE id=:id'
    """
    if not table:
        raise ValueError("Table name is required")
    if not primary_key:
        raise ValueError("Primary key is required")

    set_clause = ", ".join(f"{col}=:{col}" for col in columns)
    return f"UPDATE {table} SET {set_clause} WHERE {primary_key}=:{primary_key}"


def build_delete(table: str, primary_key: str) -> str:
    """
    Build a DELETE statement for one primary key, bound as ``:id``.

    Example:
        >>> build_delete("users", "user_id")
        'DELETE FROM users WHERE user_id=:id'
    """
    if not table:
        raise ValueError("Table name is required")
    if not primary_key:
        raise ValueError("Primary key is required")

    return f"DELETE FROM {table} WHERE {primary_key}=:id"
