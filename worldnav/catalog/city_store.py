# worldnav/catalog/city_store.py
"""
SQLite-backed record store for the city table.

Rows are handed out as plain dictionaries; parsing into City objects is the
catalog's job so malformed rows can be skipped there.
"""
import logging
import sqlite3
from contextlib import contextmanager
from typing import List, Dict, Any, Iterable, Iterator

from ..exceptions import StorageError

class SQLiteCityStore:
    """Reads and seeds the `cities` table of the game database."""

    CREATE_TABLE = """
        CREATE TABLE IF NOT EXISTS cities(
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            city TEXT NOT NULL,
            country TEXT NOT NULL,
            continent TEXT NOT NULL,
            gps_location TEXT NOT NULL,
            is_primary INTEGER DEFAULT 0
        );
    """
    COLUMNS = ("city", "country", "continent", "gps_location", "is_primary")

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._create_table_if_needed()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Connection that commits on success and is always closed."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _create_table_if_needed(self):
        try:
            with self._connect() as conn:
                conn.execute(self.CREATE_TABLE)
        except sqlite3.Error as e:
            raise StorageError(f"Could not create cities table: {e}", store=self.db_path) from e

    def count(self) -> int:
        try:
            with self._connect() as conn:
                return conn.execute("SELECT COUNT(*) FROM cities").fetchone()[0]
        except sqlite3.Error as e:
            raise StorageError(f"Could not count cities: {e}", store=self.db_path) from e

    def select_all(self) -> List[Dict[str, Any]]:
        query = f"SELECT {', '.join(self.COLUMNS)} FROM cities ORDER BY id"
        try:
            with self._connect() as conn:
                return [dict(row) for row in conn.execute(query)]
        except sqlite3.Error as e:
            raise StorageError(f"Could not read cities: {e}", store=self.db_path) from e

    def insert_if_empty(self, rows: Iterable[Dict[str, Any]]) -> int:
        """Seeds the table only when it holds no cities. Returns rows inserted."""
        if self.count() > 0:
            return 0

        values = [
            (row["city"], row["country"], row["continent"], row["gps_location"], 1 if row.get("is_primary") else 0)
            for row in rows
        ]
        try:
            with self._connect() as conn:
                conn.executemany(
                    "INSERT INTO cities (city, country, continent, gps_location, is_primary) VALUES (?, ?, ?, ?, ?)",
                    values
                )
        except sqlite3.Error as e:
            raise StorageError(f"Could not seed cities: {e}", store=self.db_path) from e

        logging.info(f"Seeded {len(values)} cities into {self.db_path}")
        return len(values)
