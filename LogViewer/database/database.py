import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

DEFAULT_DB_NAME = "logviewer.db"


class Database:

    def __init__(self, path: Union[str, Path] = DEFAULT_DB_NAME):
        path = Path(path)
        if path.parent != Path('.'):
            path.parent.mkdir(parents=True, exist_ok=True)
        self.path = path
        self.__conn = sqlite3.connect(str(path))
        self.__cursor = self.__conn.cursor()

    def __enter__(self):
        """
        Lets you write:     with Database(path) as db:
        and receive a ready-to-use Database instance.
        """
        return self

    def __exit__(self, exc_type, exc, tb):
        """
        Runs automatically when the with-block ends.

        - No error (exc_type is None)  -> commit the outstanding work
        - Error happened               -> roll back so the DB stays clean
        - Always                       -> close the connection
        """
        if exc_type is None:
            self.__conn.commit()
        else:
            self.__conn.rollback()

        self.__conn.close()
        return False

    def close(self):
        self.__conn.commit()
        self.__conn.close()

    def get_cursor(self):
        return self.__cursor if isinstance(self.__cursor, sqlite3.Cursor) else None

    def create_tables(self):
        self.__cursor.execute('''

        CREATE TABLE IF NOT EXISTS recent_files(
            path TEXT PRIMARY KEY,
            opened_at REAL NOT NULL
        )
        ''')

        self.__cursor.execute('''

        CREATE TABLE IF NOT EXISTS settings(
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
        ''')
        self.__conn.commit()

    def write(self, table_name: str, data: Dict[str, Any]):
        """
        Inserts a row into the specified table.
        Args:
            table_name (str): The name of the table.
            data (dict): Column names mapped to the values to insert.
        """
        columns = ', '.join(data.keys())
        placeholders = ', '.join(['?'] * len(data))
        sql = f"INSERT INTO {table_name} ({columns}) VALUES ({placeholders})"
        self.__cursor.execute(sql, list(data.values()))
        self.__conn.commit()

    def upsert(self, table_name: str, data: Dict[str, Any]):
        """
        Inserts a row, replacing any row with the same primary key.
        Args:
            table_name (str): The name of the table.
            data (dict): Column names mapped to the values to store.
        """
        columns = ', '.join(data.keys())
        placeholders = ', '.join(['?'] * len(data))
        sql = f"INSERT OR REPLACE INTO {table_name} ({columns}) VALUES ({placeholders})"
        self.__cursor.execute(sql, list(data.values()))
        self.__conn.commit()

    def read_all(self, table_name: str, order_by: Optional[str] = None) -> List[tuple]:
        """
        Reads all rows from the specified table.
        Args:
            table_name (str): The name of the table.
            order_by (str): Optional ORDER BY clause.
        Returns:
            list: A list of tuples containing the rows.
        """
        # table_name and order_by cannot be parameterized; only pass
        # application-controlled values
        sql = f"SELECT * FROM {table_name}"
        if order_by:
            sql += f" ORDER BY {order_by}"
        self.__cursor.execute(sql)
        return self.__cursor.fetchall()

    def read_one(self, table_name: str, where: str, params: tuple = ()) -> Optional[tuple]:
        sql = f"SELECT * FROM {table_name} WHERE {where}"
        self.__cursor.execute(sql, params)
        return self.__cursor.fetchone()

    def delete(self, table_name: str, where: Optional[str] = None, params: tuple = ()):
        """
        Deletes rows from the specified table.
        Args:
            table_name (str): The name of the table.
            where (str): The WHERE clause, None deletes every row.
            params (tuple): Values for the placeholders in where.
        """
        sql = f"DELETE FROM {table_name}"
        if where:
            sql += f" WHERE {where}"
        self.__cursor.execute(sql, params)
        self.__conn.commit()
