"""
Database Manager for ChainCalc
Handles SQLite storage for the calculation history
"""
import logging
import sqlite3
import threading

import config
from errors import StoreError

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, db_path=config.DB_PATH):
        self.db_path = db_path
        self._write_lock = threading.Lock()
        self.init_database()

    def get_connection(self):
        """Create and return a database connection"""
        try:
            return sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open history database {self.db_path}: {e}") from e

    def init_database(self):
        """Initialize database tables"""
        conn = self.get_connection()
        try:
            cursor = conn.cursor()

            # Calculations history table
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS calculations (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    expression TEXT NOT NULL,
                    result TEXT NOT NULL,
                    timestamp TEXT NOT NULL
                )
            ''')

            conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Cannot initialize history database: {e}") from e
        finally:
            conn.close()

    def add_calculation(self, expression, result, timestamp):
        """Append a calculation row; committed before returning"""
        with self._write_lock:
            conn = self.get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute('''
                    INSERT INTO calculations (expression, result, timestamp)
                    VALUES (?, ?, ?)
                ''', (expression, result, timestamp))
                conn.commit()
                calc_id = cursor.lastrowid
            except sqlite3.Error as e:
                conn.rollback()
                raise StoreError(f"Failed to save calculation: {e}") from e
            finally:
                conn.close()
        logger.debug("Saved calculation %s", calc_id)
        return calc_id

    def get_calculations(self, limit=None):
        """Retrieve calculation rows in the order they were added

        With `limit`, only the most recent `limit` rows are returned, still
        oldest first.
        """
        conn = self.get_connection()
        try:
            cursor = conn.cursor()
            if limit is None:
                cursor.execute('''
                    SELECT expression, result, timestamp FROM calculations
                    ORDER BY id ASC
                ''')
            else:
                cursor.execute('''
                    SELECT expression, result, timestamp FROM (
                        SELECT id, expression, result, timestamp FROM calculations
                        ORDER BY id DESC LIMIT ?
                    ) ORDER BY id ASC
                ''', (limit,))
            return cursor.fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to read calculation history: {e}") from e
        finally:
            conn.close()

    def count_calculations(self):
        """Number of stored calculations"""
        conn = self.get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute('SELECT COUNT(*) FROM calculations')
            return cursor.fetchone()[0]
        except sqlite3.Error as e:
            raise StoreError(f"Failed to read calculation history: {e}") from e
        finally:
            conn.close()
