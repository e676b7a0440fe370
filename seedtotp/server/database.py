import sqlite3
from contextlib import closing
from datetime import datetime

class SecretDatabase:
    def __init__(self, db_path):  # Explicitly accepts db_path
        self.db_path = db_path
        self.create_tables()

    def get_connection(self):
        # A fresh connection per operation keeps the store usable from any thread
        return closing(sqlite3.connect(self.db_path))

    def create_tables(self):
        with self.get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS secrets (
                    name TEXT PRIMARY KEY,
                    secret TEXT NOT NULL,
                    created_at TIMESTAMP
                )
            """)
            conn.commit()

    def put_secret(self, name, secret):
        with self.get_connection() as conn:
            conn.execute("INSERT OR REPLACE INTO secrets (name, secret, created_at) VALUES (?, ?, ?)",
                         (name, secret, datetime.now().isoformat()))
            conn.commit()

    def get_secret(self, name):
        with self.get_connection() as conn:
            cursor = conn.execute("SELECT secret FROM secrets WHERE name = ?", (name,))
            result = cursor.fetchone()
        return result[0] if result else None

    def delete_secret(self, name):
        with self.get_connection() as conn:
            cursor = conn.execute("DELETE FROM secrets WHERE name = ?", (name,))
            conn.commit()
        return cursor.rowcount > 0

    def list_names(self):
        with self.get_connection() as conn:
            rows = conn.execute("SELECT name FROM secrets ORDER BY name").fetchall()
        return [row[0] for row in rows]
