# database.py
import sqlite3
from typing import Optional

from config import get_settings


def _resolve(db_file: Optional[str]) -> str:
    return db_file or get_settings().db_file


def create_database(db_file: Optional[str] = None):
    conn = sqlite3.connect(_resolve(db_file))
    cursor = conn.cursor()
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            price REAL NOT NULL DEFAULT 0,
            stock INTEGER NOT NULL DEFAULT 0,
            color TEXT
        )
    """)
    conn.commit()
    conn.close()


def get_db_connection(db_file: Optional[str] = None):
    conn = sqlite3.connect(_resolve(db_file))
    conn.row_factory = sqlite3.Row
    return conn
