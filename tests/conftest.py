"""
Pytest configuration and shared fixtures
"""

import json
import sqlite3
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def project_root_path():
    """Path to project root"""
    return project_root


@pytest.fixture
def sqlite_connection():
    """In-memory SQLite database with users and products"""
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL, email TEXT NOT NULL)")
    conn.executemany(
        "INSERT INTO users (name, email) VALUES (?, ?)",
        [
            ("John Doe", "john@example.com"),
            ("Jane Smith", "jane@example.com"),
            ("Bob Johnson", "bob@gmail.com"),
            ("Alice Brown", "alice@example.com"),
        ],
    )

    conn.execute("CREATE TABLE products (id INTEGER PRIMARY KEY, name TEXT NOT NULL, tags TEXT, categories TEXT)")
    conn.executemany(
        "INSERT INTO products (name, tags, categories) VALUES (?, ?, ?)",
        [
            ("Laptop", json.dumps(["electronics", "gadgets"]), json.dumps([1, 2])),
            ("T-Shirt", json.dumps(["clothing"]), json.dumps([3])),
            ("Mystery Box", None, None),
        ],
    )
    conn.commit()

    yield conn
    conn.close()


# Configure pytest
def pytest_configure(config):
    """Pytest configuration"""
    config.addinivalue_line(
        "markers", "integration: marks tests that execute SQL against a database"
    )
