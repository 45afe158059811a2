"""SQLite persistence layer."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from deskbot.models import ChatTurn, OrderRecord, PayrollRecord
from deskbot.store import ChatStore

SCHEMA_VERSION = 1


class Database(ChatStore):
    """Small SQLite wrapper with explicit schema management."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self._path)
        conn.row_factory = sqlite3.Row
        # SQLite LOWER() and LIKE only fold ASCII.
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def initialize(self) -> None:
        """Create or migrate schema."""

        with self._connect() as conn:
            conn.execute("CREATE TABLE IF NOT EXISTS schema_version (version INTEGER NOT NULL)")
            row = conn.execute("SELECT version FROM schema_version LIMIT 1").fetchone()
            if row is None:
                self._create_schema(conn)
                conn.execute("INSERT INTO schema_version (version) VALUES (?)", (SCHEMA_VERSION,))
            elif row["version"] != SCHEMA_VERSION:
                raise RuntimeError(
                    f"Unsupported schema version {row['version']} (expected {SCHEMA_VERSION})"
                )

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS payroll (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                agent_id INTEGER NOT NULL,
                amount REAL NOT NULL,
                period_start TEXT NOT NULL,
                period_end TEXT NOT NULL,
                payment_date TEXT NOT NULL,
                created_at TEXT NOT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_payroll_agent_period
                ON payroll(agent_id, period_start, period_end);

            CREATE TABLE IF NOT EXISTS orders (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                customer_name TEXT NOT NULL,
                project_name TEXT NOT NULL,
                order_date TEXT NOT NULL,
                total_amount REAL NOT NULL,
                status TEXT NOT NULL,
                description TEXT,
                created_at TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS chat_history (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                agent_id INTEGER NOT NULL,
                message TEXT NOT NULL,
                response TEXT NOT NULL,
                timestamp TEXT NOT NULL
            );
            """
        )

    def add_payroll(self, record: PayrollRecord) -> int:
        with self._connect() as conn:
            cur = conn.execute(
                """
                INSERT INTO payroll(agent_id, amount, period_start, period_end, payment_date, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    record.agent_id,
                    record.amount,
                    record.period_start,
                    record.period_end,
                    record.payment_date,
                    _utc_now_iso(),
                ),
            )
            return int(cur.lastrowid)

    def add_order(self, record: OrderRecord) -> int:
        with self._connect() as conn:
            cur = conn.execute(
                """
                INSERT INTO orders(customer_name, project_name, order_date, total_amount, status, description, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.customer_name,
                    record.project_name,
                    record.order_date,
                    record.amount,
                    record.status,
                    record.description,
                    _utc_now_iso(),
                ),
            )
            return int(cur.lastrowid)

    def count_rows(self, table: str) -> int:
        if table not in {"payroll", "orders", "chat_history"}:
            raise ValueError(f"Unknown table: {table}")
        with self._connect() as conn:
            row = conn.execute(f"SELECT COUNT(*) AS total FROM {table}").fetchone()
        return int(row["total"])

    def sum_payroll_in_range(self, agent_id: int, start: str, end: str) -> float:
        with self._connect() as conn:
            row = conn.execute(
                """
                SELECT SUM(amount) AS total
                FROM payroll
                WHERE agent_id = ? AND period_start >= ? AND period_end <= ?
                """,
                (agent_id, start, end),
            ).fetchone()
        return float(row["total"] or 0)

    def find_orders_by_name(self, customer_name: str, limit: int) -> list[OrderRecord]:
        pattern = f"%{_escape_like(customer_name.casefold())}%"
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT customer_name, project_name, order_date, total_amount, status, description
                FROM orders
                WHERE casefold(customer_name) LIKE ? ESCAPE '\\'
                ORDER BY order_date DESC, id DESC
                LIMIT ?
                """,
                (pattern, limit),
            ).fetchall()
        return [_order_from_row(row) for row in rows]

    def append_chat_turn(self, agent_id: int, message: str, response: str) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO chat_history(agent_id, message, response, timestamp) VALUES (?, ?, ?, ?)",
                (agent_id, message, response, _utc_now_iso()),
            )

    def get_chat_history(self, agent_id: int, limit: int = 50) -> list[ChatTurn]:
        """Return the agent's most recent turns, oldest first."""

        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT agent_id, message, response, timestamp
                FROM chat_history
                WHERE agent_id = ?
                ORDER BY id DESC
                LIMIT ?
                """,
                (agent_id, limit),
            ).fetchall()
        return [ChatTurn(**dict(row)) for row in reversed(rows)]


def _order_from_row(row: sqlite3.Row) -> OrderRecord:
    data: dict[str, Any] = dict(row)
    return OrderRecord(
        customer_name=data["customer_name"],
        project_name=data["project_name"],
        order_date=data["order_date"],
        amount=float(data["total_amount"]),
        status=data["status"],
        description=data["description"],
    )


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
