from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

import mysql.connector

from ..core.enums import PresenceStatus
from ..core.exceptions import DuplicateEntry
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key, normalize_mysql_date
from .model import PresenceEntry, PresencePatch
from .repository import PresenceRepository

_COLUMNS = "id, user_id, status, date, created_by, created_at, updated_at"


def _row_to_entry(r: dict) -> PresenceEntry:
    return PresenceEntry(
        entry_id=int(r["id"]),
        user_id=int(r["user_id"]),
        status=PresenceStatus(r["status"]),
        work_date=normalize_mysql_date(r["date"]),
        created_by=int(r["created_by"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLPresenceRepository(PresenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[PresenceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM presence_entries WHERE id=%s", (int(entry_id),))
            r = fetchone(cur)
            return _row_to_entry(r) if r else None

    def get_for_user_and_date(self, *, user_id: int, work_date: date) -> Optional[PresenceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM presence_entries WHERE user_id=%s AND date=%s",
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            return _row_to_entry(r) if r else None

    def create(self, *, user_id: int, status: PresenceStatus, work_date: date, created_by: int) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO presence_entries(user_id, status, date, created_by)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(user_id), status.value, work_date, int(created_by)),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateEntry() from e
            raise

    def update(self, *, entry_id: int, patch: PresencePatch) -> bool:
        sets = ["updated_at=NOW()"]
        params: list[object] = []
        if patch.status is not None:
            sets.append("status=%s")
            params.append(patch.status.value)
        if patch.work_date is not None:
            sets.append("date=%s")
            params.append(patch.work_date)

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"UPDATE presence_entries SET {', '.join(sets)} WHERE id=%s",
                    tuple(params + [int(entry_id)]),
                )
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateEntry() from e
            raise

    def delete(self, *, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM presence_entries WHERE id=%s", (int(entry_id),))
            return cur.rowcount > 0

    def list_range(
        self,
        *,
        start: date,
        end: date,
        user_ids: Optional[Iterable[int]] = None,
    ) -> Sequence[PresenceEntry]:
        clauses = ["date BETWEEN %s AND %s"]
        params: list[object] = [start, end]

        if user_ids is not None:
            ids = [int(u) for u in user_ids]
            if not ids:
                return []
            clauses.append(f"user_id IN ({', '.join(['%s'] * len(ids))})")
            params.extend(ids)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM presence_entries
                WHERE {where}
                ORDER BY date ASC, user_id ASC
                """,
                tuple(params),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]
