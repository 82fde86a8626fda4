"""Persistent storage of user accounts and their weapons."""

from __future__ import annotations

import sqlite3
from os import PathLike

from battlecity.server.user import User
from battlecity.server.weapon import Weapon

DEFAULT_FILE = "users.sqlite"
WAIT_TIME_STEP = 500
_WAIT_TIME_MASK = 0xFFFF

_SCHEMA = """
CREATE TABLE IF NOT EXISTS "User" (
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    username TEXT UNIQUE NOT NULL,
    totalScore INTEGER NOT NULL,
    specialMoney INTEGER NOT NULL,
    weaponID INTEGER NOT NULL,
    password TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS "Weapon" (
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    bulletWaitTime INTEGER NOT NULL,
    bulletSpeed REAL NOT NULL,
    userID INTEGER NOT NULL
);
"""

_USER_COLUMNS = 'id, username, totalScore, specialMoney, weaponID, password'
_WEAPON_COLUMNS = 'id, bulletWaitTime, bulletSpeed, userID'


class RecordNotFound(LookupError):
    """Raised when a requested user or weapon is not stored."""


def _user_from_row(row: sqlite3.Row) -> User:
    return User(
        username=row["username"],
        password=row["password"],
        id=row["id"],
        total_score=row["totalScore"],
        special_money=row["specialMoney"],
        weapon_id=row["weaponID"],
    )


def _weapon_from_row(row: sqlite3.Row) -> Weapon:
    return Weapon(
        user_id=row["userID"],
        id=row["id"],
        bullet_wait_time=row["bulletWaitTime"],
        bullet_speed=row["bulletSpeed"],
    )


class GameDatabase:
    """Users and weapons kept in an SQLite file."""

    WAIT_TIME_STEP = WAIT_TIME_STEP

    def __init__(self, path: str | PathLike[str] = DEFAULT_FILE) -> None:
        self.path = str(path)
        self._conn = sqlite3.connect(self.path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row

    def __enter__(self) -> GameDatabase:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def initialize(self) -> None:
        """Create the tables if they do not exist yet."""
        self._conn.executescript(_SCHEMA)
        self._conn.commit()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def _insert_user(self, user: User) -> int:
        cursor = self._conn.execute(
            'INSERT INTO "User" (username, totalScore, specialMoney, weaponID, password) '
            "VALUES (?, ?, ?, ?, ?)",
            (user.username, user.total_score, user.special_money, user.weapon_id, user.password),
        )
        return cursor.lastrowid

    def _insert_weapon(self, weapon: Weapon) -> int:
        cursor = self._conn.execute(
            'INSERT INTO "Weapon" (bulletWaitTime, bulletSpeed, userID) VALUES (?, ?, ?)',
            (weapon.bullet_wait_time, weapon.bullet_speed, weapon.user_id),
        )
        return cursor.lastrowid

    def _update_user(self, user: User) -> None:
        with self._conn:
            self._conn.execute(
                'UPDATE "User" SET username = ?, totalScore = ?, specialMoney = ?, '
                "weaponID = ?, password = ? WHERE id = ?",
                (
                    user.username,
                    user.total_score,
                    user.special_money,
                    user.weapon_id,
                    user.password,
                    user.id,
                ),
            )

    def _update_weapon(self, weapon: Weapon) -> None:
        with self._conn:
            self._conn.execute(
                'UPDATE "Weapon" SET bulletWaitTime = ?, bulletSpeed = ?, userID = ? '
                "WHERE id = ?",
                (weapon.bullet_wait_time, weapon.bullet_speed, weapon.user_id, weapon.id),
            )

    def _users_named(self, username: str) -> list[User]:
        rows = self._conn.execute(
            f'SELECT {_USER_COLUMNS} FROM "User" WHERE username = ? ORDER BY id',
            (username,),
        ).fetchall()
        return [_user_from_row(row) for row in rows]

    def add_user(self, user: User) -> int:
        """Store ``user`` under a new id and return that id."""
        with self._conn:
            return self._insert_user(user)

    def register_user(self, username: str, password: str) -> bool:
        """Create a user together with a default weapon."""
        with self._conn:
            user_id = self._insert_user(User(username=username, password=password))
            weapon_id = self._insert_weapon(Weapon(user_id=user_id))
            self._conn.execute(
                'UPDATE "User" SET weaponID = ? WHERE id = ?', (weapon_id, user_id)
            )
        return True

    def get_user(self, user_id: int) -> User:
        """Return the user with ``user_id``; raise RecordNotFound if absent."""
        row = self._conn.execute(
            f'SELECT {_USER_COLUMNS} FROM "User" WHERE id = ?', (user_id,)
        ).fetchone()
        if row is None:
            raise RecordNotFound(f"no user with id {user_id}")
        return _user_from_row(row)

    def get_user_by_username(self, username: str) -> User:
        """Return the user called ``username``; raise RecordNotFound if absent."""
        users = self._users_named(username)
        if not users:
            raise RecordNotFound(f"no user named {username!r}")
        return users[0]

    def validate_user_credentials(self, username: str, password: str) -> bool:
        """Return whether ``username`` exists with ``password``."""
        users = self._users_named(username)
        return bool(users) and users[0].password == password

    def user_exists(self, username: str) -> bool:
        """Return whether a user called ``username`` is stored."""
        return bool(self._users_named(username))

    def get_all_users(self) -> list[User]:
        """Return every stored user, oldest first."""
        rows = self._conn.execute(
            f'SELECT {_USER_COLUMNS} FROM "User" ORDER BY id'
        ).fetchall()
        return [_user_from_row(row) for row in rows]

    def add_weapon(self, weapon: Weapon) -> int:
        """Store ``weapon`` under a new id and return that id."""
        with self._conn:
            return self._insert_weapon(weapon)

    def get_weapon(self, user_id: int) -> Weapon:
        """Return the weapon owned by ``user_id``; raise RecordNotFound if absent."""
        row = self._conn.execute(
            f'SELECT {_WEAPON_COLUMNS} FROM "Weapon" WHERE userID = ? ORDER BY id LIMIT 1',
            (user_id,),
        ).fetchone()
        if row is None:
            raise RecordNotFound(f"no weapon for user {user_id}")
        return _weapon_from_row(row)

    def upgrade_bullet_wait_time(self, user_id: int) -> None:
        """Shorten the wait between shots by one step, in sixteen-bit arithmetic."""
        weapon = self.get_weapon(user_id)
        if weapon.bullet_wait_time > Weapon.DEFAULT_BULLET_WAIT_TIME - WAIT_TIME_STEP:
            weapon.bullet_wait_time = (
                weapon.bullet_wait_time - WAIT_TIME_STEP
            ) & _WAIT_TIME_MASK
        self._update_weapon(weapon)

    def upgrade_bullet_speed(self, user_id: int) -> None:
        """Double the bullet speed if it is still at the default."""
        weapon = self.get_weapon(user_id)
        if weapon.bullet_speed == Weapon.DEFAULT_BULLET_SPEED:
            weapon.bullet_speed *= 2
        self._update_weapon(weapon)

    def get_total_score(self, user_id: int) -> int:
        """Return the user's total score."""
        return self.get_user(user_id).total_score

    def get_special_money(self, user_id: int) -> int:
        """Return the user's special money."""
        return self.get_user(user_id).special_money

    def add_special_money(self, user_id: int, amount: int) -> None:
        """Credit special money to a user."""
        user = self.get_user(user_id)
        user.add_special_money(amount)
        self._update_user(user)

    def add_total_score(self, user_id: int, amount: int) -> None:
        """Add to a user's total score."""
        user = self.get_user(user_id)
        user.add_total_score(amount)
        self._update_user(user)