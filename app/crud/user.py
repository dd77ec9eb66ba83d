"""
CRUD operations for users.

Rows are returned in their public shape:
{ username, firstName, lastName, email, isAdmin }
The password hash never leaves this module.
"""

from typing import Any, Dict, List, Mapping
from sqlalchemy.orm import Session

from app.core.database import query
from app.core.exceptions import DuplicateEntityError, NotFoundError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.crud.sql import ProjectedColumn, Projection, as_bool, sql_for_partial_update
from app.schemas.user import UserRegisterRequest

USER_PROJECTION = Projection(
    ProjectedColumn("username", "username"),
    ProjectedColumn("first_name", "firstName"),
    ProjectedColumn("last_name", "lastName"),
    ProjectedColumn("email", "email"),
    ProjectedColumn("is_admin", "isAdmin", as_bool),
)

USER_FIELD_MAPPING = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


def authenticate(db: Session, username: str, password: str) -> Dict[str, Any]:
    """
    Check a username/password pair.

    Raises:
        UnauthorizedError: If the user is unknown or the password is wrong
    """
    rows = query(
        db,
        f"""SELECT {USER_PROJECTION.select_list}, password
            FROM users
            WHERE username = $1""",
        [username],
    )
    if rows and verify_password(password, rows[0]["password"]):
        return USER_PROJECTION.shape(rows[0])

    raise UnauthorizedError("Invalid username/password")


def register(db: Session, user_data: UserRegisterRequest, is_admin: bool = False) -> Dict[str, Any]:
    """
    Create a user with a hashed password.

    Raises:
        DuplicateEntityError: If the username is already taken
    """
    duplicate_check = query(
        db,
        """SELECT username
           FROM users
           WHERE username = $1""",
        [user_data.username],
    )
    if duplicate_check:
        raise DuplicateEntityError(f"Duplicate username: {user_data.username}")

    rows = query(
        db,
        f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {USER_PROJECTION.select_list}""",
        [
            user_data.username,
            get_password_hash(user_data.password),
            user_data.first_name,
            user_data.last_name,
            str(user_data.email),
            is_admin,
        ],
    )
    db.commit()

    return USER_PROJECTION.shape(rows[0])


def find_all(db: Session) -> List[Dict[str, Any]]:
    rows = query(
        db,
        f"""SELECT {USER_PROJECTION.select_list}
            FROM users
            ORDER BY username""",
    )
    return USER_PROJECTION.shape_all(rows)


def get(db: Session, username: str) -> Dict[str, Any]:
    """
    Retrieve a user by username.

    Raises:
        NotFoundError: If no such user
    """
    rows = query(
        db,
        f"""SELECT {USER_PROJECTION.select_list}
            FROM users
            WHERE username = $1""",
        [username],
    )
    if not rows:
        raise NotFoundError(f"No user: {username}")

    return USER_PROJECTION.shape(rows[0])


def update(db: Session, username: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a user; a new password is hashed before storage.

    Args:
        data: Any of {firstName, lastName, password, email, isAdmin}

    Raises:
        InvalidUpdateRequest: If data is empty
        NotFoundError: If no such user
    """
    data = dict(data)
    if "password" in data:
        data["password"] = get_password_hash(data["password"])

    set_clause = sql_for_partial_update(data, USER_FIELD_MAPPING)
    username_idx = len(set_clause.values) + 1

    rows = query(
        db,
        f"""UPDATE users
            SET {set_clause.fragment}
            WHERE username = ${username_idx}
            RETURNING {USER_PROJECTION.select_list}""",
        [*set_clause.values, username],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No user: {username}")
    db.commit()

    return USER_PROJECTION.shape(rows[0])


def remove(db: Session, username: str) -> None:
    """
    Delete a user by username.

    Raises:
        NotFoundError: If no such user
    """
    rows = query(
        db,
        """DELETE
           FROM users
           WHERE username = $1
           RETURNING username""",
        [username],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No user: {username}")
    db.commit()
