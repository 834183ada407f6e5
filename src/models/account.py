# src/models/account.py

"""Registered accounts and the public user view of them."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """What the rest of the application may know about an account."""

    id: str
    username: str
    email: str
    joined_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "joined_at": self.joined_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            username=data["username"],
            email=data["email"],
            joined_at=data.get("joined_at", ""),
        )


@dataclass(frozen=True)
class Account:
    """A registered account, including its bcrypt password hash."""

    id: str
    username: str
    email: str
    password_hash: str
    joined_at: str = ""

    @property
    def user(self) -> User:
        return User(
            id=self.id,
            username=self.username,
            email=self.email,
            joined_at=self.joined_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "password_hash": self.password_hash,
            "joined_at": self.joined_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        return cls(
            id=str(data["id"]),
            username=data["username"],
            email=data["email"],
            password_hash=data["password_hash"],
            joined_at=data.get("joined_at", ""),
        )
