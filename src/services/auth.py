# src/services/auth.py

"""Account registration, login and the active-account pointer."""

import logging
import time
import uuid
from dataclasses import replace
from datetime import date
from typing import Protocol

from passlib.context import CryptContext

from src.config.settings import Settings
from src.models.account import Account, User
from src.services.notifier import Notifier, Severity
from src.storage.local_storage import LocalStorage

logger = logging.getLogger("ecofinds.auth")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class AuthenticationError(Exception):
    """Raised inside the service when credentials are rejected."""


class IdentityProvider(Protocol):
    def current_user_id(self) -> str | None: ...


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def make_account(
    account_id: str, username: str, email: str, password: str, joined_at: str,
) -> Account:
    return Account(
        id=account_id,
        username=username,
        email=email,
        password_hash=get_password_hash(password),
        joined_at=joined_at,
    )


def demo_accounts() -> list[Account]:
    return [
        make_account("1", "johndoe", "john@example.com", "password123", "2023-01-15"),
    ]


class AuthService:
    """Owns registered accounts and who is currently signed in.

    Login and registration wait ``Settings.AUTH_DELAY`` seconds to mimic
    a remote call; the wait cannot be interrupted. Failures are reported
    to the notifier and never raised to the caller.
    """

    def __init__(
        self,
        storage: LocalStorage,
        notifier: Notifier,
        delay: float | None = None,
    ) -> None:
        self._storage = storage
        self._notifier = notifier
        self._delay = Settings.AUTH_DELAY if delay is None else delay
        self._accounts: tuple[Account, ...] = ()
        self._current: User | None = None
        self._load()

    def _load(self) -> None:
        raw = self._storage.get_item(Settings.ACCOUNTS_KEY)
        if raw is None:
            self._publish_accounts(tuple(demo_accounts()))
        else:
            accounts: list[Account] = []
            for item in raw:
                try:
                    accounts.append(Account.from_dict(item))
                except (KeyError, TypeError, ValueError) as exc:
                    logger.warning("Skipping malformed account record: %s", exc)
            self._accounts = tuple(accounts)

        saved = self._storage.get_item(Settings.CURRENT_USER_KEY)
        if saved is None:
            return
        try:
            self._current = User.from_dict(saved)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Ignoring malformed session pointer: %s", exc)
            return
        logger.info("Restored session for %s", self._current.username)

    def _publish_accounts(self, accounts: tuple[Account, ...]) -> None:
        self._storage.set_item(
            Settings.ACCOUNTS_KEY, [a.to_dict() for a in accounts],
        )
        self._accounts = accounts

    def _set_current(self, user: User | None) -> None:
        self._current = user
        if user is None:
            self._storage.remove_item(Settings.CURRENT_USER_KEY)
        else:
            self._storage.set_item(Settings.CURRENT_USER_KEY, user.to_dict())

    def _find_by_email(self, email: str) -> Account | None:
        wanted = email.strip().lower()
        for account in self._accounts:
            if account.email.lower() == wanted:
                return account
        return None

    def _simulate_latency(self) -> None:
        if self._delay > 0:
            time.sleep(self._delay)

    # ── Public API ───────────────────────────────────────

    @property
    def current_user(self) -> User | None:
        return self._current

    def current_user_id(self) -> str | None:
        return self._current.id if self._current else None

    def login(self, email: str, password: str) -> User | None:
        """Sign in with *email* and *password*; returns the user or ``None``."""
        self._simulate_latency()
        try:
            account = self._find_by_email(email)
            if account is None or not verify_password(
                password, account.password_hash,
            ):
                raise AuthenticationError("Invalid credentials")
        except AuthenticationError as exc:
            logger.info("Login failed for %s", email)
            self._notifier.notify("Login failed", str(exc), Severity.ERROR)
            return None

        self._set_current(account.user)
        logger.info("User %s logged in", account.username)
        self._notifier.notify(
            "Login successful",
            f"Welcome back, {account.username}!",
            Severity.SUCCESS,
        )
        return account.user

    def register(self, username: str, email: str, password: str) -> User | None:
        """Create an account and sign in as it; returns ``None`` on failure."""
        self._simulate_latency()
        try:
            if not username.strip() or not email.strip() or not password:
                raise AuthenticationError("Username, email and password are required")
            if self._find_by_email(email) is not None:
                raise AuthenticationError("User with this email already exists")
        except AuthenticationError as exc:
            logger.info("Registration failed for %s: %s", email, exc)
            self._notifier.notify("Registration failed", str(exc), Severity.ERROR)
            return None

        account = make_account(
            uuid.uuid4().hex,
            username.strip(),
            email.strip(),
            password,
            date.today().isoformat(),
        )
        self._publish_accounts(self._accounts + (account,))
        self._set_current(account.user)
        logger.info("Registered user %s (%s)", account.username, account.id)
        self._notifier.notify(
            "Registration successful",
            f"Welcome to EcoFinds, {account.username}!",
            Severity.SUCCESS,
        )
        return account.user

    def logout(self) -> None:
        if self._current is not None:
            logger.info("User %s logged out", self._current.username)
        self._set_current(None)
        self._notifier.notify(
            "Logged out",
            "You have been successfully logged out.",
            Severity.INFO,
        )

    def update_profile(
        self, username: str | None = None, email: str | None = None,
    ) -> User | None:
        """Change the signed-in user's name and/or email."""
        if self._current is None:
            return None

        if email is not None:
            clash = self._find_by_email(email)
            if clash is not None and clash.id != self._current.id:
                self._notifier.notify(
                    "Error", "User with this email already exists", Severity.ERROR,
                )
                return None

        changes = {
            k: v for k, v in {"username": username, "email": email}.items()
            if v is not None
        }
        updated = replace(self._current, **changes)
        self._publish_accounts(tuple(
            replace(a, **changes) if a.id == updated.id else a
            for a in self._accounts
        ))
        self._set_current(updated)
        logger.info("Profile updated for %s", updated.id)
        self._notifier.notify(
            "Profile updated",
            "Your profile has been successfully updated.",
            Severity.SUCCESS,
        )
        return updated
