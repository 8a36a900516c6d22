import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta

from werkzeug.security import check_password_hash, generate_password_hash

from ..config import TOKEN_TTL_SECONDS


class AuthError(Exception):
    """로그인/토큰 실패. error_type은 프론트에서 분기용으로 쓴다."""

    def __init__(self, message: str, error_type: str = "unauthenticated", status: int = 401):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status = status


@dataclass
class User:
    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime

    def to_resource(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at.isoformat(timespec="seconds"),
        }


@dataclass
class AccessToken:
    token: str
    user_id: int
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now()) >= self.expires_at


class AuthService:
    """
    사용자/토큰 메모리 저장소. 프로세스가 내려가면 같이 사라진다.
    """

    def __init__(self, token_ttl_seconds: int = TOKEN_TTL_SECONDS, clock=datetime.now):
        self.token_ttl = timedelta(seconds=token_ttl_seconds)
        self.clock = clock
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._emails: dict[str, int] = {}
        self._tokens: dict[str, AccessToken] = {}
        self._next_id = 1

    def register(self, name: str, email: str, password: str) -> User:
        with self._lock:
            key = email.lower()
            if key in self._emails:
                raise AuthError("The email has already been taken.", "email_taken", 422)

            user = User(
                id=self._next_id,
                name=name,
                email=email,
                password_hash=generate_password_hash(password),
                created_at=self.clock(),
            )
            self._users[user.id] = user
            self._emails[key] = user.id
            self._next_id += 1
            return user

    def authenticate(self, email: str, password: str) -> User:
        with self._lock:
            user_id = self._emails.get(email.lower())
            user = self._users.get(user_id) if user_id is not None else None

        if user is None:
            raise AuthError("Email not found. Please check your email address.", "email_not_found")
        if not check_password_hash(user.password_hash, password):
            raise AuthError("Incorrect password. Please try again.", "password_incorrect")
        return user

    def issue_token(self, user: User) -> str:
        now = self.clock()
        token = AccessToken(
            token=secrets.token_urlsafe(40),
            user_id=user.id,
            created_at=now,
            expires_at=now + self.token_ttl,
        )
        with self._lock:
            self._tokens[token.token] = token
        return token.token

    def resolve(self, token: str) -> User:
        """Bearer 토큰 -> User. 없거나 만료면 AuthError"""
        with self._lock:
            access = self._tokens.get(token)
            if access is None or access.is_expired(self.clock()):
                raise AuthError("Unauthenticated.")
            return self._users[access.user_id]

    def revoke(self, token: str) -> bool:
        with self._lock:
            return self._tokens.pop(token, None) is not None

    def purge_expired(self) -> int:
        now = self.clock()
        with self._lock:
            expired = [key for key, access in self._tokens.items() if access.is_expired(now)]
            for key in expired:
                del self._tokens[key]
        return len(expired)

    def token_count(self) -> int:
        with self._lock:
            return len(self._tokens)
