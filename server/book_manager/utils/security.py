from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError
from passlib.context import CryptContext

from book_manager.config import settings
from book_manager.domain import Principal, RoleType

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS
)


def hash_password(password: str) -> str:
    """对密码进行 bcrypt 哈希"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证密码"""
    return pwd_context.verify(plain_password, hashed_password)


def create_session_token(user_id: int, role: RoleType) -> str:
    """生成写入会话 Cookie 的签名令牌"""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "role": role.value,
        "exp": now + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES),
        "iat": now,
    }
    return jwt.encode(payload, settings.SESSION_SECRET_KEY, algorithm=settings.SESSION_ALGORITHM)


def decode_session_token(token: str) -> Principal | None:
    """解析会话令牌，过期、篡改或内容非法时返回 None"""
    try:
        payload = jwt.decode(
            token, settings.SESSION_SECRET_KEY, algorithms=[settings.SESSION_ALGORITHM]
        )
        return Principal(user_id=int(payload["sub"]), role=RoleType(payload["role"]))
    except (JWTError, KeyError, ValueError):
        return None
