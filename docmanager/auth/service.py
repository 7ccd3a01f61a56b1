import logging
import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from docmanager.auth.models import User
from docmanager.auth.repository import UserRepository
from docmanager.auth.schemas import RegisterIn, LoginIn
from docmanager.shared.errors import ValidationError, ConflictError, AuthError

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72

def _hash(pw: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(pw.encode(), bcrypt.gensalt(rounds=rounds)).decode()

def _verify(pw: str, ph: str) -> bool:
    try: return bcrypt.checkpw(pw.encode(), ph.encode())
    except ValueError: return False

def register_user(db: Session, payload: RegisterIn, rounds: int = 12) -> User:
    name = (payload.name or "").strip()
    email = (payload.email or "").strip()
    password = payload.password or ""
    if not name or not email or not password.strip():
        raise ValidationError("Name, email and password are required")
    if len(password.encode()) > BCRYPT_MAX_BYTES:
        raise ValidationError("Password must be at most 72 bytes")

    users = UserRepository(db)
    if users.get_by_email(email):
        raise ConflictError("Email already registered")

    try:
        u = users.create(name=name, email=email, password_hash=_hash(password, rounds))
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent registration of the same email
        db.rollback()
        raise ConflictError("Email already registered")
    db.refresh(u)
    logger.info("registered user id=%s", u.id)
    return u

def authenticate_user(db: Session, payload: LoginIn) -> User:
    email = (payload.email or "").strip()
    password = payload.password or ""
    if not email or not password:
        raise ValidationError("Email and password are required")

    u = UserRepository(db).get_by_email(email)
    if not u or not _verify(password, u.password_hash):
        logger.warning("failed login attempt")
        raise AuthError("Invalid credentials")
    return u
