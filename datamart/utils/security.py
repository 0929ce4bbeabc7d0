from passlib.context import CryptContext
from ..database import PASSWORD_HASH_SCHEMES

pwd_context = CryptContext(schemes=PASSWORD_HASH_SCHEMES, deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
