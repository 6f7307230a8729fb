import asyncio
from typing import Optional

import bcrypt

from config import ApplicationConfig

# Compared against on unknown-user logins so both paths cost one bcrypt check
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(4))


def _hash(password: str) -> str:
    return bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    ).decode("utf-8")


def _check(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


async def hash_password(password: str) -> str:
    """bcrypt hash computed on a worker thread to keep the event loop free"""
    return await asyncio.to_thread(_hash, password)


async def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        await asyncio.to_thread(_check, password, _DUMMY_HASH.decode("utf-8"))
        return False
    return await asyncio.to_thread(_check, password, password_hash)
