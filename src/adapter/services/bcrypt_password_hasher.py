import asyncio
import base64
import hashlib

import bcrypt

from src.app.services.password_hasher import IPasswordHasher

DEFAULT_BCRYPT_ROUNDS = 12


def _prehash(password: str) -> bytes:
    """
    SHA-256 digest, base64 encoded: 44 bytes for any input

    bcrypt only accepts 72 bytes, so longer passwords are reduced first.
    Lone surrogates from JSON input are encoded as-is instead of failing.
    """
    digest = hashlib.sha256(password.encode("utf-8", errors="surrogatepass")).digest()
    return base64.b64encode(digest)


class BcryptPasswordHasher(IPasswordHasher):
    """
    bcrypt implementation of IPasswordHasher

    Hashing runs in a worker thread so the event loop stays responsive
    while bcrypt spends its cost factor.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    async def hash(self, password: str) -> str:
        password_hash = await asyncio.to_thread(
            bcrypt.hashpw, _prehash(password), bcrypt.gensalt(self.rounds)
        )
        return password_hash.decode("utf-8")

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(
            bcrypt.checkpw, _prehash(password), password_hash.encode("utf-8")
        )
