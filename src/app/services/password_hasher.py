"""
Password Hasher

bcrypt with a per-call random salt. bcrypt only reads the first 72 bytes
of its input; passwords are truncated to that length explicitly so every
bcrypt release behaves the same.
"""

import bcrypt

MIN_ROUNDS = 10
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    def __init__(self, rounds: int = 12):
        if rounds < MIN_ROUNDS:
            raise ValueError(f"bcrypt cost factor must be at least {MIN_ROUNDS}")
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, plaintext: str) -> str:
        password_hash = bcrypt.hashpw(self._encode(plaintext), bcrypt.gensalt(self.rounds))
        return password_hash.decode("utf-8")

    def verify(self, plaintext: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(plaintext), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False

    def verify_dummy(self, plaintext: str) -> bool:
        """Spend one verification's worth of time for a missing account"""
        bcrypt.checkpw(self._encode(plaintext), self._dummy_hash)
        return False
