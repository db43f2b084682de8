"""Password hashing utilities.

Learn: Uses bcrypt for secure password hashing. bcrypt automatically
handles salting and is resistant to rainbow table attacks. The output
("$2b$10$<salt><digest>") embeds the cost and salt, so verification
needs nothing but the stored string.

Hashing is deliberately slow (~50-100ms at cost 10). Async callers
should run it in a thread pool (see AccountService) so it doesn't stall
the event loop.
"""

import secrets

import bcrypt

# bcrypt only looks at the first 72 bytes of the secret.
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """bcrypt hasher with a configurable work factor."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._dummy_hash: str | None = None

    @property
    def dummy_hash(self) -> str:
        """A real hash of a random secret, for equal-cost failed logins."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash(secrets.token_urlsafe(16))
        return self._dummy_hash

    def verify_dummy(self, password: str) -> bool:
        """Spend one verification on the dummy hash. Always False."""
        self.verify(password, self.dummy_hash)
        return False

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Returns False on mismatch and on a malformed hash; never raises
        for bad input. bcrypt.checkpw compares in constant time.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]
