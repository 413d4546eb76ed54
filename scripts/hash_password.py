"""Print a bcrypt hash for seeding the users.password column.

Usage:
    uv run python -m scripts.hash_password [password]
Without an argument the password is read from the terminal without echo.
"""

import getpass
import sys

from app.infrastructure.security.password import get_password_hash, verify_password


def main() -> None:
    """Hash argv[1] (or a prompted password) and print it."""
    if len(sys.argv) > 2:
        print("Usage: uv run python -m scripts.hash_password [password]", file=sys.stderr)
        sys.exit(1)
    password = sys.argv[1] if len(sys.argv) == 2 else getpass.getpass("Password: ")
    if not password:
        print("Password must not be empty", file=sys.stderr)
        sys.exit(1)

    hashed = get_password_hash(password)
    if not verify_password(password, hashed):
        print("Hash verification failed", file=sys.stderr)
        sys.exit(1)
    print(hashed)


if __name__ == "__main__":
    main()
