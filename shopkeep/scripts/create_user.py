"""
Create a user (e.g. the first account). Run from project root:
  python -m shopkeep.scripts.create_user NAME EMAIL PASSWORD
Example:
  python -m shopkeep.scripts.create_user "Site Admin" admin@example.com your-secure-password
"""
import argparse
import sys

from shopkeep.core.database import SessionLocal
from shopkeep.core.security import (
    EMAIL_MAX_LEN,
    NAME_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    hash_password,
)
from shopkeep.models import User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Shopkeep user.")
    parser.add_argument("name", help="Display name (1-255 chars)")
    parser.add_argument("email", help="Login e-mail (unique)")
    parser.add_argument("password", help="Password (8-128 chars)")
    args = parser.parse_args(argv)

    name = args.name.strip()
    email = args.email.strip().lower()
    if not name or len(name) > NAME_MAX_LEN:
        print("Invalid name length.", file=sys.stderr)
        return 1
    if "@" not in email or len(email) > EMAIL_MAX_LEN:
        print("Invalid e-mail address.", file=sys.stderr)
        return 1
    if len(args.password) < PASSWORD_MIN_LEN or len(args.password) > PASSWORD_MAX_LEN:
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            name=name,
            email=email,
            password_hash=hash_password(args.password),
        )
        db.add(user)
        db.commit()
        print(f"Created user '{email}' (id {user.id}).")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
