"""
Create a user, including admins (registration only ever creates staff). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m app.scripts.create_user retailer your-secure-password admin
"""
import argparse
import sys

from app.core.config import settings
from app.core.database import create_db_engine, create_session_factory
from app.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN, hash_password
from app.models.user import User, UserRole

ROLE_CHOICES = {"staff": UserRole.STAFF, "admin": UserRole.ADMIN}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a GameStock user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default="staff", choices=sorted(ROLE_CHOICES))
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    engine = create_db_engine(settings)
    db = create_session_factory(engine)()
    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        role = ROLE_CHOICES[args.role]
        user = User(
            username=username,
            password_hash=hash_password(args.password),
            role=int(role),
        )
        db.add(user)
        db.commit()
        print(f"Created user '{username}' with role '{args.role}'.")
        return 0
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
