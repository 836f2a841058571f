"""
Create a user directly in the database (e.g. the first admin). Run from project root:
  python -m jobboard.scripts.create_user EMAIL PASSWORD NAME [role]
Example:
  python -m jobboard.scripts.create_user admin@example.com your-secure-password "Site Admin" admin
"""
import argparse
import sys

from jobboard.core.database import SessionLocal
from jobboard.core.errors import AppError
from jobboard.services.accounts import create_user, parse_role


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a job board user (bootstrap admins here).")
    parser.add_argument("email", help="Unique email")
    parser.add_argument("password", help="Password")
    parser.add_argument("name", help="Display name")
    parser.add_argument("role", nargs="?", default="member", help="admin or member (default member)")
    args = parser.parse_args(argv)

    email = args.email.strip()
    name = args.name.strip()
    if not email or not name or not args.password:
        print("Email, password, and name are required.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        role = parse_role(args.role)
        user = create_user(db, email, args.password, name, role)
        print(f"Created user '{user.email}' with role '{user.role}'.")
        return 0
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
