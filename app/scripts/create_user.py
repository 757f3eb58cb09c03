"""
Create a user from the command line. Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD COUNTRY
Example:
  python -m app.scripts.create_user "Alice Smith" alice@example.com secret1 US
"""
import argparse
import sys

from pydantic import ValidationError

from app.core.database import SessionLocal
from app.core.errors import ConflictError
from app.schemas.auth import SignUpRequest
from app.services.accounts import create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Task Tracker user.")
    parser.add_argument("name", help="Display name (5-50 chars)")
    parser.add_argument("email", help="Unique email address")
    parser.add_argument("password", help="Password (6 chars to 72 UTF-8 bytes)")
    parser.add_argument("country", help="Country")
    args = parser.parse_args(argv)

    try:
        payload = SignUpRequest(
            name=args.name,
            email=args.email,
            password=args.password,
            country=args.country,
        )
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"Invalid {field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = create_user(db, payload)
    except ConflictError:
        print(f"User '{payload.email}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' with id {user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
