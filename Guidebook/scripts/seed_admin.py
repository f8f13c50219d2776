# Run from Guidebook/:
#   python -m scripts.seed_admin --email admin@mikana.ae --password admin123
#
# Needs DATABASE_URL in .env (defaults to a local sqlite file).

from argparse import ArgumentParser
from sqlalchemy.orm import Session

from enums.roles import Role, UserStatus
from models import Base, User
from utils.db import engine
from utils.security import hash_password
from utils.transactions import uow


def upsert_admin(db: Session, *, email: str, password: str, first_name: str = "Admin", last_name: str = "User") -> User:
    """Create the admin account, or promote and reactivate an existing one."""
    email = email.strip().lower()
    user = db.query(User).filter(User.email == email).first()

    if user:
        user.role = Role.admin.value
        user.status = UserStatus.active.value
        user.password_hash = hash_password(password)
    else:
        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=hash_password(password),
            role=Role.admin.value,
            status=UserStatus.active.value,
        )
        db.add(user)
    db.flush()
    return user


def main():
    parser = ArgumentParser(description="Create or reset the admin account")
    parser.add_argument("--email", default="admin@mikana.ae")
    parser.add_argument("--password", default="admin123")
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)
    with uow() as db:
        user = upsert_admin(
            db,
            email=args.email,
            password=args.password,
            first_name=args.first_name,
            last_name=args.last_name,
        )
        print(f"✅ Admin ready: {user.email} (id {user.id})")


if __name__ == "__main__":
    main()
