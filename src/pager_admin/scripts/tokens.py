# src/pager_admin/scripts/tokens.py
"""
Issue and revoke public API tokens for an enterprise.

Only the SHA-256 of a token is stored, so the plain value is printed once
when it is issued and cannot be recovered afterwards.
"""
from __future__ import annotations

import argparse
import sys

from sqlalchemy import update
from sqlalchemy.orm import Session

from pager_admin.core.security import generate_api_token, hash_api_token
from pager_admin.db.session import session_scope
from pager_admin.models import Enterprise, PublicApiToken
from pager_admin.repositories.enterprise_repo import EnterpriseRepository


def issue_api_token(db: Session, enterprise_id: int) -> str:
    """Create a new active token for an enterprise and return its plain value.

    Args:
        db: Database session
        enterprise_id: Enterprise the token grants access to

    Raises:
        LookupError: If the enterprise does not exist
    """
    repo = EnterpriseRepository(db)
    if repo.get(enterprise_id) is None:
        raise LookupError(f"Enterprise {enterprise_id} does not exist")
    token = generate_api_token()
    repo.add_token(enterprise_id, hash_api_token(token))
    db.commit()
    return token


def revoke_api_tokens(db: Session, enterprise_id: int) -> int:
    """Deactivate every token of an enterprise and return how many were active."""
    result = db.execute(
        update(PublicApiToken)
        .where(PublicApiToken.enterprise_id == enterprise_id, PublicApiToken.active.is_(True))
        .values(active=False)
    )
    db.commit()
    return result.rowcount or 0


def create_enterprise(db: Session, name: str, super_admin_email: str | None = None) -> Enterprise:
    enterprise = Enterprise(name=name, super_admin_email=super_admin_email)
    db.add(enterprise)
    db.commit()
    return enterprise


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage public API tokens")
    sub = parser.add_subparsers(dest="command", required=True)

    issue = sub.add_parser("issue", help="Issue a token for an enterprise")
    issue.add_argument("enterprise_id", type=int)

    revoke = sub.add_parser("revoke", help="Revoke all tokens of an enterprise")
    revoke.add_argument("enterprise_id", type=int)

    create = sub.add_parser("create-enterprise", help="Create an enterprise and issue a token")
    create.add_argument("name")
    create.add_argument("--super-admin-email", default=None)

    args = parser.parse_args(argv)

    try:
        with session_scope() as db:
            if args.command == "issue":
                print(issue_api_token(db, args.enterprise_id))
            elif args.command == "revoke":
                print(f"Revoked {revoke_api_tokens(db, args.enterprise_id)} token(s)")
            else:
                enterprise = create_enterprise(db, args.name, args.super_admin_email)
                print(f"enterprise_id={enterprise.id}")
                print(issue_api_token(db, enterprise.id))
    except LookupError as exc:
        print(f"[tokens] ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
