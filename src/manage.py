"""Storefront management CLI.

Creates and drops the database schema, and issues signed bearer tokens for
local development.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py issue-token --uid alice --email alice@example.com --role customer
"""

import argparse
import sys


def setup_database():
    """Create database schemas for the storefront domain."""
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Creating storefront database schema...")
    setup_db(storefront)
    print("Done.")


def drop_database():
    """Drop database schemas for the storefront domain."""
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Dropping storefront database schema...")
    drop_db(storefront)
    print("Done.")


def issue_token(uid, email=None, roles=None, ttl=None):
    """Print a token signed with AUTH_TOKEN_SECRET."""
    from storefront.identity.signed_token import issue_token as sign
    from storefront.utils import settings

    claims = {"uid": uid, "roles": list(roles or [])}
    if email:
        claims["email"] = email
    print(sign(claims, settings.token_secret(), ttl=ttl or settings.token_ttl()))


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    token_parser = subparsers.add_parser("issue-token", help="Issue a signed bearer token")
    token_parser.add_argument("--uid", required=True, help="Identity id of the principal")
    token_parser.add_argument("--email", help="Email claim")
    token_parser.add_argument("--role", action="append", dest="roles", help="Role claim (repeatable)")
    token_parser.add_argument("--ttl", type=int, help="Lifetime in seconds")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "issue-token":
        issue_token(args.uid, email=args.email, roles=args.roles, ttl=args.ttl)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
