"""
NoteLite Backend — Password Hash Utility
==========================================

Prints an Argon2id hash to put in AUTH_PASSWORD_HASH.

Usage:
    notelite-hash-password                  # prompts twice, nothing echoed
    notelite-hash-password --password s3cr3t
    python -m notelite.cli --password s3cr3t
"""

import argparse
import getpass
import sys
from typing import List, Optional

from notelite.security import hash_password, verify_password


def _read_password() -> str:
    first = getpass.getpass("Password: ")
    second = getpass.getpass("Repeat password: ")
    if first != second:
        raise SystemExit("Passwords do not match")
    return first


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="notelite-hash-password",
        description="Generate an Argon2id hash for the NoteLite AUTH_PASSWORD_HASH setting.",
    )
    ap.add_argument(
        "--password",
        help="Password to hash (omit to be prompted; avoids shell history)",
    )
    args = ap.parse_args(argv)

    password = args.password if args.password is not None else _read_password()
    if not password:
        print("Refusing to hash an empty password", file=sys.stderr)
        return 1

    hashed = hash_password(password)
    # Sanity check before handing the hash to an operator
    if not verify_password(password, hashed):
        print("Generated hash failed verification", file=sys.stderr)
        return 1

    print(hashed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
