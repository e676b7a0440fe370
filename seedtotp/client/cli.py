import argparse
import logging
import sys
from dataclasses import replace

from seedtotp.common.crypto_utils import SecurePRNG
from seedtotp.common.errors import TotpError
from seedtotp.server.config import STORES, load_settings
from seedtotp.server.register import Register
from seedtotp.server.service import get_totp


def build_parser():
    parser = argparse.ArgumentParser(prog="seedtotp", description="Time-based one-time passwords (RFC 6238)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    commands = parser.add_subparsers(dest="command", required=True)

    code = commands.add_parser("code", help="print the current code")
    code.add_argument("--store", choices=STORES, help="secret store (default: SEEDTOTP_STORE)")
    code.add_argument("--timestamp", type=int, help="UNIX time to generate the code for")

    register = commands.add_parser("register", help="store a secret in the SQLite store")
    register.add_argument("--secret", help="Base32 secret (generated when omitted)")
    register.add_argument("--name", help="lookup key (default: SEEDTOTP_SECRET_KEY)")
    register.add_argument("--db", help="database path (default: SEEDTOTP_DB_PATH)")

    commands.add_parser("new-secret", help="print a random Base32 secret")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(message)s')

    try:
        settings = load_settings()
        if args.command == "code":
            if args.store:
                settings = replace(settings, store=args.store)
            print(get_totp(settings=settings, timestamp=args.timestamp))
        elif args.command == "register":
            register = Register(args.db or settings.db_path)
            print(register.register_secret(args.name or settings.secret_key, args.secret))
        elif args.command == "new-secret":
            print(SecurePRNG.generate_secret())
    except TotpError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
