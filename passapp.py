# Personal Password Recording Tool
# Purpose: record credentials from a generator, the clipboard or typed input,
# and warn before a weak password is saved.

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from core.config import DEFAULT_PASSWORD_LENGTH
from core.log import configure_logging, log_event
from core.storage import StorageError
from core.terminal import InputError
from cli.generator import GenerationError, GenerationPolicy, generate_password_flow
from cli.manager import (
    SOURCE_CLIPBOARD,
    SOURCE_GENERATE,
    SOURCE_WRITE,
    add_password_flow,
    list_passwords_flow,
)
from cli.tester import check_password_flow


logger = logging.getLogger(__name__)


def policy_from_args(args: argparse.Namespace) -> GenerationPolicy:
    return GenerationPolicy(
        length=args.length,
        include_lowercase=args.lowercase,
        include_numbers=args.numbers,
        include_uppercase=args.uppercase,
        include_symbols=args.symbols,
        include_spaces=args.spaces,
        exclude_similar_characters=args.exclude_similar,
        strict=args.strict,
    )


def cmd_list(args) -> bool:
    list_passwords_flow()
    return True


def cmd_add(args) -> bool:
    if args.generate:
        source = SOURCE_GENERATE
    elif args.clipboard:
        source = SOURCE_CLIPBOARD
    else:
        source = SOURCE_WRITE

    policy = policy_from_args(args) if source == SOURCE_GENERATE else None
    return add_password_flow(args.service, args.username, source, policy)


def cmd_generate(args) -> bool:
    generate_password_flow(policy_from_args(args))
    return True


def cmd_check(args) -> bool:
    check_password_flow()
    return True


def _add_policy_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("generation options")
    group.add_argument("--length", type=int, default=DEFAULT_PASSWORD_LENGTH,
                       help=f"Password length (default {DEFAULT_PASSWORD_LENGTH})")
    group.add_argument("--lowercase", action=argparse.BooleanOptionalAction, default=True,
                       help="Include lowercase letters")
    group.add_argument("--numbers", action=argparse.BooleanOptionalAction, default=True,
                       help="Include digits")
    group.add_argument("--uppercase", action=argparse.BooleanOptionalAction, default=True,
                       help="Include uppercase letters")
    group.add_argument("--symbols", action=argparse.BooleanOptionalAction, default=True,
                       help="Include special characters")
    group.add_argument("--spaces", action=argparse.BooleanOptionalAction, default=True,
                       help="Include spaces")
    group.add_argument("--exclude-similar", action=argparse.BooleanOptionalAction, default=True,
                       help="Leave out look-alike characters (0/O, 1/l/I, 5/S)")
    group.add_argument("--strict", action=argparse.BooleanOptionalAction, default=True,
                       help="Require every enabled character type at least once")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passbook",
        description="Record credentials and warn before saving weak passwords",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    # list
    s = sub.add_parser("list", help="Show saved credentials")
    s.set_defaults(func=cmd_list)

    # add
    s = sub.add_parser("add", help="Save a credential")
    s.add_argument("-s", "--service", required=True)
    s.add_argument("-u", "--username", required=True)
    source = s.add_mutually_exclusive_group(required=True)
    source.add_argument("-g", "--generate", action="store_true", help="Generate a new password")
    source.add_argument("-c", "--clipboard", action="store_true", help="Use the clipboard contents")
    source.add_argument("-w", "--write", action="store_true", help="Type the password")
    _add_policy_arguments(s)
    s.set_defaults(func=cmd_add)

    # generate
    s = sub.add_parser("generate", help="Generate a password and show its strength")
    _add_policy_arguments(s)
    s.set_defaults(func=cmd_generate)

    # check
    s = sub.add_parser("check", help="Score a typed password")
    s.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    logger.debug("Running command: %s", args.command)

    try:
        ok = args.func(args)
    except KeyboardInterrupt:
        print("\nAborted by user.")
        return 1
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        print(f"Error: invalid generation options: {errors}")
        return 1
    except (GenerationError, InputError, StorageError) as e:
        log_event(args.command, "FAILURE", {"error": type(e).__name__})
        print(f"Error: {e}")
        return 1

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
