#!/usr/bin/env python3
import sys
import argparse
import traceback
from colorama import init as colorama_init, Fore

from clipdeps import __version__
from clipdeps.commands.copy import copy_main
from clipdeps.core.exceptions import ClipdepsError
from clipdeps.core.models import DEFAULT_TOKEN_LIMIT
from clipdeps.core.sink import SinkKind


def token_limit_arg(value: str) -> int:
    """Digits only, like `--token-limit 2000`."""
    if not value.isdigit():
        raise argparse.ArgumentTypeError(f"invalid token limit: '{value}'")
    return int(value)


def create_parser():
    colorama_init(autoreset=True)
    p = argparse.ArgumentParser(
        prog="clipdeps",
        description="Copy a source file and all of its local imports to the clipboard"
    )
    p.add_argument('entry',
                   help='Entry file (.ts, .tsx, .js, .jsx)')
    p.add_argument('--token-limit', dest='token_limit', type=token_limit_arg, default=None,
                   help=f'Approximate token budget (default: {DEFAULT_TOKEN_LIMIT})')
    p.add_argument('-c', '--config', dest='config', default=None,
                   help='Path to clipdeps.yaml (default: ./clipdeps.yaml if present)')
    p.add_argument('--sink', choices=[k.value for k in SinkKind], default=None,
                   help='Where to publish the document (default: clipboard)')
    p.add_argument('-o', '--output', default=None,
                   help='Write the document to this file')
    p.add_argument('--root', default=None,
                   help='Directory that displayed paths are relative to (default: cwd)')
    p.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    p.set_defaults(func=lambda args: copy_main(
        entry=args.entry,
        token_limit=args.token_limit,
        config_path=args.config,
        sink=args.sink,
        output=args.output,
        root=args.root,
    ))
    return p


def main(argv=None):
    parser = create_parser()
    args   = parser.parse_args(argv)

    try:
        code = args.func(args)
    except ClipdepsError as e:
        print(Fore.RED + f"[ERROR] {e}", file=sys.stderr)
        for error in e.context.get('errors', []):
            print(Fore.RED + f"  - {error}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        print(Fore.RED + "[ERROR] Unhandled exception:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)
    sys.exit(code)

if __name__=='__main__':
    main()
