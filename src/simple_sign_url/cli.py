"""
Command-line interface for simple-sign-url
Signs URLs and verifies signed URLs using settings from a file or the environment
"""

import argparse
import os
import sys
from typing import Optional

from . import __version__
from .config import SignUrlSettings, ENV_PREFIX
from .exceptions import SignUrlError
from .signing import sign_url
from .verification import verify_url


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='simple-sign-url',
        description='Generate and verify time-limited signed URLs'
    )
    
    parser.add_argument(
        '--version',
        action='version',
        version=f'simple-sign-url {__version__}'
    )
    parser.add_argument('--config', help='JSON configuration file (default: read SIGN_URL_* environment variables)')
    parser.add_argument('--secret-key', help='Secret key (overrides configuration)')
    parser.add_argument('--ttl', type=int, help='Time-to-live in seconds (overrides configuration)')
    parser.add_argument('--algorithm', help='Hash algorithm, e.g. sha512 (overrides configuration)')
    
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    sign_parser = subparsers.add_parser('sign', help='Sign a URL')
    sign_parser.add_argument('url', help='Full URL to sign (must not end with /)')
    sign_parser.add_argument('--method', default='GET', help='HTTP method the URL is valid for (default: GET)')
    
    verify_parser = subparsers.add_parser('verify', help='Verify a signed URL')
    verify_parser.add_argument('url', help='Signed URL to verify')
    verify_parser.add_argument('--method', default='GET', help='HTTP method of the request (default: GET)')
    
    return parser


def load_cli_settings(args) -> SignUrlSettings:
    """Load settings and apply command line overrides."""
    if args.config:
        settings = SignUrlSettings.from_file(args.config)
    else:
        environ = dict(os.environ)
        if args.secret_key:
            environ[f"{ENV_PREFIX}SECRET_KEY"] = args.secret_key
        settings = SignUrlSettings.from_env(environ)
    
    if args.secret_key:
        settings.secret_key = args.secret_key
    if args.ttl is not None:
        settings.ttl = args.ttl
    if args.algorithm:
        settings.algorithm = args.algorithm
    
    return settings


def handle_sign_command(args, settings: SignUrlSettings) -> int:
    """Handle sign command."""
    print(sign_url(settings.to_signer_config(), args.url, args.method))
    return 0


def handle_verify_command(args, settings: SignUrlSettings) -> int:
    """Handle verify command."""
    result = verify_url(settings.to_signer_config(), args.url, args.method)
    if result.is_valid:
        print(f"✓ {result.status.value}")
        return 0
    
    print(f"✗ {result.status.value}: {result.message}")
    return 1


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI
    
    Args:
        argv: Command line arguments (None to use sys.argv)
        
    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]
    
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if args.command is None:
        parser.print_help()
        return 1
    
    try:
        settings = load_cli_settings(args)
        settings.configure_logging()
        
        if args.command == 'sign':
            return handle_sign_command(args, settings)
        return handle_verify_command(args, settings)
        
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except SignUrlError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
