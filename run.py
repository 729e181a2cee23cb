#!/usr/bin/env python3
"""
Command-line entry point for uploading and downloading single files.

Usage:
    python run.py upload ./report.pdf --owner octo --repo docs --remote-dir archive
    python run.py download --owner octo --repo docs --path archive/report.pdf
    python run.py download --url https://raw.githubusercontent.com/octo/docs/main/archive/report.pdf

Environment variables:
    GITHUB_TOKEN: Token used when --token is not given
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from application.services.github.transfer import RemoteFileTransferClient
from common.config.config import GITHUB_TOKEN
from common.constants import DEFAULT_COMMIT_MESSAGE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Upload and download single files through the GitHub contents API"
    )
    parser.add_argument('--token', default=None, help='GitHub token (defaults to GITHUB_TOKEN)')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    upload_parser = subparsers.add_parser('upload', help='Upload a local file')
    upload_parser.add_argument('local_path', help='Path of the file to upload')
    upload_parser.add_argument('--owner', required=True, help='Repository owner')
    upload_parser.add_argument('--repo', required=True, help='Repository name')
    upload_parser.add_argument(
        '--remote-dir',
        default='',
        help='Directory in the repository (default: repository root)'
    )
    upload_parser.add_argument('--message', default=DEFAULT_COMMIT_MESSAGE, help='Commit message')
    upload_parser.add_argument('--branch', default=None, help='Target branch')

    download_parser = subparsers.add_parser('download', help='Download a remote file')
    source = download_parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--path', help='File path in the repository (needs --owner and --repo)')
    source.add_argument('--url', help='Direct download URL (no authentication)')
    download_parser.add_argument('--owner', help='Repository owner')
    download_parser.add_argument('--repo', help='Repository name')
    download_parser.add_argument('--ref', default=None, help='Branch, tag or commit to read from')
    download_parser.add_argument(
        '--output',
        default=None,
        help='Local file (default: remote file name in the current directory)'
    )

    return parser


def validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Fill in the token and reject incomplete argument combinations."""
    if args.command == 'download' and args.url:
        return

    if args.command == 'download' and (not args.owner or not args.repo):
        parser.error("--path requires --owner and --repo")

    args.token = args.token or GITHUB_TOKEN
    if not args.token:
        parser.error("a token is required: pass --token or set GITHUB_TOKEN")


async def run_command(args: argparse.Namespace) -> bool:
    client = RemoteFileTransferClient()

    if args.command == 'upload':
        result = await client.upload_file(
            token=args.token,
            owner=args.owner,
            repository=args.repo,
            local_path=args.local_path,
            remote_dir=args.remote_dir,
            message=args.message,
            branch=args.branch,
        )
        if result is None:
            return False
        print(f"Uploaded {result.path}")
        if result.download_url:
            print(f"Download URL: {result.download_url}")
        return True

    if args.url:
        return await client.download_from_url(args.url, args.output)

    return await client.download_from_repository(
        token=args.token,
        owner=args.owner,
        repository=args.repo,
        remote_path=args.path,
        destination=args.output,
        ref=args.ref,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    validate_args(parser, args)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    ok = asyncio.run(run_command(args))
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
