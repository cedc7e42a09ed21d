"""Command line entry point for gdrivefetch."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Optional, Sequence

from gdrivefetch.auth import READONLY_SCOPE, AuthInfo
from gdrivefetch.errors import GDriveFetchError
from gdrivefetch.manager import GoogleDriveDownloader

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdrivefetch",
        description="Download Google Drive files and folders as JSON payloads.",
    )
    parser.add_argument(
        "--client-secrets",
        default=os.environ.get("GDRIVEFETCH_CLIENT_SECRETS", ""),
        help="OAuth client secrets JSON (env: GDRIVEFETCH_CLIENT_SECRETS)",
    )
    parser.add_argument(
        "--token-file",
        default=os.environ.get("GDRIVEFETCH_TOKEN_FILE", ""),
        help="OAuth token JSON, created on first run (env: GDRIVEFETCH_TOKEN_FILE)",
    )
    parser.add_argument(
        "--scopes",
        default=os.environ.get("GDRIVEFETCH_SCOPES", ""),
        help="Comma-separated OAuth scopes (env: GDRIVEFETCH_SCOPES)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    ls_cmd = sub.add_parser("ls", help="List the immediate children of a folder")
    ls_cmd.add_argument("folder_id")

    file_cmd = sub.add_parser("file", help="Download one file")
    file_cmd.add_argument("file_id")
    file_cmd.add_argument("-o", "--output", help="Write JSON here instead of stdout")

    folder_cmd = sub.add_parser("folder", help="Download a folder recursively")
    folder_cmd.add_argument("folder_id")
    folder_cmd.add_argument("-o", "--output", help="Write JSON here instead of stdout")

    return parser


def parse_scopes(raw: str) -> tuple[str, ...]:
    scopes = tuple(s.strip() for s in raw.split(",") if s.strip())
    return scopes or (READONLY_SCOPE,)


def run(args: argparse.Namespace, downloader: GoogleDriveDownloader) -> int:
    if args.command == "ls":
        for item in downloader.list_folder_contents(args.folder_id):
            print(f"{item.id}\t{item.mime_type or '-'}\t{item.name}")
        return 0

    payload: dict[str, Any]
    if args.command == "file":
        payload = downloader.download_single_file(args.file_id).to_payload()
    else:
        payload = downloader.download_folder(args.folder_id).to_payload()

    _write_json(payload, args.output)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        auth_info = AuthInfo(
            kind="oauth",
            data={
                "client_secrets_file": args.client_secrets,
                "token_file": args.token_file,
            },
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        downloader = GoogleDriveDownloader(auth_info, scopes=parse_scopes(args.scopes))
        return run(args, downloader)
    except GDriveFetchError as exc:
        print(f"gdrivefetch: {exc}", file=sys.stderr)
        return 1


def _write_json(payload: dict[str, Any], output: Optional[str]) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(payload, f)
        return
    json.dump(payload, sys.stdout)
    sys.stdout.write("\n")
