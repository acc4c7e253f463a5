"""Purge descriptions left behind by photos removed outside the API."""

from __future__ import annotations

import argparse

from photopool.application import PhotoMutations
from photopool.infrastructure import build_description_store, build_photo_storage, get_settings
from photopool.infrastructure.logging import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Remove sidecar descriptions with no backing photo")
    parser.add_argument("--dry-run", action="store_true", help="Report orphans without deleting them")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    mutations = PhotoMutations(build_photo_storage(settings), build_description_store(settings))
    orphans = mutations.purge_orphan_descriptions(dry_run=args.dry_run)

    verb = "Found" if args.dry_run else "Purged"
    print(f"{verb} {len(orphans)} orphan description(s) in {settings.upload_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
