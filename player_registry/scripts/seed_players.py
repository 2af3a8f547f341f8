#!/usr/bin/env python
"""Seed player records into the configured database from a JSONL file.

Every line is a JSON object using the API's camelCase keys (``name``,
``title``, ``race``, ``profession``, ``birthday`` in epoch milliseconds,
``banned``, ``experience``). Records go through :class:`PlayerService` so the
same bounds and level derivation apply as for ``POST /rest/players``.

Usage:
    python -m player_registry.scripts.seed_players [path_to_jsonl]
    python -m player_registry.scripts.seed_players ./data/fixtures/players.jsonl --limit 50
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from player_registry.db.connection import (
    get_async_session_context,
    get_database_type,
)
from player_registry.db.repositories import PlayerRepository
from player_registry.exceptions import ValidationFailed
from player_registry.main import validate_environment
from player_registry.schemas.player import PlayerCreate
from player_registry.services.player_service import PlayerService


async def seed_players(
    jsonl_path: Path,
    *,
    limit: int | None = None,
    dry_run: bool = False,
) -> tuple[int, int]:
    """Load players from ``jsonl_path``.

    Args:
        jsonl_path: Path to JSONL file with player data
        limit: Maximum number of players to load
        dry_run: If True, parse every line without inserting

    Returns:
        Tuple of (loaded_count, skipped_count)
    """
    if not jsonl_path.exists():
        print(f"❌ File not found: {jsonl_path}", file=sys.stderr)
        return 0, 0

    loaded_count = 0
    skipped_count = 0

    async with get_async_session_context() as session:
        service = PlayerService(PlayerRepository(session))

        with open(jsonl_path, encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                if limit and loaded_count >= limit:
                    break
                if not line.strip():
                    continue

                try:
                    payload = PlayerCreate.model_validate(json.loads(line))
                except (json.JSONDecodeError, ValidationError) as e:
                    print(f"❌ Line {line_num}: Invalid record: {e}", file=sys.stderr)
                    skipped_count += 1
                    continue

                if dry_run:
                    print(f"✓ Would load: {payload.name}")
                    loaded_count += 1
                    continue

                try:
                    await service.create_player(payload)
                except ValidationFailed as e:
                    print(f"⚠️  Line {line_num}: {e.message}, skipping")
                    skipped_count += 1
                    continue

                loaded_count += 1
                if loaded_count % 100 == 0:
                    await session.commit()
                    print(f"💾 Committed {loaded_count} players...")

        if not dry_run and session.in_transaction():
            await session.commit()

    return loaded_count, skipped_count


async def main() -> int:
    """CLI entry point."""
    validate_environment()

    parser = argparse.ArgumentParser(
        description="Seed player records from a JSONL file"
    )
    parser.add_argument(
        "jsonl_path",
        nargs="?",
        type=Path,
        default=Path("./data/fixtures/players.jsonl"),
        help="Path to JSONL file (default: ./data/fixtures/players.jsonl)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of players to load",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate data without inserting into database",
    )

    args = parser.parse_args()

    print(f"🗄️  Database type detected: {get_database_type().upper()}")
    print(f"📂 Seed source: {args.jsonl_path}")
    if args.limit:
        print(f"🔢 Limit: {args.limit} players")
    if args.dry_run:
        print("🔍 Dry run mode (no changes will be made)")
    print()

    loaded, skipped = await seed_players(
        args.jsonl_path, limit=args.limit, dry_run=args.dry_run
    )

    print()
    print("=" * 50)
    if args.dry_run:
        print(f"✓ Validated {loaded} players")
    else:
        print(f"✅ Loaded {loaded} players")
    if skipped > 0:
        print(f"⚠️  Skipped {skipped} records")
    print("=" * 50)

    return 0 if skipped == 0 else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
