from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import create_engine, inspect  # noqa: E402

from leadboard.config import build_sqlalchemy_db_url, settings  # noqa: E402
from leadboard.database import Base, mask_db_url  # noqa: E402
import leadboard.models  # noqa: F401,E402


def missing_tables(engine) -> list[str]:
    existing = set(inspect(engine).get_table_names())
    return [name for name in Base.metadata.tables if name not in existing]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the leadboard tables (skills, clients, members, opportunities).")
    parser.add_argument("--db-url", default=None, help="Defaults to the URL built from .env / environment.")
    parser.add_argument("--check", action="store_true", help="Only list the tables that are missing.")
    parser.add_argument(
        "--i-understand",
        action="store_true",
        help="Required for any non-sqlite target (shared MySQL databases).",
    )
    args = parser.parse_args(argv)

    url = args.db_url or build_sqlalchemy_db_url(settings)
    is_sqlite = url.startswith("sqlite")
    engine = create_engine(url, pool_pre_ping=True, connect_args={"check_same_thread": False} if is_sqlite else {})

    missing = missing_tables(engine)
    print(f"target={mask_db_url(url)} missing={','.join(missing) or '-'}")
    if args.check or not missing:
        return 0

    if not is_sqlite and not args.i_understand:
        print("Refusing DDL on a non-sqlite database without --i-understand.")
        return 2

    Base.metadata.create_all(bind=engine, tables=[Base.metadata.tables[name] for name in missing])
    print(f"created {len(missing)} table(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
