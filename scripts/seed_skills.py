from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    # Allow running as: python scripts/seed_skills.py
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import func  # noqa: E402

from leadboard.database import Base, SessionLocal, engine  # noqa: E402
from leadboard.models.skills import Skill  # noqa: E402


DEFAULT_SKILLS = [
    "React",
    "Next.js",
    "TypeScript",
    "Python",
    "Django",
    "Node.js",
    "PostgreSQL",
    "DevOps",
    "AWS",
    "UI/UX Design",
    "Mobile Development",
    "Data Analysis",
]


def _read_names(path: Path) -> list[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#")]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the skill vocabulary used for AI skill matching.")
    parser.add_argument("--file", default=None, help="Text file with one skill name per line")
    args = parser.parse_args(argv)

    names = _read_names(Path(args.file)) if args.file else list(DEFAULT_SKILLS)

    Base.metadata.create_all(bind=engine)

    inserted = 0
    skipped = 0
    with SessionLocal() as db:
        existing = {name.lower() for (name,) in db.query(func.lower(Skill.name)).all()}
        for name in names:
            key = name.lower()
            if key in existing:
                skipped += 1
                continue
            db.add(Skill(name=name))
            existing.add(key)
            inserted += 1
        db.commit()

    print(f"skills inserted={inserted} skipped={skipped}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
