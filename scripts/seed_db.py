from __future__ import annotations

import importlib
import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "src" / "coach_desk"
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from coach_desk.config import get_settings_module
from coach_desk.database.bootstrap import ensure_default_coach, initialize


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    coach_id = int(getattr(settings, "DEFAULT_COACH_ID", 1))

    initialize(db_config)
    created = ensure_default_coach(db_config, coach_id=coach_id)
    print(f"OK: default coach id={coach_id} {'created' if created else 'already present'} -> {db_config.get('path')}")


if __name__ == "__main__":
    main()
