from __future__ import annotations

import importlib
import sys
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "src" / "coach_desk"
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from coach_desk.config import get_settings_module
from coach_desk.database.bootstrap import initialize, list_tables


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    initialize(db_config)
    tables = list_tables(db_config)
    print(f"OK: schema ready -> {db_config.get('path')} (tables={len(tables)}: {', '.join(tables)})")


if __name__ == "__main__":
    main()
