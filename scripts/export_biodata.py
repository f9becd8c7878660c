"""Write the biodata CSV to disk.

Note: Uses the same export service as the web app, loading the seed roster.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "r3_academy"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from r3_academy.container import build_container


def main(out_dir: Optional[Path] = None) -> Path:
    settings = importlib.import_module(get_settings_module())
    container = build_container()

    export = container.export_service.biodata()

    out_dir = out_dir or REPO_ROOT / "exports"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / export.filename
    out_file.write_bytes(export.to_bytes(include_header=bool(getattr(settings, "CSV_INCLUDE_HEADER", False))))

    print(f"OK: Biodata exported: {out_file} ({len(export.rows)} students)")
    return out_file


if __name__ == "__main__":
    main()
