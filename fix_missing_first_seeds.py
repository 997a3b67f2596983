#!/usr/bin/env python3
"""
Move known-good seeds to the front of genres whose featured (first) seed
has no profile file, then rewrite the manifest.
"""

from __future__ import annotations

import sys
from typing import List, Tuple

from manifest_utils import (
    CONFIG,
    ManifestError,
    NodePath,
    apply_first_seed_fixes,
    load_manifest,
    save_manifest,
)

# (genre path, seed filename to feature first)
FIRST_SEED_FIXES: List[Tuple[NodePath, str]] = [
    (("country", "outlaw country"), "ryan-bingham_southside-of-heaven.json"),
    (("r&b / soul / funk", "r&b", "contemporary r&b"), "charlotte-day-wilson_work.json"),
]


def main() -> int:
    manifest_file = CONFIG['manifest_file']
    try:
        manifest = load_manifest(manifest_file)
        applied = apply_first_seed_fixes(manifest, FIRST_SEED_FIXES)
    except ManifestError as e:
        print(f"❌ ERROR: {e}", file=sys.stderr)
        print("Manifest left unchanged.", file=sys.stderr)
        return 1

    try:
        save_manifest(manifest_file, manifest)
    except OSError as e:
        print(f"❌ ERROR: cannot write manifest: {e}", file=sys.stderr)
        return 1

    print("✅ Fixed first seeds for:")
    for path, filename in applied:
        print(f"  - {path[-1]}: now {filename}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
