#!/usr/bin/env python3
"""
Rebuild every seed's profile filename from its artist and track name.

Exported profiles are named slugified-artist_slugified-song.json; older
manifests joined both halves with a hyphen, so the lookup never matched.
"""

from __future__ import annotations

import sys
from typing import List, Tuple

from manifest_utils import (
    CONFIG,
    ManifestError,
    Manifest,
    load_manifest,
    node_seeds,
    profile_filename,
    save_manifest,
    walk_nodes,
)


def fix_seed_filenames(manifest: Manifest) -> Tuple[List[Tuple[str, str]], int]:
    changes: List[Tuple[str, str]] = []
    already_correct = 0

    for _, node in walk_nodes(manifest):
        for seed in node_seeds(node):
            if not seed.get("artist") or not seed.get("name"):
                continue
            correct = profile_filename(seed["artist"], seed["name"])
            if seed.get("filename") == correct:
                already_correct += 1
                continue
            changes.append((seed.get("filename") or "MISSING", correct))
            seed["filename"] = correct

    return changes, already_correct

def main() -> int:
    manifest_file = CONFIG['manifest_file']
    try:
        manifest = load_manifest(manifest_file)
    except ManifestError as e:
        print(f"❌ ERROR: {e}", file=sys.stderr)
        return 1

    changes, already_correct = fix_seed_filenames(manifest)
    for old, new in changes:
        print(f"Fix: {old} -> {new}")

    try:
        save_manifest(manifest_file, manifest)
    except OSError as e:
        print(f"❌ ERROR: cannot write manifest: {e}", file=sys.stderr)
        return 1

    print(f"\n✅ Fixed {len(changes)} filenames")
    print(f"✓  {already_correct} filenames were already correct")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
