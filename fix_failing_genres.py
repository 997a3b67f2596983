#!/usr/bin/env python3
"""
Repair genres that cannot launch because their first seed has no profile:
feature a seed that does, or borrow the featured seed of a subgenre.
"""

from __future__ import annotations

import sys
from typing import List, Sequence, Tuple

from manifest_utils import (
    CONFIG,
    ManifestError,
    Manifest,
    NodePath,
    Seed,
    SeedNotFoundError,
    apply_first_seed_fixes,
    format_path,
    load_manifest,
    move_seed_to_front,
    resolve_node,
    resolve_seeds,
    save_manifest,
)

FAILING_GENRE_FIXES: List[Tuple[NodePath, str]] = [
    (("electronic", "techno"), "moderat_a-new-error.json"),
    (("r&b / soul / funk", "r&b", "quiet storm"), "al-green_love-and-happiness.json"),
]

# (parent path, subgenre whose featured seed the parent borrows)
SUBGENRE_PROMOTIONS: List[Tuple[NodePath, str]] = [
    (("latin",), "Classic Dance"),
]


def promote_subgenre_seed(manifest: Manifest, path: Sequence[str], subgenre: str) -> Seed:
    source = resolve_seeds(manifest, tuple(path) + (subgenre,))
    if not source:
        raise SeedNotFoundError(
            f"{format_path(tuple(path) + (subgenre,))} has no seeds to promote")
    seed = source[0]

    node = resolve_node(manifest, path)
    seeds = node.get("seeds")
    if not isinstance(seeds, list):
        seeds = node["seeds"] = []
    try:
        move_seed_to_front(seeds, seed["filename"])
    except SeedNotFoundError:
        seeds.insert(0, seed)
    return seed

def main() -> int:
    manifest_file = CONFIG['manifest_file']
    try:
        manifest = load_manifest(manifest_file)
        fixed = apply_first_seed_fixes(manifest, FAILING_GENRE_FIXES)
        for path, subgenre in SUBGENRE_PROMOTIONS:
            seed = promote_subgenre_seed(manifest, path, subgenre)
            fixed.append((path, seed["filename"]))
    except ManifestError as e:
        print(f"❌ ERROR: {e}", file=sys.stderr)
        print("Manifest left unchanged.", file=sys.stderr)
        return 1

    try:
        save_manifest(manifest_file, manifest)
    except OSError as e:
        print(f"❌ ERROR: cannot write manifest: {e}", file=sys.stderr)
        return 1

    print("✅ Fixed failing genres:")
    for path, filename in fixed:
        print(f"  - {path[-1]}: now {filename}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
