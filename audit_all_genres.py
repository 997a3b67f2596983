#!/usr/bin/env python3
"""
Audit which genres can launch: a genre launches from its first seed, so that
seed's profile file has to exist.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List

from manifest_utils import (
    CONFIG,
    ManifestError,
    Manifest,
    format_path,
    load_manifest,
    node_seeds,
    profile_exists,
    walk_nodes,
)

LaunchCheck = Dict[str, Any]


def audit_launchable(manifest: Manifest, profile_dir: str) -> List[LaunchCheck]:
    results: List[LaunchCheck] = []
    for path, node in walk_nodes(manifest):
        seeds = node_seeds(node)
        if not seeds:
            continue
        first = seeds[0]
        results.append({
            "path": format_path(path),
            "filename": first.get("filename"),
            "artist": first.get("artist"),
            "name": first.get("name"),
            "exists": profile_exists(profile_dir, first.get("filename")),
        })
    return results

def format_launch_report(results: List[LaunchCheck]) -> str:
    missing = [r for r in results if not r["exists"]]
    working = [r for r in results if r["exists"]]

    lines: List[str] = [
        "",
        "📊 AUDIT RESULTS:",
        f"✅ {len(working)} genres can launch",
        f"❌ {len(missing)} genres CANNOT launch",
        "",
    ]
    if missing:
        lines.append("❌ GENRES THAT CANNOT LAUNCH:")
        lines.append("")
        for r in missing:
            lines.append(f"  {r['path']}")
            lines.append(f"    Missing: {r['filename'] or 'MISSING'}")
            lines.append(f"    Track: {r['artist']} - {r['name']}")
            lines.append("")
    return "\n".join(lines)

def main() -> int:
    try:
        manifest = load_manifest(CONFIG['manifest_file'])
    except ManifestError as e:
        print(f"❌ ERROR: {e}", file=sys.stderr)
        return 1

    try:
        results = audit_launchable(manifest, CONFIG['profiles_dir'])
    except OSError as e:
        print(f"❌ ERROR: cannot check profiles: {e}", file=sys.stderr)
        return 1
    print(format_launch_report(results))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
