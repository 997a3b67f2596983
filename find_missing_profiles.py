#!/usr/bin/env python3
"""
Find seeds in the manifest whose profile file is missing from the profiles
directory.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Sequence

from manifest_utils import (
    CONFIG,
    ManifestError,
    Seed,
    collect_all_seeds,
    load_manifest,
    profile_exists,
    unique_by_filename,
)

ProfileAudit = Dict[str, Any]

def audit_missing_profiles(seeds: Sequence[Seed], profile_dir: str) -> ProfileAudit:
    """Check each distinct seed filename against ``profile_dir``.

    Returns a dict with ``checked`` (distinct filenames examined),
    ``missing`` (seeds without a file, in encounter order) and ``unchecked``
    (``(seed, error)`` pairs whose existence could not be determined).
    """
    missing: List[Seed] = []
    unchecked = []
    unique = unique_by_filename(seeds)

    for seed in unique:
        try:
            exists = profile_exists(profile_dir, seed.get("filename"))
        except OSError as e:
            unchecked.append((seed, e))
            continue
        if not exists:
            missing.append(seed)

    return {"checked": len(unique), "missing": missing, "unchecked": unchecked}

def format_missing_report(audit: ProfileAudit) -> str:
    lines: List[str] = [f"Missing {len(audit['missing'])} profile files:", ""]
    for seed in audit["missing"]:
        lines.append(f"  {seed.get('filename') or 'MISSING'}")
        lines.append(f"    {seed.get('artist')} - {seed.get('name')}")

    if audit["unchecked"]:
        lines.append("")
        lines.append(f"Could not check {len(audit['unchecked'])} profile files:")
        for seed, err in audit["unchecked"]:
            lines.append(f"  {seed.get('filename') or 'MISSING'}")
            lines.append(f"    {err}")

    return "\n".join(lines)

def main() -> int:
    try:
        manifest = load_manifest(CONFIG['manifest_file'])
    except ManifestError as e:
        print(f"❌ ERROR: {e}", file=sys.stderr)
        return 1

    audit = audit_missing_profiles(collect_all_seeds(manifest), CONFIG['profiles_dir'])
    print(format_missing_report(audit))

    return 1 if audit["unchecked"] else 0

if __name__ == "__main__":
    raise SystemExit(main())
