# manifest_utils.py
# Shared helpers for the genre constellation manifest maintenance scripts:
# loading and saving, walking the genre tree, addressing nodes by path,
# and reordering seed arrays.

from __future__ import annotations

import json
import os
import re
from typing import Any, Dict, Iterator, List, Sequence, Tuple

# ============================================================
# Types
# ============================================================

Seed = Dict[str, Any]
GenreNode = Dict[str, Any]
Manifest = Dict[str, Any]
NodePath = Tuple[str, ...]

# ============================================================
# Config
# ============================================================

CONFIG = {
    # File paths, relative to the project root
    'manifest_file': 'public/genre_constellation_manifest.json',
    'profiles_dir': 'public/profiles',

    # Top-level keys that hold build metadata rather than genres
    'reserved_keys': ('global', 'build'),
}

# ============================================================
# Errors
# ============================================================

class ManifestError(Exception):
    """Base class for problems with the manifest document."""


class ManifestLoadError(ManifestError):
    """The manifest file is missing, unreadable or not a JSON object."""


class ManifestPathError(ManifestError, LookupError):
    """A genre path does not lead to a node in the manifest."""


class SeedNotFoundError(ManifestError, LookupError):
    """A seed filename is not present in the addressed seed array."""

# ============================================================
# IO helpers
# ============================================================

def load_manifest(path: str) -> Manifest:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestLoadError(f"Cannot read manifest {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestLoadError(f"Manifest {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ManifestLoadError(f"Manifest {path} must be a JSON object")
    return data

def save_manifest(path: str, manifest: Manifest) -> None:
    # A failed write leaves the previous manifest in place
    tmp_path = path + ".tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(manifest, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

# ============================================================
# Traversal
# ============================================================

def iter_genre_roots(manifest: Manifest) -> Iterator[Tuple[str, GenreNode]]:
    reserved = CONFIG['reserved_keys']
    for name, node in manifest.items():
        if name in reserved or not isinstance(node, dict):
            continue
        yield name, node

def node_seeds(node: GenreNode) -> List[Seed]:
    return node.get("seeds") or []

def node_subgenres(node: GenreNode) -> Dict[str, GenreNode]:
    return node.get("subgenres") or {}

def collect_seeds(node: GenreNode) -> List[Seed]:
    """Flatten every seed reachable from ``node``.

    The node's own seeds come first, then each subgenre's seeds in mapping
    order, recursively.
    """
    seeds: List[Seed] = list(node_seeds(node))
    for child in node_subgenres(node).values():
        if not isinstance(child, dict):
            continue
        seeds.extend(collect_seeds(child))
    return seeds

def collect_all_seeds(manifest: Manifest) -> List[Seed]:
    all_seeds: List[Seed] = []
    for _, node in iter_genre_roots(manifest):
        all_seeds.extend(collect_seeds(node))
    return all_seeds

def walk_nodes(manifest: Manifest) -> Iterator[Tuple[NodePath, GenreNode]]:
    """Yield ``(path, node)`` for every genre node in pre-order."""
    def walk(path: NodePath, node: GenreNode) -> Iterator[Tuple[NodePath, GenreNode]]:
        yield path, node
        for child_name, child in node_subgenres(node).items():
            if not isinstance(child, dict):
                continue
            yield from walk(path + (child_name,), child)

    for name, node in iter_genre_roots(manifest):
        yield from walk((name,), node)

def unique_by_filename(seeds: Sequence[Seed]) -> List[Seed]:
    # First occurrence of each filename wins
    out: List[Seed] = []
    seen = set()
    for seed in seeds:
        filename = seed.get("filename")
        if filename in seen:
            continue
        seen.add(filename)
        out.append(seed)
    return out

def format_path(path: Sequence[str]) -> str:
    return " > ".join(path)

# ============================================================
# Path resolution
# ============================================================

def resolve_node(manifest: Manifest, path: Sequence[str]) -> GenreNode:
    """Follow a genre name then subgenre names down to a node.

    Raises ManifestPathError naming the first segment that does not exist.
    """
    if not path:
        raise ManifestPathError("Empty genre path")

    root_name = path[0]
    if root_name in CONFIG['reserved_keys']:
        raise ManifestPathError(f"'{root_name}' is not a genre")
    node = manifest.get(root_name)
    if not isinstance(node, dict):
        raise ManifestPathError(
            f"Genre '{root_name}' not found (path: {format_path(path)})")

    for depth, segment in enumerate(path[1:], start=1):
        children = node.get("subgenres")
        child = children.get(segment) if isinstance(children, dict) else None
        if not isinstance(child, dict):
            raise ManifestPathError(
                f"Subgenre '{segment}' not found under {format_path(path[:depth])}"
                f" (path: {format_path(path)})")
        node = child
    return node

def resolve_seeds(manifest: Manifest, path: Sequence[str]) -> List[Seed]:
    """Return the live seed list of the node at ``path``."""
    node = resolve_node(manifest, path)
    seeds = node.get("seeds")
    if not isinstance(seeds, list):
        raise ManifestPathError(f"{format_path(path)} has no seed list")
    return seeds

# ============================================================
# Reordering
# ============================================================

def find_seed_index(seeds: Sequence[Seed], filename: str) -> int:
    for idx, seed in enumerate(seeds):
        if seed.get("filename") == filename:
            return idx
    raise SeedNotFoundError(f"Seed {filename} not found")

def move_seed_to_front(seeds: List[Seed], filename: str) -> Seed:
    """Move the seed with ``filename`` to index 0 of ``seeds`` in place.

    Every other seed keeps its relative order. Raises SeedNotFoundError and
    leaves the list untouched when the filename is absent.
    """
    idx = find_seed_index(seeds, filename)
    seed = seeds.pop(idx)
    seeds.insert(0, seed)
    return seed

def apply_first_seed_fixes(manifest: Manifest,
                           fixes: Sequence[Tuple[NodePath, str]]) -> List[Tuple[NodePath, str]]:
    applied: List[Tuple[NodePath, str]] = []
    for path, filename in fixes:
        seeds = resolve_seeds(manifest, path)
        try:
            move_seed_to_front(seeds, filename)
        except SeedNotFoundError as e:
            raise SeedNotFoundError(f"{e} in {format_path(path)}") from None
        applied.append((path, seeds[0]["filename"]))
    return applied

# ============================================================
# Filenames
# ============================================================

_APOSTROPHES = re.compile(r"['’]")
_NON_SLUG = re.compile(r"[^a-z0-9]+")

def slugify(text: str) -> str:
    s = _APOSTROPHES.sub("", (text or "").lower())
    s = _NON_SLUG.sub("-", s)
    return s.strip("-")

def profile_filename(artist: str, track_name: str) -> str:
    """Expected filename for an exported track profile."""
    return f"{slugify(artist)}_{slugify(track_name)}.json"

# ============================================================
# Profile files
# ============================================================

def profile_exists(profile_dir: str, filename: Any) -> bool:
    if not isinstance(filename, str) or not filename:
        return False
    # Anything other than "not found" propagates so it is never read as present
    try:
        os.stat(os.path.join(profile_dir, filename))
    except FileNotFoundError:
        return False
    return True
