import json

import pytest

import manifest_utils


def make_seed(filename, artist="Some Artist", name="Some Song"):
    return {"uri": f"spotify:track:{filename}", "filename": filename, "artist": artist, "name": name}


@pytest.fixture
def manifest():
    return {
        "country": {
            "seeds": [make_seed("johnny-cash_ring-of-fire.json", "Johnny Cash", "Ring of Fire")],
            "subgenres": {
                "outlaw country": {
                    "seeds": [
                        make_seed("a.json", "Waylon Jennings", "Luckenbach, Texas"),
                        make_seed("ryan-bingham_southside-of-heaven.json", "Ryan Bingham", "Southside of Heaven"),
                        make_seed("b.json", "Willie Nelson", "Whiskey River"),
                    ],
                },
                "bluegrass": {
                    "seeds": [make_seed("bill-monroe_blue-moon-of-kentucky.json", "Bill Monroe", "Blue Moon of Kentucky")],
                },
            },
        },
        "r&b / soul / funk": {
            "subgenres": {
                "r&b": {
                    "subgenres": {
                        "contemporary r&b": {
                            "seeds": [
                                make_seed("sza_good-days.json", "SZA", "Good Days"),
                                make_seed("charlotte-day-wilson_work.json", "Charlotte Day Wilson", "Work"),
                            ],
                        },
                        "quiet storm": {
                            "seeds": [
                                make_seed("sade_no-ordinary-love.json", "Sade", "No Ordinary Love"),
                                make_seed("al-green_love-and-happiness.json", "Al Green", "Love and Happiness"),
                            ],
                        },
                    },
                },
            },
        },
        "electronic": {
            "subgenres": {
                "techno": {
                    "seeds": [
                        make_seed("jeff-mills_the-bells.json", "Jeff Mills", "The Bells"),
                        make_seed("moderat_a-new-error.json", "Moderat", "A New Error"),
                    ],
                },
            },
        },
        "latin": {
            "seeds": [make_seed("shakira_hips-dont-lie.json", "Shakira", "Hips Don't Lie")],
            "subgenres": {
                "Classic Dance": {
                    "seeds": [
                        make_seed("celia-cruz_la-vida-es-un-carnaval.json", "Celia Cruz", "La Vida Es Un Carnaval"),
                        make_seed("tito-puente_oye-como-va.json", "Tito Puente", "Oye Como Va"),
                    ],
                },
            },
        },
        "global": {"features": {"energy": 0.61}, "median_year": 2004},
        "build": {"schema_version": "1", "dataset_id": "prepped_v7_2025-11-04"},
    }


@pytest.fixture
def manifest_file(tmp_path, manifest, monkeypatch):
    path = tmp_path / "genre_constellation_manifest.json"
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    monkeypatch.setitem(manifest_utils.CONFIG, "manifest_file", str(path))
    return path


@pytest.fixture
def profiles_dir(tmp_path, monkeypatch):
    path = tmp_path / "profiles"
    path.mkdir()
    monkeypatch.setitem(manifest_utils.CONFIG, "profiles_dir", str(path))
    return path


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))


def write_json(path, data):
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
