import json
from pathlib import Path
from typing import Any, Dict, Optional

import pytest

from contentful_local.client import create_client
from contentful_local.domain.models import Space

SPACE_ID = "cfexampleapi"
CHAIN_SPACE_ID = "chainspace"
CHAIN_LENGTH = 13


# ============================================================================
# Snapshot writers (mirror the layout maintained by the sync process)
# ============================================================================


def link(link_type: str, record_id: str) -> Dict[str, Any]:
    return {"sys": {"type": "Link", "linkType": link_type, "id": record_id}}


def _write_json(path: Path, data: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def write_space(space_dir: Path, locales: list, name: str = "Contentful Example API") -> None:
    _write_json(
        space_dir / "space.json",
        {"sys": {"type": "Space", "id": space_dir.name}, "name": name, "locales": locales},
    )


def write_entry(space_dir: Path, content_type: str, entry_id: str, fields: Dict[str, Any], created_at: Optional[str] = None) -> None:
    sys = {
        "type": "Entry",
        "id": entry_id,
        "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": content_type}},
    }
    if created_at:
        sys["createdAt"] = created_at
    document = {"sys": sys, "fields": fields}
    _write_json(space_dir / "entries" / content_type / f"{content_type}_{entry_id}.json", document)
    _write_json(space_dir / "entries" / ".all" / f"{entry_id}.json", document)


def write_asset(space_dir: Path, asset_id: str, fields: Dict[str, Any]) -> None:
    _write_json(space_dir / "assets" / f"{asset_id}.json", {"sys": {"type": "Asset", "id": asset_id}, "fields": fields})


def en(value: Any) -> Dict[str, Any]:
    return {"en-US": value}


EXAMPLE_LOCALES = [
    {"code": "en-US", "name": "English", "default": True},
    {"code": "tlh", "name": "Klingon", "default": False, "fallbackCode": "en-US"},
]


def build_example_space(root: Path) -> Path:
    space_dir = root / SPACE_ID
    write_space(space_dir, EXAMPLE_LOCALES)

    write_entry(
        space_dir, "cat", "nyancat",
        {
            "name": {"en-US": "Nyan Cat", "tlh": "Nyan vIghro'"},
            "likes": en(["rainbows", "fish"]),
            "color": en("rainbow"),
            "bestFriend": en(link("Entry", "happycat")),
            "birthday": en("2011-04-04T22:00:00+00:00"),
            "lives": en(1337),
            "image": en(link("Asset", "nyancat")),
        },
        created_at="2013-06-27T22:46:19.513Z",
    )
    write_entry(
        space_dir, "cat", "happycat",
        {
            "name": en("Happy Cat"),
            "likes": en(["cheezburger"]),
            "color": en("gray"),
            "bestFriend": en(link("Entry", "nyancat")),
            "birthday": en("2003-10-28T23:00:00+00:00"),
            "lives": en(1),
            "image": en(link("Asset", "happycat")),
        },
        created_at="2013-06-27T22:46:20.171Z",
    )
    write_entry(
        space_dir, "cat", "garfield",
        {
            "name": en("Garfield"),
            "likes": en(["lasagna"]),
            "color": en("orange"),
            "birthday": en("1979-06-18T23:00:00+00:00"),
            "lives": en(9),
            "image": en(link("Asset", "garfield")),
        },
        created_at="2013-06-27T22:46:20.821Z",
    )
    write_entry(
        space_dir, "dog", "jake",
        {
            "name": en("Jake"),
            "description": en("Bacon pancakes, makin' bacon pancakes."),
            "image": en(link("Asset", "jake")),
        },
        created_at="2013-06-27T22:46:21.450Z",
    )

    for asset_id, title in [("nyancat", "Nyan Cat"), ("happycat", "Happy Cat"), ("garfield", "Garfield"), ("jake", "Jake")]:
        write_asset(
            space_dir, asset_id,
            {
                "title": en(title),
                "file": en({"fileName": f"{asset_id}.png", "contentType": "image/png", "url": f"//images.example.net/{asset_id}.png"}),
            },
        )
    return space_dir


def build_chain_space(root: Path) -> Path:
    """node0 -> node1 -> ... -> node12, every node linking to the next."""
    space_dir = root / CHAIN_SPACE_ID
    write_space(space_dir, [{"code": "en-US", "name": "English", "default": True}], name="Chain")
    for index in range(CHAIN_LENGTH):
        fields = {"name": en(f"node{index}")}
        if index + 1 < CHAIN_LENGTH:
            fields["next"] = en(link("Entry", f"node{index + 1}"))
        write_entry(space_dir, "node", f"node{index}", fields)
    return space_dir


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    build_example_space(tmp_path)
    build_chain_space(tmp_path)
    return tmp_path


@pytest.fixture
def space_dir(data_root: Path) -> Path:
    return data_root / SPACE_ID


@pytest.fixture
def client(data_root: Path):
    return create_client(space=SPACE_ID, local_path=data_root)


@pytest.fixture
def chain_client(data_root: Path):
    return create_client(space=CHAIN_SPACE_ID, local_path=data_root)


@pytest.fixture
def example_space() -> Space:
    return Space.model_validate({"sys": {"id": SPACE_ID}, "name": "Example", "locales": EXAMPLE_LOCALES})
