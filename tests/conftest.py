"""Shared fixtures: a small game-data document shaped like the cdragon feed."""

import pytest

from tft_notebook.api.services.notebook_service import NotebookService
from tft_notebook.core import StateFile
from tft_notebook.data.loaders import ingest

SET_INDEX = 1


def _component(api_name: str, name: str) -> dict:
    return {
        "apiName": api_name,
        "associatedTraits": [],
        "composition": [],
        "desc": f"{name} description",
        "effects": {"AD": 10},
        "from": None,
        "icon": f"ASSETS/Maps/Particles/TFT/Item_Icons/Standard/{api_name}.tex",
        "id": None,
        "incompatibleTraits": [],
        "name": name,
        "unique": False,
    }


def _completed(api_name: str, name: str, composition: list) -> dict:
    item = _component(api_name, name)
    item["composition"] = composition
    return item


def _champion(api_name: str, name: str, cost: int, traits: list) -> dict:
    return {
        "ability": {
            "desc": f"{name} ability",
            "icon": f"ASSETS/Characters/{api_name}/HUD/Icons2D/{api_name}_Spell.dds",
            "name": f"{name} Spell",
            "variables": [
                {"name": "Damage", "value": [0.0, 200.0, 300.0, 450.0]},
                {"name": "Unused", "value": None},
            ],
        },
        "apiName": api_name,
        "cost": cost,
        "name": name,
        "squareIcon": f"ASSETS/Characters/{api_name}/HUD/{api_name}_Square.TFT_Set8.tex",
        "stats": {
            "armor": 30.0,
            "attackSpeed": 0.7,
            "critChance": 0.25,
            "critMultiplier": 1.4,
            "damage": 50.0,
            "hp": 700.0,
            "initialMana": 20.0,
            "magicResist": 30.0,
            "mana": 80.0,
            "range": 4.0,
        },
        "traits": traits,
    }


def make_document() -> dict:
    """Build a fresh game-data document."""
    dummy = _champion("TFT8_TrainingDummy", "Training Dummy", 0, [])
    dummy["stats"].update(
        {"armor": None, "attackSpeed": None, "critChance": None, "damage": None, "hp": None}
    )
    dummy["ability"] = {"desc": None, "icon": None, "name": None, "variables": None}
    dummy["squareIcon"] = None

    return {
        "items": [
            _component("TFT_Item_BFSword", "B.F. Sword"),
            _component("TFT_Item_SparringGloves", "Sparring Gloves"),
            _component("TFT_Item_RecurveBow", "Recurve Bow"),
            _component("TFT_Item_NeedlesslyLargeRod", "Needlessly Large Rod"),
            _component("TFT_Item_ChainVest", "Chain Vest"),
            _completed(
                "TFT_Item_Deathblade", "Deathblade",
                ["TFT_Item_BFSword", "TFT_Item_BFSword"],
            ),
            _completed(
                "TFT_Item_InfinityEdge", "Infinity Edge",
                ["TFT_Item_BFSword", "TFT_Item_SparringGloves"],
            ),
            _completed(
                "TFT_Item_GuinsoosRageblade", "Guinsoo's Rageblade",
                ["TFT_Item_RecurveBow", "TFT_Item_NeedlesslyLargeRod"],
            ),
            _completed(
                "TFT_Item_RabadonsDeathcap", "Rabadon's Deathcap",
                ["TFT_Item_NeedlesslyLargeRod", "TFT_Item_NeedlesslyLargeRod"],
            ),
            _completed(
                "TFT_Item_BrambleVest", "Bramble Vest",
                ["TFT_Item_ChainVest", "TFT_Item_ChainVest"],
            ),
            # Older generations, broken placeholders and tutorial items.
            _completed(
                "TFT5_Item_DeathbladeRadiant", "Radiant Deathblade",
                ["TFT_Item_BFSword", "TFT_Item_BFSword"],
            ),
            _completed(
                "TFT7_Item_ShimmerscaleGamblersBlade", "Gambler's Blade",
                ["TFT_Item_RecurveBow", "TFT_Item_BFSword"],
            ),
            _completed(
                "TFT_Item_Unused", "tft_item_name_Unused",
                ["TFT_Item_ChainVest", "TFT_Item_NeedlesslyLargeRod"],
            ),
            _completed(
                "TFT_Item_TutorialBlade", "Training Blade",
                ["TFT_Tutorial_Sword", "TFT_Item_BFSword"],
            ),
            {
                "apiName": "TFT_Item_EmptyBag",
                "associatedTraits": None,
                "composition": [],
                "desc": None,
                "effects": None,
                "icon": None,
                "incompatibleTraits": None,
                "name": None,
                "unique": None,
            },
        ],
        "setData": [
            {"champions": [_champion("TFT8_Ahri", "Ahri", 4, ["Spellslinger"])], "mutator": "TFTSet8"},
            {
                "champions": [
                    _champion("TFT8_Ahri", "Ahri", 4, ["Spellslinger", "Star Guardian"]),
                    _champion("TFT8_Garen", "Garen", 1, ["Mecha:PRIME", "Defender"]),
                    dummy,
                    _champion("TFT8_Jinx", "Jinx", 3, ["Gadgeteen", "Prankster"]),
                ],
                "mutator": "TFTSet8_Stage2",
            },
        ],
    }


@pytest.fixture
def document():
    """Raw game-data document."""
    return make_document()


@pytest.fixture
def catalog(document):
    """Catalog ingested from the sample document."""
    return ingest(document, SET_INDEX)


@pytest.fixture
def state_file(tmp_path):
    """State file inside a temporary data directory."""
    return StateFile(tmp_path / "data" / "champ_info.json")


@pytest.fixture
def service(catalog, state_file):
    """Fresh notebook session without an icon cache."""
    return NotebookService(catalog, state_file)
