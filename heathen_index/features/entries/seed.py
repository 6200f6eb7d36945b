"""Sample Norse mythology entries loaded into an empty store."""

import logging

from heathen_index.core.schemas import SYSTEM_ACTOR
from heathen_index.features.entries.dtos import Category, EntryCreate
from heathen_index.features.entries.storage import Storage

logger = logging.getLogger(__name__)

SAMPLE_ENTRIES: list[EntryCreate] = [
    EntryCreate(
        title="Odin",
        category=Category.DEITY,
        description=(
            "The All-Father and chief deity of the Norse pantheon, associated "
            "with wisdom, war, death, and poetry. Known for sacrificing his eye "
            "for knowledge and hanging from Yggdrasil for nine days and nights "
            "to discover the runes."
        ),
        related_terms=[
            "wisdom", "war", "ravens", "huginn", "muninn",
            "sleipnir", "gungnir", "valhalla", "asgard", "runes",
        ],
        sources=(
            "Snorri Sturluson - Prose Edda; Poetic Edda - Various poems including "
            "Völuspá and Hávamál; Saxo Grammaticus - Gesta Danorum"
        ),
    ),
    EntryCreate(
        title="Valhalla",
        category=Category.PLACE,
        description=(
            "The magnificent hall of the slain located in Asgard, ruled over by "
            "Odin. Warriors who die gloriously in battle are brought here by the "
            "Valkyries to feast and fight until Ragnarök."
        ),
        related_terms=[
            "afterlife", "warriors", "asgard", "odin",
            "valkyries", "einherjar", "ragnarok",
        ],
        sources="Prose Edda; Poetic Edda - Grímnismál; Heimskringla",
    ),
    EntryCreate(
        title="Mjölnir",
        category=Category.ARTIFACT,
        description=(
            "Thor's mighty hammer, forged by the dwarven brothers Brokkr and "
            "Eitri. It never misses its target and always returns to Thor's hand "
            "after being thrown. Symbol of protection and divine power."
        ),
        related_terms=[
            "thor", "lightning", "protection", "dwarves",
            "brokkr", "eitri", "jotuns", "giants",
        ],
        sources=(
            "Prose Edda - Skáldskaparmál; Poetic Edda - Þrymskviða; "
            "Archaeological evidence from Scandinavia"
        ),
    ),
    EntryCreate(
        title="Ragnarök",
        category=Category.CONCEPT,
        description=(
            "The prophesied end of the world in Norse mythology, involving a great "
            "battle between the gods and giants, leading to the death of major "
            "deities and the submersion of the world in water, followed by rebirth."
        ),
        related_terms=[
            "prophecy", "apocalypse", "rebirth", "fimbulwinter",
            "surtr", "fenrir", "jormungandr", "twilight-of-gods",
        ],
        sources="Prose Edda - Gylfaginning; Poetic Edda - Völuspá",
    ),
    EntryCreate(
        title="Freya",
        category=Category.DEITY,
        description=(
            "Goddess of love, beauty, fertility, war, and death. Sister of Freyr "
            "and one of the most venerated deities in Norse mythology. Associated "
            "with seidr magic and the afterlife realm Fólkvangr."
        ),
        related_terms=[
            "love", "fertility", "seidr", "folkvangr", "freyr",
            "vanir", "beauty", "magic", "cats",
        ],
        sources=(
            "Prose Edda; Poetic Edda; Heimskringla; "
            "Archaeological evidence from Sweden"
        ),
    ),
    EntryCreate(
        title="Yggdrasil",
        category=Category.PLACE,
        description=(
            "The immense sacred tree that connects the nine worlds in Norse "
            "cosmology. An ash tree that stands at the center of the cosmos, with "
            "roots extending into various realms and wells."
        ),
        related_terms=[
            "cosmology", "sacred", "nine-worlds", "world-tree",
            "wells", "norns", "urd", "verdandi", "skuld",
        ],
        sources="Prose Edda - Gylfaginning; Poetic Edda - Völuspá, Grímnismál",
    ),
]


async def seed_entries(
    storage: Storage, entries: list[EntryCreate] | None = None
) -> int:
    """Load sample entries when the store is empty.

    Returns:
        Number of entries created (0 when the store already had entries)
    """
    if await storage.count_entries() > 0:
        logger.info("Storage already has entries, skipping seed.")
        return 0

    entries = SAMPLE_ENTRIES if entries is None else entries
    for entry in entries:
        await storage.create_entry(entry, SYSTEM_ACTOR)

    logger.info("Seeded storage with %d entries.", len(entries))
    return len(entries)
