"""Ingredient catalogue: magimint contents, categories, prices and traits."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class IngredientCategory(IntEnum):
    """Shop category an ingredient belongs to."""

    SLIME = 0
    PLANT = 1
    FLOWER = 2
    FRUIT = 3
    FUNGUS = 4
    BUG = 5
    FISH = 6
    FLESH = 7
    BONE = 8
    MINERAL = 9
    ESSENCE = 10
    GEM = 11
    ORE = 12
    PURE_MANA = 13


class TraitType(IntEnum):
    """Sensory trait an ingredient may affect."""

    TASTE = 0
    SENSATION = 1
    AROMA = 2
    VISUAL = 3
    SOUND = 4

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Trait:
    """A trait together with whether the ingredient affects it well or badly."""

    trait: TraitType
    is_good: bool


@dataclass(frozen=True)
class Ingredient:
    """A purchasable ingredient with its five magimint amounts (A to E)."""

    magimints: tuple[int, int, int, int, int]
    category: IngredientCategory
    name: str
    price: int
    traits: tuple[Trait, ...] = field(default_factory=tuple)

    def trait_vector(self) -> tuple[int, int, int, int, int]:
        """Per-trait marks: 1 for good, -1 for bad, 0 for untouched."""
        vector = [0] * len(TraitType)
        for trait in self.traits:
            vector[trait.trait] = 1 if trait.is_good else -1
        return tuple(vector)  # type: ignore[return-value]


def _parse_traits(spec: str) -> tuple[Trait, ...]:
    """Turn a spec such as '-Sensation +Visual' into traits."""
    return tuple(
        Trait(TraitType[word[1:].upper()], word[0] == "+") for word in spec.split()
    )


_C = IngredientCategory

_CATALOG = [
    # Slime
    (_C.SLIME, "Sack of Slime", 7, (0, 0, 6, 0, 0), ""),
    (_C.SLIME, "Cubic Ooze", 16, (3, 3, 3, 0, 0), ""),
    (_C.SLIME, "Sack of Hive Slime", 21, (0, 0, 18, 0, 0), ""),
    (_C.SLIME, "Antlered Jelly", 28, (30, 0, 0, 0, 0), "-Sensation +Visual"),
    (_C.SLIME, "Sack of Composite Slime", 36, (0, 0, 30, 0, 0), ""),
    (_C.SLIME, "Bubble Ooze", 60, (9, 9, 12, 12, 0), ""),
    (_C.SLIME, "Feathered Gelatin", 62, (0, 0, 0, 48, 0), "+Sensation -Aroma"),
    (_C.SLIME, "Shelled Pudding", 90, (32, 0, 0, 32, 0), ""),
    (_C.SLIME, "Copper Dollop", 95, (15, 15, 15, 15, 0), ""),
    (_C.SLIME, "Bedazzled Custard", 95, (0, 0, 44, 0, 22), "+Visual"),
    (_C.SLIME, "Silver Dollop", 138, (24, 24, 24, 24, 0), ""),
    (_C.SLIME, "Gold Dollop", 176, (33, 33, 33, 33, 0), ""),
    # Plant
    (_C.PLANT, "Mandrake Root", 6, (0, 6, 0, 0, 0), ""),
    (_C.PLANT, "Bog Beet", 27, (0, 27, 0, 0, 0), "-Taste +Sound"),
    (_C.PLANT, "Reef Radish", 32, (0, 30, 0, 0, 0), "-Taste +Sound"),
    (_C.PLANT, "Mandragon Root", 34, (0, 30, 0, 0, 0), ""),
    (_C.PLANT, "Acid Rutabaga", 54, (0, 48, 0, 0, 0), "-Taste +Sound"),
    (_C.PLANT, "Widowmaker Pepper", 999999, (0, 44, 0, 44, 0), ""),
    (_C.PLANT, "Daredevil Pepper", 90, (0, 32, 0, 32, 0), ""),
    (_C.PLANT, "Mosquito Plant", 105, (10, 0, 20, 0, 30), ""),
    (_C.PLANT, "Squid Vine", 135, (20, 20, 15, 0, 15), ""),
    (_C.PLANT, "Acid Pitfall Plant", 145, (16, 0, 40, 0, 40), ""),
    (_C.PLANT, "Harpy's Snare", 150, (24, 24, 24, 0, 24), ""),
    (_C.PLANT, "Barracuda Plant", 172, (22, 0, 55, 0, 55), ""),
    # Flower
    (_C.FLOWER, "Fairy Flower Bulb", 14, (4, 0, 0, 0, 0), "+Aroma"),
    (_C.FLOWER, "Wraith Orchid", 19, (0, 0, 0, 12, 0), ""),
    (_C.FLOWER, "Fairy Flower Bud", 23, (12, 0, 0, 0, 0), "+Aroma"),
    (_C.FLOWER, "Ghostlight Bloom", 28, (18, 0, 0, 6, 0), ""),
    (_C.FLOWER, "Fairy Flower Bloom", 35, (20, 0, 0, 0, 0), "+Aroma"),
    (_C.FLOWER, "Bramble-Rose", 45, (16, 0, 0, 0, 0), "+Sensation +Sound"),
    (_C.FLOWER, "Inverted Bramble-Rose", 46, (22, 0, 0, 0, 0), "+Sensation +Sound"),
    (_C.FLOWER, "Fire Flower", 55, (40, 0, 0, 20, 0), "-Aroma"),
    (_C.FLOWER, "Djinn Blossom", 68, (24, 0, 0, 8, 0), "+Taste +Aroma"),
    (_C.FLOWER, "Courtier's Orchid", 72, (8, 24, 24, 0, 0), "+Aroma"),
    (_C.FLOWER, "Watchdog Daisy", 83, (0, 16, 0, 48, 0), ""),
    (_C.FLOWER, "Orchid of the Ice Princess", 116, (11, 33, 0, 33, 0), "+Aroma"),
    # Fruit
    (_C.FRUIT, "Feyberry", 4, (6, 0, 0, 0, 0), ""),
    (_C.FRUIT, "Puckberry", 16, (18, 0, 0, 0, 0), ""),
    (_C.FRUIT, "Figment Pomme", 26, (0, 18, 6, 0, 0), ""),
    (_C.FRUIT, "Bogeyberry", 30, (30, 0, 0, 0, 0), ""),
    (_C.FRUIT, "Saltwatermelon", 44, (0, 0, 0, 40, 0), "-Visual"),
    (_C.FRUIT, "Phantom Pomme", 64, (0, 10, 30, 0, 0), "+Taste -Sound"),
    (_C.FRUIT, "Rottermelon", 68, (0, 0, 0, 64, 0), "-Visual"),
    (_C.FRUIT, "Nightmare Pomme", 72, (0, 33, 11, 0, 0), "+Visual +Sound"),
    (_C.FRUIT, "Daydream Pomme", 75, (0, 24, 8, 0, 0), "+Visual +Sound"),
    (_C.FRUIT, "Geode Citrus", 94, (0, 16, 0, 0, 48), ""),
    (_C.FRUIT, "Slaughtermelon", 105, (0, 0, 0, 76, 0), "-Visual"),
    (_C.FRUIT, "Dragonegg Citrus", 124, (0, 22, 0, 0, 66), ""),
    (_C.FRUIT, "Charredonnay", 260, (48, 0, 48, 24, 24), "-Taste"),
    # Fungus
    (_C.FUNGUS, "Impstool Mushroom", 17, (0, 4, 0, 0, 0), "+Sensation"),
    (_C.FUNGUS, "Trollstool Mushroom", 20, (0, 12, 0, 0, 0), "+Sensation"),
    (_C.FUNGUS, "Miasma Spore", 30, (0, 18, 0, 6, 0), ""),
    (_C.FUNGUS, "Hallucinatory Shroom", 36, (0, 0, 30, 0, 0), "+Taste -Sound"),
    (_C.FUNGUS, "Giantstool Mushroom", 40, (0, 20, 0, 0, 0), "+Sensation"),
    (_C.FUNGUS, "Delirium Shroom", 63, (0, 0, 48, 0, 0), "+Taste -Sound"),
    (_C.FUNGUS, "Creeping Mildew", 92, (16, 0, 0, 0, 48), ""),
    (_C.FUNGUS, "Medusa Spore", 94, (0, 48, 0, 16, 0), "-Taste +Aroma"),
    (_C.FUNGUS, "Shallow Grave Enoki", 200, (32, 64, 64, 32, 0), "-Sensation -Aroma"),
    # Bug
    (_C.BUG, "Rotfly Larva", 10, (0, 0, 4, 0, 0), "+Taste"),
    (_C.BUG, "Rotfly Cocoon", 25, (0, 0, 12, 0, 0), "+Taste"),
    (_C.BUG, "Sphinx Flea", 35, (12, 6, 0, 0, 0), "+Sensation"),
    (_C.BUG, "Rotfly Adult", 38, (0, 0, 20, 0, 0), "+Taste"),
    (_C.BUG, "Selkie Lice", 50, (10, 20, 0, 0, 0), "+Sensation"),
    (_C.BUG, "Static Spiderling", 50, (0, 0, 0, 0, 30), "-Visual +Sound"),
    (_C.BUG, "Rotfly Matriarch", 65, (0, 0, 32, 0, 0), "+Taste"),
    (_C.BUG, "Rotfly Mutant", 74, (0, 0, 44, 0, 0), "+Taste"),
    (_C.BUG, "Sepulcher Widow", 82, (0, 0, 0, 0, 48), "-Visual +Sound"),
    (_C.BUG, "Jeweled Scarab", 105, (0, 24, 24, 24, 0), ""),
    (_C.BUG, "Abominable Tarantula", 105, (0, 0, 0, 0, 66), "-Visual +Sound"),
    (_C.BUG, "Magma Beetle", 124, (0, 33, 33, 33, 0), ""),
    (_C.BUG, "Pegasus Mite", 134, (96, 48, 0, 0, 0), "-Sensation -Sound"),
    (_C.BUG, "Avalanche Cricket", 140, (24, 24, 32, 32, 0), "+Taste -Sensation"),
    (_C.BUG, "Frost Hopper", 196, (33, 33, 44, 44, 0), "+Taste -Sensation"),
    # Fish
    (_C.FISH, "River Calamari", 5, (8, 0, 0, 0, 0), "-Sensation"),
    (_C.FISH, "Swamp Octopus", 18, (24, 0, 0, 0, 0), "-Sensation"),
    (_C.FISH, "Swamp Fish", 22, (12, 0, 0, 6, 0), ""),
    (_C.FISH, "Mud Shrimp", 26, (6, 0, 12, 0, 0), "+Aroma"),
    (_C.FISH, "Dwarf Kraken", 30, (40, 0, 0, 0, 0), "-Sensation"),
    (_C.FISH, "Electrocution Eel", 45, (10, 10, 10, 0, 0), "+Visual"),
    (_C.FISH, "Cobweb Crayfish", 48, (10, 0, 20, 0, 0), "+Aroma"),
    (_C.FISH, "Crag Crab", 75, (0, 0, 0, 0, 32), "+Aroma"),
    (_C.FISH, "Hangman Eel", 95, (24, 24, 24, 0, 0), ""),
    (_C.FISH, "Buoyant Blowfish", 138, (96, 0, 48, 0, 0), "-Visual -Sound"),
    # Flesh
    (_C.FLESH, "Serpent's Slippery Tongue", 6, (0, 8, 0, 0, 0), "-Aroma"),
    (_C.FLESH, "Salamander's Fiery Tongue", 22, (0, 24, 0, 0, 0), "-Aroma"),
    (_C.FLESH, "Banshee's Bloody Tongue", 32, (0, 40, 0, 0, 0), "-Aroma"),
    (_C.FLESH, "Frog Leg", 33, (0, 0, 24, 12, 0), "-Visual"),
    (_C.FLESH, "Eye of Newt", 34, (0, 16, 0, 0, 0), "+Taste +Sensation"),
    (_C.FLESH, "Thunderbird's Molted Feather", 60, (0, 0, 30, 0, 10), ""),
    (_C.FLESH, "Harpy's Heart of Stone", 76, (16, 0, 0, 32, 0), "+Sensation"),
    (_C.FLESH, "Lamia's Shed Scales", 110, (0, 0, 0, 48, 16), ""),
    (_C.FLESH, "Body Snatcher's Sloughed Skin", 132, (0, 0, 0, 66, 22), ""),
    # Bone
    (_C.BONE, "Unicorn Horn", 6, (0, 0, 8, 0, 0), "-Taste"),
    (_C.BONE, "Qilin's Tri-Horn", 18, (0, 0, 24, 0, 0), "-Taste"),
    (_C.BONE, "Crocodile Tooth", 20, (6, 0, 12, 0, 0), ""),
    (_C.BONE, "Hydra Vertebra", 35, (9, 9, 9, 0, 0), ""),
    (_C.BONE, "Spriggan Antler", 38, (0, 0, 40, 0, 0), "-Taste"),
    (_C.BONE, "Barghast Canine", 55, (0, 30, 0, 0, 10), ""),
    (_C.BONE, "Silver Stag Antler", 72, (0, 0, 64, 0, 0), "-Taste"),
    (_C.BONE, "Naga's Fang", 98, (0, 48, 0, 0, 16), "-Sensation +Sound"),
    (_C.BONE, "Stalking Skeleton's Fibula", 150, (0, 0, 40, 40, 16), ""),
    # Mineral
    (_C.MINERAL, "River-Pixie's Shell", 11, (4, 4, 0, 0, 0), ""),
    (_C.MINERAL, "Leech Snail's Shell", 26, (12, 12, 0, 0, 0), ""),
    (_C.MINERAL, "Golemite", 38, (18, 12, 0, 10, 0), ""),
    (_C.MINERAL, "Slapping Turtle's Shell", 46, (20, 20, 0, 0, 0), ""),
    (_C.MINERAL, "Sea Salt", 55, (30, 0, 0, 0, 10), ""),
    (_C.MINERAL, "Rock Salt", 68, (24, 0, 0, 0, 8), "+Taste +Visual"),
    (_C.MINERAL, "Scimitar Crab's Shell", 76, (32, 32, 0, 0, 0), ""),
    (_C.MINERAL, "Abyssalite", 79, (30, 20, 0, 0, 10), ""),
    (_C.MINERAL, "Supernalite", 134, (48, 32, 0, 16, 0), "-Taste +Visual"),
    (_C.MINERAL, "Hoarite", 167, (55, 55, 0, 22, 0), "-Taste +Visual"),
    # Essence
    (_C.ESSENCE, "Kappa Pheromones", 13, (4, 0, 4, 0, 0), ""),
    (_C.ESSENCE, "Warg Pheromones", 26, (12, 0, 12, 0, 0), ""),
    (_C.ESSENCE, "Nessie Pheromones", 50, (20, 0, 20, 0, 0), ""),
    (_C.ESSENCE, "Raven's Shadow", 52, (0, 10, 12, 18, 0), ""),
    (_C.ESSENCE, "Raiju Droppings", 55, (0, 0, 30, 10, 0), ""),
    (_C.ESSENCE, "Dragon Tear", 999999, (0, 33, 33, 11, 0), "+Sensation"),
    (_C.ESSENCE, "Ogre's Shadow", 74, (32, 0, 32, 0, 0), ""),
    (_C.ESSENCE, "Dropspider's Shadow", 90, (0, 0, 30, 20, 10), ""),
    (_C.ESSENCE, "Chimera Waste", 118, (0, 0, 64, 32, 0), "-Aroma"),
    (_C.ESSENCE, "Bioplasm", 125, (0, 48, 32, 16, 0), "-Visual +Sound"),
    (_C.ESSENCE, "Xenoplasm", 166, (0, 55, 55, 22, 0), "-Visual +Sound"),
    # Gem
    (_C.GEM, "Pixiedust Diamond", 14, (0, 4, 4, 0, 0), ""),
    (_C.GEM, "Murkwater Pearl", 27, (0, 0, 0, 12, 0), "+Visual"),
    (_C.GEM, "Golem's-Eye Diamond", 28, (0, 12, 12, 0, 0), ""),
    (_C.GEM, "Shadowveil Pearl", 38, (0, 0, 0, 20, 0), "+Visual"),
    (_C.GEM, "Spider's-Bait Diamond", 50, (0, 20, 20, 0, 0), ""),
    (_C.GEM, "Lustrous Pearl", 60, (0, 0, 0, 32, 0), "+Visual"),
    (_C.GEM, "Thunder Quartz", 72, (30, 10, 20, 0, 0), ""),
    (_C.GEM, "Griffin's-Whetstone Diamond", 86, (0, 32, 32, 0, 0), ""),
    (_C.GEM, "Dragonfire Pearl", 9999999, (0, 0, 0, 44, 0), "+Visual"),
    (_C.GEM, "Poison Quartz", 185, (64, 48, 0, 32, 0), "-Sound"),
    # Ore
    (_C.ORE, "Glass Ore", 24, (0, 0, 0, 18, 0), ""),
    (_C.ORE, "Desert Metal", 25, (0, 12, 0, 0, 0), "+Sensation"),
    (_C.ORE, "Fulgurite Ore", 40, (0, 0, 0, 30, 0), ""),
    (_C.ORE, "Celestial Ore", 45, (0, 0, 16, 0, 0), "+Aroma +Visual"),
    (_C.ORE, "Nether Ore", 51, (0, 0, 22, 0, 0), "+Aroma +Visual"),
    (_C.ORE, "Weeping Metal Ore", 66, (0, 32, 64, 0, 0), "-Sensation"),
    (_C.ORE, "Malachite Ore", 93, (30, 10, 0, 0, 20), ""),
    (_C.ORE, "Amethyst Ore", 206, (66, 66, 0, 0, 33), "-Sound"),
    # Pure mana
    (_C.PURE_MANA, "Mote of Mana", 130, (15, 15, 15, 15, 15), ""),
    (_C.PURE_MANA, "Ember of Mana", 165, (24, 24, 24, 24, 24), ""),
]

INGREDIENTS: tuple[Ingredient, ...] = tuple(
    Ingredient(mags, category, name, price, _parse_traits(spec))
    for category, name, price, mags, spec in _CATALOG
)

_BY_NAME = {ingredient.name: ingredient for ingredient in INGREDIENTS}


def ingredient_by_name(name: str) -> Ingredient:
    """Return the catalogue ingredient with this exact name."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown ingredient: {name!r}") from None