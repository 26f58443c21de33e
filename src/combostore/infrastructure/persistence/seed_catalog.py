"""Built-in catalog used when no designs have been persisted yet."""

from __future__ import annotations

from combostore.domain.model.design import Design, Inventory

# Fixed so a fresh install always sees exactly the same catalog.
SEED_CREATED_AT = 1735689600000

_SEED_RECORDS = [
    {
        "id": "1",
        "name": "Garden Leaf Print",
        "color": "White / Green",
        "fabric": "Organza",
        "image_url": (
            "https://images.unsplash.com/photo-1594938298603-c8148c4dae35"
            "?auto=format&fit=crop&q=80&w=400"
        ),
        "inventory": {
            "men": {"XXL": 9, "3XL": 3},
            "women": {},
            "boys": {
                "0-1": 20, "1-2": 3, "4-5": 2, "5-6": 6,
                "6-7": 3, "7-8": 1, "9-10": 3, "13-14": 3,
            },
            "girls": {
                "0-1": 2, "2-3": 5, "3-4": 6, "5-6": 4,
                "6-7": 2, "9-10": 3, "11-12": 2,
            },
        },
        "label": "PREMIUM DESIGN",
    },
]


def seed_designs() -> list[Design]:
    """Return fresh copies of the seed catalog."""
    return [
        Design(
            id=raw["id"],
            name=raw["name"],
            color=raw["color"],
            fabric=raw["fabric"],
            image_url=raw["image_url"],
            inventory=Inventory.from_dict(raw["inventory"]),
            label=raw["label"],
            created_at=SEED_CREATED_AT,
        )
        for raw in _SEED_RECORDS
    ]
