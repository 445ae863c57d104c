from typing import NamedTuple, Tuple


class CategorySpec(NamedTuple):
    query_text: str
    category_label: str


# Order matters: when the same place comes back for several queries,
# the earliest entry decides its category.
CATEGORY_SPECS: Tuple[CategorySpec, ...] = (
    CategorySpec("thrift store", "Thrift Store"),
    CategorySpec("donation center", "Donation Center"),
    CategorySpec("clothing donation", "Donation Center"),
    CategorySpec("clothing swap", "Exchange Event"),
)

CATEGORY_LABELS = tuple(dict.fromkeys(spec.category_label for spec in CATEGORY_SPECS))

ALL_CATEGORIES = "All Categories"
