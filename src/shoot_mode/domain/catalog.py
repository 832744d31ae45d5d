"""Standard shot categories for real estate photography."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShotCategory:
    """A named subject area with expected shot counts."""

    id: str
    name: str
    icon: str
    required: bool
    min_shots: int
    max_shots: int
    tips: tuple[str, ...]


# Order is significant: recommendations walk the catalog front to back.
STANDARD_SHOT_CATEGORIES: tuple[ShotCategory, ...] = (
    ShotCategory(
        id="exterior-front",
        name="Front Exterior",
        icon="home",
        required=True,
        min_shots=2,
        max_shots=5,
        tips=(
            "Capture from street level at slight angle",
            "Include full facade and landscaping",
            "Shoot in optimal lighting (golden hour ideal)",
            "Avoid cars in driveway if possible",
        ),
    ),
    ShotCategory(
        id="exterior-back",
        name="Back Exterior",
        icon="trees",
        required=True,
        min_shots=1,
        max_shots=4,
        tips=(
            "Include full backyard if applicable",
            "Capture outdoor living spaces",
            "Show pool/patio areas",
        ),
    ),
    ShotCategory(
        id="living-room",
        name="Living Room",
        icon="sofa",
        required=True,
        min_shots=2,
        max_shots=6,
        tips=(
            "Shoot from corner for depth",
            "Include main focal points",
            "Capture natural light from windows",
            "Get multiple angles",
        ),
    ),
    ShotCategory(
        id="kitchen",
        name="Kitchen",
        icon="utensils",
        required=True,
        min_shots=3,
        max_shots=8,
        tips=(
            "Wide shot showing full layout",
            "Detail shots of countertops and appliances",
            "Include breakfast area if present",
            "Capture island from multiple angles",
        ),
    ),
    ShotCategory(
        id="master-bedroom",
        name="Master Bedroom",
        icon="bed",
        required=True,
        min_shots=2,
        max_shots=5,
        tips=(
            "Shoot from doorway first",
            "Include en-suite entrance if visible",
            "Capture closet if walk-in",
        ),
    ),
    ShotCategory(
        id="bedrooms-other",
        name="Other Bedrooms",
        icon="door-open",
        required=True,
        min_shots=1,
        max_shots=10,
        tips=(
            "One wide shot per bedroom minimum",
            "Highlight unique features",
        ),
    ),
    ShotCategory(
        id="bathrooms",
        name="Bathrooms",
        icon="bath",
        required=True,
        min_shots=2,
        max_shots=10,
        tips=(
            "Wide shot from doorway",
            "Detail shot of vanity",
            "Master bath gets more shots",
            "Close toilet lid",
        ),
    ),
    ShotCategory(
        id="dining",
        name="Dining Room",
        icon="wine-glass",
        required=False,
        min_shots=1,
        max_shots=4,
        tips=(
            "Include table setting if staged",
            "Show connection to kitchen",
        ),
    ),
    ShotCategory(
        id="garage",
        name="Garage",
        icon="warehouse",
        required=False,
        min_shots=1,
        max_shots=2,
        tips=(
            "Empty garage preferred",
            "Show full depth and width",
        ),
    ),
    ShotCategory(
        id="pool",
        name="Pool & Spa",
        icon="waves",
        required=False,
        min_shots=2,
        max_shots=6,
        tips=(
            "Capture full pool area",
            "Include surrounding landscaping",
            "Get water at still moment",
        ),
    ),
    ShotCategory(
        id="details",
        name="Detail Shots",
        icon="sparkles",
        required=False,
        min_shots=0,
        max_shots=10,
        tips=(
            "Unique architectural features",
            "High-end finishes",
            "Custom millwork",
            "Fireplace details",
        ),
    ),
)

_BY_ID = {category.id: category for category in STANDARD_SHOT_CATEGORIES}


def list_categories() -> tuple[ShotCategory, ...]:
    """Return every category in catalog order."""
    return STANDARD_SHOT_CATEGORIES


def get_category(category_id: str) -> ShotCategory | None:
    """Return a category by id, if it exists."""
    return _BY_ID.get(category_id)


def required_categories() -> tuple[ShotCategory, ...]:
    """Return required categories in catalog order."""
    return tuple(category for category in STANDARD_SHOT_CATEGORIES if category.required)


def optional_categories() -> tuple[ShotCategory, ...]:
    """Return optional categories in catalog order."""
    return tuple(
        category for category in STANDARD_SHOT_CATEGORIES if not category.required
    )


def category_tips(category_id: str) -> tuple[str, ...]:
    """Return capture tips for a category, or nothing for unknown ids."""
    category = get_category(category_id)
    return category.tips if category else ()
