"""Vastu Purusha Mandala reference tables and the layer classifier.

Two region tables cover the same 9×9 index space (row 0 lies along the plot's
BL→BR edge, col 0 along its BL→TL edge):

* ``PADAS_81``: 45 named regions built from single padas and merged blocks,
  coloured from the per-pada table.
* ``DEVTAS_45``: the layered devta table: 32 perimeter slots, 8 middle
  blocks and the Brahma centre.

Both tables must partition all 81 cells exactly once; this is checked when
the module is imported.
"""

from vastucompass.models import EnergyClass, GridCell, GridResolution, Layer, Pada

GRID_SIZE = 9
SACRED_CENTER = "Brahma"
BRAHMASTHAN_ROWS = range(3, 6)
BRAHMASTHAN_COLS = range(3, 6)


class GridLookupError(LookupError):
    """Row/col outside the 9×9 grid or an unknown region."""


class GridTableError(ValueError):
    """A static region table leaves a gap or overlaps itself."""


def _pada(devta: str, zone: str, energy: str, color: str) -> Pada:
    return Pada(devta=devta, zone=zone, energy=EnergyClass(energy), color=color)


# ------------------------------------------------------------------------------
# 81 padas: row 0 = South, row 8 = North, col 0 = West, col 8 = East
# ------------------------------------------------------------------------------
PADA_TABLE: tuple[tuple[Pada, ...], ...] = (
    (
        _pada("Nirruti", "SW", "negative", "#8B4513"),
        _pada("Pitru", "SSW", "neutral", "#A0522D"),
        _pada("Dauvarika", "SSW", "neutral", "#A0522D"),
        _pada("Sugriva", "S", "neutral", "#CD853F"),
        _pada("Pushpadanta", "S", "positive", "#DEB887"),
        _pada("Varuna", "S", "neutral", "#CD853F"),
        _pada("Asura", "SSE", "negative", "#A0522D"),
        _pada("Shosha", "SSE", "negative", "#A0522D"),
        _pada("Papayakshma", "SE", "negative", "#8B4513"),
    ),
    (
        _pada("Mriga", "SW", "neutral", "#A0522D"),
        _pada("Putana", "SW", "negative", "#8B4513"),
        _pada("Aryaman", "S", "positive", "#DEB887"),
        _pada("Vivasvan", "S", "positive", "#F4A460"),
        _pada("Indra", "CENTER", "very positive", "#FFD700"),
        _pada("Mitra", "S", "positive", "#F4A460"),
        _pada("Rudra", "S", "neutral", "#DEB887"),
        _pada("Yaksha", "SE", "negative", "#8B4513"),
        _pada("Roga", "SE", "negative", "#A0522D"),
    ),
    (
        _pada("Bhrungraj", "SW", "neutral", "#A0522D"),
        _pada("Pitru", "SW", "neutral", "#A0522D"),
        _pada("Anjan", "S", "neutral", "#CD853F"),
        _pada("Savita", "CENTER", "positive", "#FFD700"),
        _pada("Brahma", "BRAHMASTHAN", "divine", "#FFA500"),
        _pada("Satya", "CENTER", "positive", "#FFD700"),
        _pada("Bhringaraj", "SE", "neutral", "#CD853F"),
        _pada("Ahi", "SE", "negative", "#A0522D"),
        _pada("Naga", "SE", "neutral", "#A0522D"),
    ),
    (
        _pada("Vitatha", "W", "neutral", "#CD853F"),
        _pada("Griharakshita", "W", "positive", "#DEB887"),
        _pada("Yama", "S", "negative", "#A0522D"),
        _pada("Gandharva", "CENTER", "positive", "#FFD700"),
        _pada("Brahmasthan", "BRAHMASTHAN", "divine", "#FFA500"),
        _pada("Bhringraja", "CENTER", "positive", "#FFD700"),
        _pada("Soma", "E", "positive", "#DEB887"),
        _pada("Mukhya", "E", "positive", "#DEB887"),
        _pada("Mukhya", "E", "positive", "#CD853F"),
    ),
    (
        _pada("Gruhakshata", "W", "positive", "#DEB887"),
        _pada("Yama", "W", "negative", "#A0522D"),
        _pada("Gandharva", "CENTER", "positive", "#FFD700"),
        _pada("Bhringraja", "BRAHMASTHAN", "divine", "#FFA500"),
        _pada("Antariksha", "BRAHMASTHAN", "divine", "#FF8C00"),
        _pada("Prithvidhara", "BRAHMASTHAN", "divine", "#FFA500"),
        _pada("Parjanya", "CENTER", "positive", "#FFD700"),
        _pada("Jayanta", "E", "positive", "#DEB887"),
        _pada("Indra", "E", "very positive", "#FFD700"),
    ),
    (
        _pada("Vayu", "W", "positive", "#DEB887"),
        _pada("Pusha", "W", "positive", "#DEB887"),
        _pada("Bhrisha", "CENTER", "positive", "#FFD700"),
        _pada("Aakash", "CENTER", "positive", "#FFD700"),
        _pada("Brahma", "BRAHMASTHAN", "divine", "#FFA500"),
        _pada("Aryama", "CENTER", "positive", "#FFD700"),
        _pada("Pusha", "N", "positive", "#DEB887"),
        _pada("Aditi", "NE", "very positive", "#4169E1"),
        _pada("Diti", "NE", "positive", "#4682B4"),
    ),
    (
        _pada("Varuna", "W", "neutral", "#CD853F"),
        _pada("Rudra", "NW", "neutral", "#A0522D"),
        _pada("Rajayakshma", "NW", "negative", "#A0522D"),
        _pada("Savita", "N", "positive", "#DEB887"),
        _pada("Brahma", "BRAHMASTHAN", "divine", "#FFA500"),
        _pada("Vivasvan", "N", "positive", "#DEB887"),
        _pada("Indra", "N", "very positive", "#FFD700"),
        _pada("Mitra", "NE", "positive", "#4682B4"),
        _pada("Isha", "NE", "very positive", "#4169E1"),
    ),
    (
        _pada("Asura", "NW", "negative", "#A0522D"),
        _pada("Papa", "NW", "negative", "#8B4513"),
        _pada("Gandharva", "NW", "neutral", "#A0522D"),
        _pada("Aryama", "N", "positive", "#DEB887"),
        _pada("Indra", "CENTER", "very positive", "#FFD700"),
        _pada("Prithvidhara", "N", "positive", "#DEB887"),
        _pada("Jayanta", "NE", "positive", "#4682B4"),
        _pada("Mahendra", "NE", "very positive", "#4169E1"),
        _pada("Surya", "NE", "very positive", "#4682B4"),
    ),
    (
        _pada("Roga", "NW", "negative", "#8B4513"),
        _pada("Naga", "NNW", "neutral", "#A0522D"),
        _pada("Mukhya", "NNW", "neutral", "#A0522D"),
        _pada("Bhallata", "N", "neutral", "#CD853F"),
        _pada("Soma", "N", "positive", "#DEB887"),
        _pada("Aap", "N", "positive", "#CD853F"),
        _pada("Agni", "NNE", "positive", "#4682B4"),
        _pada("Isha", "NNE", "very positive", "#4169E1"),
        _pada("Shiva", "NE", "divine", "#0000CD"),
    ),
)

_SACRED_CENTER_PADA = _pada(SACRED_CENTER, "BRAHMASTHAN", "divine", "#FFA500")

# (name, row, col, row_span, col_span)
_PADA_REGIONS: tuple[tuple[str, int, int, int, int], ...] = (
    ("Vayu", 0, 0, 1, 1),
    ("Naag", 0, 1, 1, 1),
    ("Mukhya", 0, 2, 1, 1),
    ("Bhallat", 0, 3, 1, 1),
    ("Som", 0, 4, 1, 1),
    ("Charak", 0, 5, 1, 1),
    ("Aditi", 0, 6, 1, 1),
    ("Uditi", 0, 7, 1, 1),
    ("Isha", 0, 8, 1, 1),
    ("Rog", 1, 0, 1, 1),
    ("Rudrajay", 1, 1, 1, 2),
    ("Bhoodhar", 1, 3, 2, 3),
    ("Aap", 1, 6, 1, 2),
    ("Parjanya", 1, 8, 1, 1),
    ("Sosh", 2, 0, 1, 1),
    ("Rudra", 2, 1, 1, 2),
    ("Aapvatsa", 2, 6, 1, 2),
    ("Jayant", 2, 8, 1, 1),
    ("Asur", 3, 0, 1, 1),
    ("Mitra", 3, 1, 3, 2),
    ("Brahma", 3, 3, 3, 3),
    ("Aryama", 3, 6, 3, 2),
    ("Mahendra", 3, 8, 1, 1),
    ("Varun", 4, 0, 1, 1),
    ("Aditya", 4, 8, 1, 1),
    ("Pushpdant", 5, 0, 1, 1),
    ("Satyak", 5, 8, 1, 1),
    ("Sugreev", 6, 0, 1, 1),
    ("Indraraj", 6, 1, 1, 2),
    ("Vivasvan", 6, 3, 2, 3),
    ("Svitra", 6, 6, 1, 2),
    ("Bhusha", 6, 8, 1, 1),
    ("Dauwarik", 7, 0, 1, 1),
    ("Indra", 7, 1, 1, 2),
    ("Savitra", 7, 6, 1, 2),
    ("Antrix", 7, 8, 1, 1),
    ("Pitru", 8, 0, 1, 1),
    ("Mrig", 8, 1, 1, 1),
    ("Bhujang", 8, 2, 1, 1),
    ("Gandharva", 8, 3, 1, 1),
    ("Yama", 8, 4, 1, 1),
    ("Gkhawat", 8, 5, 1, 1),
    ("Vitath", 8, 6, 1, 1),
    ("Pusha", 8, 7, 1, 1),
    ("Agni", 8, 8, 1, 1),
)


def _pada_region(name: str, row: int, col: int, row_span: int, col_span: int) -> GridCell:
    # Regions take their attributes from the pada at their anchor cell
    info = _SACRED_CENTER_PADA if name == SACRED_CENTER else PADA_TABLE[row][col]
    return GridCell(
        name=name,
        row=row,
        col=col,
        row_span=row_span,
        col_span=col_span,
        zone=info.zone,
        energy=info.energy,
        color=info.color,
    )


# ------------------------------------------------------------------------------
# 45-devta layered table: row 0 = North, col 0 = West
# ------------------------------------------------------------------------------
OUTER_NORTH: tuple[Pada, ...] = (
    _pada("Vayu", "NW", "positive", "#87CEEB"),
    _pada("Naga", "NNW", "neutral", "#87CEEB"),
    _pada("Mukhya", "NNW", "neutral", "#87CEEB"),
    _pada("Bhallat", "N", "neutral", "#87CEEB"),
    _pada("Soma", "N", "positive", "#4169E1"),
    _pada("Aap", "N", "positive", "#87CEEB"),
    _pada("Aditi", "NNE", "very positive", "#4169E1"),
    _pada("Diti", "NNE", "positive", "#4169E1"),
    _pada("Isha", "NE", "divine", "#0000CD"),
)

# Corners excluded, listed north to south
OUTER_EAST: tuple[Pada, ...] = (
    _pada("Parjanya", "ENE", "positive", "#90EE90"),
    _pada("Jayanta", "E", "positive", "#90EE90"),
    _pada("Mahendra", "E", "very positive", "#32CD32"),
    _pada("Aditya", "E", "positive", "#90EE90"),
    _pada("Satya", "ESE", "positive", "#90EE90"),
    _pada("Bhrisha", "ESE", "neutral", "#90EE90"),
    _pada("Antariksh", "SE", "neutral", "#FFD700"),
)

# Listed east to west
OUTER_SOUTH: tuple[Pada, ...] = (
    _pada("Agni", "SE", "positive", "#FFD700"),
    _pada("Pusha", "SSE", "positive", "#FFA500"),
    _pada("Vitatha", "SSE", "neutral", "#FFA500"),
    _pada("Gruhakshat", "S", "neutral", "#FFA500"),
    _pada("Yama", "S", "negative", "#CD853F"),
    _pada("Gandharva", "S", "neutral", "#FFA500"),
    _pada("Bhujang", "SSW", "negative", "#A0522D"),
    _pada("Mriga", "SSW", "neutral", "#A0522D"),
    _pada("Pitru", "SW", "negative", "#8B4513"),
)

# Corners excluded, listed south to north
OUTER_WEST: tuple[Pada, ...] = (
    _pada("Dauvarika", "WSW", "neutral", "#CD853F"),
    _pada("Sugriva", "W", "neutral", "#CD853F"),
    _pada("Pushpadanta", "W", "positive", "#DEB887"),
    _pada("Varuna", "W", "neutral", "#CD853F"),
    _pada("Asura", "WNW", "negative", "#A0522D"),
    _pada("Shosha", "WNW", "negative", "#A0522D"),
    _pada("Roga", "NW", "negative", "#8B4513"),
)

# Middle ring blocks keyed by the zone that places them: (pada, row, col, row_span, col_span)
MIDDLE_BLOCKS: tuple[tuple[Pada, int, int, int, int], ...] = (
    (_pada("Rudrajay", "N-Center", "positive", "#87CEEB"), 1, 3, 2, 3),
    (_pada("Aapvatsa", "E-Center", "positive", "#90EE90"), 3, 6, 3, 2),
    (_pada("Savitra", "S-Center", "positive", "#FFA500"), 6, 3, 2, 3),
    (_pada("Indrajay", "W-Center", "positive", "#DEB887"), 3, 1, 3, 2),
    (_pada("Rudra", "NW-Inner", "neutral", "#A0522D"), 1, 1, 2, 2),
    (_pada("Aap", "NE-Inner", "very positive", "#4169E1"), 1, 6, 2, 2),
    (_pada("Indra", "SW-Inner", "neutral", "#A0522D"), 6, 1, 2, 2),
    (_pada("Svitra", "SE-Inner", "positive", "#FFD700"), 6, 6, 2, 2),
)


def _devta_region(info: Pada, row: int, col: int, row_span: int = 1, col_span: int = 1) -> GridCell:
    return GridCell(
        name=info.devta,
        row=row,
        col=col,
        row_span=row_span,
        col_span=col_span,
        zone=info.zone,
        energy=info.energy,
        color=info.color,
    )


def _devta_regions() -> tuple[GridCell, ...]:
    last = GRID_SIZE - 1
    regions: list[GridCell] = []
    for col in range(GRID_SIZE):
        regions.append(_devta_region(OUTER_NORTH[col], 0, col))
    for row in range(1, last):
        regions.append(_devta_region(OUTER_EAST[row - 1], row, last))
    for col in range(last, -1, -1):
        regions.append(_devta_region(OUTER_SOUTH[last - col], last, col))
    for row in range(last - 1, 0, -1):
        regions.append(_devta_region(OUTER_WEST[last - 1 - row], row, 0))
    for info, row, col, row_span, col_span in MIDDLE_BLOCKS:
        regions.append(_devta_region(info, row, col, row_span, col_span))
    regions.append(_devta_region(_SACRED_CENTER_PADA, 3, 3, 3, 3))
    return tuple(regions)


# ------------------------------------------------------------------------------
# Descriptive lookups
# ------------------------------------------------------------------------------
ZONE_COLORS: dict[str, str] = {
    "NE": "#4169E1",
    "N": "#87CEEB",
    "E": "#90EE90",
    "SE": "#FFD700",
    "S": "#FFA500",
    "SW": "#8B4513",
    "W": "#CD853F",
    "NW": "#A0522D",
    "CENTER": "#FFD700",
    "BRAHMASTHAN": "#FFA500",
}

ENERGY_DESCRIPTIONS: dict[EnergyClass, str] = {
    EnergyClass.DIVINE: "Divine Energy - Sacred Center",
    EnergyClass.VERY_POSITIVE: "Very Positive - Highly Auspicious",
    EnergyClass.POSITIVE: "Positive Energy - Auspicious",
    EnergyClass.NEUTRAL: "Neutral Energy",
    EnergyClass.NEGATIVE: "Negative Energy - Avoid Heavy Activities",
}

ZONE_RECOMMENDATIONS: dict[str, str] = {
    "NE": "Water bodies, worship room, entrance. Keep light and clean.",
    "N": "Safe, treasury, study room. Good for finance and career.",
    "E": "Bathrooms, living room, open spaces. Auspicious for beginnings.",
    "SE": "Kitchen, electrical appliances. Fire element zone.",
    "S": "Bedroom, heavy storage. Moderate activities.",
    "SW": "Master bedroom, heavy storage. Keep heavy and elevated.",
    "W": "Dining, study, children room. Moderate to good.",
    "NW": "Guest room, garage. Temporary activities.",
    "BRAHMASTHAN": "Keep open, light, and clutter-free. No pillars or heavy structures.",
}


def zone_color(zone: str) -> str:
    return ZONE_COLORS.get(zone, "#CCCCCC")


def energy_description(energy: EnergyClass | str) -> str:
    try:
        return ENERGY_DESCRIPTIONS[EnergyClass(energy)]
    except ValueError:
        return "Unknown"


def zone_recommendation(zone: str) -> str:
    return ZONE_RECOMMENDATIONS.get(zone, "General use area")


# ------------------------------------------------------------------------------
# Partition index
# ------------------------------------------------------------------------------
def build_owner_index(regions: tuple[GridCell, ...]) -> dict[tuple[int, int], GridCell]:
    """Map every (row, col) to the one region that owns it.

    Raises:
        GridTableError: If a region leaves the grid, two regions overlap, or
            any cell has no owner.
    """
    owners: dict[tuple[int, int], GridCell] = {}
    for region in regions:
        for row, col in region.cells():
            if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
                raise GridTableError(f"{region.name} covers ({row}, {col}) outside the grid")
            if (row, col) in owners:
                raise GridTableError(
                    f"({row}, {col}) claimed by both {owners[(row, col)].name} and {region.name}"
                )
            owners[(row, col)] = region

    missing = [
        (r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE) if (r, c) not in owners
    ]
    if missing:
        raise GridTableError(f"Cells without a region: {missing}")
    return owners


REGIONS: dict[GridResolution, tuple[GridCell, ...]] = {
    GridResolution.PADAS_81: tuple(_pada_region(*entry) for entry in _PADA_REGIONS),
    GridResolution.DEVTAS_45: _devta_regions(),
}

_OWNERS: dict[GridResolution, dict[tuple[int, int], GridCell]] = {
    resolution: build_owner_index(regions) for resolution, regions in REGIONS.items()
}


def _check_index(row: int, col: int) -> None:
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise GridLookupError(f"({row}, {col}) is outside the {GRID_SIZE}x{GRID_SIZE} grid")


def regions(resolution: GridResolution = GridResolution.PADAS_81) -> tuple[GridCell, ...]:
    """All named regions of a table, in drawing order."""
    return REGIONS[GridResolution(resolution)]


def region_at(row: int, col: int, resolution: GridResolution = GridResolution.PADAS_81) -> GridCell:
    """The region owning (row, col)."""
    _check_index(row, col)
    return _OWNERS[GridResolution(resolution)][(row, col)]


def pada_at(row: int, col: int) -> Pada:
    """Per-pada attributes of the 81-cell table."""
    _check_index(row, col)
    return PADA_TABLE[row][col]


def find_regions(name: str, resolution: GridResolution = GridResolution.PADAS_81) -> tuple[GridCell, ...]:
    """Regions carrying `name`; a name may appear in more than one layer."""
    found = tuple(r for r in regions(resolution) if r.name == name)
    if not found:
        raise GridLookupError(f"No region named {name!r} in the {resolution} table")
    return found


def classify(name: str, row: int, col: int) -> Layer:
    """Layer of a region from its name and anchor cell."""
    _check_index(row, col)
    if name == SACRED_CENTER:
        return Layer.CENTER
    last = GRID_SIZE - 1
    if row in (0, last) or col in (0, last):
        return Layer.OUTER
    return Layer.MIDDLE


def layer_of(region: GridCell) -> Layer:
    return classify(region.name, region.row, region.col)


def brahmasthan_cells() -> list[tuple[int, int]]:
    """The nine centre cells, row-major."""
    return [(r, c) for r in BRAHMASTHAN_ROWS for c in BRAHMASTHAN_COLS]


def sacred_center_cells(resolution: GridResolution = GridResolution.PADAS_81) -> set[tuple[int, int]]:
    """Cells owned by the sacred-centre region of a table."""
    owners = _OWNERS[GridResolution(resolution)]
    return {cell for cell, region in owners.items() if region.name == SACRED_CENTER}
