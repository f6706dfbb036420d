"""Data model definitions — explicit boundaries between sensor input, compute, and render layers."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class SampleSource(StrEnum):
    """Which orientation capability produced a sample."""

    MAGNETOMETER = "magnetometer"  # Raw magnetic vector (vector mode)
    NATIVE_COMPASS = "native_compass"  # Platform compass heading, clockwise from north
    ABSOLUTE = "absolute"  # Absolute device orientation alpha, counter-clockwise
    RELATIVE = "relative"  # Relative device orientation alpha, counter-clockwise


class AxisInversion(StrEnum):
    """Magnetometer axes whose sign must be flipped before computing a heading."""

    NONE = "none"
    X = "x"
    Y = "y"
    XY = "xy"


class HeadingStatus(StrEnum):
    IDLE = "idle"  # No active subscription
    ACTIVE = "active"  # Subscribed and publishing
    UNAVAILABLE = "unavailable"  # Capability missing or denied; no retry


class Layer(StrEnum):
    """Positional classification of a grid region."""

    OUTER = "outer"
    MIDDLE = "middle"
    CENTER = "center"


class EnergyClass(StrEnum):
    DIVINE = "divine"
    VERY_POSITIVE = "very positive"
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class GridResolution(StrEnum):
    """Which region table the grid overlay is drawn from."""

    PADAS_81 = "81"  # 45 named regions over the 81-pada grid
    DEVTAS_45 = "45"  # Layered outer/middle/center devta table


class CornerIndex(IntEnum):
    """Fixed order of plot corners."""

    BL = 0
    BR = 1
    TR = 2
    TL = 3


@dataclass(frozen=True)
class GeoPoint:
    """Geographic point in decimal degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class HeadingSample:
    """One orientation reading. Either `vector` or one of the angle fields is set."""

    source: SampleSource
    vector: tuple[float, ...] | None = None  # Magnetometer (x, y[, z])
    gravity: tuple[float, float, float] | None = None  # Accelerometer (x, y, z) for tilt compensation
    angle: float | None = None  # Platform angle in degrees
    beta: float | None = None  # Front-back tilt, used when a relative sample lacks alpha
    gamma: float | None = None  # Left-right tilt, used when a relative sample lacks alpha


@dataclass(frozen=True)
class DeviceDescriptor:
    """Platform and capability facts reported by the host at subscription time."""

    platform: str  # "android", "ios", "web"
    manufacturer: str | None = None
    model: str | None = None
    has_native_compass: bool = False
    has_absolute_orientation: bool = False


@dataclass(frozen=True)
class DeviceProfile:
    """Calibration constants for one device variant. Resolved once per subscription."""

    variant: str
    axis_inversion: AxisInversion
    angle_offset_degrees: float
    smoothing_alpha: float
    prefer_absolute_angle: bool


@dataclass(frozen=True)
class LayerVisibility:
    outer: bool = True
    middle: bool = True
    center: bool = True

    def is_visible(self, layer: Layer) -> bool:
        return getattr(self, layer.value)


@dataclass(frozen=True)
class Pada:
    """Attributes of a single cell of the 9×9 reference grid."""

    devta: str
    zone: str
    energy: EnergyClass
    color: str


@dataclass(frozen=True)
class GridCell:
    """A named region anchored at (row, col) covering row_span × col_span cells."""

    name: str
    row: int
    col: int
    row_span: int
    col_span: int
    zone: str
    energy: EnergyClass
    color: str

    def cells(self) -> tuple[tuple[int, int], ...]:
        """Every (row, col) index this region owns."""
        return tuple(
            (r, c)
            for r in range(self.row, self.row + self.row_span)
            for c in range(self.col, self.col + self.col_span)
        )


@dataclass(frozen=True)
class PolygonItem:
    """A filled region polygon in geographic coordinates."""

    name: str
    row: int
    col: int
    layer: Layer
    points: tuple[GeoPoint, ...]  # BL, BR, TR, TL of the region
    fill_color: str
    stroke_color: str
    fill_opacity: float
    stroke_weight: float
    highlight: bool = False  # Brahmasthan overlay cell rather than a devta region


@dataclass(frozen=True)
class LabelItem:
    """A translated region label anchored at the region centre."""

    name: str
    text: str
    layer: Layer
    position: GeoPoint
    font_size: int
    background: str  # Region colour behind the text
    text_color: str


@dataclass(frozen=True)
class LineItem:
    """Plot outline or a faint lattice line."""

    points: tuple[GeoPoint, ...]
    color: str
    weight: float
    opacity: float
    dashed: bool = False


RenderItem = PolygonItem | LabelItem | LineItem


@dataclass(frozen=True)
class GridRenderPlan:
    """The sole input to grid renderers. Fully computed, draw in order."""

    items: tuple[RenderItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def polygons(self) -> tuple[PolygonItem, ...]:
        return tuple(i for i in self.items if isinstance(i, PolygonItem) and not i.highlight)

    @property
    def highlights(self) -> tuple[PolygonItem, ...]:
        return tuple(i for i in self.items if isinstance(i, PolygonItem) and i.highlight)

    @property
    def labels(self) -> tuple[LabelItem, ...]:
        return tuple(i for i in self.items if isinstance(i, LabelItem))

    @property
    def lines(self) -> tuple[LineItem, ...]:
        return tuple(i for i in self.items if isinstance(i, LineItem))
