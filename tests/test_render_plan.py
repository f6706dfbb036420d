import pytest

from vastucompass.grid_model import find_regions
from vastucompass.i18n import translate
from vastucompass.models import (
    GeoPoint,
    GridResolution,
    LabelItem,
    Layer,
    LayerVisibility,
    LineItem,
    PolygonItem,
)
from vastucompass.render_plan import build_render_plan, label_font_size, stroke_weight

UNIT_SQUARE = (GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0), GeoPoint(1.0, 1.0), GeoPoint(1.0, 0.0))
ALL = LayerVisibility()


def test_unit_square_end_to_end():
    plan = build_render_plan(UNIT_SQUARE, ALL)
    labels = plan.labels
    assert len(labels) == 45
    assert len({lbl.name for lbl in labels}) == 45
    assert {(h.row, h.col) for h in plan.highlights} == {(r, c) for r in (3, 4, 5) for c in (3, 4, 5)}


def test_item_order():
    plan = build_render_plan(UNIT_SQUARE, ALL)
    kinds = [type(item) for item in plan]
    # outline, 20 lattice lines, 45 regions, 9 highlights, 45 labels
    assert kinds[:21] == [LineItem] * 21
    assert kinds[21:66] == [PolygonItem] * 45
    assert all(not item.highlight for item in plan.items[21:66])
    assert all(item.highlight for item in plan.items[66:75])
    assert kinds[75:] == [LabelItem] * 45
    assert len(plan) == 120


def test_outline_is_closed_ring():
    outline = build_render_plan(UNIT_SQUARE, ALL).lines[0]
    assert outline.points == (*UNIT_SQUARE, UNIT_SQUARE[0])
    assert not outline.dashed


@pytest.mark.parametrize("corners", [(), UNIT_SQUARE[:3], UNIT_SQUARE[:1]])
def test_fewer_than_four_corners_gives_empty_plan(corners):
    plan = build_render_plan(corners, ALL)
    assert plan.is_empty
    assert len(plan) == 0


def test_deterministic():
    a = build_render_plan(UNIT_SQUARE, ALL, GridResolution.DEVTAS_45, translate, "hi")
    b = build_render_plan(list(UNIT_SQUARE), ALL, GridResolution.DEVTAS_45, translate, "hi")
    assert a == b


def test_hidden_layers_filtered():
    plan = build_render_plan(UNIT_SQUARE, LayerVisibility(outer=False, middle=True, center=False))
    assert plan.highlights == ()
    assert {p.layer for p in plan.polygons} == {Layer.MIDDLE}
    assert {lbl.layer for lbl in plan.labels} == {Layer.MIDDLE}
    # Outline and lattice are always drawn
    assert len(plan.lines) == 21


def test_only_center_visible():
    plan = build_render_plan(UNIT_SQUARE, LayerVisibility(outer=False, middle=False, center=True))
    assert [p.name for p in plan.polygons] == ["Brahma"]
    assert len(plan.highlights) == 9


def test_nothing_visible_leaves_outline_and_lattice():
    plan = build_render_plan(UNIT_SQUARE, LayerVisibility(False, False, False))
    assert not plan.is_empty
    assert plan.polygons == () and plan.labels == ()


def test_labels_translated_and_centred():
    plan = build_render_plan(UNIT_SQUARE, ALL, translate=translate, language="hi")
    brahma = next(lbl for lbl in plan.labels if lbl.name == "Brahma")
    assert brahma.text == "ब्रह्मा"
    assert brahma.position.lat == pytest.approx(0.5)
    assert brahma.position.lon == pytest.approx(0.5)


def test_custom_translate_function():
    plan = build_render_plan(UNIT_SQUARE, ALL, translate=lambda name, lang: f"{lang}:{name}", language="xx")
    assert all(lbl.text == f"xx:{lbl.name}" for lbl in plan.labels)


def test_devta_resolution():
    plan = build_render_plan(UNIT_SQUARE, ALL, GridResolution.DEVTAS_45)
    assert len(plan.polygons) == 41
    assert len(plan.labels) == 41


@pytest.mark.parametrize(
    "name, size",
    [("Brahma", 18), ("Bhoodhar", 14), ("Vivasvan", 14), ("Mitra", 13), ("Aryama", 13),
     ("Rudrajay", 11), ("Pushpdant", 8), ("Gandharva", 8), ("Vayu", 9)],
)  # fmt: skip
def test_label_font_tiers(name, size):
    assert label_font_size(find_regions(name)[0]) == size


@pytest.mark.parametrize("name, weight", [("Brahma", 4.0), ("Bhoodhar", 3.0), ("Rudrajay", 2.0), ("Vayu", 2.0)])
def test_stroke_weights(name, weight):
    assert stroke_weight(find_regions(name)[0]) == weight
