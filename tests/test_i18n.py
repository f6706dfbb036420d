import pytest

from vastucompass.grid_model import regions
from vastucompass.i18n import t, translate
from vastucompass.models import GridResolution


def test_t_returns_language_string():
    assert t("btn_confirm", "en") == "Confirm"
    assert t("btn_confirm", "hi") == "पुष्टि करें"


def test_t_falls_back_to_english_then_key():
    assert t("btn_confirm", "fr") == "Confirm"
    assert t("no_such_key", "en") == "no_such_key"


@pytest.mark.parametrize("name, expected", [("Brahma", "ब्रह्मा"), ("Agni", "अग्नि"), ("Rudrajay", "रुद्रजय")])
def test_translate_hindi(name, expected):
    assert translate(name, "hi") == expected


def test_translate_identity_fallback():
    assert translate("Brahma", "en") == "Brahma"
    assert translate("Brahma", "fr") == "Brahma"
    assert translate("Unlisted", "hi") == "Unlisted"


def test_every_devta_region_has_hindi_name():
    for region in regions(GridResolution.DEVTAS_45):
        assert translate(region.name, "hi") != region.name
