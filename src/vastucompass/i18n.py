"""Simple two-language (en/hi) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "en": "Vastu Compass",
        "hi": "वास्तु कम्पास",
    },
    "direction_title": {
        "en": "DIRECTION",
        "hi": "दिशा",
    },
    "label_language": {
        "en": "Language",
        "hi": "भाषा",
    },
    "label_latitude": {
        "en": "Latitude",
        "hi": "अक्षांश",
    },
    "label_longitude": {
        "en": "Longitude",
        "hi": "देशांतर",
    },
    "label_heading": {
        "en": "Device alpha (°)",
        "hi": "डिवाइस अल्फा (°)",
    },
    "label_source": {
        "en": "Sensor",
        "hi": "सेंसर",
    },
    "label_resolution": {
        "en": "Grid",
        "hi": "ग्रिड",
    },
    "layer_outer": {
        "en": "Outer layer",
        "hi": "बाहरी परत",
    },
    "layer_middle": {
        "en": "Middle layer",
        "hi": "मध्य परत",
    },
    "layer_center": {
        "en": "Brahmasthan",
        "hi": "ब्रह्मस्थान",
    },
    "corner_title": {
        "en": "Adjust Plot Corners",
        "hi": "प्लॉट कोन समायोजित करें",
    },
    "corner_subtitle": {
        "en": "Move the 4 numbered corners to mark your plot boundaries",
        "hi": "अपने प्लॉट की सीमाएं चिह्नित करने के लिए 4 नंबर वाले कोनों को खिसकाएं",
    },
    "grid_active_title": {
        "en": "Vastu Grid Active",
        "hi": "वास्तु ग्रिड सक्रिय",
    },
    "grid_active_subtitle": {
        "en": "81 Padas • Brahmasthan (Sacred Center) highlighted",
        "hi": "81 पद • ब्रह्मस्थान (पवित्र केंद्र) हाइलाइट किया गया",
    },
    "btn_place_corners": {
        "en": "Place corners",
        "hi": "कोने रखें",
    },
    "btn_confirm": {
        "en": "Confirm",
        "hi": "पुष्टि करें",
    },
    "btn_cancel": {
        "en": "Cancel",
        "hi": "रद्द करें",
    },
    "btn_clear": {
        "en": "Clear",
        "hi": "साफ़ करें",
    },
    "heading_unavailable": {
        "en": "Compass sensor unavailable on this device",
        "hi": "इस डिवाइस पर कम्पास सेंसर उपलब्ध नहीं है",
    },
    "placeholder": {
        "en": "Place and confirm the plot corners to see the Vastu grid",
        "hi": "वास्तु ग्रिड देखने के लिए प्लॉट के कोने रखें और पुष्टि करें",
    },
}

# Devta names; English is the canonical spelling
_DEVTA_NAMES: dict[str, dict[str, str]] = {
    "hi": {
        "Nirruti": "निरृति",
        "Pitru": "पितृ",
        "Dauvarika": "दौवारिक",
        "Sugriva": "सुग्रीव",
        "Pushpadanta": "पुष्पदंत",
        "Varuna": "वरुण",
        "Asura": "असुर",
        "Shosha": "शोष",
        "Papayakshma": "पापयक्ष्मा",
        "Mriga": "मृग",
        "Putana": "पूतना",
        "Aryaman": "अर्यमन",
        "Vivasvan": "विवस्वान",
        "Indra": "इंद्र",
        "Mitra": "मित्र",
        "Rudra": "रुद्र",
        "Yaksha": "यक्ष",
        "Roga": "रोग",
        "Bhrungraj": "भृंगराज",
        "Anjan": "अंजन",
        "Savita": "सविता",
        "Brahma": "ब्रह्मा",
        "Satya": "सत्य",
        "Bhringaraj": "भृंगराज",
        "Ahi": "अहि",
        "Naga": "नाग",
        "Vitatha": "वितथ",
        "Griharakshita": "गृहरक्षित",
        "Yama": "यम",
        "Gandharva": "गंधर्व",
        "Brahmasthan": "ब्रह्मस्थान",
        "Bhringraja": "भृंगराज",
        "Soma": "सोम",
        "Mukhya": "मुख्य",
        "Gruhakshata": "गृहक्षत",
        "Antariksha": "अंतरिक्ष",
        "Prithvidhara": "पृथ्वीधर",
        "Parjanya": "पर्जन्य",
        "Jayanta": "जयंत",
        "Vayu": "वायु",
        "Pusha": "पूषा",
        "Bhrisha": "भृश",
        "Aakash": "आकाश",
        "Aryama": "अर्यमा",
        "Aditi": "अदिति",
        "Diti": "दिति",
        "Rajayakshma": "राजयक्ष्मा",
        "Papa": "पाप",
        "Bhallata": "भल्लाट",
        "Aap": "आप",
        "Agni": "अग्नि",
        "Isha": "ईशा",
        "Mahendra": "महेंद्र",
        "Surya": "सूर्य",
        "Shiva": "शिव",
        "Rudrajay": "रुद्रजय",
        "Aapvatsa": "आपवत्स",
        "Savitra": "सवित्र",
        "Indrajay": "इंद्रजय",
        "Svitra": "स्वित्र",
        "Bhallat": "भल्लाट",
        "Aditya": "आदित्य",
        "Antariksh": "अंतरिक्ष",
        "Gruhakshat": "गृहक्षत",
        "Bhujang": "भुजंग",
    },
}

LANGUAGES = ("en", "hi")


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def translate(name: str, lang: str) -> str:
    """Translate a devta name; unknown names and languages come back unchanged."""
    return _DEVTA_NAMES.get(lang, {}).get(name, name)
