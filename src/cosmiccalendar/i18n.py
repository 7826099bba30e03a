"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "우주 달력",
        "en": "Cosmic Calendar",
    },
    "label_zoom": {
        "ko": "시간 단위",
        "en": "Time scale",
    },
    "label_selected": {
        "ko": "선택한 시각",
        "en": "Selected",
    },
    "label_now": {
        "ko": "현재 시각",
        "en": "Now",
    },
    "label_moon": {
        "ko": "달의 위상",
        "en": "Moon phase",
    },
    "label_jump": {
        "ko": "날짜로 이동",
        "en": "Go to date",
    },
    "btn_prev": {
        "ko": "◀ 이전",
        "en": "◀ Back",
    },
    "btn_next": {
        "ko": "다음 ▶",
        "en": "Forward ▶",
    },
    "btn_present": {
        "ko": "⟲ 지금으로",
        "en": "⟲ Return to now",
    },
    "btn_jump": {
        "ko": "이동",
        "en": "Go",
    },
    "landing_hint": {
        "ko": "시간 단위를 골라 우주 달력을 탐험하세요",
        "en": "Pick a time scale to explore the cosmic calendar",
    },
}

_ZOOM_NAMES_KO: dict[str, str] = {
    "LANDING": "처음",
    "CENTURY": "세기",
    "DECADE": "십년",
    "YEAR": "년",
    "QUARTER": "분기",
    "MONTH": "월",
    "LUNAR CYCLE": "음력 주기",
    "WEEK": "주",
    "DAY": "일",
    "CLOCK": "시계",
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def zoom_name(name: str, lang: str) -> str:
    """Localized zoom level name; the catalog name is the English one."""
    if lang == "ko":
        return _ZOOM_NAMES_KO.get(name, name)
    return name.title()
