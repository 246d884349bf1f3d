# calendarkit/weekdays.py - localized weekday labels, Monday first
from types import MappingProxyType

DEFAULT_CULTURE = 'en'

WEEKDAYS = MappingProxyType({
    'ru': ('Пн', 'Вт', 'Ср', 'Чт', 'Пт', 'Сб', 'Вс'),
    'zh': ('一', '二', '三', '四', '五', '六', '日'),
    'fr': ('Lun', 'Mar', 'Mer', 'Jeu', 'Ven', 'Sam', 'Dim'),
    'es': ('Lun', 'Mar', 'Mié', 'Jue', 'Vie', 'Sáb', 'Dom'),
    'en': ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun'),
    'de': ('Mo', 'Di', 'Mi', 'Do', 'Fr', 'Sa', 'So'),
    'it': ('Lun', 'Mar', 'Mer', 'Gio', 'Ven', 'Sab', 'Dom'),
    'pt': ('Seg', 'Ter', 'Qua', 'Qui', 'Sex', 'Sáb', 'Dom'),
    'ar': ('الاثنين', 'الثلاثاء', 'الأربعاء', 'الخميس', 'الجمعة', 'السبت', 'الأحد'),
    'ja': ('月', '火', '水', '木', '金', '土', '日'),
    'ko': ('월', '화', '수', '목', '금', '토', '일'),
    'pl': ('Pon', 'Wt', 'Śr', 'Cz', 'Pt', 'Sob', 'Nd'),
    'sv': ('Mån', 'Tis', 'Ons', 'Tor', 'Fre', 'Lör', 'Sön'),
    'nl': ('Ma', 'Di', 'Wo', 'Do', 'Vr', 'Za', 'Zo'),
    'tr': ('Pzt', 'Sal', 'Çar', 'Per', 'Cum', 'Cmt', 'Paz'),
    'he': ('שני', 'שלישי', 'רביעי', 'חמישי', 'שישי', 'שבת', 'ראשון'),
    'hi': ('सोम', 'मंगल', 'बुध', 'गुरु', 'शुक्र', 'शनि', 'रवि'),
})


def weekday_labels(culture) -> tuple:
    """Return the seven weekday labels for a culture code.

    The lookup ignores case and any region suffix ("pt-BR", "de_AT"), and
    falls back to English for codes it doesn't know. It never raises.
    """
    if not isinstance(culture, str):
        return WEEKDAYS[DEFAULT_CULTURE]
    code = culture.strip().lower().replace('_', '-')
    if code in WEEKDAYS:
        return WEEKDAYS[code]
    return WEEKDAYS.get(code.split('-', 1)[0], WEEKDAYS[DEFAULT_CULTURE])
