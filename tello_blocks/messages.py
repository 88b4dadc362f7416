"""
Block labels per locale.

Keyed by opcode, then locale. "en" is always present.
"[X]" marks where the host renders the argument slot.
"""

DEFAULT_LOCALE = 'en'
SUPPORTED_LOCALES = ('ja', 'ja-Hira')

MESSAGES = {
    'connect': {
        'ja': '接続する',
        'ja-Hira': 'せつぞくする',
        'en': 'connect'
    },
    'takeoff': {
        'ja': '離陸する',
        'ja-Hira': 'りりくする',
        'en': 'takeoff'
    },
    'land': {
        'ja': '着陸する',
        'ja-Hira': 'ちゃくりくする',
        'en': 'land'
    },
    'up': {
        'ja': '上に [X]cm 上がる',
        'ja-Hira': 'うえに [X] センチあがる',
        'en': 'up [X] cm'
    },
    'down': {
        'ja': '下に [X]cm 下がる',
        'ja-Hira': 'したに [X] センチさがる',
        'en': 'down [X] cm'
    },
    'left': {
        'ja': '左に [X]cm 動く',
        'ja-Hira': 'ひだりに [X] センチうごく',
        'en': 'move left [X] cm'
    },
    'right': {
        'ja': '右に [X]cm 動く',
        'ja-Hira': 'みぎに [X] センチうごく',
        'en': 'move right [X] cm'
    },
    'forward': {
        'ja': '前に [X]cm 進む',
        'ja-Hira': 'まえに [X] センチすすむ',
        'en': 'move forward [X] cm'
    },
    'back': {
        'ja': '後ろに [X]cm 下がる',
        'ja-Hira': 'うしろに [X] センチさがる',
        'en': 'move back [X] cm'
    },
    'cw': {
        'ja': '[X] 度回転する',
        'ja-Hira': '[X] どまわる',
        'en': 'rotate [X] degrees clockwise'
    },
    'ccw': {
        'ja': '[X] 度逆回転する',
        'ja-Hira': '[X] どぎゃくにまわる',
        'en': 'rotate [X] degrees counterclockwise'
    }
}


def message_for(opcode: str, locale: str) -> str:
    """Label for opcode in locale, falling back to English."""
    entry = MESSAGES.get(opcode, {})
    return entry.get(locale) or entry.get(DEFAULT_LOCALE, opcode)
