"""Расчет 姓名判断 по количеству черт фамилии и имени"""
import re
from typing import List

from .exceptions import InvalidNameError
from .models import NameDivinationResult
from .strokes import strokes_of

# Хирагана, катакана и основные иероглифы CJK
COUNTED_CHARACTERS = re.compile(r'[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]')

# Особенности по остатку от деления на 3, 5 и 7
CHARACTERISTICS_MOD_3 = (
    "直観力が鋭く、物事の本質を見抜く力がある",
    "コミュニケーション能力が高く、人間関係を円滑に築ける",
    "忍耐強く、困難にも粘り強く取り組める",
)

CHARACTERISTICS_MOD_5 = (
    "社交性があり、様々な場面で適応力を発揮する",
    "誠実で信頼される人柄を持っている",
    "創造性豊かで、独自の視点を持っている",
    "分析力に優れ、論理的な思考ができる",
    "感受性が豊かで、人の気持ちを理解するのが上手",
)

_LEADERSHIP = "リーダーシップがあり、周囲を導く力を持っている"
_COOPERATION = "協調性があり、チームの中で調和を生み出せる"
_INDEPENDENCE = "独立心が強く、自分のペースで物事を進める"
_METICULOUS = "細部に気を配る几帳面さがあり、丁寧な仕事ができる"

# Остатки 1 и 6, 2 и 5, 3 и 4 дают одинаковый текст
CHARACTERISTICS_MOD_7 = (
    _LEADERSHIP,
    _COOPERATION,
    _INDEPENDENCE,
    _METICULOUS,
    _METICULOUS,
    _INDEPENDENCE,
    _COOPERATION,
)

LUCK_GREAT = "大吉: あなたの名前の画数は非常に良い運勢を示しています。創造性、リーダーシップ、成功への道が開かれています。"
LUCK_GOOD = "中吉: あなたの名前の画数は安定した運勢を示しています。堅実さと調和がもたらされますが、時に柔軟性が必要です。"
LUCK_MINOR = "小吉: あなたの名前の画数は慎重さを要する運勢を示しています。チャレンジを乗り越えることで大きな成長が期待できます。"

LUCK_BY_REMAINDER = (
    LUCK_MINOR,  # 0
    LUCK_GREAT,  # 1
    LUCK_GOOD,   # 2
    LUCK_GREAT,  # 3
    LUCK_MINOR,  # 4
    LUCK_GREAT,  # 5
    LUCK_GOOD,   # 6
    LUCK_GREAT,  # 7
    LUCK_GOOD,   # 8
    LUCK_GREAT,  # 9
)

ADVICE_BY_REMAINDER = (
    "安定を大切にしながらも、新しい挑戦を恐れないことで、より大きな成長が期待できます。",
    "あなたのリーダーシップを活かし、周囲の人々と共に目標に向かって進むことで、より大きな成功を収めることができるでしょう。",
    "柔軟性と適応力を大切にしながら、自分の価値観を明確にすることで、より充実した人生を歩むことができるでしょう。",
    "創造性を発揮できる場を積極的に求め、自分らしい表現方法を見つけることで、より充実した毎日を過ごせるでしょう。",
    "計画性と実行力のバランスを大切にし、着実に目標に向かって進むことで、確かな成果を上げることができるでしょう。",
    "好奇心と探究心を大切にしながら、一つのことに深く取り組む姿勢を持つことで、専門性を高めることができるでしょう。",
    "人との繋がりを大切にしながらも、自分自身の時間とエネルギーを適切に管理することで、より充実した関係性を築けるでしょう。",
    "直観と論理のバランスを取りながら、自分の内なる声に耳を傾けることで、より自分らしい選択ができるようになるでしょう。",
)


def total_strokes(text: str) -> int:
    """Суммарное количество черт; пробелы, латиница и знаки не учитываются"""
    return sum(strokes_of(char) for char in text if COUNTED_CHARACTERS.match(char))


def get_characteristics(total: int) -> List[str]:
    return [
        CHARACTERISTICS_MOD_3[total % 3],
        CHARACTERISTICS_MOD_5[total % 5],
        CHARACTERISTICS_MOD_7[total % 7],
    ]


def get_luck(total: int) -> str:
    return LUCK_BY_REMAINDER[total % 10]


def get_advice(total: int) -> str:
    return ADVICE_BY_REMAINDER[total % 8]


def calculate_name_divination(surname: str, given_name: str) -> NameDivinationResult:
    """
    Расчет 姓名判断

    Args:
        surname: фамилия (姓)
        given_name: имя (名)

    Raises:
        InvalidNameError: если фамилия или имя пустые
    """
    if not surname:
        raise InvalidNameError('surname')
    if not given_name:
        raise InvalidNameError('given_name')

    last_name_total = total_strokes(surname)
    first_name_total = total_strokes(given_name)
    name_total = last_name_total + first_name_total

    # 人格: последний символ фамилии + первый символ имени
    human_number = strokes_of(surname[-1]) + strokes_of(given_name[0])

    return NameDivinationResult(
        name_total=name_total,
        first_name_total=first_name_total,
        last_name_total=last_name_total,
        heaven_number=last_name_total,
        earth_number=first_name_total,
        human_number=human_number,
        characteristics=get_characteristics(name_total),
        good_luck=get_luck(name_total),
        advice=get_advice(name_total)
    )
