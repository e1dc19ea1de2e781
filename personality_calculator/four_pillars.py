"""Калькулятор 四柱推命 (упрощенный: 立春 и солнечные сезоны не учитываются)"""
from datetime import date, timedelta
from typing import Dict, List, NamedTuple, Tuple

from .models import Branch, Element, FourPillarsResult, Stem

STEMS: List[Stem] = list(Stem)
BRANCHES: List[Branch] = list(Branch)

# День отсчета для дневного столпа: 1900-01-01 считается 甲子
DAY_PILLAR_EPOCH = date(1900, 1, 1)

STEM_TO_ELEMENT: Dict[Stem, Element] = {
    Stem.KINOE: Element.WOOD, Stem.KINOTO: Element.WOOD,
    Stem.HINOE: Element.FIRE, Stem.HINOTO: Element.FIRE,
    Stem.TSUCHINOE: Element.EARTH, Stem.TSUCHINOTO: Element.EARTH,
    Stem.KANOE: Element.METAL, Stem.KANOTO: Element.METAL,
    Stem.MIZUNOE: Element.WATER, Stem.MIZUNOTO: Element.WATER,
}

# Смещение ствола первого месяца по стволу года
MONTH_STEM_OFFSET: Dict[Stem, int] = {
    Stem.KINOE: 0, Stem.TSUCHINOTO: 0,
    Stem.KINOTO: 2, Stem.KANOE: 2,
    Stem.HINOE: 4, Stem.KANOTO: 4,
    Stem.HINOTO: 6, Stem.MIZUNOE: 6,
    Stem.TSUCHINOE: 8, Stem.MIZUNOTO: 8,
}

# 相生: 木→火→土→金→水→木, 相剋: 木→土, 火→金, 土→水, 金→木, 水→火
ELEMENT_RELATIONSHIPS: Dict[Element, Tuple[List[Element], List[Element]]] = {
    Element.WOOD: ([Element.WATER, Element.WOOD, Element.FIRE], [Element.METAL, Element.EARTH]),
    Element.FIRE: ([Element.WOOD, Element.FIRE, Element.EARTH], [Element.WATER, Element.METAL]),
    Element.EARTH: ([Element.FIRE, Element.EARTH, Element.METAL], [Element.WOOD, Element.WATER]),
    Element.METAL: ([Element.EARTH, Element.METAL, Element.WATER], [Element.FIRE, Element.WOOD]),
    Element.WATER: ([Element.METAL, Element.WATER, Element.WOOD], [Element.EARTH, Element.FIRE]),
}

LIFE_THEMES: Dict[Stem, str] = {
    Stem.KINOE: "創造性と先駆性：新しいことを始め、道を切り開くことに強みがあります。リーダーシップと独創性を発揮できる場所で活躍できるでしょう。",
    Stem.KINOTO: "柔軟性と適応力：直感力と繊細な感覚を持ち、状況に適応する能力に優れています。芸術や人間関係の分野で才能を発揮できるでしょう。",
    Stem.HINOE: "情熱と影響力：明るく積極的なエネルギーを持ち、人々を鼓舞する力があります。人前に立つ仕事や創造的な分野で力を発揮できるでしょう。",
    Stem.HINOTO: "優しさと思いやり：繊細な感情と深い共感力を持ち、人々のケアや支援に関わる分野で才能を発揮できるでしょう。",
    Stem.TSUCHINOE: "安定性と信頼：誠実で堅実な性格を持ち、長期的な視点で物事を考えることができます。組織の中核として安定をもたらす役割に適しています。",
    Stem.TSUCHINOTO: "内省と理解：深い洞察力と分析力を持ち、複雑な情報を整理して理解する能力に優れています。知識や情報を扱う分野で才能を発揮できるでしょう。",
    Stem.KANOE: "決断力と実行力：明確な判断と行動力を持ち、効率的に目標を達成することができます。管理や実践的な分野で力を発揮できるでしょう。",
    Stem.KANOTO: "洗練と審美眼：繊細な感覚と美的センスを持ち、物事を洗練させる能力に優れています。芸術やデザイン、人間関係の調和を生み出す分野に適しています。",
    Stem.MIZUNOE: "革新と知恵：知的好奇心と先見性を持ち、新しい知識や技術を探求することに長けています。科学や哲学、革新的な分野で才能を発揮できるでしょう。",
    Stem.MIZUNOTO: "直感と感受性：鋭い直感と豊かな感受性を持ち、目に見えない世界とのつながりを感じることができます。芸術や癒し、人々の内面的成長を支援する分野に適しています。",
}


class Pillar(NamedTuple):
    stem: Stem
    branch: Branch

    def __str__(self):
        return f"{self.stem.value}{self.branch.value}"


def year_pillar(year: int) -> Pillar:
    return Pillar(STEMS[(year - 4) % 10], BRANCHES[(year - 4) % 12])


def month_pillar(year: int, month: int) -> Pillar:
    base = MONTH_STEM_OFFSET[year_pillar(year).stem]
    return Pillar(STEMS[(base + month - 1) % 10], BRANCHES[(month + 1) % 12])


def day_pillar(year: int, month: int, day: int) -> Pillar:
    # День, выходящий за пределы месяца (31 февраля), переносится на следующий месяц
    target = date(year, month, 1) + timedelta(days=day - 1)
    day_diff = (target - DAY_PILLAR_EPOCH).days
    return Pillar(STEMS[day_diff % 10], BRANCHES[day_diff % 12])


def hour_pillar(day_stem: Stem, hour: int) -> Pillar:
    # 23 часа относится к 子
    branch_index = 0 if hour == 23 else hour // 2
    stem_index = (STEMS.index(day_stem) + (hour // 2) * 2) % 10
    return Pillar(STEMS[stem_index], BRANCHES[branch_index])


def calculate_pillars(year: int, month: int, day: int, hour: int = 12) -> Dict[str, Pillar]:
    """Все четыре столпа: год, месяц, день, час"""
    day_p = day_pillar(year, month, day)
    return {
        'year': year_pillar(year),
        'month': month_pillar(year, month),
        'day': day_p,
        'hour': hour_pillar(day_p.stem, hour),
    }


def calculate_four_pillars(year: int, month: int, day: int, hour: int = 12) -> FourPillarsResult:
    """Расчет 四柱推命; в результат попадает только дневной столп"""
    pillars = calculate_pillars(year, month, day, hour)
    day_master = pillars['day'].stem
    day_master_element = STEM_TO_ELEMENT[day_master]
    lucky, unlucky = ELEMENT_RELATIONSHIPS[day_master_element]

    return FourPillarsResult(
        heavenly_stem=day_master,
        earthly_branch=pillars['day'].branch,
        day_master=day_master_element,
        lucky_elements=list(lucky),
        unlucky_elements=list(unlucky),
        life_theme=LIFE_THEMES[day_master]
    )
