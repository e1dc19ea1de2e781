"""Профиль из шести черт личности для диаграммы"""
from typing import Dict, List, Tuple

from .models import Element, ElementResult, Polarity, TemperamentResult, TraitScore

# (調和性, 創造性) по элементу
ELEMENT_BASE_SCORES: Dict[Element, Tuple[int, int]] = {
    Element.WOOD: (60, 70),
    Element.FIRE: (50, 90),
    Element.EARTH: (80, 40),
    Element.METAL: (55, 60),
    Element.WATER: (70, 75),
}

# (調和性, 創造性) поправка по полярности
POLARITY_ADJUSTMENTS: Dict[Polarity, Tuple[int, int]] = {
    Polarity.YIN: (10, -5),
    Polarity.YANG: (-5, 10),
}

TRAIT_LABELS = ('内向性', '直感力', '論理性', '計画性', '調和性', '創造性')


def calculate_trait_scores(temperament: TemperamentResult, sanmei: ElementResult) -> List[TraitScore]:
    harmony, creativity = ELEMENT_BASE_SCORES[sanmei.element]
    harmony_delta, creativity_delta = POLARITY_ADJUSTMENTS[sanmei.polarity]

    values = (
        temperament.ie_scale,
        temperament.ns_scale,
        temperament.ft_scale,
        temperament.jp_scale,
        harmony + harmony_delta,
        creativity + creativity_delta,
    )
    return [TraitScore(trait=label, value=value) for label, value in zip(TRAIT_LABELS, values)]
