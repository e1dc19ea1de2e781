"""Классификация 算命学 по дате рождения"""
from .models import Element, ElementResult, Polarity

ELEMENT_CYCLE = (Element.WOOD, Element.FIRE, Element.EARTH, Element.METAL, Element.WATER)


def classify_sanmei(year: int, month: int, day: int) -> ElementResult:
    """Элемент и полярность по сумме года, месяца и дня"""
    total = year + month + day
    element = ELEMENT_CYCLE[abs(total % 5)]
    polarity = Polarity.YIN if total % 2 == 0 else Polarity.YANG

    return ElementResult(
        element=element,
        polarity=polarity,
        full_type=f"{element.value}命・{polarity.value}"
    )
