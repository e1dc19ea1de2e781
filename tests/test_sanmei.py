"""Тесты 算命学"""
import pytest

from personality_calculator.models import Element, Polarity
from personality_calculator.sanmei import classify_sanmei


@pytest.mark.parametrize("year,month,day,element,polarity,full_type", [
    (2000, 1, 1, Element.EARTH, Polarity.YIN, "土命・陰"),
    (1990, 6, 15, Element.FIRE, Polarity.YANG, "火命・陽"),
    (1995, 5, 5, Element.WOOD, Polarity.YANG, "木命・陽"),
    (1998, 1, 1, Element.WOOD, Polarity.YIN, "木命・陰"),
    (2001, 1, 1, Element.METAL, Polarity.YANG, "金命・陽"),
    (1992, 1, 1, Element.WATER, Polarity.YIN, "水命・陰"),
])
def test_classify_sanmei(year, month, day, element, polarity, full_type):
    result = classify_sanmei(year, month, day)
    assert result.element is element
    assert result.polarity is polarity
    assert result.full_type == full_type


def test_same_sum_gives_same_type():
    assert classify_sanmei(1990, 1, 20) == classify_sanmei(1990, 6, 15)
