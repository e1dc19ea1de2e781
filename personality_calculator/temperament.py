"""Классификация темперамента (MBTI) по ответам анкеты"""
import logging
from collections import Counter
from typing import Iterable

from .models import QuestionnaireResponse, TemperamentResult, TemperamentType

logger = logging.getLogger(__name__)

ANSWER_LETTERS = frozenset('iensftjp')

# Значение шкалы, если по оси нет ни одного ответа
NEUTRAL_SCALE = 50


def tally_answers(responses: Iterable[QuestionnaireResponse]) -> Counter:
    """Подсчитывает буквы ответов; неизвестные буквы пропускаются"""
    counts = Counter()
    for response in responses:
        answer = response.answer.lower()
        if answer in ANSWER_LETTERS:
            counts[answer] += 1
    return counts


def axis_scale(first: int, second: int) -> int:
    """Доля первой буквы в процентах, округление половины вверх"""
    total = first + second
    if total == 0:
        return NEUTRAL_SCALE
    return (200 * first + total) // (2 * total)


def classify_temperament(responses: Iterable[QuestionnaireResponse]) -> TemperamentResult:
    """Определяет 4-буквенный тип и шкалы по осям I-E, N-S, F-T, J-P"""
    counts = tally_answers(responses)
    logger.debug(f"Подсчет ответов: {dict(counts)}")

    ie_scale = axis_scale(counts['i'], counts['e'])
    ns_scale = axis_scale(counts['n'], counts['s'])
    # Чем больше T, тем выше шкала F-T
    ft_scale = axis_scale(counts['t'], counts['f'])
    jp_scale = axis_scale(counts['j'], counts['p'])

    code = (
        ('I' if ie_scale >= 50 else 'E') +
        ('N' if ns_scale >= 50 else 'S') +
        ('T' if ft_scale >= 50 else 'F') +
        ('J' if jp_scale >= 50 else 'P')
    )
    logger.debug(f"Тип: {code}, шкалы: {ie_scale}/{ns_scale}/{ft_scale}/{jp_scale}")

    return TemperamentResult(
        type=TemperamentType(code),
        ie_scale=ie_scale,
        ns_scale=ns_scale,
        ft_scale=ft_scale,
        jp_scale=jp_scale
    )
