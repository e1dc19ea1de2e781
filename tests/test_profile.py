"""Тесты профиля черт и каталога вопросов"""
import pytest

from personality_calculator.models import Element, ElementResult, Polarity, TemperamentResult, TemperamentType
from personality_calculator.profile import TRAIT_LABELS, calculate_trait_scores
from personality_calculator.questions import (
    CHALLENGE_OPTIONS, LIFE_FOCUS_OPTIONS, QUESTIONS, question_by_id
)


class TestTraitScores:

    @pytest.mark.parametrize("element,polarity,harmony,creativity", [
        (Element.WOOD, Polarity.YANG, 55, 80),
        (Element.EARTH, Polarity.YIN, 90, 35),
        (Element.FIRE, Polarity.YANG, 45, 100),
        (Element.WATER, Polarity.YIN, 80, 70),
    ])
    def test_element_scores(self, element, polarity, harmony, creativity):
        temperament = TemperamentResult(
            type=TemperamentType.ENFP, ie_scale=25, ns_scale=75, ft_scale=0, jp_scale=33
        )
        sanmei = ElementResult(element=element, polarity=polarity, full_type="")

        scores = calculate_trait_scores(temperament, sanmei)

        assert [score.trait for score in scores] == list(TRAIT_LABELS)
        assert [score.value for score in scores] == [25, 75, 0, 33, harmony, creativity]
        assert all(score.full_mark == 100 for score in scores)


class TestQuestions:

    def test_eight_questions_with_two_options(self):
        assert len(QUESTIONS) == 8
        assert all(len(question['options']) == 2 for question in QUESTIONS)

    def test_each_axis_asked_twice(self):
        categories = [question['category'] for question in QUESTIONS]
        for axis in ('ie', 'ns', 'ft', 'jp'):
            assert categories.count(axis) == 2

    def test_options_match_axis_letters(self):
        for question in QUESTIONS:
            letters = {option['value'] for option in question['options']}
            assert letters == set(question['category'])

    def test_question_by_id(self):
        assert question_by_id(3)['category'] == 'ft'

    def test_unknown_question_id(self):
        with pytest.raises(KeyError):
            question_by_id(99)

    def test_final_question_options(self):
        assert len(LIFE_FOCUS_OPTIONS) == 7
        assert len(CHALLENGE_OPTIONS) == 6
        assert {'value', 'label'} == set(LIFE_FOCUS_OPTIONS[0])
