"""Тесты вспомогательных функций бота"""
from datetime import date

import pytest

from bot.main import (
    build_assessment_input, build_question_keyboard, create_progress_indicator, format_history, record_answer,
    parse_birth_date, parse_birth_time, split_kanji_name, split_message
)
from personality_calculator.questions import QUESTIONS


class TestParseBirthDate:

    @pytest.mark.parametrize("text", ["1990.06.15", "1990-06-15", "1990/06/15", " 1990.6.15 "])
    def test_supported_formats(self, text):
        assert parse_birth_date(text) == date(1990, 6, 15)

    @pytest.mark.parametrize("text", ["15.06", "abc", "1990.02.30", "1899.12.31", "1990.13.01"])
    def test_invalid_dates(self, text):
        with pytest.raises(ValueError):
            parse_birth_date(text)

    def test_future_date(self):
        with pytest.raises(ValueError):
            parse_birth_date(f"{date.today().year + 1}.01.01")


class TestParseBirthTime:

    @pytest.mark.parametrize("text,expected", [
        ("14", (14, None)),
        ("0", (0, None)),
        ("14:30", (14, 30)),
        ("7時", (7, None)),
        ("14時30分", (14, 30)),
    ])
    def test_valid(self, text, expected):
        assert parse_birth_time(text) == expected

    @pytest.mark.parametrize("text", ["24", "-1", "12:60", "noon", ""])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_birth_time(text)


class TestSplitKanjiName:

    @pytest.mark.parametrize("text", ["山田 太郎", "山田　太郎", "  山田   太郎 "])
    def test_valid(self, text):
        assert split_kanji_name(text) == ("山田", "太郎")

    @pytest.mark.parametrize("text", ["山田太郎", "山田 太郎 次郎", ""])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            split_kanji_name(text)


class TestMessages:

    def test_short_message_is_not_split(self):
        assert split_message("abc") == ["abc"]

    def test_long_message_is_split(self):
        parts = split_message("a" * 8001)
        assert [len(part) for part in parts] == [4000, 4000, 1]

    def test_progress_indicator(self):
        assert "50%" in create_progress_indicator(4, 8)
        assert "(4/8)" in create_progress_indicator(4, 8)

    def test_question_keyboard(self):
        keyboard = build_question_keyboard(QUESTIONS[0])
        callbacks = [row[0].callback_data for row in keyboard.inline_keyboard]
        assert callbacks == ["answer_1_e", "answer_1_i"]

    def test_empty_history(self):
        assert "まだ診断結果がありません" in format_history([])


class TestBuildAssessmentInput:

    def test_from_conversation_state(self):
        user_data = {
            'name': "山田 太郎",
            'birth_date': date(1990, 6, 15),
            'gender': "male",
            'last_name_kanji': "山田",
            'first_name_kanji': "太郎",
            'birth_hour': 0,
            'birth_minute': None,
            'answers': [(1, 'i'), (2, 'n')],
        }
        data = build_assessment_input(user_data)

        assert data.birth_year == 1990
        assert data.birth_hour == 0
        assert [r.answer for r in data.mbti_responses] == ['i', 'n']

    def test_skipped_optional_steps(self):
        data = build_assessment_input({'name': "A", 'birth_date': date(2000, 1, 1), 'gender': "other"})

        assert data.last_name_kanji is None
        assert data.birth_hour is None
        assert data.mbti_responses == []


class TestRecordAnswer:

    def test_current_question(self):
        answers = []
        assert record_answer(answers, QUESTIONS[0]['id'], 'i') is True
        assert answers == [(QUESTIONS[0]['id'], 'i')]

    def test_stale_question_is_ignored(self):
        answers = [(QUESTIONS[0]['id'], 'i'), (QUESTIONS[1]['id'], 'n')]
        assert record_answer(answers, QUESTIONS[0]['id'], 'e') is False
        assert len(answers) == 2

    def test_double_tap_is_ignored(self):
        answers = []
        record_answer(answers, QUESTIONS[0]['id'], 'i')
        assert record_answer(answers, QUESTIONS[0]['id'], 'i') is False
        assert len(answers) == 1

    def test_unknown_option_is_ignored(self):
        answers = []
        assert record_answer(answers, QUESTIONS[0]['id'], 'n') is False
        assert answers == []

    def test_completed_questionnaire(self):
        answers = [(question['id'], question['options'][0]['value']) for question in QUESTIONS]
        assert record_answer(answers, QUESTIONS[-1]['id'], QUESTIONS[-1]['options'][0]['value']) is False
        assert len(answers) == len(QUESTIONS)
