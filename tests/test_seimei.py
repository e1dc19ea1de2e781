"""Тесты 姓名判断 и таблицы черт"""
import pytest

from personality_calculator.exceptions import InvalidNameError
from personality_calculator.seimei import (
    ADVICE_BY_REMAINDER, CHARACTERISTICS_MOD_3, CHARACTERISTICS_MOD_5, CHARACTERISTICS_MOD_7,
    LUCK_GOOD, LUCK_GREAT, LUCK_MINOR, calculate_name_divination, get_luck, total_strokes
)
from personality_calculator.strokes import DEFAULT_STROKE_COUNT, strokes_of


class TestStrokes:

    @pytest.mark.parametrize("character,expected", [
        ('山', 3),
        ('田', 5),
        ('太', 4),
        ('郎', 10),
        ('藤', 18),
    ])
    def test_known_characters(self, character, expected):
        assert strokes_of(character) == expected

    @pytest.mark.parametrize("character", ['龍', 'あ', 'ア'])
    def test_unknown_characters_use_default(self, character):
        assert strokes_of(character) == DEFAULT_STROKE_COUNT

    def test_total_ignores_spaces_and_latin(self):
        assert total_strokes("山 田A1") == 8

    def test_total_counts_kana_with_default(self):
        assert total_strokes("あい") == 2 * DEFAULT_STROKE_COUNT

    @pytest.mark.parametrize("left,right", [
        ("山田", "太郎"),
        ("あい", "龍"),
        ("山 A", "b田"),
        ("", "佐藤"),
        ("Tom", "花子"),
        ("龍々", "ア"),
        ("佐藤 花子", "123"),
    ])
    def test_total_is_additive(self, left, right):
        assert total_strokes(left) + total_strokes(right) == total_strokes(left + right)


class TestNameDivination:

    def test_yamada_taro(self):
        result = calculate_name_divination("山田", "太郎")

        assert result.heaven_number == 8
        assert result.earth_number == 14
        assert result.name_total == 22
        assert result.human_number == 9
        assert result.last_name_total == result.heaven_number
        assert result.first_name_total == result.earth_number

    def test_yamada_taro_texts(self):
        result = calculate_name_divination("山田", "太郎")

        assert result.characteristics == [
            CHARACTERISTICS_MOD_3[1],
            CHARACTERISTICS_MOD_5[2],
            CHARACTERISTICS_MOD_7[1],
        ]
        assert result.characteristics[0].startswith("コミュニケーション")
        assert result.characteristics[1].startswith("創造性豊か")
        assert result.characteristics[2].startswith("協調性")
        assert result.good_luck.startswith("中吉")
        assert result.advice == ADVICE_BY_REMAINDER[6]
        assert result.advice.startswith("人との繋がり")

    def test_sato_hanako(self):
        result = calculate_name_divination("佐藤", "花子")

        assert result.name_total == 35
        assert result.human_number == 25

    def test_human_number_uses_inner_characters(self):
        # 龍 нет в таблице: последний символ фамилии дает 7
        result = calculate_name_divination("山龍", "太")
        assert result.human_number == DEFAULT_STROKE_COUNT + 4

    @pytest.mark.parametrize("surname,given_name,field", [
        ("", "太郎", "surname"),
        ("山田", "", "given_name"),
    ])
    def test_empty_name_raises(self, surname, given_name, field):
        with pytest.raises(InvalidNameError) as exc_info:
            calculate_name_divination(surname, given_name)
        assert exc_info.value.field == field

    def test_invalid_name_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_name_divination("", "")


class TestTextTables:

    def test_mod_7_pairs_share_text(self):
        assert CHARACTERISTICS_MOD_7[1] == CHARACTERISTICS_MOD_7[6]
        assert CHARACTERISTICS_MOD_7[2] == CHARACTERISTICS_MOD_7[5]
        assert CHARACTERISTICS_MOD_7[3] == CHARACTERISTICS_MOD_7[4]

    @pytest.mark.parametrize("total,expected", [
        (10, LUCK_MINOR),
        (11, LUCK_GREAT),
        (22, LUCK_GOOD),
        (14, LUCK_MINOR),
        (19, LUCK_GREAT),
    ])
    def test_luck_by_last_digit(self, total, expected):
        assert get_luck(total) == expected
