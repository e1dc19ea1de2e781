"""Тесты сборки отчета"""
import pytest

from personality_calculator import fragments
from personality_calculator.assembler import (
    assemble_report, generate_challenges, generate_career, generate_overview,
    get_combined_overview, get_sanmei_overview, get_sanmei_traits
)
from personality_calculator.models import (
    Element, ElementResult, Polarity, TemperamentResult, TemperamentType
)
from personality_calculator.four_pillars import calculate_four_pillars
from personality_calculator.seimei import calculate_name_divination


def temperament(code: str) -> TemperamentResult:
    return TemperamentResult(type=TemperamentType(code), ie_scale=50, ns_scale=50, ft_scale=50, jp_scale=50)


def sanmei(element: Element, polarity: Polarity) -> ElementResult:
    return ElementResult(element=element, polarity=polarity, full_type=f"{element.value}命・{polarity.value}")


class TestFragmentTables:

    @pytest.mark.parametrize("table", [
        fragments.NICKNAMES,
        fragments.TEMPERAMENT_TRAITS,
        fragments.TEMPERAMENT_OVERVIEWS,
    ])
    def test_every_type_has_text(self, table):
        assert set(table) == set(TemperamentType)

    @pytest.mark.parametrize("table", [
        fragments.ELEMENT_TRAITS,
        fragments.ELEMENT_OVERVIEW_TEMPLATES,
        fragments.ELEMENT_STRENGTHS,
        fragments.ELEMENT_CHALLENGES,
        fragments.ELEMENT_RELATIONSHIPS,
        fragments.ELEMENT_CAREERS,
        fragments.ELEMENT_OUTLOOKS,
        fragments.COMBINED_ELEMENT_INSIGHTS,
    ])
    def test_every_element_has_text(self, table):
        assert set(table) == set(Element)

    def test_missing_key_is_reported(self):
        with pytest.raises(RuntimeError, match="INTJ"):
            fragments._check_complete({}, TemperamentType, 'EMPTY')


class TestSanmeiTexts:

    def test_traits_end_with_polarity_trait(self):
        traits = get_sanmei_traits(Element.WOOD, Polarity.YIN)
        assert traits[-1] == fragments.POLARITY_TRAIT_YIN
        assert traits[:-1] == fragments.ELEMENT_TRAITS[Element.WOOD]

    def test_overview_mentions_full_type(self):
        assert "水命・陽" in get_sanmei_overview(Element.WATER, Polarity.YANG)

    def test_overview_quality_depends_on_polarity(self):
        yin_quality, yang_quality = fragments.ELEMENT_OVERVIEW_QUALITIES[Element.FIRE]
        assert yin_quality in get_sanmei_overview(Element.FIRE, Polarity.YIN)
        assert yang_quality in get_sanmei_overview(Element.FIRE, Polarity.YANG)


class TestOverview:

    def test_three_paragraphs(self):
        overview = generate_overview(TemperamentType.INTJ, Element.WOOD, Polarity.YIN)
        paragraphs = overview.split("\n\n")

        assert len(paragraphs) == 3
        assert paragraphs[0] == fragments.TEMPERAMENT_OVERVIEWS[TemperamentType.INTJ]

    @pytest.mark.parametrize("code,polarity,marker", [
        ("INTJ", Polarity.YIN, "「静かな内省力」"),
        ("ENFP", Polarity.YANG, "「活発な表現力」"),
        ("INTJ", Polarity.YANG, "「内省的な思考」"),
        ("ENFP", Polarity.YIN, "「社交的な表現」"),
    ])
    def test_combined_insight_energy_direction(self, code, polarity, marker):
        insight = get_combined_overview(TemperamentType(code), Element.EARTH, polarity)
        assert marker in insight
        assert insight.endswith("他者の成長や幸福に貢献することに喜びを見出します。")

    def test_combined_insight_element_branch(self):
        when_true, when_false = fragments.COMBINED_ELEMENT_INSIGHTS[Element.WOOD]
        assert when_true in get_combined_overview(TemperamentType.INFP, Element.WOOD, Polarity.YIN)
        assert when_false in get_combined_overview(TemperamentType.ISFP, Element.WOOD, Polarity.YIN)


class TestNarrative:

    def test_challenges_growth_advice_for_judging(self):
        assert "完璧でなくても良い" in generate_challenges(TemperamentType.ISFJ, Element.EARTH)

    def test_challenges_growth_advice_for_perceiving(self):
        assert "優先順位" in generate_challenges(TemperamentType.ENFP, Element.EARTH)

    def test_career_specific_roles(self):
        assert "戦略コンサルタント" in generate_career(TemperamentType.INTJ, Element.METAL)

    def test_career_general_roles(self):
        assert fragments.CAREER_ROLES_GENERAL in generate_career(TemperamentType.ISTP, Element.METAL)


class TestAssembleReport:

    def test_core_fields(self):
        result = assemble_report(temperament("INTJ"), sanmei(Element.WOOD, Polarity.YIN), "male")

        assert result.type_nickname == "「建築家・戦略家」"
        assert result.mbti_traits == fragments.TEMPERAMENT_TRAITS[TemperamentType.INTJ]
        assert result.relationship_tips.compatibility == fragments.COMPATIBILITY_ADVICE
        assert result.name_divination is None
        assert result.four_pillars is None

    def test_optional_results_pass_through(self):
        name_divination = calculate_name_divination("山田", "太郎")
        four_pillars = calculate_four_pillars(1990, 6, 15, 0)

        result = assemble_report(
            temperament("ENFP"),
            sanmei(Element.FIRE, Polarity.YANG),
            "female",
            name_divination=name_divination,
            four_pillars=four_pillars
        )

        assert result.name_divination == name_divination
        assert result.four_pillars == four_pillars

    def test_gender_does_not_change_texts(self):
        args = (temperament("ISFJ"), sanmei(Element.METAL, Polarity.YIN))
        assert assemble_report(*args, "male") == assemble_report(*args, "other")

    def test_every_type_and_element_assembles(self):
        for code in TemperamentType:
            for element in Element:
                for polarity in Polarity:
                    result = assemble_report(temperament(code.value), sanmei(element, polarity), "other")
                    assert result.overview
                    assert result.future_outlook
