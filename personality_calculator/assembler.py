"""Сборка текстового отчета из фрагментов по типу и элементу"""
from typing import List, Optional

from . import fragments
from .models import (
    AnalysisResult, BalanceTips, Element, ElementResult, FourPillarsResult,
    NameDivinationResult, Polarity, RelationshipTips, TemperamentResult, TemperamentType
)

# Предикат типа, выбирающий вариант вывода в сводном обзоре
COMBINED_INSIGHT_PREDICATES = {
    Element.WOOD: lambda t: t.is_intuitive,
    Element.FIRE: lambda t: t.is_feeling,
    Element.EARTH: lambda t: t.is_judging,
    Element.METAL: lambda t: t.is_feeling,
    Element.WATER: lambda t: t.is_intuitive,
}


def get_nickname(mbti: TemperamentType) -> str:
    return fragments.NICKNAMES[mbti]


def get_mbti_traits(mbti: TemperamentType) -> List[str]:
    return list(fragments.TEMPERAMENT_TRAITS[mbti])


def get_sanmei_traits(element: Element, polarity: Polarity) -> List[str]:
    polarity_trait = (
        fragments.POLARITY_TRAIT_YIN if polarity is Polarity.YIN
        else fragments.POLARITY_TRAIT_YANG
    )
    return [*fragments.ELEMENT_TRAITS[element], polarity_trait]


def get_sanmei_overview(element: Element, polarity: Polarity) -> str:
    yin_quality, yang_quality = fragments.ELEMENT_OVERVIEW_QUALITIES[element]
    return fragments.ELEMENT_OVERVIEW_TEMPLATES[element].format(
        label=f"{element.value}命・{polarity.value}",
        quality=yin_quality if polarity is Polarity.YIN else yang_quality
    )


def get_combined_overview(mbti: TemperamentType, element: Element, polarity: Polarity) -> str:
    """Сводный вывод по двум системам"""
    is_introverted = mbti.is_introverted
    is_yin = polarity is Polarity.YIN

    insight = '二つの体系から見るあなたの最も際立った特徴は、'

    # Направление энергии совпадает: I + 陰 или E + 陽
    if is_introverted == is_yin:
        insight += (
            '「静かな内省力」と「深い内面的理解」です。表面的な社交よりも、一人一人との深い関わりを大切にし、'
            if is_introverted else
            '「活発な表現力」と「外向的なエネルギー」です。多くの人々との交流を通じて、'
        )
    else:
        insight += (
            '「内省的な思考」と「外向的なエネルギーのバランス」です。状況に応じて内向と外向の特性を切り替え、'
            if is_introverted else
            '「社交的な表現」と「内面的な深さのバランス」です。人々との交流を楽しみながらも内面に深い思考を持ち、'
        )

    when_true, when_false = fragments.COMBINED_ELEMENT_INSIGHTS[element]
    insight += when_true if COMBINED_INSIGHT_PREDICATES[element](mbti) else when_false
    insight += '他者の成長や幸福に貢献することに喜びを見出します。'
    return insight


def generate_overview(mbti: TemperamentType, element: Element, polarity: Polarity) -> str:
    return '\n\n'.join([
        fragments.TEMPERAMENT_OVERVIEWS[mbti],
        get_sanmei_overview(element, polarity),
        get_combined_overview(mbti, element, polarity),
    ])


def generate_strengths(mbti: TemperamentType, element: Element) -> str:
    if mbti.is_introverted:
        quality = '直感力と洞察力' if mbti.is_intuitive else '注意深い観察力と実用的な思考'
    else:
        quality = '創造的な視野と可能性への探求心' if mbti.is_intuitive else '現実的な問題解決能力と実行力'
    mbti_strengths = f"MBTIの{mbti.value}としての{quality}、"

    if mbti.is_feeling and element in (Element.WOOD, Element.WATER):
        combined = '人間関係や組織内で「静かなる改革者」として機能することができます。'
    elif mbti.is_thinking and element in (Element.METAL, Element.FIRE):
        combined = '戦略的思考と実行力を兼ね備えた「実践的な戦略家」として力を発揮できます。'
    elif mbti.is_judging and element in (Element.EARTH, Element.METAL):
        combined = '組織と構造を重視する「信頼できる基盤構築者」としての役割を果たせます。'
    elif not mbti.is_judging and element in (Element.WOOD, Element.FIRE):
        combined = '創造的で柔軟な「革新的な触媒」として環境に適応しながら新たな可能性を開拓できます。'
    else:
        combined = '多面的な視点と独自のアプローチで問題に取り組む能力に優れています。'

    return (
        f"{mbti_strengths}{fragments.ELEMENT_STRENGTHS[element]}が組み合わさり、あなたは{combined}"
        "複雑な状況を理解し、長期的なビジョンに基づいて行動する能力に優れています。"
    )


def generate_challenges(mbti: TemperamentType, element: Element) -> str:
    mbti_challenges = '内向的な性質' if mbti.is_introverted else '外向的なエネルギーの管理'
    mbti_challenges += 'と理想主義的な傾向' if mbti.is_intuitive else 'と実用主義的な焦り'

    if mbti.is_judging:
        growth_advice = '「完璧でなくても良い」という考え方を受け入れること'
    else:
        growth_advice = '焦点を絞り、行動に移すための明確な優先順位をつけること'

    return (
        f"{mbti_challenges}から、時に現実とのギャップにストレスを感じることがあります。"
        f"また、{fragments.ELEMENT_CHALLENGES[element]}。"
        "他者のニーズに敏感なあまり、自分自身のニーズを後回しにしてしまう傾向も見られます。"
        f"自分の限界を認識し、{growth_advice}が成長への鍵となります。"
    )


def _is_empathic(mbti: TemperamentType, element: Element) -> bool:
    return mbti.is_feeling or element in (Element.WATER, Element.WOOD)


def generate_relationships(mbti: TemperamentType, element: Element) -> str:
    if mbti.is_introverted:
        style = '少数の深い関係を好み、表面的な交流よりも意味のある会話や共有体験を重視します。'
    else:
        style = '広い人間関係のネットワークを持ち、様々な人々との交流から刺激を受ける傾向があります。'

    if _is_empathic(mbti, element):
        emotional_note = '共感力が高いため、時に他者の問題を自分のことのように感じてしまうこともあります。'
    else:
        emotional_note = '論理的な思考を大切にしながらも、重要な関係では感情的なつながりも大切にします。'

    return f"{style}{fragments.ELEMENT_RELATIONSHIPS[element]}{emotional_note}"


def generate_career(mbti: TemperamentType, element: Element) -> str:
    if mbti.is_intuitive and mbti.is_feeling:
        preferences = '人の成長や発展に関わる職業、創造的な問題解決が求められる分野、社会的な意義のある仕事'
    elif mbti.is_intuitive:
        preferences = '戦略的な計画立案、複雑な問題の分析、革新的なシステム設計が求められる分野'
    elif mbti.is_feeling:
        preferences = '実用的なケアやサポート、対人サービス、コミュニティの調和を促進する分野'
    else:
        preferences = '実務的な管理運営、効率的なシステムの実装、具体的な問題解決が求められる分野'

    roles = fragments.CAREER_ROLES_GENERAL
    for types, text in fragments.CAREER_ROLES.items():
        if mbti in types:
            roles = text
            break

    if mbti.is_introverted:
        org_role = '組織内では、深い分析と洞察を提供し、背後から支える役割が得意です。'
    else:
        org_role = '組織内では、ビジョンを示し、人々をつなぐ役割が得意です。'

    return (
        f"{preferences}に適性があります。"
        f"また、{fragments.ELEMENT_CAREERS[element]}も相性が良いでしょう。{roles}{org_role}"
    )


def generate_energy_management(mbti: TemperamentType, element: Element) -> str:
    if mbti.is_introverted:
        if element is Element.WOOD:
            tip = '自然の中で過ごす時間は、木命の特性を活かした効果的なリフレッシュ方法になります。'
        elif element is Element.WATER:
            tip = '水辺で過ごしたり、瞑想したりすることで、水命の特性を活かしたリフレッシュが可能です。'
        else:
            tip = '静かな環境で内省する時間を持つことで、エネルギーを回復できます。'
        return f"内向型として、社交的な活動の後には一人の時間を意識的に確保しましょう。{tip}"

    if element is Element.FIRE:
        tip = '火命の特性から時に燃え尽きることがあります。情熱を持続させるために意識的な休息を取り入れましょう。'
    elif element is Element.WOOD:
        tip = '木命の特性から成長と活動を求め過ぎることがあります。時には自然の中でゆっくり過ごす時間も大切にしましょう。'
    else:
        tip = '活動と休息のバランスを意識的に取ることが大切です。'
    return f"外向型として、他者との交流からエネルギーを得る一方で、{tip}"


def generate_perfectionism_advice(mbti: TemperamentType, element: Element) -> str:
    if mbti.is_judging or element in (Element.METAL, Element.WOOD):
        return '高い理想を持つことは素晴らしいですが、すべてを完璧にしようとするストレスから自分を守ることも大切です。小さな成功を認め、祝うことを習慣にしましょう。'
    return '柔軟性を持つことは強みですが、時に焦点が定まらなくなることがあります。重要なプロジェクトでは、何が「十分に良い」かを定義し、行動に移すことを意識しましょう。'


def generate_boundaries_advice(mbti: TemperamentType, element: Element) -> str:
    if _is_empathic(mbti, element):
        return '共感力が高いあなたは、時に他者の感情に圧倒されることがあります。健全な境界線を設けることを学びましょう。'
    return '論理的思考を重視するあなたは、時に感情的なニーズを見逃すことがあります。自分と他者の感情的境界にも注意を払いましょう。'


def generate_expression_advice(mbti: TemperamentType) -> str:
    if mbti.is_introverted:
        return '内面に豊かな思考を持っていても、それを言葉にして共有しないと他者には伝わりません。あなたの洞察は多くの人の助けになります。'
    return '自然な表現力を持つあなたですが、時に他者が内省や処理の時間を必要とすることを忘れないでください。重要な会話では相手の反応を見ながら進めることが効果的です。'


def generate_future_outlook(mbti: TemperamentType, element: Element) -> str:
    if mbti.is_intuitive:
        mbti_outlook = 'MBTIの直感力と組み合わさることで、将来の可能性を見通しながら、今の自分に必要な成長のステップを選ぶ力を持っています。'
    else:
        mbti_outlook = 'MBTIの現実的な視点と組み合わさることで、具体的な一歩一歩を着実に進みながら、確かな未来を築く力を持っています。'
    return f"{fragments.ELEMENT_OUTLOOKS[element]}{mbti_outlook}焦らず、自分のペースで進むことを忘れないでください。"


def assemble_report(
    temperament: TemperamentResult,
    sanmei: ElementResult,
    gender: str,
    name_divination: Optional[NameDivinationResult] = None,
    four_pillars: Optional[FourPillarsResult] = None
) -> AnalysisResult:
    """
    Собирает итоговый результат диагностики

    Пол пока не влияет на выбор текстов. Результаты 姓名判断 и 四柱推命
    передаются в итог без изменений.
    """
    mbti = temperament.type
    element = sanmei.element
    polarity = sanmei.polarity

    return AnalysisResult(
        temperament=temperament,
        sanmei=sanmei,
        type_nickname=get_nickname(mbti),
        overview=generate_overview(mbti, element, polarity),
        mbti_traits=get_mbti_traits(mbti),
        sanmei_traits=get_sanmei_traits(element, polarity),
        strengths=generate_strengths(mbti, element),
        challenges=generate_challenges(mbti, element),
        relationships=generate_relationships(mbti, element),
        career=generate_career(mbti, element),
        balance=BalanceTips(
            energy_management=generate_energy_management(mbti, element),
            perfectionism=generate_perfectionism_advice(mbti, element)
        ),
        relationship_tips=RelationshipTips(
            boundaries=generate_boundaries_advice(mbti, element),
            expression=generate_expression_advice(mbti),
            compatibility=fragments.COMPATIBILITY_ADVICE
        ),
        future_outlook=generate_future_outlook(mbti, element),
        name_divination=name_divination,
        four_pillars=four_pillars
    )
