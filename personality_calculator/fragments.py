"""Тексты интерпретаций по типу темперамента и элементу"""
from enum import Enum
from typing import Dict, List, Type

from .models import Element, TemperamentType

T = TemperamentType


def _check_complete(table: Dict, keys: Type[Enum], name: str) -> None:
    """Таблица должна покрывать все значения перечисления"""
    missing = [key.value for key in keys if key not in table]
    if missing:
        raise RuntimeError(f"{name}: нет текстов для {', '.join(missing)}")


NICKNAMES: Dict[TemperamentType, str] = {
    T.INTJ: '「建築家・戦略家」',
    T.INTP: '「論理学者・思想家」',
    T.ENTJ: '「指揮官・統率者」',
    T.ENTP: '「討論者・発明家」',
    T.INFJ: '「提唱者・神秘的な理想主義者」',
    T.INFP: '「仲介者・理想主義的な癒し手」',
    T.ENFJ: '「主人公・教師」',
    T.ENFP: '「広報運動家・チャンピオン」',
    T.ISTJ: '「管理者・義務遂行者」',
    T.ISFJ: '「擁護者・防衛者」',
    T.ESTJ: '「幹部・監督者」',
    T.ESFJ: '「領事・提供者」',
    T.ISTP: '「巨匠・職人」',
    T.ISFP: '「冒険家・芸術家」',
    T.ESTP: '「起業家・実行者」',
    T.ESFP: '「エンターテイナー・パフォーマー」',
}

TEMPERAMENT_TRAITS: Dict[TemperamentType, List[str]] = {
    T.INTJ: [
        '戦略的思考と長期計画に優れている',
        '独立心が強く、自己主導的',
        '合理的な意思決定と問題解決能力が高い',
        '高い基準と完璧主義の傾向がある',
    ],
    T.INTP: [
        '論理的思考と分析に優れている',
        '新しい概念やアイデアに関心を持つ',
        '知的好奇心が強い',
        '独創的な問題解決アプローチを持つ',
    ],
    T.ENTJ: [
        'リーダーシップと決断力がある',
        '効率性と生産性を重視する',
        '戦略的思考と計画立案に長けている',
        '直接的でオープンなコミュニケーションスタイル',
    ],
    T.ENTP: [
        '創造的思考と革新性がある',
        '議論や知的な対話を楽しむ',
        '多様なアイデアや可能性を探求する',
        '従来の方法や規則に挑戦する',
    ],
    T.INFJ: [
        '人々の感情や動機を直感的に理解する',
        '理想主義的で目標達成に向けて粘り強い',
        '深い洞察力と創造性を持つ',
        '他者との意味のある関係を重視する',
    ],
    T.INFP: [
        '強い個人的価値観と倫理観を持つ',
        '他者への共感力と理解力が高い',
        '創造的で芸術的な表現に惹かれる',
        '他者との調和と真正性を重視する',
    ],
    T.ENFJ: [
        '他者の成長と発展を支援することに情熱的',
        'カリスマ性とリーダーシップがある',
        '優れたコミュニケーション能力がある',
        '人間関係と社会的な調和を重視する',
    ],
    T.ENFP: [
        '熱意と創造性に溢れている',
        '新しい可能性や考え方に開かれている',
        '優れた人間関係スキルを持つ',
        '自由と自己表現を重視する',
    ],
    T.ISTJ: [
        '責任感が強く信頼できる',
        '秩序だったアプローチで体系的に問題を解決する',
        '事実と詳細に注意を払う',
        '伝統と安定性を重視する',
    ],
    T.ISFJ: [
        '思いやりがあり、他者のニーズに注意深い',
        '責任感と信頼性が高い',
        '実用的で秩序だったアプローチを好む',
        '安定性と調和を重視する',
    ],
    T.ESTJ: [
        '効率的で体系的な問題解決能力がある',
        '責任感が強く、義務を重視する',
        '明確な構造とガイドラインを好む',
        '直接的で実用的なコミュニケーションスタイル',
    ],
    T.ESFJ: [
        '他者の福祉と調和に気を配る',
        '協力的で社交的',
        '組織と秩序に価値を置く',
        '責任感と義務感が強い',
    ],
    T.ISTP: [
        '問題解決に対する実用的なアプローチを持つ',
        '危機的状況で冷静さを保つ',
        '手先の器用さと技術的スキルに長けている',
        '自律性と柔軟性を重視する',
    ],
    T.ISFP: [
        '芸術的感性と美的センスがある',
        '思いやりがあり、他者の気持ちに敏感',
        '現在の瞬間を楽しむ能力がある',
        '自由と個人的な表現を重視する',
    ],
    T.ESTP: [
        '行動志向で冒険を楽しむ',
        '状況に素早く適応し、問題解決能力が高い',
        '現実的で実用的なアプローチを好む',
        '社交的でエネルギッシュ',
    ],
    T.ESFP: [
        '社交的でエネルギッシュ',
        '人々と交流し、楽しい雰囲気を作り出す',
        '現在の瞬間を楽しむ',
        '柔軟性と適応力がある',
    ],
}

TEMPERAMENT_OVERVIEWS: Dict[TemperamentType, str] = {
    T.INTJ: 'あなたは分析的で戦略的な思考を持ち、世界を理解し改善するための体系的なアプローチを好みます。独立心が強く、効率性を重視する傾向があります。',
    T.INTP: 'あなたは論理的で理論的な思考を持ち、概念や原理を理解することに情熱を持っています。新しいアイデアや可能性を探求することを楽しむ傾向があります。',
    T.ENTJ: 'あなたは決断力とリーダーシップを持ち、効率的な方法で目標を達成することに情熱を持っています。論理的な思考と計画性に優れています。',
    T.ENTP: 'あなたは革新的で知的好奇心が強く、新しいアイデアを生み出し、議論することを楽しみます。様々な可能性を探求し、従来の枠組みに挑戦する傾向があります。',
    T.INFJ: 'あなたは内省的で直感的な性格を持ち、社会や周囲の人々のために何かを成し遂げたいという強い使命感を抱いています。深い洞察力と理想主義的な側面を持っています。',
    T.INFP: 'あなたは理想主義的で共感力が高く、自分の価値観や信念に基づいた真正性のある生き方を求めています。創造性と人間の可能性を信じる傾向があります。',
    T.ENFJ: 'あなたはカリスマ性と思いやりを持ち、他者の成長や発展をサポートすることに喜びを見出します。社会的な調和と意義のある関係を重視します。',
    T.ENFP: 'あなたは熱意と創造性に溢れ、新しい可能性や人との繋がりを求める傾向があります。自由な表現と人間の潜在能力を引き出すことに情熱を持っています。',
    T.ISTJ: 'あなたは責任感が強く、秩序と体系を重視します。事実と詳細に注意を払い、義務を果たすことに価値を見出す傾向があります。',
    T.ISFJ: 'あなたは思いやりがあり、責任感が強く、他者のニーズに敏感です。実用的なサポートと伝統的な価値観を大切にする傾向があります。',
    T.ESTJ: 'あなたは実務的でリーダーシップがあり、効率と秩序を重視します。明確な構造とルールに基づいて行動し、責任を果たすことを重んじます。',
    T.ESFJ: 'あなたは協力的で社交的であり、周囲との調和と他者のケアを重視します。伝統的な価値観と人間関係の中で安定を求める傾向があります。',
    T.ISTP: 'あなたは実践的で論理的な問題解決者であり、具体的な事実や経験から学ぶことを好みます。自律性と柔軟性を持ち、危機的状況でも冷静さを保つ能力があります。',
    T.ISFP: 'あなたは感受性が強く、芸術的な表現を通じて自分の個性を示す傾向があります。現在の瞬間を大切にし、自由と美を追求します。',
    T.ESTP: 'あなたは行動志向で、現実的な問題解決に優れています。冒険を楽しみ、状況に素早く適応できる柔軟性を持っています。',
    T.ESFP: 'あなたは社交的で spontaneous であり、現在の瞬間を楽しむことを重視します。他者と共に楽しい経験を創り出すことに喜びを感じる傾向があります。',
}

ELEMENT_TRAITS: Dict[Element, List[str]] = {
    Element.WOOD: [
        '成長と発展を好み、理想を追求する',
        '柔軟で順応性がある一方、内面に強い意志を持つ',
        '自然や環境との調和を重視する',
        '進歩的で未来志向の思考を持つ',
    ],
    Element.FIRE: [
        '情熱的でエネルギッシュな性質を持つ',
        '直感的な判断と決断力がある',
        '表現力と創造性に富む',
        '人々を鼓舞し、活気をもたらす',
    ],
    Element.EARTH: [
        '安定性と信頼性を重視する',
        '実用的で現実的な思考を持つ',
        '誠実で思いやりがある',
        '伝統と家族の価値を大切にする',
    ],
    Element.METAL: [
        '整然とした思考と分析力を持つ',
        '正確さと完璧さを追求する',
        '原則と規律を重んじる',
        '強い意志と断固とした態度を持つ',
    ],
    Element.WATER: [
        '柔軟で適応力があり、流れに従う',
        '深い知恵と直感力を持つ',
        '内省的で哲学的な思考を好む',
        '感情的な深さと洞察力がある',
    ],
}

POLARITY_TRAIT_YIN = '内面的な表現と静かな強さを持つ'
POLARITY_TRAIT_YANG = '外向的な表現と積極的なエネルギーを持つ'

# Шаблон обзора 算命学: {label} - «木命・陰», {quality} зависит от полярности
ELEMENT_OVERVIEW_TEMPLATES: Dict[Element, str] = {
    Element.WOOD: '算命学の「{label}」の特性として、{quality}、自分の信念に従って着実に成長する傾向があります。自然界の樹木のように、柔軟さと強さを兼ね備え、環境との調和を大切にします。',
    Element.FIRE: '算命学の「{label}」の特性として、{quality}、周囲に活力と温かさをもたらします。創造的なビジョンと直感力に優れています。',
    Element.EARTH: '算命学の「{label}」の特性として、{quality}傾向があります。信頼性と実用性を重視し、伝統的な価値観を大切にします。',
    Element.METAL: '算命学の「{label}」の特性として、{quality}傾向があります。精密さと完璧さを追求し、原則に基づいた行動を取ります。',
    Element.WATER: '算命学の「{label}」の特性として、{quality}傾向があります。深い洞察力と適応力を持ち、状況の流れを読む能力に優れています。',
}

# (陰, 陽)
ELEMENT_OVERVIEW_QUALITIES: Dict[Element, tuple] = {
    Element.WOOD: ('穏やかながらも芯の強さを持ち', '活発で成長力があり'),
    Element.FIRE: ('内面に熱い情熱を秘めながらも控えめに表現し', '明るく活発なエネルギーを外に表現し'),
    Element.EARTH: ('内面に安定した基盤を持ち、穏やかに周囲をサポートする', '実用的で頼りになる存在として、積極的に周囲を支える'),
    Element.METAL: ('内面に強い意志と原則を持ちながらも控えめに表現する', '明確な基準と決断力を持ち、それを外に表現する'),
    Element.WATER: ('内面に深い知恵と直感力を持ちながらも静かに流れる', '柔軟に適応しながらも強い直感力で道を切り開く'),
}

ELEMENT_STRENGTHS: Dict[Element, str] = {
    Element.WOOD: '算命学の木命としての柔軟性と成長志向',
    Element.FIRE: '算命学の火命としての情熱と創造的エネルギー',
    Element.EARTH: '算命学の土命としての安定性と信頼性',
    Element.METAL: '算命学の金命としての精密さと決断力',
    Element.WATER: '算命学の水命としての適応力と深い洞察力',
}

ELEMENT_CHALLENGES: Dict[Element, str] = {
    Element.WOOD: '成長への強い欲求が時に周囲との摩擦を生じさせることがあります',
    Element.FIRE: '情熱的な性質がバーンアウトにつながる可能性があります',
    Element.EARTH: '安定を求めるあまり変化に抵抗してしまうことがあります',
    Element.METAL: '高い基準を持つことが完璧主義につながることがあります',
    Element.WATER: '適応性が高いがゆえに自分の立場を見失うことがあります',
}

ELEMENT_RELATIONSHIPS: Dict[Element, str] = {
    Element.WOOD: '木命の特性として、周囲に良い影響を与えながら自身も成長する関係性を自然と構築しています。',
    Element.FIRE: '火命の特性として、温かさと情熱をもって人間関係に活力をもたらします。',
    Element.EARTH: '土命の特性として、安定感と信頼性をもって周囲の人々を支える役割を担うことが多いです。',
    Element.METAL: '金命の特性として、誠実さと明確なコミュニケーションで信頼関係を構築します。',
    Element.WATER: '水命の特性として、深い理解と柔軟な受容性で多様な人々との関係を育みます。',
}

ELEMENT_CAREERS: Dict[Element, str] = {
    Element.WOOD: '成長や発展に関連する仕事、教育、コーチング、環境関連の分野',
    Element.FIRE: '創造性、表現、リーダーシップ、革新的なプロジェクトに関連する分野',
    Element.EARTH: '安定とサポートを提供する役割、不動産、農業、組織基盤に関連する分野',
    Element.METAL: '精密さと明確さが求められる分野、財務、法律、品質管理、構造化されたシステム',
    Element.WATER: '流動的思考と適応力が活かせる分野、研究、カウンセリング、芸術、医療',
}

ELEMENT_OUTLOOKS: Dict[Element, str] = {
    Element.WOOD: 'あなたの木命としての性質は、時間をかけて着実に成長するというプロセスと調和しています。',
    Element.FIRE: 'あなたの火命としての性質は、情熱と創造力を通じて新たな可能性を照らし出すことと調和しています。',
    Element.EARTH: 'あなたの土命としての性質は、安定した基盤を築きながら、着実に前進するプロセスと調和しています。',
    Element.METAL: 'あなたの金命としての性質は、明確な基準と精密さを持って価値あるものを選び取るプロセスと調和しています。',
    Element.WATER: 'あなたの水命としての性質は、柔軟に状況に適応しながら、深い知恵を育むプロセスと調和しています。',
}

# (истинный, ложный) вариант по предикату типа для сводного обзора
COMBINED_ELEMENT_INSIGHTS: Dict[Element, tuple] = {
    Element.WOOD: ('成長と可能性を見出す直感力に優れています。', '実際的な成長と発展を重視します。'),
    Element.FIRE: ('情熱的な感情表現と人間関係の暖かさを大切にします。', '創造的なビジョンと明確な表現力を持っています。'),
    Element.EARTH: ('安定と秩序を重視する傾向があります。', '実用的でありながらも柔軟性を持っています。'),
    Element.METAL: ('原則を重んじながらも人間関係の価値を理解しています。', '論理的な分析と明確な基準に基づく判断を好みます。'),
    Element.WATER: ('深い洞察力と直感的な理解力を持っています。', '状況に適応しながら実際的な知恵を活かします。'),
}

# Пары типов с одинаковыми примерами профессий
CAREER_ROLES: Dict[frozenset, str] = {
    frozenset({T.INFJ, T.ENFJ}): '具体的には、カウンセラー、教育者、ライター、芸術家、非営利団体での活動などが考えられます。',
    frozenset({T.INTJ, T.ENTJ}): '具体的には、戦略コンサルタント、研究者、システム設計者、企業家、プロジェクトマネージャーなどが考えられます。',
    frozenset({T.ISFJ, T.ESFJ}): '具体的には、医療従事者、ソーシャルワーカー、教師、顧客サービス、コミュニティサポートなどが考えられます。',
    frozenset({T.ISTJ, T.ESTJ}): '具体的には、財務管理者、法律専門家、プロジェクト管理者、運営責任者などが考えられます。',
}
CAREER_ROLES_GENERAL = '具体的には、あなたの多面的なスキルを活かせる分野で、個性と才能が評価される環境が最適でしょう。'

COMPATIBILITY_ADVICE = 'すべての関係に同じエネルギーを注ぐのではなく、相互成長できる関係に意識的に時間を投資しましょう。'


for _table, _keys, _name in (
    (NICKNAMES, TemperamentType, 'NICKNAMES'),
    (TEMPERAMENT_TRAITS, TemperamentType, 'TEMPERAMENT_TRAITS'),
    (TEMPERAMENT_OVERVIEWS, TemperamentType, 'TEMPERAMENT_OVERVIEWS'),
    (ELEMENT_TRAITS, Element, 'ELEMENT_TRAITS'),
    (ELEMENT_OVERVIEW_TEMPLATES, Element, 'ELEMENT_OVERVIEW_TEMPLATES'),
    (ELEMENT_OVERVIEW_QUALITIES, Element, 'ELEMENT_OVERVIEW_QUALITIES'),
    (ELEMENT_STRENGTHS, Element, 'ELEMENT_STRENGTHS'),
    (ELEMENT_CHALLENGES, Element, 'ELEMENT_CHALLENGES'),
    (ELEMENT_RELATIONSHIPS, Element, 'ELEMENT_RELATIONSHIPS'),
    (ELEMENT_CAREERS, Element, 'ELEMENT_CAREERS'),
    (ELEMENT_OUTLOOKS, Element, 'ELEMENT_OUTLOOKS'),
    (COMBINED_ELEMENT_INSIGHTS, Element, 'COMBINED_ELEMENT_INSIGHTS'),
):
    _check_complete(_table, _keys, _name)
