"""Модели данных для диагностики личности"""
from datetime import date
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Element(str, Enum):
    """Пять элементов (五行)"""
    WOOD = '木'
    FIRE = '火'
    EARTH = '土'
    METAL = '金'
    WATER = '水'


class Polarity(str, Enum):
    """Инь / Ян"""
    YIN = '陰'
    YANG = '陽'


class Stem(str, Enum):
    """Небесные стволы (天干), в порядке цикла"""
    KINOE = '甲'
    KINOTO = '乙'
    HINOE = '丙'
    HINOTO = '丁'
    TSUCHINOE = '戊'
    TSUCHINOTO = '己'
    KANOE = '庚'
    KANOTO = '辛'
    MIZUNOE = '壬'
    MIZUNOTO = '癸'


class Branch(str, Enum):
    """Земные ветви (地支), в порядке цикла"""
    NE = '子'
    USHI = '丑'
    TORA = '寅'
    U = '卯'
    TATSU = '辰'
    MI = '巳'
    UMA = '午'
    HITSUJI = '未'
    SARU = '申'
    TORI = '酉'
    INU = '戌'
    I = '亥'


class TemperamentType(str, Enum):
    """16 типов темперамента (MBTI)"""
    INTJ = 'INTJ'
    INTP = 'INTP'
    ENTJ = 'ENTJ'
    ENTP = 'ENTP'
    INFJ = 'INFJ'
    INFP = 'INFP'
    ENFJ = 'ENFJ'
    ENFP = 'ENFP'
    ISTJ = 'ISTJ'
    ISFJ = 'ISFJ'
    ESTJ = 'ESTJ'
    ESFJ = 'ESFJ'
    ISTP = 'ISTP'
    ISFP = 'ISFP'
    ESTP = 'ESTP'
    ESFP = 'ESFP'

    @property
    def is_introverted(self) -> bool:
        return self.value[0] == 'I'

    @property
    def is_intuitive(self) -> bool:
        return self.value[1] == 'N'

    @property
    def is_feeling(self) -> bool:
        return self.value[2] == 'F'

    @property
    def is_thinking(self) -> bool:
        return self.value[2] == 'T'

    @property
    def is_judging(self) -> bool:
        return self.value[3] == 'J'


class CamelModel(BaseModel):
    """Базовая модель: snake_case в Python, camelCase в JSON"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResultModel(CamelModel):
    """Неизменяемый результат расчета"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_json_dict(self) -> dict:
        """Словарь для JSON-ответа и хранения в БД"""
        return self.model_dump(mode='json', by_alias=True)


class QuestionnaireResponse(CamelModel):
    """Ответ на вопрос анкеты"""
    question_id: int
    answer: str


class BirthMoment(ResultModel):
    """Момент рождения"""
    year: int = Field(ge=1900)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: Optional[int] = Field(default=None, ge=0, le=23)
    minute: Optional[int] = Field(default=None, ge=0, le=59)


class TemperamentResult(ResultModel):
    """Результат классификации темперамента"""
    type: TemperamentType
    ie_scale: int  # Выше = больше I
    ns_scale: int  # Выше = больше N
    ft_scale: int  # Выше = больше T
    jp_scale: int  # Выше = больше J


class ElementResult(ResultModel):
    """Результат 算命学"""
    element: Element
    polarity: Polarity
    full_type: str


class NameDivinationResult(ResultModel):
    """Результат 姓名判断"""
    name_total: int
    first_name_total: int
    last_name_total: int
    heaven_number: int
    earth_number: int
    human_number: int
    characteristics: List[str]
    good_luck: str
    advice: str


class FourPillarsResult(ResultModel):
    """Результат 四柱推命"""
    heavenly_stem: Stem
    earthly_branch: Branch
    day_master: Element
    lucky_elements: List[Element]
    unlucky_elements: List[Element]
    life_theme: str


class BalanceTips(ResultModel):
    energy_management: str
    perfectionism: str


class RelationshipTips(ResultModel):
    boundaries: str
    expression: str
    compatibility: str


class ReportFields(ResultModel):
    """Текстовые поля отчета"""
    type_nickname: str
    overview: str
    mbti_traits: List[str]
    sanmei_traits: List[str]
    strengths: str
    challenges: str
    relationships: str
    career: str
    balance: BalanceTips
    relationship_tips: RelationshipTips
    future_outlook: str


class AnalysisResult(ReportFields):
    """Итоговый результат диагностики"""
    temperament: TemperamentResult = Field(alias='mbtiResult')
    sanmei: ElementResult = Field(alias='sanmeiResult')
    name_divination: Optional[NameDivinationResult] = Field(default=None, alias='seiMeiResult')
    four_pillars: Optional[FourPillarsResult] = Field(default=None, alias='fourPillarsResult')


class TraitScore(ResultModel):
    """Одна ось профиля личности (0-100)"""
    trait: str
    value: int
    full_mark: int = 100


class AssessmentInput(CamelModel):
    """Входные данные диагностики"""
    full_name: str = Field(min_length=1)
    birth_year: int = Field(ge=1900)
    birth_month: int = Field(ge=1, le=12)
    birth_day: int = Field(ge=1, le=31)
    gender: Literal['male', 'female', 'other']

    # Для 姓名判断
    first_name_kanji: Optional[str] = None
    last_name_kanji: Optional[str] = None

    # Для 四柱推命
    birth_hour: Optional[int] = Field(default=None, ge=0, le=23)
    birth_minute: Optional[int] = Field(default=None, ge=0, le=59)

    # Заключительные вопросы
    life_focus: Optional[str] = None
    challenges: List[str] = Field(default_factory=list)
    strengths: Optional[str] = None

    mbti_responses: List[QuestionnaireResponse] = Field(default_factory=list)

    @field_validator('birth_year')
    @classmethod
    def check_year_not_in_future(cls, value: int) -> int:
        if value > date.today().year:
            raise ValueError('birth year cannot be in the future')
        return value

    @property
    def birth_moment(self) -> BirthMoment:
        return BirthMoment(
            year=self.birth_year,
            month=self.birth_month,
            day=self.birth_day,
            hour=self.birth_hour,
            minute=self.birth_minute
        )
