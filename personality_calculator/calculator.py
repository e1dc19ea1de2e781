"""Калькулятор диагностики личности"""
import logging
from typing import Optional

from .assembler import assemble_report
from .four_pillars import calculate_four_pillars
from .models import AnalysisResult, AssessmentInput, FourPillarsResult, NameDivinationResult
from .sanmei import classify_sanmei
from .seimei import calculate_name_divination
from .temperament import classify_temperament

logger = logging.getLogger(__name__)


class PersonalityCalculator:
    """Объединяет MBTI, 算命学, 姓名判断 и 四柱推命 в один результат"""

    def calculate_name_divination(self, data: AssessmentInput) -> Optional[NameDivinationResult]:
        """姓名判断 считается, только если заданы и фамилия, и имя"""
        if not (data.last_name_kanji and data.first_name_kanji):
            return None
        return calculate_name_divination(data.last_name_kanji, data.first_name_kanji)

    def calculate_four_pillars(self, data: AssessmentInput) -> Optional[FourPillarsResult]:
        """四柱推命 считается, только если указан час рождения (включая 0)"""
        moment = data.birth_moment
        if moment.hour is None:
            return None
        return calculate_four_pillars(moment.year, moment.month, moment.day, moment.hour)

    def calculate(self, data: AssessmentInput) -> AnalysisResult:
        """Основной метод расчета"""
        temperament = classify_temperament(data.mbti_responses)
        moment = data.birth_moment
        sanmei = classify_sanmei(moment.year, moment.month, moment.day)
        name_divination = self.calculate_name_divination(data)
        four_pillars = self.calculate_four_pillars(data)

        logger.info(
            f"Диагностика: {temperament.type.value} / {sanmei.full_type}, "
            f"姓名判断={'да' if name_divination else 'нет'}, "
            f"四柱推命={'да' if four_pillars else 'нет'}"
        )

        return assemble_report(
            temperament,
            sanmei,
            data.gender,
            name_divination=name_divination,
            four_pillars=four_pillars
        )
