"""Хранилище диагностик"""
import json
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from personality_calculator.models import AnalysisResult, AssessmentInput
from .models import Assessment

logger = logging.getLogger(__name__)


class AssessmentStorage:
    """Сохранение и чтение диагностик; результат хранится без изменений"""

    def create_assessment(self, db: Session, data: AssessmentInput, result: AnalysisResult,
                          telegram_id: Optional[str] = None) -> Assessment:
        """Сохраняет исходные данные вместе с результатом"""
        result_json = result.to_json_dict()

        assessment = Assessment(
            telegram_id=telegram_id,
            full_name=data.full_name,
            birth_year=data.birth_year,
            birth_month=data.birth_month,
            birth_day=data.birth_day,
            gender=data.gender,
            life_focus=data.life_focus or None,
            challenges=list(data.challenges),
            strengths=data.strengths or None,
            first_name_kanji=data.first_name_kanji or None,
            last_name_kanji=data.last_name_kanji or None,
            birth_hour=data.birth_hour,
            birth_minute=data.birth_minute,
            mbti_responses=[r.model_dump(by_alias=True) for r in data.mbti_responses],
            mbti_type=result.temperament.type.value,
            sanmei_type=result.sanmei.full_type,
            type_nickname=result.type_nickname,
            seimei_result=self._dumps(result_json.get('seiMeiResult')),
            four_pillars_result=self._dumps(result_json.get('fourPillarsResult')),
            result_json=result_json
        )
        db.add(assessment)
        db.commit()
        db.refresh(assessment)

        logger.info(f"Сохранена диагностика #{assessment.id} ({assessment.mbti_type})")
        return assessment

    def get_assessment(self, db: Session, assessment_id: int) -> Optional[Assessment]:
        return db.query(Assessment).filter(Assessment.id == assessment_id).first()

    def list_by_telegram_id(self, db: Session, telegram_id: str, limit: int = 10) -> List[Assessment]:
        """Последние диагностики пользователя бота, новые первыми"""
        return (
            db.query(Assessment)
            .filter(Assessment.telegram_id == telegram_id)
            .order_by(Assessment.id.desc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def to_input(assessment: Assessment) -> AssessmentInput:
        """Восстанавливает исходные данные диагностики"""
        return AssessmentInput(
            full_name=assessment.full_name,
            birth_year=assessment.birth_year,
            birth_month=assessment.birth_month,
            birth_day=assessment.birth_day,
            gender=assessment.gender,
            first_name_kanji=assessment.first_name_kanji,
            last_name_kanji=assessment.last_name_kanji,
            birth_hour=assessment.birth_hour,
            birth_minute=assessment.birth_minute,
            life_focus=assessment.life_focus,
            challenges=assessment.challenges or [],
            strengths=assessment.strengths,
            mbti_responses=assessment.mbti_responses or []
        )

    @staticmethod
    def to_result(assessment: Assessment) -> AnalysisResult:
        return AnalysisResult.model_validate(assessment.result_json)

    @staticmethod
    def to_dict(assessment: Assessment) -> dict:
        """Запись для JSON-ответа API"""
        return {
            "id": assessment.id,
            "fullName": assessment.full_name,
            "birthYear": assessment.birth_year,
            "birthMonth": assessment.birth_month,
            "birthDay": assessment.birth_day,
            "gender": assessment.gender,
            "lifeFocus": assessment.life_focus,
            "challenges": assessment.challenges or [],
            "strengths": assessment.strengths,
            "mbtiType": assessment.mbti_type,
            "sanmeiType": assessment.sanmei_type,
            "typeNickname": assessment.type_nickname,
            "firstNameKanji": assessment.first_name_kanji,
            "lastNameKanji": assessment.last_name_kanji,
            "birthHour": assessment.birth_hour,
            "birthMinute": assessment.birth_minute,
            "seiMeiResult": assessment.seimei_result,
            "fourPillarsResult": assessment.four_pillars_result,
            "resultJson": assessment.result_json,
            "createdAt": str(assessment.created_at)
        }

    @staticmethod
    def _dumps(value) -> Optional[str]:
        if value is None:
            return None
        return json.dumps(value, ensure_ascii=False)
