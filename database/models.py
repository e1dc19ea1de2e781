"""Модели базы данных"""
from sqlalchemy import Column, Integer, String, DateTime, Text, JSON
from sqlalchemy.sql import func
from .database import Base


class Assessment(Base):
    """Модель диагностики: исходные данные и результат"""
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True, index=True)
    telegram_id = Column(String, index=True, nullable=True)

    # Основная информация
    full_name = Column(String, nullable=False)
    birth_year = Column(Integer, nullable=False)
    birth_month = Column(Integer, nullable=False)
    birth_day = Column(Integer, nullable=False)
    gender = Column(String, nullable=False)

    # Заключительные вопросы
    life_focus = Column(String, nullable=True)
    challenges = Column(JSON, nullable=False, default=list)
    strengths = Column(Text, nullable=True)

    # Для 姓名判断 и 四柱推命
    first_name_kanji = Column(String, nullable=True)
    last_name_kanji = Column(String, nullable=True)
    birth_hour = Column(Integer, nullable=True)
    birth_minute = Column(Integer, nullable=True)

    mbti_responses = Column(JSON, nullable=False, default=list)

    # Краткие итоги
    mbti_type = Column(String, nullable=False)
    sanmei_type = Column(String, nullable=False)
    type_nickname = Column(String, nullable=False)

    # Результаты 姓名判断 и 四柱推命 (JSON-строки, только если рассчитаны)
    seimei_result = Column(Text, nullable=True)
    four_pillars_result = Column(Text, nullable=True)

    # Полный результат (JSON)
    result_json = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
