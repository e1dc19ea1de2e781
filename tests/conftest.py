"""
Pytest 共通設定

- インメモリ SQLite のセッション
- FastAPI TestClient
- 診断入力のサンプル
"""
import os

# Настройки читаются при импорте config, поэтому база подменяется до импорта
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.database import Base, get_db
from database import models  # noqa: F401
from personality_calculator import AssessmentInput, PersonalityCalculator
from personality_calculator.models import QuestionnaireResponse


# 8 ответов: I, N, T, J по обеим осям
INTJ_ANSWERS = [
    (1, 'i'), (2, 'n'), (3, 't'), (4, 'j'),
    (5, 'n'), (6, 't'), (7, 'j'), (8, 'i'),
]


@pytest.fixture
def db_session():
    """Отдельная база в памяти на каждый тест"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    """TestClient с подмененной сессией БД"""
    from api.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def intj_responses():
    return [QuestionnaireResponse(question_id=qid, answer=answer) for qid, answer in INTJ_ANSWERS]


@pytest.fixture
def sample_input(intj_responses):
    """山田太郎, 1990-06-15 0時: все четыре системы"""
    return AssessmentInput(
        full_name="山田 太郎",
        birth_year=1990,
        birth_month=6,
        birth_day=15,
        gender="male",
        last_name_kanji="山田",
        first_name_kanji="太郎",
        birth_hour=0,
        birth_minute=30,
        life_focus="career",
        challenges=["stress", "work-life"],
        strengths="粘り強さ",
        mbti_responses=intj_responses
    )


@pytest.fixture
def minimal_input():
    """Без иероглифов, времени и ответов"""
    return AssessmentInput(
        full_name="Hanako",
        birth_year=2000,
        birth_month=1,
        birth_day=1,
        gender="female"
    )


@pytest.fixture
def sample_result(sample_input):
    return PersonalityCalculator().calculate(sample_input)


@pytest.fixture
def sample_payload():
    """Тело запроса в camelCase, как его отправляет веб-форма"""
    return {
        "fullName": "山田 太郎",
        "birthYear": 1990,
        "birthMonth": 6,
        "birthDay": 15,
        "gender": "male",
        "lastNameKanji": "山田",
        "firstNameKanji": "太郎",
        "birthHour": 0,
        "lifeFocus": "career",
        "challenges": ["stress"],
        "mbtiResponses": [{"questionId": qid, "answer": answer} for qid, answer in INTJ_ANSWERS],
    }
