"""FastAPI приложение"""
from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.orm import Session
import io
import logging

from config import settings
from database.database import get_db, init_db
from database.storage import AssessmentStorage
from personality_calculator import PersonalityCalculator, AssessmentInput, InvalidNameError
from personality_calculator.questions import QUESTIONS, LIFE_FOCUS_OPTIONS, CHALLENGE_OPTIONS
from reports import ReportGenerator, generate_pdf_report

logger = logging.getLogger(__name__)

app = FastAPI(
    title="性格診断 API",
    description="MBTI × 算命学 × 姓名判断 × 四柱推命 による性格診断",
    version="1.0.0"
)

# Инициализация
calculator = PersonalityCalculator()
storage = AssessmentStorage()
report_generator = ReportGenerator()


# Инициализация БД при старте
@app.on_event("startup")
async def startup_event():
    init_db()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации входных данных: 400 со списком полей"""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]),
            "message": error["msg"]
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid assessment data", "errors": errors}
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Ошибки 4xx/5xx в том же формате, что и ошибки валидации"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail}
    )


def _calculate(data: AssessmentInput):
    """Расчет с переводом ошибок в HTTP-ответы"""
    try:
        return calculator.calculate(data)
    except InvalidNameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Ошибка расчета диагностики: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process assessment")


def _load_assessment(assessment_id: int, db: Session):
    assessment = storage.get_assessment(db, assessment_id)
    if not assessment:
        raise HTTPException(status_code=404, detail="Assessment not found")
    return assessment


# API endpoints
@app.get("/")
async def root():
    """Корневой endpoint"""
    return {
        "message": "性格診断 API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/api/questions")
async def get_questions():
    """Вопросы анкеты и варианты заключительных вопросов"""
    return {
        "success": True,
        "questions": QUESTIONS,
        "lifeFocusOptions": LIFE_FOCUS_OPTIONS,
        "challengeOptions": CHALLENGE_OPTIONS
    }


@app.post("/api/assessment")
async def create_assessment(data: AssessmentInput, db: Session = Depends(get_db)):
    """Расчет и сохранение диагностики"""
    result = _calculate(data)

    try:
        assessment = storage.create_assessment(db, data, result)
    except Exception as e:
        logger.error(f"Ошибка сохранения диагностики: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process assessment")

    return {
        "success": True,
        "assessment": storage.to_dict(assessment),
        "result": result.to_json_dict()
    }


@app.post("/api/calculate")
async def calculate_assessment(data: AssessmentInput):
    """Расчет без сохранения"""
    result = _calculate(data)
    return {
        "success": True,
        "result": result.to_json_dict()
    }


@app.get("/api/assessment/{assessment_id}")
async def get_assessment(assessment_id: int, db: Session = Depends(get_db)):
    """Получение диагностики по ID"""
    assessment = _load_assessment(assessment_id, db)
    return {
        "success": True,
        "assessment": storage.to_dict(assessment)
    }


@app.get("/api/assessment/{assessment_id}/report", response_class=PlainTextResponse)
async def get_assessment_report(assessment_id: int, db: Session = Depends(get_db)):
    """Текстовый отчет по сохраненной диагностике"""
    assessment = _load_assessment(assessment_id, db)
    return report_generator.generate_text_report(
        storage.to_input(assessment),
        storage.to_result(assessment)
    )


@app.get("/api/assessment/{assessment_id}/pdf")
async def get_assessment_pdf(assessment_id: int, db: Session = Depends(get_db)):
    """PDF отчет по сохраненной диагностике"""
    assessment = _load_assessment(assessment_id, db)
    pdf = generate_pdf_report(storage.to_input(assessment), storage.to_result(assessment))

    return StreamingResponse(
        io.BytesIO(pdf),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=assessment_{assessment_id}.pdf"}
    )


@app.get("/api/assessment/{assessment_id}/chart")
async def get_assessment_chart(assessment_id: int, db: Session = Depends(get_db)):
    """Диаграмма черт личности по сохраненной диагностике"""
    assessment = _load_assessment(assessment_id, db)
    chart = report_generator.generate_visual_chart(storage.to_result(assessment))

    return StreamingResponse(
        io.BytesIO(chart),
        media_type="image/png",
        headers={"Content-Disposition": f"attachment; filename=assessment_{assessment_id}.png"}
    )


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, settings.log_level.upper(), logging.INFO)
    )
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug and not settings.is_railway
    )
