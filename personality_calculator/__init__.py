"""Модуль диагностики личности: MBTI, 算命学, 姓名判断, 四柱推命"""
from .calculator import PersonalityCalculator
from .exceptions import InvalidNameError
from .models import AnalysisResult, AssessmentInput, QuestionnaireResponse

__all__ = ['PersonalityCalculator', 'InvalidNameError', 'AnalysisResult', 'AssessmentInput', 'QuestionnaireResponse']
