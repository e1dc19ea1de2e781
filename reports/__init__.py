"""Генерация отчетов"""
from .generator import ReportGenerator
from .pdf_generator import PDFGenerator, generate_pdf_report

__all__ = ['ReportGenerator', 'PDFGenerator', 'generate_pdf_report']
