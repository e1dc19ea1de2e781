"""База данных"""
from .database import get_db, init_db, get_db_sync
from .models import Assessment
from .storage import AssessmentStorage

__all__ = ['get_db', 'init_db', 'get_db_sync', 'Assessment', 'AssessmentStorage']
