"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from solarsmart.api.calculator import router as calculator_router
from solarsmart.api.leads import router as leads_router
from solarsmart.api.settings import router as settings_router
from solarsmart.api.admin import router as admin_router
from solarsmart.api.report import router as report_router

router = APIRouter()
router.include_router(calculator_router)
router.include_router(leads_router)
router.include_router(settings_router)
router.include_router(admin_router)
router.include_router(report_router)
