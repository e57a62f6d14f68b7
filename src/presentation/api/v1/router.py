from fastapi import APIRouter

from .evaluation import evaluation_router
from .purchases import purchases_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(evaluation_router, tags=["Evaluation"])
router.include_router(purchases_router, tags=["Purchases"])
