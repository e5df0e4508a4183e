import time
from typing import Any, Dict

import structlog
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.urls import reverse
from django.utils import timezone

logger = structlog.get_logger()


def index(request: HttpRequest) -> JsonResponse:
    products = reverse("product-list")
    return JsonResponse(
        {
            "message": "Product catalog API is running.",
            "timestamp": timezone.now().isoformat(),
            "endpoints": [
                f"GET {products} - list active products",
                f"GET {products}/{{id}} - retrieve a product",
                f"POST {products} - create a product",
                f"PUT {products}/{{id}} - update a product",
                f"DELETE {products}/{{id}} - soft-delete a product",
                f"HEAD {products}/{{id}} - check whether a product exists",
                f"GET {reverse('swagger-ui')} - API documentation",
            ],
        }
    )


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.exception("health_check_db_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )
