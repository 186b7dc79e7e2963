"""
Liveness and readiness probes.

GET /healthz  -> 200 {"status": "ok"} while the process can serve HTTP.
GET /readyz   -> 200 {"status": "ok"} when the dependency answers a ping,
                 503 {"status": "error"} otherwise.
"""
from enum import Enum
from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse
from lucid_gateway.services.dependency_checker import DependencyChecker


class HealthStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


def _status_response(status: HealthStatus, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content={"status": status.value}, status_code=status_code)


class HealthReporter:
    """Answers the probes; the checker is fixed at construction."""

    def __init__(self, checker: DependencyChecker):
        self._checker = checker

    @property
    def checker(self) -> DependencyChecker:
        return self._checker

    async def liveness(self) -> JSONResponse:
        return _status_response(HealthStatus.OK)

    async def readiness(self) -> JSONResponse:
        # Binary contract: every failure kind maps to the same 503.
        try:
            await self._checker.ping()
        except Exception:
            return _status_response(HealthStatus.ERROR, 503)
        return _status_response(HealthStatus.OK)


def register(router: APIRouter | FastAPI, reporter: HealthReporter):
    """Bind the probe routes on a caller-supplied router or app."""
    router.add_api_route(
        "/healthz",
        reporter.liveness,
        methods=["GET"],
        summary="Liveness probe",
        tags=["health"],
    )
    router.add_api_route(
        "/readyz",
        reporter.readiness,
        methods=["GET"],
        summary="Readiness probe",
        tags=["health"],
    )
