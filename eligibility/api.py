import logging

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rules import RuleEngineError

from .models import Payload, ExecutionResponse
from .service import EligibilityService

logger = logging.getLogger(__name__)

router = APIRouter()

eligibility_service = EligibilityService()


async def invalid_input_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid input"})


def _run(payload: Payload) -> ExecutionResponse:
    try:
        return eligibility_service.execute(payload)
    except RuleEngineError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except Exception as e:
        logger.exception("rule failed while executing payload")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Rule failed: {e}")


@router.get("/health", tags=["System"])
def health_check():
    return {"status": "healthy", "service": "rule-engine"}


@router.post("/execute", response_model=Payload, tags=["Rules"])
def execute(payload: Payload) -> Payload:
    return _run(payload).payload


@router.post("/execute/report", response_model=ExecutionResponse, tags=["Rules"])
def execute_report(payload: Payload) -> ExecutionResponse:
    return _run(payload)


def create_app(root_path: str = "") -> FastAPI:
    application = FastAPI(
        title="Rule Engine API",
        description="Forward-chaining rule evaluation over eligibility payloads",
        version="1.0.0",
        root_path=root_path,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(RequestValidationError, invalid_input_handler)
    application.include_router(router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    from .config import configure_logging, get_settings

    configure_logging(get_settings())
    uvicorn.run(app, host="0.0.0.0", port=8181)
