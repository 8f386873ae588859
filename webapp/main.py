from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from file_io import ValidationError as CsvValidationError
from logging_config import configure_root_logger, get_logger
from reports import ExportUnavailableError
from webapp import __version__ as VERSION
from webapp.api import api
from webapp.views import views

logger = get_logger("webapp", "webapp")


@asynccontextmanager
async def lifespan(app: FastAPI):
	# store, file_io and reports log through the root logger
	configure_root_logger()
	logger.info(f"Impacters Roster {VERSION} starting")
	yield


app = FastAPI(title="Impacters Roster", version=VERSION, lifespan=lifespan)

app.include_router(api)
app.include_router(views)


# -----------------------
# Error mapping: each failure is scoped to the request that raised it
# -----------------------
@app.exception_handler(LookupError)
def not_found_handler(request: Request, exc: LookupError):
	logger.warning(f"{request.method} {request.url.path}: {exc}")
	return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(CsvValidationError)
def csv_validation_handler(request: Request, exc: CsvValidationError):
	logger.warning(f"Member import rejected: {exc}")
	return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(ExportUnavailableError)
def export_unavailable_handler(request: Request, exc: ExportUnavailableError):
	logger.error(f"Export failed: {exc}")
	return JSONResponse(status_code=503, content={"detail": str(exc)})
