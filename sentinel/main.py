from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sentinel import __version__
from sentinel.api import routes_evidence, routes_fraud, routes_health, routes_incoming, routes_qr, routes_threats
from sentinel.core.config import get_settings
from sentinel.core.logger import get_logger
from sentinel.services.llm_client import close_llm_client

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("PhishNet Sentinel starting (env=%s)", get_settings().ENV)
    try:
        yield
    finally:
        # Shutdown
        await close_llm_client()


app = FastAPI(
    title="PhishNet Sentinel API",
    description="Heuristic fraud and phishing scoring with AI-assisted assessments",
    version=__version__,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(routes_fraud.router, prefix="/fraud-checker", tags=["Fraud Checker"])
app.include_router(routes_threats.router, prefix="/threats", tags=["Threats"])
app.include_router(routes_qr.router, prefix="/qr", tags=["QR"])
app.include_router(routes_incoming.router, prefix="/incoming-fraud", tags=["Incoming Fraud"])
app.include_router(routes_evidence.router, prefix="/evidence", tags=["Evidence"])
app.include_router(routes_health.router, prefix="/health", tags=["Health"])

@app.get("/")
def root():
    return {"status": "PhishNet Sentinel backend running"}
