from typing import Any, Iterable

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from cia.config import AppConfig, load_config
from cia.features.exports.api import router as exports_router
from cia.features.findings.api import router as findings_router
from cia.features.findings.repository import FindingRepository, load_standard_repository
from cia.features.monitoring.api import router as monitoring_router
from cia.features.narratives.api import router as narratives_router
from cia.features.regions.api import router as regions_router
from cia.features.selfcheck.api import router as selfcheck_router
from cia.features.session.api import router as session_router
from cia.features.session.store import SessionStore
from cia.infra.logging import configure_logging
from cia.web.health import router as health_router


def create_app(cfg: AppConfig | None = None, raw_findings: Iterable[dict[str, Any]] | None = None) -> FastAPI:
    cfg = cfg or load_config()
    logger = configure_logging(cfg.log_level)

    # A malformed knowledge base raises here and the app never starts.
    findings = load_standard_repository() if raw_findings is None else FindingRepository(raw_findings)

    app = FastAPI(title="Cultural Impact Assessment", version="0.1.0")
    app.state.cfg = cfg
    app.state.findings = findings
    app.state.sessions = SessionStore(project_name=cfg.default_project_name, council=cfg.default_council)
    app.state.templates = Jinja2Templates(directory=str(cfg.templates_dir))
    app.include_router(health_router)
    app.include_router(session_router)
    app.include_router(regions_router)
    app.include_router(findings_router)
    app.include_router(narratives_router)
    app.include_router(monitoring_router)
    app.include_router(exports_router)
    app.include_router(selfcheck_router)

    logger.info("CIA app ready (default council: %s)", cfg.default_council.value)
    return app


app = create_app()
