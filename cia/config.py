import logging
import os
from dataclasses import dataclass
from pathlib import Path

from cia.domain.enums import Council

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    default_project_name: str = "Te Awa Industrial Upgrade - Stage 2"
    default_council: Council = Council.hamilton
    log_level: str = "INFO"
    templates_dir: Path = Path(__file__).resolve().parent / "templates"


def load_config() -> AppConfig:
    defaults = AppConfig()

    council = defaults.default_council
    raw_council = os.environ.get("CIA_DEFAULT_COUNCIL")
    if raw_council:
        try:
            council = Council(raw_council)
        except ValueError:
            logger.warning("Ignoring unknown CIA_DEFAULT_COUNCIL=%r", raw_council)

    templates_dir = os.environ.get("CIA_TEMPLATES_DIR")

    return AppConfig(
        default_project_name=os.environ.get("CIA_DEFAULT_PROJECT", defaults.default_project_name),
        default_council=council,
        log_level=os.environ.get("CIA_LOG_LEVEL", defaults.log_level).upper(),
        templates_dir=Path(templates_dir) if templates_dir else defaults.templates_dir,
    )
