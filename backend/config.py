# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from typing import List
from dotenv import load_dotenv

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def _env_flag(name: str, default: str) -> bool:
    return str(os.getenv(name, default)).lower() not in ("", "0", "false", "no")


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip().lower() for item in raw.split(",") if item.strip()]


def get_settings():
    return Settings


class Settings:
    OSRM_BASE_URL: str = os.getenv("OSRM_BASE_URL", "https://router.project-osrm.org")
    OSRM_PROFILE: str = os.getenv("OSRM_PROFILE", "driving")
    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "10.0"))
    AVERAGE_SPEED_KMH: float = float(os.getenv("AVERAGE_SPEED_KMH", "50.0"))
    AUTO_CANDIDATE_BUDGET_S: float = float(os.getenv("AUTO_CANDIDATE_BUDGET_S", "5.0"))
    AUTO_CANDIDATES: List[str] = _env_list("AUTO_CANDIDATES", "mincost,greedy")
    AUTO_PARALLEL: bool = _env_flag("AUTO_PARALLEL", "1")
    CORS_ALLOW_ORIGINS: List[str] = os.getenv(
        "CORS_ALLOW_ORIGINS", "http://localhost:3000"
    ).split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings
