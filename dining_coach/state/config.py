from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class StateConfig:
    state_dir: Path = Path(os.getenv("FDC_STATE_DIR", str(Path.home() / ".fine_dining_coach")))
    storage_key: str = "fdc_v1_state"
    max_favorites: int = 50
    max_recents: int = 20

    @property
    def state_path(self) -> Path:
        return self.state_dir / f"{self.storage_key}.json"


DEFAULT_STATE_CONFIG = StateConfig()
