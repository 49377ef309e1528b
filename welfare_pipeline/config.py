from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class PipelineConfig:
    start_url: str = "https://socialwelfarekashmir.jk.gov.in/welfareschemes.html"

    output_dir: Path = Path("artifacts")
    output_filename: str = "jammuKashmir.json"

    navigation_timeout_ms: int = 60_000
    listing_wait_until: str = "load"
    detail_wait_until: str = "networkidle"
    listing_retries: int = 3
    listing_retry_max_wait_seconds: float = 10.0

    http_timeout_seconds: int = 60
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36"
    )
    headless: bool = True

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        self.listing_retries = max(1, int(self.listing_retries))
        self.listing_retry_max_wait_seconds = max(0.0, float(self.listing_retry_max_wait_seconds))

    @property
    def output_json(self) -> Path:
        return self.output_dir / self.output_filename

    @property
    def logs_dir(self) -> Path:
        return self.output_dir / "logs"

    @property
    def pipeline_log_file(self) -> Path:
        return self.logs_dir / "pipeline.log"

    def wait_until_for(self, purpose: str) -> str:
        if purpose == "listing":
            return self.listing_wait_until
        return self.detail_wait_until

    def ensure_directories(self) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)
