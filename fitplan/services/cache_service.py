"""
Single-slot cache for the latest plan of each session.
"""
import hashlib
import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, ValidationError

from fitplan.core.config import settings
from fitplan.core.logger import logger, log_error
from fitplan.models.plan import FitnessPlan
from fitplan.models.profile import UserProfile


class MemoryStore:
    """Key-value text store living as long as the process."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileStore:
    """
    Key-value text store backed by one file per key.

    Writes go to a temp file that replaces the target, so readers never
    see a half-written value.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        fd, tmp = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, self._path(key))
        except OSError:
            Path(tmp).unlink(missing_ok=True)
            raise


def create_store():
    """Store selected by PLAN_CACHE_DIR."""
    if settings.PLAN_CACHE_DIR:
        logger.info(f"Plan cache persisted under {settings.PLAN_CACHE_DIR}")
        return FileStore(settings.PLAN_CACHE_DIR)
    return MemoryStore()


class CachedPlan(BaseModel):
    """Stored slot: the plan and the profile it was generated for."""

    plan: FitnessPlan
    profile_fingerprint: str | None = None


class PlanCache:
    """Holds the most recent plan for one session. put() overwrites."""

    def __init__(self, store, session_id: str = "default"):
        self.store = store
        self.key = f"plan:{session_id}"

    def _read(self) -> CachedPlan | None:
        try:
            raw = self.store.get(self.key)
        except OSError as e:
            log_error("Plan cache read", e)
            return None
        if raw is None:
            return None

        try:
            return CachedPlan.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable cached plan for {self.key}: {e.error_count()} errors")
            return None

    def get(self, profile: UserProfile = None) -> FitnessPlan | None:
        """
        Cached plan, or None when absent or unreadable.

        With a profile, only a plan generated for that same profile counts.
        """
        entry = self._read()
        if entry is None:
            return None
        if profile is not None and entry.profile_fingerprint != profile.fingerprint():
            return None
        return entry.plan

    def put(self, plan: FitnessPlan, profile: UserProfile = None) -> None:
        entry = CachedPlan(
            plan=plan,
            profile_fingerprint=profile.fingerprint() if profile is not None else None,
        )
        self.store.set(self.key, entry.model_dump_json())
