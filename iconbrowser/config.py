"""Runtime settings, read from the environment (and backend .env) at startup."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from iconbrowser.indexer.service import default_mount_prefix

ENV_FILE = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseModel):
    icon_root: Path = Path("public/icons")
    # None: derived from icon_root and public_dir, see default_mount_prefix.
    mount_prefix: str | None = None
    public_dir: str = "public"
    max_depth: int = Field(default=10, ge=0)
    snapshot_path: Path | None = None
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    @property
    def icon_mount_prefix(self) -> str:
        """URL prefix the icon root is served under and record paths start with."""
        return self.mount_prefix or default_mount_prefix(self.icon_root, self.public_dir)


def _split_csv(value: str | None) -> list[str] | None:
    if not value:
        return None
    return [v.strip() for v in value.split(",") if v.strip()]


def get_settings(env: dict[str, str] | None = None) -> Settings:
    """Build Settings from ICON_* variables.

    Loads .env first when reading the real process environment. Values that
    are unset fall back to the model defaults; malformed ones raise
    pydantic.ValidationError.
    """
    if env is None:
        load_dotenv(ENV_FILE)
        env = dict(os.environ)

    values: dict = {}
    if env.get("ICON_ROOT"):
        values["icon_root"] = env["ICON_ROOT"]
    if env.get("ICON_MOUNT_PREFIX"):
        values["mount_prefix"] = env["ICON_MOUNT_PREFIX"]
    if env.get("ICON_PUBLIC_DIR"):
        values["public_dir"] = env["ICON_PUBLIC_DIR"]
    if env.get("ICON_MAX_DEPTH"):
        values["max_depth"] = env["ICON_MAX_DEPTH"]
    if env.get("ICON_SNAPSHOT_PATH"):
        values["snapshot_path"] = env["ICON_SNAPSHOT_PATH"]
    origins = _split_csv(env.get("ICON_CORS_ORIGINS"))
    if origins:
        values["cors_origins"] = origins

    return Settings.model_validate(values)
