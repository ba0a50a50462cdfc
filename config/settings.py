import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _split_paths(raw: str) -> List[str]:
    return [p.strip() for p in raw.split(",") if p.strip()]


@dataclass
class Config:
    # Application root, relative search paths are resolved against it
    base_path: str = field(
        default_factory=lambda: os.getenv("ACTIONS_BASE_PATH", os.getcwd())
    )

    # Source root and the package name it is importable as
    app_dir: str = field(
        default_factory=lambda: os.getenv("ACTIONS_APP_DIR", "app")
    )
    app_package: str = field(
        default_factory=lambda: os.getenv("ACTIONS_APP_PACKAGE", "app")
    )

    # Discovery
    action_paths: List[str] = field(
        default_factory=lambda: _split_paths(
            os.getenv("ACTIONS_PATHS", os.path.join("app", "actions"))
        )
    )
    auto_register: bool = field(
        default_factory=lambda: os.getenv("ACTIONS_AUTO_REGISTER", "true").lower() == "true"
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("ACTIONS_LOG_LEVEL", "INFO")
    )

    @property
    def app_path(self) -> str:
        if os.path.isabs(self.app_dir):
            return self.app_dir
        return os.path.join(self.base_path, self.app_dir)


config = Config()
