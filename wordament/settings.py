import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)
    DICTIONARY_URL: str = ""

    MIN_WORD_LENGTH: int = 3
    GRID_WIDTH: int = 4
    GRID_HEIGHT: int = 4

    REPORT_ALL_PATHS: bool = True
    MAX_WORKERS: int = 0

    HTTP_TIMEOUT: float = 10.0
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, Path):
                    setattr(self, fld, Path(env_val))
                else:
                    setattr(self, fld, _coerce(env_val, type(current)))

    @property
    def dictionary_source(self) -> str:
        """URL when one is configured, otherwise the local word-list path."""
        return self.DICTIONARY_URL or str(self.DICTIONARY_PATH)


# Fields that may be changed at runtime (CLI --set KEY=VALUE)
EDITABLE_FIELDS: dict[str, type] = {
    "DICTIONARY_URL": str,
    "MIN_WORD_LENGTH": int,
    "GRID_WIDTH": int,
    "GRID_HEIGHT": int,
    "REPORT_ALL_PATHS": bool,
    "MAX_WORKERS": int,
    "HTTP_TIMEOUT": float,
    "DEBUG": bool,
}


def _coerce(value, target: type):
    if target is bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)
    return target(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable field updates; returns {field: error} for the ones rejected."""
    errors: dict[str, str] = {}
    for name, raw in values.items():
        target = EDITABLE_FIELDS.get(name)
        if target is None:
            errors[name] = "not editable" if hasattr(cfg, name) else "unknown field"
            continue
        try:
            setattr(cfg, name, _coerce(raw, target))
        except (TypeError, ValueError) as e:
            errors[name] = f"expected {target.__name__}: {e}"
    return errors


settings = Settings()
