"""Runtime settings read from the environment (and a .env file, if present)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from phonebook.infrastructure.schema import NAME_MIN_LENGTH, NUMBER_MIN_LENGTH

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

STORE_MEMORY = "memory"
STORE_NEO4J = "neo4j"


def load_env() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    port: int = 3001
    store: str = STORE_MEMORY
    seed: bool = False
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    static_dir: str = "dist"
    log_level: str = "INFO"
    name_min_length: int = NAME_MIN_LENGTH
    number_min_length: int = NUMBER_MIN_LENGTH

    def __post_init__(self):
        if self.store not in (STORE_MEMORY, STORE_NEO4J):
            raise ValueError(
                f"PHONEBOOK_STORE must be {STORE_MEMORY!r} or {STORE_NEO4J!r}, got {self.store!r}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        env = os.environ
        return cls(
            port=int(env.get("PORT", "3001")),
            store=env.get("PHONEBOOK_STORE", STORE_MEMORY).strip().lower(),
            seed=_flag(env.get("PHONEBOOK_SEED", "false")),
            neo4j_uri=env.get("NEO4J_URI", "bolt://localhost:7687").strip(),
            neo4j_user=env.get("NEO4J_USER", "neo4j").strip(),
            neo4j_password=env.get("NEO4J_PASSWORD", "password").strip(),
            static_dir=env.get("STATIC_DIR", "dist").strip(),
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper(),
            name_min_length=int(env.get("PERSON_NAME_MIN_LENGTH", str(NAME_MIN_LENGTH))),
            number_min_length=int(
                env.get("PERSON_NUMBER_MIN_LENGTH", str(NUMBER_MIN_LENGTH))
            ),
        )
