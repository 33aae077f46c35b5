from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator

_CONFIG_ENV_VARS = (
    "SOLANA_RPC_URL",
    "MINTSYNC_BATCH_SIZE",
    "MINTSYNC_PACING_SECONDS",
    "MINTSYNC_DAEMON_INTERVAL",
)


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
