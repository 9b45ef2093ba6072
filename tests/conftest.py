from __future__ import annotations

from typing import Any, Dict, List

import pytest

from editor_engine.runtime import telemetry


@pytest.fixture
def events(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, Any]]:
    """Capture ``telemetry.record_event`` calls instead of logging them."""

    captured: List[Dict[str, Any]] = []

    def fake_record_event(
        name: str,
        *,
        level: str = "info",
        data: Dict[str, Any] | None = None,
        logger_name: str | None = None,
    ) -> None:
        del logger_name
        captured.append({"name": name, "level": level, "data": dict(data or {})})

    monkeypatch.setattr(telemetry, "record_event", fake_record_event)
    return captured
