from __future__ import annotations

from fastapi import Request

from perfscore.config.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]
