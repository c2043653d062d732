# src/weather_service/api/static_files.py

from __future__ import annotations

import os
from typing import Mapping

from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


class ContentTypeStaticFiles(StaticFiles):
    """
    StaticFiles whose content type can be pinned per file extension.

    Starlette guesses the type with `mimetypes`, which has no entry for YAML on
    most platforms. Extensions found in `content_types` (matched
    case-insensitively, including the dot) win over the guess.
    """

    def __init__(self, *, content_types: Mapping[str, str] | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.content_types = {ext.lower(): ctype for ext, ctype in (content_types or {}).items()}

    def file_response(
        self,
        full_path: str | os.PathLike[str],
        stat_result: os.stat_result,
        scope: Scope,
        status_code: int = 200,
    ) -> Response:
        response = super().file_response(full_path, stat_result, scope, status_code)
        content_type = self.content_types.get(os.path.splitext(str(full_path))[1].lower())
        if content_type is not None:
            response.headers["content-type"] = content_type
            response.media_type = content_type
        return response
