from __future__ import annotations

import io
import logging
from typing import Callable

from flask import flash, request, send_file

from ..core.exceptions import DecodeError, ImportAbortedError
from .summary import ImportSummary
from .templates import XLSX_MIMETYPE

logger = logging.getLogger(__name__)


def run_upload(importer: Callable[..., ImportSummary]) -> None:
    """Feed the uploaded ``file`` field to ``importer`` and flash the outcome.

    Status line first, then the capped error list, then the "외 N건" marker.
    """
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        flash("업로드할 파일을 선택해 주세요.", "warning")
        return

    try:
        summary = importer(upload.read(), upload.filename)
    except (DecodeError, ImportAbortedError) as e:
        flash(str(e), "danger")
        return
    except Exception:
        logger.exception("upload failed file=%s", upload.filename)
        flash("업로드 처리 중 오류가 발생했습니다.", "danger")
        return

    flash(summary.status_line, "success" if not summary.errors else "warning")
    for line in summary.displayed_errors:
        flash(line, "warning")
    if summary.more_errors_label:
        flash(summary.more_errors_label, "warning")


def send_template(builder: Callable[[], tuple[bytes, str]]):
    data, filename = builder()
    return send_file(io.BytesIO(data), mimetype=XLSX_MIMETYPE, as_attachment=True, download_name=filename)
