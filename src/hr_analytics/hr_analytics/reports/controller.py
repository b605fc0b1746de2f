from __future__ import annotations

import logging
from typing import Callable

from flask import Flask, jsonify, request

from ..core.exceptions import ReportNotFoundError, ValidationError
from ..container import Container
from .export import to_csv_bytes, to_excel_bytes
from .model import ReportData

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_INT_PARAMS = {"year", "min_employees"}
_STR_PARAMS = {"skill_category"}


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _report_params() -> dict:
        params: dict = {}
        for key, value in request.args.items():
            if key in _INT_PARAMS:
                try:
                    params[key] = int(value)
                except ValueError as e:
                    raise ValidationError(f"{key} must be an integer") from e
            elif key in _STR_PARAMS:
                params[key] = value
            else:
                raise ValidationError(f"unknown query parameter: {key}")
        return params

    def _with_report(name: str, render: Callable[[ReportData], object]):
        try:
            data = container.report_service.build(name, **_report_params())
        except ReportNotFoundError as e:
            return _error(str(e), 404)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to build report %s", name)
            return _error("internal error while building report", 500)
        return render(data)

    def _attachment(body: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"success": True, "data_source": container.data_source.value})

    @app.route("/reports", methods=["GET"], endpoint="reports_index")
    def reports_index():
        return jsonify({"success": True, "reports": container.report_service.available_reports()})

    @app.route("/reports/<name>", methods=["GET"], endpoint="report_json")
    def report_json(name: str):
        return _with_report(
            name,
            lambda data: jsonify(
                {
                    "success": True,
                    "name": data.name,
                    "title": data.title,
                    "columns": data.columns,
                    "rows": data.rows,
                }
            ),
        )

    @app.route("/reports/<name>/export.csv", methods=["GET"], endpoint="report_csv")
    def report_csv(name: str):
        return _with_report(
            name,
            lambda data: _attachment(to_csv_bytes(data), mimetype="text/csv", filename=f"{data.name}.csv"),
        )

    @app.route("/reports/<name>/export.xlsx", methods=["GET"], endpoint="report_xlsx")
    def report_xlsx(name: str):
        return _with_report(
            name,
            lambda data: _attachment(to_excel_bytes(data), mimetype=XLSX_MIMETYPE, filename=f"{data.name}.xlsx"),
        )
