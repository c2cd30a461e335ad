from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import DuplicateError, OutOfRangeError, PersistenceError, ValidationError
from ..reports.mailer import XLSX_MIMETYPE
from .model import CheckinCandidate

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _date_filter() -> Optional[str]:
        value = (request.args.get("date") or "").strip()
        if not value:
            return None
        try:
            parse_iso_date(value)
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD")
        return value

    def _selected_records():
        day = _date_filter()
        if day:
            return day, container.checkin_store.list_for_date(day)
        return None, container.checkin_store.list()

    def _download(content: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            content,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/checkin", methods=["POST"], endpoint="checkin")
    def checkin():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"message": "Missing required fields"}), 400

        try:
            result = container.checkin_store.submit(
                CheckinCandidate.from_payload(payload),
                ip=request.remote_addr,
            )
        except ValidationError as e:
            logger.info("Rejected check-in: %s", e)
            return jsonify({"message": str(e)}), 400
        except OutOfRangeError as e:
            return jsonify({"message": str(e)}), 403
        except DuplicateError as e:
            logger.info("Rejected check-in for device %s: %s", payload.get("deviceId"), e)
            return jsonify({"message": str(e)}), 409
        except PersistenceError:
            return jsonify({"message": "Server error"}), 500
        except Exception:
            logger.exception("Unexpected error while handling check-in")
            return jsonify({"message": "Server error"}), 500

        return jsonify(result.to_dict()), 200

    @app.route("/checkins", methods=["GET"], endpoint="checkins")
    def checkins():
        return jsonify([r.to_dict() for r in container.checkin_store.list()])

    @app.route("/checkins/export.csv", methods=["GET"], endpoint="checkins_export_csv")
    def checkins_export_csv():
        try:
            day, records = _selected_records()
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        filename = f"checkins_{day}.csv" if day else "checkins.csv"
        return _download(container.exporter.to_csv_bytes(records), mimetype="text/csv", filename=filename)

    @app.route("/checkins/export.xlsx", methods=["GET"], endpoint="checkins_export_xlsx")
    def checkins_export_xlsx():
        try:
            day, records = _selected_records()
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        filename = f"checkins_{day}.xlsx" if day else "checkins.xlsx"
        return _download(container.exporter.to_xlsx_bytes(records), mimetype=XLSX_MIMETYPE, filename=filename)

    @app.route("/healthz", methods=["GET"], endpoint="healthz")
    def healthz():
        return jsonify({"status": "ok", "checkins": len(container.checkin_store)})
