"""
API routes — JSON endpoints for structure synthesis.

    POST /api/operation   createTemplate | createCustom | createTree
    GET  /api/templates   [{name, description}, ...]
    GET  /api/health      {status, version}

Operation responses are ``{success, message, count?: {success, failed},
results?: [{path, success, message}]}``.
A missing template or an empty structure is reported with success=false
and HTTP 200; malformed requests get HTTP 400.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request

from treesmith import __version__
from treesmith.adapters.base import FilesystemProvider
from treesmith.adapters.local import LocalFilesystemProvider
from treesmith.adapters.mock import MockFilesystemProvider
from treesmith.core.data import TemplateCatalog
from treesmith.core.errors import EmptyPlanError, SynthesisError, TemplateNotFoundError
from treesmith.core.models.outcome import OutcomeReport
from treesmith.core.use_cases.synthesize import (
    synthesize_from_flat_list,
    synthesize_from_template,
    synthesize_from_tree,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _catalog() -> TemplateCatalog:
    return current_app.config["CATALOG"]


def _provider() -> FilesystemProvider:
    if current_app.config.get("MOCK_MODE", False):
        return MockFilesystemProvider()
    return LocalFilesystemProvider(Path(current_app.config["BASE_DIR"]))


def _failure(message: str, status: int = 200):  # type: ignore[no-untyped-def]
    return jsonify({"success": False, "message": message}), status


def _report_response(report: OutcomeReport, success_message: str):  # type: ignore[no-untyped-def]
    if report.all_ok:
        message = success_message
    else:
        message = f"Created {report.success_count} items, {report.failure_count} failed"

    return jsonify({
        "success": report.all_ok,
        "message": message,
        "count": {
            "success": report.success_count,
            "failed": report.failure_count,
        },
        "results": [
            {"path": o.path, "success": o.succeeded, "message": o.detail}
            for o in report.outcomes
        ],
    })


@api_bp.after_request
def _cors(response):  # type: ignore[no-untyped-def]
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


# ── Operations ───────────────────────────────────────────────────────


def _create_template(data: dict):  # type: ignore[no-untyped-def]
    template_id = data.get("template") or ""
    report = synthesize_from_template(
        template_id,
        data.get("rootDir") or "",
        provider=_provider(),
        catalog=_catalog(),
    )
    return _report_response(
        report,
        f"Successfully created {template_id} structure with {report.success_count} items",
    )


def _create_custom(data: dict):  # type: ignore[no-untyped-def]
    report = synthesize_from_flat_list(
        data.get("rootDir") or None,
        data.get("structure") or "",
        provider=_provider(),
    )
    return _report_response(report, f"Successfully created {report.success_count} items")


def _create_tree(data: dict):  # type: ignore[no-untyped-def]
    report = synthesize_from_tree(
        data.get("structure") or "",
        provider=_provider(),
    )
    return _report_response(report, f"Successfully created {report.success_count} items")


_OPERATIONS = {
    "createTemplate": _create_template,
    "createCustom": _create_custom,
    "createTree": _create_tree,
}

# Request fields that must be strings when present
_TEXT_FIELDS = ("operation", "template", "rootDir", "structure")


@api_bp.route("/operation", methods=["POST", "OPTIONS"])
def api_operation():  # type: ignore[no-untyped-def]
    """Dispatch a synthesis operation."""
    if request.method == "OPTIONS":
        return "", 200

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _failure("Invalid request format", 400)
    if any(not isinstance(data.get(f), (str, type(None))) for f in _TEXT_FIELDS):
        return _failure("Invalid request format", 400)

    operation = data.get("operation", "")
    handler = _OPERATIONS.get(operation)
    if handler is None:
        logger.debug("Unknown operation: %r", operation)
        return _failure("Unknown operation", 400)

    try:
        return handler(data)
    except TemplateNotFoundError as e:
        logger.info("%s", e)
        return _failure("Template not found")
    except EmptyPlanError as e:
        return _failure(str(e))
    except SynthesisError as e:
        return _failure(str(e), 400)


# ── Templates ────────────────────────────────────────────────────────


@api_bp.route("/templates")
def api_templates():  # type: ignore[no-untyped-def]
    """Available templates, in catalog order."""
    return jsonify([
        {"name": info.id, "description": info.description}
        for info in _catalog().list_templates()
    ])


# ── Health ───────────────────────────────────────────────────────────


@api_bp.route("/health")
def api_health():  # type: ignore[no-untyped-def]
    """Liveness check."""
    return jsonify({"status": "healthy", "version": __version__})
