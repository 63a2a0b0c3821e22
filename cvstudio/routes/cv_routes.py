from io import BytesIO

from flask import Blueprint, current_app, jsonify, request, send_file
from flask_jwt_extended import get_jwt_identity, jwt_required

from cvstudio.databases import cv_summary_to_dict, cv_to_dict
from cvstudio.exceptions import NotFoundError, RenderError, StorageError, ValidationError
from cvstudio.services import cv_generator
from cvstudio.services.cv_store import CvAggregateStore

cv_bp = Blueprint("cv", __name__)

MIMETYPES = {"pdf": "application/pdf", "html": "text/html"}


@cv_bp.errorhandler(ValidationError)
def handle_validation_error(e):
    return jsonify({"message": e.message}), 400


@cv_bp.errorhandler(NotFoundError)
def handle_not_found(e):
    return jsonify({"message": e.message}), 404


@cv_bp.errorhandler(StorageError)
@cv_bp.errorhandler(RenderError)
def handle_server_error(e):
    return jsonify({
        "message": e.message,
        "error": str(e.original_error) if e.original_error else None,
    }), 500


# === [1] CV list for the current user ===
@cv_bp.route("/my-cvs", methods=["GET"])
@jwt_required()
def my_cvs():
    cvs = CvAggregateStore.list_by_owner(get_jwt_identity())
    return jsonify({
        "count": len(cvs),
        "cvs": [cv_summary_to_dict(cv) for cv in cvs],
    }), 200


# === [2] Templates ===
@cv_bp.route("/templates", methods=["GET"])
@jwt_required()
def templates():
    return jsonify(cv_generator.available_templates()), 200


# === [3] Single CV ===
@cv_bp.route("/<int:cv_id>", methods=["GET"])
@jwt_required()
def get_cv(cv_id):
    cv = CvAggregateStore.get(cv_id, get_jwt_identity())
    if cv is None:
        return jsonify({"message": "CV not found"}), 404
    return jsonify(cv_to_dict(cv)), 200


# === [4] Create / replace / delete ===
@cv_bp.route("", methods=["POST"])
@jwt_required()
def create_cv():
    cv = CvAggregateStore.create(get_jwt_identity(), request.get_json(silent=True))
    return jsonify({"message": "CV created successfully", "cv": cv_to_dict(cv)}), 201


@cv_bp.route("/<int:cv_id>", methods=["PUT"])
@jwt_required()
def update_cv(cv_id):
    cv = CvAggregateStore.update(cv_id, get_jwt_identity(), request.get_json(silent=True))
    return jsonify({"message": "CV updated successfully", "cv": cv_to_dict(cv)}), 200


@cv_bp.route("/<int:cv_id>", methods=["DELETE"])
@jwt_required()
def delete_cv(cv_id):
    if not CvAggregateStore.delete(cv_id, get_jwt_identity()):
        return jsonify({"message": "CV not found"}), 404
    return jsonify({"message": "CV deleted successfully"}), 200


@cv_bp.route("/<int:cv_id>/set-primary", methods=["POST"])
@jwt_required()
def set_primary_cv(cv_id):
    if not CvAggregateStore.set_primary(cv_id, get_jwt_identity()):
        return jsonify({"message": "CV not found"}), 404
    return jsonify({"message": "CV set as primary successfully"}), 200


# === [5] Export ===
@cv_bp.route("/<int:cv_id>/export-pdf", methods=["GET"])
@jwt_required()
def export_cv(cv_id):
    cv = CvAggregateStore.get(cv_id, get_jwt_identity())
    if cv is None:
        return jsonify({"message": "CV not found"}), 404

    fmt = request.args.get("format", "pdf").lower()
    if fmt not in MIMETYPES:
        return jsonify({"message": f"Unsupported format: {fmt}"}), 400

    content = cv_generator.render(
        cv,
        request.args.get("template"),
        fmt=fmt,
        page_size=current_app.config.get("CV_PAGE_SIZE", "A4"),
        page_margin=current_app.config.get("CV_PAGE_MARGIN", "2cm"),
    )
    return send_file(
        BytesIO(content),
        mimetype=MIMETYPES[fmt],
        as_attachment=True,
        download_name=cv_generator.suggested_filename(cv, fmt),
    )
