from flask import Blueprint, current_app, jsonify, request

from ..extensions import store
from ..utils.gifts import build_gift, find_gift_index, next_gift_id, validate_gift_payload

bp = Blueprint("gifts_api", __name__)


def _not_found(gift_id: int):
    return jsonify({"error": f"Gift card {gift_id} not found"}), 404


def _save_failed():
    return jsonify({"error": "Could not save gift cards"}), 500


def _validated_body():
    """Return (fields, error_response). Runs before the store is touched."""
    payload = request.get_json(silent=True)
    fields, errors = validate_gift_payload(payload)
    if errors:
        return None, (jsonify({"error": "Invalid gift card", "details": errors}), 400)
    return fields, None


@bp.get("/gifts")
def list_gifts():
    return jsonify(store.load_all())


@bp.get("/gifts/<int:gift_id>")
def get_gift(gift_id: int):
    gifts = store.load_all()
    idx = find_gift_index(gifts, gift_id)
    if idx is None:
        return _not_found(gift_id)
    return jsonify(gifts[idx])


@bp.post("/gifts")
def create_gift():
    fields, error = _validated_body()
    if error:
        return error

    gifts = store.load_all()
    gift = build_gift(next_gift_id(gifts), fields)
    gifts.append(gift)
    if not store.save_all(gifts):
        current_app.logger.error("Gift card %s was not created", gift["id"])
        return _save_failed()

    current_app.logger.info("Created gift card %s (%s)", gift["id"], gift["name"])
    return jsonify(gift), 201


@bp.put("/gifts/<int:gift_id>")
def replace_gift(gift_id: int):
    fields, error = _validated_body()
    if error:
        return error

    gifts = store.load_all()
    idx = find_gift_index(gifts, gift_id)
    if idx is None:
        return _not_found(gift_id)

    # id comes from the path, never from the body
    gifts[idx] = build_gift(gift_id, fields)
    if not store.save_all(gifts):
        current_app.logger.error("Gift card %s was not updated", gift_id)
        return _save_failed()

    current_app.logger.info("Updated gift card %s", gift_id)
    return jsonify(gifts[idx])


@bp.delete("/gifts/<int:gift_id>")
def delete_gift(gift_id: int):
    gifts = store.load_all()
    idx = find_gift_index(gifts, gift_id)
    if idx is None:
        return _not_found(gift_id)

    removed = gifts.pop(idx)
    if not store.save_all(gifts):
        current_app.logger.error("Gift card %s was not deleted", gift_id)
        return _save_failed()

    current_app.logger.info("Deleted gift card %s", gift_id)
    return jsonify({"message": f"Gift card {gift_id} deleted", "gift": removed})
