from flask import Blueprint, jsonify, request

from bricks.services import catalog

store_bp = Blueprint("store", __name__)


@store_bp.route("/events", methods=["GET"])
def list_events():
    return jsonify(catalog.list_events(request.args.get("city"), request.args.get("type"))), 200


@store_bp.route("/events/<event_id>", methods=["GET"])
def get_event(event_id):
    event = catalog.get_event(event_id)
    if not event:
        return jsonify({"msg": "Event not found"}), 404
    return jsonify(event), 200


@store_bp.route("/products", methods=["GET"])
def list_products():
    return jsonify(catalog.list_products(request.args.get("category"))), 200


@store_bp.route("/products/<product_id>", methods=["GET"])
def get_product(product_id):
    product = catalog.get_product(product_id)
    if not product:
        return jsonify({"msg": "Product not found"}), 404
    return jsonify(product), 200
