from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import to_json
from ..common.validators import parse_flag
from ..container import Container
from ..core.enums import PaymentStatus
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payments", endpoint="list_payments")
    def list_payments():
        payments = container.payment_service.list_for_coach(container.current_coach_id())
        container.state.set_payments(payments)
        month = request.args.get("month")
        return jsonify(to_json(container.state.payments_for_month(month) if month else payments))

    @app.route("/api/payments", methods=["POST"], endpoint="add_payment")
    def add_payment():
        data = request.get_json(silent=True) or {}
        payment_id = container.payment_service.record(
            student_id=data.get("student_id"),
            amount=data.get("amount"),
            month=data.get("month") or container.state.selected_month,
            payment_method=data.get("payment_method"),
            status=data.get("status") or PaymentStatus.COMPLETED,
            notes=data.get("notes"),
            transaction_id=data.get("transaction_id"),
            payment_date=data.get("payment_date"),
        )
        payment = container.payment_service.require(payment_id)
        container.state.add_payment(payment)
        container.state.set_success_message("Payment recorded successfully!")
        return jsonify(to_json(payment)), 201

    @app.route("/api/payments/summary", endpoint="payment_summary")
    def payment_summary():
        month = request.args.get("month") or container.state.selected_month
        summary = container.payment_service.monthly_summary(container.current_coach_id(), month)
        return jsonify({"month": month, **summary.as_dict(), "average": summary.average})

    @app.route("/api/payments/pending", endpoint="pending_payments")
    def pending_payments():
        return jsonify(to_json(container.payment_service.list_pending(container.current_coach_id())))

    @app.route("/api/payments/<int:payment_id>", endpoint="payment_detail")
    def payment_detail(payment_id: int):
        return jsonify(to_json(container.payment_service.require(payment_id)))

    @app.route("/api/payments/<int:payment_id>/status", methods=["PATCH"], endpoint="payment_status")
    def payment_status(payment_id: int):
        data = request.get_json(silent=True) or {}
        if not container.payment_service.set_status(payment_id, data.get("status")):
            raise NotFoundError(f"Payment {payment_id} not found")
        payment = container.payment_service.require(payment_id)
        container.state.update_payment(payment_id, status=payment.status)
        return jsonify(to_json(payment))

    @app.route("/api/payment-methods", endpoint="list_payment_methods")
    def list_payment_methods():
        return jsonify(to_json(container.payment_method_service.list_active(container.current_coach_id())))

    @app.route("/api/payment-methods", methods=["POST"], endpoint="save_payment_method")
    def save_payment_method():
        data = request.get_json(silent=True) or {}
        method_id = container.payment_method_service.upsert(
            coach_id=container.current_coach_id(),
            method_type=data.get("method_type", "gateway"),
            provider=data.get("provider", ""),
            api_key=data.get("api_key", ""),
            is_active=parse_flag(data.get("is_active", True), "is_active"),
        )
        return jsonify({"id": method_id}), 201

    @app.route("/api/payment-methods/<int:method_id>", methods=["DELETE"], endpoint="deactivate_payment_method")
    def deactivate_payment_method(method_id: int):
        if not container.payment_method_service.deactivate(method_id):
            raise NotFoundError(f"Payment method {method_id} not found")
        return jsonify({"deactivated": method_id})

    @app.route("/api/payment-methods/<int:method_id>", methods=["PUT"], endpoint="update_payment_method")
    def update_payment_method(method_id: int):
        data = request.get_json(silent=True) or {}
        affected = container.payment_method_service.update(
            method_id,
            method_type=data.get("method_type", ""),
            provider=data.get("provider", ""),
            api_key=data.get("api_key", ""),
            is_active=parse_flag(data.get("is_active", True), "is_active"),
        )
        if not affected:
            raise NotFoundError(f"Payment method {method_id} not found")
        return jsonify({"id": method_id})
