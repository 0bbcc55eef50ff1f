from flask import Blueprint, current_app, jsonify, request

import use_cases
from forms import MonthQueryForm, SpendingLimitForm, SpendingLimitUpdateForm

spending_limits_bp = Blueprint('spending_limits', __name__, url_prefix='/spending-limits')


@spending_limits_bp.route('', methods=['POST'])
def set_limit():
    """Create the month's limit (201) or replace the amount of the existing one (200).

    A month holds at most one limit, so a second POST for the same
    userId/month/year keeps the original id and answers 200 instead of 201.
    """
    form = SpendingLimitForm().validated()
    limit, created = use_cases.set_spending_limit(
        current_app.spending_limit_repository, **form.model_data()
    )
    return jsonify(limit.to_dict()), 201 if created else 200


@spending_limits_bp.route('', methods=['GET'])
def get_limit():
    form = MonthQueryForm(formdata=request.args).validated()
    limit = use_cases.get_spending_limit(
        current_app.spending_limit_repository,
        form.userId.data,
        form.month.data,
        form.year.data,
    )
    return jsonify(limit.to_dict())


@spending_limits_bp.route('/<limit_id>', methods=['PATCH'])
def update_limit(limit_id):
    form = SpendingLimitUpdateForm().validated()
    limit = use_cases.update_spending_limit(
        current_app.spending_limit_repository, limit_id, **form.model_data(supplied_only=True)
    )
    return jsonify(limit.to_dict())


@spending_limits_bp.route('/<limit_id>', methods=['DELETE'])
def delete_limit(limit_id):
    use_cases.delete_spending_limit(current_app.spending_limit_repository, limit_id)
    return '', 204
