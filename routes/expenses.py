from flask import Blueprint, current_app, jsonify, request

import use_cases
from forms import ExpenseForm, ExpenseUpdateForm, MonthQueryForm, UserQueryForm

expenses_bp = Blueprint('expenses', __name__, url_prefix='/expenses')


@expenses_bp.route('', methods=['POST'])
def create_expense():
    form = ExpenseForm().validated()
    expense = use_cases.create_expense(current_app.expense_repository, **form.model_data())
    return jsonify(expense.to_dict()), 201


@expenses_bp.route('', methods=['GET'])
def list_expenses():
    repository = current_app.expense_repository

    # Without month and year the whole history of the user is returned
    if 'month' not in request.args and 'year' not in request.args:
        form = UserQueryForm(formdata=request.args).validated()
        expenses = use_cases.get_all_expenses(repository, form.userId.data)
    else:
        form = MonthQueryForm(formdata=request.args).validated()
        expenses = use_cases.get_monthly_expenses(
            repository, form.userId.data, form.month.data, form.year.data
        )
    return jsonify([expense.to_dict() for expense in expenses])


@expenses_bp.route('/summary', methods=['GET'])
def spending_summary():
    form = MonthQueryForm(formdata=request.args).validated()
    summary = use_cases.get_spending_summary(
        current_app.expense_repository,
        current_app.spending_limit_repository,
        form.userId.data,
        form.month.data,
        form.year.data,
    )
    return jsonify(summary.to_dict())


@expenses_bp.route('/<expense_id>', methods=['GET'])
def get_expense(expense_id):
    expense = use_cases.get_expense(current_app.expense_repository, expense_id)
    return jsonify(expense.to_dict())


@expenses_bp.route('/<expense_id>', methods=['PATCH', 'PUT'])
def update_expense(expense_id):
    form = ExpenseForm() if request.method == 'PUT' else ExpenseUpdateForm()
    form.validated()
    changes = form.model_data(supplied_only=request.method == 'PATCH')
    expense = use_cases.update_expense(current_app.expense_repository, expense_id, **changes)
    return jsonify(expense.to_dict())


@expenses_bp.route('/<expense_id>', methods=['DELETE'])
def delete_expense(expense_id):
    use_cases.delete_expense(current_app.expense_repository, expense_id)
    return '', 204
