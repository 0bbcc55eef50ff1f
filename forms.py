from datetime import datetime, timezone
from decimal import Decimal

from flask import request
from flask_wtf import FlaskForm
from wtforms import DateField, DecimalField, IntegerField, StringField
from wtforms.validators import DataRequired, NumberRange, Optional, StopValidation

from errors import InvalidInputError

# Wire (camelCase) field names that differ from the model attribute names.
MODEL_NAMES = {'userId': 'user_id', 'monthlyLimit': 'monthly_limit'}


def as_text(value):
    return str(value).strip() if value is not None else value


def present(form, field):
    """Like InputRequired, but lets a JSON ``0`` through."""
    if not field.raw_data or field.raw_data[0] is None or field.raw_data[0] == '':
        field.errors[:] = []
        raise StopValidation('This field is required.')


def finite(form, field):
    if field.data is not None and not field.data.is_finite():
        raise StopValidation('Must be a finite number.')


def not_blank(form, field):
    """For partial updates: skip absent fields, reject supplied blank ones."""
    if not field.raw_data:
        field.errors[:] = []
        raise StopValidation()
    if field.data is None or field.data == '':
        raise StopValidation('This field cannot be blank.')


class NumberField(DecimalField):
    """DecimalField that accepts JSON numbers as well as strings."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        try:
            if isinstance(value, bool):
                raise ValueError
            self.data = Decimal(str(value))
        except (ArithmeticError, ValueError):
            self.data = None
            raise ValueError(self.gettext('Not a valid decimal value.'))


class WholeNumberField(IntegerField):

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        try:
            if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                raise ValueError
            self.data = int(value)
        except (TypeError, ValueError):
            self.data = None
            raise ValueError(self.gettext('Not a valid integer value.'))


class IsoDateField(DateField):
    """Accepts ``YYYY-MM-DD`` or a full ISO-8601 datetime.

    Offset-aware datetimes are converted to UTC before the calendar date is
    taken; naive ones are used as written.
    """

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = str(valuelist[0]).strip()
        if value.endswith('Z'):
            value = value[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            self.data = None
            raise ValueError(self.gettext('Not a valid date value.'))
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
        self.data = parsed.date()


class ApiForm(FlaskForm):
    class Meta:
        csrf = False

    def __init__(self, *args, **kwargs):
        # Flask-WTF can only turn a JSON object into form data
        if not args and 'formdata' not in kwargs and request.method != 'GET' and request.is_json:
            if not isinstance(request.get_json(), dict):
                raise InvalidInputError({'body': ['Expected a JSON object.']})
        super().__init__(*args, **kwargs)

    def validated(self):
        if not self.validate():
            raise InvalidInputError(self.errors)
        return self

    def model_data(self, supplied_only=False):
        """Field data keyed by model attribute name.

        With ``supplied_only`` fields missing from the request (or sent
        empty) are left out, which is what partial updates need.
        """
        data = {}
        for name, field in self._fields.items():
            if supplied_only and (not field.raw_data or field.data is None or field.data == ''):
                continue
            data[MODEL_NAMES.get(name, name)] = field.data
        return data


class UserQueryForm(ApiForm):
    userId = StringField('User', validators=[DataRequired()], filters=[as_text])


class MonthQueryForm(UserQueryForm):
    month = WholeNumberField('Month', validators=[present, NumberRange(min=1, max=12)])
    year = WholeNumberField('Year', validators=[present, NumberRange(min=1, max=9999)])


class ExpenseForm(ApiForm):
    amount = NumberField('Amount', validators=[present, finite, NumberRange(min=0)])
    description = StringField('Description', validators=[DataRequired()], filters=[as_text])
    category = StringField('Category', validators=[DataRequired()], filters=[as_text])
    date = IsoDateField('Date', validators=[present])
    userId = StringField('User', validators=[DataRequired()], filters=[as_text])


class ExpenseUpdateForm(ApiForm):
    amount = NumberField('Amount', validators=[Optional(), finite, NumberRange(min=0)])
    description = StringField('Description', validators=[not_blank], filters=[as_text])
    category = StringField('Category', validators=[not_blank], filters=[as_text])
    date = IsoDateField('Date', validators=[Optional()])
    userId = StringField('User', validators=[not_blank], filters=[as_text])


class SpendingLimitForm(MonthQueryForm):
    monthlyLimit = NumberField('Monthly limit', validators=[present, finite, NumberRange(min=0)])


class SpendingLimitUpdateForm(ApiForm):
    userId = StringField('User', validators=[not_blank], filters=[as_text])
    monthlyLimit = NumberField('Monthly limit', validators=[Optional(), finite, NumberRange(min=0)])
    month = WholeNumberField('Month', validators=[Optional(), NumberRange(min=1, max=12)])
    year = WholeNumberField('Year', validators=[Optional(), NumberRange(min=1, max=9999)])
