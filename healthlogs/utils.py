from typing import Optional, Tuple

from flask import request

from app.errors import ValidationError


def parse_user_id(value) -> Optional[int]:
    """Turn a ``user_id`` from a body or query string into an int.

    Empty values mean "not given" and return None."""
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError(f'Invalid user_id: {value!r}')
    if isinstance(value, int) and value >= 0:
        return value
    if isinstance(value, str) and value.isdecimal():
        return int(value)
    raise ValidationError(f'Invalid user_id: {value!r}')


def read_submission() -> Tuple[dict, Optional[int]]:
    """Return the submitted fields and the target user id.

    Accepts a JSON body or an urlencoded form. ``user_id`` may come from the
    body or the query string; the body wins."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form.to_dict()
    user_id = data.pop('user_id', None)
    if user_id is None:
        user_id = request.args.get('user_id')
    return data, parse_user_id(user_id)
