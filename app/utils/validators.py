from flask import request


def validate_page():
    """Validate the page query parameter"""
    page = request.args.get('page', 1, type=int)

    if page < 1:
        page = 1

    return page


def request_data() -> dict:
    """Form fields and uploaded files of the current request as one dict"""
    if request.is_json:
        data = dict(request.get_json(silent=True) or {})
    else:
        data = request.form.to_dict()
    data.update(request.files.to_dict())
    return data
