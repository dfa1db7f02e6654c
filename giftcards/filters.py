def _currency(value):
    try:
        return f"${float(value):,.2f}"
    except (TypeError, ValueError):
        return value


def register_filters(app):
    app.jinja_env.filters["currency"] = _currency
