from flask import request
from werkzeug.exceptions import BadRequest

from kmdb.errors import ValidationFailed
from kmdb.models import fits_integer

TRUTHY = {"true", "1", "yes"}
FALSY = {"false", "0", "no"}

def parse_int_arg(name, default, message):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationFailed(message) from None

# ids and years must fit a database integer
def int_arg(name, default=None):
    message = f"Invalid value for '{name}'"
    value = parse_int_arg(name, default, message)
    if value is not None and not fits_integer(value):
        raise ValidationFailed(message)
    return value

# page is unbounded, paginate handles offsets past the end
def page_args(default_size):
    page = parse_int_arg("page", 0, "Invalid pagination parameters")
    size = parse_int_arg("size", default_size, "Invalid pagination parameters")
    return page, size

def force_arg():
    raw = request.args.get("force", "false").strip().lower()
    if raw in TRUTHY:
        return True
    if raw in FALSY:
        return False
    raise ValidationFailed(f"Invalid value for 'force': {raw}")

def json_body():
    try:
        return request.get_json()
    except BadRequest:
        raise ValidationFailed("Malformed JSON request") from None

def page_links(base_url, page):
    links = {
        "self": f"{base_url}?page={page.page}&size={page.size}",
        "first": f"{base_url}?page=0&size={page.size}",
        "last": f"{base_url}?page={max(page.total_pages - 1, 0)}&size={page.size}",
        "create": base_url,
    }
    if page.page > 0:
        links["prev"] = f"{base_url}?page={page.page - 1}&size={page.size}"
    if page.page < page.total_pages - 1:
        links["next"] = f"{base_url}?page={page.page + 1}&size={page.size}"
    return links

def page_envelope(base_url, page, items):
    return {
        "count": page.total,
        "page": page.page,
        "size": page.size,
        "total_pages": page.total_pages,
        "items": items,
        "_links": page_links(base_url, page),
    }
