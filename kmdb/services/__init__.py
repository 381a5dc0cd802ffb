import functools

from kmdb.models import db


def transactional(func=None, *, read_only=False):
    """Run a service method as one unit of work on the request session.

    Writes commit on success and roll back on any error. Read-only calls
    skip autoflush and never commit.
    """
    if func is None:
        return functools.partial(transactional, read_only=read_only)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if read_only:
            with db.session.no_autoflush:
                return func(*args, **kwargs)
        try:
            result = func(*args, **kwargs)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return result

    return wrapper
