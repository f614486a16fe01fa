"""
Context manager for rendering configuration (e.g., the path root label).
"""

from contextlib import contextmanager
from contextvars import ContextVar

DEFAULT_ROOT_LABEL = "$"

_root_label: ContextVar[str] = ContextVar("root_label", default=DEFAULT_ROOT_LABEL)


def get_root_label() -> str:
    """Return the root label used when a rendering call is given none."""
    return _root_label.get()


@contextmanager
def validation_context(*, root_label: str = DEFAULT_ROOT_LABEL):
    """
    Context manager for rendering configuration.

    Args:
        root_label: Label printed in front of every error path, e.g. "$root"
                    renders "$root.user.name" instead of "$.user.name".

    Example:
        from conforms import validate, validation_context

        result = validate(data, assertion)

        with validation_context(root_label="body"):
            print(result)  # 1 validation error:\n  body.name: ...

    An explicit ``root`` passed to ``to_string()`` always wins.
    """
    token = _root_label.set(root_label)
    try:
        yield
    finally:
        _root_label.reset(token)
