"""Integer coercion shared by year and state-code parsing."""

from typing import Type, Union


def as_integer(
    value: Union[int, float, str],
    error: Type[Exception],
    label: str,
) -> int:
    """Coerce *value* to ``int``, truncating numeric strings like ``"2015.0"``.

    Args:
        value: Number or numeric string.
        error: Exception class raised when coercion fails.
        label: Name used in the error message (e.g. ``'year'``).

    Returns:
        The integer value.

    Raises:
        error: If *value* is not numeric, NaN, or infinite.
    """
    try:
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                return int(float(text))
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise error(f"invalid {label}: {value!r}") from exc
