from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    数値として解釈できない値・有限でない値は ValueError とする。
    """
    if isinstance(v, Decimal):
        result = v
    else:
        try:
            result = Decimal(str(v))
        except InvalidOperation as e:
            raise ValueError(f"Invalid decimal value: {v!r}") from e
    if not result.is_finite():
        raise ValueError(f"Decimal value must be finite: {v!r}")
    return result
