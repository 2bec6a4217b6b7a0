from __future__ import annotations

from extools.core.result import Err, Ok, Result


def _half(n: int) -> Result[int, str]:
    if n % 2:
        return Err(f"{n} is odd")
    return Ok(n // 2)


def test_match_on_result() -> None:
    outcomes: list[str] = []
    for n in (4, 3):
        match _half(n):
            case Ok(value):
                outcomes.append(f"ok {value}")
            case Err(error):
                outcomes.append(f"err {error}")

    assert outcomes == ["ok 2", "err 3 is odd"]


def test_results_compare_by_value() -> None:
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
