from typing import Any, Dict, Iterable, List, Tuple


def assert_dict_contains(
    actual: Dict[str, Any], expected: Dict[str, Any]
) -> None:
    for k, v in expected.items():
        if k not in actual or actual[k] != v:
            raise AssertionError(f"Expected {k}={v}, got {actual.get(k)}")


def violation_pairs(violations: Iterable[Any]) -> List[Tuple[str, str]]:
    """(field, rule) pairs from Violation objects or their JSON form."""
    pairs = []
    for violation in violations:
        if isinstance(violation, dict):
            pairs.append((violation["field"], violation["rule"]))
        else:
            pairs.append((violation.field, violation.rule))
    return pairs


def assert_validation_error(
    body: Dict[str, Any], expected: Iterable[Tuple[str, str]]
) -> None:
    """Check an error envelope reports exactly the expected violations."""
    if body.get("errorCode") != "VALIDATION_ERROR":
        raise AssertionError(f"Expected VALIDATION_ERROR, got {body}")
    actual = violation_pairs(body.get("errors", []))
    if actual != list(expected):
        raise AssertionError(f"Expected {list(expected)}, got {actual}")
