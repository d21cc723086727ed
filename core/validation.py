from __future__ import annotations

import math
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from core.presets import FIELD_LABELS, MAX_TERM_YEARS, POSITIVE_FIELDS


class FieldIssue(BaseModel):
    code: str
    field: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def parse_number(raw) -> Optional[float]:
    """Parse user text such as ``"200,000"`` or ``" 3.5 "`` into a float.

    Returns ``None`` for blank, non-numeric or non-finite input.
    """

    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", "").lstrip("$")
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def validate_fields(
    raw: Mapping[str, Any], unknown: str
) -> Tuple[Dict[str, float], List[FieldIssue]]:
    """Parse every field except ``unknown`` and report problems per field.

    ``raw`` maps selector names (``"Loan"``, ``"Interest"``, ``"Years"``,
    ``"Payment"``) to the text the user typed.
    """

    values: Dict[str, float] = {}
    res: List[FieldIssue] = []
    for name, label in FIELD_LABELS.items():
        if name == unknown:
            continue
        text = raw.get(name)
        if text is None or not str(text).strip():
            res.append(
                FieldIssue(
                    code="BLANK",
                    field=name,
                    severity="critical",
                    message=f"{label} is required.",
                )
            )
            continue
        value = parse_number(text)
        if value is None:
            res.append(
                FieldIssue(
                    code="NOT_A_NUMBER",
                    field=name,
                    severity="critical",
                    message=f"{label} must be a number.",
                    context={"raw": str(text)},
                )
            )
            continue
        if value < 0:
            res.append(
                FieldIssue(
                    code="NEGATIVE",
                    field=name,
                    severity="critical",
                    message=f"{label} cannot be negative.",
                    context={"value": value},
                )
            )
            continue
        if name in POSITIVE_FIELDS and value == 0:
            res.append(
                FieldIssue(
                    code="NOT_POSITIVE",
                    field=name,
                    severity="critical",
                    message=f"{label} must be greater than zero.",
                )
            )
            continue
        if name == "Years" and round(value * 12) < 1:
            res.append(
                FieldIssue(
                    code="TERM_TOO_SHORT",
                    field=name,
                    severity="critical",
                    message=f"{label} must cover at least one month.",
                    context={"value": value},
                )
            )
            continue
        if name == "Years" and value > MAX_TERM_YEARS:
            res.append(
                FieldIssue(
                    code="TERM_TOO_LONG",
                    field=name,
                    severity="critical",
                    message=f"{label} cannot exceed {MAX_TERM_YEARS} years.",
                    context={"value": value},
                )
            )
            continue
        values[name] = value

    if values.get("Interest", 0) > 100:
        res.append(
            FieldIssue(
                code="RATE_OUT_OF_BAND",
                field="Interest",
                severity="info",
                message="Interest rate is unusually high; enter an annual percentage such as 6.5.",
                context={"value": values["Interest"]},
            )
        )
    return values, res


def has_blocking(res: List[FieldIssue]) -> bool:
    return any(r.severity == "critical" for r in res)
