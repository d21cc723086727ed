from core.validation import has_blocking, parse_number, validate_fields


def test_parse_number_accepts_common_formats():
    assert parse_number("200,000") == 200000.0
    assert parse_number(" $898.09 ") == 898.09
    assert parse_number(3) == 3.0
    assert parse_number("") is None
    assert parse_number("abc") is None
    assert parse_number("nan") is None
    assert parse_number(None) is None


def test_unknown_field_is_skipped():
    values, issues = validate_fields(
        {"Loan": "200000", "Interest": "3.5", "Years": "30", "Payment": "garbage"}, "Payment"
    )
    assert values == {"Loan": 200000.0, "Interest": 3.5, "Years": 30.0}
    assert issues == []
    assert not has_blocking(issues)


def test_issues_reported_per_field():
    values, issues = validate_fields(
        {"Loan": "abc", "Interest": "-1", "Years": "", "Payment": "0"}, "Interest"
    )
    codes = {i.field: i.code for i in issues}
    assert codes == {"Loan": "NOT_A_NUMBER", "Years": "BLANK", "Payment": "NOT_POSITIVE"}
    assert values == {}
    assert has_blocking(issues)


def test_negative_rejected():
    _, issues = validate_fields({"Loan": "-5", "Interest": "3", "Years": "30"}, "Payment")
    assert [i.code for i in issues] == ["NEGATIVE"]
    assert issues[0].message == "Loan Amount cannot be negative."


def test_zero_principal_and_rate_allowed():
    values, issues = validate_fields({"Loan": "0", "Interest": "0", "Years": "30"}, "Payment")
    assert not issues
    assert values["Loan"] == 0.0


def test_term_shorter_than_a_month():
    _, issues = validate_fields({"Loan": "1000", "Interest": "3", "Years": "0.01"}, "Payment")
    assert [i.code for i in issues] == ["TERM_TOO_SHORT"]


def test_high_rate_is_informational():
    values, issues = validate_fields({"Loan": "1000", "Interest": "150", "Years": "1"}, "Payment")
    assert [i.severity for i in issues] == ["info"]
    assert not has_blocking(issues)
    assert values["Interest"] == 150.0


def test_term_longer_than_limit():
    values, issues = validate_fields({"Loan": "200000", "Interest": "3.5", "Years": "1e9"}, "Payment")
    assert [i.code for i in issues] == ["TERM_TOO_LONG"]
    assert issues[0].message == "Term (years) cannot exceed 100 years."
    assert "Years" not in values


def test_term_at_limit_allowed():
    _, issues = validate_fields({"Loan": "200000", "Interest": "3.5", "Years": "100"}, "Payment")
    assert not issues
