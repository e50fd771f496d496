from splitsettle.models import ExpenseRecord, Member, PaymentRecord
from splitsettle.services.validation import validate_snapshot

A, B = Member("A"), Member("B")


def test_clean_snapshot():
    issues = validate_snapshot(
        [A, B],
        [ExpenseRecord("A", 100, {"A", "B"}), ExpenseRecord("B", 20)],
        [PaymentRecord("B", "A", 10)],
    )

    assert issues == []


def test_reports_problems():
    issues = validate_snapshot(
        [A, B, Member("A")],
        [
            ExpenseRecord("A", 0, expense_id="zero"),
            ExpenseRecord("ghost", 10, expense_id="nopayer"),
            ExpenseRecord("A", 10, {"left"}, expense_id="gone"),
        ],
        [PaymentRecord("A", "A", 5), PaymentRecord("A", "ghost", -1, payment_id="p2")],
    )

    text = "\n".join(issues)
    assert "Duplicate member id 'A'" in text
    assert "Expense zero has non-positive amount" in text
    assert "Expense nopayer payer 'ghost' is not a member" in text
    assert "Expense gone names non-members left" in text
    assert "Expense gone has no member participants" in text
    assert "Payment #0 is from 'A' to themselves" in text
    assert "Payment p2 has non-positive amount" in text
    assert "Payment p2 references non-member 'ghost'" in text


def test_expenses_without_members():
    issues = validate_snapshot([], [ExpenseRecord("A", 10)], [])

    assert issues == ["1 expense(s) recorded for a group with no members."]
