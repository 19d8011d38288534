import io
import unittest

from ops_checks.checks.results import CheckOutcome, Status
from ops_checks.formatting import format_outcome
from ops_checks.runner import NO_OUTCOME, evaluate, run_check


class FormattingTests(unittest.TestCase):
    def test_status_line(self) -> None:
        self.assertEqual(
            format_outcome("CheckJenkins", CheckOutcome.ok("Jenkins Service is up")),
            "CheckJenkins OK: Jenkins Service is up",
        )

    def test_empty_message(self) -> None:
        self.assertEqual(
            format_outcome("CheckEventstore", CheckOutcome(Status.WARNING)),
            "CheckEventstore WARNING",
        )

    def test_multiline_message_is_flattened(self) -> None:
        line = format_outcome("CheckEventstore", CheckOutcome.critical("a\nb"))
        self.assertEqual(line, "CheckEventstore CRITICAL: a b")


class RunnerTests(unittest.TestCase):
    def test_exit_codes(self) -> None:
        cases = [
            (Status.OK, 0),
            (Status.WARNING, 1),
            (Status.CRITICAL, 2),
            (Status.UNKNOWN, 3),
        ]
        for status, expected in cases:
            with self.subTest(status=status.name):
                out = io.StringIO()
                code = run_check("CheckX", lambda _: CheckOutcome(status, "msg"), None, out=out)
                self.assertEqual(code, expected)
                self.assertEqual(out.getvalue(), f"CheckX {status.name}: msg\n")

    def test_exception_becomes_unknown(self) -> None:
        def boom(_):
            raise KeyError("members")

        outcome = evaluate(boom, None)
        self.assertEqual(outcome, CheckOutcome.unknown("Check failed to run: 'members'"))

    def test_missing_outcome_becomes_unknown(self) -> None:
        out = io.StringIO()
        code = run_check("CheckX", lambda _: None, None, out=out)

        self.assertEqual(code, 3)
        self.assertEqual(out.getvalue(), f"CheckX UNKNOWN: {NO_OUTCOME}\n")

    def test_config_is_passed_through(self) -> None:
        seen = []
        evaluate(lambda cfg: seen.append(cfg) or CheckOutcome.ok(""), {"k": 1})
        self.assertEqual(seen, [{"k": 1}])


if __name__ == "__main__":
    unittest.main()
