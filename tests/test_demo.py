import io

import pytest

from compactstore.demo import main, run_case


def test_run_case_signed_value():
    out = io.StringIO()
    run_case("Test 1", [(-16777216,)], "i", out)
    text = out.getvalue()
    assert text.startswith("\n=== Test 1 ===\n")
    assert "(int) -16777216 (ff000000)" in text


def test_run_case_mixed_record():
    out = io.StringIO()
    run_case("Test 4", [(-1, 258)], "iu", out)
    assert out.getvalue().endswith(
        "Estruturas: 1\n\n(int) -1 (ffffffff)\n(uns) 258 (00000102)\n"
    )


def test_run_case_three_records():
    out = io.StringIO()
    run_case("Test 5", [(1, "a"), (2, "b"), (3, "c")], "is02", out)
    text = out.getvalue()
    assert "Estruturas: 3" in text
    assert text.index("(str) a") < text.index("(str) b") < text.index("(str) c")


def test_main_runs_all_cases(capsys):
    assert main([]) == 0
    output = capsys.readouterr().out
    for number in range(1, 6):
        assert f"=== Test {number} ===" in output
    assert "(str) " + "X" * 63 + "\n" in output
    assert "(uns) 0 (00000000)" in output
    assert "(int) 3" in output


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2