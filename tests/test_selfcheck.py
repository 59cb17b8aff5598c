import pytest

from velha.board import Outcome, check_game
from velha.selfcheck import Check, main, run_checks


def test_every_builtin_check_passes():
    checks = run_checks()
    assert len(checks) == 13
    assert all(check.passed() for check in checks)


def test_checks_agree_with_classifier():
    for check in run_checks():
        assert check_game(check.board) == check.expected


def test_out_of_order_o_win_is_reported_as_o_win():
    labels = {check.label: check for check in run_checks()}
    check = labels["Impossível (O venceu fora de ordem)"]
    assert check.expected == Outcome.O_WINS


def test_sections_are_contiguous_and_ordered():
    sections = [check.section for check in run_checks()]
    seen = []
    for section in sections:
        if not seen or seen[-1] != section:
            assert section not in seen
            seen.append(section)
    assert len(seen) == 5
    assert seen[-1] == "Testando jogo impossível"


def test_wrong_expectation_fails():
    check = Check(
        "section",
        "label",
        ((1, 1, 1), (2, 2, 0), (0, 0, 0)),
        Outcome.O_WINS,
    )
    assert check.passed() is False


def test_right_expectation_passes():
    check = Check(
        "section",
        "label",
        ((0, 0, 0), (0, 1, 0), (0, 0, 0)),
        Outcome.OPEN,
    )
    assert check.passed() is True


def test_main_reports_all_passed(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Falhou" not in out
    assert out.count("Passou") == len(run_checks())
    assert "Vitória X (diagonal): Passou" in out
    assert out.rstrip().endswith("======= Todos os testes concluídos =======")


def test_main_prints_section_headers_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    first = out.index("======= Testando casos válidos: vitória de X =======")
    last = out.index("======= Testando jogo impossível =======")
    assert first == 0
    assert first < last


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])