"""
Тести для командного рядка

Запуск: pytest tests/test_cli.py -v
"""

import json
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Прибрати handler, прив'язаний до перехопленого stderr"""
    yield
    logging.getLogger("dr_gaze").handlers.clear()


def test_text_output(capsys):
    """Тест текстового виводу"""
    from dr_gaze.cli import EXIT_OK, main

    code = main(["--zones", "ino", "--symptoms", "right_impaired_adduction"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert out.startswith("Localization:")
    assert "R INO:" in out
    assert "No additional differentials" in out


def test_nothing_checked(capsys):
    """Тест: без аргументів"""
    from dr_gaze.cli import EXIT_OK, main

    assert main([]) == EXIT_OK
    out = capsys.readouterr().out

    assert "Nothing checked!" in out
    assert "No localizations found!" in out


def test_json_output(capsys):
    """Тест JSON звіту"""
    from dr_gaze.cli import main

    code = main(["--zones", "horizontal", "--symptoms", "nystagmus", "--json"])
    report = json.loads(capsys.readouterr().out)

    assert code == 0
    assert report["status"] == "ranked"
    assert report["top"]["names"] == ["Midbrain at the Level of the Superior Cerebellar Peduncle"]
    assert report["second"]["names"] == ["Tegmentum of the Midbrain"]
    assert len(report["localization"]) == 6


def test_list(capsys):
    """Тест каталогу"""
    from dr_gaze.cli import main

    assert main(["--list"]) == 0
    out = capsys.readouterr().out

    assert "Zones:" in out
    assert "  ino: L MLF, R MLF" in out
    assert "  nystagmus" in out
    assert "  Horner" in out


def test_unknown_zone(capsys):
    """Тест: невідома зона → код 2"""
    from dr_gaze.cli import EXIT_UNKNOWN_KEY, main

    code = main(["--zones", "sideways"])
    captured = capsys.readouterr()

    assert code == EXIT_UNKNOWN_KEY
    assert "sideways" in captured.err
    assert captured.out == ""


def test_config_errors(tmp_path, capsys):
    """Тест: некоректна або відсутня конфігурація → код 1"""
    from dr_gaze.cli import EXIT_CONFIG_ERROR, main

    bad = tmp_path / "bad.yaml"
    bad.write_text("rankng: {}\n", encoding="utf-8")

    assert main(["--config", str(bad), "--zones", "dark"]) == EXIT_CONFIG_ERROR
    assert "rankng" in capsys.readouterr().err

    missing = tmp_path / "missing.yaml"
    assert main(["--config", str(missing)]) == EXIT_CONFIG_ERROR


def test_config_wrong_value_type(tmp_path, capsys):
    """Тест: повідомлення не рядком → код 1, а не збій при виводі"""
    from dr_gaze.cli import EXIT_CONFIG_ERROR, main

    path = tmp_path / "config.yaml"
    path.write_text("messages:\n  no_localization: 404\n", encoding="utf-8")

    code = main(["--config", str(path), "--zones", "lefttilt", "righttilt"])
    captured = capsys.readouterr()

    assert code == EXIT_CONFIG_ERROR
    assert "messages.no_localization" in captured.err
    assert captured.out == ""


def test_custom_messages(tmp_path, capsys):
    """Тест повідомлень з YAML конфігурації"""
    from dr_gaze.cli import main

    path = tmp_path / "config.yaml"
    path.write_text("messages:\n  no_localization: Nothing here\n", encoding="utf-8")

    assert main(["--config", str(path), "--zones", "lefttilt", "righttilt"]) == 0
    assert capsys.readouterr().out.strip() == "Nothing here"


def test_verbose_logs_to_stderr(capsys):
    """Тест: --verbose пише логи у stderr, stdout лишається чистим"""
    from dr_gaze.cli import main

    assert main(["--zones", "dark", "--symptoms", "ptosis", "--json", "--verbose"]) == 0
    captured = capsys.readouterr()

    report = json.loads(captured.out)
    assert report["top"]["names"] == ["Cavernous Sinus", "Horner"]
    assert "DEBUG" in captured.err
