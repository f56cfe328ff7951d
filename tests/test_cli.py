import pytest

from randpass.cli import main


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.setenv("RANDPASS_CONFIG", str(tmp_path / "config.json"))


def _passwords(out):
    return [line.split(":", 1)[1].strip() for line in out.splitlines() if line.startswith("Password #")]


def test_generate_copies(capsys):
    assert main(["generate", "--length", "10", "--no-symbols", "--copies", "3"]) == 0
    pws = _passwords(capsys.readouterr().out)
    assert len(pws) == 3
    assert all(len(pw) == 10 and pw.isalnum() for pw in pws)


def test_generate_seed_is_reproducible(capsys):
    main(["generate", "--seed", "5", "--no-symbols"])
    first = _passwords(capsys.readouterr().out)
    main(["generate", "--seed", "5", "--no-symbols"])
    second = _passwords(capsys.readouterr().out)
    assert first == second
    assert len(first[0]) == 12


def test_generate_exclude(capsys):
    main(["generate", "--no-lower", "--no-upper", "--no-symbols", "--exclude", "13579", "--length", "30"])
    pw = _passwords(capsys.readouterr().out)[0]
    assert set(pw) <= set("02468")


def test_generate_failure_exit_status(capsys):
    assert main(["generate", "--no-upper", "--no-lower", "--no-digits", "--no-symbols"]) == 1
    assert "No characters available" in capsys.readouterr().out
    assert main(["generate", "--length", "0"]) == 1
    assert "Password length must be a number greater than 0." in capsys.readouterr().out


def test_bad_config_value_uses_default_length(tmp_path, monkeypatch, capsys):
    p = tmp_path / "bad.json"
    p.write_text('{"default_length": null}', encoding="utf-8")
    monkeypatch.setenv("RANDPASS_CONFIG", str(p))
    assert main(["generate", "--no-symbols"]) == 0
    assert len(_passwords(capsys.readouterr().out)[0]) == 12
