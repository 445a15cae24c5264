import pytest

from tflap import main as tflap_main


@pytest.fixture(autouse=True)
def quiet_setup(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(tflap_main, "setup_logging", lambda debug, log_file: None)
    tflap_main.get_settings.cache_clear()
    yield
    tflap_main.get_settings.cache_clear()


def test_normal_exit(monkeypatch):
    calls = []
    monkeypatch.setattr(tflap_main, "run_terminal", calls.append)

    tflap_main.main()

    assert len(calls) == 1


def test_interrupt_exits_cleanly(monkeypatch):
    def interrupted(settings):
        raise KeyboardInterrupt

    monkeypatch.setattr(tflap_main, "run_terminal", interrupted)

    tflap_main.main()


def test_terminal_error_exits_non_zero(monkeypatch, caplog):
    def broken(settings):
        raise OSError("not a tty")

    monkeypatch.setattr(tflap_main, "run_terminal", broken)

    with pytest.raises(SystemExit) as excinfo:
        tflap_main.main()

    assert excinfo.value.code == 1
    assert "Fatal error: not a tty" in caplog.text
