from datetime import datetime, timedelta

import pytest

from raytracer import logger
from raytracer.logger import (
    Level,
    Logger,
    LoggerFileError,
    QUOTES,
    colored_level,
    formatted_location,
    formatted_timestamp,
    generate_log_file,
    level_to_string,
    random_quote,
)


@pytest.fixture
def shared(tmp_path):
    logger.shutdown()
    yield tmp_path / "logs"
    logger.shutdown()


@pytest.fixture
def local_logger(tmp_path):
    log_dir = tmp_path / "logs"
    instance = Logger(str(log_dir / "run.log"), Level.INFO, str(log_dir))
    yield instance, log_dir
    instance.close()


def test_level_names():
    assert [level_to_string(level) for level in Level] == [
        "DEBUG", "INFO", "ERROR", "WARNING", "CRITICAL", "FATAL"
    ]


def test_error_is_filtered_below_warning_minimum(tmp_path, capsys):
    log_dir = tmp_path / "logs"
    with Logger(str(log_dir / "run.log"), Level.WARNING, str(log_dir)) as instance:
        instance.write(Level.ERROR, "dropped", ("a.py", 1))
        instance.write(Level.CRITICAL, "kept", ("a.py", 2))
    content = (log_dir / "run.log").read_text(encoding="utf-8")
    assert "dropped" not in content
    assert "<CRITICAL> kept (a.py:2)\n" in content


def test_colored_level_uses_terminal_codes():
    assert colored_level(Level.DEBUG) == "\033[34m<DEBUG>\033[0m"
    assert colored_level(Level.INFO) == "<INFO>\033[0m"
    assert colored_level(Level.FATAL) == "\033[41;97m<FATAL>\033[0m"


def test_formatted_location_plain_and_colored():
    assert formatted_location("scene.py", 7, False) == "(scene.py:7)"
    colored = formatted_location("scene.py", 7)
    assert colored.startswith("\033[90m")
    assert colored.endswith("\033[0m")
    assert "(scene.py:7)" in colored


def test_formatted_timestamp_shapes():
    now = datetime.now()
    precise = datetime.strptime(formatted_timestamp(), "%Y-%m-%d %H:%M:%S.%f")
    assert abs(precise - now) < timedelta(seconds=5)
    for_file = datetime.strptime(formatted_timestamp(True), "%Y-%m-%d_%H-%M-%S")
    assert abs(for_file - now) < timedelta(seconds=5)


def test_generate_log_file_path():
    path = generate_log_file("Raytracer", "somewhere")
    prefix = "somewhere/Raytracer-"
    assert path.startswith(prefix)
    assert path.endswith(".log")
    stamp = datetime.strptime(path[len(prefix):-len(".log")], "%Y-%m-%d_%H-%M-%S")
    assert abs(stamp - datetime.now()) < timedelta(seconds=5)


def test_random_quote_comes_from_list():
    picks = {random_quote() for _ in range(50)}
    assert picks <= set(QUOTES)
    assert len(picks) >= 1


def test_write_goes_to_both_files(local_logger, capsys):
    instance, log_dir = local_logger
    instance.write(Level.INFO, "rendering", ("scene.py", 12))
    for name in ("run.log", "latest.log"):
        content = (log_dir / name).read_text(encoding="utf-8")
        assert "<INFO> rendering (scene.py:12)\n" in content
    assert "rendering" in capsys.readouterr().out


def test_write_below_minimum_is_dropped(local_logger, capsys):
    instance, log_dir = local_logger
    instance.write(Level.DEBUG, "hidden", ("scene.py", 1))
    assert (log_dir / "run.log").read_text(encoding="utf-8") == ""
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_error_and_above_go_to_stderr(local_logger, capsys):
    instance, _ = local_logger
    instance.write(Level.WARNING, "careful", ("a.py", 2))
    instance.write(Level.INFO, "fine", ("a.py", 3))
    captured = capsys.readouterr()
    assert "careful" in captured.err
    assert "careful" not in captured.out
    assert "fine" in captured.out


def test_write_header(local_logger):
    instance, log_dir = local_logger
    instance.write_header("Raytracer", ["raytracer", "scene.yml"])
    content = (log_dir / "run.log").read_text(encoding="utf-8")
    assert "║ LOG FILE - Raytracer\n" in content
    assert "║ Command: raytracer scene.yml\n" in content
    assert "║ Minimum log level: INFO\n" in content
    assert content.endswith("╍\n\n")


def test_unopenable_file_raises(tmp_path):
    log_dir = tmp_path / "logs"
    target = str(log_dir / "missing" / "run.log")
    with pytest.raises(LoggerFileError) as info:
        Logger(target, Level.INFO, str(log_dir))
    assert str(info.value) == f'Could not open file: "{target}"'


def test_get_instance_before_init_raises(shared):
    assert logger.is_init() is False
    with pytest.raises(RuntimeError) as info:
        logger.get_instance()
    assert "not initialized" in str(info.value)
    with pytest.raises(RuntimeError) as info:
        logger.info("nothing")
    assert "not initialized" in str(info.value)


def test_init_and_shared_logging(shared, capsys):
    logger.init("Raytracer", ["raytracer"], Level.DEBUG, str(shared))
    assert logger.is_init() is True
    first = logger.get_instance()
    logger.init("Other", ["other"], Level.FATAL, str(shared))
    assert logger.get_instance() is first
    logger.debug("camera loaded")
    latest = (shared / "latest.log").read_text(encoding="utf-8")
    assert "║ LOG FILE - Raytracer" in latest
    assert "<DEBUG> camera loaded (" in latest
    assert "test_logger.py:" in latest
    assert "camera loaded" in capsys.readouterr().out


def test_shutdown_forgets_instance(shared):
    logger.init("Raytracer", [], Level.INFO, str(shared))
    logger.shutdown()
    assert logger.is_init() is False
    with pytest.raises(RuntimeError) as info:
        logger.get_instance()
    assert "not initialized" in str(info.value)


def test_each_level_helper(shared, capsys):
    logger.init("Raytracer", [], Level.DEBUG, str(shared))
    logger.error("e1")
    logger.critical("c1")
    logger.fatal("f1")
    logger.warn("w1")
    content = (shared / "latest.log").read_text(encoding="utf-8")
    for tag, text in (("ERROR", "e1"), ("CRITICAL", "c1"), ("FATAL", "f1"), ("WARNING", "w1")):
        assert f"<{tag}> {text} " in content
    assert "f1" in capsys.readouterr().err