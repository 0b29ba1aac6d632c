import gzip
import threading

from fastchess.logger import Level, Logger


def _read(path):
    return path.read_text(encoding="utf-8")


def test_info_is_written_with_label_and_origin(tmp_path):
    path = tmp_path / "log.txt"
    log = Logger()
    log.open_file(str(path))
    log.info("hello {}", 5)
    log.close()
    content = _read(path)
    assert "[INFO  ]" in content
    assert "fastchess --- hello 5\n" in content


def test_trace_filtered_at_default_level(tmp_path):
    path = tmp_path / "log.txt"
    log = Logger()
    log.open_file(str(path))
    log.trace("hidden")
    log.warn("shown")
    log.close()
    content = _read(path)
    assert "hidden" not in content
    assert "shown" in content


def test_set_level_filters_lower_levels(tmp_path):
    path = tmp_path / "log.txt"
    log = Logger()
    log.set_level(Level.ERR)
    log.open_file(str(path))
    log.info("low")
    log.fatal("high")
    log.close()
    content = _read(path)
    assert "low" not in content
    assert "[FATAL ]" in content


def test_nothing_written_without_file(capsys):
    log = Logger()
    log.warn("ignored")
    assert log.should_log is False


def test_empty_filename_keeps_logging_off():
    log = Logger()
    log.open_file("")
    assert log.should_log is False


def test_open_failure_reports_and_disables(tmp_path, capsys):
    log = Logger()
    log.open_file(str(tmp_path / "missing" / "log.txt"))
    assert log.should_log is False
    assert "Failed to open log file." in capsys.readouterr().err


def test_print_goes_to_stdout_and_file(tmp_path, capsys):
    path = tmp_path / "log.txt"
    log = Logger()
    log.open_file(str(path))
    log.print("value {}", 7)
    log.close()
    assert capsys.readouterr().out == "value 7\n"
    assert "fastchess --- value 7\n" in _read(path)


def test_thread_flag_includes_thread_id(tmp_path):
    path = tmp_path / "log.txt"
    log = Logger()
    log.open_file(str(path))
    log.warn("with thread", thread=True)
    log.close()
    assert str(threading.get_ident()) in _read(path)


def test_engine_coms_disabled_by_default(tmp_path):
    path = tmp_path / "log.txt"
    log = Logger()
    log.open_file(str(path))
    log.write_to_engine("uci", "", "engine1")
    log.close()
    assert "uci" not in _read(path)


def test_engine_traffic_lines(tmp_path):
    path = tmp_path / "log.txt"
    log = Logger()
    log.set_engine_coms(True)
    log.open_file(str(path))
    log.write_to_engine("isready", "", "engine1")
    log.read_from_engine("readyok", "12:00:00.000000", "engine1", err=True, thread_id=99)
    log.close()
    content = _read(path)
    assert "engine1 <--- isready\n" in content
    assert "<stderr> engine1 ---> readyok\n" in content
    assert "12:00:00.000000" in content
    assert "99>" in content


def test_compressed_log(tmp_path):
    base = tmp_path / "log"
    log = Logger()
    log.set_compress(True)
    log.open_file(str(base))
    assert log.should_log is True
    log.warn("zipped")
    log.close()
    files = sorted(tmp_path.glob("log*.gz"))
    assert len(files) == 1
    assert files[0].name.startswith("log")
    assert files[0].name.endswith(".gz")
    assert not base.exists()
    with gzip.open(files[0], "rt", encoding="utf-8") as handle:
        content = handle.read()
    assert "[WARN  ]" in content
    assert "fastchess --- zipped\n" in content


def test_level_ordering_controls_filtering(tmp_path):
    path = tmp_path / "log.txt"
    log = Logger()
    log.set_level(Level.INFO)
    log.open_file(str(path))
    log.trace("trace-line")
    log.warn("warn-line")
    log.info("info-line")
    log.err("err-line")
    log.close()
    content = _read(path)
    assert "trace-line" not in content
    assert "warn-line" not in content
    assert "info-line" in content
    assert "err-line" in content