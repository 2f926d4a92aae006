import json

import pytest

from conf_papers import main
from conf_papers.config import Conference
from conf_papers.core import SessionManager


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda *args, **kwargs: None)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "conferences.json"
    path.write_text(json.dumps([
        {"name": "CCS", "url": "http://example/listing", "year": 2017},
        {"name": "NDSS", "url": "http://example/ndss", "year": 2016},
    ]))
    return path


@pytest.fixture
def fake_sessions(monkeypatch, session):
    monkeypatch.setattr(SessionManager, "create_session", lambda self: session)
    return session


def test_download_command(tmp_path, config_file, fake_sessions):
    fake_sessions.add("http://example/listing", """
        <a href="/papers/a.pdf">[PDF]</a>
        <a href="/papers/b.pdf">[PDF]</a>
    """)
    fake_sessions.add("http://example/papers/a.pdf", b"a")
    fake_sessions.add("http://example/papers/b.pdf", b"b")
    out = tmp_path / "out"

    code = main.cli([
        "download", "-f", str(config_file), "-o", str(out), "--delay", "0", "-c", "CCS",
    ])

    assert code == 0
    assert (out / "CCS" / "2017" / "a.pdf").read_bytes() == b"a"
    assert (out / "CCS" / "2017" / "b.pdf").read_bytes() == b"b"
    assert "http://example/ndss" not in fake_sessions.requests
    assert fake_sessions.closed


def test_timeout_is_an_alias_for_delay(tmp_path, config_file, fake_sessions, monkeypatch):
    seen = {}

    def crawl(self, keep_going=False):
        seen['delay'] = self.config.delay
        seen['keep_going'] = keep_going

    monkeypatch.setattr(main.ConferenceCrawler, "crawl", crawl)
    code = main.cli([
        "download", "-f", str(config_file), "-o", str(tmp_path / "out"),
        "--timeout", "0.5", "--keep-going",
    ])

    assert code == 0
    assert seen == {'delay': 0.5, 'keep_going': True}
    assert (tmp_path / "out").is_dir()


def test_fatal_error_exit_code(tmp_path, config_file, fake_sessions):
    # Listing page unreachable
    code = main.cli(["download", "-f", str(config_file), "-o", str(tmp_path / "out"), "--delay", "0"])
    assert code == 1


def test_bad_config_exit_code(tmp_path):
    path = tmp_path / "conferences.json"
    path.write_text("{not json")
    assert main.cli(["download", "-f", str(path), "-o", str(tmp_path / "out")]) == 1


def test_no_command_prints_help(capsys):
    assert main.cli([]) == 1
    assert "usage" in capsys.readouterr().out


def test_status_command(tmp_path, config_file, capsys):
    out = tmp_path / "out"
    (out / "CCS" / "2017").mkdir(parents=True)
    (out / "CCS" / "2017" / "a.pdf").write_bytes(b"a")
    (out / "CCS" / "2017" / "b.pdf").write_bytes(b"b")

    assert main.cli(["status", "-f", str(config_file), "-o", str(out)]) == 0

    printed = capsys.readouterr().out
    assert "CCS 2017: 2 papers" in printed
    assert "NDSS 2016: (not downloaded)" in printed


def test_list_command(capsys):
    assert main.cli(["list"]) == 0
    printed = capsys.readouterr().out
    assert "NDSS:" in printed
    assert "2014, 2015, 2017: paper_pages" in printed
    assert "<= 2014: scholar_search" in printed


def test_filter_conferences():
    confs = [
        Conference("CCS", "u", 2017),
        Conference("NDSS", "u", 2017),
        Conference("NDSS", "u", 2018),
    ]
    assert main.filter_conferences(confs) == confs
    assert main.filter_conferences(confs, names=["NDSS"]) == confs[1:]
    assert main.filter_conferences(confs, years=[2017]) == confs[:2]
    assert main.filter_conferences(confs, ["NDSS"], [2018]) == confs[2:]
