import io
import logging

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers

from conf_papers.config import Config
from conf_papers.core import ConferenceCrawler, SessionManager


def make_response(url, content=b'', status_code=200, content_type='text/html'):
    """Build a requests Response the way the HTTP adapter does"""
    if isinstance(content, str):
        content = content.encode('utf-8')
    response = requests.models.Response()
    response.url = url
    response.status_code = status_code
    response.headers = CaseInsensitiveDict({'Content-Type': content_type})
    response.encoding = get_encoding_from_headers(response.headers)
    response.raw = io.BytesIO(content)
    return response


class FakeSession:
    """Serves canned responses by URL and records every GET"""

    def __init__(self, pages=None):
        self.pages = {}
        self.requests = []
        self.closed = False
        for url, page in (pages or {}).items():
            self.add(url, page)

    def add(self, url, content, status_code=200, content_type='text/html'):
        self.pages[url] = (content, status_code, content_type)

    def get(self, url, **kwargs):
        self.requests.append(url)
        if url not in self.pages:
            raise requests.ConnectionError(f"no route to {url}")
        content, status_code, content_type = self.pages[url]
        return make_response(url, content, status_code, content_type)

    def close(self):
        self.closed = True


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def make_crawler(tmp_path, session):
    """Build a crawler that writes under tmp_path and talks to the fake session"""
    def factory(conferences=(), **kwargs):
        config = Config(
            delay=0,
            output_dir=tmp_path / 'papers',
            conferences=tuple(conferences),
        )
        manager = SessionManager()
        manager._session = session
        return ConferenceCrawler(config, session_manager=manager, **kwargs)
    return factory


@pytest.fixture(autouse=True)
def info_logging(caplog):
    caplog.set_level(logging.INFO)
    return caplog
