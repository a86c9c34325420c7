"""
Shared fakes for the Playwright and requests collaborators.
"""

from typing import Dict, List, Optional

import pytest
from playwright.async_api import Error as PlaywrightError

from form_field_extractor.config.settings import Settings
from form_field_extractor.utils.dom_utils import DOMUtils


class FakeElement:
    """Element handle answering attribute reads from a dict."""
    
    def __init__(self, attrs: Dict[str, str], tag: str = 'input', failing: tuple = ()):
        self.attrs = attrs
        self.tag = tag
        self.failing = failing
    
    async def get_attribute(self, name: str) -> Optional[str]:
        if name in self.failing:
            raise PlaywrightError(f"cannot read {name}")
        return self.attrs.get(name)
    
    async def evaluate(self, expression: str):
        return self.tag


class FakeLabel:
    def __init__(self, text: str):
        self.text = text
    
    async def inner_text(self) -> str:
        return self.text


class FakePage:
    """Page with a fixed element list and label[for] lookups."""
    
    def __init__(self, elements: Optional[List[FakeElement]] = None,
                 labels: Optional[Dict[str, str]] = None,
                 query_error: Optional[Exception] = None,
                 goto_error: Optional[Exception] = None,
                 load_error: Optional[Exception] = None):
        self.elements = elements or []
        self.labels = labels or {}
        self.query_error = query_error
        self.goto_error = goto_error
        self.load_error = load_error
        self.selectors: List[str] = []
        self.visited: List[str] = []
    
    async def query_selector_all(self, selector: str):
        self.selectors.append(selector)
        if self.query_error:
            raise self.query_error
        return list(self.elements)
    
    async def query_selector(self, selector: str):
        for element_id, text in self.labels.items():
            if selector == DOMUtils.label_selector(element_id):
                return FakeLabel(text)
        return None
    
    async def goto(self, url: str, wait_until: str = 'load', timeout: int = 0):
        self.visited.append(url)
        if self.goto_error:
            raise self.goto_error
    
    async def wait_for_load_state(self, state: str = 'load', timeout: int = 0):
        if self.load_error:
            raise self.load_error
    
    async def close(self):
        pass


class FakeBrowserManager:
    """Stands in for BrowserManager and counts releases."""
    
    def __init__(self, page: FakePage, launch_error: Optional[Exception] = None, **kwargs):
        self.page = page
        self.launch_error = launch_error
        self.kwargs = kwargs
        self.launched = False
        self.close_calls = 0
    
    async def launch(self):
        if self.launch_error:
            raise self.launch_error
        self.launched = True
    
    async def new_page(self):
        return self.page
    
    async def close(self):
        self.close_calls += 1


class FakeResponse:
    """Streaming requests response."""
    
    def __init__(self, chunks: List[bytes], status_code: int = 200, reason: str = 'OK',
                 on_chunk=None):
        self.chunks = chunks
        self.status_code = status_code
        self.reason = reason
        self.on_chunk = on_chunk
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        return False
    
    def iter_content(self, chunk_size: int = 1):
        for chunk in self.chunks:
            if self.on_chunk:
                self.on_chunk()
            yield chunk


class FakeSession:
    """requests.Session double returning a canned response or raising."""
    
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.requests: List[dict] = []
        self.closed = False
    
    def get(self, url, **kwargs):
        self.requests.append({'url': url, **kwargs})
        if self.error:
            raise self.error
        return self.response
    
    def close(self):
        self.closed = True


@pytest.fixture
def browser_factory():
    """Returns (factory, created) where created collects built managers."""
    
    def make(page: FakePage, launch_error: Optional[Exception] = None):
        created: List[FakeBrowserManager] = []
        
        def factory(**kwargs):
            manager = FakeBrowserManager(page, launch_error=launch_error, **kwargs)
            created.append(manager)
            return manager
        
        return factory, created
    
    return make


@pytest.fixture(autouse=True)
def fast_retries(monkeypatch):
    """No real sleeping between retry attempts."""
    monkeypatch.setattr(Settings, 'RETRY_DELAY', 0)


@pytest.fixture
def make_element():
    return FakeElement


@pytest.fixture
def make_page():
    return FakePage


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def make_session():
    return FakeSession
